"""Schedule API route.

The `currentWeekSchedule` collection holds the current week's schedule as a
single document. Event kickoff times are stored as `{seconds, nanoseconds}`
timestamps and returned as ISO 8601 UTC strings.
"""

from fastapi import APIRouter, Depends

from ..db import get_store
from ..queries import CollectionScan
from ..resources import SCHEDULE
from ..responses import compose_current
from ..schemas import ErrorResponse, Schedule
from ..store import DocumentStore

router = APIRouter(tags=["Schedule"])


@router.get(
    "/schedule",
    response_model=Schedule,
    response_model_exclude_none=True,
    summary="Retrieves the current week's schedule",
    responses={500: {"model": ErrorResponse}},
)
def get_schedule(store: DocumentStore = Depends(get_store)):
    """Returns the season, week and events of the current week.

    If no schedule has been loaded yet the response is an empty schedule
    (`{"events": []}`), not an error.
    """
    return compose_current(SCHEDULE, CollectionScan(SCHEDULE.collection), store)
