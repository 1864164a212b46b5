"""Team API routes.

Responsibilities:
- team directory (`/teams`)
- single team lookup (`/teams/{id}`)
- teams of a division (`/teams/division/{divisionId}`)

Data source: the `teams` collection of the document store.
"""

from fastapi import APIRouter, Depends

from ..db import get_store
from ..queries import CollectionScan, FilteredScan, PointLookup
from ..resources import TEAMS
from ..responses import compose
from ..schemas import ErrorResponse, Team
from ..store import DocumentStore

router = APIRouter(tags=["Teams"])


@router.get(
    "/teams",
    response_model=list[Team],
    response_model_exclude_none=True,
    summary="Retrieves all NFL teams",
    responses={500: {"model": ErrorResponse}},
)
def list_teams(store: DocumentStore = Depends(get_store)):
    """Returns a list of all NFL teams with their complete information."""
    return compose(TEAMS, CollectionScan(TEAMS.collection), store)


@router.get(
    "/teams/division/{divisionId}",
    response_model=list[Team],
    response_model_exclude_none=True,
    summary="Retrieves the NFL teams of a division",
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def list_division_teams(divisionId: str, store: DocumentStore = Depends(get_store)):
    """Returns every team whose `division` equals `divisionId`.

    Raises:
        HTTPException: 404 if no team belongs to the division.
    """
    return compose(TEAMS, FilteredScan(TEAMS.collection, "division", divisionId, "division"), store)


@router.get(
    "/teams/{id}",
    response_model=Team,
    response_model_exclude_none=True,
    summary="Retrieves a specific NFL team by ID",
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_team(id: str, store: DocumentStore = Depends(get_store)):
    """Returns detailed information about a specific NFL team.

    Raises:
        HTTPException: 404 if the team does not exist.
    """
    return compose(TEAMS, PointLookup(TEAMS.collection, id), store)
