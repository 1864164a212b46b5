"""Conference API routes."""

from fastapi import APIRouter, Depends

from ..db import get_store
from ..queries import CollectionScan
from ..resources import CONFERENCES
from ..responses import compose
from ..schemas import Conference, ErrorResponse
from ..store import DocumentStore

router = APIRouter(tags=["Conferences"])


@router.get(
    "/conferences",
    response_model=list[Conference],
    response_model_exclude_none=True,
    summary="Retrieves all NFL conferences",
    responses={500: {"model": ErrorResponse}},
)
def list_conferences(store: DocumentStore = Depends(get_store)):
    """Returns a list of all NFL conferences with their divisions."""
    return compose(CONFERENCES, CollectionScan(CONFERENCES.collection), store)
