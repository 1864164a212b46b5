"""Position type API routes."""

from fastapi import APIRouter, Depends

from ..db import get_store
from ..queries import CollectionScan
from ..resources import POSITION_TYPES
from ..responses import compose
from ..schemas import ErrorResponse, PositionType
from ..store import DocumentStore

router = APIRouter(tags=["Position Types"])


@router.get(
    "/position-types",
    response_model=list[PositionType],
    response_model_exclude_none=True,
    summary="Retrieves all NFL position types",
    responses={500: {"model": ErrorResponse}},
)
def list_position_types(store: DocumentStore = Depends(get_store)):
    """Returns all NFL position types (offense, defense, special teams) with their specific positions."""
    return compose(POSITION_TYPES, CollectionScan(POSITION_TYPES.collection), store)
