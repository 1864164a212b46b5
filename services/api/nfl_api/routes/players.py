"""Player API routes.

Responsibilities:
- player directory (`/players`)
- single player lookup (`/players/{id}`)
- roster of a team (`/players/team/{teamId}`)

Data source: the `players` collection of the document store. Stored player
documents come in two schema generations; both are answered in the nested
shape documented on the `Player` schema (see `normalize.normalize_player`).
"""

from fastapi import APIRouter, Depends

from ..db import get_store
from ..queries import CollectionScan, FilteredScan, PointLookup
from ..resources import PLAYERS
from ..responses import compose
from ..schemas import ErrorResponse, Player
from ..store import DocumentStore

router = APIRouter(tags=["Players"])


@router.get(
    "/players",
    response_model=list[Player],
    response_model_exclude_none=True,
    summary="Retrieves all NFL players",
    responses={500: {"model": ErrorResponse}},
)
def list_players(store: DocumentStore = Depends(get_store)):
    """Returns a list of all NFL players with their complete information."""
    return compose(PLAYERS, CollectionScan(PLAYERS.collection), store)


@router.get(
    "/players/team/{teamId}",
    response_model=list[Player],
    response_model_exclude_none=True,
    summary="Retrieves the players of an NFL team",
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def list_team_players(teamId: str, store: DocumentStore = Depends(get_store)):
    """Returns every player whose `team` equals `teamId`.

    The team id is not checked against the teams collection: an unknown team
    simply has no players.

    Raises:
        HTTPException: 404 if no player belongs to the team.
    """
    return compose(PLAYERS, FilteredScan(PLAYERS.collection, "team", teamId, "team"), store)


@router.get(
    "/players/{id}",
    response_model=Player,
    response_model_exclude_none=True,
    summary="Retrieves a specific NFL player by ID",
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_player(id: str, store: DocumentStore = Depends(get_store)):
    """Returns detailed information about a specific NFL player.

    Raises:
        HTTPException: 404 if the player does not exist.
    """
    return compose(PLAYERS, PointLookup(PLAYERS.collection, id), store)
