"""Central API router composition.

This module is responsible for mounting individual route modules on the main
API router and providing a single import point for `FastAPI.include_router(...)`.
The URL prefix (`/api` by default) is applied by the application factory from
settings.
"""

from fastapi import APIRouter

from .conferences import router as conferences_router
from .players import router as players_router
from .position_types import router as position_types_router
from .schedule import router as schedule_router
from .teams import router as teams_router

router = APIRouter()

router.include_router(teams_router)
router.include_router(players_router)
router.include_router(conferences_router)
router.include_router(position_types_router)
router.include_router(schedule_router)
