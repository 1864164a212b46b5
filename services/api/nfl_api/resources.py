"""Declarative table of the API's resources.

One `Resource` row per entity kind: which collection it lives in, how its
documents are normalized, and the wording of its error messages. Route
handlers pick a row and a query; `responses.compose` does the rest.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from pydantic import BaseModel

from . import normalize
from .store import StoredDocument


@dataclass(frozen=True)
class Resource:
    name: str
    plural: str
    collection: str
    normalizer: Callable[[StoredDocument], BaseModel]
    failure_message: str | None = None

    @property
    def not_found_message(self) -> str:
        return f"{self.name.capitalize()} not found."

    @property
    def retrieval_failed_message(self) -> str:
        return self.failure_message or f"Failed to retrieve {self.plural}."

    def no_matches_message(self, label: str) -> str:
        return f"No {self.plural} found for this {label}."


TEAMS = Resource("team", "teams", "teams", normalize.normalize_team)
PLAYERS = Resource("player", "players", "players", normalize.normalize_player)
CONFERENCES = Resource("conference", "conferences", "conferences", normalize.normalize_conference)
POSITION_TYPES = Resource("position type", "position types", "positionTypes", normalize.normalize_position_type)
SCHEDULE = Resource(
    "schedule",
    "schedules",
    "currentWeekSchedule",
    normalize.normalize_schedule,
    failure_message="Failed to retrieve this week's schedule.",
)
