"""API response schemas.

Pydantic models describing every response body the API returns. They are the
output of the normalizers in `normalize.py` and the `response_model` of each
route, which also makes them the component schemas of the generated OpenAPI
document.

Attributes are snake_case in Python and camelCase on the wire (`firstName`,
`logoUrl`, ...). Optional fields that are absent in the stored document are
left as `None` and omitted from JSON responses.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class ErrorResponse(ApiModel):
    error: str = Field(description="Error message")


# Teams


class Team(ApiModel):
    id: str = Field(description="Team identifier")
    abbreviation: str | None = Field(default=None, description="Team abbreviation")
    color: str | None = Field(default=None, description="Primary team color")
    division: str | None = Field(default=None, description="Team division")
    conference: str | None = Field(default=None, description="Conference the team belongs to")
    established: int | None = Field(default=None, description="Year the team was established")
    head_coach: str | None = Field(default=None, description="Current head coach")
    location: str | None = Field(default=None, description="Team location/city")
    logo_url: str | None = Field(default=None, description="URL to team logo")
    name: str | None = Field(default=None, description="Team name")
    owners: list[str] = Field(default_factory=list, description="Team owners")
    website_url: str | None = Field(default=None, description="Team official website")
    season_summary: str | None = Field(default=None, description="Summary of the team's current season")
    standing_summary: str | None = Field(
        default=None, description="Summary of the team's current division standing"
    )


# Players


class Headshot(ApiModel):
    alt: str | None = Field(default=None, description="Alternative text for the headshot image")
    href: str | None = Field(default=None, description="URL to player's headshot image")


class BirthPlace(ApiModel):
    city: str | None = None
    state: str | None = None
    country: str | None = None


class Experience(ApiModel):
    years: int | None = Field(default=None, description="Number of years of experience in the league")


class Position(ApiModel):
    name: str | None = Field(default=None, description="Specific position name (e.g., 'Quarterback')")
    type: str | None = Field(default=None, description="Position type (e.g., 'Offense', 'Defense')")


class Player(ApiModel):
    id: str = Field(description="Player identifier")
    first_name: str | None = None
    last_name: str | None = None
    full_name: str | None = None
    age: int | float | None = None
    height: int | float | None = Field(default=None, description="Height in inches")
    weight: int | float | None = Field(default=None, description="Weight in lbs")
    display_height: str | None = Field(default=None, description="Formatted height (e.g., 6' 2\")")
    display_weight: str | None = Field(default=None, description="Formatted weight (e.g., 215 lbs)")
    slug: str | None = Field(default=None, description="URL-friendly slug for the player")
    jersey: str | None = Field(default=None, description="Jersey number")
    headshot: Headshot | None = None
    date_of_birth: str | None = None
    birth_place: BirthPlace | None = None
    experience: Experience | None = None
    position: Position | None = None
    status: str | None = Field(default=None, description="Current status (e.g., 'active')")
    team: str | None = Field(
        default=None,
        description="Identifier of the team the player belongs to (e.g., 'arizona_cardinals')",
    )


# Conferences / position types


class Division(ApiModel):
    id: str | None = Field(default=None, description="Division identifier")
    name: str | None = Field(default=None, description="Division name (e.g., 'AFC East')")


class Conference(ApiModel):
    id: str = Field(description="Conference identifier")
    name: str | None = Field(default=None, description="Conference name")
    abbreviation: str | None = Field(default=None, description="Conference abbreviation (e.g., 'AFC')")
    divisions: list[Division] = Field(default_factory=list)


class PositionType(ApiModel):
    id: str = Field(description="Position type identifier")
    name: str | None = Field(default=None, description="Position type name (e.g., 'Offense')")
    positions: list[str] = Field(default_factory=list)


# Schedule


class TeamLogo(ApiModel):
    alt: str | None = None
    url: str | None = None


class Competitor(ApiModel):
    score: int | float | None = None
    team_logo: TeamLogo | None = None
    winner: bool | None = None


class Event(ApiModel):
    id: str | None = None
    name: str | None = None
    completed: bool | None = None
    date: datetime | None = Field(default=None, description="Kickoff time (UTC, ISO 8601)")
    competitors: list[Competitor] = Field(default_factory=list)

    @field_serializer("date")
    def serialize_date(self, value: datetime | None) -> str | None:
        # same layout as JavaScript's Date.toISOString()
        if value is None:
            return None
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


class Schedule(ApiModel):
    season: int | None = None
    week: int | None = None
    events: list[Event] = Field(default_factory=list)
