"""Raw document -> response model normalization.

Every function here is pure: it takes a `StoredDocument`, never mutates it,
and returns a new schema instance from `schemas.py`.

Two schema generations of player and conference documents coexist in the
store. Older documents use flat fields, newer ones nested sub-objects:

    field        older shape                      canonical (newer) shape
    position     "Quarterback" + positionType     {"name": ..., "type": ...}
    experience   4                                {"years": 4}
    birthPlace   "Dallas, TX"                     {"city", "state", "country"}
    headshot     headshotUrl: "https://..."       {"alt", "href"}
    divisions    ["AFC East", ...]                [{"id", "name"}, ...]

The shape of each field is detected independently, so partially migrated
documents normalize too. The API always answers in the canonical shape.

Malformed values (e.g. a non-numeric `age`) raise `pydantic.ValidationError`,
unreadable timestamps raise `DocumentFormatError`; errors are not handled here.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping

from .errors import DocumentFormatError
from .schemas import Conference, Event, Player, PositionType, Schedule, Team
from .store import StoredDocument

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _with_id(doc: StoredDocument) -> dict[str, Any]:
    """Copy the document's fields and make sure a canonical `id` is present.

    Some loaders stored the id as a field, others only as the store key. A
    stored `id` field wins; otherwise the store key is used.
    """
    data = dict(doc.data)
    if data.get("id") in (None, ""):
        data["id"] = doc.id
    return data


def normalize_team(doc: StoredDocument) -> Team:
    data = _with_id(doc)
    data["owners"] = list(data.get("owners") or [])
    return Team.model_validate(data)


# Players


def _position(value, position_type) -> dict[str, Any] | None:
    if isinstance(value, Mapping):
        return dict(value)
    if value is None and position_type is None:
        return None
    return {"name": value, "type": position_type}


def _experience(value) -> dict[str, Any] | None:
    if isinstance(value, Mapping):
        return dict(value)
    if value is None:
        return None
    return {"years": value}


def _birth_place(value) -> dict[str, Any] | None:
    """Split a flat "City, State[, Country]" string into its parts."""
    if isinstance(value, Mapping):
        return dict(value)
    if not value:
        return None
    parts = [part.strip() for part in str(value).split(",")]
    keys = ("city", "state", "country")
    place = dict(zip(keys, parts))
    if len(parts) > len(keys):
        # "City, Region, Country, ..." keeps the last part as the country
        place["country"] = parts[-1]
    return place


def _headshot(value, flat_url) -> dict[str, Any] | None:
    if isinstance(value, Mapping):
        headshot = dict(value)
        if "href" not in headshot and "url" in headshot:
            headshot["href"] = headshot.pop("url")
        return headshot
    if isinstance(value, str) and value:
        return {"href": value}
    if flat_url:
        return {"href": flat_url}
    return None


def normalize_player(doc: StoredDocument) -> Player:
    data = _with_id(doc)

    data["position"] = _position(data.get("position"), data.pop("positionType", None))
    data["experience"] = _experience(data.get("experience"))
    data["birthPlace"] = _birth_place(data.get("birthPlace"))
    data["headshot"] = _headshot(data.get("headshot"), data.pop("headshotUrl", None))

    if not data.get("fullName") and (data.get("firstName") or data.get("lastName")):
        data["fullName"] = " ".join(p for p in (data.get("firstName"), data.get("lastName")) if p)

    return Player.model_validate(data)


# Conferences / position types


def _division_id(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "_", name.lower()).strip("_")


def _division(value) -> dict[str, Any]:
    if isinstance(value, Mapping):
        return dict(value)
    return {"id": _division_id(str(value)), "name": value}


def normalize_conference(doc: StoredDocument) -> Conference:
    data = _with_id(doc)
    data["divisions"] = [_division(d) for d in data.get("divisions") or []]
    return Conference.model_validate(data)


def normalize_position_type(doc: StoredDocument) -> PositionType:
    data = _with_id(doc)
    data["positions"] = list(data.get("positions") or [])
    return PositionType.model_validate(data)


# Schedule


def timestamp_to_datetime(value):
    """Convert a stored timestamp to a UTC `datetime` with whole seconds.

    Timestamps are stored as `{"seconds": int, "nanoseconds": int}` (some
    exports use `_seconds` / `_nanoseconds`). The result is the instant at
    `seconds * 1000` epoch milliseconds; nanoseconds are dropped.

    `datetime` values (as returned by MongoDB) are converted to UTC and
    truncated to the second. Anything else (ISO strings) is returned as-is for
    the schema to parse.

    Examples:
        {"seconds": 1700000000, "nanoseconds": 0} -> 2023-11-14 22:13:20+00:00
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).replace(microsecond=0)
    if isinstance(value, Mapping):
        seconds = value.get("seconds", value.get("_seconds"))
        if seconds is None:
            return None
        try:
            return EPOCH + timedelta(milliseconds=int(seconds) * 1000)
        except (TypeError, ValueError, OverflowError) as exc:
            raise DocumentFormatError(f"Invalid timestamp seconds: {seconds!r}") from exc
    return value


def normalize_event(raw: Mapping[str, Any]) -> Event:
    event = dict(raw)
    event["date"] = timestamp_to_datetime(event.get("date"))
    event["competitors"] = list(event.get("competitors") or [])
    return Event.model_validate(event)


def normalize_schedule(doc: StoredDocument | None) -> Schedule:
    """Normalize the current-week schedule document.

    A missing document yields an empty schedule (no season/week, no events).
    """
    if doc is None:
        return Schedule()
    data = dict(doc.data)
    data["events"] = [normalize_event(event) for event in data.get("events") or []]
    return Schedule.model_validate(data)
