"""Shared fixtures for the API service tests.

Tests run against a real `SqlDocumentStore` on in-memory SQLite. Documents are
seeded straight into the `documents` table, exactly as the data loaders write
them, so the whole read path (SQL -> JSON decode -> normalize -> HTTP) is
exercised.
"""

import json
import logging

import pytest
import structlog
from common.logging import clear_log_context
from fastapi.testclient import TestClient
from sqlalchemy import text

from nfl_api.db import create_sql_store
from nfl_api.errors import StoreError
from nfl_api.main import create_app
from nfl_api.settings import Settings
from nfl_api.store import DocumentStore

TEAMS = {
    "arizona_cardinals": {
        "id": "arizona_cardinals",
        "abbreviation": "ARI",
        "color": "#97233F",
        "division": "nfc_west",
        "conference": "nfc",
        "established": 1898,
        "headCoach": "Jonathan Gannon",
        "location": "Glendale, Arizona",
        "logoUrl": "https://example.com/ari.png",
        "name": "Arizona Cardinals",
        "owners": ["Michael Bidwill"],
        "websiteUrl": "https://www.azcardinals.com",
    },
    "seattle_seahawks": {
        "id": "seattle_seahawks",
        "abbreviation": "SEA",
        "division": "nfc_west",
        "conference": "nfc",
        "established": 1974,
        "name": "Seattle Seahawks",
        "owners": ["Jody Allen"],
        "seasonSummary": "10-7",
        "standingSummary": "2nd in NFC West",
    },
    # older loader: no id field, no conference
    "buffalo_bills": {
        "abbreviation": "BUF",
        "division": "afc_east",
        "established": 1960,
        "name": "Buffalo Bills",
        "owners": ["Terry Pegula", "Kim Pegula"],
    },
}

PLAYERS = {
    "kyler_murray": {
        "firstName": "Kyler",
        "lastName": "Murray",
        "fullName": "Kyler Murray",
        "age": 27,
        "height": 70,
        "weight": 207,
        "displayHeight": "5' 10\"",
        "displayWeight": "207 lbs",
        "slug": "kyler-murray",
        "jersey": "1",
        "headshot": {"alt": "Kyler Murray", "href": "https://example.com/murray.png"},
        "dateOfBirth": "1997-08-07",
        "birthPlace": {"city": "Bedford", "state": "TX", "country": "USA"},
        "experience": {"years": 6},
        "position": {"name": "Quarterback", "type": "Offense"},
        "status": "active",
        "team": "arizona_cardinals",
    },
    # older flat shape
    "james_conner": {
        "id": "james_conner",
        "firstName": "James",
        "lastName": "Conner",
        "fullName": "James Conner",
        "age": 29,
        "height": 73,
        "weight": 233,
        "slug": "james-conner",
        "jersey": 6,
        "headshotUrl": "https://example.com/conner.png",
        "dateOfBirth": "1995-05-05",
        "birthPlace": "Erie, PA",
        "experience": 8,
        "position": "Running Back",
        "positionType": "Offense",
        "status": "active",
        "team": "arizona_cardinals",
    },
    "josh_allen": {
        "firstName": "Josh",
        "lastName": "Allen",
        "position": {"name": "Quarterback", "type": "Offense"},
        "team": "buffalo_bills",
    },
    "free_agent": {
        "firstName": "Sam",
        "lastName": "Nobody",
        "team": "relocated_team",
    },
}

CONFERENCES = {
    "afc": {
        "name": "American Football Conference",
        "abbreviation": "AFC",
        "divisions": ["AFC East", "AFC North"],
    },
    "nfc": {
        "id": "nfc",
        "name": "National Football Conference",
        "abbreviation": "NFC",
        "divisions": [{"id": "nfc_west", "name": "NFC West"}],
    },
}

POSITION_TYPES = {
    "offense": {"name": "Offense", "positions": ["Quarterback", "Running Back", "Wide Receiver"]},
    "special_teams": {"name": "Special Teams"},
}

SCHEDULE = {
    "week_10": {
        "season": 2023,
        "week": 10,
        "events": [
            {
                "id": "401547475",
                "name": "Carolina Panthers at Chicago Bears",
                "completed": True,
                "date": {"seconds": 1700000000, "nanoseconds": 0},
                "competitors": [
                    {"score": 13, "teamLogo": {"alt": "Panthers", "url": "https://example.com/car.png"}, "winner": False},
                    {"score": 16, "teamLogo": {"alt": "Bears", "url": "https://example.com/chi.png"}, "winner": True},
                ],
            },
        ],
    },
}


class FailingStore(DocumentStore):
    """Store whose every read fails like an unreachable backend."""

    def get_collection(self, collection):
        raise StoreError(f"connection refused while reading {collection}", collection)

    def get_document(self, collection, doc_id):
        raise StoreError(f"connection refused while reading {collection}/{doc_id}", collection)


@pytest.fixture
def store():
    store = create_sql_store("sqlite+pysqlite://")
    store.ensure_schema()
    yield store
    store.close()


@pytest.fixture
def seed(store):
    """Insert documents: `seed("teams", {"doc_id": {...}, ...})`."""

    def _seed(collection, documents):
        with store.engine.begin() as conn:
            for doc_id, data in documents.items():
                conn.execute(
                    text("INSERT INTO documents (collection, doc_id, data) VALUES (:collection, :doc_id, :data)"),
                    {"collection": collection, "doc_id": doc_id, "data": json.dumps(data)},
                )

    return _seed


@pytest.fixture
def league(seed):
    seed("teams", TEAMS)
    seed("players", PLAYERS)
    seed("conferences", CONFERENCES)
    seed("positionTypes", POSITION_TYPES)
    seed("currentWeekSchedule", SCHEDULE)


@pytest.fixture
def settings(tmp_path):
    return Settings(_env_file=None, static_dir=str(tmp_path / "public"), cors_origins=["http://localhost:3000"])


@pytest.fixture
def client(store, settings):
    return TestClient(create_app(settings=settings, store=store))


@pytest.fixture
def failing_client(settings):
    return TestClient(create_app(settings=settings, store=FailingStore()))


@pytest.fixture
def restore_root_logger():
    """Undo `configure_logging()` after the test: root handlers, level and structlog config."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)
    clear_log_context()
    structlog.reset_defaults()
