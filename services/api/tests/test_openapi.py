"""Tests for the generated OpenAPI document and its export command."""

import json

from typer.testing import CliRunner

from nfl_api.openapi import app, build_openapi
from nfl_api.settings import Settings


def test_document_lists_every_route() -> None:
    document = build_openapi(Settings(_env_file=None))

    assert set(document["paths"]) == {
        "/api/teams",
        "/api/teams/{id}",
        "/api/teams/division/{divisionId}",
        "/api/players",
        "/api/players/{id}",
        "/api/players/team/{teamId}",
        "/api/conferences",
        "/api/position-types",
        "/api/schedule",
    }


def test_document_schemas_use_wire_names() -> None:
    document = build_openapi(Settings(_env_file=None))
    schemas = document["components"]["schemas"]

    assert "headCoach" in schemas["Team"]["properties"]
    assert "birthPlace" in schemas["Player"]["properties"]
    assert "ErrorResponse" in schemas


def test_lookup_routes_document_not_found() -> None:
    document = build_openapi(Settings(_env_file=None))

    responses = document["paths"]["/api/teams/{id}"]["get"]["responses"]
    assert "404" in responses
    assert responses["404"]["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorResponse")


def test_export_to_file(tmp_path) -> None:
    output = tmp_path / "openapi.json"

    result = CliRunner().invoke(app, ["--output", str(output)])

    assert result.exit_code == 0
    document = json.loads(output.read_text(encoding="utf-8"))
    assert document["info"]["title"] == "NFL Public API"


def test_export_to_stdout() -> None:
    result = CliRunner().invoke(app, ["--indent", "0"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["openapi"].startswith("3.")


def test_export_help() -> None:
    result = CliRunner().invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "--output" in result.stdout
