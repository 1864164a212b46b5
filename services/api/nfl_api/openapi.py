"""OpenAPI document export.

Writes the API description FastAPI derives from the route table and the
schemas in `schemas.py`, so the document can be published or diffed at build
time without running the server:

    nfl-api-openapi --output openapi.json

Nothing in the request path imports this module.
"""

from __future__ import annotations

import json
from pathlib import Path

import typer

from .main import create_app
from .settings import Settings

app = typer.Typer(help="Export the NFL API OpenAPI document.", add_completion=False)


def build_openapi(settings: Settings | None = None) -> dict:
    """Return the OpenAPI document for an application built from `settings`.

    No store is needed: the schema is derived from route declarations only.
    """
    return create_app(settings=settings).openapi()


@app.command()
def export(
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write to this file instead of stdout.",
    ),
    indent: int = typer.Option(2, "--indent", help="JSON indentation."),
) -> None:
    """Export the OpenAPI document as JSON."""
    document = json.dumps(build_openapi(), indent=indent, ensure_ascii=False)
    if output is None:
        typer.echo(document)
        return
    output.write_text(document + "\n", encoding="utf-8")
    typer.echo(f"Wrote {output}", err=True)


if __name__ == "__main__":
    app()
