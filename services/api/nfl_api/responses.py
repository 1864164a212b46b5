"""Turn a query result into an HTTP outcome.

This is the only place where store results and failures become status codes:

    scan, no documents            -> 200, []
    point lookup, no document     -> 404, "<Entity> not found."
    filtered scan, no matches     -> 404, "No <entities> found for this <filter>."
    StoreError / malformed data   -> 500, "Failed to retrieve <entities>."
    otherwise                     -> 200, normalized entity or list

Error outcomes are raised as `HTTPException` chained to the internal cause;
`main.py` renders them as `{"error": detail}` and logs the cause of 5xx
responses. The internal error text never reaches the response body.
"""

from __future__ import annotations

from fastapi import HTTPException
from pydantic import ValidationError

from .errors import StoreError
from .queries import CollectionScan, Query, QueryKind
from .resources import Resource
from .store import StoredDocument

UPSTREAM_ERRORS = (StoreError, ValidationError)


def compose(resource: Resource, query: Query, store):
    """Run `query` against `store` and shape the result for `resource`.

    Args:
        resource: Resource row (collection, normalizer, messages).
        query: Query built by the route handler.
        store: Shared document store.

    Returns:
        A normalized model for point lookups, a list of models otherwise.

    Raises:
        HTTPException: 404 for point-lookup and filtered-scan misses; 500 when
            the store fails or a document cannot be normalized.
    """
    if query.kind is QueryKind.POINT_LOOKUP:
        try:
            doc = query.run(store)
            entity = resource.normalizer(doc) if doc is not None else None
        except UPSTREAM_ERRORS as exc:
            raise HTTPException(status_code=500, detail=resource.retrieval_failed_message) from exc

        if entity is None:
            raise HTTPException(status_code=404, detail=resource.not_found_message)
        return entity

    try:
        entities = [resource.normalizer(doc) for doc in query.run(store)]
    except UPSTREAM_ERRORS as exc:
        raise HTTPException(status_code=500, detail=resource.retrieval_failed_message) from exc

    if query.kind is QueryKind.FILTERED_SCAN and not entities:
        raise HTTPException(status_code=404, detail=resource.no_matches_message(query.label))
    return entities


def compose_current(resource: Resource, query: CollectionScan, store):
    """Shape a single-document collection such as the current week's schedule.

    Never a 404: an empty collection is normalized from `None`, which yields
    the resource's empty default.
    """
    try:
        return resource.normalizer(current_document(query.run(store)))
    except UPSTREAM_ERRORS as exc:
        raise HTTPException(status_code=500, detail=resource.retrieval_failed_message) from exc


def _sort_number(value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return -1


def current_document(docs: list[StoredDocument]) -> StoredDocument | None:
    """Pick the current-week document: highest (season, week), first on ties."""
    if not docs:
        return None
    return max(docs, key=lambda d: (_sort_number(d.data.get("season")), _sort_number(d.data.get("week"))))
