"""Store queries built from route parameters.

Each route turns its path parameters into exactly one query object. Building a
query has no side effects; `run(store)` performs the single store call and
returns raw `StoredDocument`s. Store failures propagate as `StoreError`.

Query kinds:
- `CollectionScan`: every document of a collection
- `PointLookup`: one document by id, `None` when absent
- `FilteredScan`: documents whose field equals a value

An empty or whitespace-only id/filter value can never match a document, so it
is answered as a miss without a store round trip.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar

from .store import DocumentStore, StoredDocument


class QueryKind(enum.Enum):
    SCAN = "scan"
    POINT_LOOKUP = "point_lookup"
    FILTERED_SCAN = "filtered_scan"


@dataclass(frozen=True)
class CollectionScan:
    collection: str

    kind: ClassVar[QueryKind] = QueryKind.SCAN

    def run(self, store: DocumentStore) -> list[StoredDocument]:
        return store.get_collection(self.collection)


@dataclass(frozen=True)
class PointLookup:
    collection: str
    document_id: str

    kind: ClassVar[QueryKind] = QueryKind.POINT_LOOKUP

    def run(self, store: DocumentStore) -> StoredDocument | None:
        if not self.document_id.strip():
            return None
        return store.get_document(self.collection, self.document_id)


@dataclass(frozen=True)
class FilteredScan:
    """Equality filter on a single document field.

    `label` names the filter in user-facing messages ("team", "division").
    """

    collection: str
    field: str
    value: str
    label: str

    kind: ClassVar[QueryKind] = QueryKind.FILTERED_SCAN

    def run(self, store: DocumentStore) -> list[StoredDocument]:
        if not self.value.strip():
            return []
        return store.get_collection_where(self.collection, self.field, self.value)


Query = CollectionScan | PointLookup | FilteredScan
