"""Document store adapters.

The API reads league data from a document store: records grouped into named
collections, addressed by collection name + document id, and queryable by a
single field-equality filter. Route handlers never talk to a driver directly;
they receive a `DocumentStore` (see `db.get_store`) and the query objects in
`queries.py` call one of its three read operations:

- `get_collection(name)`: every document in a collection
- `get_document(name, doc_id)`: one document by key, or `None`
- `get_collection_where(name, field, value)`: documents whose `field == value`

Backends:
- `SqlDocumentStore`: JSON documents stored in a `documents` table, read with
  SQLAlchemy. Filtered reads fall back to a client-side scan.
- `MongoDocumentStore`: MongoDB via pymongo, with native equality filters.

Every backend raises `StoreError` for driver/backend failures so callers never
depend on driver exception types.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Mapping

from bson import ObjectId
from pymongo.errors import PyMongoError
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from .errors import StoreError


@dataclass(frozen=True)
class StoredDocument:
    """A raw document as returned by the store.

    `id` is the store key. `data` is the untyped field/value mapping exactly as
    persisted; it may or may not repeat the key as an `id` field.
    """

    id: str
    data: Mapping[str, Any] = field(default_factory=dict)


class DocumentStore(ABC):
    """Read-only interface implemented by every store backend."""

    @abstractmethod
    def get_collection(self, collection: str) -> list[StoredDocument]:
        """Return every document in `collection`, or `[]` when it is empty."""

    @abstractmethod
    def get_document(self, collection: str, doc_id: str) -> StoredDocument | None:
        """Return the document stored under `doc_id`, or `None`."""

    def get_collection_where(self, collection: str, field_name: str, value: Any) -> list[StoredDocument]:
        """Return documents whose `field_name` equals `value`.

        Backends without a native filter for this pattern inherit this
        client-side scan over the full collection.
        """
        return [doc for doc in self.get_collection(collection) if doc.data.get(field_name) == value]

    def close(self) -> None:
        """Release connections held by the backend."""


_CREATE_DOCUMENTS_TABLE = """
    CREATE TABLE IF NOT EXISTS documents (
      collection VARCHAR(128) NOT NULL,
      doc_id VARCHAR(255) NOT NULL,
      data TEXT NOT NULL,
      PRIMARY KEY (collection, doc_id)
    )
"""


class SqlDocumentStore(DocumentStore):
    """Documents kept as JSON text in a single SQL table.

    Table layout: `documents(collection, doc_id, data)` with
    `(collection, doc_id)` as the primary key. Works with any SQLAlchemy
    dialect (Postgres in deployment, SQLite for local runs and tests).

    Sessions are short-lived: one per read, always closed.
    """

    def __init__(self, engine, session_factory):
        self.engine = engine
        self._session_factory = session_factory

    def ensure_schema(self) -> None:
        """Create the `documents` table if it does not exist yet."""
        with self.engine.begin() as conn:
            conn.execute(text(_CREATE_DOCUMENTS_TABLE))

    def get_collection(self, collection: str) -> list[StoredDocument]:
        rows = self._fetch(
            collection,
            """
                SELECT doc_id, data
                FROM documents
                WHERE collection = :collection
                ORDER BY doc_id
            """,
            {"collection": collection},
        )
        return [self._to_document(collection, row) for row in rows]

    def get_document(self, collection: str, doc_id: str) -> StoredDocument | None:
        rows = self._fetch(
            collection,
            """
                SELECT doc_id, data
                FROM documents
                WHERE collection = :collection
                  AND doc_id = :doc_id
            """,
            {"collection": collection, "doc_id": doc_id},
        )
        if not rows:
            return None
        return self._to_document(collection, rows[0])

    def close(self) -> None:
        self.engine.dispose()

    def _fetch(self, collection, sql, params):
        try:
            with self._session_factory() as session:
                return session.execute(text(sql), params).mappings().all()
        except SQLAlchemyError as exc:
            raise StoreError(f"SQL read failed for collection {collection!r}", collection) from exc

    @staticmethod
    def _to_document(collection, row) -> StoredDocument:
        data = row["data"]
        # jsonb columns come back already decoded
        if isinstance(data, (str, bytes)):
            try:
                data = json.loads(data)
            except ValueError as exc:
                raise StoreError(
                    f"Document {row['doc_id']!r} in {collection!r} is not valid JSON", collection
                ) from exc
        if not isinstance(data, dict):
            raise StoreError(f"Document {row['doc_id']!r} in {collection!r} is not an object", collection)
        return StoredDocument(id=str(row["doc_id"]), data=data)


class MongoDocumentStore(DocumentStore):
    """MongoDB-backed store.

    The MongoDB `_id` is the document key; it is removed from `data` and
    exposed as `StoredDocument.id` as a string. ObjectId keys come back as
    their 24-character hex form, and point lookups accept that form too.
    """

    def __init__(self, client, database_name: str):
        self._client = client
        self._db = client[database_name]

    def get_collection(self, collection: str) -> list[StoredDocument]:
        try:
            return [self._to_document(raw) for raw in self._db[collection].find({})]
        except PyMongoError as exc:
            raise StoreError(f"MongoDB read failed for collection {collection!r}", collection) from exc

    def get_document(self, collection: str, doc_id: str) -> StoredDocument | None:
        try:
            raw = self._db[collection].find_one(self._key_filter(doc_id))
        except PyMongoError as exc:
            raise StoreError(f"MongoDB read failed for collection {collection!r}", collection) from exc
        return self._to_document(raw) if raw is not None else None

    def get_collection_where(self, collection: str, field_name: str, value: Any) -> list[StoredDocument]:
        try:
            return [self._to_document(raw) for raw in self._db[collection].find({field_name: value})]
        except PyMongoError as exc:
            raise StoreError(f"MongoDB read failed for collection {collection!r}", collection) from exc

    def close(self) -> None:
        self._client.close()

    @staticmethod
    def _key_filter(doc_id: str) -> dict:
        if ObjectId.is_valid(doc_id):
            return {"_id": {"$in": [doc_id, ObjectId(doc_id)]}}
        return {"_id": doc_id}

    @staticmethod
    def _to_document(raw) -> StoredDocument:
        data = dict(raw)
        key = data.pop("_id", None)
        return StoredDocument(id=str(key), data=data)
