"""This module contains shared fixtures for all unit tests.

It provides an in-memory stand-in for the subset of the `google-cloud-firestore`
client used by the repositories, so store-dependent code can be exercised
without an emulator.
"""

import copy
import itertools
import os
from collections.abc import Generator
from datetime import UTC, datetime
from typing import Any

import pytest
from google.api_core.exceptions import NotFound
from licitax_advisor.providers.firestore import FirestoreProvider


class FakeSnapshot:
    """A document snapshot."""

    def __init__(self, document_id: str, data: dict[str, Any] | None) -> None:
        self.id = document_id
        self._data = copy.deepcopy(data)

    @property
    def exists(self) -> bool:
        return self._data is not None

    def to_dict(self) -> dict[str, Any] | None:
        return copy.deepcopy(self._data)


class FakeDocumentReference:
    """A reference to one document of a fake collection."""

    def __init__(self, collection: "FakeCollection", document_id: str) -> None:
        self.collection = collection
        self.id = document_id

    def get(self) -> FakeSnapshot:
        return FakeSnapshot(self.id, self.collection.documents.get(self.id))

    def set(self, data: dict[str, Any], merge: bool = False) -> None:
        current = self.collection.documents.get(self.id) if merge else None
        self.collection.documents[self.id] = {**(current or {}), **copy.deepcopy(data)}

    def update(self, data: dict[str, Any]) -> None:
        if self.id not in self.collection.documents:
            raise NotFound(f"No document to update: {self.collection.name}/{self.id}")
        self.collection.documents[self.id].update(copy.deepcopy(data))

    def delete(self) -> None:
        self.collection.documents.pop(self.id, None)


class FakeQuery:
    """A query over a fake collection, supporting equality filters, ordering and limits."""

    def __init__(
        self,
        collection: "FakeCollection",
        filters: tuple[tuple[str, Any], ...] = (),
        order: tuple[str, str] | None = None,
        limit_count: int | None = None,
    ) -> None:
        self.collection = collection
        self.filters = filters
        self.order = order
        self.limit_count = limit_count

    def where(self, filter: Any) -> "FakeQuery":  # noqa: A002
        assert filter.op_string == "=="
        filters = (*self.filters, (filter.field_path, filter.value))
        return FakeQuery(self.collection, filters, self.order, self.limit_count)

    def order_by(self, field: str, direction: str = "ASCENDING") -> "FakeQuery":
        return FakeQuery(self.collection, self.filters, (field, direction), self.limit_count)

    def limit(self, count: int) -> "FakeQuery":
        return FakeQuery(self.collection, self.filters, self.order, count)

    def stream(self) -> list[FakeSnapshot]:
        items = [
            (document_id, data)
            for document_id, data in self.collection.documents.items()
            if all(data.get(field) == value for field, value in self.filters)
        ]
        if self.order:
            field, direction = self.order
            items = [item for item in items if item[1].get(field) is not None]
            items.sort(
                key=lambda item: (type(item[1][field]).__name__, item[1][field]),
                reverse=direction == "DESCENDING",
            )
        if self.limit_count is not None:
            items = items[: self.limit_count]
        return [FakeSnapshot(document_id, data) for document_id, data in items]


class FakeCollection(FakeQuery):
    """A named collection of documents."""

    _ids = itertools.count(1)

    def __init__(self, name: str) -> None:
        self.name = name
        self.documents: dict[str, dict[str, Any]] = {}
        super().__init__(self)

    def document(self, document_id: str) -> FakeDocumentReference:
        return FakeDocumentReference(self, document_id)

    def add(self, data: dict[str, Any]) -> tuple[datetime, FakeDocumentReference]:
        reference = self.document(f"{self.name}-{next(self._ids)}")
        reference.set(data)
        return datetime.now(UTC), reference


class FakeFirestoreClient:
    """An in-memory replacement for `google.cloud.firestore.Client`."""

    def __init__(self) -> None:
        self.collections: dict[str, FakeCollection] = {}
        self.closed = False

    def collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection(name))

    def close(self) -> None:
        self.closed = True


@pytest.fixture(scope="session", autouse=True)
def unset_gcp_credentials() -> None:
    """Unsets credential-related environment variables for the entire test session.

    This fixture ensures that unit tests run in a completely isolated
    environment, preventing any accidental calls to real GCP services.
    """
    for key in (
        "FIREBASE_SERVICE_ACCOUNT_JSON",
        "GOOGLE_APPLICATION_CREDENTIALS",
        "GCP_FIRESTORE_HOST",
        "FIRESTORE_EMULATOR_HOST",
        "COMPRAS_GOV_PROXY_URL",
    ):
        os.environ.pop(key, None)


@pytest.fixture(autouse=True)
def reset_firestore_provider() -> Generator[None, None, None]:
    """Makes sure no test sees the store state left behind by another."""
    FirestoreProvider._client = None
    FirestoreProvider._status = None
    yield
    FirestoreProvider._client = None
    FirestoreProvider._status = None


@pytest.fixture
def firestore_client() -> FakeFirestoreClient:
    """Provides an empty in-memory Firestore client."""
    return FakeFirestoreClient()
