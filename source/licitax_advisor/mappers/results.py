"""This module isolates per-document mapping failures during list operations.

A single malformed document must never fail a whole list request. Each
mapping attempt produces a `MappingResult`; `map_documents` keeps the
successes and logs the failures with the id of the offending document.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from licitax_advisor.exceptions.resources import MappingError
from licitax_advisor.providers.logging import Logger

T = TypeVar("T")


@dataclass(frozen=True)
class MappingResult(Generic[T]):
    """The outcome of mapping one stored document."""

    document_id: str
    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Whether the document was mapped successfully."""
        return self.error is None


def try_map(document_id: str, data: dict[str, Any], mapper: Callable[[str, dict[str, Any]], T]) -> MappingResult[T]:
    """Maps one stored document, capturing a `MappingError` as a failed result.

    Args:
        document_id: The id of the stored document.
        data: The stored fields.
        mapper: The entity mapper to apply.

    Returns:
        The mapping outcome.
    """
    try:
        return MappingResult(document_id=document_id, value=mapper(document_id, data))
    except MappingError as e:
        return MappingResult(document_id=document_id, error=e.reason)


def map_documents(
    documents: Iterable[tuple[str, dict[str, Any]]],
    mapper: Callable[[str, dict[str, Any]], T],
    logger: Logger,
    collection: str,
) -> list[T]:
    """Maps a sequence of stored documents, skipping the ones that fail.

    The order of the surviving documents is preserved.

    Args:
        documents: `(id, fields)` pairs as returned by a repository.
        mapper: The entity mapper to apply.
        logger: Where skipped documents are reported.
        collection: The collection name, for the log message.

    Returns:
        The successfully mapped entities.
    """
    mapped: list[T] = []
    for document_id, data in documents:
        result = try_map(document_id, data, mapper)
        if result.ok:
            mapped.append(result.value)  # type: ignore[arg-type]
        else:
            logger.warning(f"Skipping document '{document_id}' in '{collection}': {result.error}")
    return mapped
