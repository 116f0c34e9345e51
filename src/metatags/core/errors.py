"""Catalog client errors and their user-facing outcomes.

Client adapters raise the typed errors below. The tag resolver catches them
once, turns them into a LookupFailure and maps that to an ErrorOutcome with
`normalize`. The mapping is total: anything unrecognized is OTHER.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

UNKNOWN_METALAKE = "Unknown metalake name."
UNKNOWN_CATALOG = "Unknown catalog name."
UNKNOWN_SCHEMA = "Unknown schema name."
UNKNOWN_TABLE = "Unknown table name."


class FailureKind(str, Enum):
    """Kinds of failure a catalog client can report."""

    METALAKE_NOT_FOUND = "METALAKE_NOT_FOUND"
    CATALOG_NOT_FOUND = "CATALOG_NOT_FOUND"
    SCHEMA_NOT_FOUND = "SCHEMA_NOT_FOUND"
    TABLE_NOT_FOUND = "TABLE_NOT_FOUND"
    OTHER = "OTHER"


class CatalogClientError(RuntimeError):
    """Base class for errors raised by catalog client adapters."""

    kind = FailureKind.OTHER


class NoSuchMetalakeError(CatalogClientError):
    """Raised when the requested metalake does not exist."""

    kind = FailureKind.METALAKE_NOT_FOUND


class NoSuchCatalogError(CatalogClientError):
    """Raised when the requested catalog does not exist."""

    kind = FailureKind.CATALOG_NOT_FOUND


class NoSuchSchemaError(CatalogClientError):
    """Raised when the requested schema does not exist."""

    kind = FailureKind.SCHEMA_NOT_FOUND


class NoSuchTableError(CatalogClientError):
    """Raised when the requested table does not exist."""

    kind = FailureKind.TABLE_NOT_FOUND


@dataclass(frozen=True)
class LookupFailure:
    """A client failure reduced to its kind and message."""

    kind: FailureKind
    message: str

    @classmethod
    def from_exception(cls, exc: BaseException) -> LookupFailure:
        """Classify an exception raised by a catalog client."""
        kind = getattr(exc, "kind", FailureKind.OTHER)
        if not isinstance(kind, FailureKind):
            kind = FailureKind.OTHER
        return cls(kind=kind, message=str(exc) or type(exc).__name__)


class OutcomeKind(str, Enum):
    """User-facing error buckets."""

    UNKNOWN_METALAKE = "UNKNOWN_METALAKE"
    UNKNOWN_CATALOG = "UNKNOWN_CATALOG"
    UNKNOWN_SCHEMA = "UNKNOWN_SCHEMA"
    UNKNOWN_TABLE = "UNKNOWN_TABLE"
    OTHER = "OTHER"


@dataclass(frozen=True)
class ErrorOutcome:
    """Terminal error of a resolution, ready to print as one line."""

    kind: OutcomeKind
    message: str


_OUTCOMES: dict[FailureKind, tuple[OutcomeKind, str]] = {
    FailureKind.METALAKE_NOT_FOUND: (OutcomeKind.UNKNOWN_METALAKE, UNKNOWN_METALAKE),
    FailureKind.CATALOG_NOT_FOUND: (OutcomeKind.UNKNOWN_CATALOG, UNKNOWN_CATALOG),
    FailureKind.SCHEMA_NOT_FOUND: (OutcomeKind.UNKNOWN_SCHEMA, UNKNOWN_SCHEMA),
    FailureKind.TABLE_NOT_FOUND: (OutcomeKind.UNKNOWN_TABLE, UNKNOWN_TABLE),
}


def normalize(failure: LookupFailure) -> ErrorOutcome:
    """Map a lookup failure to exactly one ErrorOutcome."""
    mapped = _OUTCOMES.get(failure.kind)
    if mapped is None:
        return ErrorOutcome(kind=OutcomeKind.OTHER, message=failure.message)
    kind, message = mapped
    return ErrorOutcome(kind=kind, message=message)
