"""Entity name parsing and classification.

A dotted entity name addresses one level of the metalake hierarchy
(metalake -> catalog -> schema -> table). This module turns user input into
an immutable DottedName and classifies which level it points at. Everything
here is pure and free of client or CLI concerns.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MALFORMED_NAME = "Malformed entity name."

_MAX_SEGMENTS = 4


class NameShape(str, Enum):
    """
    The most specific hierarchy level a DottedName addresses.

    Values:
        HAS_TABLE: catalog, schema and table are present.
        HAS_SCHEMA: catalog and schema are present.
        HAS_CATALOG: only the catalog is present.
        EMPTY: no catalog, so there is nothing to look up.
    """

    HAS_TABLE = "HAS_TABLE"
    HAS_SCHEMA = "HAS_SCHEMA"
    HAS_CATALOG = "HAS_CATALOG"
    EMPTY = "EMPTY"


@dataclass(frozen=True)
class DottedName:
    """
    A parsed entity name.

    Attributes:
        metalake: Optional metalake given as the leading segment.
        catalog: Catalog name, if present.
        schema: Schema name, requires a catalog.
        table: Table name, requires a schema.
    """

    metalake: str | None = None
    catalog: str | None = None
    schema: str | None = None
    table: str | None = None

    def __post_init__(self) -> None:
        for part in (self.metalake, self.catalog, self.schema, self.table):
            if part is not None and not part:
                raise ValueError(MALFORMED_NAME)
        if self.table is not None and self.schema is None:
            raise ValueError("A table name requires a schema name.")
        if self.schema is not None and self.catalog is None:
            raise ValueError("A schema name requires a catalog name.")

    @property
    def has_catalog(self) -> bool:
        return self.catalog is not None

    @property
    def has_schema(self) -> bool:
        return self.schema is not None

    @property
    def has_table(self) -> bool:
        return self.table is not None

    def parts(self) -> tuple[str, ...]:
        """Return the catalog/schema/table segments that are present."""
        return tuple(p for p in (self.catalog, self.schema, self.table) if p)

    def __str__(self) -> str:
        head = (self.metalake,) if self.metalake else ()
        return ".".join(head + self.parts())


def parse_full_name(value: str | None, *, metalake: str | None = None) -> DottedName:
    """
    Parse `catalog[.schema[.table]]` or `metalake.catalog.schema.table`.

    A missing or blank value yields an empty name, which classifies as
    NameShape.EMPTY.

    Args:
        value: Raw dotted name from the user.
        metalake: Metalake already chosen by the caller. When the name carries
            its own metalake segment, the two must agree.

    Returns:
        The parsed DottedName.

    Raises:
        ValueError: On empty segments, too many segments or a metalake
            segment that conflicts with `metalake`.
    """
    if value is None or not value.strip():
        return DottedName()

    parts = value.strip().split(".")
    if len(parts) > _MAX_SEGMENTS or any(not p for p in parts):
        raise ValueError(MALFORMED_NAME)

    lead: str | None = None
    if len(parts) == _MAX_SEGMENTS:
        lead, parts = parts[0], parts[1:]
        if metalake and lead != metalake:
            raise ValueError(
                f"Metalake '{lead}' in the name does not match metalake '{metalake}'."
            )

    catalog, schema, table = (parts + [None, None])[:3]
    return DottedName(metalake=lead, catalog=catalog, schema=schema, table=table)


def classify(name: DottedName) -> NameShape:
    """Return the most specific level addressed by the name."""
    if name.has_table:
        return NameShape.HAS_TABLE
    if name.has_schema:
        return NameShape.HAS_SCHEMA
    if name.has_catalog:
        return NameShape.HAS_CATALOG
    return NameShape.EMPTY
