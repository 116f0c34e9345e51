"""Interfaces of the catalog client used by the core domain.

Concrete adapters (see `metatags.core.adapters`) implement these protocols
and raise the typed errors from `metatags.core.errors` when an entity is
missing.
"""

from __future__ import annotations

from typing import Protocol


class SupportsTags(Protocol):
    """Tag operations available on a catalog, schema or table."""

    def list_tags(self) -> list[str]:
        """Return the names of the tags attached to the entity, in order."""
        ...


class Table(Protocol):
    def supports_tags(self) -> SupportsTags: ...


class Schema(Protocol):
    def supports_tags(self) -> SupportsTags: ...


class SupportsSchemas(Protocol):
    def load_schema(self, name: str) -> Schema:
        """Load a schema of the catalog, raising NoSuchSchemaError if missing."""
        ...


class TableCatalog(Protocol):
    def load_table(self, schema: str, table: str) -> Table:
        """Load a table of the catalog, raising NoSuchTableError if missing."""
        ...


class Catalog(Protocol):
    def as_schemas(self) -> SupportsSchemas: ...

    def as_table_catalog(self) -> TableCatalog: ...

    def supports_tags(self) -> SupportsTags: ...


class CatalogClient(Protocol):
    """Entry point of a catalog client bound to one metalake."""

    def load_catalog(self, name: str) -> Catalog:
        """
        Load a catalog by name.

        Raises:
            NoSuchMetalakeError: If the client's metalake does not exist.
            NoSuchCatalogError: If the catalog does not exist.
        """
        ...
