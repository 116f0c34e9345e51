from __future__ import annotations

import logging

from databricks.sdk import WorkspaceClient
from databricks.sdk.errors import NotFound

from metatags.core.errors import (
    NoSuchCatalogError,
    NoSuchMetalakeError,
    NoSuchSchemaError,
    NoSuchTableError,
)

logger = logging.getLogger(__name__)


class UCTags:
    """Tag assignments of one Unity Catalog securable."""

    def __init__(self, client: WorkspaceClient, entity_type: str, entity_name: str):
        self.client = client
        self.entity_type = entity_type
        self.entity_name = entity_name

    def list_tags(self) -> list[str]:
        """Return tag keys assigned to the securable, in API order."""
        out: list[str] = []
        for a in self.client.entity_tag_assignments.list(
            entity_type=self.entity_type, entity_name=self.entity_name
        ):
            key = getattr(a, "tag_key", None)
            if not key:
                continue
            out.append(key)
        return out


class UCTable:
    """A loaded Unity Catalog table."""

    def __init__(self, client: WorkspaceClient, full_name: str):
        self.client = client
        self.full_name = full_name

    def supports_tags(self) -> UCTags:
        return UCTags(self.client, "tables", self.full_name)


class UCSchema:
    """A loaded Unity Catalog schema."""

    def __init__(self, client: WorkspaceClient, full_name: str):
        self.client = client
        self.full_name = full_name

    def supports_tags(self) -> UCTags:
        return UCTags(self.client, "schemas", self.full_name)


class UCCatalog:
    """A loaded Unity Catalog catalog, exposing its schemas and tables."""

    def __init__(self, client: WorkspaceClient, name: str):
        self.client = client
        self.name = name

    def as_schemas(self) -> UCCatalog:
        return self

    def as_table_catalog(self) -> UCCatalog:
        return self

    def supports_tags(self) -> UCTags:
        return UCTags(self.client, "catalogs", self.name)

    def load_schema(self, name: str) -> UCSchema:
        """Load `<catalog>.<name>`."""
        full_name = f"{self.name}.{name}"
        try:
            info = self.client.schemas.get(full_name=full_name)
        except NotFound as exc:
            raise NoSuchSchemaError(f"Schema '{full_name}' does not exist.") from exc
        return UCSchema(self.client, getattr(info, "full_name", None) or full_name)

    def load_table(self, schema: str, table: str) -> UCTable:
        """Load `<catalog>.<schema>.<table>`."""
        full_name = f"{self.name}.{schema}.{table}"
        try:
            info = self.client.tables.get(full_name=full_name)
        except NotFound as exc:
            raise NoSuchTableError(f"Table '{full_name}' does not exist.") from exc
        return UCTable(self.client, getattr(info, "full_name", None) or full_name)


class UnityCatalogAdapter:
    """
    Catalog client over the Databricks SDK Unity Catalog APIs.

    The metalake is the Unity Catalog metastore attached to the workspace.
    """

    def __init__(self, client: WorkspaceClient, metalake: str) -> None:
        self.client = client
        self.metalake = metalake
        self._metalake_checked = False

    def _check_metalake(self) -> None:
        """Fail with NoSuchMetalakeError unless the workspace metastore matches."""
        if self._metalake_checked:
            return
        try:
            summary = self.client.metastores.summary()
        except NotFound as exc:
            raise NoSuchMetalakeError(
                f"Metalake '{self.metalake}' does not exist."
            ) from exc
        name = getattr(summary, "name", None)
        logger.debug("Workspace metastore is '%s'", name)
        if name != self.metalake:
            raise NoSuchMetalakeError(f"Metalake '{self.metalake}' does not exist.")
        self._metalake_checked = True

    def load_catalog(self, name: str) -> UCCatalog:
        """Load a catalog of the metalake."""
        self._check_metalake()
        try:
            info = self.client.catalogs.get(name)
        except NotFound as exc:
            raise NoSuchCatalogError(f"Catalog '{name}' does not exist.") from exc
        return UCCatalog(self.client, getattr(info, "name", None) or name)
