"""Resolve an entity name and list the tags attached to it.

This module holds the tag-listing workflow: classify the dotted name, emit
the pre-event, walk the catalog client down to the addressed entity and
collect its tag names. Client failures are converted into an ErrorOutcome at
this boundary; callers only ever receive a TagListing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from metatags.core.catalog import CatalogClient
from metatags.core.errors import ErrorOutcome, LookupFailure, normalize
from metatags.core.events import GuardedHook, PreEventHook, list_tags_event
from metatags.core.names import DottedName, NameShape, classify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogTarget:
    """Tags of a catalog."""

    catalog: str


@dataclass(frozen=True)
class SchemaTarget:
    """Tags of a schema within a catalog."""

    catalog: str
    schema: str


@dataclass(frozen=True)
class TableTarget:
    """Tags of a table within catalog.schema."""

    catalog: str
    schema: str
    table: str


ResolvedTarget = CatalogTarget | SchemaTarget | TableTarget


@dataclass(frozen=True)
class TagListing:
    """
    Result of listing the tags of an entity.

    Attributes:
        tags: Tag names in the order the catalog returned them.
        error: Set when the lookup failed; `tags` is then always empty.
    """

    tags: tuple[str, ...] = ()
    error: ErrorOutcome | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def target_for(name: DottedName) -> ResolvedTarget | None:
    """Return the entity addressed by the name, or None for an empty name."""
    shape = classify(name)
    if shape is NameShape.HAS_TABLE:
        return TableTarget(catalog=name.catalog, schema=name.schema, table=name.table)
    if shape is NameShape.HAS_SCHEMA:
        return SchemaTarget(catalog=name.catalog, schema=name.schema)
    if shape is NameShape.HAS_CATALOG:
        return CatalogTarget(catalog=name.catalog)
    return None


def list_target_tags(client: CatalogClient, target: ResolvedTarget) -> list[str]:
    """
    Load the target entity step by step and list its tags.

    Each step depends on the previous one, so the calls run one after another
    and the first exception stops the chain.
    """
    catalog = client.load_catalog(target.catalog)
    if isinstance(target, TableTarget):
        entity = catalog.as_table_catalog().load_table(target.schema, target.table)
    elif isinstance(target, SchemaTarget):
        entity = catalog.as_schemas().load_schema(target.schema)
    else:
        entity = catalog
    return list(entity.supports_tags().list_tags())


def resolve_entity_tags(
    client: CatalogClient,
    metalake: str,
    name: DottedName,
    *,
    user: str,
    hook: PreEventHook | None = None,
) -> TagListing:
    """
    List the tags of the entity addressed by `name`.

    The pre-event is delivered once, before the first client call, and its
    hook cannot change the result. An empty name gives an empty listing.

    Args:
        client: Catalog client bound to `metalake`.
        metalake: Metalake the name lives in.
        name: Parsed entity name.
        user: Principal recorded on the pre-event.
        hook: Optional receiver of the pre-event.

    Returns:
        TagListing with either the tag names or an ErrorOutcome.
    """
    GuardedHook(hook).notify(list_tags_event(user, metalake, name))

    target = target_for(name)
    if target is None:
        logger.debug("Name '%s' addresses no entity; no tags to list", name)
        return TagListing()

    logger.debug("Listing tags for %s in metalake '%s'", target, metalake)
    try:
        tags = list_target_tags(client, target)
    except Exception as exc:  # noqa: BLE001
        failure = LookupFailure.from_exception(exc)
        logger.debug("Tag lookup failed: %s (%s)", failure.message, failure.kind.value)
        return TagListing(error=normalize(failure))

    return TagListing(tags=tuple(tags))


def format_tags(tags: Iterable[str]) -> str:
    """Join tag names with commas, keeping their order."""
    return ",".join(tags)
