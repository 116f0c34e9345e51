from types import SimpleNamespace

import pytest
from databricks.sdk.errors import NotFound

from metatags.core.adapters.unitycatalog import UnityCatalogAdapter
from metatags.core.errors import (
    NoSuchCatalogError,
    NoSuchMetalakeError,
    NoSuchSchemaError,
    NoSuchTableError,
)


class _Getter:
    def __init__(self, known: dict[str, object]):
        self.known = known
        self.calls: list[str] = []

    def get(self, name=None, *, full_name=None):
        key = full_name or name
        self.calls.append(key)
        if key not in self.known:
            raise NotFound(f"{key} not found")
        return self.known[key]


class _TagAssignments:
    def __init__(self, by_entity: dict[tuple[str, str], list[str]]):
        self.by_entity = by_entity

    def list(self, *, entity_type: str, entity_name: str):
        for key in self.by_entity.get((entity_type, entity_name), []):
            yield SimpleNamespace(tag_key=key, tag_value=None)


def _workspace(metastore: str = "m1"):
    summary_calls: list[str] = []

    def summary():
        summary_calls.append("summary")
        return SimpleNamespace(name=metastore)

    return SimpleNamespace(
        metastores=SimpleNamespace(summary=summary, calls=summary_calls),
        catalogs=_Getter({"main": SimpleNamespace(name="main")}),
        schemas=_Getter({"main.sales": SimpleNamespace(full_name="main.sales")}),
        tables=_Getter({"main.sales.orders": SimpleNamespace(full_name="main.sales.orders")}),
        entity_tag_assignments=_TagAssignments(
            {
                ("catalogs", "main"): ["prod"],
                ("schemas", "main.sales"): ["finance", "gold"],
                ("tables", "main.sales.orders"): ["pii"],
            }
        ),
    )


def test_load_catalog_checks_metalake_once():
    ws = _workspace()
    adapter = UnityCatalogAdapter(ws, metalake="m1")

    adapter.load_catalog("main")
    adapter.load_catalog("main")

    assert ws.metastores.calls == ["summary"]


def test_load_catalog_with_wrong_metalake_raises():
    adapter = UnityCatalogAdapter(_workspace(metastore="other"), metalake="m1")

    with pytest.raises(NoSuchMetalakeError):
        adapter.load_catalog("main")


def test_missing_entities_raise_typed_errors():
    adapter = UnityCatalogAdapter(_workspace(), metalake="m1")

    with pytest.raises(NoSuchCatalogError):
        adapter.load_catalog("nope")

    catalog = adapter.load_catalog("main")
    with pytest.raises(NoSuchSchemaError):
        catalog.as_schemas().load_schema("nope")
    with pytest.raises(NoSuchTableError):
        catalog.as_table_catalog().load_table("sales", "nope")


def test_tags_are_listed_per_securable_type():
    catalog = UnityCatalogAdapter(_workspace(), metalake="m1").load_catalog("main")

    assert catalog.supports_tags().list_tags() == ["prod"]
    assert catalog.as_schemas().load_schema("sales").supports_tags().list_tags() == [
        "finance",
        "gold",
    ]
    table = catalog.as_table_catalog().load_table("sales", "orders")
    assert table.supports_tags().list_tags() == ["pii"]
