from __future__ import annotations

import pytest
from typer.testing import CliRunner

import metatags.cli.cli as cli_module
from metatags.core.errors import NoSuchCatalogError


class _Tags:
    def __init__(self, tags: list[str]):
        self.tags = tags

    def list_tags(self) -> list[str]:
        return self.tags


class _Catalog:
    def __init__(self, tags: list[str]):
        self.tags = tags

    def supports_tags(self) -> _Tags:
        return _Tags(self.tags)


class _Client:
    def __init__(self, catalogs: dict[str, object]):
        self.catalogs = catalogs

    def load_catalog(self, name: str) -> _Catalog:
        if name not in self.catalogs:
            raise NoSuchCatalogError(name)
        entry = self.catalogs[name]
        if isinstance(entry, Exception):
            raise entry
        return _Catalog(entry)


class _Context:
    def __init__(self):
        self.metalakes: list[str] = []
        self.catalogs: dict[str, object] = {
            "c1": ["pii", "finance"],
            "emoji": ["team:thumbs_up:", "pii"],
            "markup": ["[bold]gold[/bold]"],
            "boom": RuntimeError("cannot read [/Volumes/x] path"),
            "styled": RuntimeError("denied for [bold]group[/bold] admins"),
        }

    def adapter_for(self, metalake: str) -> _Client:
        self.metalakes.append(metalake)
        return _Client(self.catalogs)


@pytest.fixture
def appctx(monkeypatch) -> _Context:
    ctx = _Context()
    monkeypatch.setattr(cli_module, "build_tags_context", lambda url, profile: ctx)
    monkeypatch.delenv("METATAGS_METALAKE", raising=False)
    return ctx


def _runner() -> CliRunner:
    # Click < 8.2 mixes stderr into stdout unless told otherwise.
    try:
        return CliRunner(mix_stderr=False)
    except TypeError:
        return CliRunner()


def _invoke(*args: str):
    return _runner().invoke(
        cli_module.app, ["--ignore-client-version", "tags", "list", *args]
    )


def test_list_prints_comma_joined_tags(appctx: _Context):
    result = _invoke("c1", "--metalake", "m1")

    assert result.exit_code == 0
    assert result.stdout == "pii,finance\n"
    assert appctx.metalakes == ["m1"]


def test_list_prints_tag_names_verbatim(appctx: _Context):
    result = _invoke("emoji", "--metalake", "m1")

    assert result.exit_code == 0
    assert result.stdout == "team:thumbs_up:,pii\n"


def test_list_does_not_interpret_markup_in_tag_names(appctx: _Context):
    result = _invoke("markup", "--metalake", "m1")

    assert result.exit_code == 0
    assert result.stdout == "[bold]gold[/bold]\n"


def test_list_empty_name_prints_empty_line(appctx: _Context):
    result = _invoke("--metalake", "m1")

    assert result.exit_code == 0
    assert result.stdout == "\n"


def test_list_unknown_catalog_prints_one_error_line(appctx: _Context):
    result = _invoke("nope.s1.t1", "--metalake", "m1")

    assert result.exit_code == 1
    assert result.stdout == ""
    lines = result.stderr.splitlines()
    assert len(lines) == 1
    assert "Unknown catalog name." in lines[0]


@pytest.mark.parametrize(
    ("catalog", "message"),
    [
        ("boom", "cannot read [/Volumes/x] path"),
        ("styled", "denied for [bold]group[/bold] admins"),
    ],
)
def test_list_other_error_prints_message_verbatim(appctx: _Context, catalog, message):
    result = _invoke(catalog, "--metalake", "m1")

    assert result.exit_code == 1
    assert result.stdout == ""
    lines = result.stderr.splitlines()
    assert len(lines) == 1
    assert lines[0].endswith(message)


def test_list_malformed_name_is_usage_error(appctx: _Context):
    result = _invoke("c1..t1", "--metalake", "m1")

    assert result.exit_code == 2
    assert "Malformed entity name." in result.stderr
    assert appctx.metalakes == []


def test_list_reads_metalake_from_env(appctx: _Context, monkeypatch):
    monkeypatch.setenv("METATAGS_METALAKE", "m9")

    result = _invoke("c1")

    assert result.exit_code == 0
    assert appctx.metalakes == ["m9"]


def test_list_table_output_renders_tags(appctx: _Context):
    result = _invoke("emoji", "--metalake", "m1", "--output", "table")

    assert result.exit_code == 0
    assert "team:thumbs_up:" in result.stdout
    assert "pii" in result.stdout
