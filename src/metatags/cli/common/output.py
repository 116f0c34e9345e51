"""Output formatting utilities for the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_THEME = Theme(
    {
        "ok": "bold green",
        "err": "bold red",
        "meta": "dim",
    }
)

# Catalog text is printed verbatim: no markup, no :emoji: codes, no highlighting.
console = Console(theme=_THEME, emoji=False, highlight=False)
err_console = Console(theme=_THEME, stderr=True, emoji=False, highlight=False)


@dataclass(frozen=True)
class Out:
    """Output formatter for CLI results, errors and tables."""

    def line(self, text: str) -> None:
        """Print a plain result line to stdout, without markup or wrapping."""
        console.print(Text(text), soft_wrap=True)

    def error(self, msg: str) -> None:
        """Print an error message as a single line on stderr."""
        err_console.print(Text.assemble(("✗", "err"), " ", msg), soft_wrap=True)

    def tags_table(self, tags: Iterable[str], title: str = "Tags") -> None:
        """Render tag names, one per row, in the order given."""
        t = Table(title=Text(title), show_lines=False)
        t.add_column("#", style="meta", no_wrap=True)
        t.add_column("Tag", style="ok")

        for i, tag in enumerate(tags, start=1):
            t.add_row(str(i), Text(tag))

        console.print(t)


out = Out()
