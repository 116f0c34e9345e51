"""Logging setup for the CLI.

Modules log through `logging.getLogger(__name__)`; this renders those records
on stderr with Rich so stdout stays reserved for command results.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from metatags.cli.common.output import err_console

_CONFIGURED = False


def configure_logging(level: str = "WARNING") -> None:
    """Install a RichHandler on the `metatags` logger (once per process)."""
    global _CONFIGURED

    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")

    root = logging.getLogger("metatags")
    root.setLevel(resolved)
    if _CONFIGURED:
        return

    handler = RichHandler(
        console=err_console,
        rich_tracebacks=False,
        markup=False,
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)

    _CONFIGURED = True
