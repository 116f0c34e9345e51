"""Exit handling utilities for the CLI."""

from typing import NoReturn

import typer

from metatags.cli.common.output import out
from metatags.core.errors import ErrorOutcome


def die(msg: str, code: int = 1) -> NoReturn:
    """Exit with an error message and optional exit code."""
    out.error(msg)
    raise typer.Exit(code)


def exit_from_exc(exc: Exception, *, message: str, code: int = 1) -> NoReturn:
    """
    Print an error message and exit with a given code, chaining `exc`.

    Exists to satisfy pylint W0707 and to standardize error exits.
    """
    out.error(message)
    raise typer.Exit(code) from exc


def exit_from_outcome(outcome: ErrorOutcome, code: int = 1) -> NoReturn:
    """Print the one-line message of a failed lookup and stop the command."""
    die(outcome.message, code=code)
