"""CLI application for metalake tag tooling."""

import typer

from metatags.cli.commands.tags import tags_app
from metatags.cli.common.context import build_tags_context
from metatags.cli.common.exits import die
from metatags.cli.common.logging import configure_logging
from metatags.cli.common.options import (
    IgnoreVersionOpt,
    LogLevelOpt,
    ProfileOpt,
    UrlOpt,
)
from metatags.core.auth import ClientVersionError, check_client_version

app = typer.Typer(
    help="metatags - list tags of metalake catalogs, schemas and tables",
    no_args_is_help=True,
)


@app.callback()
def _init(
    ctx: typer.Context,
    url: str | None = UrlOpt,
    profile: str | None = ProfileOpt,
    ignore_client_version: bool = IgnoreVersionOpt,
    log_level: str = LogLevelOpt,
):
    """Configure logging, check the client and build the shared context."""
    try:
        configure_logging(log_level)
    except ValueError as exc:
        die(str(exc), code=2)

    if not ignore_client_version:
        try:
            check_client_version()
        except ClientVersionError as exc:
            die(str(exc), code=1)

    ctx.obj = build_tags_context(url, profile)


app.add_typer(tags_app, name="tags")


if __name__ == "__main__":
    app()
