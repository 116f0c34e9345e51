"""Commands for working with tags on catalog entities."""

from __future__ import annotations

import typer

from metatags.cli.common.context import TagsAppContext, current_login
from metatags.cli.common.exits import exit_from_exc, exit_from_outcome
from metatags.cli.common.options import LoginOpt, MetalakeOpt, OutputFormat, OutputOpt
from metatags.cli.common.output import out
from metatags.core.events import LoggingPreEventHook
from metatags.core.names import DottedName, parse_full_name
from metatags.core.tags import format_tags, resolve_entity_tags

tags_app = typer.Typer(
    help="Tag operations on catalogs, schemas and tables.",
    no_args_is_help=True,
)


def _parse_name_or_exit(name: str | None, metalake: str) -> DottedName:
    """Parse the entity name and convert bad input into a usage error."""
    try:
        return parse_full_name(name, metalake=metalake)
    except ValueError as exc:
        exit_from_exc(exc, message=str(exc), code=2)


@tags_app.command("list")
def list_entity_tags(
    ctx: typer.Context,
    name: str | None = typer.Argument(
        None, help="Entity in the form catalog[.schema[.table]]"
    ),
    metalake: str = MetalakeOpt,
    login: str | None = LoginOpt,
    output: OutputFormat = OutputOpt,
):
    """List the tags attached to a catalog, schema or table."""
    appctx: TagsAppContext = ctx.obj
    full_name = _parse_name_or_exit(name, metalake)

    listing = resolve_entity_tags(
        appctx.adapter_for(metalake),
        metalake,
        full_name,
        user=current_login(login),
        hook=LoggingPreEventHook(),
    )
    if listing.error is not None:
        exit_from_outcome(listing.error)

    if output is OutputFormat.table:
        out.tags_table(listing.tags, title=f"Tags of {str(full_name) or metalake}")
        return

    out.line(format_tags(listing.tags))
