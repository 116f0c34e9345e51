"""Common CLI options for the CLI."""

from enum import Enum

import typer


class OutputFormat(str, Enum):
    """Rendering of command results."""

    plain = "plain"
    table = "table"


UrlOpt = typer.Option(
    None,
    "--url",
    help="Databricks workspace URL (defaults to the profile / DATABRICKS_HOST)",
)

ProfileOpt = typer.Option(
    None,
    "--profile",
    "-p",
    help="Databricks CLI profile (from ~/.databrickscfg)",
)

IgnoreVersionOpt = typer.Option(
    False,
    "--ignore-client-version",
    help="Don't check that the installed client supports the tag APIs",
)

LogLevelOpt = typer.Option(
    "WARNING",
    "--log-level",
    envvar="METATAGS_LOG_LEVEL",
    help="Log level for diagnostics on stderr (DEBUG, INFO, WARNING, ERROR)",
)

MetalakeOpt = typer.Option(
    ...,
    "--metalake",
    "-m",
    envvar="METATAGS_METALAKE",
    help="Metalake name (the workspace metastore)",
)

LoginOpt = typer.Option(
    None,
    "--login",
    envvar="METATAGS_USER",
    help="User recorded on emitted events (defaults to the OS login name)",
)

OutputOpt = typer.Option(
    OutputFormat.plain,
    "--output",
    "-o",
    help="Output format: plain (comma-separated) or table",
)
