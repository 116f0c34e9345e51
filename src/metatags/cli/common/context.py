"""Application context management for the CLI."""

from __future__ import annotations

import getpass
from dataclasses import dataclass, field

from databricks.sdk import WorkspaceClient

from metatags.cli.common.exits import die
from metatags.core.adapters.unitycatalog import UnityCatalogAdapter
from metatags.core.auth import AuthError, get_client


@dataclass
class TagsAppContext:
    """
    Connection settings shared by the tag commands.

    The WorkspaceClient is created on first use so that `--help` and input
    validation work without credentials.
    """

    url: str | None
    profile: str | None
    _client: WorkspaceClient | None = field(default=None, init=False, repr=False)

    @property
    def client(self) -> WorkspaceClient:
        if self._client is None:
            try:
                self._client = get_client(url=self.url, profile=self.profile)
            except AuthError as exc:
                die(str(exc), code=1)
        return self._client

    def adapter_for(self, metalake: str) -> UnityCatalogAdapter:
        """Return a catalog client bound to `metalake`."""
        return UnityCatalogAdapter(self.client, metalake=metalake)


def build_tags_context(url: str | None, profile: str | None) -> TagsAppContext:
    """Build and return the application context for tag commands."""
    return TagsAppContext(url=url, profile=profile)


def current_login(login: str | None = None) -> str:
    """Return the user to record on events: explicit login, else the OS user."""
    if login:
        return login
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "unknown"
