"""Authentication and client construction for Databricks.

This module centralizes creation of a Databricks WorkspaceClient, applies
small normalization rules (such as sanitizing the host URL) and checks that
the installed SDK is recent enough for the tag APIs the CLI relies on.
"""

import re

from databricks.sdk import WorkspaceClient
from databricks.sdk.core import Config
from databricks.sdk.version import __version__ as SDK_VERSION

# First databricks-sdk release that exposes `entity_tag_assignments`.
MIN_SDK_VERSION = (0, 67, 0)


class AuthError(RuntimeError):
    """Raised when Databricks authentication fails."""


class ClientVersionError(RuntimeError):
    """Raised when the installed Databricks SDK is too old."""


def _format_auth_error(message: str, profile: str | None) -> str:
    """Return a user-friendly auth error message."""
    login_match = re.search(r"databricks auth login ([^\s]+)", message)
    if login_match:
        cmd = "databricks auth login"
        if profile:
            cmd = f"{cmd} --profile {profile}"
        return (
            "Databricks authentication failed. Your refresh token is invalid.\n"
            f"Re-authenticate with:\n  $ {cmd}"
        )
    return f"Databricks authentication failed: {message}"


def _sanitize_host(host: str | None) -> str | None:
    """
    Normalize a Databricks host URL.

    - Removes query strings (e.g. '?o=123456789')
    - Removes trailing slashes
    """
    if not host:
        return host
    # strip querystring such as ?o=....
    host = host.split("?", 1)[0]
    # strip trailing slash
    return host.rstrip("/")


def _parse_version(version: str) -> tuple[int, ...]:
    """Turn '0.67.0' (or '0.67.0rc1') into a comparable tuple."""
    parts: list[int] = []
    for piece in version.split(".")[:3]:
        digits = re.match(r"\d+", piece)
        parts.append(int(digits.group(0)) if digits else 0)
    return tuple(parts)


def check_client_version(version: str = SDK_VERSION) -> None:
    """
    Ensure the Databricks SDK supports entity tag assignments.

    Raises:
        ClientVersionError: If `version` is older than MIN_SDK_VERSION.
    """
    if _parse_version(version) < MIN_SDK_VERSION:
        wanted = ".".join(str(p) for p in MIN_SDK_VERSION)
        raise ClientVersionError(
            f"databricks-sdk {version} is too old (need >= {wanted}). "
            "Upgrade it or pass --ignore-client-version."
        )


def get_client(url: str | None = None, profile: str | None = None) -> WorkspaceClient:
    """
    Create and return a configured Databricks WorkspaceClient.

    The host comes from `url` when given, otherwise from the profile
    (~/.databrickscfg) or the environment, following Databricks unified
    authentication. It is sanitized before the client is built.
    """
    kwargs: dict[str, str] = {}
    if profile:
        kwargs["profile"] = profile
    if url:
        kwargs["host"] = _sanitize_host(url)
    try:
        cfg = Config(**kwargs)
    except ValueError as exc:
        raise AuthError(_format_auth_error(str(exc), profile)) from exc
    cfg.host = _sanitize_host(cfg.host)
    return WorkspaceClient(config=cfg)
