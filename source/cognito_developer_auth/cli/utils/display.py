# ABOUTME: Shared display utilities for consistent output formatting
# ABOUTME: Renders identities and credentials as rich tables or JSON

"""Shared display utilities for CLI commands."""

import json
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table


def to_json(data: Any) -> str:
    """Serialize a service response, rendering datetimes as ISO-8601 strings."""
    return json.dumps(
        data,
        indent=2,
        default=lambda value: value.isoformat() if hasattr(value, "isoformat") else str(value),
    )


def strip_metadata(response: dict[str, Any]) -> dict[str, Any]:
    """Drop the boto3 ResponseMetadata entry from a service response."""
    return {key: value for key, value in response.items() if key != "ResponseMetadata"}


def mask(value: str | None, visible: int = 4) -> str:
    """Mask a secret, keeping only its first characters."""
    if not value:
        return ""
    if len(value) <= visible:
        return "*" * len(value)
    return value[:visible] + "*" * 8


def display_identity(console: Console, identity: dict[str, Any], show_secrets: bool = False) -> None:
    """Display an identity token response."""
    table = Table(box=box.SIMPLE)
    table.add_column("Field", style="dim")
    table.add_column("Value")

    table.add_row("Identity ID", identity.get("IdentityId", ""))
    token = identity.get("Token", "")
    table.add_row("Token", token if show_secrets else mask(token))

    console.print(table)


def display_credentials(console: Console, response: dict[str, Any], show_secrets: bool = False) -> None:
    """Display a temporary credentials response."""
    creds = response.get("Credentials", {})
    expiration = creds.get("Expiration")

    table = Table(box=box.SIMPLE)
    table.add_column("Field", style="dim")
    table.add_column("Value")

    table.add_row("Identity ID", response.get("IdentityId", ""))
    table.add_row("Access Key ID", creds.get("AccessKeyId", ""))
    secret = creds.get("SecretKey", "")
    table.add_row("Secret Key", secret if show_secrets else mask(secret))
    session_token = creds.get("SessionToken", "")
    table.add_row("Session Token", session_token if show_secrets else mask(session_token))
    table.add_row("Expiration", expiration.isoformat() if hasattr(expiration, "isoformat") else str(expiration))

    console.print(table)


def display_identities(console: Console, page: dict[str, Any]) -> None:
    """Display one page of identities."""
    table = Table(box=box.SIMPLE)
    table.add_column("Identity ID", style="cyan")
    table.add_column("Logins")
    table.add_column("Last Modified")

    for identity in page.get("Identities", []):
        modified = identity.get("LastModifiedDate")
        table.add_row(
            identity.get("IdentityId", ""),
            ", ".join(identity.get("Logins", [])),
            modified.isoformat() if hasattr(modified, "isoformat") else str(modified or ""),
        )

    console.print(table)

    if page.get("NextToken"):
        console.print(f"[dim]Next token: {page['NextToken']}[/dim]")
