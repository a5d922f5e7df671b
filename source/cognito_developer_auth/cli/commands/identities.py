# ABOUTME: Identities command to list identities in the identity pool
# ABOUTME: Shows one page at a time with an optional continuation token

"""Identities command - List identities in the pool."""

import asyncio

from botocore.exceptions import BotoCoreError, ClientError
from cleo.commands.command import Command
from cleo.helpers import option
from rich.console import Console

from cognito_developer_auth.authorizer import DEFAULT_MAX_RESULTS
from cognito_developer_auth.cli.utils.client import CONNECTION_OPTIONS, build_auth
from cognito_developer_auth.cli.utils.display import display_identities, strip_metadata, to_json
from cognito_developer_auth.exceptions import DeveloperAuthError


class IdentitiesCommand(Command):
    name = "identities"
    description = "List enabled identities in the identity pool"

    options = [
        *CONNECTION_OPTIONS,
        option("max-results", description="Number of identities to list", flag=False, default=str(DEFAULT_MAX_RESULTS)),
        option("next-token", description="Token from a previous page", flag=False),
        option("json", description="Output in JSON format", flag=True),
    ]

    def handle(self) -> int:
        """Execute the identities command."""
        console = Console()

        max_results = self.option("max-results")
        if not max_results.isdigit() or int(max_results) < 1:
            console.print(f"[red]--max-results must be a positive integer, got {max_results}[/red]")
            return 1

        try:
            auth = build_auth(self)
            page = asyncio.run(auth.list_identities(int(max_results), self.option("next-token")))
        except DeveloperAuthError as e:
            console.print(f"[red]{e.message}[/red]")
            return 1
        except (BotoCoreError, ClientError) as e:
            console.print(f"[red]Failed to list identities: {e}[/red]")
            return 1

        if self.option("json"):
            console.print_json(to_json(strip_metadata(page)))
        else:
            display_identities(console, page)
        return 0
