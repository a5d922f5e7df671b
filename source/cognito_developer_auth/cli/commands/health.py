# ABOUTME: Health command to probe the Cognito Identity endpoint
# ABOUTME: Issues GET /ping and prints the response body

"""Health command - Probe the Cognito Identity service."""

import asyncio

from botocore.exceptions import BotoCoreError
from cleo.commands.command import Command
from requests import RequestException
from rich.console import Console

from cognito_developer_auth.cli.utils.client import CONNECTION_OPTIONS, build_auth
from cognito_developer_auth.exceptions import DeveloperAuthError


class HealthCommand(Command):
    name = "health"
    description = "Check that the Cognito Identity endpoint is reachable"

    options = [*CONNECTION_OPTIONS]

    def handle(self) -> int:
        """Execute the health command."""
        console = Console()

        try:
            auth = build_auth(self)
            body = asyncio.run(auth.health_check())
        except DeveloperAuthError as e:
            console.print(f"[red]{e.message}[/red]")
            return 1
        except (BotoCoreError, RequestException) as e:
            console.print(f"[red]✗ Cognito Identity unreachable: {e}[/red]")
            return 1

        console.print(f"[green]✓[/green] {auth.endpoint_url}: {body}")
        return 0
