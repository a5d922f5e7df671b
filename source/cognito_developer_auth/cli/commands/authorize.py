# ABOUTME: Authorize command running the full developer-authenticated identity flow
# ABOUTME: Prints the identity and credentials, optionally in credential_process format

"""Authorize command - Exchange a user identifier for AWS credentials."""

import asyncio
import json

from botocore.exceptions import BotoCoreError, ClientError
from cleo.commands.command import Command
from cleo.helpers import argument, option
from rich.console import Console

from cognito_developer_auth.authorizer import format_credential_process
from cognito_developer_auth.cli.utils.client import CONNECTION_OPTIONS, build_auth
from cognito_developer_auth.cli.utils.display import display_credentials, strip_metadata, to_json
from cognito_developer_auth.exceptions import DeveloperAuthError

OUTPUT_FORMATS = ("table", "json", "credential-process")


class AuthorizeCommand(Command):
    name = "authorize"
    description = "Exchange a user identifier for an identity and temporary AWS credentials"

    arguments = [argument("authoritative_property", description="Verified user identifier (email, account id)")]
    options = [
        *CONNECTION_OPTIONS,
        option("role-arn", description="Custom role to assume", flag=False),
        option(
            "format", "f", description="Output format: table, json or credential-process", flag=False, default="table"
        ),
        option("show-secrets", description="Print secrets unmasked in table output", flag=True),
    ]

    def handle(self) -> int:
        """Execute the authorize command."""
        console = Console()

        output_format = self.option("format")
        if output_format not in OUTPUT_FORMATS:
            console.print(f"[red]Unknown format '{output_format}'. Valid formats: {', '.join(OUTPUT_FORMATS)}[/red]")
            return 1

        try:
            auth = build_auth(self)
            result = asyncio.run(auth.authorize(self.argument("authoritative_property"), self.option("role-arn")))
        except DeveloperAuthError as e:
            console.print(f"[red]{e.message}[/red]")
            return 1
        except (BotoCoreError, ClientError) as e:
            console.print(f"[red]Authorization failed: {e}[/red]")
            return 1

        if output_format == "credential-process":
            # Plain stdout so the AWS CLI can parse it
            print(json.dumps(format_credential_process(result)))
        elif output_format == "json":
            console.print_json(to_json(strip_metadata(result)))
        else:
            display_credentials(console, result, show_secrets=self.option("show-secrets"))
        return 0
