# ABOUTME: Credentials command to exchange an identity token for AWS credentials
# ABOUTME: Runs the second half of the developer-authenticated identity flow

"""Credentials command - Get temporary credentials for an identity."""

import asyncio

from botocore.exceptions import BotoCoreError, ClientError
from cleo.commands.command import Command
from cleo.helpers import argument, option
from rich.console import Console

from cognito_developer_auth.cli.utils.client import CONNECTION_OPTIONS, build_auth
from cognito_developer_auth.cli.utils.display import display_credentials, strip_metadata, to_json
from cognito_developer_auth.exceptions import DeveloperAuthError


class CredentialsCommand(Command):
    name = "credentials"
    description = "Get temporary AWS credentials for a Cognito identity"

    arguments = [
        argument("identity_id", description="Cognito identity ID"),
        argument("token", description="OpenID token returned by the token command"),
    ]
    options = [
        *CONNECTION_OPTIONS,
        option("role-arn", description="Custom role to assume", flag=False),
        option("json", description="Output in JSON format", flag=True),
        option("show-secrets", description="Print secrets unmasked", flag=True),
    ]

    def handle(self) -> int:
        """Execute the credentials command."""
        console = Console()
        identity = {"IdentityId": self.argument("identity_id"), "Token": self.argument("token")}

        try:
            auth = build_auth(self)
            response = asyncio.run(auth.exchange_credentials(identity, self.option("role-arn")))
        except DeveloperAuthError as e:
            console.print(f"[red]{e.message}[/red]")
            return 1
        except (BotoCoreError, ClientError) as e:
            console.print(f"[red]Credential exchange failed: {e}[/red]")
            return 1

        if self.option("json"):
            console.print_json(to_json(strip_metadata(response)))
        else:
            display_credentials(console, response, show_secrets=self.option("show-secrets"))
        return 0
