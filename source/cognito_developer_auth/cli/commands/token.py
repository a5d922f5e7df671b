# ABOUTME: Token command to exchange an authoritative property for an identity token
# ABOUTME: Runs the first half of the developer-authenticated identity flow

"""Token command - Get an OpenID token for a developer identity."""

import asyncio

from botocore.exceptions import BotoCoreError, ClientError
from cleo.commands.command import Command
from cleo.helpers import argument, option
from rich.console import Console

from cognito_developer_auth.cli.utils.client import CONNECTION_OPTIONS, build_auth
from cognito_developer_auth.cli.utils.display import display_identity, strip_metadata, to_json
from cognito_developer_auth.exceptions import DeveloperAuthError


class TokenCommand(Command):
    name = "token"
    description = "Get a Cognito identity ID and token for a user"

    arguments = [argument("authoritative_property", description="Verified user identifier (email, account id)")]
    options = [
        *CONNECTION_OPTIONS,
        option("json", description="Output in JSON format", flag=True),
        option("show-secrets", description="Print the token unmasked", flag=True),
    ]

    def handle(self) -> int:
        """Execute the token command."""
        console = Console()

        try:
            auth = build_auth(self)
            identity = asyncio.run(auth.exchange_identity_token(self.argument("authoritative_property")))
        except DeveloperAuthError as e:
            console.print(f"[red]{e.message}[/red]")
            return 1
        except (BotoCoreError, ClientError) as e:
            console.print(f"[red]Token exchange failed: {e}[/red]")
            return 1

        if self.option("json"):
            console.print_json(to_json(strip_metadata(identity)))
        else:
            display_identity(console, identity, show_secrets=self.option("show-secrets"))
        return 0
