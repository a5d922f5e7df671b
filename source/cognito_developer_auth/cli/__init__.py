# ABOUTME: CLI module for Cognito developer authentication
# ABOUTME: Provides commands to probe the service and exchange identities for credentials

"""Command-line interface for Cognito developer authentication."""

from cleo.application import Application

from cognito_developer_auth import __version__

from .commands.authorize import AuthorizeCommand
from .commands.credentials import CredentialsCommand
from .commands.health import HealthCommand
from .commands.identities import IdentitiesCommand
from .commands.token import TokenCommand


def create_application() -> Application:
    """Create the CLI application."""
    application = Application("cognito-dev-auth", __version__)

    application.add(HealthCommand())
    application.add(IdentitiesCommand())
    application.add(TokenCommand())
    application.add(CredentialsCommand())
    application.add(AuthorizeCommand())

    return application


def main():
    """Main entry point for the CLI."""
    application = create_application()
    application.run()


if __name__ == "__main__":
    main()
