# ABOUTME: Commands module for the Cognito developer authentication CLI
# ABOUTME: Contains all CLI command implementations

"""CLI commands for Cognito developer authentication."""

from .authorize import AuthorizeCommand
from .credentials import CredentialsCommand
from .health import HealthCommand
from .identities import IdentitiesCommand
from .token import TokenCommand

__all__ = [
    "HealthCommand",
    "IdentitiesCommand",
    "TokenCommand",
    "CredentialsCommand",
    "AuthorizeCommand",
]
