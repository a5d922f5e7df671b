# ABOUTME: Cognito developer-authenticated identities - token and credential exchange
# ABOUTME: Main package exposing the client, configuration schema, and exceptions

"""Cognito developer-authenticated identity client."""

from .authorizer import CognitoDeveloperAuth, format_credential_process
from .config import ClientConfig, find_invalid_field, validate_options
from .exceptions import ArgumentError, ConfigurationError, DeveloperAuthError
from .health import Readiness, ping

__version__ = "1.0.0"
__all__ = [
    "CognitoDeveloperAuth",
    "ClientConfig",
    "Readiness",
    "ArgumentError",
    "ConfigurationError",
    "DeveloperAuthError",
    "find_invalid_field",
    "format_credential_process",
    "ping",
    "validate_options",
]
