# ABOUTME: Shared connection options and client construction for CLI commands
# ABOUTME: Merges a JSON config profile with command-line overrides

"""Client construction helpers for CLI commands."""

import logging
import os
import sys
from typing import Any

from cleo.helpers import option

from cognito_developer_auth.authorizer import CognitoDeveloperAuth
from cognito_developer_auth.config import ConfigFile
from cognito_developer_auth.exceptions import ConfigurationError

DEBUG_ENV_VAR = "COGNITO_DEV_AUTH_DEBUG"

CONNECTION_OPTIONS = [
    option("config", description="Path to a JSON configuration file", flag=False),
    option("profile", "p", description="Configuration profile to use", flag=False),
    option("identity-pool-id", description="Identity pool ID ({region}:{uuid})", flag=False),
    option("developer-provider-name", description="Developer provider name (e.g. com.example.app)", flag=False),
    option("region", description="AWS region of the identity pool", flag=False),
    option("token-duration", description="Token duration in seconds", flag=False),
    option("federation-provider-name", description="Provider name used for credential exchange", flag=False),
    option("aws-profile", description="Local AWS profile used to sign requests", flag=False),
    option("debug", description="Enable debug logging", flag=True),
]

# Command-line option -> configuration field
OPTION_FIELDS = {
    "identity-pool-id": "identity_pool_id",
    "developer-provider-name": "developer_provider_name",
    "region": "region",
    "token-duration": "token_duration_seconds",
    "federation-provider-name": "federation_provider_name",
    "aws-profile": "profile",
}


def configure_logging(debug: bool = False) -> None:
    """Configure logging to stderr; DEBUG when requested or set in the environment."""
    debug = debug or os.getenv(DEBUG_ENV_VAR, "").lower() in ("1", "true", "yes")
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def collect_options(command) -> dict[str, Any]:
    """Build client options from the config file profile overlaid with command-line values."""
    config_path = command.option("config")
    config_file = ConfigFile.load(config_path)
    options = config_file.get_profile(command.option("profile"))

    for option_name, field_name in OPTION_FIELDS.items():
        value = command.option(option_name)
        if value is not None:
            options[field_name] = value

    duration = options.get("token_duration_seconds")
    if isinstance(duration, str):
        if not duration.isdigit():
            raise ConfigurationError(
                "token_duration_seconds", f"token_duration_seconds must be a positive integer, got {duration!r}"
            )
        options["token_duration_seconds"] = int(duration)

    return options


def build_auth(command) -> CognitoDeveloperAuth:
    """Create a client for a command without starting the background readiness probe."""
    configure_logging(command.option("debug"))
    return CognitoDeveloperAuth(collect_options(command), probe_on_init=False)
