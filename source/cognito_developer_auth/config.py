# ABOUTME: Configuration schema and validation for Cognito developer authentication
# ABOUTME: Validates required options, migrates legacy keys, and loads CLI profiles

"""Configuration management for Cognito developer authentication."""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from cognito_developer_auth.exceptions import ConfigurationError

DEFAULT_TOKEN_DURATION_SECONDS = 86400
DEFAULT_FEDERATION_PROVIDER_NAME = "cognito-identity.amazonaws.com"

# Checked in this order; the first offending field is reported
REQUIRED_FIELDS = ("identity_pool_id", "developer_provider_name")

# Option names accepted for compatibility with older configuration files
LEGACY_FIELD_NAMES = {
    "IdentityPoolId": "identity_pool_id",
    "identityPoolId": "identity_pool_id",
    "DeveloperName": "developer_provider_name",
    "developerProviderName": "developer_provider_name",
    "developer_name": "developer_provider_name",
    "TokenDuration": "token_duration_seconds",
    "tokenDurationSeconds": "token_duration_seconds",
    "token_duration": "token_duration_seconds",
    "Federation": "federation_provider_name",
    "federationProviderName": "federation_provider_name",
    "federation": "federation_provider_name",
    "accessKeyId": "access_key_id",
    "aws_access_key_id": "access_key_id",
    "secretAccessKey": "secret_access_key",
    "aws_secret_access_key": "secret_access_key",
    "sessionToken": "session_token",
    "aws_session_token": "session_token",
    "aws_region": "region",
    "endpoint": "endpoint_url",
}


def find_missing_field(options: dict[str, Any], required) -> str | None:
    """Return the first required field absent from options, if any."""
    for name in required:
        if name not in options:
            return name
    return None


def find_empty_field(options: dict[str, Any], required) -> str | None:
    """Return the first required field present in options with a falsy value, if any."""
    for name in required:
        if name in options and not options[name]:
            return name
    return None


def find_invalid_field(options: dict[str, Any], required=REQUIRED_FIELDS) -> str | None:
    """Return the field that makes options unusable, or None.

    Missing fields are reported before empty ones.
    """
    return find_missing_field(options, required) or find_empty_field(options, required)


def validate_options(options: dict[str, Any], required=REQUIRED_FIELDS) -> None:
    """Raise ConfigurationError naming the first missing or empty required field."""
    invalid = find_invalid_field(options, required)
    if invalid:
        raise ConfigurationError(invalid)


def region_from_identity_pool_id(identity_pool_id: str) -> str | None:
    """Extract the region prefix from an identity pool id such as 'us-east-1:uuid'."""
    region, sep, _ = identity_pool_id.partition(":")
    return region if sep and region else None


@dataclass(frozen=True)
class ClientConfig:
    """Settings for a developer-authenticated identity pool client."""

    identity_pool_id: str  # "{region}:{uuid}"
    developer_provider_name: str  # e.g. "com.example.app"
    token_duration_seconds: int = DEFAULT_TOKEN_DURATION_SECONDS
    federation_provider_name: str = DEFAULT_FEDERATION_PROVIDER_NAME
    region: str | None = None

    # Credential selection, forwarded to the boto3 session
    profile: str | None = None
    access_key_id: str | None = None
    secret_access_key: str | None = None
    session_token: str | None = None

    endpoint_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def session_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for boto3.Session built from the credential selectors."""
        kwargs = {
            "profile_name": self.profile,
            "aws_access_key_id": self.access_key_id,
            "aws_secret_access_key": self.secret_access_key,
            "aws_session_token": self.session_token,
            "region_name": self.region,
        }
        return {key: value for key, value in kwargs.items() if value is not None}

    @classmethod
    def from_dict(cls, options: dict[str, Any]) -> "ClientConfig":
        """Create config from a dictionary of options.

        The caller's dictionary is never modified. Legacy option names are
        mapped to their current names before validation; when both a legacy
        and a current name are given, the current name wins.
        """
        data = {}
        for key, value in options.items():
            name = LEGACY_FIELD_NAMES.get(key, key)
            if name != key and name in options:
                continue
            data[name] = value

        validate_options(data)

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(unknown[0], f"Unknown configuration option: {unknown[0]}")

        if data.get("token_duration_seconds") is None:
            data["token_duration_seconds"] = DEFAULT_TOKEN_DURATION_SECONDS
        duration = data["token_duration_seconds"]
        if isinstance(duration, bool) or not isinstance(duration, int) or duration <= 0:
            raise ConfigurationError(
                "token_duration_seconds",
                f"token_duration_seconds must be a positive integer, got {duration!r}",
            )

        if not data.get("federation_provider_name"):
            data["federation_provider_name"] = DEFAULT_FEDERATION_PROVIDER_NAME

        if not data.get("region"):
            data["region"] = region_from_identity_pool_id(data["identity_pool_id"])

        return cls(**data)


class ConfigFile:
    """Named configuration profiles stored as JSON for the command line tool."""

    DEFAULT_PATH = Path.home() / ".cognito-dev-auth" / "config.json"

    def __init__(self, path: Path | None = None):
        self.path = Path(path) if path else self.DEFAULT_PATH
        self.profiles: dict[str, dict[str, Any]] = {}
        self.default_profile: str | None = None

    @classmethod
    def load(cls, path: Path | None = None) -> "ConfigFile":
        """Load profiles from file; a missing file yields an empty configuration."""
        config = cls(path)

        if config.path.exists():
            with open(config.path) as f:
                data = json.load(f)

            config.profiles = dict(data.get("profiles", {}))
            config.default_profile = data.get("default_profile")

        return config

    def save(self) -> None:
        """Save profiles to file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "version": "1.0",
            "default_profile": self.default_profile,
            "profiles": self.profiles,
        }

        with open(self.path, "w") as f:
            json.dump(data, f, indent=2)

    def get_profile(self, name: str | None = None) -> dict[str, Any]:
        """Get a profile's options by name, or the default profile's options."""
        name = name or self.default_profile
        if not name:
            return {}
        if name not in self.profiles:
            raise ConfigurationError("profile", f"Profile '{name}' not found in {self.path}")
        return dict(self.profiles[name])
