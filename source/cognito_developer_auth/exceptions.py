# ABOUTME: Exception classes for developer-authenticated identity operations
# ABOUTME: Configuration and argument failures raised before any remote call

"""Custom exceptions for Cognito developer authentication."""


class DeveloperAuthError(Exception):
    """Base exception for all developer authentication failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ConfigurationError(DeveloperAuthError, ValueError):
    """Raised when a required configuration field is missing or empty."""

    def __init__(self, field_name: str, message: str = None):
        super().__init__(message or f"Argument Error - Missing or Empty Property: {field_name}")
        self.field_name = field_name


class ArgumentError(DeveloperAuthError, ValueError):
    """Raised when a call argument is missing or empty."""

    def __init__(self, argument: str, message: str = None):
        super().__init__(message or f"Argument Error - Must have {argument}")
        self.argument = argument
