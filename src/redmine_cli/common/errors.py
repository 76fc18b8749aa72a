"""Custom exceptions for redmine-cli."""

from __future__ import annotations


class RedmineCliError(Exception):
    """Base exception for all redmine-cli errors."""

    pass


class ConfigurationError(RedmineCliError):
    """Raised when configuration is invalid or missing."""

    pass


class APIError(RedmineCliError):
    """Raised when a Redmine API call fails."""

    pass


class ValidationError(RedmineCliError):
    """Raised when user input fails validation."""

    pass


class TooFewArgumentsError(ValidationError):
    """Raised when a command receives fewer positional arguments than it requires."""

    MESSAGE = "Command '%s' requires %d argument(s). Found %d."

    def __init__(self, command_name: str, required: int, supplied: int):
        self.command_name = command_name
        self.required = required
        self.supplied = supplied
        super().__init__(self.MESSAGE % (command_name, required, supplied))


class TooManyArgumentsError(ValidationError):
    """Raised when a command receives more positional arguments than it declares."""

    MESSAGE = "Command '%s' accepts up to %d argument(s). Found %d."

    def __init__(self, command_name: str, maximum: int, supplied: int):
        self.command_name = command_name
        self.maximum = maximum
        self.supplied = supplied
        super().__init__(self.MESSAGE % (command_name, maximum, supplied))


class InvalidOptionError(ValidationError):
    """Raised for a malformed ``--name=value`` token or an undeclared option name."""

    MESSAGE = "'%s' is not a valid option."

    def __init__(self, token: str):
        self.token = token
        super().__init__(self.MESSAGE % token)


class InvalidArgumentTypeError(ValidationError):
    """Raised when a positional value cannot be converted to its declared kind."""

    MESSAGE = "Supplied argument '%s' is not of type %s."

    def __init__(self, raw_value: str, expected_kind: str):
        self.raw_value = raw_value
        self.expected_kind = expected_kind
        super().__init__(self.MESSAGE % (raw_value, expected_kind))
