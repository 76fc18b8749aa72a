"""Tests for common.errors module."""

import pytest

from redmine_cli.common.errors import (
    APIError,
    ConfigurationError,
    InvalidArgumentTypeError,
    InvalidOptionError,
    RedmineCliError,
    TooFewArgumentsError,
    TooManyArgumentsError,
    ValidationError,
)


class TestExceptionHierarchy:
    """Test custom exception hierarchy."""

    def test_base_exception(self):
        """Test RedmineCliError base exception."""
        error = RedmineCliError("Test error")
        assert str(error) == "Test error"
        assert isinstance(error, Exception)

    @pytest.mark.parametrize("error_class", [ConfigurationError, APIError, ValidationError])
    def test_errors_inherit_from_base(self, error_class):
        error = error_class("Some error")
        assert str(error) == "Some error"
        assert isinstance(error, RedmineCliError)

    def test_exception_raising(self):
        """Test exceptions can be raised and caught through the base class."""
        with pytest.raises(RedmineCliError) as exc_info:
            raise APIError("Test API error")
        assert str(exc_info.value) == "Test API error"


class TestCommandErrors:
    """Test structured command validation errors."""

    def test_too_few_arguments(self):
        error = TooFewArgumentsError("issue", 1, 0)
        assert isinstance(error, ValidationError)
        assert (error.command_name, error.required, error.supplied) == ("issue", 1, 0)
        assert str(error) == "Command 'issue' requires 1 argument(s). Found 0."

    def test_too_many_arguments(self):
        error = TooManyArgumentsError("open", 1, 2)
        assert isinstance(error, ValidationError)
        assert (error.command_name, error.maximum, error.supplied) == ("open", 1, 2)
        assert str(error) == "Command 'open' accepts up to 1 argument(s). Found 2."

    def test_invalid_option(self):
        error = InvalidOptionError("--bogus=x")
        assert isinstance(error, ValidationError)
        assert error.token == "--bogus=x"
        assert str(error) == "'--bogus=x' is not a valid option."

    def test_invalid_argument_type(self):
        error = InvalidArgumentTypeError("abc", "number")
        assert isinstance(error, ValidationError)
        assert (error.raw_value, error.expected_kind) == ("abc", "number")
        assert str(error) == "Supplied argument 'abc' is not of type number."

    def test_argument_type_error_is_distinct_from_cardinality_errors(self):
        error = InvalidArgumentTypeError("abc", "number")
        assert not isinstance(error, (TooFewArgumentsError, TooManyArgumentsError, InvalidOptionError))
