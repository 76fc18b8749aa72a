"""Command framework: positional arguments, ``--name=value`` options and their validation.

Every concrete command declares an ordered list of :class:`Argument` slots and a
list of :class:`Option` modifiers. :meth:`Command.process` splits the raw tokens
typed after the command name into both groups, validates them and assigns the
typed values, failing fast with a :class:`~redmine_cli.common.errors.ValidationError`
subclass on the first problem.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from rich.console import Console
from rich.table import Table
from rich.text import Text

from redmine_cli.common.errors import (
    InvalidArgumentTypeError,
    InvalidOptionError,
    TooFewArgumentsError,
    TooManyArgumentsError,
)

logger = logging.getLogger(__name__)

OPTION_PREFIX = "--"

_NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+")
# Redmine ids are 32-bit signed integers
NUMBER_MIN = -(2**31)
NUMBER_MAX = 2**31 - 1
_OPTION_PATTERN = re.compile(r'--(?P<name>[a-z]+)=(?P<value>[A-Za-z0-9 ]+|"[A-Za-z0-9 ]+")')


class ArgumentType(Enum):
    """Closed set of value kinds a positional argument can hold."""

    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"

    def convert(self, raw: str) -> str | int | bool:
        """Convert a raw token into a value of this kind.

        Numbers are plain decimal literals with an optional sign, limited to
        the 32-bit signed range.

        Raises:
            InvalidArgumentTypeError: If ``raw`` is not a literal of this kind
        """
        if self is ArgumentType.NUMBER:
            # at most 10 significant digits before calling int()
            if _NUMBER_PATTERN.fullmatch(raw) and len(raw.lstrip("+-").lstrip("0")) <= 10:
                number = int(raw)
                if NUMBER_MIN <= number <= NUMBER_MAX:
                    return number
            raise InvalidArgumentTypeError(raw, self.value)

        if self is ArgumentType.BOOLEAN:
            lowered = raw.lower()
            if lowered not in ("true", "false"):
                raise InvalidArgumentTypeError(raw, self.value)
            return lowered == "true"

        return raw


@dataclass
class Argument:
    """A positional value slot of a command."""

    name: str
    description: str
    optional: bool = False
    kind: ArgumentType = ArgumentType.TEXT
    value: str | int | bool | None = field(default=None, init=False, compare=False)

    @classmethod
    def text(cls, name: str, description: str, optional: bool = False) -> Argument:
        return cls(name, description, optional, ArgumentType.TEXT)

    @classmethod
    def number(cls, name: str, description: str, optional: bool = False) -> Argument:
        return cls(name, description, optional, ArgumentType.NUMBER)

    @classmethod
    def boolean(cls, name: str, description: str, optional: bool = False) -> Argument:
        return cls(name, description, optional, ArgumentType.BOOLEAN)

    @property
    def has_value(self) -> bool:
        return self.value is not None

    def set_value_or_throw(self, raw: str) -> None:
        """Convert ``raw`` with the argument's kind and store it.

        The previous value is kept when conversion fails.
        """
        self.value = self.kind.convert(raw)

    def reset(self) -> None:
        self.value = None


class Option:
    """A named, order-independent ``--name=value`` modifier.

    Two options are equal when their names are equal. The extracted value keeps
    surrounding double quotes; consumers unquote it where they need to.
    """

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description
        self.value: str | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Option(name={self.name!r}, value={self.value!r})"

    @staticmethod
    def is_option(token: str) -> bool:
        """Return True if ``token`` matches ``--name=value`` or ``--name="quoted value"``."""
        return _OPTION_PATTERN.fullmatch(token) is not None

    @staticmethod
    def parse_name(token: str) -> str:
        return Option._match(token).group("name")

    @staticmethod
    def parse_value(token: str) -> str:
        return Option._match(token).group("value")

    @staticmethod
    def _match(token: str) -> re.Match[str]:
        match = _OPTION_PATTERN.fullmatch(token)
        if match is None:
            raise ValueError(f"'{token}' does not match the option grammar --name=value")
        return match


class Command:
    """Base class of every CLI command.

    Subclasses declare their schema in ``__init__`` and override :meth:`process`,
    calling ``super().process(tokens)`` first and reading the assigned argument
    and option values afterwards. Values are overwritten on every call, so an
    instance serves one invocation at a time.
    """

    def __init__(
        self,
        name: str,
        description: str,
        long_description: str = "",
        arguments: Sequence[Argument] = (),
        options: Sequence[Option] = (),
        console: Console | None = None,
    ):
        """Initialize the command schema.

        Args:
            name: Name the user types to invoke the command
            description: One-line description shown by ``help``
            long_description: Detailed description shown by ``help <command>``
            arguments: Positional arguments; optional ones must follow required ones
            options: Options with unique names
            console: Output sink for everything the command prints

        Raises:
            ValueError: If the schema breaks the ordering or uniqueness rules
        """
        self.name = name
        self.description = description
        self.long_description = long_description
        self.arguments = list(arguments)
        self.options = list(options)
        self.console = console or Console()

        self._check_schema()

    def _check_schema(self) -> None:
        seen_optional = False
        for argument in self.arguments:
            if argument.optional:
                seen_optional = True
            elif seen_optional:
                raise ValueError(
                    f"Command '{self.name}': required argument '{argument.name}' follows an optional one"
                )

        names = [option.name for option in self.options]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Command '{self.name}' declares duplicate options: {', '.join(duplicates)}")

    @property
    def required_arguments_count(self) -> int:
        return sum(1 for argument in self.arguments if not argument.optional)

    @property
    def usage(self) -> str:
        """Usage line such as ``update <id> <key=value> [key=value]``."""
        parts = [self.name]
        for argument in self.arguments:
            parts.append(f"[{argument.name}]" if argument.optional else f"<{argument.name}>")
        if self.options:
            parts.append("[options]")
        return " ".join(parts)

    def get_option(self, name: str) -> Option:
        for option in self.options:
            if option.name == name:
                return option
        raise KeyError(name)

    def process(self, tokens: Sequence[str]) -> None:
        """Validate ``tokens`` and assign them to the declared arguments and options.

        Args:
            tokens: Raw tokens typed after the command name

        Raises:
            TooFewArgumentsError: Fewer positional tokens than required arguments
            TooManyArgumentsError: More positional tokens than declared arguments
            InvalidOptionError: Malformed option token or undeclared option name
            InvalidArgumentTypeError: A positional token does not convert to its kind
        """
        supplied_arguments = [token for token in tokens if not token.startswith(OPTION_PREFIX)]
        supplied_options = [token for token in tokens if token.startswith(OPTION_PREFIX)]
        logger.debug(f"Processing '{self.name}': arguments={supplied_arguments} options={supplied_options}")

        self._validate_arguments(supplied_arguments)
        self._validate_options(supplied_options)

        self._reset_values()
        self._assign_arguments(supplied_arguments)
        self._assign_options(supplied_options)

    def _validate_arguments(self, supplied_arguments: list[str]) -> None:
        required = self.required_arguments_count
        maximum = len(self.arguments)
        supplied = len(supplied_arguments)

        if supplied < required:
            raise TooFewArgumentsError(self.name, required, supplied)
        if supplied > maximum:
            raise TooManyArgumentsError(self.name, maximum, supplied)

    def _validate_options(self, supplied_options: list[str]) -> None:
        available = {option.name for option in self.options}

        for token in supplied_options:
            if not Option.is_option(token) or Option.parse_name(token) not in available:
                raise InvalidOptionError(token)

    def _reset_values(self) -> None:
        for argument in self.arguments:
            argument.reset()
        for option in self.options:
            option.value = None

    def _assign_arguments(self, supplied_arguments: list[str]) -> None:
        for argument, raw in zip(self.arguments, supplied_arguments):
            argument.set_value_or_throw(raw)

    def _assign_options(self, supplied_options: list[str]) -> None:
        options = {option.name: option for option in self.options}

        for token in supplied_options:
            options[Option.parse_name(token)].value = Option.parse_value(token)

    # Output helpers

    def println(self, text: str = "", *args: object) -> None:
        """Print a line of plain text, %-formatted with ``args`` when given."""
        self.console.print(text % args if args else text, markup=False, highlight=False)

    def print_heading(self, heading: str) -> None:
        self.println(heading)
        self.println("¯" * len(heading))

    def print_table(self, rows: Sequence[Sequence[str]], header: Sequence[str] | None = None) -> None:
        table = Table(show_header=header is not None, header_style="bold cyan", box=None, pad_edge=False)

        column_count = len(header) if header is not None else max((len(row) for row in rows), default=0)
        for index in range(column_count):
            table.add_column(header[index] if header is not None else "")

        for row in rows:
            table.add_row(*(Text(str(cell)) for cell in row))

        self.console.print(table)
