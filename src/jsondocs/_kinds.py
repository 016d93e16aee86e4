"""Value kinds and the value validator.

Kinds drive validation only. A value is always stored as the text the
caller supplied; the kind used to accept it is not remembered.
"""

import re
from enum import IntEnum
from typing import TYPE_CHECKING, Final

from ._constants import (
    ARRAY_PATTERN,
    FALSE_LITERAL,
    NULL_LITERAL,
    NUMBER_PATTERN,
    STRING_PATTERN,
    TRUE_LITERAL,
)
from ._exceptions import InvalidValueError

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["ValueKind", "is_valid_value", "validate_value"]

_NUMBER_RE: Final = re.compile(NUMBER_PATTERN)
_STRING_RE: Final = re.compile(STRING_PATTERN)
_ARRAY_RE: Final = re.compile(ARRAY_PATTERN)


class ValueKind(IntEnum):
    """The five recognized value categories.

    The integer values are the kind numbers used by the status-code API.
    """

    NUMBER = 1
    STRING = 2
    BOOLEAN = 3
    ARRAY = 4
    NULL = 5

    @property
    def label(self) -> str:
        """Lowercase human-readable name, e.g. ``"number"``."""
        return self.name.lower()

    @classmethod
    def coerce(cls, kind: object) -> "ValueKind | None":
        """Convert a kind argument to a ValueKind.

        Args:
            kind: A ValueKind or a plain integer kind number.

        Returns:
            The matching ValueKind, or None if the argument does not name
            one of the five kinds. Booleans are never treated as numbers.
        """
        if isinstance(kind, cls):
            return kind
        if isinstance(kind, bool) or not isinstance(kind, int):
            return None
        try:
            return cls(kind)
        except ValueError:
            return None


def _is_number(value: str) -> bool:
    return _NUMBER_RE.fullmatch(value) is not None


def _is_string(value: str) -> bool:
    return _STRING_RE.fullmatch(value) is not None


def _is_boolean(value: str) -> bool:
    return value in (TRUE_LITERAL, FALSE_LITERAL)


def _is_array(value: str) -> bool:
    return _ARRAY_RE.fullmatch(value) is not None


def _is_null(value: str) -> bool:
    return value == NULL_LITERAL


_VALIDATORS: "Final[dict[ValueKind, Callable[[str], bool]]]" = {
    ValueKind.NUMBER: _is_number,
    ValueKind.STRING: _is_string,
    ValueKind.BOOLEAN: _is_boolean,
    ValueKind.ARRAY: _is_array,
    ValueKind.NULL: _is_null,
}


def is_valid_value(value: str, kind: "ValueKind | int") -> bool:
    """Check whether value text satisfies the requested kind.

    The check never normalizes: it only accepts or rejects.

    Args:
        value: The candidate text.
        kind: A ValueKind or its integer number. Anything else is rejected.

    Returns:
        True if the value is acceptable for the kind, False otherwise.
    """
    resolved = ValueKind.coerce(kind)
    if resolved is None or not isinstance(value, str):
        return False
    return _VALIDATORS[resolved](value)


def validate_value(value: str, kind: "ValueKind | int") -> None:
    """Validate value text against a kind.

    Args:
        value: The candidate text.
        kind: A ValueKind or its integer number.

    Raises:
        InvalidValueError: If the value does not satisfy the kind, or the
            kind is not recognized.
    """
    if not is_valid_value(value, kind):
        raise InvalidValueError(value, ValueKind.coerce(kind) or kind)
