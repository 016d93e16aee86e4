"""Integer status-code API.

StatusCodeRegistry wraps a Registry and reports outcomes with the small
per-operation integer codes that existing callers expect, instead of
raising. Zero always means success; the meaning of nonzero codes depends
on the operation family.
"""

from enum import IntEnum
from typing import TYPE_CHECKING, ClassVar, Final

from ._exceptions import (
    DuplicateKeyError,
    HandleAlreadyExistsError,
    HandleNotFoundError,
    InvalidValueError,
    JSONDocsError,
    KeyNotFoundError,
    LockError,
)
from ._registry import Registry

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from ._kinds import ValueKind
    from ._types import FieldName, FieldValue, Handle

__all__ = [
    "CreateStatus",
    "FieldStatus",
    "HandleStatus",
    "KeyStatus",
    "StatusCodeRegistry",
    "status_for",
]


class CreateStatus(IntEnum):
    """Codes returned by create."""

    OK = 0
    ALREADY_EXISTS = 1


class FieldStatus(IntEnum):
    """Codes returned by add_field and modify_field.

    KEY_CONFLICT means the key already exists for add_field and is missing
    for modify_field.
    """

    OK = 0
    KEY_CONFLICT = 1
    HANDLE_NOT_FOUND = 2
    INVALID_VALUE = 3


class KeyStatus(IntEnum):
    """Codes returned by delete_field, add_array and delete_array."""

    OK = 0
    KEY_CONFLICT = 1
    HANDLE_NOT_FOUND = 2


class HandleStatus(IntEnum):
    """Codes returned by delete_document and replace_scalar_fields."""

    OK = 0
    NOT_FOUND = 1


_STATUS_FAMILIES: Final[dict[str, type[IntEnum]]] = {
    "create": CreateStatus,
    "add_field": FieldStatus,
    "modify_field": FieldStatus,
    "delete_field": KeyStatus,
    "add_array": KeyStatus,
    "delete_array": KeyStatus,
    "delete_document": HandleStatus,
    "replace_scalar_fields": HandleStatus,
}


def status_for(operation: str, error: "JSONDocsError | None") -> IntEnum:
    """Translate an operation outcome to its status code.

    Args:
        operation: The operation name, e.g. "add_field".
        error: The exception the operation raised, or None on success.

    Returns:
        The status code member for the operation's family.

    Raises:
        ValueError: If the operation is unknown.
        TypeError: If the error has no code in the operation's family.
    """
    family = _STATUS_FAMILIES.get(operation)
    if family is None:
        msg = f"unknown operation {operation!r}"
        raise ValueError(msg)
    if error is None:
        return family(0)
    if family is CreateStatus and isinstance(error, HandleAlreadyExistsError):
        return CreateStatus.ALREADY_EXISTS
    if family is HandleStatus and isinstance(error, HandleNotFoundError):
        return HandleStatus.NOT_FOUND
    if family is FieldStatus or family is KeyStatus:
        if isinstance(error, HandleNotFoundError):
            return family(2)
        if isinstance(error, (DuplicateKeyError, KeyNotFoundError)):
            return family(1)
        if family is FieldStatus and isinstance(error, InvalidValueError):
            return FieldStatus.INVALID_VALUE
    msg = f"{type(error).__name__} has no status code for {operation!r}"
    raise TypeError(msg) from error


class StatusCodeRegistry:
    """A Registry front end that returns status codes instead of raising.

    Example:
        >>> codes = StatusCodeRegistry()
        >>> codes.create(1)
        0
        >>> codes.create(1)
        1
        >>> codes.add_field(1, "age", "not_a_number", 1)
        3
    """

    __slots__: ClassVar[tuple[str, ...]] = ("_registry",)

    _registry: Registry

    def __init__(self, registry: Registry | None = None) -> None:
        """Wrap a registry.

        Args:
            registry: The registry to operate on. A new one is created if
                omitted.
        """
        self._registry = registry if registry is not None else Registry()

    @property
    def registry(self) -> Registry:
        """The wrapped registry."""
        return self._registry

    def _call(self, operation: str, method: str, *args: object) -> int:
        try:
            getattr(self._registry, method)(*args)
        except LockError:
            raise
        except JSONDocsError as e:
            return int(status_for(operation, e))
        return 0

    def create(self, handle: "Handle") -> int:
        """Returns 0 on success, 1 if the handle already exists."""
        return self._call("create", "create", handle)

    def add_field(
        self,
        handle: "Handle",
        key: "FieldName",
        value: "FieldValue",
        kind: "ValueKind | int",
    ) -> int:
        """Returns 0, 1 duplicate key, 2 handle not found, 3 invalid value."""
        return self._call("add_field", "add_field", handle, key, value, kind)

    def modify_field(
        self,
        handle: "Handle",
        key: "FieldName",
        value: "FieldValue",
        kind: "ValueKind | int",
    ) -> int:
        """Returns 0, 1 key not found, 2 handle not found, 3 invalid value."""
        return self._call("modify_field", "modify_field", handle, key, value, kind)

    def delete_field(self, handle: "Handle", key: "FieldName") -> int:
        """Returns 0, 1 key not found, 2 handle not found."""
        return self._call("delete_field", "delete_field", handle, key)

    def delete_document(self, handle: "Handle") -> int:
        """Returns 0, 1 handle not found."""
        return self._call("delete_document", "delete", handle)

    def get_field_value(self, handle: "Handle", key: "FieldName") -> str:
        """Returns the stored text, or an empty string on any miss."""
        return self._registry.get_field_value(handle, key)

    def replace_scalar_fields(
        self, handle: "Handle", fields: "Mapping[FieldName, FieldValue]"
    ) -> int:
        """Returns 0, 1 handle not found."""
        return self._call(
            "replace_scalar_fields", "replace_scalar_fields", handle, fields
        )

    def add_array(
        self, handle: "Handle", key: "FieldName", elements: "Iterable[str]"
    ) -> int:
        """Returns 0, 1 duplicate key, 2 handle not found."""
        return self._call("add_array", "add_array", handle, key, elements)

    def delete_array(self, handle: "Handle", key: "FieldName") -> int:
        """Returns 0, 1 key not found, 2 handle not found."""
        return self._call("delete_array", "delete_array", handle, key)

    def render(self, handle: "Handle") -> str:
        """Returns the rendered document, or an empty string if absent."""
        return self._registry.render(handle)
