"""Exception hierarchy for jsondocs.

Every failure is synchronous and leaves the registry untouched, so callers
can catch any of these and carry on.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._kinds import ValueKind
    from ._types import FieldName, Handle, Namespace

__all__ = [
    "DuplicateKeyError",
    "FieldError",
    "HandleAlreadyExistsError",
    "HandleError",
    "HandleNotFoundError",
    "InvalidValueError",
    "JSONDocsError",
    "KeyNotFoundError",
    "LockError",
]


class JSONDocsError(Exception):
    """Base exception for all jsondocs errors."""


class HandleError(JSONDocsError):
    """Base exception for errors about a document handle.

    Attributes:
        handle: The document handle the operation referenced.
    """

    handle: "Handle"

    def __init__(self, message: str, handle: "Handle") -> None:
        super().__init__(message)
        self.handle = handle


class HandleNotFoundError(HandleError, KeyError):
    """No live document is registered under the handle."""

    def __init__(self, handle: "Handle") -> None:
        msg = f"document handle {handle!r} not found"
        super().__init__(msg, handle)

    def __str__(self) -> str:
        return str(self.args[0])


class HandleAlreadyExistsError(HandleError):
    """A document is already registered under the handle."""

    def __init__(self, handle: "Handle") -> None:
        msg = f"document handle {handle!r} already exists"
        super().__init__(msg, handle)


class FieldError(JSONDocsError):
    """Base exception for errors about a field within a document.

    Attributes:
        handle: The handle of the document holding the field.
        key: The field name.
        namespace: Either "scalar" or "array".
    """

    handle: "Handle"
    key: "FieldName"
    namespace: "Namespace"

    def __init__(
        self,
        message: str,
        handle: "Handle",
        key: "FieldName",
        namespace: "Namespace",
    ) -> None:
        super().__init__(message)
        self.handle = handle
        self.key = key
        self.namespace = namespace


class KeyNotFoundError(FieldError, KeyError):
    """The field name is absent from the relevant namespace."""

    def __init__(
        self, handle: "Handle", key: "FieldName", namespace: "Namespace"
    ) -> None:
        msg = f"{namespace} field {key!r} not found in document {handle!r}"
        super().__init__(msg, handle, key, namespace)

    def __str__(self) -> str:
        return str(self.args[0])


class DuplicateKeyError(FieldError):
    """The field name is already present in the relevant namespace."""

    def __init__(
        self, handle: "Handle", key: "FieldName", namespace: "Namespace"
    ) -> None:
        msg = f"{namespace} field {key!r} already exists in document {handle!r}"
        super().__init__(msg, handle, key, namespace)


class InvalidValueError(JSONDocsError):
    """The value text does not satisfy the requested kind.

    Attributes:
        value: The rejected text.
        kind: The requested kind, as passed by the caller. Unrecognized
            kinds are kept as given.
    """

    value: str
    kind: "ValueKind | object"

    def __init__(self, value: str, kind: "ValueKind | object") -> None:
        kind_name = getattr(kind, "label", None) or f"kind {kind!r}"
        msg = f"value {value!r} is not a valid {kind_name}"
        super().__init__(msg)
        self.value = value
        self.kind = kind


class LockError(JSONDocsError):
    """The registry lock could not be acquired within the timeout."""
