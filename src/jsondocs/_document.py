"""Document: a flat JSON-like object with scalar and array fields."""

import logging
from typing import TYPE_CHECKING, ClassVar

from ._constants import ARRAY_NAMESPACE, SCALAR_NAMESPACE
from ._exceptions import DuplicateKeyError, KeyNotFoundError
from ._kinds import validate_value
from ._mixin import FieldsMixin

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from ._kinds import ValueKind
    from ._types import (
        ArrayElements,
        ArrayFields,
        FieldName,
        FieldValue,
        Handle,
        ScalarFields,
    )

__all__ = ["Document"]

logger = logging.getLogger(__name__)


class Document(FieldsMixin):
    """A single document holding scalar fields and array fields.

    Scalar fields map a name to validated value text. Array fields map a
    name to an ordered sequence of untyped strings. The two namespaces are
    independent: a scalar and an array field may share a name.

    Documents are created by Registry.create() and are not thread-safe on
    their own; mutate them through the registry when sharing across threads.

    Reading the scalar fields works like a read-only mapping:

        >>> doc = Document(1)
        >>> doc.add_field("age", "25", ValueKind.NUMBER)
        >>> doc["age"]
        '25'
    """

    __slots__: ClassVar[tuple[str, ...]] = ("_arrays", "_handle", "_scalars")

    _handle: "Handle"
    _scalars: "ScalarFields"
    _arrays: "ArrayFields"

    def __init__(self, handle: "Handle") -> None:
        """Create an empty document.

        Args:
            handle: The handle this document is registered under. Used in
                error messages.
        """
        self._handle = handle
        self._scalars = {}
        self._arrays = {}

    @property
    def handle(self) -> "Handle":
        """The handle this document is registered under."""
        return self._handle

    def _get_fields(self) -> "ScalarFields":
        return self._scalars

    def _missing_field(self, key: "FieldName") -> KeyError:
        return KeyNotFoundError(self._handle, key, SCALAR_NAMESPACE)

    # Scalar fields

    def add_field(
        self, key: "FieldName", value: "FieldValue", kind: "ValueKind | int"
    ) -> None:
        """Add a new scalar field.

        Args:
            key: The field name. Must not already be a scalar field.
            value: The value text, including any quoting or brackets.
            kind: The kind the value must satisfy.

        Raises:
            DuplicateKeyError: If the field already exists.
            InvalidValueError: If the value does not satisfy the kind.
        """
        if key in self._scalars:
            raise DuplicateKeyError(self._handle, key, SCALAR_NAMESPACE)
        validate_value(value, kind)
        self._scalars[key] = value
        logger.debug("document %r: added field %r", self._handle, key)

    def modify_field(
        self, key: "FieldName", value: "FieldValue", kind: "ValueKind | int"
    ) -> None:
        """Overwrite an existing scalar field.

        The value is validated against the kind given here, whatever kind
        was used when the field was added.

        Raises:
            KeyNotFoundError: If the field does not exist.
            InvalidValueError: If the value does not satisfy the kind.
        """
        if key not in self._scalars:
            raise KeyNotFoundError(self._handle, key, SCALAR_NAMESPACE)
        validate_value(value, kind)
        self._scalars[key] = value
        logger.debug("document %r: modified field %r", self._handle, key)

    def delete_field(self, key: "FieldName") -> None:
        """Remove a scalar field.

        Raises:
            KeyNotFoundError: If the field does not exist.
        """
        try:
            del self._scalars[key]
        except KeyError:
            raise KeyNotFoundError(self._handle, key, SCALAR_NAMESPACE) from None
        logger.debug("document %r: deleted field %r", self._handle, key)

    def replace_scalar_fields(self, fields: "Mapping[FieldName, FieldValue]") -> None:
        """Discard every scalar field and install the given mapping verbatim.

        No validation is performed on this path. Array fields are untouched.

        Args:
            fields: The new scalar fields, in the order they should render.
        """
        replacement = dict(fields)
        self._scalars = replacement
        logger.debug(
            "document %r: replaced scalar fields (%d)", self._handle, len(replacement)
        )

    # Array fields

    def add_array(self, key: "FieldName", elements: "Iterable[str]") -> None:
        """Add a new array field.

        Elements are stored in order, duplicates included, without
        validation.

        Raises:
            DuplicateKeyError: If the array field already exists.
        """
        if key in self._arrays:
            raise DuplicateKeyError(self._handle, key, ARRAY_NAMESPACE)
        self._arrays[key] = tuple(elements)
        logger.debug("document %r: added array %r", self._handle, key)

    def delete_array(self, key: "FieldName") -> None:
        """Remove an array field.

        Raises:
            KeyNotFoundError: If the array field does not exist.
        """
        try:
            del self._arrays[key]
        except KeyError:
            raise KeyNotFoundError(self._handle, key, ARRAY_NAMESPACE) from None
        logger.debug("document %r: deleted array %r", self._handle, key)

    def get_array(self, key: "FieldName") -> "ArrayElements | None":
        """Get an array field's elements, or None if absent."""
        return self._arrays.get(key)

    def has_array(self, key: "FieldName") -> bool:
        """Check if an array field exists."""
        return key in self._arrays

    def arrays(self) -> "list[tuple[FieldName, ArrayElements]]":
        """Get all (name, elements) pairs in insertion order."""
        return list(self._arrays.items())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self._scalars == other._scalars and self._arrays == other._arrays

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Document(handle={self._handle!r}, fields={len(self._scalars)}, "
            f"arrays={len(self._arrays)})"
        )
