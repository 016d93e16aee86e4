"""Mixin class providing the read-only scalar field interface.

This module provides FieldsMixin, an abstract base class that implements
the read operations and the Mapping interface over a document's scalar
fields.
"""

from abc import ABC, ABCMeta, abstractmethod
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, ClassVar, cast, overload

if TYPE_CHECKING:
    from collections.abc import Callable

    from ._types import FieldName, FieldValue, ScalarFields

__all__ = ["FieldsMixin"]


class FieldsMixin(ABC):
    """Mixin providing a read-only Mapping over scalar fields.

    Subclasses must implement:
    - _get_fields(): Returns the dict[FieldName, FieldValue] to read from
    - _missing_field(key): Returns the exception raised for an absent key

    Iteration follows the order fields were installed.
    """

    __slots__: ClassVar[tuple[str, ...]] = ()

    @abstractmethod
    def _get_fields(self) -> "ScalarFields":
        """Return the scalar field dictionary to read from."""
        ...

    @abstractmethod
    def _missing_field(self, key: "FieldName") -> KeyError:
        """Return the exception to raise when a field is absent."""
        ...

    @overload
    def get(self, key: "FieldName") -> "FieldValue | None": ...  # pragma: no cover

    @overload
    def get(
        self, key: "FieldName", default: "FieldValue"
    ) -> "FieldValue": ...  # pragma: no cover

    @overload
    def get(
        self, key: "FieldName", default: None
    ) -> "FieldValue | None": ...  # pragma: no cover

    def get(
        self, key: "FieldName", default: "FieldValue | None" = None
    ) -> "FieldValue | None":
        """Get a scalar field value by name.

        Args:
            key: The field name.
            default: Value to return if the field is absent. Defaults to None.

        Returns:
            The stored text value if present, otherwise the default.
        """
        result = self._get_fields().get(key)
        if result is None:
            return default
        return result

    def has(self, key: "FieldName") -> bool:
        """Check if a scalar field exists.

        Args:
            key: The field name.

        Returns:
            True if the field exists, False otherwise.
        """
        return key in self._get_fields()

    def keys(self) -> "list[FieldName]":
        """Get all scalar field names in insertion order."""
        return list(self._get_fields())

    def values(self) -> "list[FieldValue]":
        """Get all scalar field values in insertion order."""
        return list(self._get_fields().values())

    def items(self) -> "list[tuple[FieldName, FieldValue]]":
        """Get all (name, value) pairs in insertion order."""
        return list(self._get_fields().items())

    def count(self) -> int:
        """Get the number of scalar fields."""
        return len(self._get_fields())

    def find(
        self,
        predicate: "Callable[[FieldName, FieldValue], bool]",
        *,
        limit: "int | None" = None,
    ) -> "list[tuple[FieldName, FieldValue]]":
        """Find scalar fields matching a predicate.

        Args:
            predicate: A function taking a field name and value and returning
                True if the pair should be included.
            limit: Maximum number of pairs to return.

        Returns:
            A list of matching (name, value) pairs, in insertion order.
        """
        results: list[tuple[FieldName, FieldValue]] = []
        for key, value in self._get_fields().items():
            if predicate(key, value):
                results.append((key, value))
                if limit is not None and len(results) >= limit:
                    break
        return results

    def __getitem__(self, key: "FieldName") -> "FieldValue":
        """Get a scalar field value by name.

        Raises:
            KeyNotFoundError: If the field does not exist.
        """
        fields = self._get_fields()
        if key not in fields:
            raise self._missing_field(key)
        return fields[key]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return key in self._get_fields()

    def __iter__(self) -> "Iterator[FieldName]":
        return iter(list(self._get_fields()))

    def __len__(self) -> int:
        return len(self._get_fields())


_ = cast("ABCMeta", cast("object", Mapping)).register(FieldsMixin)
