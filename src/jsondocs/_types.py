"""Type aliases for jsondocs.

This module contains ONLY TypeAlias definitions for handles and field data.
It has no dependencies on other jsondocs modules so that _exceptions.py,
_kinds.py, _document.py and _registry.py can all import from it.
"""

from typing import Literal, TypeAlias

Handle: TypeAlias = int
"""A caller-chosen integer identifying a document within a registry."""

FieldName: TypeAlias = str
"""The name of a scalar or array field, unique within its namespace."""

FieldValue: TypeAlias = str
"""A scalar value in its original text form.

The text already carries any quoting or bracket syntax the caller supplied,
e.g. ``'25'``, ``'"John"'``, ``'[1, 2, 3]'``, ``'null'``.
"""

ScalarFields: TypeAlias = "dict[FieldName, FieldValue]"
"""Mapping of scalar field names to their text values."""

ArrayElements: TypeAlias = "tuple[str, ...]"
"""An ordered sequence of untyped string elements."""

ArrayFields: TypeAlias = "dict[FieldName, ArrayElements]"
"""Mapping of array field names to their elements."""

Namespace: TypeAlias = Literal["scalar", "array"]
"""Which of a document's two independent key namespaces a field lives in."""
