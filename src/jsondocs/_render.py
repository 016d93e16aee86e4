"""Rendering documents to JSON-like text.

The output layout is fixed for compatibility with existing consumers:

    {
      "age": 25,
      "name": "John",
      "tags": ["a", "b", "c"],
    }

Every entry, including the last, ends with a comma, so the default output
is not strictly valid JSON. Pass ``trailing_comma=False`` to drop the comma
after the final entry.
"""

from typing import TYPE_CHECKING

from ._constants import (
    CLOSE_BRACE,
    ELEMENT_SEPARATOR,
    ENTRY_TERMINATOR,
    INDENT,
    OPEN_BRACE,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._document import Document
    from ._types import FieldName

__all__ = ["render_document"]


def _quote(text: str) -> str:
    # Emitted verbatim; no escaping.
    return f'"{text}"'


def _render_array(elements: "Iterable[str]") -> str:
    return "[" + ELEMENT_SEPARATOR.join(_quote(e) for e in elements) + "]"


def _entry(key: "FieldName", rendered_value: str) -> str:
    return f"{INDENT}{_quote(key)}: {rendered_value}"


def render_document(document: "Document", *, trailing_comma: bool = True) -> str:
    """Render a document as a brace-delimited block.

    Scalar fields come first, then array fields, each group in insertion
    order. Scalar values are emitted exactly as stored. Array elements are
    always wrapped in double quotes.

    Args:
        document: The document to render.
        trailing_comma: Whether the final entry keeps its comma.

    Returns:
        The rendered text. An empty document renders as ``"{\\n}"``.
    """
    entries = [_entry(key, value) for key, value in document.items()]
    entries.extend(
        _entry(key, _render_array(elements)) for key, elements in document.arrays()
    )

    lines = [OPEN_BRACE]
    last = len(entries) - 1
    for index, entry in enumerate(entries):
        if trailing_comma or index != last:
            entry += ENTRY_TERMINATOR
        lines.append(entry)
    lines.append(CLOSE_BRACE)
    return "\n".join(lines)
