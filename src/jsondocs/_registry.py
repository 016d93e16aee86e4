"""Document registry: the owner of every live document."""

import logging
import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING, ClassVar

from ._constants import DEFAULT_LOCK_TIMEOUT
from ._document import Document
from ._exceptions import HandleAlreadyExistsError, HandleNotFoundError, JSONDocsError
from ._lock import exclusive_lock
from ._render import render_document

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from ._kinds import ValueKind
    from ._types import FieldName, FieldValue, Handle

__all__ = ["Registry"]

logger = logging.getLogger(__name__)


class Registry:
    """An in-memory registry of documents keyed by caller-chosen handles.

    The registry is the sole owner of its documents: a document exists
    from create() until delete() and nothing else removes it. Every public
    operation runs under one registry-wide re-entrant lock, so a registry
    may be shared between threads. Documents returned by create() and
    document() are live and their own mutators bypass that lock.

    Write operations raise on failure and never leave partial changes.
    The read helpers get_field_value() and render() instead return an
    empty string when the handle or field is missing.

    Example:
        >>> registry = Registry()
        >>> _ = registry.create(1)
        >>> registry.add_field(1, "age", "25", ValueKind.NUMBER)
        >>> registry.get_field_value(1, "age")
        '25'
    """

    __slots__: ClassVar[tuple[str, ...]] = ("_documents", "_lock", "_lock_timeout")

    _documents: "dict[Handle, Document]"
    _lock: "threading.RLock"
    _lock_timeout: float | None

    def __init__(self, *, lock_timeout: float | None = DEFAULT_LOCK_TIMEOUT) -> None:
        """Create an empty registry.

        Args:
            lock_timeout: Maximum seconds an operation waits for the registry
                lock. None waits indefinitely.
        """
        self._documents = {}
        self._lock = threading.RLock()
        self._lock_timeout = lock_timeout

    @property
    def lock_timeout(self) -> float | None:
        """The lock acquisition timeout in seconds, or None."""
        return self._lock_timeout

    @contextmanager
    def locked(self) -> "Iterator[None]":
        """Hold the registry lock across several operations.

        Raises:
            LockError: If the lock cannot be acquired within the timeout.
        """
        with exclusive_lock(self._lock, self._lock_timeout):
            yield

    def _lookup(self, handle: "Handle") -> Document:
        try:
            return self._documents[handle]
        except KeyError:
            raise HandleNotFoundError(handle) from None

    # Document lifecycle

    def create(self, handle: "Handle") -> Document:
        """Create an empty document under a handle.

        Args:
            handle: The caller-chosen document handle.

        Returns:
            The new document.

        Raises:
            HandleAlreadyExistsError: If the handle is already in use.
        """
        with self.locked():
            if handle in self._documents:
                logger.debug("create rejected: handle %r already exists", handle)
                raise HandleAlreadyExistsError(handle)
            document = Document(handle)
            self._documents[handle] = document
            logger.debug("created document %r", handle)
            return document

    def delete(self, handle: "Handle") -> None:
        """Delete a document and all its fields.

        Raises:
            HandleNotFoundError: If the handle is not in use.
        """
        with self.locked():
            if self._documents.pop(handle, None) is None:
                logger.debug("delete rejected: handle %r not found", handle)
                raise HandleNotFoundError(handle)
            logger.debug("deleted document %r", handle)

    def document(self, handle: "Handle") -> Document:
        """Look up a document.

        The live document is returned. Its own mutators (add_field and the
        rest) do not take the registry lock, so callers sharing the
        registry between threads should mutate through the registry, or
        wrap direct document access in locked().

        Raises:
            HandleNotFoundError: If the handle is not in use.
        """
        with self.locked():
            return self._lookup(handle)

    def replace_scalar_fields(
        self, handle: "Handle", fields: "Mapping[FieldName, FieldValue]"
    ) -> None:
        """Replace every scalar field of a document with the given mapping.

        The new values are installed verbatim without type validation.

        Raises:
            HandleNotFoundError: If the handle is not in use.
        """
        with self.locked():
            self._dispatch(handle, "replace_scalar_fields", fields)

    # Scalar fields

    def add_field(
        self,
        handle: "Handle",
        key: "FieldName",
        value: "FieldValue",
        kind: "ValueKind | int",
    ) -> None:
        """Add a scalar field to a document.

        Raises:
            HandleNotFoundError: If the handle is not in use.
            DuplicateKeyError: If the field already exists.
            InvalidValueError: If the value does not satisfy the kind.
        """
        with self.locked():
            self._dispatch(handle, "add_field", key, value, kind)

    def modify_field(
        self,
        handle: "Handle",
        key: "FieldName",
        value: "FieldValue",
        kind: "ValueKind | int",
    ) -> None:
        """Overwrite a scalar field, validating against the given kind.

        Raises:
            HandleNotFoundError: If the handle is not in use.
            KeyNotFoundError: If the field does not exist.
            InvalidValueError: If the value does not satisfy the kind.
        """
        with self.locked():
            self._dispatch(handle, "modify_field", key, value, kind)

    def delete_field(self, handle: "Handle", key: "FieldName") -> None:
        """Remove a scalar field from a document.

        Raises:
            HandleNotFoundError: If the handle is not in use.
            KeyNotFoundError: If the field does not exist.
        """
        with self.locked():
            self._dispatch(handle, "delete_field", key)

    def get_field_value(
        self, handle: "Handle", key: "FieldName", default: str = ""
    ) -> str:
        """Get a scalar field's stored text.

        A missing handle, a missing field and a stored empty string all
        produce the same result. Use document(handle)[key] to tell them
        apart.

        Returns:
            The stored text, or default when the handle or field is missing.
        """
        with self.locked():
            document = self._documents.get(handle)
            if document is None:
                return default
            return document.get(key, default)

    # Array fields

    def add_array(
        self, handle: "Handle", key: "FieldName", elements: "Iterable[str]"
    ) -> None:
        """Add an array field to a document.

        Raises:
            HandleNotFoundError: If the handle is not in use.
            DuplicateKeyError: If the array field already exists.
        """
        with self.locked():
            self._dispatch(handle, "add_array", key, elements)

    def delete_array(self, handle: "Handle", key: "FieldName") -> None:
        """Remove an array field from a document.

        Raises:
            HandleNotFoundError: If the handle is not in use.
            KeyNotFoundError: If the array field does not exist.
        """
        with self.locked():
            self._dispatch(handle, "delete_array", key)

    # Rendering

    def render(self, handle: "Handle", *, trailing_comma: bool = True) -> str:
        """Render a document as JSON-like text.

        Args:
            handle: The document handle.
            trailing_comma: Whether the final entry keeps its comma.

        Returns:
            The rendered text, or an empty string if the handle is not in use.
        """
        with self.locked():
            document = self._documents.get(handle)
            if document is None:
                return ""
            return render_document(document, trailing_comma=trailing_comma)

    def _dispatch(self, handle: "Handle", operation: str, *args: object) -> None:
        try:
            document = self._lookup(handle)
            getattr(document, operation)(*args)
        except JSONDocsError as e:
            logger.debug("%s rejected on document %r: %s", operation, handle, e)
            raise

    # Registry-level reads

    def has(self, handle: "Handle") -> bool:
        """Check if a handle is in use."""
        with self.locked():
            return handle in self._documents

    def handles(self) -> "list[Handle]":
        """Get all live handles in ascending order."""
        with self.locked():
            return sorted(self._documents)

    def count(self) -> int:
        """Get the number of live documents."""
        with self.locked():
            return len(self._documents)

    def clear(self) -> None:
        """Delete every document."""
        with self.locked():
            self._documents.clear()
            logger.debug("cleared registry")

    def __getitem__(self, handle: "Handle") -> Document:
        return self.document(handle)

    def __contains__(self, handle: object) -> bool:
        if isinstance(handle, bool) or not isinstance(handle, int):
            return False
        return self.has(handle)

    def __iter__(self) -> "Iterator[Handle]":
        return iter(self.handles())

    def __len__(self) -> int:
        return self.count()

    def __repr__(self) -> str:
        return f"Registry(documents={len(self._documents)})"
