"""Shared fixtures for unit tests."""

from typing import TYPE_CHECKING

import pytest

from jsondocs import Document, Registry, ValueKind

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence


@pytest.fixture
def registry() -> Registry:
    """Provide a fresh, empty Registry for each test."""
    return Registry()


@pytest.fixture
def make_registry() -> "Callable[..., Registry]":
    """Factory fixture for creating Registry instances with documents.

    Returns:
        A callable that creates a Registry and registers the given handles.

    Example:
        def test_two_documents(make_registry) -> None:
            registry = make_registry(handles=[1, 2])
            assert registry.handles() == [1, 2]
    """

    def create_registry(
        *,
        handles: "Sequence[int]" = (),
        lock_timeout: float | None = None,
    ) -> Registry:
        registry = Registry(lock_timeout=lock_timeout)
        for handle in handles:
            _ = registry.create(handle)
        return registry

    return create_registry


@pytest.fixture
def make_document() -> "Callable[..., Document]":
    """Factory fixture for creating pre-populated Document instances.

    Scalar fields are added as (value, kind) pairs so they go through
    validation; arrays are added as given.

    Example:
        def test_populated(make_document) -> None:
            doc = make_document(
                fields={"age": ("25", ValueKind.NUMBER)},
                arrays={"tags": ["a", "b"]},
            )
            assert doc["age"] == "25"
    """

    def create_document(
        *,
        handle: int = 1,
        fields: "Mapping[str, tuple[str, ValueKind]] | None" = None,
        arrays: "Mapping[str, Sequence[str]] | None" = None,
    ) -> Document:
        document = Document(handle)
        for key, (value, kind) in (fields or {}).items():
            document.add_field(key, value, kind)
        for key, elements in (arrays or {}).items():
            document.add_array(key, elements)
        return document

    return create_document
