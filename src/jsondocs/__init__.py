"""An in-memory registry of flat JSON-like documents with typed scalar fields."""

import logging
from importlib.metadata import version

from ._document import Document
from ._exceptions import (
    DuplicateKeyError,
    FieldError,
    HandleAlreadyExistsError,
    HandleError,
    HandleNotFoundError,
    InvalidValueError,
    JSONDocsError,
    KeyNotFoundError,
    LockError,
)
from ._kinds import ValueKind, is_valid_value, validate_value
from ._registry import Registry
from ._render import render_document
from ._status import (
    CreateStatus,
    FieldStatus,
    HandleStatus,
    KeyStatus,
    StatusCodeRegistry,
    status_for,
)

__version__ = version("jsondocs")

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CreateStatus",
    "Document",
    "DuplicateKeyError",
    "FieldError",
    "FieldStatus",
    "HandleAlreadyExistsError",
    "HandleError",
    "HandleNotFoundError",
    "HandleStatus",
    "InvalidValueError",
    "JSONDocsError",
    "KeyNotFoundError",
    "KeyStatus",
    "LockError",
    "Registry",
    "StatusCodeRegistry",
    "ValueKind",
    "__version__",
    "is_valid_value",
    "render_document",
    "status_for",
    "validate_value",
]
