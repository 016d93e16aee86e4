"""Constants shared across jsondocs modules."""

from typing import Final

# Number: optional '-', digits, optional fraction. No exponent, no '+'.
NUMBER_PATTERN: Final = r"-?[0-9]+(?:\.[0-9]+)?"

# Interior text may not contain \n or \r.
STRING_PATTERN: Final = r'"[^\n\r]*"'
ARRAY_PATTERN: Final = r"\[[^\n\r]*\]"

TRUE_LITERAL: Final = "true"
FALSE_LITERAL: Final = "false"
NULL_LITERAL: Final = "null"

# Rendering
INDENT: Final = "  "
ENTRY_TERMINATOR: Final = ","
ELEMENT_SEPARATOR: Final = ", "
OPEN_BRACE: Final = "{"
CLOSE_BRACE: Final = "}"

# Namespaces
SCALAR_NAMESPACE: Final = "scalar"
ARRAY_NAMESPACE: Final = "array"

# Locking
DEFAULT_LOCK_TIMEOUT: Final[float | None] = None
