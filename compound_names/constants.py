"""Control characters and fixed parameters shared by the whole package."""

from __future__ import annotations

# The escape character is fixed; only the delimiter can be chosen per name.
ESCAPE_CHARACTER = "\\"
DEFAULT_DELIMITER = "."

# Delimiter used by the file tree when composing full path names.
PATH_DELIMITER = "/"

HASH_MULTIPLIER = 31
HASH_BITS = 32

LOG_LEVEL_ENV = "COMPOUND_NAMES_LOG_LEVEL"
DELIMITER_ENV = "COMPOUND_NAMES_DELIMITER"

__all__ = [
    "ESCAPE_CHARACTER",
    "DEFAULT_DELIMITER",
    "PATH_DELIMITER",
    "HASH_MULTIPLIER",
    "HASH_BITS",
    "LOG_LEVEL_ENV",
    "DELIMITER_ENV",
]
