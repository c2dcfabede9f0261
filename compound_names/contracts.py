"""Precondition and postcondition checks.

Preconditions guard the public API and raise :class:`InvalidArgumentError`
before any work is done. Postconditions run on a freshly computed result and
raise :class:`PostconditionViolation` before the result reaches the caller.
"""

from __future__ import annotations

from typing import Any

from .constants import ESCAPE_CHARACTER
from .exceptions import InvalidArgumentError, InvalidStateError, PostconditionViolation
from .log import logger


def require(condition: bool, message: str) -> None:
    if not condition:
        raise InvalidArgumentError(message)


def require_delimiter(delimiter: Any) -> str:
    """Return ``delimiter`` if it is a single character other than the escape character."""
    require(isinstance(delimiter, str), "Delimiter must be a string")
    require(len(delimiter) == 1, "Delimiter must be a single character")
    require(
        delimiter != ESCAPE_CHARACTER, "Delimiter cannot be the escape character"
    )
    return delimiter


def require_index(index: Any, upper: int) -> int:
    """Check ``0 <= index <= upper``.

    Pass ``count - 1`` as ``upper`` for read/replace/remove and ``count`` for
    insertion.
    """
    # bool is an int subclass but never a meaningful index
    require(
        isinstance(index, int) and not isinstance(index, bool),
        f"Index must be an integer, got {type(index).__name__}",
    )
    require(0 <= index <= upper, f"Index {index} out of bounds (0..{upper})")
    return index


def require_component(component: Any) -> str:
    require(component is not None, "Component cannot be None")
    require(
        isinstance(component, str),
        f"Component must be a string, got {type(component).__name__}",
    )
    return component


def require_source(source: Any) -> str:
    require(source is not None, "Source cannot be None")
    require(
        isinstance(source, str),
        f"Source must be a string, got {type(source).__name__}",
    )
    return source


def ensure(condition: bool, message: str) -> None:
    if not condition:
        logger.error("Postcondition violated: %s", message)
        raise PostconditionViolation(message)


def check_invariant(condition: bool, message: str) -> None:
    if not condition:
        raise InvalidStateError(message)


__all__ = [
    "require",
    "require_delimiter",
    "require_index",
    "require_component",
    "require_source",
    "ensure",
    "check_invariant",
]
