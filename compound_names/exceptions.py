"""Error kinds raised by compound names and the file tree built on them."""

from __future__ import annotations


class CompoundNameError(Exception):
    """Base class for all errors raised by this package."""


class InvalidArgumentError(CompoundNameError, ValueError):
    """Raised when a caller violates a precondition (bad index, delimiter or component).

    Recoverable: validate the input and call again.
    """


class PostconditionViolation(CompoundNameError, AssertionError):
    """Raised when a computed result fails its own postcondition.

    Signals a defect in this package, never a usage error. Do not catch.
    """


class InvalidStateError(CompoundNameError, RuntimeError):
    """Raised when an object is used while in an invalid state (e.g. a broken link)."""


__all__ = [
    "CompoundNameError",
    "InvalidArgumentError",
    "PostconditionViolation",
    "InvalidStateError",
]
