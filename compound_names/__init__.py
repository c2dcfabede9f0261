import importlib.metadata

from compound_names.exceptions import (
    CompoundNameError,
    InvalidArgumentError,
    InvalidStateError,
    PostconditionViolation,
)
from compound_names.grammar import Name, format_name, parse_name

# Falls back to "0.0.0" when running from a source tree without metadata.
try:
    __version__ = importlib.metadata.version("compound-names")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "Name",
    "parse_name",
    "format_name",
    "CompoundNameError",
    "InvalidArgumentError",
    "InvalidStateError",
    "PostconditionViolation",
]
