"""Runtime helpers and types for compound names.

The escaping codec and parser live in :mod:`.support` as plain functions;
the immutable :class:`Name` model builds on them.
"""

from __future__ import annotations

from .model import Name, format_name, parse_name
from .support import (
    join_components,
    mask_component,
    split_components,
    unmask_component,
)

# Friendly aliases mirroring the codec vocabulary
mask = mask_component
unmask = unmask_component

__all__ = [
    "Name",
    "parse_name",
    "format_name",
    "mask_component",
    "unmask_component",
    "split_components",
    "join_components",
    "mask",
    "unmask",
]
