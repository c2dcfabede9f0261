"""Root of a file tree.

There is no process-wide root: create a :class:`RootNode` and hand it to
the code that builds or searches the tree.
"""

from __future__ import annotations

from typing import Any

from compound_names.constants import PATH_DELIMITER
from compound_names.contracts import check_invariant, require
from compound_names.grammar import Name, parse_name

from .directory import Directory


class RootNode(Directory):
    """Directory with an empty base name that is its own parent."""

    def __init__(self) -> None:
        super().__init__("", self)

    def _initialize(self, parent: Directory) -> None:
        # the root never registers with a parent
        return None

    def _assert_base_name_precondition(self, base_name: Any) -> None:
        require(isinstance(base_name, str), "Base name must be a string")

    def _assert_invariants(self) -> None:
        check_invariant(isinstance(self._base_name, str), "Root has no base name")

    def get_full_name(self) -> Name:
        # one empty component, so children render as "/child"
        return parse_name("", PATH_DELIMITER)

    def move(self, to: Directory) -> None:
        require(False, "The root node cannot be moved")


__all__ = ["RootNode"]
