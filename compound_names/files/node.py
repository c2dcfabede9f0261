"""Base node of the file tree; every node is labelled with a base name."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from compound_names.contracts import check_invariant, require
from compound_names.grammar import Name

if TYPE_CHECKING:  # pragma: no cover
    from .directory import Directory


class Node:
    """A named entry below a parent directory.

    Construction registers the node with its parent, so a node is always
    reachable from the root that was passed in (directly or indirectly).
    """

    def __init__(self, base_name: str, parent: Directory) -> None:
        self._assert_base_name_precondition(base_name)
        require(parent is not None, "Parent node cannot be None")
        self._base_name = base_name
        self._parent: Directory = parent
        self._initialize(parent)

    def _initialize(self, parent: Directory) -> None:
        parent.add_child_node(self)

    # -- contract hooks ---------------------------------------------------
    def _assert_base_name_precondition(self, base_name: Any) -> None:
        require(
            isinstance(base_name, str) and base_name.strip() != "",
            "Base name must be a non-empty string",
        )

    def _assert_invariants(self) -> None:
        check_invariant(
            isinstance(self._base_name, str) and self._base_name.strip() != "",
            "Node has an invalid base name",
        )

    # -- accessors --------------------------------------------------------
    def get_base_name(self) -> str:
        return self._base_name

    def get_parent_node(self) -> Directory:
        return self._parent

    def rename(self, base_name: str) -> None:
        self._assert_base_name_precondition(base_name)
        self._base_name = base_name
        self._assert_invariants()

    def move(self, to: Directory) -> None:
        """Re-parent this node under ``to``; nothing changes if ``to`` is rejected."""
        from .directory import Directory

        require(isinstance(to, Directory), "Target of a move must be a directory")
        # walk up to the root; a node cannot move below itself
        ancestor = to
        while True:
            require(ancestor is not self, "Cannot move a node into itself or below it")
            parent = ancestor.get_parent_node()
            if parent is ancestor:
                break
            ancestor = parent
        self._parent.remove_child_node(self)
        to.add_child_node(self)
        self._parent = to

    def get_full_name(self) -> Name:
        """Parent's full name with this node's own label appended."""
        return self._parent.get_full_name().append(self._base_name)

    def find_nodes(self, base_name: str) -> set[Node]:
        """Return this node if its own label equals ``base_name``."""
        require(isinstance(base_name, str), "Base name must be a string")
        return {self} if self._base_name == base_name else set()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._base_name!r})"


class File(Node):
    """Leaf node."""


__all__ = ["Node", "File"]
