"""Directory node holding a set of child nodes."""

from __future__ import annotations

from compound_names.contracts import require
from compound_names.grammar import Name

from .node import Node


class Directory(Node):
    def __init__(self, base_name: str, parent: Directory) -> None:
        self._child_nodes: set[Node] = set()
        super().__init__(base_name, parent)

    def get_child_nodes(self) -> frozenset[Node]:
        return frozenset(self._child_nodes)

    def has_child_node(self, child: Node) -> bool:
        return child in self._child_nodes

    def add_child_node(self, child: Node) -> None:
        require(child is not None, "Child node cannot be None")
        require(
            not self.has_child_node(child),
            "Cannot add child node: node is already present in this directory",
        )
        self._child_nodes.add(child)

    def remove_child_node(self, child: Node) -> None:
        require(
            self.has_child_node(child),
            "Cannot remove child node: node is not a child of this directory",
        )
        self._child_nodes.discard(child)

    def find_nodes(self, base_name: str) -> set[Node]:
        """Search this directory and, recursively, all its descendants."""
        result = super().find_nodes(base_name)
        for child in self._child_nodes:
            result |= child.find_nodes(base_name)
        return result

    def iter_descendants(self):
        for child in self._child_nodes:
            yield child
            if isinstance(child, Directory):
                yield from child.iter_descendants()

    def find_node(self, full_name: Name) -> Node | None:
        """Return the descendant whose full name equals ``full_name``."""
        require(isinstance(full_name, Name), "Full name must be a Name")
        for node in self.iter_descendants():
            if node.get_full_name() == full_name:
                return node
        return None


__all__ = ["Directory"]
