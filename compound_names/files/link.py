"""Link node delegating name operations to its target."""

from __future__ import annotations

from compound_names.contracts import check_invariant, require

from .directory import Directory
from .node import Node


class Link(Node):
    def __init__(
        self, base_name: str, parent: Directory, target: Node | None = None
    ) -> None:
        super().__init__(base_name, parent)
        self._target: Node | None = None
        if target is not None:
            self.set_target_node(target)

    def get_target_node(self) -> Node | None:
        return self._target

    def set_target_node(self, target: Node) -> None:
        require(target is not None, "Link target cannot be None")
        require(target is not self, "A link cannot target itself")
        self._target = target

    def get_base_name(self) -> str:
        return self._ensure_target_node().get_base_name()

    def rename(self, base_name: str) -> None:
        self._ensure_target_node().rename(base_name)

    def _ensure_target_node(self) -> Node:
        check_invariant(
            self._target is not None, "Link does not point to a target node"
        )
        return self._target  # type: ignore[return-value]


__all__ = ["Link"]
