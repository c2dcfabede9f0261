"""Minimal file tree labelled with compound names."""

from __future__ import annotations

from .directory import Directory
from .link import Link
from .node import File, Node
from .root import RootNode

__all__ = ["Node", "File", "Directory", "Link", "RootNode"]
