"""SurfaceTree — host capabilities the probe needs from a foreign UI tree."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from pixelprobe.core.geometry import Point, Rect

# Nodes are opaque host handles (widgets, fake nodes in tests, ...)
Node = Any


class Bitmap(Protocol):
    """Decoded image borrowed from the host for the duration of a call.

    ``sample`` returns a 32-bit ARGB value, or ``None`` when the pixel is out
    of range or cannot be read.
    """

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def sample(self, x: int, y: int) -> int | None: ...


@dataclass(frozen=True)
class SurfaceCandidate:
    """A node under consideration during canvas discovery."""

    node: Node
    bounds: Rect
    is_leaf: bool
    is_visible: bool


class SurfaceTree(ABC):
    """Read-only view over a host's UI hierarchy.

    Subclasses adapt a concrete toolkit.  All geometry is in the node's own
    local coordinate space.
    """

    @abstractmethod
    def children(self, node: Node) -> Sequence[Node]:
        """Rendering children of *node*, in paint order."""

    @abstractmethod
    def parent(self, node: Node) -> Node | None:
        """Enclosing node, or ``None`` at the top of the tree."""

    @abstractmethod
    def bounds(self, node: Node) -> Rect:
        """Size of *node* as a rectangle anchored at its local origin.

        Negative sizes are clamped to zero by :class:`Rect`, so such nodes
        read as empty and are skipped by discovery.
        """

    @abstractmethod
    def is_visible(self, node: Node) -> bool: ...

    def is_leaf(self, node: Node) -> bool:
        return len(self.children(node)) == 0

    @abstractmethod
    def is_scrollable(self, node: Node) -> bool:
        """Whether *node* is a scrolling frame around some viewed content."""

    @abstractmethod
    def viewed_content(self, node: Node) -> Node | None:
        """The node being scrolled by the scrollable container *node*."""

    @abstractmethod
    def map_point(self, source: Node, point: Point, target: Node) -> Point:
        """Translate *point* from *source*'s local space into *target*'s."""

    def candidate(self, node: Node) -> SurfaceCandidate:
        return SurfaceCandidate(
            node=node,
            bounds=self.bounds(node),
            is_leaf=self.is_leaf(node),
            is_visible=self.is_visible(node),
        )
