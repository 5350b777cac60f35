"""Canvas discovery — find the node that actually paints the bitmap.

The heuristic looks for the element whose size is a uniform scale of the
image: a canvas that renders an image at some zoom has the same scale factor
on both axes, while toolbars, frames and panels around it usually do not.
Leaves are preferred over the containers that merely clip them.
"""

from __future__ import annotations

import logging
from collections import deque

from pixelprobe.config.constants import (
    ANCESTOR_SEARCH_DEPTH,
    LEAF_BONUS,
    UNIFORMITY_THRESHOLD,
    UNIFORMITY_WEIGHT,
)
from pixelprobe.core.geometry import scale_factors
from pixelprobe.core.surface import Node, SurfaceCandidate, SurfaceTree

log = logging.getLogger(__name__)


def uniformity_score(width: float, height: float, target_width: int, target_height: int) -> float:
    """Return 1.0 when *width* x *height* is an exact uniform scale of the target.

    The score drops as the horizontal and vertical scale factors diverge and
    is never greater than 1.
    """
    zx, zy = scale_factors(width, height, target_width, target_height)
    return 1.0 - abs(zx - zy) / max(1.0, max(zx, zy))


def _candidate_score(
    candidate: SurfaceCandidate, target_width: int, target_height: int
) -> float | None:
    """Ranking score for *candidate*, or ``None`` if it does not qualify."""
    if not candidate.is_visible or candidate.bounds.is_empty:
        return None
    u = uniformity_score(
        candidate.bounds.width, candidate.bounds.height, target_width, target_height
    )
    if u <= UNIFORMITY_THRESHOLD:
        return None
    return UNIFORMITY_WEIGHT * u + (LEAF_BONUS if candidate.is_leaf else 0.0)


def discover(
    tree: SurfaceTree, root: Node, target_width: int, target_height: int
) -> SurfaceCandidate | None:
    """Breadth-first search below *root* (inclusive) for the best rendering surface.

    Returns ``None`` when no node qualifies; callers fall back to *root*.
    Equal scores keep the first node found.
    """
    best: SurfaceCandidate | None = None
    best_score = float("-inf")

    queue: deque[Node] = deque([root])
    while queue:
        node = queue.popleft()
        candidate = tree.candidate(node)
        score = _candidate_score(candidate, target_width, target_height)
        if score is not None and score > best_score:
            best = candidate
            best_score = score
        queue.extend(tree.children(node))
    return best


def find_viewed_content(tree: SurfaceTree, root: Node) -> Node | None:
    """Return the content of the first scrollable container below *root*."""
    queue: deque[Node] = deque([root])
    while queue:
        node = queue.popleft()
        if tree.is_scrollable(node):
            content = tree.viewed_content(node)
            if content is not None:
                return content
        queue.extend(tree.children(node))
    return None


def find_scrollable_ancestor(tree: SurfaceTree, start: Node) -> Node | None:
    node: Node | None = start
    while node is not None:
        if tree.is_scrollable(node):
            return node
        node = tree.parent(node)
    return None


def resolve_viewing_surface(
    tree: SurfaceTree, start: Node, image_width: int, image_height: int
) -> Node:
    """Find the surface whose geometry the pointer at *start* should be mapped into.

    Scrolling frames receive pointer events but the bitmap is painted by the
    content they scroll, so discovery runs inside that content.  Without a
    scroll area the search climbs a bounded number of ancestors.
    """
    scroller = find_scrollable_ancestor(tree, start)
    if scroller is not None:
        content = tree.viewed_content(scroller)
        if content is not None:
            match = discover(tree, content, image_width, image_height)
            return match.node if match is not None else content

    node: Node | None = start
    for _ in range(ANCESTOR_SEARCH_DEPTH):
        if node is None:
            break
        match = discover(tree, node, image_width, image_height)
        if match is not None:
            return match.node
        node = tree.parent(node)
    log.debug("no rendering surface found around %r", start)
    return start
