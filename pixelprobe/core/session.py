"""PixelProbe — ties discovery, mapping and tracking to a host display.

A probe is attached to one image display at a time.  The host hands it the
display's root node and the decoded bitmap; the probe locates the rendering
surface, subscribes to its pointer events through a host-supplied factory
and turns every move into a readout line pushed to a sink.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from pixelprobe.config.constants import EMPTY_READOUT, READOUT_TOOLTIP
from pixelprobe.core.discovery import discover, find_viewed_content, resolve_viewing_surface
from pixelprobe.core.geometry import Point
from pixelprobe.core.mapping import (
    MappingContext,
    compute_display_rectangle,
    estimate_zoom,
    map_to_pixel,
)
from pixelprobe.core.surface import Bitmap, Node, SurfaceTree
from pixelprobe.core.tracking import Pixel, PixelTracker

log = logging.getLogger(__name__)

ZoomProvider = Callable[[], float | None]


class Subscription(Protocol):
    """Handle for pointer listeners installed on a surface."""

    def release(self) -> None: ...


SubscribeFn = Callable[[Node, "PixelProbe"], Subscription]


@dataclass
class Attachment:
    """State tied to one attached display; discarded as a whole on detach."""

    root: Node
    surface: Node
    bitmap: Bitmap | None
    zoom_provider: ZoomProvider | None = None
    subscription: Subscription | None = None

    def current_zoom(self) -> float | None:
        if self.zoom_provider is None:
            return None
        return self.zoom_provider()


class PixelProbe:
    """Pixel coordinate and color readout for a host image display.

    Parameters
    ----------
    tree
        Host adapter used to walk and measure the UI hierarchy.
    sink
        Called with the new readout text whenever it changes.
    """

    def __init__(self, tree: SurfaceTree, sink: Callable[[str], None] | None = None) -> None:
        self._tree = tree
        self._sink = sink
        self._tracker = PixelTracker()
        self._attachment: Attachment | None = None
        self._text = EMPTY_READOUT

    # --- lifecycle ---

    @property
    def attachment(self) -> Attachment | None:
        return self._attachment

    @property
    def is_attached(self) -> bool:
        return self._attachment is not None

    @property
    def tracker(self) -> PixelTracker:
        return self._tracker

    def attach(
        self,
        root: Node,
        bitmap: Bitmap | None,
        zoom_provider: ZoomProvider | None = None,
        subscribe: SubscribeFn | None = None,
    ) -> Attachment:
        """Attach to the display rooted at *root*, replacing any previous attachment."""
        self.detach()

        base = find_viewed_content(self._tree, root)
        if base is None:
            base = root
        surface = base
        if bitmap is not None:
            match = discover(self._tree, base, bitmap.width, bitmap.height)
            if match is not None:
                surface = match.node
            log.debug(
                "attached to %r for %dx%d bitmap (discovered: %s)",
                surface,
                bitmap.width,
                bitmap.height,
                match is not None,
            )
        else:
            log.debug("attached to %r without a bitmap", surface)

        attachment = Attachment(
            root=root, surface=surface, bitmap=bitmap, zoom_provider=zoom_provider
        )
        self._attachment = attachment
        if subscribe is not None:
            attachment.subscription = subscribe(surface, self)
        self._set_text(EMPTY_READOUT)
        return attachment

    def detach(self) -> None:
        """Release listeners and reset all tracking state.  Safe to call repeatedly."""
        attachment = self._attachment
        self._attachment = None
        if attachment is not None:
            if attachment.subscription is not None:
                attachment.subscription.release()
            log.debug("detached from %r", attachment.surface)
        self._tracker.reset()
        self._set_text(EMPTY_READOUT)

    # --- inbound events ---

    def on_pointer_move(self, point: Point, source: Node) -> None:
        """Handle one physical pointer move at *point* in *source*'s local space."""
        attachment = self._attachment
        if attachment is None:
            return
        bitmap = attachment.bitmap
        if bitmap is None:
            self._set_text(EMPTY_READOUT)
            return
        if self._tracker.locked:
            self._set_text(self._tracker.observe(None))
            return

        surface = resolve_viewing_surface(self._tree, source, bitmap.width, bitmap.height)
        local = point if surface is source else self._tree.map_point(source, point, surface)
        pixel = map_to_pixel(local, self._mapping_context(surface, bitmap))
        color = self._sample(bitmap, pixel) if pixel is not None else None
        self._set_text(self._tracker.observe(pixel, color))

    def on_pointer_exit(self) -> None:
        """Clear the live readout when the pointer leaves the surface."""
        if self._attachment is None or self._tracker.locked:
            return
        self._set_text(self._tracker.observe(None))

    def on_lock_toggle_requested(self) -> None:
        if self._attachment is None:
            return
        self._set_text(self._tracker.toggle_lock())

    # --- queries ---

    def display_zoom(self) -> float | None:
        """Zoom of the attached display, inferred from its geometry when not supplied."""
        attachment = self._attachment
        if attachment is None or attachment.bitmap is None:
            return None
        zoom = attachment.current_zoom()
        if zoom is not None:
            return zoom
        bounds = self._tree.bounds(attachment.surface)
        return estimate_zoom(
            bounds.width, bounds.height, attachment.bitmap.width, attachment.bitmap.height
        )

    def current_readout_text(self) -> str:
        return self._text

    def tooltip_text(self) -> str | None:
        return READOUT_TOOLTIP if self._attachment is not None else None

    # --- helpers ---

    def _mapping_context(self, surface: Node, bitmap: Bitmap) -> MappingContext:
        """Build a fresh mapping context from *surface*'s current geometry."""
        attachment = self._attachment
        zoom = attachment.current_zoom() if attachment is not None else None
        display = compute_display_rectangle(
            self._tree.bounds(surface), bitmap.width, bitmap.height, zoom
        )
        return MappingContext(
            surface_bounds=display,
            image_width=bitmap.width,
            image_height=bitmap.height,
            explicit_zoom=zoom,
        )

    def _sample(self, bitmap: Bitmap, pixel: Pixel) -> int | None:
        try:
            return bitmap.sample(*pixel)
        except (ValueError, IndexError, OSError):
            log.debug("could not sample pixel %s", pixel, exc_info=True)
            return None

    def _set_text(self, text: str) -> None:
        if text == self._text:
            return
        self._text = text
        if self._sink is not None:
            self._sink(text)
