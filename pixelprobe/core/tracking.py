"""PixelTracker — hover/locked state machine behind the readout."""

from __future__ import annotations

from dataclasses import dataclass

from pixelprobe.config.constants import EMPTY_READOUT, LOCK_SUFFIX
from pixelprobe.core.color_format import format_color

Pixel = tuple[int, int]


@dataclass
class TrackingState:
    last_pixel: Pixel | None = None
    last_color: int | None = None
    locked: bool = False
    locked_pixel: Pixel | None = None
    locked_color: int | None = None


def readout_text(pixel: Pixel | None, color: int | None, locked: bool = False) -> str:
    """Compose ``x: {px}, y: {py}`` plus the optional color and lock parts."""
    if pixel is None:
        return EMPTY_READOUT
    color_part = f" {format_color(color)}" if color is not None else ""
    lock_part = LOCK_SUFFIX if locked else ""
    return f"x: {pixel[0]}, y: {pixel[1]}{color_part}{lock_part}"


class PixelTracker:
    """Tracks the last observed pixel and an optional locked pixel.

    While tracking, every observation updates the readout.  Locking freezes
    the readout at the last observed pixel until the lock is toggled off.
    The last observation survives moves that resolve to no pixel, so a lock
    requested after the pointer leaves the image still captures it.
    """

    def __init__(self) -> None:
        self._state = TrackingState()
        self._text = EMPTY_READOUT

    @property
    def state(self) -> TrackingState:
        return self._state

    @property
    def locked(self) -> bool:
        return self._state.locked

    @property
    def text(self) -> str:
        return self._text

    def observe(self, pixel: Pixel | None, color: int | None = None) -> str:
        """Feed one pointer observation and return the readout it produces."""
        state = self._state
        if state.locked:
            self._text = readout_text(state.locked_pixel, state.locked_color, locked=True)
        elif pixel is None:
            self._text = EMPTY_READOUT
        else:
            state.last_pixel = pixel
            state.last_color = color
            self._text = readout_text(pixel, color)
        return self._text

    def toggle_lock(self) -> str:
        state = self._state
        if state.locked:
            state.locked = False
            state.locked_pixel = None
            state.locked_color = None
            self._text = readout_text(state.last_pixel, state.last_color)
        elif state.last_pixel is not None:
            state.locked = True
            state.locked_pixel = state.last_pixel
            state.locked_color = state.last_color
            self._text = readout_text(state.locked_pixel, state.locked_color, locked=True)
        return self._text

    def reset(self) -> None:
        self._state = TrackingState()
        self._text = EMPTY_READOUT
