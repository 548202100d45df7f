"""Colour and alpha channel toggling for RGB(A) pixel data."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import Optional

__all__ = ["Channel", "ChannelState", "apply_channels"]


class Channel(IntFlag):
    """Image channels that can be shown or hidden."""

    NONE = 0
    RED = 1
    GREEN = 2
    BLUE = 4
    ALPHA = 8
    ALL = 15


_COLOR_OFFSETS = ((Channel.RED, 0), (Channel.GREEN, 1), (Channel.BLUE, 2))
_SINGLE_CHANNELS = (Channel.RED, Channel.GREEN, Channel.BLUE, Channel.ALPHA)


def apply_channels(
    rgb: bytes, alpha: Optional[bytes], channels: Channel
) -> tuple[bytes, Optional[bytes]]:
    """Return the pixel data as it appears with only ``channels`` visible.

    ``rgb`` holds three bytes per pixel and ``alpha`` one byte per pixel, or
    is None for images without alpha. The returned alpha is None when the
    result carries no alpha channel.
    """
    if len(rgb) % 3:
        raise ValueError("rgb data must hold three bytes per pixel")
    num_pixels = len(rgb) // 3
    if alpha is not None and len(alpha) != num_pixels:
        raise ValueError(
            f"alpha data holds {len(alpha)} values for {num_pixels} pixels"
        )

    channels = Channel(channels) & Channel.ALL
    if channels == Channel.ALL:
        return bytes(rgb), None if alpha is None else bytes(alpha)

    has_alpha = alpha is not None
    alpha_on = bool(channels & Channel.ALPHA)
    colors_changed = any(not channels & flag for flag, _ in _COLOR_OFFSETS)

    colors = bytes(rgb)
    alpha_cache: Optional[bytes] = None
    if colors_changed:
        buffer = bytearray(rgb)
        if has_alpha and alpha_on:
            alpha_cache = bytes(alpha)  # type: ignore[arg-type]

        no_colors = not channels & (Channel.RED | Channel.GREEN | Channel.BLUE)
        if no_colors and alpha_on:
            # Show the alpha channel as greyscale; opaque if there is none.
            fill = alpha_cache if alpha_cache is not None else b"\xff" * num_pixels
            for _, offset in _COLOR_OFFSETS:
                buffer[offset::3] = fill
            alpha_cache = None
        else:
            for flag, offset in _COLOR_OFFSETS:
                if not channels & flag:
                    buffer[offset::3] = bytes(num_pixels)
        colors = bytes(buffer)

    if has_alpha and not alpha_on:
        return colors, b"\xff" * num_pixels
    if alpha_cache is not None:
        return colors, alpha_cache
    if colors_changed:
        return colors, None
    return colors, None if alpha is None else bytes(alpha)


@dataclass
class ChannelState:
    """The set of visible channels of an image view."""

    channels: Channel = Channel.ALL

    def toggle(self, channel: Channel, enabled: bool) -> bool:
        """Show or hide a single channel; return whether the state changed."""
        if channel not in _SINGLE_CHANNELS:
            return False
        if bool(self.channels & channel) == bool(enabled):
            return False
        if enabled:
            self.channels = self.channels | channel
        else:
            self.channels = self.channels & ~channel
        return True

    def apply(
        self, rgb: bytes, alpha: Optional[bytes]
    ) -> tuple[bytes, Optional[bytes]]:
        """Pixel data as it appears with the current channels visible."""
        return apply_channels(rgb, alpha, self.channels)