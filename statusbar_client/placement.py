"""Placement math for the bottom-right statusbar overlay."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Sequence, Tuple

_LOGGER_NAME = "Statusbar.Client"
_CLIENT_LOGGER = logging.getLogger(_LOGGER_NAME)

Position = Tuple[int, int]

# Top edge sits one pixel above the parent's bottom edge.
BOTTOM_ANCHOR_Y = -1


@dataclass(frozen=True)
class ReservedRegion:
    """A right-aligned icon strip (e.g. a system tray) the overlay must not cover."""

    icon_count: int
    icon_min_size: int
    icon_gap: int = 0

    def width(self) -> int:
        return int(self.icon_count) * (int(self.icon_min_size) + int(self.icon_gap))


@dataclass(frozen=True)
class PlacementInput:
    font_width: int
    buffer_length: int
    parent_width: int
    x_offset: int
    reserved_width: int = 0


@dataclass(frozen=True)
class PlacementInfo:
    """What the surface renderer hands to a placement function."""

    font_width: int
    buffer: Any
    parent_window: Any
    parent_width: int
    x_pixel_offset: int = 0


def reserved_width(regions: Optional[Iterable[ReservedRegion]]) -> int:
    if not regions:
        return 0
    return sum(region.width() for region in regions)


def resolve_reserved_width(provider: Optional[Callable[[], Optional[Sequence[ReservedRegion]]]]) -> int:
    """Ask the reserved-region provider for its regions; absent or failing providers count as 0."""
    if provider is None:
        return 0
    try:
        regions = provider()
    except Exception as exc:
        _CLIENT_LOGGER.debug("Reserved region provider failed: %s", exc, exc_info=exc)
        return 0
    return reserved_width(regions)


def compute_position(placement: PlacementInput) -> Position:
    buffer_pixel_width = placement.buffer_length * placement.font_width
    x = placement.parent_width - buffer_pixel_width - placement.x_offset - placement.reserved_width
    return x, BOTTOM_ANCHOR_Y


class PositionEngine:
    """Placement strategy handed to the surface renderer on every show."""

    def __init__(
        self,
        *,
        reserved_regions_fn: Optional[Callable[[], Optional[Sequence[ReservedRegion]]]] = None,
    ) -> None:
        self._reserved_regions_fn = reserved_regions_fn
        self._last_position: Optional[Position] = None

    def placement_input(self, info: PlacementInfo) -> PlacementInput:
        return PlacementInput(
            font_width=int(info.font_width),
            buffer_length=len(info.buffer),
            parent_width=int(info.parent_width),
            x_offset=int(info.x_pixel_offset),
            reserved_width=resolve_reserved_width(self._reserved_regions_fn),
        )

    def __call__(self, info: PlacementInfo) -> Position:
        placement = self.placement_input(info)
        position = compute_position(placement)
        if position != self._last_position:
            _CLIENT_LOGGER.debug(
                "Statusbar position: %s (font_width=%d length=%d parent_width=%d offset=%d reserved=%d)",
                position,
                placement.font_width,
                placement.buffer_length,
                placement.parent_width,
                placement.x_offset,
                placement.reserved_width,
            )
            self._last_position = position
        return position


def surface_top_left(x: int, y: int, parent_height: int, surface_height: int) -> Position:
    """Translate a placement result into parent coordinates.

    A negative ``y`` counts up from the parent's bottom edge, so ``-1`` puts
    the surface flush with the bottom. ``x`` is used as-is, overflow included.
    """
    if y < 0:
        return x, parent_height - surface_height + y + 1
    return x, y
