"""Collaborators the host hands to the statusbar when the plugin starts."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, Sequence

from statusbar_client.placement import PlacementInfo, Position, ReservedRegion
from statusbar_plugin.display_list import SharedDisplayList
from statusbar_plugin.focus_hooks import HookRegistry
from statusbar_plugin.variables import VariableTable


class SurfaceRenderer(Protocol):
    def show(
        self,
        buffer: Any,
        text: str,
        *,
        x_offset: int,
        placement_fn: Callable[[PlacementInfo], Position],
        left_fringe: int = 0,
        right_fringe: int = 0,
    ) -> Any: ...

    def destroy(self, handle: Any) -> None: ...


@dataclass
class HostBridge:
    variables: VariableTable
    display_list: SharedDisplayList
    hooks: HookRegistry
    renderer: SurfaceRenderer
    # None: ask the renderer (parent_focused) when the focus-in hook is used.
    focus_state_fn: Optional[Callable[[], Any]] = None
    reserved_regions_fn: Optional[Callable[[], Optional[Sequence[ReservedRegion]]]] = None
    logger: Optional[logging.Logger] = None
    log_level: Any = None
