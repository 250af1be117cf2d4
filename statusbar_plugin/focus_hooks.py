"""Host notification hooks and the focus/workspace refresh strategies."""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol

_LOGGER = logging.getLogger("Statusbar.Hooks")

WORKSPACE_SWITCH_HOOK = "workspace-switch"
FOCUS_IN_HOOK = "focus-in"


class HookRegistry:
    """Named hook lists; a host declares which hooks it can run."""

    def __init__(self, supported: Iterable[str] = (FOCUS_IN_HOOK,)) -> None:
        self._supported = set(supported)
        self._hooks: Dict[str, List[Callable[..., Any]]] = {}

    def supports(self, name: str) -> bool:
        return name in self._supported

    def add(self, name: str, fn: Callable[..., Any]) -> None:
        functions = self._hooks.setdefault(name, [])
        if fn not in functions:
            functions.append(fn)

    def remove(self, name: str, fn: Callable[..., Any]) -> None:
        functions = self._hooks.get(name)
        if not functions:
            return
        try:
            functions.remove(fn)
        except ValueError:
            return
        if not functions:
            del self._hooks[name]

    def functions(self, name: str) -> List[Callable[..., Any]]:
        return list(self._hooks.get(name, ()))

    def run(self, name: str, *args: Any) -> None:
        for fn in self.functions(name):
            try:
                fn(*args)
            except Exception as exc:
                _LOGGER.warning("Hook %s function %r failed: %s", name, fn, exc, exc_info=exc)


class FocusNotifier(Protocol):
    name: str

    def install(self, callback: Callable[[], None]) -> None: ...
    def uninstall(self) -> None: ...


class WorkspaceSwitchNotifier:
    """Refreshes whenever the window manager switches workspace."""

    name = "workspace-switch"

    def __init__(self, hooks: HookRegistry) -> None:
        self._hooks = hooks
        self._callback: Optional[Callable[[], None]] = None

    @property
    def installed(self) -> bool:
        return self._callback is not None

    def install(self, callback: Callable[[], None]) -> None:
        if self._callback is not None:
            return
        self._callback = callback
        self._hooks.add(WORKSPACE_SWITCH_HOOK, self._on_switch)

    def uninstall(self) -> None:
        if self._callback is None:
            return
        self._hooks.remove(WORKSPACE_SWITCH_HOOK, self._on_switch)
        self._callback = None

    def _on_switch(self, *_args: Any) -> None:
        if self._callback is not None:
            self._callback()


class FocusGainedNotifier:
    """Refreshes when the host window gains focus.

    Focus hooks also run on focus loss, so each notification is checked
    against ``focus_state_fn`` before the callback fires.
    """

    name = "focus-gained"

    def __init__(self, hooks: HookRegistry, focus_state_fn: Callable[[], Any]) -> None:
        self._hooks = hooks
        self._focus_state_fn = focus_state_fn
        self._callback: Optional[Callable[[], None]] = None

    @property
    def installed(self) -> bool:
        return self._callback is not None

    def install(self, callback: Callable[[], None]) -> None:
        if self._callback is not None:
            return
        self._callback = callback
        self._hooks.add(FOCUS_IN_HOOK, self._on_focus)

    def uninstall(self) -> None:
        if self._callback is None:
            return
        self._hooks.remove(FOCUS_IN_HOOK, self._on_focus)
        self._callback = None

    def _on_focus(self, *_args: Any) -> None:
        if self._callback is None:
            return
        try:
            gained = bool(self._focus_state_fn())
        except Exception as exc:
            _LOGGER.debug("Focus state query failed: %s", exc, exc_info=exc)
            return
        if gained:
            self._callback()


def select_focus_notifier(
    hooks: HookRegistry,
    focus_state_fn: Optional[Callable[[], Any]] = None,
) -> FocusNotifier:
    """Pick the refresh trigger once, based on what the host exposes.

    Without a workspace-switch hook the focus-in hook is used, which needs a
    way to ask whether focus was really gained.
    """
    if hooks.supports(WORKSPACE_SWITCH_HOOK):
        _LOGGER.debug("Using workspace-switch notifier")
        return WorkspaceSwitchNotifier(hooks)
    if focus_state_fn is None:
        raise ValueError("focus-in refresh needs a focus state query; host provided none")
    _LOGGER.debug("Using focus-gained notifier")
    return FocusGainedNotifier(hooks, focus_state_fn)
