from __future__ import annotations

from typing import Any, Callable, Dict, List

Listener = Callable[..., Any]


class EventEmitter:
    """Minimal synchronous event bus: listeners run in subscription order."""

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Listener]] = {}

    def subscribe(self, event: str, callback: Listener) -> None:
        """Register a listener for an event name."""
        self._listeners.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Listener) -> None:
        """Remove a listener; unknown listeners are ignored."""
        listeners = self._listeners.get(event, [])
        if callback in listeners:
            listeners.remove(callback)

    def emit(self, event: str, *args: Any) -> None:
        """Call every listener of event with args."""
        for callback in list(self._listeners.get(event, [])):
            callback(*args)
