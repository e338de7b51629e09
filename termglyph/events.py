"""
Poll-and-react event registry.

An :class:`EventManager` holds (predicate, effect) pairs keyed by a unique
id. Each :meth:`EventManager.run` evaluates the predicates in registration
order and fires an effect right after its predicate returned True.

:class:`ResizeWatcher` is the concrete check used during playback: it keeps
the last seen terminal geometry as explicit state and clears the screen
when the geometry changes.
"""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING, Callable, Hashable

if TYPE_CHECKING:
    from .resize import TerminalGeometry

Predicate = Callable[[], bool]
Effect = Callable[[], None]


class EventManager:
    """Ordered registry of reactive checks."""

    def __init__(self) -> None:
        self._events: dict[Hashable, tuple[Predicate, Effect]] = {}
        self._ids = itertools.count()

    def add(
        self, predicate: Predicate, effect: Effect, event_id: Hashable | None = None
    ) -> Hashable:
        """Register a check.

        :param predicate: Called once per :meth:`run`, may keep state between calls
        :param effect: Called whenever the predicate returned True
        :param event_id: Unique id of the entry (generated if None)
        :return: The id of the new entry
        """
        if event_id is None:
            event_id = next(self._ids)
            while event_id in self._events:
                event_id = next(self._ids)
        elif event_id in self._events:
            raise ValueError(f"Event id {event_id!r} is already registered")
        self._events[event_id] = (predicate, effect)
        return event_id

    def remove(self, event_id: Hashable) -> None:
        """Remove a check. Unknown ids raise a KeyError."""
        del self._events[event_id]

    def run(self) -> None:
        """Evaluate all predicates in registration order.

        Entries removed by an earlier effect of the same run are skipped.
        """
        for event_id in list(self._events):
            entry = self._events.get(event_id)
            if entry is None:
                continue
            predicate, effect = entry
            if predicate():
                effect()

    def __len__(self) -> int:
        return len(self._events)

    def __contains__(self, event_id: Hashable) -> bool:
        return event_id in self._events


class ResizeWatcher:
    """Detect terminal geometry changes between two polls."""

    def __init__(
        self,
        geometry: Callable[[], "TerminalGeometry"],
        on_change: Effect,
        last_geometry: "TerminalGeometry | None" = None,
    ):
        """
        :param geometry: Returns the current terminal geometry
        :param on_change: Effect fired after a change, e.g. a screen clear
        :param last_geometry: Initially known geometry (queried if None)
        """
        self._geometry = geometry
        self._on_change = on_change
        self.last_geometry = last_geometry if last_geometry is not None else geometry()

    def changed(self) -> bool:
        """Query the geometry, remember it and tell whether it differs."""
        current = self._geometry()
        if current != self.last_geometry:
            self.last_geometry = current
            return True
        return False

    def fire(self) -> None:
        self._on_change()

    def attach(self, manager: EventManager, event_id: Hashable = "resize") -> Hashable:
        """Register this watcher with an event manager."""
        return manager.add(self.changed, self.fire, event_id=event_id)


__all__ = ["EventManager", "ResizeWatcher", "Predicate", "Effect"]
