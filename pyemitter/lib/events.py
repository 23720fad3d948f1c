"""Minimal typed event emitter for decoupling components."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

EventName = TypeVar("EventName", bound=Hashable)


@dataclass(eq=False)
class Listener:
    """A registered callback. Compared by identity so duplicates stay distinct."""

    callback: Callable[..., Any]
    once: bool = False
    removed: bool = False


class EventEmitter(Generic[EventName]):
    """Synchronous publish/subscribe registry.

    Listeners are called in registration order on the caller's thread;
    exceptions bubble up normally. Every mutating method returns the emitter
    so calls can be chained.
    """

    def __init__(self) -> None:
        self._listeners: dict[EventName, list[Listener]] = {}

    @property
    def event_names(self) -> list[EventName]:
        """Names of the events that currently have at least one listener."""
        return [name for name, entries in self._listeners.items() if entries]

    def on(self, event_name: EventName, callback: Callable[..., Any]) -> EventEmitter[EventName]:
        """Register a callback for an event."""
        return self._add(event_name, Listener(callback))

    def once(self, event_name: EventName, callback: Callable[..., Any]) -> EventEmitter[EventName]:
        """Register a callback that is removed right before its first call."""
        return self._add(event_name, Listener(callback, once=True))

    def off(
        self, event_name: EventName, callback: Callable[..., Any] | None = None
    ) -> EventEmitter[EventName]:
        """Remove listeners for an event.

        Without a callback, every listener of the event is dropped. With one,
        only the most recently registered matching listener is removed, so n
        calls undo n registrations of the same callback.
        """
        if callback is None:
            entries = self._listeners.get(event_name)
            if entries:
                logging.debug("Removing all listeners for event '%s'", event_name)
                for entry in entries:
                    entry.removed = True
            self._listeners[event_name] = []
            return self

        entries = self._listeners.get(event_name)
        if not entries:
            return self

        for i in range(len(entries) - 1, -1, -1):
            if entries[i].callback == callback:
                entries.pop(i).removed = True
                logging.debug("Removed listener %s from event '%s'", callback, event_name)
                break
        return self

    def off_all(self) -> EventEmitter[EventName]:
        """Remove every listener from every event."""
        for event_name in self.event_names:
            self.off(event_name)
        return self

    def emit(self, event_name: EventName, *args: Any, **kwargs: Any) -> EventEmitter[EventName]:
        """Call all listeners registered for this event, in registration order."""
        entries = self._listeners.get(event_name)
        if not entries:
            logging.debug("Emitting '%s' with no listeners", event_name)
            return self

        logging.debug("Emitting '%s' to %d listeners", event_name, len(entries))
        for entry in list(entries):
            # Removed earlier in this pass or by a nested emit
            if entry.removed:
                continue
            if entry.once:
                entry.removed = True
                self._listeners[event_name].remove(entry)
            entry.callback(*args, **kwargs)
        return self

    def listeners(self, event_name: EventName) -> list[Callable[..., Any]]:
        """Callbacks registered for an event, in dispatch order."""
        return [entry.callback for entry in self._listeners.get(event_name, [])]

    def listener_count(self, event_name: EventName) -> int:
        return len(self._listeners.get(event_name, []))

    def _add(self, event_name: EventName, entry: Listener) -> EventEmitter[EventName]:
        if event_name not in self._listeners:
            self._listeners[event_name] = []
        self._listeners[event_name].append(entry)
        logging.debug(
            "Registered %slistener %s for event '%s'",
            "once " if entry.once else "",
            entry.callback,
            event_name,
        )
        return self

    register = on
    register_once = once
    unregister = off
    unregister_all = off_all


Registry = EventEmitter
