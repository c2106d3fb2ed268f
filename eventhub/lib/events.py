"""Minimal synchronous publish/subscribe event hub."""

from __future__ import annotations

import functools
import inspect
import logging
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from eventhub.lib.preference_manager import HubPreferences


def _once(handler: Callable) -> Callable:
    """Wrap a handler so it runs on the first call only; later calls do nothing."""
    used = False

    @functools.wraps(handler)
    def wrapper(*args, **kwargs):
        nonlocal used
        if used:
            return None
        used = True
        return handler(*args, **kwargs)

    return wrapper


def _same_handler(a: Callable, b: Callable) -> bool:
    # Bound methods are rebuilt on every attribute access, compare them by instance + function
    if a is b:
        return True
    return inspect.ismethod(a) and inspect.ismethod(b) and a == b


class EventHub:
    """Registry of named events and the handlers subscribed to them.

    Handlers are called synchronously, in registration order; exceptions
    bubble up normally. Every public operation returns the hub so calls can
    be chained. No internal locking: share a hub across threads only with
    external synchronization.
    """

    def __init__(self, warn_no_subscribers: bool = True) -> None:
        self._handlers: dict[str, list[Callable]] = {}
        self.warn_no_subscribers = warn_no_subscribers

    @property
    def warn_no_subscribers(self) -> bool:
        """Whether emit/remove on an event without handlers logs at WARNING (else DEBUG)."""
        return self._warn_no_subscribers

    @warn_no_subscribers.setter
    def warn_no_subscribers(self, value: bool) -> None:
        if not isinstance(value, bool):
            logging.warning(f"Ignoring non-boolean warn_no_subscribers value {value!r}, using True")
            value = True
        self._warn_no_subscribers = value

    @classmethod
    def from_preferences(cls, preferences: HubPreferences) -> EventHub:
        """Create a hub configured from stored preferences."""
        return cls(warn_no_subscribers=preferences.get_or_default("warn_no_subscribers"))

    def _report(self, message: str) -> None:
        level = logging.WARNING if self.warn_no_subscribers else logging.DEBUG
        logging.log(level, message)

    def on(self, event_name: str, handler: Callable) -> EventHub:
        """Register a handler for an event. Registering the same handler twice has no effect."""
        handlers = self._handlers.get(event_name)
        if handlers is None:
            self._handlers[event_name] = [handler]
        elif any(_same_handler(h, handler) for h in handlers):
            return self
        else:
            handlers.append(handler)
        logging.debug(f"Subscribed {handler!r} to event '{event_name}'")
        return self

    def once(self, event_name: str, handler: Callable) -> EventHub:
        """Register a handler that fires on the first emission only.

        The stored entry is a wrapper, not ``handler`` itself, so it cannot be
        targeted by ``remove(event_name, handler)``. After firing it stays in
        the registry as an inert entry until the name is emptied or the hub is
        cleared.
        """
        return self.on(event_name, _once(handler))

    def emit(self, event_name: str, *args: Any, **kwargs: Any) -> EventHub:
        """Call all handlers registered for this event.

        Only handlers registered when emission starts are called.
        """
        handlers = self._handlers.get(event_name)
        if not handlers:
            self._report(f"Event '{event_name}' has no subscribers, nothing to emit")
            return self

        for handler in list(handlers):
            handler(*args, **kwargs)
        return self

    def remove(self, event_name: str, handler: Callable | None = None) -> EventHub:
        """Remove one handler from an event, or all of them when ``handler`` is omitted.

        Removing all handlers keeps the event name known to the hub, mapped to
        an empty list.
        """
        handlers = self._handlers.get(event_name)
        if handlers is None:
            self._report(f"Event '{event_name}' has no subscribers, nothing to remove")
            return self

        if handler is None:
            self._handlers[event_name] = []
            logging.debug(f"Removed all handlers from event '{event_name}'")
            return self

        self._handlers[event_name] = [h for h in handlers if not _same_handler(h, handler)]
        logging.debug(f"Unsubscribed {handler!r} from event '{event_name}'")
        return self

    def clear(self) -> EventHub:
        """Forget every event and handler."""
        self._handlers = {}
        logging.debug("Cleared all event subscriptions")
        return self

    def listeners(self, event_name: str) -> list[Callable]:
        """Return a copy of the handlers registered for an event."""
        return list(self._handlers.get(event_name, []))

    def event_names(self) -> list[str]:
        """Return every event name the hub knows about, including emptied ones."""
        return list(self._handlers)

    def has_listeners(self, event_name: str) -> bool:
        return bool(self._handlers.get(event_name))
