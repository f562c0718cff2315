"""
In-memory event store.
"""

from collections.abc import Iterable

from models.events import Event


class EventStore:
    """Append-only, insertion-ordered collection of events.

    The store performs no validation; callers are expected to hand it
    events that already passed the form schema.
    """

    def __init__(self, events: Iterable[Event] = ()):
        self._events: list[Event] = list(events)

    def append(self, event: Event) -> None:
        self._events.append(event)

    def all(self) -> list[Event]:
        return list(self._events)

    def __len__(self) -> int:
        return len(self._events)
