"""Exception hierarchy for switchboard registries.

``HandlerNotFound`` is deliberately absent: a missing key is a normal
result of :meth:`KeyedRegistry.invoke`, returned rather than raised.
Exceptions raised by handlers themselves propagate unwrapped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from switchboard.broadcast.base import ListenerFailure


class SwitchboardError(Exception):
    """Base class for errors raised by switchboard itself."""


class DuplicateKeyError(SwitchboardError, ValueError):
    """Raised by a rejecting registry when a key is registered twice."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Handler '{key}' already registered")
        self.key = key


class ListenerInvocationError(SwitchboardError):
    """One or more listeners raised while an event was being delivered.

    Attributes:
        event: Name of the event being broadcast
        failures: Per-listener failures, in delivery order
    """

    def __init__(self, event: Any, failures: list[ListenerFailure]) -> None:
        self.event = event
        self.failures = list(failures)
        names = ", ".join(f.listener_name for f in self.failures)
        super().__init__(
            f"{len(self.failures)} listener(s) failed on event {event!r}: {names}"
        )
