"""Base types for broadcast delivery."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Protocol, runtime_checkable

from switchboard.errors import ListenerInvocationError

EventName = str | Enum


class FailurePolicy(str, Enum):
    """What ``broadcast`` does when a listener raises."""

    ISOLATE = "isolate"  # Record the failure, keep delivering
    FAIL_FAST = "fail_fast"  # Stop and raise immediately


@runtime_checkable
class Listener(Protocol):
    """A capability subscribed to receive broadcast events."""

    def update(self, event: EventName, payload: Any) -> None: ...


@dataclass(eq=False)
class FunctionListener:
    """Adapts a plain callable ``fn(event, payload)`` into a :class:`Listener`.

    Compared by identity, like any other listener.
    """

    fn: Callable[[EventName, Any], None]

    @property
    def name(self) -> str:
        return getattr(self.fn, "__name__", repr(self.fn))

    def update(self, event: EventName, payload: Any) -> None:
        self.fn(event, payload)


def event_label(event: EventName) -> str:
    """Printable name of an event tag."""
    if isinstance(event, Enum):
        return str(event.value)
    return str(event)


def listener_label(listener: Any) -> str:
    """Printable name of a listener for logs and reports."""
    name = getattr(listener, "name", None)
    if isinstance(name, str):
        return name
    return type(listener).__name__


def freeze_payload(payload: Any) -> Any:
    """Wrap mapping payloads in a read-only proxy for sharing across listeners."""
    if isinstance(payload, MappingProxyType):
        return payload
    if isinstance(payload, Mapping):
        return MappingProxyType(dict(payload))
    return payload


@dataclass(frozen=True)
class Event:
    """A named event and its shared, read-only payload."""

    name: EventName
    payload: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "payload", freeze_payload(self.payload))

    @property
    def label(self) -> str:
        return event_label(self.name)


@dataclass
class ListenerFailure:
    """A listener that raised during one broadcast."""

    listener: Any
    error: BaseException

    @property
    def listener_name(self) -> str:
        return listener_label(self.listener)


@dataclass
class BroadcastReport:
    """Outcome of one broadcast call.

    Attributes:
        event: The event that was delivered
        delivered: Listeners whose ``update`` returned normally, in order
        failures: Listeners whose ``update`` raised, in order
    """

    event: Event
    delivered: list[Any] = field(default_factory=list)
    failures: list[ListenerFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def recipients(self) -> int:
        return len(self.delivered) + len(self.failures)

    def raise_for_failures(self) -> None:
        """Raise ``ListenerInvocationError`` if any listener failed."""
        if self.failures:
            raise ListenerInvocationError(self.event.name, self.failures)

    def to_dict(self) -> dict[str, Any]:
        return {
            "event": self.event.label,
            "delivered": [listener_label(lst) for lst in self.delivered],
            "failures": [
                {"listener": f.listener_name, "error": repr(f.error)} for f in self.failures
            ],
        }
