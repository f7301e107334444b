"""Broadcast delivery: one event, many listeners.

Listeners are notified synchronously in the order they subscribed. By
default a failing listener is logged and recorded in the returned
``BroadcastReport`` while delivery continues to the rest.

Usage::

    from switchboard.broadcast import BroadcastRegistry

    notifier = BroadcastRegistry()
    notifier.subscribe(user)
    report = notifier.broadcast("new_noti", {"content": "Hello"})
    report.raise_for_failures()
"""

from switchboard.broadcast.base import (
    BroadcastReport,
    Event,
    EventName,
    FailurePolicy,
    FunctionListener,
    Listener,
    ListenerFailure,
)
from switchboard.broadcast.registry import BroadcastRegistry

__all__ = [
    "BroadcastRegistry",
    "BroadcastReport",
    "Event",
    "EventName",
    "FailurePolicy",
    "FunctionListener",
    "Listener",
    "ListenerFailure",
]
