"""Ordered, de-duplicated listener registry with synchronous fan-out."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from switchboard.broadcast.base import (
    BroadcastReport,
    Event,
    EventName,
    FailurePolicy,
    FunctionListener,
    Listener,
    ListenerFailure,
    listener_label,
)
from switchboard.errors import ListenerInvocationError

if TYPE_CHECKING:
    from switchboard.config.schema import BroadcastConfig

logger = logging.getLogger(__name__)


class BroadcastRegistry:
    """Delivers events to every subscribed listener, in subscription order.

    Membership is by identity: subscribing the same object twice is a
    no-op. Each broadcast works on a snapshot of the subscribers taken at
    call entry, so listeners may subscribe or unsubscribe (themselves or
    others) from inside ``update`` without disturbing the current delivery.
    """

    def __init__(self, failure_policy: FailurePolicy | str = FailurePolicy.ISOLATE) -> None:
        """
        Initialize the registry.

        Args:
            failure_policy: ISOLATE to keep delivering after a listener
                raises, FAIL_FAST to stop and raise immediately
        """
        self.failure_policy = FailurePolicy(failure_policy)
        self._listeners: list[Listener] = []
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: BroadcastConfig) -> BroadcastRegistry:
        """Create a registry using the policy from a ``BroadcastConfig``."""
        return cls(failure_policy=config.failure_policy)

    def subscribe(self, listener: Listener) -> bool:
        """Add a listener unless it is already subscribed.

        Returns:
            True if the listener was added
        """
        with self._lock:
            if any(existing is listener for existing in self._listeners):
                return False
            self._listeners.append(listener)
        logger.debug("Subscribed %s", listener_label(listener))
        return True

    def unsubscribe(self, listener: Listener) -> bool:
        """Remove a listener. Unknown listeners are ignored.

        Returns:
            True if the listener was subscribed
        """
        with self._lock:
            before = len(self._listeners)
            self._listeners = [lst for lst in self._listeners if lst is not listener]
            removed = len(self._listeners) != before
        if removed:
            logger.debug("Unsubscribed %s", listener_label(listener))
        return removed

    def listener(self, fn: Callable[[EventName, Any], None]) -> FunctionListener:
        """Decorator that subscribes a plain function.

        Returns the wrapping ``FunctionListener`` so it can be passed to
        ``unsubscribe`` later.
        """
        wrapped = FunctionListener(fn)
        self.subscribe(wrapped)
        return wrapped

    def broadcast(self, event: EventName, payload: Any = None) -> BroadcastReport:
        """Deliver an event to every current subscriber.

        Args:
            event: Event name (string or enum member)
            payload: Data shared by all listeners. Mappings are handed
                out behind a read-only proxy.

        Returns:
            Report of delivered listeners and, under ISOLATE, failures

        Raises:
            ListenerInvocationError: Under FAIL_FAST, on the first
                listener that raises; remaining listeners are skipped
        """
        ev = Event(name=event, payload=payload)
        with self._lock:
            recipients = list(self._listeners)

        report = BroadcastReport(event=ev)
        for lst in recipients:
            try:
                lst.update(ev.name, ev.payload)
            except Exception as e:
                failure = ListenerFailure(listener=lst, error=e)
                if self.failure_policy is FailurePolicy.FAIL_FAST:
                    raise ListenerInvocationError(ev.name, [failure]) from e
                logger.exception(
                    "Listener %s failed on event %s", failure.listener_name, ev.label
                )
                report.failures.append(failure)
            else:
                report.delivered.append(lst)

        if report.failures:
            logger.warning(
                "Event %s delivered to %d/%d listeners",
                ev.label,
                len(report.delivered),
                report.recipients,
            )
        return report

    def notify(self, event: EventName, payload: Any = None) -> BroadcastReport:
        """Alias for :meth:`broadcast`."""
        return self.broadcast(event, payload)

    @property
    def listeners(self) -> list[Listener]:
        """Snapshot of the current subscribers, in order."""
        with self._lock:
            return list(self._listeners)

    def __contains__(self, listener: object) -> bool:
        return any(existing is listener for existing in self._listeners)

    def __len__(self) -> int:
        return len(self._listeners)
