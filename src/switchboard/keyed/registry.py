"""Key-based handler registry.

Usage::

    from switchboard.keyed import HandlerNotFound, KeyedRegistry

    registry = KeyedRegistry(dog, cat)

    @registry.handler("bird")
    async def chirp() -> str:
        return "chip chip"

    result = await registry.invoke("cat")
    if isinstance(result, HandlerNotFound):
        ...
"""

from __future__ import annotations

import inspect
import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from switchboard.errors import DuplicateKeyError
from switchboard.keyed.base import DuplicatePolicy, FunctionHandler, Handler, HandlerNotFound

if TYPE_CHECKING:
    from switchboard.config.schema import KeyedConfig

logger = logging.getLogger(__name__)


class KeyedRegistry:
    """Registry mapping unique string keys to handlers.

    The registry keeps non-owning references only; handler lifecycle
    belongs to the application. The lock guards the mapping and is never
    held while a handler runs, so handlers may call back into the registry.
    """

    def __init__(
        self,
        *handlers: Handler,
        duplicate_policy: DuplicatePolicy | str = DuplicatePolicy.OVERWRITE,
    ) -> None:
        """
        Initialize the registry.

        Args:
            *handlers: Handlers to register under their own ``key``
            duplicate_policy: Behaviour when a key is registered twice
        """
        self.duplicate_policy = DuplicatePolicy(duplicate_policy)
        self._handlers: dict[str, Handler] = {}
        self._lock = threading.Lock()

        for h in handlers:
            self.add(h)

    @classmethod
    def from_config(cls, config: KeyedConfig, *handlers: Handler) -> KeyedRegistry:
        """Create a registry using the policy from a ``KeyedConfig``."""
        return cls(*handlers, duplicate_policy=config.duplicate_policy)

    def register(self, key: str, handler: Handler) -> None:
        """Register a handler under a key.

        Args:
            key: Unique key
            handler: Handler to dispatch to

        Raises:
            DuplicateKeyError: If the key is taken and the policy is REJECT
            TypeError: If the key is not a string or the handler is None
        """
        if not isinstance(key, str):
            raise TypeError(f"Handler key must be a str, got {type(key).__name__}")
        if handler is None:
            raise TypeError(f"Handler for '{key}' must not be None")

        with self._lock:
            if key in self._handlers:
                if self.duplicate_policy is DuplicatePolicy.REJECT:
                    raise DuplicateKeyError(key)
                logger.debug("Replacing handler for key %r", key)
            self._handlers[key] = handler
        logger.debug("Registered handler %r", key)

    def add(self, handler: Handler) -> None:
        """Register a handler under its own ``key`` attribute."""
        self.register(handler.key, handler)

    def handler(self, key: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator that registers a function as the handler for *key*.

        Example:
            @registry.handler("dog")
            async def bark() -> str:
                return "gau gau"
        """

        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            self.register(key, FunctionHandler(key=key, fn=fn))
            return fn

        return decorator

    def unregister(self, key: str) -> bool:
        """Remove the handler for a key, if any.

        Returns:
            True if a handler was removed, False if the key was absent
        """
        with self._lock:
            removed = self._handlers.pop(key, None)
        if removed is not None:
            logger.debug("Unregistered handler %r", key)
        return removed is not None

    async def invoke(self, key: str, /, *args: Any, **kwargs: Any) -> Any:
        """Dispatch to the handler registered under *key*.

        Args:
            key: Handler key (positional-only)
            *args: Positional arguments forwarded to the handler
            **kwargs: Keyword arguments forwarded to the handler

        Returns:
            The handler's result, or ``HandlerNotFound`` if no handler
            is registered for the key. Errors raised by the handler
            propagate unchanged.
        """
        with self._lock:
            h = self._handlers.get(key)

        if h is None:
            logger.warning("handler not found: %s", key)
            return HandlerNotFound(key)

        result = h.invoke(*args, **kwargs)
        if inspect.isawaitable(result):
            result = await result
        return result

    def get(self, key: str) -> Handler:
        """Get a registered handler by key.

        Raises:
            KeyError: If no handler is registered for the key
        """
        with self._lock:
            if key not in self._handlers:
                raise KeyError(f"Handler '{key}' not found in registry")
            return self._handlers[key]

    def list_keys(self) -> tuple[str, ...]:
        """Snapshot of the registered keys, in insertion order.

        The snapshot is taken under the lock, so the registry may be
        changed while iterating it.
        """
        with self._lock:
            return tuple(self._handlers)

    def __contains__(self, key: object) -> bool:
        return key in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)
