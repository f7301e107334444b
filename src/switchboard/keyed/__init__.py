"""Keyed dispatch: one handler per string key.

Handlers are looked up by key and invoked on demand. Invoking a key with
no handler returns a ``HandlerNotFound`` value instead of raising, so
callers can turn it into an "unsupported operation" message.

Usage::

    from switchboard.keyed import KeyedRegistry

    registry = KeyedRegistry(duplicate_policy="reject")
    registry.register("cat", cat)
    await registry.invoke("cat")
"""

from switchboard.keyed.base import DuplicatePolicy, FunctionHandler, Handler, HandlerNotFound
from switchboard.keyed.registry import KeyedRegistry

__all__ = [
    "DuplicatePolicy",
    "FunctionHandler",
    "Handler",
    "HandlerNotFound",
    "KeyedRegistry",
]
