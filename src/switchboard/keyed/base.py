"""Base types for keyed dispatch."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, runtime_checkable


class DuplicatePolicy(str, Enum):
    """What ``register`` does when the key is already taken."""

    OVERWRITE = "overwrite"  # Replace the existing handler silently
    REJECT = "reject"  # Raise DuplicateKeyError, keep the existing handler


@runtime_checkable
class Handler(Protocol):
    """A capability bound to a unique key.

    ``invoke`` may return a plain value or an awaitable; the registry
    awaits the latter before handing the result back.
    """

    key: str

    def invoke(self, *args: Any, **kwargs: Any) -> Any: ...


@dataclass
class FunctionHandler:
    """Adapts a plain or async function into a :class:`Handler`."""

    key: str
    fn: Callable[..., Any]

    def invoke(self, *args: Any, **kwargs: Any) -> Any:
        return self.fn(*args, **kwargs)


@dataclass(frozen=True)
class HandlerNotFound:
    """Result of invoking a key that has no registered handler.

    Falsy, so callers can write ``if not result: ...`` when the handler
    itself never returns a falsy value.
    """

    key: str

    def __bool__(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return f"Unsupported operation: no handler registered for '{self.key}'"
