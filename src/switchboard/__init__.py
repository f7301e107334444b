"""switchboard - in-process event dispatch.

Two independent registries an application composes as it needs:

- :mod:`switchboard.keyed` - one handler per string key, invoked on demand
- :mod:`switchboard.broadcast` - ordered listeners notified of every event
- :mod:`switchboard.config` - YAML configuration for registry policies
"""

from switchboard.broadcast import BroadcastRegistry, BroadcastReport, FailurePolicy
from switchboard.errors import DuplicateKeyError, ListenerInvocationError, SwitchboardError
from switchboard.keyed import DuplicatePolicy, HandlerNotFound, KeyedRegistry

__version__ = "0.1.0"

__all__ = [
    "BroadcastRegistry",
    "BroadcastReport",
    "DuplicateKeyError",
    "DuplicatePolicy",
    "FailurePolicy",
    "HandlerNotFound",
    "KeyedRegistry",
    "ListenerInvocationError",
    "SwitchboardError",
    "__version__",
]
