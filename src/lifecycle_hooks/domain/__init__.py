"""
Lifecycle Hooks Domain Layer

Value objects, error kinds, ports and the pure services used to run a
container lifecycle hook.
"""

from .errors import (
    LifecycleHookError,
    InvalidHandlerSpecError,
    PortResolutionError,
    ExecutionError,
    TransportError,
)
from .value_objects import (
    ContainerID,
    ContainerPort,
    ContainerSpec,
    ExecAction,
    HTTPGetAction,
    HTTPHeader,
    HookResult,
    LifecycleHandler,
    PodIdentity,
    URIScheme,
)

__all__ = [
    "LifecycleHookError",
    "InvalidHandlerSpecError",
    "PortResolutionError",
    "ExecutionError",
    "TransportError",
    "ContainerID",
    "ContainerPort",
    "ContainerSpec",
    "ExecAction",
    "HTTPGetAction",
    "HTTPHeader",
    "HookResult",
    "LifecycleHandler",
    "PodIdentity",
    "URIScheme",
]
