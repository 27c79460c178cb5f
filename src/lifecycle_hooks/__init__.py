"""
Lifecycle Hooks

Runs container lifecycle hooks (exec commands and HTTP GET requests) for a
node agent.
"""

__version__ = "1.0.0"

from .domain.errors import (
    LifecycleHookError,
    InvalidHandlerSpecError,
    PortResolutionError,
    ExecutionError,
    TransportError,
)
from .domain.value_objects import (
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
