"""
Domain Errors

Error kinds reported by the handler runner. None of them are retried here;
they are handed back to the caller inside a HookResult.
"""

from typing import Any, Optional


class LifecycleHookError(Exception):
    """Base class for lifecycle hook errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidHandlerSpecError(LifecycleHookError):
    """Neither exec nor httpGet is declared on the handler."""
    pass


class PortResolutionError(LifecycleHookError):
    """A named port is not declared on the container."""

    def __init__(self, port_name: str, container_name: str):
        self.port = -1
        self.port_name = port_name
        self.container_name = container_name
        super().__init__(
            f"couldn't find port: {port_name} in container {container_name}",
            {"port_name": port_name, "container_name": container_name},
        )


class ExecutionError(LifecycleHookError):
    """The command runner reported a failure."""
    pass


class TransportError(LifecycleHookError):
    """The HTTP doer reported a transport-level failure."""
    pass
