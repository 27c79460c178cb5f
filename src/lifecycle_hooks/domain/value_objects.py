"""
Lifecycle Hook Value Objects

Immutable projections of the pod/container objects a hook needs, plus the
hook declaration itself and the transport-neutral HTTP exchange types.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from lifecycle_hooks.domain.errors import LifecycleHookError


# A port is either a number or the name of a declared container port.
PortSpec = Union[int, str]


class URIScheme(str, Enum):
    """Scheme declared on an HTTPGet hook."""

    HTTP = "HTTP"
    HTTPS = "HTTPS"


@dataclass(frozen=True)
class ContainerID:
    """
    Runtime address of a container.

    Attributes:
        type: Runtime type tag (e.g. "docker", "containerd")
        id: Runtime-specific container identifier
    """

    type: str
    id: str

    def __str__(self) -> str:
        return f"{self.type}://{self.id}"


@dataclass(frozen=True)
class PodIdentity:
    """
    Minimal pod projection used for diagnostics.

    Attributes:
        name: Pod name
        namespace: Pod namespace
        uid: Pod UID, empty when unknown
        ip: Pod IP, used as HTTPGet host when the hook declares none
    """

    name: str
    namespace: str
    uid: str = ""
    ip: str = ""

    def describe(self) -> str:
        """Render the pod as name_namespace(uid)."""
        return f"{self.name}_{self.namespace}({self.uid})"


@dataclass(frozen=True)
class ContainerPort:
    """A port declared on a container."""

    container_port: int
    name: str = ""


@dataclass(frozen=True)
class ContainerSpec:
    """
    Minimal container projection.

    Attributes:
        name: Container name
        ports: Declared ports, in declaration order
    """

    name: str
    ports: Tuple[ContainerPort, ...] = ()

    def __post_init__(self):
        # Accept any iterable from callers, store an immutable tuple.
        object.__setattr__(self, "ports", tuple(self.ports))


@dataclass(frozen=True)
class ExecAction:
    """Run a command inside the container."""

    command: Tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "command", tuple(self.command))


@dataclass(frozen=True)
class HTTPHeader:
    """A single request header. Names may repeat."""

    name: str
    value: str


@dataclass(frozen=True)
class HTTPGetAction:
    """
    Issue an HTTP GET against the container.

    Attributes:
        host: Target host, empty to use the pod IP
        port: Numeric port, named port, or "" for the scheme default
        path: Request path, copied verbatim into the URL
        scheme: Declared scheme
        headers: Extra request headers, in order
    """

    host: str
    port: PortSpec
    path: str = ""
    scheme: URIScheme = URIScheme.HTTP
    headers: Tuple[HTTPHeader, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "scheme", URIScheme(self.scheme))
        object.__setattr__(self, "headers", tuple(self.headers))


@dataclass(frozen=True)
class LifecycleHandler:
    """
    Declared lifecycle hook. Exactly one of exec / http_get should be set.
    """

    exec: Optional[ExecAction] = None
    http_get: Optional[HTTPGetAction] = None


@dataclass(frozen=True)
class HTTPRequest:
    """Request handed to the HTTP doer port."""

    method: str
    url: str
    headers: Tuple[Tuple[str, str], ...] = ()

    def without_header(self, name: str) -> "HTTPRequest":
        """Return a copy of the request without any header called name."""
        lowered = name.lower()
        headers = tuple((k, v) for k, v in self.headers if k.lower() != lowered)
        return HTTPRequest(method=self.method, url=self.url, headers=headers)


@dataclass(frozen=True)
class HTTPResponse:
    """Response returned by the HTTP doer port."""

    status_code: int
    body: bytes = b""

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class HookResult:
    """
    Outcome of a single hook run.

    Attributes:
        message: Hook output on success, composed diagnostic on failure
        error: Classified error, None on success
    """

    message: str = ""
    error: Optional["LifecycleHookError"] = field(default=None)

    @property
    def failed(self) -> bool:
        return self.error is not None

    def raise_for_error(self) -> None:
        """Raise the carried error, if any."""
        if self.error is not None:
            raise self.error
