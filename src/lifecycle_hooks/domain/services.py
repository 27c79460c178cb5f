"""
Domain Services

Pure helpers behind the HTTPGet branch of the handler runner: port
resolution, URL formatting and the scheme/default-port compatibility rules.
"""

import re
from typing import Tuple

from lifecycle_hooks.domain.errors import PortResolutionError
from lifecycle_hooks.domain.value_objects import ContainerSpec, PortSpec, URIScheme

DEFAULT_HTTP_PORT = 80
DEFAULT_HTTPS_PORT = 443

# Name of the gate that enables honoring the declared HTTPS scheme.
LIFECYCLE_HANDLER_HTTPS = "LifecycleHandlerHTTPS"

_NUMERIC_PORT = re.compile(r"[+-]?[0-9]+")


def resolve_port(spec: PortSpec, container: ContainerSpec) -> int:
    """
    Resolve a port specification against the container's declared ports.

    Numbers are returned as-is, without range checks. Strings made of digits
    are parsed as numbers; anything else is looked up by name and the first
    declared port with that name wins.

    Args:
        spec: Numeric port or port name
        container: Container whose declared ports are searched

    Returns:
        Numeric port

    Raises:
        PortResolutionError: If no declared port carries the name
    """
    if isinstance(spec, int):
        return spec

    if _NUMERIC_PORT.fullmatch(spec):
        return int(spec)

    for port in container.ports:
        if port.name == spec:
            return port.container_port

    raise PortResolutionError(spec, container.name)


def join_host_port(host: str, port: int) -> str:
    """Join host and port, bracketing IPv6 literals."""
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def format_url(scheme: str, host: str, port: int, path: str) -> str:
    """
    Build the request URL for an HTTPGet hook.

    The path is copied verbatim apart from a single leading slash, which the
    join already supplies. Hooks may carry paths escaped for their target
    server, so nothing here parses or re-encodes them.
    """
    if path.startswith("/"):
        path = path[1:]
    return f"{scheme}://{join_host_port(host, port)}/{path}"


def resolve_http_get_scheme(
    declared_scheme: URIScheme,
    gate_enabled: bool,
    default_http_port: int = DEFAULT_HTTP_PORT,
    default_https_port: int = DEFAULT_HTTPS_PORT,
) -> Tuple[str, int]:
    """
    Derive the effective scheme and default port of an HTTPGet hook.

    With the gate disabled every hook is sent as plain HTTP and defaults to
    port 80, whatever scheme it declares. With the gate enabled the declared
    scheme is honored and HTTPS defaults to 443.

    Returns:
        (scheme, default_port) with the scheme lower-cased for the URL
    """
    if gate_enabled and URIScheme(declared_scheme) is URIScheme.HTTPS:
        return "https", default_https_port
    return "http", default_http_port
