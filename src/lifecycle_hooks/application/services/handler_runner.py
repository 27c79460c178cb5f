"""
Handler Runner Service

Runs a container lifecycle hook (exec or httpGet) and reports the outcome.
"""

from typing import Optional, Tuple

import structlog

from lifecycle_hooks import __version__
from lifecycle_hooks.domain.errors import (
    ExecutionError,
    InvalidHandlerSpecError,
    PortResolutionError,
    TransportError,
)
from lifecycle_hooks.domain.formatting import format_string_list, quote
from lifecycle_hooks.domain.ports import (
    CommandRunnerError,
    HTTPDoerError,
    HTTPResponseToHTTPSClientError,
    ICommandRunnerPort,
    IFeatureGatePort,
    IHTTPDoerPort,
)
from lifecycle_hooks.domain.services import (
    DEFAULT_HTTP_PORT,
    DEFAULT_HTTPS_PORT,
    LIFECYCLE_HANDLER_HTTPS,
    format_url,
    resolve_http_get_scheme,
    resolve_port,
)
from lifecycle_hooks.domain.value_objects import (
    ContainerID,
    ContainerSpec,
    ExecAction,
    HookResult,
    HTTPGetAction,
    HTTPRequest,
    HTTPResponse,
    LifecycleHandler,
    PodIdentity,
)


logger = structlog.get_logger(__name__)


class HandlerRunner:
    """
    Dispatches a lifecycle handler to the command runner or the HTTP doer.

    The runner only reports: failures come back as data in the HookResult
    and deciding what they mean for the container is left to the caller.
    """

    def __init__(
        self,
        http_doer: IHTTPDoerPort,
        command_runner: ICommandRunnerPort,
        feature_gate: IFeatureGatePort,
        default_http_port: int = DEFAULT_HTTP_PORT,
        default_https_port: int = DEFAULT_HTTPS_PORT,
        exec_timeout: float = 0,
        user_agent: str = f"lifecycle-hooks/{__version__}",
    ):
        """
        Initialize handler runner.

        Args:
            http_doer: Port performing HTTP requests
            command_runner: Port running commands in containers
            feature_gate: Port answering feature gate queries
            default_http_port: Port used for HTTP when none is declared
            default_https_port: Port used for HTTPS when none is declared
            exec_timeout: Exec hook timeout in seconds, 0 for no bound
            user_agent: User-Agent sent unless the hook declares one
        """
        self._http_doer = http_doer
        self._command_runner = command_runner
        self._feature_gate = feature_gate
        self._default_http_port = default_http_port
        self._default_https_port = default_https_port
        self._exec_timeout = exec_timeout
        self._user_agent = user_agent

    async def close(self) -> None:
        """
        Close the HTTP doer and the command runner.

        Should be called during shutdown.
        """
        await self._http_doer.close()
        await self._command_runner.close()

    async def run(
        self,
        container_id: ContainerID,
        pod: PodIdentity,
        container: ContainerSpec,
        handler: LifecycleHandler,
    ) -> HookResult:
        """
        Run a lifecycle handler.

        Args:
            container_id: Runtime address of the container
            pod: Pod owning the container
            container: Container the hook belongs to
            handler: Hook declaration

        Returns:
            HookResult with the hook output, or a diagnostic and an error
        """
        if handler.exec is not None:
            return await self._run_exec(container_id, pod, container, handler.exec)
        if handler.http_get is not None:
            return await self._run_http_get(pod, container, handler.http_get)

        return HookResult(
            message="",
            error=InvalidHandlerSpecError("invalid handler: neither exec nor httpGet is set"),
        )

    async def _run_exec(
        self,
        container_id: ContainerID,
        pod: PodIdentity,
        container: ContainerSpec,
        action: ExecAction,
    ) -> HookResult:
        try:
            output = await self._command_runner.run_in_container(
                container_id, action.command, self._exec_timeout
            )
        except CommandRunnerError as e:
            output = e.output.decode("utf-8", errors="replace")
            message = (
                f"Exec lifecycle hook ({format_string_list(action.command)}) "
                f"for Container {quote(container.name)} in Pod {quote(pod.describe())} "
                f"failed - error: {e}, message: {quote(e.output)}"
            )
            logger.warning(
                "Exec lifecycle hook for Container in Pod failed",
                exec_command=list(action.command),
                container_name=container.name,
                pod=pod.describe(),
                container_id=str(container_id),
                error=str(e),
                output=output,
            )
            error = ExecutionError(str(e), {"command": list(action.command)})
            error.__cause__ = e
            return HookResult(message=message, error=error)

        logger.debug(
            "Exec lifecycle hook succeeded",
            container_name=container.name,
            pod=pod.describe(),
        )
        return HookResult(message=output.decode("utf-8", errors="replace"))

    async def _run_http_get(
        self,
        pod: PodIdentity,
        container: ContainerSpec,
        action: HTTPGetAction,
    ) -> HookResult:
        gate_enabled = self._feature_gate.enabled(LIFECYCLE_HANDLER_HTTPS)
        scheme, default_port = resolve_http_get_scheme(
            action.scheme,
            gate_enabled,
            self._default_http_port,
            self._default_https_port,
        )

        if action.port == "":
            port = default_port
        else:
            try:
                port = resolve_port(action.port, container)
            except PortResolutionError as e:
                logger.warning(
                    "HTTP lifecycle hook port resolution failed",
                    container_name=container.name,
                    pod=pod.describe(),
                    error=str(e),
                )
                return HookResult(message="", error=e)

        host = action.host or pod.ip
        port_defaulted = action.port == ""
        request = HTTPRequest(
            method="GET",
            url=format_url(scheme, host, port, action.path),
            headers=self._build_headers(action),
        )

        # HTTPS hooks may land on plaintext servers: keep an http request at
        # hand, on the default HTTP port when the port was defaulted.
        fallback = None
        if scheme == "https":
            fallback_port = self._default_http_port if port_defaulted else port
            fallback = HTTPRequest(
                method="GET",
                url=format_url("http", host, fallback_port, action.path),
                headers=request.headers,
            ).without_header("Authorization")

        try:
            response = await self._do_with_http_fallback(request, fallback, port_defaulted, pod)
        except HTTPDoerError as e:
            message = (
                f"HTTP lifecycle hook ({action.path}) "
                f"for Container {quote(container.name)} in Pod {quote(pod.describe())} "
                f"failed - error: {e}, message: {quote(e.body)}"
            )
            logger.warning(
                "HTTP lifecycle hook for Container in Pod failed",
                path=action.path,
                url=request.url,
                container_name=container.name,
                pod=pod.describe(),
                error=str(e),
            )
            error = TransportError(str(e), {"url": request.url})
            error.__cause__ = e
            return HookResult(message=message, error=error)

        # Any response counts: hooks report connectivity, not status.
        logger.debug(
            "HTTP lifecycle hook succeeded",
            url=request.url,
            status_code=response.status_code,
            container_name=container.name,
            pod=pod.describe(),
        )
        return HookResult(message=response.text)

    async def _do_with_http_fallback(
        self,
        request: HTTPRequest,
        fallback: Optional[HTTPRequest],
        port_defaulted: bool,
        pod: PodIdentity,
    ) -> HTTPResponse:
        try:
            return await self._http_doer.do(request)
        except HTTPDoerError as e:
            # Defaulted ports fall back on any failure, explicit ports only
            # when the server answered the handshake in plaintext.
            plaintext_reply = isinstance(e, HTTPResponseToHTTPSClientError)
            if fallback is None or not (plaintext_reply or port_defaulted):
                raise
            logger.warning(
                "HTTPS request to lifecycle hook failed, retrying with HTTP.",
                pod=pod.describe(),
                url=request.url,
                fallback_url=fallback.url,
                error=str(e),
            )
            try:
                return await self._http_doer.do(fallback)
            except HTTPDoerError:
                # Report the original HTTPS failure, not the fallback's.
                raise e

    def _build_headers(self, action: HTTPGetAction) -> Tuple[Tuple[str, str], ...]:
        headers = [(h.name, h.value) for h in action.headers]
        declared = {name.lower() for name, _ in headers}
        if "user-agent" not in declared:
            headers.append(("User-Agent", self._user_agent))
        if "accept" not in declared:
            headers.append(("Accept", "*/*"))
        return tuple(headers)
