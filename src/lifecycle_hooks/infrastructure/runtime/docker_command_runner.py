"""
Docker command runner

Runs exec lifecycle hooks inside containers through the Docker API using
aiodocker.
"""

import asyncio
from typing import List, Optional, Sequence

from aiodocker import Docker
from aiodocker.exceptions import DockerError

from lifecycle_hooks.domain.ports import CommandRunnerError, ICommandRunnerPort
from lifecycle_hooks.domain.value_objects import ContainerID
from lifecycle_hooks.infrastructure.logging import get_logger

logger = get_logger(__name__)


class DockerCommandRunner(ICommandRunnerPort):
    """
    Docker exec based command runner.

    Connects to the Docker daemon over its socket or TCP and collects the
    combined stdout/stderr of the command.
    """

    def __init__(self, docker_url: str = "unix:///var/run/docker.sock", docker: Optional[Docker] = None):
        """
        Initialize the command runner.

        Args:
            docker_url: Docker daemon URL
                - unix:///var/run/docker.sock (Unix socket)
                - tcp://localhost:2375 (TCP)
            docker: Pre-built client (used by tests)
        """
        self._docker_url = docker_url
        self._docker = docker

    def _ensure_docker(self) -> Docker:
        """Make sure the Docker client exists"""
        if self._docker is None:
            self._docker = Docker(url=self._docker_url)
        return self._docker

    async def close(self) -> None:
        """Close the Docker connection"""
        if self._docker:
            await self._docker.close()
            self._docker = None

    async def run_in_container(
        self,
        container_id: ContainerID,
        command: Sequence[str],
        timeout: float = 0,
    ) -> bytes:
        """
        Run a command inside the container.

        Implementation of ICommandRunnerPort.run_in_container().
        """
        if timeout and timeout > 0:
            try:
                return await asyncio.wait_for(self._exec(container_id, command), timeout=timeout)
            except asyncio.TimeoutError as e:
                raise CommandRunnerError(f"command {list(command)} timed out after {timeout}s") from e
        return await self._exec(container_id, command)

    async def _exec(self, container_id: ContainerID, command: Sequence[str]) -> bytes:
        docker = self._ensure_docker()
        chunks: List[bytes] = []
        try:
            container = docker.containers.container(container_id.id)
            exec_ = await container.exec(cmd=list(command), stdout=True, stderr=True)
            async with exec_.start(detach=False) as stream:
                while True:
                    message = await stream.read_out()
                    if message is None:
                        break
                    chunks.append(message.data)
            info = await exec_.inspect()
        except DockerError as e:
            logger.error(
                "Failed to exec in container",
                container_id=str(container_id),
                error=str(e),
            )
            raise CommandRunnerError(str(e), b"".join(chunks)) from e

        output = b"".join(chunks)
        exit_code = info.get("ExitCode")
        if exit_code:
            raise CommandRunnerError(
                f"command '{' '.join(command)}' exited with {exit_code}: {output.decode('utf-8', errors='replace')}",
                output,
            )
        return output
