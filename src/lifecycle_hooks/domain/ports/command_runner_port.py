"""
Command Runner Port Interface

Defines the contract for running a command inside a container.
This is an output port - implemented by infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from lifecycle_hooks.domain.value_objects import ContainerID


class CommandRunnerError(Exception):
    """
    Raised by a command runner when the command could not run or failed.

    Attributes:
        output: Whatever the command wrote before failing
    """

    def __init__(self, message: str, output: bytes = b""):
        self.output = output
        super().__init__(message)


class ICommandRunnerPort(ABC):
    """
    Port interface for in-container command execution.
    """

    @abstractmethod
    async def run_in_container(
        self,
        container_id: ContainerID,
        command: Sequence[str],
        timeout: float = 0,
    ) -> bytes:
        """
        Run a command inside the addressed container.

        Args:
            container_id: Container to run the command in
            command: Command and arguments
            timeout: Seconds to wait, 0 for no bound

        Returns:
            Combined stdout/stderr of the command

        Raises:
            CommandRunnerError: If the command fails or cannot be started
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """
        Release runtime connections.

        Should be called during shutdown.
        """
        pass
