"""
Container Runtime Infrastructure

Command execution inside containers.
"""

from .docker_command_runner import DockerCommandRunner

__all__ = ["DockerCommandRunner"]
