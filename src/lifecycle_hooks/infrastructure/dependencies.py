"""
Dependency wiring

Builds a HandlerRunner from settings with the production adapters.
"""

from typing import Optional

from lifecycle_hooks import __version__
from lifecycle_hooks.application.services.handler_runner import HandlerRunner
from lifecycle_hooks.infrastructure.config import Settings, SettingsFeatureGate, get_settings
from lifecycle_hooks.infrastructure.http import HttpxDoer
from lifecycle_hooks.infrastructure.logging import configure_logging
from lifecycle_hooks.infrastructure.runtime import DockerCommandRunner


def create_handler_runner(settings: Optional[Settings] = None) -> HandlerRunner:
    """
    Create a handler runner wired to Docker and httpx.

    Also configures logging from the settings. Callers own the runner and
    should await its close() on shutdown.

    Args:
        settings: Settings to use, defaults to get_settings()

    Returns:
        HandlerRunner instance

    Raises:
        ValueError: If the configured feature gates are invalid
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_format)

    return HandlerRunner(
        http_doer=HttpxDoer(
            connect_timeout=settings.http_connect_timeout,
            read_timeout=settings.http_read_timeout,
            verify=settings.http_verify_tls,
        ),
        command_runner=DockerCommandRunner(docker_url=settings.docker_url),
        feature_gate=SettingsFeatureGate.from_string(settings.feature_gates),
        default_http_port=settings.default_http_port,
        default_https_port=settings.default_https_port,
        exec_timeout=settings.exec_timeout,
        user_agent=settings.user_agent or f"lifecycle-hooks/{__version__}",
    )
