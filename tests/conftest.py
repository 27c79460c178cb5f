"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from typing import List, Optional, Sequence

import pytest

# Add src to path so tests run from a plain checkout
_src_path = Path(__file__).resolve().parent.parent / "src"
if str(_src_path) not in sys.path:
    sys.path.insert(0, str(_src_path))

from lifecycle_hooks.domain.ports import (
    CommandRunnerError,
    HTTPDoerError,
    ICommandRunnerPort,
    IFeatureGatePort,
    IHTTPDoerPort,
)
from lifecycle_hooks.domain.value_objects import (
    ContainerID,
    ContainerPort,
    ContainerSpec,
    HTTPRequest,
    HTTPResponse,
    PodIdentity,
)


class FakeCommandRunner(ICommandRunnerPort):
    """Records the last call and returns a canned output or error."""

    def __init__(self, output: bytes = b"", error: Optional[str] = None):
        self.output = output
        self.error = error
        self.container_id: Optional[ContainerID] = None
        self.command: Optional[List[str]] = None
        self.timeout: Optional[float] = None
        self.closed = False

    async def run_in_container(self, container_id, command: Sequence[str], timeout: float = 0) -> bytes:
        self.container_id = container_id
        self.command = list(command)
        self.timeout = timeout
        if self.error is not None:
            raise CommandRunnerError(self.error, self.output)
        return self.output

    async def close(self) -> None:
        self.closed = True


class FakeHTTPDoer(IHTTPDoerPort):
    """Records every request and returns a canned response or error."""

    def __init__(self, response: Optional[HTTPResponse] = None, error: Optional[HTTPDoerError] = None):
        self.response = response or HTTPResponse(status_code=200, body=b"")
        self.error = error
        self.requests: List[HTTPRequest] = []
        self.closed = False

    @property
    def url(self) -> Optional[str]:
        return self.requests[-1].url if self.requests else None

    async def do(self, request: HTTPRequest) -> HTTPResponse:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response

    async def close(self) -> None:
        self.closed = True


class StaticFeatureGate(IFeatureGatePort):
    """Feature gate answering every query with the same value."""

    def __init__(self, value: bool = True):
        self.value = value
        self.queries: List[str] = []

    def enabled(self, name: str) -> bool:
        self.queries.append(name)
        return self.value


@pytest.fixture
def container_id() -> ContainerID:
    return ContainerID(type="test", id="abc1234")


@pytest.fixture
def pod() -> PodIdentity:
    return PodIdentity(name="podFoo", namespace="nsFoo")


@pytest.fixture
def container() -> ContainerSpec:
    return ContainerSpec(
        name="containerFoo",
        ports=[ContainerPort(container_port=8080, name="http"), ContainerPort(container_port=9090)],
    )


@pytest.fixture
def command_runner() -> FakeCommandRunner:
    return FakeCommandRunner(output=b"ok")


@pytest.fixture
def http_doer() -> FakeHTTPDoer:
    return FakeHTTPDoer(response=HTTPResponse(status_code=200, body=b"OK http"))


@pytest.fixture
def feature_gate() -> StaticFeatureGate:
    return StaticFeatureGate(True)
