"""
Unit tests for domain value objects.
"""

import dataclasses

import pytest

from lifecycle_hooks.domain.errors import InvalidHandlerSpecError
from lifecycle_hooks.domain.value_objects import (
    ContainerID,
    ContainerPort,
    ContainerSpec,
    ExecAction,
    HookResult,
    HTTPGetAction,
    HTTPHeader,
    HTTPRequest,
    HTTPResponse,
    URIScheme,
)


class TestContainerSpec:
    def test_ports_stored_as_tuple(self):
        spec = ContainerSpec(name="c", ports=[ContainerPort(container_port=80)])

        assert isinstance(spec.ports, tuple)

    def test_immutable(self):
        spec = ContainerSpec(name="c")

        with pytest.raises(dataclasses.FrozenInstanceError):
            spec.name = "other"


class TestHTTPGetAction:
    def test_defaults(self):
        action = HTTPGetAction(host="foo", port=8080)

        assert action.scheme is URIScheme.HTTP
        assert action.path == ""
        assert action.headers == ()

    def test_scheme_from_string(self):
        action = HTTPGetAction(host="foo", port="", scheme="HTTPS")

        assert action.scheme is URIScheme.HTTPS

    def test_invalid_scheme_rejected(self):
        with pytest.raises(ValueError):
            HTTPGetAction(host="foo", port=80, scheme="ftp")

    def test_headers_keep_order(self):
        action = HTTPGetAction(
            host="foo",
            port=80,
            headers=[HTTPHeader("X-A", "1"), HTTPHeader("X-A", "2")],
        )

        assert [h.value for h in action.headers] == ["1", "2"]


def test_exec_action_command_tuple():
    assert ExecAction(command=["ls", "-a"]).command == ("ls", "-a")


def test_container_id_str():
    assert str(ContainerID(type="docker", id="abc")) == "docker://abc"


class TestHTTPRequest:
    def test_without_header_case_insensitive(self):
        request = HTTPRequest(
            method="GET",
            url="https://foo/",
            headers=(("authorization", "Bearer x"), ("Foo", "bar")),
        )

        assert request.without_header("Authorization").headers == (("Foo", "bar"),)


def test_http_response_text_replaces_invalid_bytes():
    assert HTTPResponse(status_code=200, body=b"ok\xff").text == "ok�"


class TestHookResult:
    def test_success(self):
        result = HookResult(message="done")

        assert result.failed is False
        result.raise_for_error()

    def test_failure(self):
        result = HookResult(message="", error=InvalidHandlerSpecError("bad"))

        assert result.failed is True
        with pytest.raises(InvalidHandlerSpecError):
            result.raise_for_error()
