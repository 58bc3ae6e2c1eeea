"""Tests for the RefineClient transport."""

from __future__ import annotations

import httpx
import pytest
import respx

from refine_client.client import commands
from refine_client.client.errors import RefineConnectionError, RefineProtocolError
from refine_client.client.refine import RefineClient
from refine_client.config.models import ServerProfile

SERVER = "http://localhost:3333"


class TestCreateUrl:
    def test_joins_path(self, client: RefineClient):
        assert str(client.create_url("/command/core/delete-project")) == (
            f"{SERVER}/command/core/delete-project"
        )

    def test_leading_slash_optional(self, client: RefineClient):
        assert client.create_url("command/core/x") == client.create_url("/command/core/x")

    def test_base_path_kept(self):
        with RefineClient(ServerProfile(name="p", url="https://host/refine/")) as client:
            assert str(client.create_url("/command/core/x")) == "https://host/refine/command/core/x"


class TestExecute:
    @respx.mock
    def test_handler_receives_raw_response(self, client: RefineClient):
        respx.get(f"{SERVER}/ping").mock(return_value=httpx.Response(200, text="pong"))
        request = httpx.Request("GET", client.create_url("/ping"))
        result = client.execute(request, lambda r: (r.status_code, r.read()))
        assert result == (200, b"pong")

    @respx.mock
    def test_response_closed_when_handler_raises(self, client: RefineClient):
        respx.get(f"{SERVER}/ping").mock(return_value=httpx.Response(200, text="pong"))
        seen: list[httpx.Response] = []

        def handler(response: httpx.Response) -> None:
            seen.append(response)
            raise RuntimeError("handler failed")

        request = httpx.Request("GET", client.create_url("/ping"))
        with pytest.raises(RuntimeError):
            client.execute(request, handler)
        assert seen[0].is_closed

    @respx.mock
    def test_redirects_not_followed(self, client: RefineClient):
        respx.post(f"{SERVER}/create").mock(
            return_value=httpx.Response(302, headers={"Location": f"{SERVER}/project?project=1"})
        )
        request = httpx.Request("POST", client.create_url("/create"))
        assert client.execute(request, lambda r: r.status_code) == 302

    @respx.mock
    def test_connect_error(self, client: RefineClient):
        respx.get(f"{SERVER}/ping").mock(side_effect=httpx.ConnectError)
        request = httpx.Request("GET", client.create_url("/ping"))
        with pytest.raises(RefineConnectionError, match="Cannot connect"):
            client.execute(request, lambda r: r)

    @respx.mock
    def test_timeout(self, client: RefineClient):
        respx.get(f"{SERVER}/ping").mock(side_effect=httpx.ReadTimeout)
        request = httpx.Request("GET", client.create_url("/ping"))
        with pytest.raises(RefineConnectionError, match="timed out"):
            client.execute(request, lambda r: r)

    @respx.mock
    def test_timeout_while_reading_body(self, client: RefineClient):
        def body():
            yield b'{"code":'
            raise httpx.ReadTimeout("read timed out")

        respx.post(f"{SERVER}/command/core/delete-project").mock(
            return_value=httpx.Response(200, content=body())
        )
        command = commands.delete_project().project("1").build()
        with pytest.raises(RefineConnectionError, match="timed out") as exc_info:
            command.execute(client)
        assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)

    @respx.mock
    def test_connection_dropped_while_reading_body(self, client: RefineClient):
        def body():
            yield b'{"code":'
            raise httpx.ReadError("connection reset")

        respx.post(f"{SERVER}/command/core/delete-project").mock(
            return_value=httpx.Response(200, content=body())
        )
        command = commands.delete_project().project("1").build()
        with pytest.raises(RefineConnectionError, match="failed while reading"):
            command.execute(client)

    @respx.mock
    def test_protocol_errors_not_translated(self, client: RefineClient):
        respx.post(f"{SERVER}/command/core/delete-project").mock(
            return_value=httpx.Response(200, json={"code": "bogus"})
        )
        command = commands.delete_project().project("1").build()
        with pytest.raises(RefineProtocolError, match="Unexpected code"):
            command.execute(client)
