"""Integration tests for project commands."""

from __future__ import annotations

import json
from pathlib import Path
from urllib.parse import parse_qs

import httpx
import respx
from typer.testing import CliRunner

from refine_client.app import app

runner = CliRunner()
SERVER = "http://localhost:3333"
BASE = f"{SERVER}/command/core"


class TestProjectCommands:
    @respx.mock
    def test_create_project(self, data_file: Path):
        route = respx.post(path="/command/core/create-project-from-upload").mock(
            return_value=httpx.Response(302, headers={"Location": f"{SERVER}/project?project=2131"})
        )
        result = runner.invoke(app, [
            "project", "create", "Addresses", str(data_file),
            "--format", "text/line-based/*sv", "--options", '{"separator": ","}',
            "--url", SERVER,
        ])
        assert result.exit_code == 0, result.output
        assert "2131" in result.output
        assert route.calls.last.request.url.params["options"] == '{"separator":","}'

    def test_create_missing_file(self, tmp_path: Path):
        result = runner.invoke(app, [
            "project", "create", "Addresses", str(tmp_path / "nope.csv"), "--url", SERVER,
        ])
        assert result.exit_code == 5

    def test_create_bad_options(self, data_file: Path):
        result = runner.invoke(app, [
            "project", "create", "Addresses", str(data_file), "--options", "[1]", "--url", SERVER,
        ])
        assert result.exit_code == 5

    @respx.mock
    def test_create_unexpected_status(self, data_file: Path):
        respx.post(path="/command/core/create-project-from-upload").mock(
            return_value=httpx.Response(200, text="<html>error</html>")
        )
        result = runner.invoke(app, [
            "project", "create", "Addresses", str(data_file), "--url", SERVER,
        ])
        assert result.exit_code == 3

    @respx.mock
    def test_delete_project(self):
        respx.post(f"{BASE}/delete-project").mock(
            return_value=httpx.Response(200, json={"code": "ok"})
        )
        result = runner.invoke(app, ["project", "delete", "2131", "--force", "--url", SERVER])
        assert result.exit_code == 0
        assert "deleted" in result.output

    @respx.mock
    def test_delete_project_refused(self):
        respx.post(f"{BASE}/delete-project").mock(
            return_value=httpx.Response(200, json={"code": "error", "message": "No such project"})
        )
        result = runner.invoke(app, ["project", "delete", "2131", "--force", "--url", SERVER])
        assert result.exit_code == 1
        assert "No such project" in result.output

    def test_delete_cancelled(self):
        result = runner.invoke(app, ["project", "delete", "2131", "--url", SERVER], input="n\n")
        assert result.exit_code == 0
        assert "Cancelled" in result.output

    @respx.mock
    def test_apply_operations(self, tmp_path: Path):
        history = tmp_path / "history.json"
        history.write_text(json.dumps([{"op": "a"}, {"op": "b"}]), encoding="utf-8")
        route = respx.post(f"{BASE}/apply-operations").mock(
            return_value=httpx.Response(200, json={"code": "ok"})
        )
        result = runner.invoke(app, ["project", "apply", "2131", str(history), "--url", SERVER])
        assert result.exit_code == 0, result.output
        assert "2 operation(s) applied" in result.output
        form = parse_qs(route.calls.last.request.read().decode())
        assert form["operations"] == ['[{"op":"a"},{"op":"b"}]']

    @respx.mock
    def test_apply_operations_pending(self, tmp_path: Path):
        history = tmp_path / "history.json"
        history.write_text('[{"op": "a"}]', encoding="utf-8")
        respx.post(f"{BASE}/apply-operations").mock(
            return_value=httpx.Response(200, json={"code": "pending"})
        )
        result = runner.invoke(app, ["project", "apply", "2131", str(history), "--url", SERVER])
        assert result.exit_code == 0
        assert "queued" in result.output

    def test_apply_empty_history(self, tmp_path: Path):
        history = tmp_path / "history.json"
        history.write_text("[]", encoding="utf-8")
        result = runner.invoke(app, ["project", "apply", "2131", str(history), "--url", SERVER])
        assert result.exit_code == 5

    @respx.mock
    def test_metadata_json(self, metadata_body: str):
        respx.get(path="/command/core/get-project-metadata").mock(
            return_value=httpx.Response(200, text=metadata_body)
        )
        result = runner.invoke(app, [
            "project", "metadata", "2131", "--format", "json", "--url", SERVER,
        ])
        assert result.exit_code == 0, result.output
        assert "Addresses" in result.output

    @respx.mock
    def test_metadata_table(self, metadata_body: str):
        respx.get(path="/command/core/get-project-metadata").mock(
            return_value=httpx.Response(200, text=metadata_body)
        )
        result = runner.invoke(app, ["project", "metadata", "2131", "--url", SERVER])
        assert result.exit_code == 0
        assert "row_count" in result.output

    @respx.mock
    def test_connection_refused(self):
        respx.get(path="/command/core/get-project-metadata").mock(side_effect=httpx.ConnectError)
        result = runner.invoke(app, ["project", "metadata", "2131", "--url", SERVER])
        assert result.exit_code == 2
