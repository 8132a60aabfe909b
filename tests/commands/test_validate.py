"""Tests for the validate command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from billingctl.cli import cli
from tests.conftest import create_payload

pytestmark = pytest.mark.usefixtures("_isolated_cwd")


class TestValidateCommand:
    def test_valid_payload_from_stdin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["validate", "CREATE_INVENTORYITEM"], input=json.dumps(create_payload())
        )
        assert result.exit_code == 0, result.output
        assert "validate" in result.stdout
        assert "CREATE_INVENTORYITEM" in result.stdout

    def test_valid_payload_from_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        payload = tmp_path / "patch.json"
        payload.write_text('{"name": "Decoder"}', encoding="utf-8")
        result = cli_runner.invoke(
            cli, ["--json", "validate", "update_inventoryitem", str(payload), "--entity-id", "42"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["data"] == {
            "command_type": "UPDATE_INVENTORYITEM",
            "validated": True,
            "parameters": ["name"],
        }

    def test_field_errors_exit_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["validate", "CREATE_INVENTORYITEM"], input=json.dumps({"status": "New"})
        )
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "Validation errors exist." in result.stderr
        assert "serialNumber" in result.stderr

    def test_json_error_body(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["--json", "validate", "CREATE_INVENTORYITEM"],
            input=json.dumps(create_payload(colour="red")),
        )
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["ok"] is False
        assert data["error"]["code"] == "error.msg.parameter.unsupported"
        assert data["error"]["detail"]["http_status_code"] == 400
        assert [e["parameterName"] for e in data["error"]["detail"]["errors"]] == ["colour"]

    def test_blank_body(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "validate", "UPDATE_INVENTORYITEM"], input="   "
        )
        assert result.exit_code == 1
        assert result.stderr.startswith("ERROR: validate")

    def test_non_utf8_body(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["--json", "validate", "CREATE_INVENTORYITEM"],
            input=b'{"serialNumber": "\xff\xfe"}',
        )
        assert result.exit_code == 1
        assert not isinstance(result.exception, UnicodeDecodeError)
        data = json.loads(result.stderr)
        assert data["error"]["code"] == "error.msg.invalid.request.body"
        assert data["error"]["detail"]["http_status_code"] == 400

    def test_unknown_command_type(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "ARCHIVE_ORDER"], input="{}")
        assert result.exit_code == 1
        assert "not supported" in result.stderr

    def test_unvalidated_type_warns(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "DELETE_COUNTRYCURRENCY"], input="")
        assert result.exit_code == 0
        assert "WARNING: No validator declared" in result.stderr

    def test_local_plugin_sees_rejection(self, cli_runner: CliRunner) -> None:
        plugin_dir = Path(".billingctl/plugins")
        plugin_dir.mkdir(parents=True)
        (plugin_dir / "audit.py").write_text(
            "from billingctl.plugins import hookimpl\n\n\n"
            "class Audit:\n"
            "    @hookimpl\n"
            "    def post_command_rejected(self, command_type, error_code):\n"
            "        print('AUDIT', command_type, error_code)\n",
            encoding="utf-8",
        )
        result = cli_runner.invoke(cli, ["validate", "CREATE_INVENTORYITEM"], input="{}")
        assert result.exit_code == 1
        assert "AUDIT CREATE_INVENTORYITEM validation.msg.validation.errors.exist" in (
            result.stdout
        )
