"""Test CLI functionality."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from specform.cli import cli, format_field_rows
from specform.parsing import build_form_schema

SCHEMA = {
    "required": ["host"],
    "properties": {
        "port": {"type": "integer"},
        "host": {"type": "string"},
        "ssl_mode": {
            "oneOf": [
                {"properties": {"mode": {"const": "disable"}}},
                {
                    "properties": {
                        "mode": {"const": "verify-ca"},
                        "password": {"type": "string"},
                    }
                },
            ]
        },
    },
}


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with patch("specform.cli.setup_log"):
        yield tmp_path


@pytest.fixture
def schema_file(workdir):
    path = workdir / "spec.json"
    path.write_text(json.dumps({"connectionSpecification": SCHEMA}), encoding="utf-8")
    return path


def test_parse_prints_groups_as_json(schema_file):
    result = CliRunner().invoke(cli, ["parse", str(schema_file)], obj={})

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    fields = data["groups"][0]["fields"]
    assert [f["id"] for f in fields] == ["host", "port", "ssl_mode"]
    assert fields[2]["subfields"][0]["id"] == "ssl_mode.verify-ca.password"
    assert fields[2]["subfields"][0]["parentValue"] == "verify-ca"


def test_parse_writes_output_file(schema_file, workdir):
    output = workdir / "form.json"

    result = CliRunner().invoke(
        cli, ["parse", str(schema_file), "--output", str(output), "--indent", "0"], obj={}
    )

    assert result.exit_code == 0, result.output
    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["groups"][0]["id"] == "default"


def test_parse_respects_output_config(schema_file, workdir):
    config = workdir / "custom.toml"
    config.write_text("[output]\nby_alias = false\n")

    result = CliRunner().invoke(
        cli, ["--config", str(config), "parse", str(schema_file)], obj={}
    )

    assert result.exit_code == 0, result.output
    ssl_mode = json.loads(result.stdout)["groups"][0]["fields"][2]
    assert "const_options" in ssl_mode
    assert "constOptions" not in ssl_mode


def test_parse_invalid_schema_fails(workdir):
    path = workdir / "bad.json"
    path.write_text(json.dumps({"type": "object"}), encoding="utf-8")

    result = CliRunner().invoke(cli, ["parse", str(path)], obj={})

    assert result.exit_code == 1
    assert "no 'properties'" in result.output


def test_parse_missing_config_fails(schema_file):
    result = CliRunner().invoke(
        cli, ["--config", "missing.toml", "parse", str(schema_file)], obj={}
    )

    assert result.exit_code == 1
    assert "Configuration file not found" in result.output


def test_fields_lists_every_node(schema_file):
    result = CliRunner().invoke(cli, ["fields", str(schema_file)], obj={})

    assert result.exit_code == 0, result.output
    lines = result.stdout.strip().splitlines()
    assert lines[0].split("\t")[:3] == ["group", "id", "control"]
    assert lines[1:] == [
        "default\thost\thost\tstring\tyes\t",
        "default\tport\tport\tinteger\tno\t",
        "default\tssl_mode\tssl_mode\tobject\tno\t",
        "default\tssl_mode.verify-ca.password\tssl_mode.password\tstring\tno\tverify-ca",
    ]


def test_format_field_rows_header_only_for_empty_form():
    form = build_form_schema({"properties": {}})

    assert format_field_rows(form) == ["group\tid\tcontrol\ttype\trequired\tparent_value"]


def test_serve_uses_config_defaults(workdir):
    with patch("uvicorn.run") as mock_run:
        result = CliRunner().invoke(cli, ["serve", "--port", "8123"], obj={})

    assert result.exit_code == 0, result.output
    _, kwargs = mock_run.call_args
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 8123
