"""Tests for the command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from dat_schema import cli

runner = CliRunner()

VALID = '''
type Items {
  Id: string @unique
  Icon: string @file(ext: ".dds")
  Next: Items
}

enum Kind @indexing(first: 1) { _ A }
'''

INVALID = "type Items {\n  Id: string\n  Id: i32\n}\n"


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    """Run every command from an empty directory without touching logging."""
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)
    monkeypatch.delenv("DAT_SCHEMA_SCHEMA_DIR", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def schema_dir(tmp_path):
    directory = tmp_path / "schema"
    directory.mkdir()
    (directory / "items.graphql").write_text(VALID)
    return directory


def test_check_success(schema_dir):
    result = runner.invoke(cli.app, ["check", str(schema_dir)])

    assert result.exit_code == 0
    assert "1 tables, 1 enumerations" in result.output


def test_check_uses_configured_schema_dir(schema_dir, monkeypatch):
    monkeypatch.setenv("DAT_SCHEMA_SCHEMA_DIR", str(schema_dir))

    result = runner.invoke(cli.app, ["check"])

    assert result.exit_code == 0


def test_check_with_workers(schema_dir):
    result = runner.invoke(cli.app, ["--workers", "2", "check", str(schema_dir)])

    assert result.exit_code == 0


def test_check_failure(tmp_path):
    path = tmp_path / "bad.graphql"
    path.write_text(INVALID)

    result = runner.invoke(cli.app, ["check", str(path)])

    assert result.exit_code == 1
    assert "duplicate_column" in result.output
    assert 'Duplicate column name "Id"' in result.output


def test_check_without_files(tmp_path):
    result = runner.invoke(cli.app, ["check", str(tmp_path)])

    assert result.exit_code == 1
    assert "No schema files found" in result.output


def test_check_undecodable_file(tmp_path):
    path = tmp_path / "bad.graphql"
    path.write_bytes(b"\xff\xfe")

    result = runner.invoke(cli.app, ["check", str(path)])

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_invalid_environment_config(schema_dir, monkeypatch):
    monkeypatch.setenv("DAT_SCHEMA_MAX_WORKERS", "0")

    result = runner.invoke(cli.app, ["check", str(schema_dir)])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "max_workers" in result.output


def test_show(schema_dir):
    result = runner.invoke(cli.app, ["show", str(schema_dir)])

    assert result.exit_code == 0
    assert "Items" in result.output
    assert "Kind" in result.output


def test_show_unknown_table(schema_dir):
    result = runner.invoke(cli.app, ["show", str(schema_dir), "--table", "Nope"])

    assert result.exit_code == 1


def test_export_to_file(schema_dir, tmp_path):
    output = tmp_path / "schema.json"

    result = runner.invoke(cli.app, ["export", str(schema_dir), "--output", str(output)])

    assert result.exit_code == 0
    document = json.loads(output.read_text())
    assert document["tables"][0]["name"] == "Items"
    assert document["tables"][0]["columns"][2]["references"] == {"table": "Items"}
    assert document["enumerations"][0]["enumerators"] == [None, "A"]


def test_split(tmp_path):
    source = tmp_path / "core.graphql"
    source.write_text(VALID)
    output_dir = tmp_path / "split"

    result = runner.invoke(cli.app, ["split", str(source), "--output-dir", str(output_dir)])

    assert result.exit_code == 0
    assert sorted(path.name for path in output_dir.iterdir()) == ["Items.graphql"]


def test_format_helpers():
    from dat_schema.schema.base import ColumnReference, ColumnType, TableColumn

    column = TableColumn(
        name="Item",
        type=ColumnType.STRING,
        array=True,
        references=ColumnReference(table="Items", column="Id"),
    )

    assert cli.format_column_type(column) == "[string]"
    assert cli.format_reference(column) == "Items.Id"
