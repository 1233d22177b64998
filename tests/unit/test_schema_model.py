"""Unit tests for the schema model."""

import pytest
from pydantic import ValidationError

from dat_schema.schema.base import (
    ColumnReference,
    ColumnType,
    SchemaEnumeration,
    SchemaFile,
    SchemaTable,
    TableColumn,
)


def test_column_type_values():
    """Test the closed set of column type names."""
    assert [column_type.value for column_type in ColumnType] == [
        "bool",
        "string",
        "i16",
        "i32",
        "f32",
        "row",
        "foreignrow",
        "enumrow",
        "array",
    ]
    assert str(ColumnType.ENUMROW) == "enumrow"
    assert ColumnType.I16 == "i16"


def test_column_defaults():
    column = TableColumn(name="Id", type=ColumnType.STRING)

    assert column.array is False
    assert column.unique is False
    assert column.localized is False
    assert column.references is None
    assert column.until is None
    assert column.file is None
    assert column.files is None


def test_models_are_frozen():
    column = TableColumn(name="Id", type=ColumnType.STRING)

    with pytest.raises(ValidationError):
        column.name = "Other"


def test_unknown_column_type_is_rejected():
    with pytest.raises(ValidationError):
        TableColumn(name="Id", type="u64")


def test_indexing_must_be_zero_or_one():
    with pytest.raises(ValidationError):
        SchemaEnumeration(name="E", indexing=2)


def test_lookups():
    """Test table, column and enumeration lookups by name."""
    table = SchemaTable(
        name="T",
        columns=(
            TableColumn(name=None, type=ColumnType.I32),
            TableColumn(name="Next", type=ColumnType.ROW, references=ColumnReference(table="T")),
        ),
    )
    enumeration = SchemaEnumeration(name="E", indexing=1, enumerators=("A",))
    schema_file = SchemaFile(tables=(table,), enumerations=(enumeration,))

    assert schema_file.get_table("T") is table
    assert schema_file.get_table("E") is None
    assert schema_file.get_enumeration("E") is enumeration
    assert table.get_column("Next").references.table == "T"
    assert table.get_column("Missing") is None


def test_reference_serialization_omits_missing_column():
    column = TableColumn(name="Next", type=ColumnType.ROW, references=ColumnReference(table="T"))

    assert column.model_dump()["references"] == {"table": "T"}
    assert column.model_dump(mode="json")["type"] == "row"
