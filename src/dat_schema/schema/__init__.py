"""Schema model modules."""

from dat_schema.schema.base import (
    ColumnReference,
    ColumnType,
    SchemaEnumeration,
    SchemaFile,
    SchemaTable,
    TableColumn,
)

__all__ = [
    "ColumnType",
    "ColumnReference",
    "TableColumn",
    "SchemaTable",
    "SchemaEnumeration",
    "SchemaFile",
]
