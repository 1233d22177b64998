"""dat-schema - Semantic analyzer for GraphQL-SDL table schemas."""

from dat_schema.config import Config, load_config
from dat_schema.errors import AnalysisResult, ErrorKind, SchemaError
from dat_schema.reader import analyze, load_sources, parse_sources, read_schema_sources
from dat_schema.schema.base import (
    ColumnReference,
    ColumnType,
    SchemaEnumeration,
    SchemaFile,
    SchemaTable,
    TableColumn,
)

__version__ = "0.1.0"

__all__ = [
    "Config",
    "load_config",
    "AnalysisResult",
    "ErrorKind",
    "SchemaError",
    "analyze",
    "load_sources",
    "parse_sources",
    "read_schema_sources",
    "ColumnReference",
    "ColumnType",
    "SchemaEnumeration",
    "SchemaFile",
    "SchemaTable",
    "TableColumn",
]
