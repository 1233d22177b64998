"""Symbol resolution for tables, columns and enumerations."""

from dat_schema.resolver.columns import (
    Classification,
    classify,
    find_referenced_column,
    resolve_column,
)
from dat_schema.resolver.enums import resolve_enumeration
from dat_schema.resolver.symbols import SymbolTable, SymbolTableBuilder
from dat_schema.resolver.tables import get_tags, resolve_table
from dat_schema.resolver.types import SCALAR_TYPES, DeclaredType, unwrap_type

__all__ = [
    "SCALAR_TYPES",
    "DeclaredType",
    "unwrap_type",
    "SymbolTable",
    "SymbolTableBuilder",
    "Classification",
    "classify",
    "find_referenced_column",
    "resolve_column",
    "get_tags",
    "resolve_table",
    "resolve_enumeration",
]
