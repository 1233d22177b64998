"""Schema model produced by the analyzer.

This module defines the immutable data models handed to downstream consumers
(code generators, serializers): tables, their columns and enumerations.
"""

from enum import Enum
from typing import Any, Dict, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class ColumnType(str, Enum):
    """Closed set of column types.

    The first five are the scalar names accepted verbatim in a declaration,
    the remaining four are computed by the column resolver.
    """

    BOOL = "bool"
    STRING = "string"
    I16 = "i16"
    I32 = "i32"
    F32 = "f32"
    ROW = "row"
    FOREIGNROW = "foreignrow"
    ENUMROW = "enumrow"
    ARRAY = "array"

    def __str__(self) -> str:
        return self.value


class ColumnReference(BaseModel):
    """Target of a row, foreign-row or enum-row column.

    Attributes:
        table: Name of the referenced table or enumeration.
        column: Name of the referenced column, set only by an explicit `@ref`.
    """

    model_config = ConfigDict(frozen=True)

    table: str = Field(..., description="The referenced table or enumeration name")
    column: Optional[str] = Field(default=None, description="The referenced column name")


class TableColumn(BaseModel):
    """Represents a single resolved column of a table.

    Attributes:
        name: The column name, None for a `_` placeholder column.
        description: The documentation string attached to the field.
        array: Whether the declared type was wrapped in a list.
        type: The resolved column type.
        unique: Whether the column carries `@unique`.
        localized: Whether the column carries `@localized`.
        references: The reference target for row, foreign-row and enum-row columns.
        until: Reserved for schema versioning, always None.
        file: Single file extension constraint from `@file`.
        files: File extension group constraint from `@files`.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = Field(..., description="The column name, None for placeholders")
    description: Optional[str] = Field(default=None, description="The field documentation")
    array: bool = Field(default=False, description="Whether the type is list-wrapped")
    type: ColumnType = Field(..., description="The resolved column type")
    unique: bool = Field(default=False, description="Whether values must be unique")
    localized: bool = Field(default=False, description="Whether values are localized")
    references: Optional[ColumnReference] = Field(
        default=None, description="The referenced table and optional column"
    )
    until: None = Field(default=None, description="Reserved, always None")
    file: Optional[str] = Field(default=None, description="The file extension constraint")
    files: Optional[Tuple[str, ...]] = Field(
        default=None, description="The file extension group constraint"
    )

    @field_serializer("references")
    def _serialize_references(
        self, references: Optional[ColumnReference]
    ) -> Optional[Dict[str, Any]]:
        if references is None:
            return None
        return references.model_dump(exclude_none=True)


class SchemaTable(BaseModel):
    """Represents a record type definition.

    Attributes:
        name: The table name, unique across all input documents.
        tags: Tags declared with `@tags`, empty if absent.
        columns: Columns in declaration order.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="The table name")
    tags: Tuple[str, ...] = Field(default=(), description="The table tags")
    columns: Tuple[TableColumn, ...] = Field(default=(), description="The table columns")

    def get_column(self, name: str) -> Optional[TableColumn]:
        """Return the column with the given name, or None."""
        return next((column for column in self.columns if column.name == name), None)


class SchemaEnumeration(BaseModel):
    """Represents an enumeration definition.

    Attributes:
        name: The enumeration name, unique across all input documents.
        indexing: Numeric value of the first enumerator, 0 or 1.
        enumerators: Enumerator names in order, None for `_` placeholders.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="The enumeration name")
    indexing: Literal[0, 1] = Field(..., description="The first enumerator index")
    enumerators: Tuple[Optional[str], ...] = Field(
        default=(), description="The enumerator names"
    )


class SchemaFile(BaseModel):
    """The complete analysis result for a set of schema documents.

    Attributes:
        tables: Tables in declaration order across all documents.
        enumerations: Enumerations in declaration order across all documents.
    """

    model_config = ConfigDict(frozen=True)

    tables: Tuple[SchemaTable, ...] = Field(default=(), description="All tables")
    enumerations: Tuple[SchemaEnumeration, ...] = Field(
        default=(), description="All enumerations"
    )

    def get_table(self, name: str) -> Optional[SchemaTable]:
        """Return the table with the given name, or None."""
        return next((table for table in self.tables if table.name == name), None)

    def get_enumeration(self, name: str) -> Optional[SchemaEnumeration]:
        """Return the enumeration with the given name, or None."""
        return next((enum for enum in self.enumerations if enum.name == name), None)

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize the schema to JSON.

        Args:
            indent: Indentation passed to the JSON encoder

        Returns:
            JSON document with `tables` and `enumerations` keys
        """
        return self.model_dump_json(indent=indent)
