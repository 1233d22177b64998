"""Resolution of table fields into columns.

A field's declared type is classified against the symbol table into one of
the column types, and an explicit `@ref` column is checked against the
referenced table's own declaration.
"""

from typing import NamedTuple, Optional

from graphql.language import FieldDefinitionNode, ObjectTypeDefinitionNode

from dat_schema.directives import (
    FIELD_DIRECTIVES,
    FileDirective,
    FilesDirective,
    LocalizedDirective,
    RefDirective,
    UniqueDirective,
    find_directive,
    find_directive_node,
    validate_directives,
)
from dat_schema.errors import ErrorKind, SchemaError, internal_check
from dat_schema.resolver.symbols import SymbolTable
from dat_schema.resolver.types import FOREIGN_ROW, PLACEHOLDER, SCALAR_TYPES, unwrap_type
from dat_schema.schema.base import ColumnReference, ColumnType, TableColumn


class Classification(NamedTuple):
    """Column type computed from a declared field type."""

    array: bool
    type: ColumnType
    references: Optional[ColumnReference]


def classify(field: FieldDefinitionNode, table_name: str, symbols: SymbolTable) -> Classification:
    """Classify the declared type of a field.

    Args:
        field: The field definition
        table_name: Name of the table declaring the field
        symbols: Every table and enumeration known to the analysis

    Returns:
        The list flag, column type and reference target of the field

    Raises:
        SchemaError: If the type is malformed or names an unknown table/enum.
    """
    declared = unwrap_type(field)
    name = declared.name

    if name == table_name:
        return Classification(declared.array, ColumnType.ROW, ColumnReference(table=table_name))
    if name == FOREIGN_ROW:
        return Classification(declared.array, ColumnType.FOREIGNROW, None)
    if name == PLACEHOLDER:
        # unwrap_type only lets the placeholder through inside a list
        return Classification(declared.array, ColumnType.ARRAY, None)
    if name in SCALAR_TYPES:
        return Classification(declared.array, ColumnType(name), None)

    if name in symbols.tables:
        return Classification(declared.array, ColumnType.FOREIGNROW, ColumnReference(table=name))
    if name in symbols.enumerations:
        return Classification(declared.array, ColumnType.ENUMROW, ColumnReference(table=name))

    raise SchemaError(
        f'Can\'t find referenced table/enum "{name}".',
        field.type,
        kind=ErrorKind.UNRESOLVED_TYPE,
    )


def find_referenced_column(
    table: ObjectTypeDefinitionNode, column_name: str
) -> Optional[ColumnType]:
    """Validate that a column can be the target of `@ref` and return its type.

    Args:
        table: Definition of the referenced table
        column_name: Name of the referenced column

    Returns:
        The scalar type of the column, or None if the table has no such column

    Raises:
        SchemaError: If the column is list-typed, not unique or not scalar.
    """
    field = next((field for field in table.fields or () if field.name.value == column_name), None)
    if field is None:
        return None

    declared = unwrap_type(field)
    if declared.array:
        raise SchemaError(
            "Cannot refer to a column with an array type.",
            field.type,
            kind=ErrorKind.REFERENCED_COLUMN_ARRAY,
        )
    if find_directive_node(field, UniqueDirective.directive_name()) is None:
        raise SchemaError(
            "Values in the referenced column must be unique.",
            field,
            kind=ErrorKind.REFERENCED_COLUMN_NOT_UNIQUE,
        )
    if declared.name not in SCALAR_TYPES:
        raise SchemaError(
            "Cannot refer to a column with a non-scalar type.",
            field.type,
            kind=ErrorKind.REFERENCED_COLUMN_NOT_SCALAR,
        )

    return ColumnType(declared.name)


def _resolve_ref(
    ref: RefDirective, references: ColumnReference, symbols: SymbolTable
) -> ColumnType:
    target = symbols.tables.get(references.table)
    column_type = None
    if target is not None:
        try:
            column_type = find_referenced_column(target, ref.column)
        except SchemaError as error:
            raise SchemaError(
                "An error occurred while validating the referenced column.",
                ref.node,
                kind=ErrorKind.REFERENCED_COLUMN_INVALID,
                original_error=error,
            ) from error

    if column_type is None:
        raise SchemaError(
            f'Can\'t find column "{ref.column}" in table "{references.table}".',
            ref.node,
            kind=ErrorKind.REFERENCED_COLUMN_NOT_FOUND,
        )
    return column_type


def resolve_column(
    field: FieldDefinitionNode, table_name: str, symbols: SymbolTable
) -> TableColumn:
    """Resolve a field definition into a column.

    Args:
        field: The field definition
        table_name: Name of the table declaring the field
        symbols: Every table and enumeration known to the analysis

    Returns:
        The resolved column

    Raises:
        SchemaError: On the first invalid directive, type or referenced column.
    """
    directives = validate_directives(field, FIELD_DIRECTIVES)
    array, column_type, references = classify(field, table_name, symbols)

    ref = find_directive(directives, RefDirective)
    if ref is not None:
        internal_check(
            references is not None,
            f"@ref on field {field.name.value!r} without a referenced table",
        )
        column_type = _resolve_ref(ref, references, symbols)
        references = ColumnReference(table=references.table, column=ref.column)

    internal_check(isinstance(column_type, ColumnType), f"unexpected column type {column_type!r}")

    file = find_directive(directives, FileDirective)
    files = find_directive(directives, FilesDirective)
    name = field.name.value

    return TableColumn(
        name=None if name == PLACEHOLDER else name,
        description=field.description.value if field.description else None,
        array=array,
        type=column_type,
        unique=find_directive(directives, UniqueDirective) is not None,
        localized=find_directive(directives, LocalizedDirective) is not None,
        references=references,
        until=None,
        file=file.ext if file else None,
        files=files.ext if files else None,
    )
