"""Resolution of table definitions."""

import logging
from typing import Iterable, List, Set, Tuple

from graphql.language import ObjectTypeDefinitionNode

from dat_schema.directives import TABLE_DIRECTIVES, Directive, TagsDirective
from dat_schema.directives import find_directive, validate_directives
from dat_schema.errors import ErrorKind, SchemaError
from dat_schema.resolver.columns import resolve_column
from dat_schema.resolver.symbols import SymbolTable
from dat_schema.schema.base import SchemaTable, TableColumn

logger = logging.getLogger(__name__)


def get_tags(directives: Iterable[Directive]) -> Tuple[str, ...]:
    """Return the tags of a table, empty when it has no `@tags`."""
    tags = find_directive(directives, TagsDirective)
    return tags.tags if tags else ()


def resolve_table(table: ObjectTypeDefinitionNode, symbols: SymbolTable) -> SchemaTable:
    """Resolve a table definition and all of its fields.

    Args:
        table: The table definition
        symbols: Every table and enumeration known to the analysis

    Returns:
        The resolved table with columns in declaration order

    Raises:
        SchemaError: On the first invalid directive or column, or if two
            named columns share a name.
    """
    name = table.name.value
    tags = get_tags(validate_directives(table, TABLE_DIRECTIVES))

    columns: List[TableColumn] = []
    seen: Set[str] = set()
    for field in table.fields or ():
        column = resolve_column(field, name, symbols)
        if column.name is not None:
            if column.name in seen:
                raise SchemaError(
                    f'Duplicate column name "{column.name}".',
                    field.name,
                    kind=ErrorKind.DUPLICATE_COLUMN,
                )
            seen.add(column.name)
        columns.append(column)

    logger.debug("Resolved table %s with %d columns", name, len(columns))
    return SchemaTable(name=name, tags=tags, columns=tuple(columns))
