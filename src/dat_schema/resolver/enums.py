"""Resolution of enumeration definitions."""

import logging
from typing import List, Optional

from graphql.language import EnumTypeDefinitionNode

from dat_schema.directives import ENUM_DIRECTIVES, IndexingDirective
from dat_schema.directives import find_directive, validate_directives
from dat_schema.errors import ErrorKind, SchemaError
from dat_schema.resolver.types import PLACEHOLDER
from dat_schema.schema.base import SchemaEnumeration

logger = logging.getLogger(__name__)


def resolve_enumeration(enum: EnumTypeDefinitionNode) -> SchemaEnumeration:
    """Resolve an enumeration definition.

    A `_` enumerator reserves a numeric slot without a name. An enumeration
    declared with a single `_` is an empty enumeration.

    Args:
        enum: The enumeration definition

    Returns:
        The resolved enumeration

    Raises:
        SchemaError: If `@indexing` is missing or invalid, or an enumerator
            name is repeated.
    """
    directives = validate_directives(enum, ENUM_DIRECTIVES)
    indexing = find_directive(directives, IndexingDirective)
    if indexing is None:
        raise SchemaError(
            "`indexing` directive is required for enums.",
            enum,
            kind=ErrorKind.MISSING_INDEXING,
        )

    enumerators: List[Optional[str]] = []
    for value in enum.values or ():
        name = value.name.value
        if name == PLACEHOLDER:
            enumerators.append(None)
            continue
        if name in enumerators:
            raise SchemaError(
                f'Duplicate enumerator "{name}".',
                value.name,
                kind=ErrorKind.DUPLICATE_ENUMERATOR,
            )
        enumerators.append(name)

    if enumerators == [None]:
        enumerators = []

    logger.debug("Resolved enum %s with %d enumerators", enum.name.value, len(enumerators))
    return SchemaEnumeration(
        name=enum.name.value,
        indexing=indexing.first,
        enumerators=tuple(enumerators),
    )
