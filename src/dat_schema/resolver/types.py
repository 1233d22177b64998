"""Unwrapping of declared field types."""

from typing import NamedTuple

from graphql.language import FieldDefinitionNode, ListTypeNode, NamedTypeNode

from dat_schema.errors import ErrorKind, SchemaError

SCALAR_TYPES = frozenset(["bool", "string", "i16", "i32", "f32"])

# Name used both for anonymous columns/enumerators and for the untyped array element
PLACEHOLDER = "_"

# Reference to a row of an unspecified table
FOREIGN_ROW = "rid"


class DeclaredType(NamedTuple):
    """A declared field type with at most one list wrapper removed."""

    array: bool
    name: str


def unwrap_type(field: FieldDefinitionNode) -> DeclaredType:
    """Strip one list wrapper from a field type and return its base name.

    Examples:
        `i32` -> DeclaredType(array=False, name="i32")
        `[Item]` -> DeclaredType(array=True, name="Item")

    Args:
        field: The field definition

    Returns:
        The list flag and the base type name

    Raises:
        SchemaError: If the type is not a name or a list of a name, or if the
            placeholder type is used outside a list.
    """
    array = False
    type_node = field.type
    if isinstance(type_node, ListTypeNode):
        array = True
        type_node = type_node.type

    if not isinstance(type_node, NamedTypeNode):
        raise SchemaError("Valid type expected.", field.type, kind=ErrorKind.INVALID_TYPE)

    name = type_node.name.value
    if name == PLACEHOLDER and not array:
        raise SchemaError(
            "Unknown type is only allowed inside an array.",
            field.type,
            kind=ErrorKind.PLACEHOLDER_TYPE,
        )

    return DeclaredType(array=array, name=name)
