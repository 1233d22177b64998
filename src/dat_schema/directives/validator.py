"""Validation of the directives attached to a definition node."""

from typing import Iterable, Optional, Sequence, Tuple, Type, TypeVar, Union

from graphql.language import (
    DirectiveNode,
    EnumTypeDefinitionNode,
    FieldDefinitionNode,
    ObjectTypeDefinitionNode,
)

from dat_schema.directives.specs import Directive
from dat_schema.errors import ErrorKind, SchemaError

DirectiveHolder = Union[FieldDefinitionNode, EnumTypeDefinitionNode, ObjectTypeDefinitionNode]

D = TypeVar("D", bound=Directive)


def validate_directives(
    node: DirectiveHolder, specs: Sequence[Type[Directive]]
) -> Tuple[Directive, ...]:
    """Validate every directive of a node against the specifications legal there.

    Args:
        node: The field, table or enumeration definition
        specs: The directive specifications accepted on this kind of node

    Returns:
        The validated directives in declaration order

    Raises:
        SchemaError: If a directive is unknown or one of its arguments is invalid.
    """
    by_name = {spec.directive_name(): spec for spec in specs}

    validated = []
    for directive in node.directives or ():
        spec = by_name.get(directive.name.value)
        if spec is None:
            raise SchemaError(
                f'Unknown directive "{directive.name.value}".',
                directive.name,
                kind=ErrorKind.UNKNOWN_DIRECTIVE,
            )
        validated.append(spec.from_node(directive))

    return tuple(validated)


def find_directive(directives: Iterable[Directive], spec: Type[D]) -> Optional[D]:
    """Return the first validated directive of the given specification."""
    return next((directive for directive in directives if isinstance(directive, spec)), None)


def find_directive_node(node: DirectiveHolder, name: str) -> Optional[DirectiveNode]:
    """Return the first raw directive node with the given name."""
    return next(
        (directive for directive in node.directives or () if directive.name.value == name),
        None,
    )
