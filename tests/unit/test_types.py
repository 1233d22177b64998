"""Tests for declared type unwrapping."""

import pytest
from graphql import parse

from dat_schema.errors import ErrorKind, SchemaError
from dat_schema.resolver.types import DeclaredType, unwrap_type


def field_node(declaration: str):
    return parse(f"type T {{ {declaration} }}").definitions[0].fields[0]


@pytest.mark.parametrize(
    "declaration, expected",
    [
        ("a: i32", DeclaredType(array=False, name="i32")),
        ("a: [string]", DeclaredType(array=True, name="string")),
        ("a: Other", DeclaredType(array=False, name="Other")),
        ("a: [_]", DeclaredType(array=True, name="_")),
    ],
)
def test_unwrap_type(declaration: str, expected: DeclaredType):
    """Test that one list wrapper is stripped and the base name kept."""
    assert unwrap_type(field_node(declaration)) == expected


@pytest.mark.parametrize("declaration", ["a: [[i32]]", "a: i32!", "a: [i32!]", "a: [i32]!"])
def test_rejects_complex_types(declaration: str):
    """Test that nested lists and non-null wrappers are not valid types."""
    with pytest.raises(SchemaError, match="Valid type expected") as exc_info:
        unwrap_type(field_node(declaration))

    assert exc_info.value.kind == ErrorKind.INVALID_TYPE


def test_placeholder_type_outside_list():
    """Test that the bare placeholder type is rejected."""
    with pytest.raises(SchemaError, match="only allowed inside an array") as exc_info:
        unwrap_type(field_node("a: _"))

    assert exc_info.value.kind == ErrorKind.PLACEHOLDER_TYPE
