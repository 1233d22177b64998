"""Directive specifications.

Each recognized directive is a frozen pydantic model whose `from_node`
constructor validates the raw `DirectiveNode` and extracts its argument
payload. The directives legal at each definition kind form a closed set,
tagged by the `name` literal of each model.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Literal, Tuple, Type, Union, get_args

from graphql.language import (
    DirectiveNode,
    IntValueNode,
    ListValueNode,
    StringValueNode,
    ValueNode,
)
from pydantic import BaseModel, ConfigDict, Field

from dat_schema.errors import ErrorKind, SchemaError


class Directive(ABC, BaseModel):
    """Base class for validated directives.

    Attributes:
        node: The directive syntax node, kept for diagnostics.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    node: DirectiveNode = Field(..., exclude=True, repr=False)

    @classmethod
    def directive_name(cls) -> str:
        """Return the name this directive is written with."""
        return cls.model_fields["name"].default

    @classmethod
    @abstractmethod
    def from_node(cls, directive: DirectiveNode) -> "Directive":
        """Validate a directive node and build its payload.

        Args:
            directive: The directive node whose name matches this specification

        Returns:
            The validated directive

        Raises:
            SchemaError: If an argument is unknown, missing or malformed.
        """
        pass


def _read_argument(
    directive: DirectiveNode,
    argument_name: str,
    missing_message: str,
    read_value: Callable[[ValueNode], Any],
) -> Any:
    """Validate every argument of a single-argument directive.

    Arguments are checked in order, each for its name and then its value.
    The argument may appear only once.

    Returns:
        The payload read from the argument
    """
    if not directive.arguments:
        raise SchemaError(missing_message, directive, kind=ErrorKind.MISSING_ARGUMENT)

    payloads = []
    for argument in directive.arguments:
        if argument.name.value != argument_name:
            raise SchemaError(
                f'Unknown argument "{argument.name.value}".',
                argument.name,
                kind=ErrorKind.UNKNOWN_ARGUMENT,
            )
        if payloads:
            raise SchemaError(
                f'Duplicate argument "{argument.name.value}".',
                argument.name,
                kind=ErrorKind.DUPLICATE_ARGUMENT,
            )
        payloads.append(read_value(argument.value))

    return payloads[0]


def _reject_arguments(directive: DirectiveNode) -> None:
    if directive.arguments:
        raise SchemaError(
            "Directive doesn't accept arguments.",
            directive.arguments,
            kind=ErrorKind.UNKNOWN_ARGUMENT,
        )


def _read_string(value: ValueNode) -> str:
    if not isinstance(value, StringValueNode):
        raise SchemaError("String expected.", value, kind=ErrorKind.INVALID_ARGUMENT)
    return value.value


def _string_list_reader(
    expected_message: str, empty_message: str = ""
) -> Callable[[ValueNode], Tuple[str, ...]]:
    """Build a reader for a list of strings.

    An empty list is rejected only when `empty_message` is given.
    """

    def read(value: ValueNode) -> Tuple[str, ...]:
        if not isinstance(value, ListValueNode):
            raise SchemaError(expected_message, value, kind=ErrorKind.INVALID_ARGUMENT)
        if empty_message and not value.values:
            raise SchemaError(empty_message, value, kind=ErrorKind.EMPTY_LIST)
        return tuple(_read_string(item) for item in value.values)

    return read


def _read_indexing_base(value: ValueNode) -> int:
    if not isinstance(value, IntValueNode) or int(value.value) not in (0, 1):
        raise SchemaError("Integer 0 or 1 expected.", value, kind=ErrorKind.INVALID_ARGUMENT)
    return int(value.value)


class RefDirective(Directive):
    """`@ref(column: "Name")` - reference a specific column of the target table."""

    ARGUMENT: ClassVar[str] = "column"

    name: Literal["ref"] = "ref"
    column: str

    @classmethod
    def from_node(cls, directive: DirectiveNode) -> "RefDirective":
        column = _read_argument(
            directive, cls.ARGUMENT, "Missing referenced column name.", _read_string
        )
        return cls(node=directive, column=column)


class UniqueDirective(Directive):
    """`@unique` - values of the column are unique within the table."""

    name: Literal["unique"] = "unique"

    @classmethod
    def from_node(cls, directive: DirectiveNode) -> "UniqueDirective":
        _reject_arguments(directive)
        return cls(node=directive)


class LocalizedDirective(Directive):
    """`@localized` - values of the column differ per language."""

    name: Literal["localized"] = "localized"

    @classmethod
    def from_node(cls, directive: DirectiveNode) -> "LocalizedDirective":
        _reject_arguments(directive)
        return cls(node=directive)


class FileDirective(Directive):
    """`@file(ext: ".dds")` - the column holds a path to a file of one extension."""

    ARGUMENT: ClassVar[str] = "ext"

    name: Literal["file"] = "file"
    ext: str

    @classmethod
    def from_node(cls, directive: DirectiveNode) -> "FileDirective":
        ext = _read_argument(directive, cls.ARGUMENT, "Missing file extension.", _read_string)
        return cls(node=directive, ext=ext)


class FilesDirective(Directive):
    """`@files(ext: [".dds", ".png"])` - the column holds a path to one of several file types.

    An empty extension list is accepted.
    """

    ARGUMENT: ClassVar[str] = "ext"

    name: Literal["files"] = "files"
    ext: Tuple[str, ...]

    @classmethod
    def from_node(cls, directive: DirectiveNode) -> "FilesDirective":
        ext = _read_argument(
            directive,
            cls.ARGUMENT,
            "Missing file extensions.",
            _string_list_reader("List of extensions expected."),
        )
        return cls(node=directive, ext=ext)


class IndexingDirective(Directive):
    """`@indexing(first: 0)` - numeric value of an enumeration's first enumerator."""

    ARGUMENT: ClassVar[str] = "first"

    name: Literal["indexing"] = "indexing"
    first: Literal[0, 1]

    @classmethod
    def from_node(cls, directive: DirectiveNode) -> "IndexingDirective":
        first = _read_argument(
            directive, cls.ARGUMENT, "Missing first enumerator index.", _read_indexing_base
        )
        return cls(node=directive, first=first)


class TagsDirective(Directive):
    """`@tags(list: ["a", "b"])` - free-form tags attached to a table."""

    ARGUMENT: ClassVar[str] = "list"

    name: Literal["tags"] = "tags"
    tags: Tuple[str, ...]

    @classmethod
    def from_node(cls, directive: DirectiveNode) -> "TagsDirective":
        tags = _read_argument(
            directive,
            cls.ARGUMENT,
            "Missing list of tags.",
            _string_list_reader(
                "List of tags expected.", "At least one tag should be in the list."
            ),
        )
        return cls(node=directive, tags=tags)


FieldDirective = Union[
    RefDirective, UniqueDirective, LocalizedDirective, FileDirective, FilesDirective
]

FIELD_DIRECTIVES: Tuple[Type[Directive], ...] = get_args(FieldDirective)
TABLE_DIRECTIVES: Tuple[Type[Directive], ...] = (TagsDirective,)
ENUM_DIRECTIVES: Tuple[Type[Directive], ...] = (IndexingDirective,)
