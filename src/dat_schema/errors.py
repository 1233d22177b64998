"""Error surface of the schema analyzer.

Every semantic problem is reported as a `SchemaError`, a `GraphQLError` that
also records which kind of violation occurred. Being a `GraphQLError`, it keeps
the offending syntax nodes and renders their source location when printed.
"""

from enum import Enum
from typing import Collection, Optional, Union

from graphql import GraphQLError
from graphql.language import Node, Source
from pydantic import BaseModel, ConfigDict, Field

from dat_schema.schema.base import SchemaFile


class ErrorKind(str, Enum):
    """Closed taxonomy of analysis errors."""

    SYNTAX = "syntax"

    # Grammar/definition errors
    UNSUPPORTED_DEFINITION = "unsupported_definition"
    DUPLICATE_DEFINITION = "duplicate_definition"

    # Directive errors
    UNKNOWN_DIRECTIVE = "unknown_directive"
    UNKNOWN_ARGUMENT = "unknown_argument"
    DUPLICATE_ARGUMENT = "duplicate_argument"
    MISSING_ARGUMENT = "missing_argument"
    INVALID_ARGUMENT = "invalid_argument"
    EMPTY_LIST = "empty_list"

    # Type errors
    INVALID_TYPE = "invalid_type"
    PLACEHOLDER_TYPE = "placeholder_type"
    UNRESOLVED_TYPE = "unresolved_type"

    # Reference errors
    DUPLICATE_COLUMN = "duplicate_column"
    REFERENCED_COLUMN_NOT_FOUND = "referenced_column_not_found"
    REFERENCED_COLUMN_INVALID = "referenced_column_invalid"
    REFERENCED_COLUMN_ARRAY = "referenced_column_array"
    REFERENCED_COLUMN_NOT_UNIQUE = "referenced_column_not_unique"
    REFERENCED_COLUMN_NOT_SCALAR = "referenced_column_not_scalar"

    # Enumeration errors
    MISSING_INDEXING = "missing_indexing"
    DUPLICATE_ENUMERATOR = "duplicate_enumerator"

    def __str__(self) -> str:
        return self.value


class SchemaError(GraphQLError):
    """A fatal schema authoring error bound to the offending syntax node(s).

    Attributes:
        kind: The category of the violation.
    """

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        nodes: Union[Node, Collection[Node], None] = None,
        *,
        kind: ErrorKind,
        source: Optional[Source] = None,
        positions: Optional[Collection[int]] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        if isinstance(nodes, Node):
            nodes = [nodes]
        elif nodes is not None:
            nodes = list(nodes)
        super().__init__(
            message, nodes, source, positions, original_error=original_error
        )
        self.kind = kind

    @property
    def cause(self) -> Optional[Exception]:
        """The underlying error this one wraps, if any."""
        return self.original_error


def internal_check(condition: object, message: str) -> None:
    """Abort on a broken internal invariant.

    Unlike `assert`, this is not stripped under `python -O`.

    Raises:
        AssertionError: If condition is falsy.
    """
    if not condition:
        raise AssertionError(message)


class AnalysisResult(BaseModel):
    """Outcome of an analysis run: either a schema or the first error.

    Attributes:
        schema_file: The resolved schema when the analysis succeeded.
        error: The first error encountered when the analysis failed.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    schema_file: Optional[SchemaFile] = Field(default=None, description="The resolved schema")
    error: Optional[SchemaError] = Field(default=None, description="The first analysis error")

    @property
    def ok(self) -> bool:
        """Whether the analysis succeeded."""
        return self.error is None

    def unwrap(self) -> SchemaFile:
        """Return the resolved schema or raise the recorded error.

        Raises:
            SchemaError: If the analysis failed.
        """
        if self.error is not None:
            raise self.error
        internal_check(self.schema_file is not None, "successful result without a schema")
        return self.schema_file
