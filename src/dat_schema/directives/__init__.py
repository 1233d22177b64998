"""Directive specifications and validation."""

from dat_schema.directives.specs import (
    ENUM_DIRECTIVES,
    FIELD_DIRECTIVES,
    TABLE_DIRECTIVES,
    Directive,
    FieldDirective,
    FileDirective,
    FilesDirective,
    IndexingDirective,
    LocalizedDirective,
    RefDirective,
    TagsDirective,
    UniqueDirective,
)
from dat_schema.directives.validator import (
    find_directive,
    find_directive_node,
    validate_directives,
)

__all__ = [
    "Directive",
    "FieldDirective",
    "RefDirective",
    "UniqueDirective",
    "LocalizedDirective",
    "FileDirective",
    "FilesDirective",
    "IndexingDirective",
    "TagsDirective",
    "FIELD_DIRECTIVES",
    "TABLE_DIRECTIVES",
    "ENUM_DIRECTIVES",
    "validate_directives",
    "find_directive",
    "find_directive_node",
]
