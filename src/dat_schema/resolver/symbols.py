"""Symbol tables of every table and enumeration across all documents."""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping

from graphql.language import DocumentNode, EnumTypeDefinitionNode, ObjectTypeDefinitionNode

from dat_schema.errors import ErrorKind, SchemaError

logger = logging.getLogger(__name__)


class SymbolTable:
    """Read-only name-keyed definitions of every table and enumeration.

    Iteration order of both mappings is declaration order across documents.

    Attributes:
        tables: Table definitions by name.
        enumerations: Enumeration definitions by name.
    """

    def __init__(
        self,
        tables: Mapping[str, ObjectTypeDefinitionNode],
        enumerations: Mapping[str, EnumTypeDefinitionNode],
    ) -> None:
        self.tables: Mapping[str, ObjectTypeDefinitionNode] = MappingProxyType(dict(tables))
        self.enumerations: Mapping[str, EnumTypeDefinitionNode] = MappingProxyType(
            dict(enumerations)
        )

    def __repr__(self) -> str:
        return f"SymbolTable(tables={list(self.tables)!r}, enumerations={list(self.enumerations)!r})"


class SymbolTableBuilder:
    """Collects definitions from parsed documents into a `SymbolTable`.

    All documents must be added before any column is resolved, so that
    references to types declared later or in another document resolve.
    """

    def __init__(self) -> None:
        self._tables: Dict[str, ObjectTypeDefinitionNode] = {}
        self._enumerations: Dict[str, EnumTypeDefinitionNode] = {}

    def add_document(self, document: DocumentNode) -> "SymbolTableBuilder":
        """Register every top-level definition of a document.

        Args:
            document: A parsed schema document

        Returns:
            This builder, for chaining

        Raises:
            SchemaError: If a definition is neither a type nor an enum, or if
                its name is already registered for the same kind.
        """
        for definition in document.definitions:
            if isinstance(definition, EnumTypeDefinitionNode):
                self._register(
                    self._enumerations, definition, "Enum with this name has already been defined."
                )
            elif isinstance(definition, ObjectTypeDefinitionNode):
                self._register(
                    self._tables, definition, "Table with this name has already been defined."
                )
            else:
                raise SchemaError(
                    "Unsupported definition.",
                    definition,
                    kind=ErrorKind.UNSUPPORTED_DEFINITION,
                )
        return self

    def build(self) -> SymbolTable:
        """Freeze the collected definitions."""
        return SymbolTable(self._tables, self._enumerations)

    @classmethod
    def build_from_documents(cls, documents: Iterable[DocumentNode]) -> SymbolTable:
        """Build a symbol table from documents in order."""
        builder = cls()
        for document in documents:
            builder.add_document(document)
        return builder.build()

    @staticmethod
    def _register(registry: Dict, definition, message: str) -> None:
        name = definition.name.value
        if name in registry:
            raise SchemaError(message, definition.name, kind=ErrorKind.DUPLICATE_DEFINITION)
        registry[name] = definition
        logger.debug("Registered %s %s", definition.kind, name)
