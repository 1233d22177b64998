"""Entry points of the schema analysis pipeline.

Documents are parsed, their definitions merged into a symbol table, and every
table and enumeration is then resolved against the frozen symbol table. The
first error aborts the whole analysis.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List, Sequence, Union

from graphql import GraphQLError, Source, parse
from graphql.language import DocumentNode

from dat_schema.errors import AnalysisResult, ErrorKind, SchemaError
from dat_schema.resolver.enums import resolve_enumeration
from dat_schema.resolver.symbols import SymbolTable, SymbolTableBuilder
from dat_schema.resolver.tables import resolve_table
from dat_schema.schema.base import SchemaFile

logger = logging.getLogger(__name__)

SourceLike = Union[Source, str]


def _as_source(source: SourceLike, position: int) -> Source:
    if isinstance(source, Source):
        return source
    return Source(source, f"document {position}")


def parse_sources(sources: Sequence[SourceLike]) -> List[DocumentNode]:
    """Parse schema documents, keeping node locations for diagnostics.

    Args:
        sources: Schema texts or named sources, in order

    Returns:
        One document per source

    Raises:
        SchemaError: If a document is not valid SDL.
    """
    documents = []
    for position, source in enumerate(sources, start=1):
        source = _as_source(source, position)
        try:
            documents.append(parse(source, no_location=False))
        except GraphQLError as error:
            raise SchemaError(
                error.message,
                error.nodes,
                kind=ErrorKind.SYNTAX,
                source=error.source,
                positions=error.positions,
                original_error=error,
            ) from error
        logger.debug("Parsed %s", source.name)
    return documents


def _resolve_all(symbols: SymbolTable, max_workers: int) -> SchemaFile:
    if max_workers <= 1:
        tables = [resolve_table(table, symbols) for table in symbols.tables.values()]
        enumerations = [resolve_enumeration(enum) for enum in symbols.enumerations.values()]
        return SchemaFile(tables=tuple(tables), enumerations=tuple(enumerations))

    # map() yields in submission order, so the first error raised while
    # consuming is the one a sequential pass would raise first.
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        table_results = executor.map(
            lambda table: resolve_table(table, symbols), symbols.tables.values()
        )
        enum_results = executor.map(resolve_enumeration, symbols.enumerations.values())
        tables = tuple(table_results)
        enumerations = tuple(enum_results)
    return SchemaFile(tables=tables, enumerations=enumerations)


def read_schema_sources(sources: Sequence[SourceLike], max_workers: int = 1) -> SchemaFile:
    """Analyze schema documents into a schema model.

    Args:
        sources: Schema texts or named sources, in order
        max_workers: Threads used to resolve tables and enumerations

    Returns:
        The resolved tables and enumerations

    Raises:
        SchemaError: On the first syntax or semantic error.
    """
    documents = parse_sources(sources)
    symbols = SymbolTableBuilder.build_from_documents(documents)
    schema_file = _resolve_all(symbols, max_workers)
    logger.info(
        "Analyzed %d tables and %d enumerations",
        len(schema_file.tables),
        len(schema_file.enumerations),
    )
    return schema_file


def analyze(sources: Sequence[SourceLike], max_workers: int = 1) -> AnalysisResult:
    """Analyze schema documents without raising on schema errors.

    Args:
        sources: Schema texts or named sources, in order
        max_workers: Threads used to resolve tables and enumerations

    Returns:
        A result holding either the schema or the first error
    """
    try:
        return AnalysisResult(schema_file=read_schema_sources(sources, max_workers))
    except SchemaError as error:
        logger.debug("Analysis failed: %s", error.message)
        return AnalysisResult(error=error)


def load_sources(paths: Iterable[Path], pattern: str = "*.graphql") -> List[Source]:
    """Read schema files into named sources.

    Directories are expanded to the files matching `pattern`, sorted by name.

    Args:
        paths: Files or directories, in order
        pattern: Glob used inside directories

    Returns:
        One source per file, named after its path
    """
    sources = []
    for path in paths:
        files = sorted(path.glob(pattern)) if path.is_dir() else [path]
        for file in files:
            sources.append(Source(file.read_text(encoding="utf-8"), str(file)))
    return sources
