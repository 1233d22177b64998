#!/usr/bin/env python3
"""Example demonstrating schema analysis across several documents.

This example shows how tables in one document can reference tables and
enumerations declared in another, how `@ref` columns take the type of the
column they point at, and how errors are reported with their location.
"""

from graphql import Source

from dat_schema import analyze, read_schema_sources

CORE = Source(
    '''
type Mods {
  Id: string @unique
  "Internal hash, stable across patches"
  Hash: i32 @unique
  Domain: ModDomains
  Tags: [string]
}

enum ModDomains @indexing(first: 1) {
  Item
  Flask
  _
  Monster
}
''',
    "_Core.graphql",
)

LEAGUES = Source(
    '''
type LeagueMods @tags(list: ["league"]) {
  Mod: Mods
  ModHash: Mods @ref(column: "Hash")
  Icon: string @file(ext: ".dds")
}
''',
    "Leagues.graphql",
)


def print_schema() -> None:
    """Analyze two documents and print the resolved model."""
    # Document order does not matter, LeagueMods refers forward to Mods
    schema_file = read_schema_sources([LEAGUES, CORE])

    for table in schema_file.tables:
        print(f"{table.name} {list(table.tags)}")
        for column in table.columns:
            column_type = f"[{column.type}]" if column.array else str(column.type)
            target = ""
            if column.references is not None:
                target = f" -> {column.references.table}"
                if column.references.column:
                    target += f".{column.references.column}"
            print(f"  {column.name or '_'}: {column_type}{target}")

    for enumeration in schema_file.enumerations:
        print(f"{enumeration.name} (first={enumeration.indexing}): {list(enumeration.enumerators)}")


def print_error() -> None:
    """Show how a referenced column that is not unique is reported."""
    broken = Source(
        '''
type Mods { Id: string }
type LeagueMods { Mod: Mods @ref(column: "Id") }
''',
        "Broken.graphql",
    )
    result = analyze([broken])
    if not result.ok:
        print(f"{result.error.kind}: {result.error}")
        print(f"caused by {result.error.cause.kind}: {result.error.cause}")


def main() -> None:
    """Run both examples."""
    print("=" * 60)
    print("Resolved schema")
    print("=" * 60)
    print_schema()
    print()
    print("=" * 60)
    print("Error report")
    print("=" * 60)
    print_error()


if __name__ == "__main__":
    main()
