"""Split a schema document into one file per table definition."""

import logging
import re
from pathlib import Path
from typing import Dict, List

logger = logging.getLogger(__name__)

TYPE_DEFINITION = re.compile(r"type (\w+)[^{]*\{[^}]*\}", re.DOTALL)


def split_types(text: str) -> Dict[str, str]:
    """Extract every `type Name { ... }` definition of a document.

    Enumerations and any other text are left out.

    Args:
        text: The schema document

    Returns:
        Definition text by table name, in document order
    """
    return {match.group(1): match.group(0) for match in TYPE_DEFINITION.finditer(text)}


def write_split(text: str, output_dir: Path) -> List[Path]:
    """Write each table definition of a document to `<Name>.graphql`.

    Args:
        text: The schema document
        output_dir: Directory receiving the files, created if missing

    Returns:
        Paths of the written files
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for name, definition in split_types(text).items():
        path = output_dir / f"{name}.graphql"
        path.write_text(definition, encoding="utf-8")
        logger.debug("Wrote %s", path)
        written.append(path)
    return written
