"""
Schema file loading.

Reads a schema document from disk and hands it to the parser. Anything that
prevents the document from being read (nothing selected, wrong extension,
missing or unreadable file) is reported as `MissingAssetError`; a document
that can be read but is not well-formed is reported as `ParseError`.
"""

import logging
from pathlib import Path

from metaprompt.exceptions import MissingAssetError
from metaprompt.parsing.parser import parse_schema_text
from metaprompt.schema.models import Schema

logger = logging.getLogger(__name__)

SCHEMA_SUFFIX = ".xml"


def read_schema_file(path: str | Path | None) -> bytes:
    """
    Read the raw bytes of a schema file.

    Params:
        path: Location of the schema file, None when nothing was selected

    Returns:
        The undecoded file content; the XML parser resolves the encoding
        from the byte order mark or the XML declaration

    Raises:
        MissingAssetError: If no path is given, the path does not name an XML
            file, or the file cannot be read
    """
    if path is None or str(path) == "":
        raise MissingAssetError(None, "no file selected")

    schema_path = Path(path)
    if schema_path.suffix.lower() != SCHEMA_SUFFIX:
        raise MissingAssetError(str(path), "not an XML file")
    if not schema_path.is_file():
        raise MissingAssetError(str(path), "file not found")

    try:
        return schema_path.read_bytes()
    except OSError as e:
        raise MissingAssetError(str(path), f"read failed ({e})") from e


def load_schema(path: str | Path | None) -> Schema:
    """
    Load and parse a schema file.

    Params:
        path: Location of the schema file

    Returns:
        The parsed Schema

    Raises:
        MissingAssetError: If the file cannot be read
        ParseError: If the file is not well-formed XML or does not match its
            declared encoding
    """
    content = read_schema_file(path)
    schema = parse_schema_text(content, source=str(path))
    logger.info("Loaded schema '%s' from %s", schema.metadata.name, path)
    return schema
