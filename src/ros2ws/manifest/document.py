# topmark:header:start
#
#   project      : cargo-ros2ws
#   file         : document.py
#   file_relpath : src/ros2ws/manifest/document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lossless TOML document I/O and node creation using tomlkit.

The manifest is held as a tomlkit *AST* (`TOMLDocument`) rather than plain
dicts, so every region the tool does not touch (comments, key order, spacing,
unrelated sections) is written back byte for byte.

Notes:
    - ``get_or_insert_*`` helpers mutate the container immediately. A node they
      create stays in place even when a later step of the same edit fails;
      nothing reaches the disk in that case because writing only happens after
      a successful edit.
    - Writes go to the existing file in place (no temp file + rename). A lock
      held on the manifest belongs to its inode, and replacing the inode would
      let a waiting process lock a file nobody reads anymore.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import tomlkit
from tomlkit.exceptions import TOMLKitError

from ros2ws.config.logging import get_logger
from ros2ws.errors import ManifestIOError, ManifestParseError, SchemaError
from ros2ws.manifest.guards import is_tomlkit_array, is_tomlkit_table

if TYPE_CHECKING:
    from pathlib import Path

    from tomlkit.items import Array
    from tomlkit.toml_document import TOMLDocument

    from ros2ws.config.logging import Ros2wsLogger
    from ros2ws.manifest.guards import TableLike

logger: Ros2wsLogger = get_logger(__name__)


def parse_document(text: str, *, source: Path | None = None) -> TOMLDocument:
    """Parse TOML text into a format-preserving document.

    Args:
        text (str): TOML document text.
        source (Path | None): File the text came from, used in error messages.

    Returns:
        TOMLDocument: The parsed document.

    Raises:
        ManifestParseError: If the text is not valid TOML (including duplicate keys).
    """
    try:
        return tomlkit.parse(text)
    except TOMLKitError as exc:
        raise ManifestParseError(source, str(exc)) from exc


def read_document(source: Path) -> TOMLDocument:
    """Read and parse a TOML file.

    Args:
        source (Path): Path of the TOML file. Encoding is assumed to be UTF-8; line
            endings are kept as they are in the file.

    Returns:
        TOMLDocument: The parsed document.

    Raises:
        ManifestIOError: If the file cannot be read or decoded.
    """
    try:
        with open(source, encoding="utf-8", newline="") as f:
            text: str = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestIOError(source, "read", str(exc)) from exc

    logger.debug("Read %d characters from %s", len(text), source)
    return parse_document(text, source=source)


def write_document(doc: TOMLDocument, destination: Path) -> None:
    """Serialize a document and write it to ``destination`` in place.

    Newline translation is disabled so that line endings already present in the
    document are kept as they are.

    Args:
        doc (TOMLDocument): Document to serialize.
        destination (Path): Target file; created when missing, truncated otherwise.

    Raises:
        ManifestIOError: If the file cannot be written.
    """
    text: str = doc.as_string()
    try:
        with open(destination, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as exc:
        raise ManifestIOError(destination, "write", str(exc)) from exc

    logger.debug("Wrote %d characters to %s", len(text), destination)


def get_or_insert_table(
    container: TOMLDocument | TableLike,
    key: str,
    *,
    qualified_key: str | None = None,
    super_table: bool = False,
) -> TableLike:
    """Return the table at ``key``, inserting an empty one when absent.

    Args:
        container (TOMLDocument | TableLike): Document or table holding ``key``.
        key (str): Key of the table within ``container``.
        qualified_key (str | None): Dotted key reported in errors (defaults to ``key``).
        super_table (bool): Create the table as a tomlkit *super table*, which
            prints no header of its own while it only holds sub-tables
            (``[patch.crates-io]`` instead of ``[patch]`` + ``[patch.crates-io]``).
            Only applies when the table is created.

    Returns:
        TableLike: The existing or newly inserted table.

    Raises:
        SchemaError: If a value that is not a table already exists at ``key``.
    """
    existing: object = container.get(key)
    if existing is None:
        table = tomlkit.table(is_super_table=True) if super_table else tomlkit.table()
        container[key] = table
        logger.trace("Created table [%s]", qualified_key or key)
        return table

    if not is_tomlkit_table(existing):
        raise SchemaError(qualified_key or key, "table")
    return existing


def get_or_insert_array(
    container: TOMLDocument | TableLike,
    key: str,
    *,
    qualified_key: str | None = None,
) -> Array:
    """Return the array at ``key``, inserting an empty one when absent.

    Args:
        container (TOMLDocument | TableLike): Document or table holding ``key``.
        key (str): Key of the array within ``container``.
        qualified_key (str | None): Dotted key reported in errors (defaults to ``key``).

    Returns:
        Array: The existing or newly inserted array.

    Raises:
        SchemaError: If a value that is not an array already exists at ``key``.
    """
    existing: object = container.get(key)
    if existing is None:
        array: Array = tomlkit.array()
        container[key] = array
        logger.trace("Created array %s", qualified_key or key)
        return array

    if not is_tomlkit_array(existing):
        raise SchemaError(qualified_key or key, "array")
    return existing
