# topmark:header:start
#
#   project      : cargo-ros2ws
#   file         : model.py
#   file_relpath : src/ros2ws/manifest/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The `Manifest` model: a Cargo workspace manifest loaded for editing.

A `Manifest` owns one tomlkit document for the duration of a single
load → edit → save cycle:

```python
manifest = Manifest.read_from(Path("/ws/Cargo.toml"))
manifest.add_member(Path("/ws/src/foo"))
manifest.add_patch("foo", Path("/ws/src/foo"))
manifest.write_to(Path("/ws/Cargo.toml"))
```

Edits are idempotent where it makes sense (``add_member``) and last-write-wins
otherwise (``add_patch``). An edit that fails with `SchemaError` may already
have created an empty section in memory; callers must simply not write the
manifest after a failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import tomlkit

from ros2ws.config.keys import Toml
from ros2ws.config.logging import get_logger
from ros2ws.manifest.document import parse_document, read_document, write_document
from ros2ws.manifest.sections import (
    find_patch_crates_io,
    find_workspace_members,
    patch_crates_io,
    workspace_members,
)
from ros2ws.manifest.validation import (
    ensure_abs_path,
    ensure_crate_name,
    ensure_not_dir,
    path_to_str,
)

if TYPE_CHECKING:
    from pathlib import Path

    from tomlkit.items import Array, InlineTable
    from tomlkit.toml_document import TOMLDocument

    from ros2ws.config.logging import Ros2wsLogger
    from ros2ws.manifest.guards import TableLike
    from ros2ws.manifest.validation import StrPath

logger: Ros2wsLogger = get_logger(__name__)


class Manifest:
    """A Cargo workspace manifest held as a format-preserving TOML document.

    Args:
        document (TOMLDocument): The parsed document to edit.

    Attributes:
        document (TOMLDocument): The underlying tomlkit document.
    """

    document: TOMLDocument

    def __init__(self, document: TOMLDocument) -> None:
        self.document = document

    def __repr__(self) -> str:
        return f"Manifest(members={self.members!r}, patches={self.patches!r})"

    def __str__(self) -> str:
        return self.as_string()

    # --- Lifecycle ---

    @classmethod
    def init(cls) -> Manifest:
        """Return a manifest holding an empty document (no sections)."""
        return cls(tomlkit.document())

    @classmethod
    def from_string(cls, text: str) -> Manifest:
        """Parse a manifest from TOML text.

        Raises:
            ManifestParseError: If ``text`` is not valid TOML.
        """
        return cls(parse_document(text))

    @classmethod
    def read_from(cls, src: StrPath) -> Manifest:
        """Read a manifest from an absolute file path.

        Args:
            src (StrPath): Absolute path to ``Cargo.toml``.

        Returns:
            Manifest: The loaded manifest.

        Raises:
            ValidationError: If ``src`` is relative or is a directory.
            ManifestIOError: If the file cannot be read.
            ManifestParseError: If the file is not valid TOML.
        """
        path: Path = ensure_abs_path(src)
        ensure_not_dir(path)

        logger.debug("Reading manifest %s", path)
        return cls(read_document(path))

    def write_to(self, dst: StrPath) -> None:
        """Write the manifest to an absolute file path.

        Args:
            dst (StrPath): Absolute path to write; created when missing.

        Raises:
            ValidationError: If ``dst`` is relative or is a directory.
            ManifestIOError: If the file cannot be written.
        """
        path: Path = ensure_abs_path(dst)
        ensure_not_dir(path)

        logger.debug("Writing manifest %s", path)
        write_document(self.document, path)

    def as_string(self) -> str:
        """Return the serialized TOML text of the manifest."""
        return self.document.as_string()

    # --- Edits ---

    def add_member(self, path: StrPath) -> bool:
        """Append ``path`` to ``workspace.members`` unless it is already listed.

        Entries are compared by exact string match; existing entries keep their
        order and the new one goes last.

        Args:
            path (StrPath): Absolute path of the member crate.

        Returns:
            bool: True if the path was appended, False if it was already a member.

        Raises:
            ValidationError: If ``path`` is not absolute.
            EncodingError: If ``path`` cannot be represented as UTF-8 text.
            SchemaError: If ``workspace`` or ``workspace.members`` has the wrong type.
        """
        ensure_abs_path(path)
        member: str = path_to_str(path)

        members: Array = workspace_members(self.document)
        if any(isinstance(entry, str) and entry == member for entry in members):
            logger.debug("Already a workspace member: %s", member)
            return False

        members.append(member)
        logger.debug("Added workspace member: %s", member)
        return True

    def add_patch(self, crate_name: str, path: StrPath) -> None:
        """Set ``patch.crates-io.<crate_name>`` to ``{ path = "<path>" }``.

        An existing record for ``crate_name`` is replaced as a whole; no field
        of the old record is kept.

        Args:
            crate_name (str): Name of the crates.io dependency to override.
            path (StrPath): Absolute path of the local crate to use instead.

        Raises:
            ValidationError: If ``crate_name`` is empty or ``path`` is not absolute.
            EncodingError: If ``path`` cannot be represented as UTF-8 text.
            SchemaError: If ``patch`` or ``patch.crates-io`` is not a table.
        """
        ensure_crate_name(crate_name)
        ensure_abs_path(path)
        override: str = path_to_str(path)

        crates_io: TableLike = patch_crates_io(self.document)
        if crate_name in crates_io:
            logger.debug("Replacing patch for %s", crate_name)

        record: InlineTable = tomlkit.inline_table()
        record[Toml.KEY_PATH] = override
        crates_io[crate_name] = record
        logger.debug("Patched %s -> %s", crate_name, override)

    # --- Read-only views ---

    @property
    def members(self) -> list[str]:
        """Return the string entries of ``workspace.members`` (empty if absent)."""
        members: Array | None = find_workspace_members(self.document)
        if members is None:
            return []
        return [str(entry) for entry in members if isinstance(entry, str)]

    @property
    def patches(self) -> dict[str, str]:
        """Return ``crate -> path`` for the records of ``patch.crates-io`` (empty if absent).

        Records that are not tables or have no string ``path`` (e.g. git
        overrides) are left out.
        """
        crates_io: TableLike | None = find_patch_crates_io(self.document)
        if crates_io is None:
            return {}

        out: dict[str, str] = {}
        for name, record in crates_io.items():
            if not isinstance(record, dict):
                continue
            override: object = record.get(Toml.KEY_PATH)
            if isinstance(override, str):
                out[str(name)] = str(override)
        return out
