# topmark:header:start
#
#   project      : cargo-ros2ws
#   file         : sections.py
#   file_relpath : src/ros2ws/manifest/sections.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typed access to the two manifest sections cargo-ros2ws edits.

- ``workspace.members``: an array of path strings.
- ``patch.crates-io``: a table of ``crate = { path = "..." }`` records.

The ``*_section`` accessors create missing levels on the way down; the
``find_*`` lookups never mutate the document and return ``None`` when a level
is missing. Both raise `SchemaError` when an existing node has the wrong shape.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ros2ws.config.keys import Toml
from ros2ws.errors import SchemaError
from ros2ws.manifest.document import get_or_insert_array, get_or_insert_table
from ros2ws.manifest.guards import is_tomlkit_array, is_tomlkit_table

if TYPE_CHECKING:
    from tomlkit.items import Array
    from tomlkit.toml_document import TOMLDocument

    from ros2ws.manifest.guards import TableLike


def workspace_members(doc: TOMLDocument) -> Array:
    """Return the ``workspace.members`` array, creating ``[workspace]`` and ``members`` if needed.

    Raises:
        SchemaError: If ``workspace`` is not a table or ``members`` is not an array.
    """
    workspace: TableLike = get_or_insert_table(doc, Toml.SECTION_WORKSPACE)
    return get_or_insert_array(
        workspace,
        Toml.KEY_MEMBERS,
        qualified_key=Toml.PATH_WORKSPACE_MEMBERS,
    )


def patch_crates_io(doc: TOMLDocument) -> TableLike:
    """Return the ``patch.crates-io`` table, creating ``patch`` and ``crates-io`` if needed.

    A newly created ``patch`` table is a super table, so the document gains a
    single ``[patch.crates-io]`` header rather than an empty ``[patch]`` one.

    Raises:
        SchemaError: If ``patch`` or ``patch.crates-io`` is not a table.
    """
    patch: TableLike = get_or_insert_table(doc, Toml.SECTION_PATCH, super_table=True)
    return get_or_insert_table(
        patch,
        Toml.KEY_CRATES_IO,
        qualified_key=Toml.PATH_PATCH_CRATES_IO,
    )


def find_workspace_members(doc: TOMLDocument) -> Array | None:
    """Return the ``workspace.members`` array without creating anything."""
    workspace: object = doc.get(Toml.SECTION_WORKSPACE)
    if workspace is None:
        return None
    if not is_tomlkit_table(workspace):
        raise SchemaError(Toml.SECTION_WORKSPACE, "table")

    members: object = workspace.get(Toml.KEY_MEMBERS)
    if members is None:
        return None
    if not is_tomlkit_array(members):
        raise SchemaError(Toml.PATH_WORKSPACE_MEMBERS, "array")
    return members


def find_patch_crates_io(doc: TOMLDocument) -> TableLike | None:
    """Return the ``patch.crates-io`` table without creating anything."""
    patch: object = doc.get(Toml.SECTION_PATCH)
    if patch is None:
        return None
    if not is_tomlkit_table(patch):
        raise SchemaError(Toml.SECTION_PATCH, "table")

    crates_io: object = patch.get(Toml.KEY_CRATES_IO)
    if crates_io is None:
        return None
    if not is_tomlkit_table(crates_io):
        raise SchemaError(Toml.PATH_PATCH_CRATES_IO, "table")
    return crates_io
