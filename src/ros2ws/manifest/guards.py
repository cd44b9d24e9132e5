# topmark:header:start
#
#   project      : cargo-ros2ws
#   file         : guards.py
#   file_relpath : src/ros2ws/manifest/guards.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type guards for tomlkit nodes.

These `TypeGuard` predicates let Pyright narrow the loosely typed values
returned by tomlkit containers, and encode which node kinds count as a
"table" or an "array" for the manifest accessors.
"""

from __future__ import annotations

from typing import TypeGuard

from tomlkit.container import OutOfOrderTableProxy
from tomlkit.items import Array, Table

# A table split across the document (e.g. `[patch.crates-io]` ... `[patch.git]`
# with another section in between) is returned by tomlkit as a proxy.
TableLike = Table | OutOfOrderTableProxy


def is_tomlkit_table(obj: object) -> TypeGuard[TableLike]:
    """Type guard for a standard (non-inline) tomlkit table.

    Inline tables (``{ ... }``) are values, not tables, and do not match.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TableLike]: ``True`` if ``obj`` is a ``Table`` or an out-of-order table proxy.
    """
    return isinstance(obj, (Table, OutOfOrderTableProxy))


def is_tomlkit_array(obj: object) -> TypeGuard[Array]:
    """Type guard for a tomlkit array value.

    Arrays of tables (``[[...]]``) do not match.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[Array]: ``True`` if ``obj`` is a ``tomlkit.items.Array``.
    """
    return isinstance(obj, Array)
