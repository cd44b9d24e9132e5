# topmark:header:start
#
#   project      : cargo-ros2ws
#   file         : __init__.py
#   file_relpath : src/ros2ws/manifest/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format-preserving editing of Cargo workspace manifests.

Layers, leaves first:

- `document`: tomlkit parse/serialize and get-or-insert of tables and arrays.
- `validation`: absolute-path, not-a-directory, crate-name and UTF-8 checks.
- `sections`: typed access to ``workspace.members`` and ``patch.crates-io``.
- `model`: the `Manifest` class tying them together.

TOML parsing/formatting:
    tomlkit is used (not ``tomllib``) because the document must round-trip:
    comments, key order and whitespace of untouched regions are written back
    unchanged.
"""

from __future__ import annotations

from ros2ws.manifest.model import Manifest

__all__: list[str] = [
    "Manifest",
]
