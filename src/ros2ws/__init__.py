# topmark:header:start
#
#   project      : cargo-ros2ws
#   file         : __init__.py
#   file_relpath : src/ros2ws/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""cargo-ros2ws package.

cargo-ros2ws edits the ``Cargo.toml`` of a Cargo workspace: it registers
workspace members and ``[patch.crates-io]`` path overrides while preserving
comments and formatting, optionally under an exclusive advisory file lock so
that parallel package builds can share one workspace manifest.

The small public API mirrors what the CLI does:

```python
from pathlib import Path

from ros2ws import FileLock, Manifest

path = Path("/ws/Cargo.toml")
with FileLock(path, timeout=30):
    manifest = Manifest.read_from(path)
    manifest.add_member(Path("/ws/src/my_crate"))
    manifest.write_to(path)
```
"""

from __future__ import annotations

from ros2ws.errors import (
    EncodingError,
    LockTimeoutError,
    ManifestIOError,
    ManifestParseError,
    Ros2wsError,
    SchemaError,
    ValidationError,
)
from ros2ws.locking import FileLock
from ros2ws.manifest import Manifest

__all__: list[str] = [
    "EncodingError",
    "FileLock",
    "LockTimeoutError",
    "Manifest",
    "ManifestIOError",
    "ManifestParseError",
    "Ros2wsError",
    "SchemaError",
    "ValidationError",
]
