# topmark:header:start
#
#   project      : cargo-ros2ws
#   file         : keys.py
#   file_relpath : src/ros2ws/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names of a Cargo workspace manifest.

Only the two sections cargo-ros2ws edits are listed here:

```toml
[workspace]
members = ["/abs/path/to/crate"]

[patch.crates-io]
my_crate = { path = "/abs/path/to/crate" }
```

Keeping them in one place avoids hard-coded strings across the manifest layer
and gives error messages a single source for dotted key names.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used in ``Cargo.toml``.

    Notes:
        - Values must match Cargo's manifest keys exactly.
        - ``PATH_*`` constants are the dotted paths used in error messages.
    """

    # [workspace]
    SECTION_WORKSPACE: Final[str] = "workspace"

    KEY_MEMBERS: Final[str] = "members"

    # [patch] and [patch.crates-io]
    SECTION_PATCH: Final[str] = "patch"

    KEY_CRATES_IO: Final[str] = "crates-io"

    # Field of a patch record: `name = { path = "..." }`
    KEY_PATH: Final[str] = "path"

    # Dotted paths
    PATH_WORKSPACE_MEMBERS: Final[str] = f"{SECTION_WORKSPACE}.{KEY_MEMBERS}"
    PATH_PATCH_CRATES_IO: Final[str] = f"{SECTION_PATCH}.{KEY_CRATES_IO}"
