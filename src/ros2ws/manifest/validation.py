# topmark:header:start
#
#   project      : cargo-ros2ws
#   file         : validation.py
#   file_relpath : src/ros2ws/manifest/validation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Path and identifier checks applied before touching a manifest.

Paths are checked lexically: they must be absolute, and the manifest itself
must not be a directory. Nothing here checks that a member or patch path
exists or holds a crate.
"""

from __future__ import annotations

import os
from pathlib import Path

from ros2ws.errors import EncodingError, ValidationError

StrPath = str | os.PathLike[str]


def ensure_abs_path(path: StrPath) -> Path:
    """Return ``path`` as a `Path`, rejecting relative paths.

    Args:
        path (StrPath): Path to check. ``"test"``, ``"./test"`` and ``"../test"`` are rejected.

    Returns:
        Path: The same path as a `Path` instance.

    Raises:
        ValidationError: If the path is not absolute.
    """
    p = Path(path)
    if not p.is_absolute():
        raise ValidationError(f"not absolute path {p}")
    return p


def ensure_not_dir(path: Path) -> None:
    """Reject a path that names an existing directory.

    Raises:
        ValidationError: If ``path`` is a directory.
    """
    if path.is_dir():
        raise ValidationError(f"not file {path}")


def ensure_crate_name(crate_name: str) -> None:
    """Reject an empty crate name.

    Raises:
        ValidationError: If ``crate_name`` is empty.
    """
    if not crate_name:
        raise ValidationError("crate name should not be empty")


def path_to_str(path: StrPath) -> str:
    """Return the text of ``path`` exactly as given, verified to be valid UTF-8.

    On POSIX, undecodable bytes in file names surface as lone surrogates
    (``surrogateescape``); such strings cannot be written to a TOML file.

    Args:
        path (StrPath): Path to convert.

    Returns:
        str: The path text.

    Raises:
        EncodingError: If the path cannot be encoded as UTF-8.
    """
    text: str = os.fspath(path)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise EncodingError(path) from exc
    return text
