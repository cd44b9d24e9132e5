# topmark:header:start
#
#   project      : cargo-ros2ws
#   file         : errors.py
#   file_relpath : src/ros2ws/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the manifest engine and the file lock.

These are plain library exceptions with no Click dependency. The CLI maps each
of them onto a `click.ClickException` subclass with a dedicated exit code (see
[`ros2ws.cli.errors`][ros2ws.cli.errors]).

Every error carries enough context (path, key, reason) to produce a
self-contained message: callers never need to add the path themselves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class Ros2wsError(Exception):
    """Base class for all cargo-ros2ws errors."""


class ManifestIOError(Ros2wsError):
    """The manifest file could not be opened, read, or written.

    Args:
        path (Path): The manifest path involved.
        action (str): What was attempted (``"read"``, ``"write"``, ``"open"``).
        reason (str): Underlying error text.
    """

    def __init__(self, path: Path, action: str, reason: str) -> None:
        self.path = path
        self.action = action
        self.reason = reason
        super().__init__(f"failed to {action} file {path}: {reason}")


class ManifestParseError(Ros2wsError):
    """The manifest content is not valid TOML."""

    def __init__(self, path: Path | None, reason: str) -> None:
        self.path = path
        self.reason = reason
        where: str = f" {path}" if path is not None else ""
        super().__init__(f"failed to parse toml file{where}: {reason}")


class SchemaError(Ros2wsError):
    """An existing node of the manifest does not have the expected shape.

    Args:
        key (str): Dotted key of the offending node (e.g. ``"workspace.members"``).
        expected (str): Expected kind (``"table"`` or ``"array"``).
    """

    def __init__(self, key: str, expected: str) -> None:
        self.key = key
        self.expected = expected
        super().__init__(f"the type of the data for key `{key}` should be {expected}")


class ValidationError(Ros2wsError):
    """An argument violates the path or identifier rules.

    Raised for relative paths, directories given where a file is required,
    and empty crate names.
    """


class EncodingError(Ros2wsError):
    """A path cannot be represented as UTF-8 text."""

    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(f"fail to convert to UTF-8 string {path!r}")


class LockTimeoutError(Ros2wsError):
    """The exclusive lock on the manifest was not acquired before the deadline."""

    def __init__(self, path: Path, timeout: float) -> None:
        self.path = path
        self.timeout = timeout
        super().__init__(f"Failed to acquire lock of file {path} within {timeout:g}s")
