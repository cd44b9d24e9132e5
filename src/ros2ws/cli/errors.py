# topmark:header:start
#
#   project      : cargo-ros2ws
#   file         : errors.py
#   file_relpath : src/ros2ws/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the cargo-ros2ws CLI.

Usage:
    Commands do not catch library errors themselves. The shared runner in
    [`ros2ws.cli.cmd_common`][ros2ws.cli.cmd_common] converts any
    [`Ros2wsError`][ros2ws.errors.Ros2wsError] with `to_cli_error()`, and Click
    prints the message and exits with the mapped code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from ros2ws.cli.exit_codes import ExitCode
from ros2ws.errors import (
    EncodingError,
    LockTimeoutError,
    ManifestIOError,
    ManifestParseError,
    Ros2wsError,
    SchemaError,
    ValidationError,
)


class Ros2wsCliError(click.ClickException):
    """Base class for all cargo-ros2ws CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add color.
            - Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class Ros2wsUsageError(Ros2wsCliError):
    """Error for invalid arguments (relative paths, empty crate name, bad flag combinations)."""

    exit_code = ExitCode.USAGE_ERROR


class Ros2wsEncodingError(Ros2wsCliError):
    """Error for paths that cannot be written as UTF-8 text."""

    exit_code = ExitCode.ENCODING_ERROR


class Ros2wsIOError(Ros2wsCliError):
    """Error for I/O errors opening, reading or writing the manifest."""

    exit_code = ExitCode.IO_ERROR


class Ros2wsLockTimeoutError(Ros2wsCliError):
    """Error when the manifest lock is not acquired before the deadline."""

    exit_code = ExitCode.LOCK_TIMEOUT


class Ros2wsManifestError(Ros2wsCliError):
    """Error for manifests that do not parse or have mistyped sections."""

    exit_code = ExitCode.CONFIG_ERROR


class Ros2wsUnexpectedError(Ros2wsCliError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR


_ERROR_MAP: tuple[tuple[type[Ros2wsError], type[Ros2wsCliError]], ...] = (
    (ValidationError, Ros2wsUsageError),
    (EncodingError, Ros2wsEncodingError),
    (ManifestIOError, Ros2wsIOError),
    (LockTimeoutError, Ros2wsLockTimeoutError),
    (ManifestParseError, Ros2wsManifestError),
    (SchemaError, Ros2wsManifestError),
)


def to_cli_error(exc: Ros2wsError) -> Ros2wsCliError:
    """Return the CLI error (and thus exit code) matching a library error.

    Args:
        exc (Ros2wsError): The error raised by the manifest engine or the lock.

    Returns:
        Ros2wsCliError: A Click exception carrying the same message.
    """
    for error_type, cli_error_type in _ERROR_MAP:
        if isinstance(exc, error_type):
            return cli_error_type(str(exc))
    return Ros2wsUnexpectedError(str(exc))
