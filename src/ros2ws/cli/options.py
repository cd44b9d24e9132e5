# topmark:header:start
#
#   file         : options.py
#   file_relpath : src/ros2ws/cli/options.py
#   project      : cargo-ros2ws
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options for the cargo-ros2ws Click commands.

This module centralizes reusable options (verbosity, color, manifest/lock) and
their resolution logic, so the group and the subcommands can stay thin.

The manifest options are accepted both on the group and on each subcommand:

    cargo ros2ws --manifest-path /ws/Cargo.toml --with-lock add-member /ws/src/foo
    ros2ws add-member --manifest-path /ws/Cargo.toml --with-lock --member /ws/src/foo

Values given on the subcommand take precedence over the group's.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from ros2ws.cli.errors import Ros2wsUsageError

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v`` and ``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        ``-1`` (quiet), ``0`` (default), ``1`` (-v) or ``2`` (-vv and more).

    Raises:
        Ros2wsUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise Ros2wsUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return min(verbose_count, 2)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--verbose`` and ``--quiet`` counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_manifest_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--manifest-path``, ``--with-lock`` and ``--wait-nsecs`` to a command.

    All three default to "not given" so that a subcommand can fall back to the
    values given on the group (see `resolve_manifest_options`).
    """
    f = click.option(
        "-m",
        "--manifest-path",
        "manifest_path",
        type=click.Path(path_type=Path),
        default=None,
        help="Absolute path to Cargo.toml of the cargo workspace.",
    )(f)
    f = click.option(
        "--with-lock",
        "with_lock",
        is_flag=True,
        default=False,
        help="Lock the manifest file to process it exclusively.",
    )(f)
    f = click.option(
        "-s",
        "--wait-nsecs",
        "wait_nsecs",
        type=click.IntRange(min=0),
        default=None,
        help="How many seconds to wait to acquire the lock (0 means forever).  [default: 0]",
    )(f)
    return f


@dataclass(frozen=True)
class ManifestOptions:
    """Resolved manifest options of one invocation.

    Attributes:
        manifest_path: Path of the manifest to edit.
        with_lock: Whether to hold an exclusive lock while editing.
        wait_nsecs: Lock timeout in seconds (0 = wait forever).
    """

    manifest_path: Path
    with_lock: bool
    wait_nsecs: int


def resolve_manifest_options(
    ctx: click.Context,
    *,
    manifest_path: Path | None,
    with_lock: bool,
    wait_nsecs: int | None,
) -> ManifestOptions:
    """Merge subcommand manifest options with those given on the group.

    Args:
        ctx: Current (subcommand) Click context; group values live in
            ``ctx.obj["manifest_defaults"]``.
        manifest_path: ``--manifest-path`` given on the subcommand, if any.
        with_lock: ``--with-lock`` given on the subcommand.
        wait_nsecs: ``--wait-nsecs`` given on the subcommand, if any.

    Returns:
        The effective options.

    Raises:
        Ros2wsUsageError: If no manifest path was given at either level.
    """
    defaults: dict[str, object] = {}
    if isinstance(ctx.obj, dict):
        defaults = ctx.obj.get("manifest_defaults") or {}

    path = manifest_path if manifest_path is not None else defaults.get("manifest_path")
    if not isinstance(path, Path):
        raise Ros2wsUsageError("Missing option '--manifest-path'.")

    wait = wait_nsecs if wait_nsecs is not None else defaults.get("wait_nsecs")
    return ManifestOptions(
        manifest_path=path,
        with_lock=with_lock or bool(defaults.get("with_lock")),
        wait_nsecs=wait if isinstance(wait, int) else 0,
    )
