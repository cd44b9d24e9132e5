# topmark:header:start
#
#   project      : cargo-ros2ws
#   file         : cmd_common.py
#   file_relpath : src/ros2ws/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds the plumbing shared by the manifest-editing commands: the
optional lock, the load → edit → write cycle, and the translation of library
errors into CLI errors. Commands only supply the edit itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, TypeVar

import click

from ros2ws.cli.console import ClickConsole
from ros2ws.cli.errors import to_cli_error
from ros2ws.config.logging import get_logger
from ros2ws.errors import Ros2wsError
from ros2ws.locking import FileLock
from ros2ws.manifest import Manifest
from ros2ws.manifest.validation import ensure_abs_path, ensure_not_dir

if TYPE_CHECKING:
    from ros2ws.cli.console_api import ConsoleLike
    from ros2ws.cli.options import ManifestOptions

T = TypeVar("T")

logger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context, or a plain one if missing."""
    if isinstance(ctx.obj, dict) and ctx.obj.get("console") is not None:
        console: ConsoleLike = ctx.obj["console"]
        return console
    return ClickConsole(enable_color=False)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity resolved by the group (0 when unset)."""
    if not isinstance(ctx.obj, dict):
        return 0
    return int(ctx.obj.get("verbosity_level", 0))


def run_manifest_edit(
    options: ManifestOptions,
    edit: Callable[[Manifest], T],
    *,
    load: bool = True,
) -> T:
    """Run one locked (optionally) load → edit → write cycle on the manifest.

    The manifest is written only when ``edit`` returns normally.

    Args:
        options (ManifestOptions): Resolved manifest path and lock settings.
        edit (Callable[[Manifest], T]): Edit to apply to the loaded manifest.
        load (bool): If False, start from an empty manifest instead of reading the file.

    Returns:
        T: Whatever ``edit`` returned.

    Raises:
        Ros2wsCliError: Any library error, converted with `to_cli_error`.
    """
    path = options.manifest_path
    try:
        ensure_abs_path(path)
        ensure_not_dir(path)
        with FileLock(path, enabled=options.with_lock, timeout=options.wait_nsecs):
            manifest: Manifest = Manifest.read_from(path) if load else Manifest.init()
            result: T = edit(manifest)
            manifest.write_to(path)
    except Ros2wsError as exc:
        logger.error("%s", exc)
        raise to_cli_error(exc) from exc
    return result
