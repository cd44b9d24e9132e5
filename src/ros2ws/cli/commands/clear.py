# topmark:header:start
#
#   project      : cargo-ros2ws
#   file         : clear.py
#   file_relpath : src/ros2ws/cli/commands/clear.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""cargo-ros2ws `clear` command.

Overwrites the manifest with an empty document. The previous content is not
read, so this also resets a manifest that no longer parses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ros2ws.cli.cmd_common import get_console, get_effective_verbosity, run_manifest_edit
from ros2ws.cli.options import common_manifest_options, resolve_manifest_options

if TYPE_CHECKING:
    from pathlib import Path


@click.command(
    name="clear",
    help="Reset the manifest to an empty document.",
)
@common_manifest_options
@click.pass_context
def clear_command(
    ctx: click.Context,
    *,
    manifest_path: Path | None,
    with_lock: bool,
    wait_nsecs: int | None,
) -> None:
    """Reset the manifest to an empty document."""
    options = resolve_manifest_options(
        ctx, manifest_path=manifest_path, with_lock=with_lock, wait_nsecs=wait_nsecs
    )
    run_manifest_edit(options, lambda manifest: None, load=False)

    if get_effective_verbosity(ctx) > 0:
        get_console(ctx).print(f"Cleared {options.manifest_path}")
