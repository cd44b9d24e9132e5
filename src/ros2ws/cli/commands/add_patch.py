# topmark:header:start
#
#   project      : cargo-ros2ws
#   file         : add_patch.py
#   file_relpath : src/ros2ws/cli/commands/add_patch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""cargo-ros2ws `add-patch` command.

Overrides a crates.io dependency with a local path in ``[patch.crates-io]``.
"""

from __future__ import annotations

from pathlib import Path

import click

from ros2ws.cli.cmd_common import get_console, get_effective_verbosity, run_manifest_edit
from ros2ws.cli.options import common_manifest_options, resolve_manifest_options


@click.command(
    name="add-patch",
    help="Override dependencies using [patch] section.",
)
@common_manifest_options
@click.option(
    "-c",
    "--crate",
    "crate_name",
    required=True,
    help="Crate name to patch.",
)
@click.option(
    "-p",
    "--path",
    "path",
    type=click.Path(path_type=Path),
    required=True,
    help="Absolute path to the crate to override with.",
)
@click.pass_context
def add_patch_command(
    ctx: click.Context,
    *,
    manifest_path: Path | None,
    with_lock: bool,
    wait_nsecs: int | None,
    crate_name: str,
    path: Path,
) -> None:
    """Override a crates.io dependency with a local crate."""
    options = resolve_manifest_options(
        ctx, manifest_path=manifest_path, with_lock=with_lock, wait_nsecs=wait_nsecs
    )
    run_manifest_edit(options, lambda manifest: manifest.add_patch(crate_name, path))

    if get_effective_verbosity(ctx) > 0:
        get_console(ctx).print(
            f"Patched {crate_name} = {{ path = \"{path}\" }} in {options.manifest_path}"
        )
