# topmark:header:start
#
#   project      : cargo-ros2ws
#   file         : add_member.py
#   file_relpath : src/ros2ws/cli/commands/add_member.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""cargo-ros2ws `add-member` command.

Adds a crate to ``workspace.members``. Adding a path that is already a member
succeeds without changing the list.
"""

from __future__ import annotations

from pathlib import Path
from typing import cast

import click

from ros2ws.cli.cmd_common import get_console, get_effective_verbosity, run_manifest_edit
from ros2ws.cli.errors import Ros2wsUsageError
from ros2ws.cli.options import common_manifest_options, resolve_manifest_options


@click.command(
    name="add-member",
    help="Add a crate to the members of cargo workspace.",
)
@common_manifest_options
@click.option(
    "--member",
    "member",
    type=click.Path(path_type=Path),
    default=None,
    help="Absolute path to the crate to add to the members of cargo workspace.",
)
@click.argument(
    "member_arg",
    metavar="[MEMBER]",
    type=click.Path(path_type=Path),
    required=False,
)
@click.pass_context
def add_member_command(
    ctx: click.Context,
    *,
    manifest_path: Path | None,
    with_lock: bool,
    wait_nsecs: int | None,
    member: Path | None,
    member_arg: Path | None,
) -> None:
    """Add a crate to the members of cargo workspace.

    The member is given either with ``--member`` or as the positional ``MEMBER``.
    """
    if (member is None) == (member_arg is None):
        raise Ros2wsUsageError("Give the member either as '--member PATH' or as MEMBER, once.")
    target: Path = cast("Path", member if member is not None else member_arg)

    options = resolve_manifest_options(
        ctx, manifest_path=manifest_path, with_lock=with_lock, wait_nsecs=wait_nsecs
    )
    added: bool = run_manifest_edit(options, lambda manifest: manifest.add_member(target))

    if get_effective_verbosity(ctx) > 0:
        console = get_console(ctx)
        if added:
            console.print(f"Added member {target} to {options.manifest_path}")
        else:
            console.print(f"{target} is already a member of {options.manifest_path}")
