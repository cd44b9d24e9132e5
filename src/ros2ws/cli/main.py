# topmark:header:start
#
#   project      : cargo-ros2ws
#   file         : main.py
#   file_relpath : src/ros2ws/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Entry points of the cargo-ros2ws CLI.

Key ideas:
- Group-level options (verbosity, color, manifest defaults) are initialized
  once and placed into ``ctx.obj``.
- Subcommands are thin: they resolve their options and hand an edit to
  [`run_manifest_edit`][ros2ws.cli.cmd_common.run_manifest_edit].
- ``cargo-ros2ws`` is also a Cargo external subcommand: ``cargo ros2ws ARGS``
  runs ``cargo-ros2ws ros2ws ARGS``, so `cargo_main` drops that first word.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from ros2ws.cli.commands.add_member import add_member_command
from ros2ws.cli.commands.add_patch import add_patch_command
from ros2ws.cli.commands.clear import clear_command
from ros2ws.cli.commands.version import version_command
from ros2ws.cli.console import ClickConsole
from ros2ws.cli.options import (
    ColorMode,
    common_color_options,
    common_manifest_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from ros2ws.config.logging import get_logger, resolve_env_log_level, setup_logging
from ros2ws.constants import CARGO_SUBCOMMAND_NAME

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from ros2ws.cli.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured from the environment only.
    setup_logging(level=resolve_env_log_level())

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Edit a Cargo workspace manifest: add members and [patch.crates-io] overrides.",
)
@common_verbose_options
@common_color_options
@common_manifest_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    manifest_path: Path | None,
    with_lock: bool,
    wait_nsecs: int | None,
) -> None:
    """Entry point for the cargo-ros2ws CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    # Defaults for the subcommands (Cargo front-end places these before the subcommand).
    ctx.obj["manifest_defaults"] = {
        "manifest_path": manifest_path,
        "with_lock": with_lock,
        "wait_nsecs": wait_nsecs,
    }

    if ctx.invoked_subcommand is None:
        console: ConsoleLike = ctx.obj["console"]
        console.print(ctx.get_help())


cli.add_command(add_member_command)

cli.add_command(add_patch_command)

cli.add_command(clear_command)

cli.add_command(version_command)


def strip_cargo_subcommand(argv: Sequence[str]) -> list[str]:
    """Drop the subcommand word Cargo passes to external subcommands.

    Args:
        argv (Sequence[str]): Arguments after the program name.

    Returns:
        list[str]: ``argv`` without a leading ``ros2ws``.
    """
    args: list[str] = list(argv)
    if args and args[0] == CARGO_SUBCOMMAND_NAME:
        return args[1:]
    return args


def cargo_main() -> None:
    """Entry point of the ``cargo-ros2ws`` console script."""
    cli.main(
        args=strip_cargo_subcommand(sys.argv[1:]),
        prog_name=f"cargo {CARGO_SUBCOMMAND_NAME}",
    )


if __name__ == "__main__":
    cli()
