# topmark:header:start
#
#   project      : cargo-ros2ws
#   file         : version.py
#   file_relpath : src/ros2ws/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""cargo-ros2ws `version` command.

Prints the cargo-ros2ws version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from ros2ws.cli.cmd_common import get_console, get_effective_verbosity
from ros2ws.constants import ROS2WS_DIST_NAME, ROS2WS_VERSION


@click.command(
    name="version",
    help="Show the current version of cargo-ros2ws.",
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Show the current version of cargo-ros2ws."""
    console = get_console(ctx)
    if get_effective_verbosity(ctx) > 0:
        console.print(f"{ROS2WS_DIST_NAME} {console.styled(ROS2WS_VERSION, bold=True)}")
    else:
        console.print(ROS2WS_VERSION)
