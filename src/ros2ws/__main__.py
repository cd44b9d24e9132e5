# topmark:header:start
#
#   project      : cargo-ros2ws
#   file         : __main__.py
#   file_relpath : src/ros2ws/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running cargo-ros2ws via ``python -m ros2ws``.

It delegates directly to :func:`ros2ws.cli.main.cli`, the same entry point as
the ``ros2ws`` console script.

Examples:
    Add a workspace member::

        python -m ros2ws add-member -m /ws/Cargo.toml --member /ws/src/foo
"""

from __future__ import annotations

from ros2ws.cli.main import cli

if __name__ == "__main__":
    cli()
