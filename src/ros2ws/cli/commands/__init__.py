# topmark:header:start
#
#   project      : cargo-ros2ws
#   file         : __init__.py
#   file_relpath : src/ros2ws/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the cargo-ros2ws CLI."""
