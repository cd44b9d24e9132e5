# topmark:header:start
#
#   project      : cargo-ros2ws
#   file         : __init__.py
#   file_relpath : src/ros2ws/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for cargo-ros2ws.

cargo-ros2ws has no configuration file of its own. This package holds the two
things that play that role:

- [`ros2ws.config.keys`][ros2ws.config.keys]: the canonical names of the
  ``Cargo.toml`` sections the tool edits.
- [`ros2ws.config.logging`][ros2ws.config.logging]: logger setup, driven by the
  ``ROS2WS_LOG_LEVEL`` environment variable.
"""

from __future__ import annotations
