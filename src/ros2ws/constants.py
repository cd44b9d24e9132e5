# topmark:header:start
#
#   project      : cargo-ros2ws
#   file         : constants.py
#   file_relpath : src/ros2ws/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""cargo-ros2ws Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

ROS2WS_DIST_NAME: Final[str] = "cargo-ros2ws"
ROS2WS_VERSION: str = get_version(ROS2WS_DIST_NAME)

# Cargo runs `cargo-<name> <name> ...` for `cargo <name> ...`.
CARGO_SUBCOMMAND_NAME: Final[str] = "ros2ws"

DEFAULT_MANIFEST_NAME: Final[str] = "Cargo.toml"

# Environment variable honored by `ros2ws.config.logging.resolve_env_log_level`.
LOG_LEVEL_ENV_VAR: Final[str] = "ROS2WS_LOG_LEVEL"

# Seconds between two non-blocking lock attempts.
DEFAULT_LOCK_POLL_INTERVAL: Final[float] = 0.05
