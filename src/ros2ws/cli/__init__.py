# topmark:header:start
#
#   project      : cargo-ros2ws
#   file         : __init__.py
#   file_relpath : src/ros2ws/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for cargo-ros2ws."""
