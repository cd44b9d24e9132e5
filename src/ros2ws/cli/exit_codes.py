# topmark:header:start
#
#   project      : cargo-ros2ws
#   file         : exit_codes.py
#   file_relpath : src/ros2ws/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the cargo-ros2ws CLI.

The values follow the BSD `sysexits` convention where practical, so that build
scripts can tell a bad invocation from a broken manifest or a lock timeout
without parsing messages.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the cargo-ros2ws CLI.

    Attributes:
        SUCCESS: The manifest was edited (or already in the requested state).
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Invalid arguments: relative path, directory instead of a
            file, empty crate name. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: A path is not representable as UTF-8 text. Mirrors BSD
            ``EX_DATAERR (65)``.
        LOCK_TIMEOUT: The manifest lock was not acquired in time; retrying later
            may succeed. Mirrors BSD ``EX_TEMPFAIL (75)``.
        IO_ERROR: The manifest could not be opened, read or written. Mirrors BSD
            ``EX_IOERR (74)``.
        CONFIG_ERROR: The manifest is not valid TOML or an edited section has the
            wrong type. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    IO_ERROR = 74  # EX_IOERR
    LOCK_TIMEOUT = 75  # EX_TEMPFAIL
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
