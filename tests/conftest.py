# topmark:header:start
#
#   project      : cargo-ros2ws
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the cargo-ros2ws test suite.

This file sets up global fixtures and the logging configuration for test runs.

Notes:
    Manifest paths must be absolute; build them from ``tmp_path`` (which is
    absolute) rather than from literals, except where a test checks the
    relative-path rejection itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from ros2ws.config import logging
from ros2ws.constants import DEFAULT_MANIFEST_NAME, LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def silence_ros2ws_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    ROS2WS_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture used to drop the environment variable.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set TRACE logging for the whole test session."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def manifest_file(tmp_path: Path) -> Path:
    """Return the absolute path of an empty ``Cargo.toml`` in a temporary directory."""
    path: Path = tmp_path / DEFAULT_MANIFEST_NAME
    path.write_text("", encoding="utf-8")
    return path


def write_manifest(path: Path, content: str) -> Path:
    """Write ``content`` to ``path`` (UTF-8, no newline translation) and return it."""
    path.write_bytes(content.encode("utf-8"))
    return path


def read_manifest(path: Path) -> str:
    """Return the raw text of a manifest file."""
    return path.read_bytes().decode("utf-8")
