# topmark:header:start
#
#   project      : cargo-ros2ws
#   file         : test_clear.py
#   file_relpath : tests/cli/test_clear.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the `clear` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, manifest_args, run_cli
from tests.conftest import read_manifest, write_manifest

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


def test_clear_empties_manifest(manifest_file: Path) -> None:
    write_manifest(manifest_file, '[workspace]\nmembers = ["/ws/src/foo"]\n')

    result: Result = run_cli(["clear", *manifest_args(manifest_file)])

    assert_SUCCESS(result)
    assert read_manifest(manifest_file) == ""


def test_clear_resets_unparsable_manifest(manifest_file: Path) -> None:
    """The old content is never parsed, so broken TOML can be reset."""
    write_manifest(manifest_file, "[workspace\nmembers = \n")

    result: Result = run_cli(["clear", "--with-lock", *manifest_args(manifest_file)])

    assert_SUCCESS(result)
    assert read_manifest(manifest_file) == ""


def test_clear_creates_missing_manifest(tmp_path: Path) -> None:
    target: Path = tmp_path / "Cargo.toml"

    result: Result = run_cli(["clear", *manifest_args(target)])

    assert_SUCCESS(result)
    assert target.is_file()
    assert read_manifest(target) == ""


def test_clear_then_add_member(manifest_file: Path) -> None:
    write_manifest(manifest_file, '[workspace]\nmembers = ["/old"]\n')

    assert_SUCCESS(run_cli(["clear", *manifest_args(manifest_file)]))
    assert_SUCCESS(run_cli(["add-member", *manifest_args(manifest_file, "/new")]))

    assert '"/old"' not in read_manifest(manifest_file)
    assert '"/new"' in read_manifest(manifest_file)


def test_clear_verbose_reports(manifest_file: Path) -> None:
    result: Result = run_cli(["-v", "clear", *manifest_args(manifest_file)])

    assert_SUCCESS(result)
    assert result.output.strip() == f"Cleared {manifest_file}"


def test_clear_rejects_directory(tmp_path: Path) -> None:
    result: Result = run_cli(["clear", *manifest_args(tmp_path)])

    assert_USAGE_ERROR(result)
    assert "not file" in result.output
