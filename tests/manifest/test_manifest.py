# topmark:header:start
#
#   project      : cargo-ros2ws
#   file         : test_manifest.py
#   file_relpath : tests/manifest/test_manifest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `Manifest`: member and patch edits, lifecycle, and format preservation."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest
import tomlkit

from ros2ws.errors import (
    EncodingError,
    ManifestIOError,
    ManifestParseError,
    SchemaError,
    ValidationError,
)
from ros2ws.manifest import Manifest
from tests.conftest import read_manifest, write_manifest

if TYPE_CHECKING:
    from tomlkit.toml_document import TOMLDocument

CONTENT_WITH_UNRELATED_SECTION: str = """\
[patch.crate-io]
hoge = { path = "/piyo" }
"""

CONTENT_WITH_COMMENTS: str = """\
# Workspace assembled by colcon
[workspace]
# keep alphabetical
members = ["/ws/src/alpha"]   # first crate

[profile.release]
lto = true
"""


def _parsed(manifest: Manifest) -> TOMLDocument:
    return tomlkit.parse(manifest.as_string())


# --- add_member ---


def test_add_member_to_empty_manifest() -> None:
    """Members are appended in call order under a new [workspace] section."""
    manifest = Manifest.init()

    assert manifest.add_member("/test1") is True
    assert manifest.add_member(Path("/test2/test2")) is True

    text: str = manifest.as_string()
    assert text.startswith("[workspace]\n")
    assert _parsed(manifest)["workspace"]["members"] == ["/test1", "/test2/test2"]
    assert manifest.members == ["/test1", "/test2/test2"]


def test_add_member_keeps_unrelated_sections() -> None:
    """A misspelled sibling section is neither fixed nor dropped."""
    manifest = Manifest.from_string(CONTENT_WITH_UNRELATED_SECTION)

    manifest.add_member("/test1")
    manifest.add_member("/test2/test2")

    text: str = manifest.as_string()
    assert text.startswith(CONTENT_WITH_UNRELATED_SECTION)
    assert manifest.members == ["/test1", "/test2/test2"]
    assert "crates-io" not in text


def test_add_member_deduplicates_exact_matches() -> None:
    """Adding an existing member leaves the list unchanged."""
    manifest = Manifest.init()

    assert manifest.add_member("/test1") is True
    assert manifest.add_member("/test1") is False
    assert manifest.add_member("/test2/test2") is True
    assert manifest.add_member("/test2/test2") is False

    assert manifest.members == ["/test1", "/test2/test2"]


def test_add_member_compares_text_not_resolved_paths() -> None:
    """Paths naming the same directory differently are distinct members."""
    manifest = Manifest.init()

    manifest.add_member("/ws/src/foo")
    manifest.add_member("/ws/src/../src/foo")

    assert manifest.members == ["/ws/src/foo", "/ws/src/../src/foo"]


def test_add_member_appends_after_existing_entries() -> None:
    """Existing members keep their order and the new one goes last."""
    manifest = Manifest.from_string('[workspace]\nmembers = ["/b", "/a"]\n')

    manifest.add_member("/c")

    assert manifest.members == ["/b", "/a", "/c"]


def test_add_member_creates_members_in_existing_workspace() -> None:
    """An existing [workspace] without members gains the key."""
    manifest = Manifest.from_string('[workspace]\nresolver = "2"\n')

    manifest.add_member("/ws/src/foo")

    doc: TOMLDocument = _parsed(manifest)
    assert doc["workspace"]["resolver"] == "2"
    assert doc["workspace"]["members"] == ["/ws/src/foo"]


@pytest.mark.parametrize("path", ["test", "./test", "../test", ""])
def test_add_member_rejects_relative_paths(path: str) -> None:
    """Relative member paths raise ValidationError and leave the document untouched."""
    manifest = Manifest.init()

    with pytest.raises(ValidationError, match="not absolute path"):
        manifest.add_member(path)

    assert manifest.as_string() == ""


def test_add_member_rejects_non_utf8_path() -> None:
    """A path holding an undecodable byte cannot be written to the manifest."""
    manifest = Manifest.init()

    with pytest.raises(EncodingError):
        manifest.add_member("/bad\udcff")


# --- add_patch ---


def test_add_patch_to_empty_manifest_has_no_bare_patch_header() -> None:
    """Only [patch.crates-io] is emitted; the parent table stays implicit."""
    manifest = Manifest.init()

    manifest.add_patch("hoge", "/piyo")

    text: str = manifest.as_string()
    assert "[patch.crates-io]" in text
    assert "[patch]" not in text
    assert _parsed(manifest)["patch"]["crates-io"]["hoge"] == {"path": "/piyo"}


def test_add_patch_writes_inline_table_record() -> None:
    """Each record is a one-line inline table."""
    manifest = Manifest.init()

    manifest.add_patch("hoge", "/piyo")

    lines: list[str] = [ln for ln in manifest.as_string().splitlines() if ln.startswith("hoge")]
    assert len(lines) == 1
    assert "{" in lines[0] and "}" in lines[0]
    assert '"/piyo"' in lines[0]


def test_add_patch_preserves_existing_content() -> None:
    """The original text is kept and the new section is added after it."""
    content: str = '[workspace]\nmembers = ["/test1"]\n'
    manifest = Manifest.from_string(content)

    manifest.add_patch("hoge", "/piyo")

    assert manifest.as_string().startswith(content)
    assert manifest.patches == {"hoge": "/piyo"}
    assert manifest.members == ["/test1"]


def test_add_patch_last_write_wins() -> None:
    """A second patch for the same crate replaces the first; one key remains."""
    manifest = Manifest.init()

    manifest.add_patch("hoge", "/foo")
    manifest.add_patch("hoge", "/piyo")

    assert manifest.patches == {"hoge": "/piyo"}
    crates_io = _parsed(manifest)["patch"]["crates-io"]
    assert list(crates_io.keys()) == ["hoge"]


def test_add_patch_replaces_record_wholesale() -> None:
    """Fields of a previous record (version, features) are not carried over."""
    manifest = Manifest.from_string(
        '[patch.crates-io]\nhoge = { path = "/old", version = "1.0", features = ["x"] }\n'
    )

    manifest.add_patch("hoge", "/new")

    assert _parsed(manifest)["patch"]["crates-io"]["hoge"] == {"path": "/new"}


def test_add_patch_keeps_other_crates() -> None:
    """Patching one crate leaves the other records of the section alone."""
    manifest = Manifest.from_string(
        '[patch.crates-io]\nfoo = { path = "/foo" }\nbar = { git = "https://example.com/bar" }\n'
    )

    manifest.add_patch("baz", "/baz")

    crates_io = _parsed(manifest)["patch"]["crates-io"]
    assert list(crates_io.keys()) == ["foo", "bar", "baz"]
    assert crates_io["bar"] == {"git": "https://example.com/bar"}
    # git overrides have no path and are left out of the view
    assert manifest.patches == {"foo": "/foo", "baz": "/baz"}


def test_add_patch_adds_crates_io_to_existing_patch_table() -> None:
    """Other registries under [patch] are kept next to crates-io."""
    manifest = Manifest.from_string('[patch.my-registry]\nfoo = { path = "/foo" }\n')

    manifest.add_patch("bar", "/bar")

    doc: TOMLDocument = _parsed(manifest)
    assert doc["patch"]["my-registry"]["foo"] == {"path": "/foo"}
    assert doc["patch"]["crates-io"]["bar"] == {"path": "/bar"}


def test_add_patch_rejects_empty_crate_name_before_path() -> None:
    """The crate name is checked before the path."""
    manifest = Manifest.init()

    with pytest.raises(ValidationError, match="crate name should not be empty"):
        manifest.add_patch("", "relative")


@pytest.mark.parametrize("path", ["piyo", "./piyo", "../piyo"])
def test_add_patch_rejects_relative_paths(path: str) -> None:
    manifest = Manifest.init()

    with pytest.raises(ValidationError, match="not absolute path"):
        manifest.add_patch("hoge", path)

    assert manifest.as_string() == ""


def test_add_patch_rejects_non_utf8_path() -> None:
    manifest = Manifest.init()

    with pytest.raises(EncodingError):
        manifest.add_patch("hoge", "/bad\udcff")


# --- schema errors ---


@pytest.mark.parametrize(
    ("content", "key", "expected"),
    [
        ("workspace = 1\n", "workspace", "table"),
        ('workspace = "x"\n', "workspace", "table"),
        ("workspace = { members = [] }\n", "workspace", "table"),
        ("[[workspace]]\nmembers = []\n", "workspace", "table"),
        ('[workspace]\nmembers = "x"\n', "workspace.members", "array"),
        ("[workspace]\nmembers = 1\n", "workspace.members", "array"),
        ("[workspace.members]\nfoo = 1\n", "workspace.members", "array"),
    ],
)
def test_add_member_schema_errors(content: str, key: str, expected: str) -> None:
    """Wrongly typed sections raise SchemaError naming the dotted key."""
    manifest = Manifest.from_string(content)

    with pytest.raises(SchemaError) as excinfo:
        manifest.add_member("/test1")

    assert excinfo.value.key == key
    assert excinfo.value.expected == expected
    assert str(excinfo.value) == f"the type of the data for key `{key}` should be {expected}"
    assert manifest.as_string() == content


@pytest.mark.parametrize(
    ("content", "key"),
    [
        ('patch = "x"\n', "patch"),
        ("patch = 1\n", "patch"),
        ("[patch]\ncrates-io = 1\n", "patch.crates-io"),
        ('[patch]\ncrates-io = ["x"]\n', "patch.crates-io"),
        ('[patch]\ncrates-io = { hoge = { path = "/a" } }\n', "patch.crates-io"),
    ],
)
def test_add_patch_schema_errors(content: str, key: str) -> None:
    manifest = Manifest.from_string(content)

    with pytest.raises(SchemaError) as excinfo:
        manifest.add_patch("hoge", "/piyo")

    assert excinfo.value.key == key
    assert excinfo.value.expected == "table"


def test_schema_error_in_views() -> None:
    """The read-only views report the same schema errors as the edits."""
    with pytest.raises(SchemaError):
        _ = Manifest.from_string("workspace = 1\n").members
    with pytest.raises(SchemaError):
        _ = Manifest.from_string('patch = "x"\n').patches


def test_views_do_not_create_sections() -> None:
    manifest = Manifest.from_string("[package]\nname = \"foo\"\n")

    assert manifest.members == []
    assert manifest.patches == {}
    assert manifest.as_string() == "[package]\nname = \"foo\"\n"


def test_split_patch_table_is_a_table() -> None:
    """A [patch] table split around another section is still accepted."""
    content: str = (
        "[patch.crates-io]\n"
        'foo = { path = "/foo" }\n'
        "\n"
        "[workspace]\n"
        'members = ["/ws/src/foo"]\n'
        "\n"
        "[patch.my-registry]\n"
        'bar = { path = "/bar" }\n'
    )
    manifest = Manifest.from_string(content)

    assert manifest.patches == {"foo": "/foo"}
    assert manifest.members == ["/ws/src/foo"]


# --- format preservation ---


def test_round_trip_without_edits_is_byte_identical() -> None:
    manifest = Manifest.from_string(CONTENT_WITH_COMMENTS)

    assert manifest.as_string() == CONTENT_WITH_COMMENTS
    assert str(manifest) == CONTENT_WITH_COMMENTS


def test_edits_keep_comments_and_other_sections() -> None:
    """Comments, key order and unrelated tables survive an edit."""
    manifest = Manifest.from_string(CONTENT_WITH_COMMENTS)

    manifest.add_member("/ws/src/beta")
    manifest.add_patch("gamma", "/ws/src/gamma")

    text: str = manifest.as_string()
    assert text.startswith("# Workspace assembled by colcon\n[workspace]\n# keep alphabetical\n")
    assert "# first crate" in text
    assert "[profile.release]\nlto = true\n" in text
    assert manifest.members == ["/ws/src/alpha", "/ws/src/beta"]
    assert manifest.patches == {"gamma": "/ws/src/gamma"}


def test_from_string_rejects_invalid_toml() -> None:
    with pytest.raises(ManifestParseError, match="failed to parse toml file"):
        Manifest.from_string("[workspace\n")


def test_from_string_rejects_duplicate_keys() -> None:
    with pytest.raises(ManifestParseError):
        Manifest.from_string("[workspace]\nmembers = []\nmembers = []\n")


def test_repr_shows_members_and_patches() -> None:
    manifest = Manifest.init()
    manifest.add_member("/a")
    manifest.add_patch("b", "/b")

    assert repr(manifest) == "Manifest(members=['/a'], patches={'b': '/b'})"


# --- read_from / write_to ---


def test_read_edit_write_cycle(manifest_file: Path) -> None:
    write_manifest(manifest_file, CONTENT_WITH_COMMENTS)

    manifest = Manifest.read_from(manifest_file)
    manifest.add_member("/ws/src/beta")
    manifest.write_to(manifest_file)

    reloaded = Manifest.read_from(manifest_file)
    assert reloaded.members == ["/ws/src/alpha", "/ws/src/beta"]
    assert read_manifest(manifest_file) == manifest.as_string()


def test_read_from_empty_file(manifest_file: Path) -> None:
    manifest = Manifest.read_from(manifest_file)

    assert manifest.as_string() == ""
    assert manifest.members == []


def test_write_to_creates_missing_file(tmp_path: Path) -> None:
    target: Path = tmp_path / "Cargo.toml"
    manifest = Manifest.init()
    manifest.add_member("/a")

    manifest.write_to(target)

    assert tomlkit.parse(read_manifest(target))["workspace"]["members"] == ["/a"]


def test_write_to_keeps_crlf_line_endings(manifest_file: Path) -> None:
    """Line endings of the original document are not translated."""
    write_manifest(manifest_file, '[package]\r\nname = "foo"\r\n')

    manifest = Manifest.read_from(manifest_file)
    manifest.write_to(manifest_file)

    assert manifest_file.read_bytes() == b'[package]\r\nname = "foo"\r\n'


def test_edit_cycle_keeps_crlf_line_endings(manifest_file: Path) -> None:
    """Untouched lines keep CRLF endings after a read, edit and write."""
    manifest_file.write_bytes(b'# c\r\n[workspace]\r\nmembers = ["/a"]\r\n')

    manifest = Manifest.read_from(manifest_file)
    manifest.add_member("/b")
    manifest.write_to(manifest_file)

    raw: bytes = manifest_file.read_bytes()
    assert raw.startswith(b"# c\r\n[workspace]\r\n")
    assert raw.count(b"\n") == raw.count(b"\r\n") == 3
    assert Manifest.read_from(manifest_file).members == ["/a", "/b"]


def test_add_patch_under_explicit_patch_header(manifest_file: Path) -> None:
    """An explicit [patch] header is kept; crates-io gets its own header below it."""
    write_manifest(manifest_file, "[patch]\n")

    manifest = Manifest.read_from(manifest_file)
    manifest.add_patch("hoge", "/piyo")
    manifest.write_to(manifest_file)

    text: str = read_manifest(manifest_file)
    assert text.startswith("[patch]\n")
    assert text.count("[patch]") == 1
    assert "[patch.crates-io]" in text
    assert Manifest.read_from(manifest_file).patches == {"hoge": "/piyo"}


def test_init_then_write_clears_file(manifest_file: Path) -> None:
    write_manifest(manifest_file, CONTENT_WITH_COMMENTS)

    Manifest.init().write_to(manifest_file)

    assert read_manifest(manifest_file) == ""


@pytest.mark.parametrize("path", ["Cargo.toml", "./Cargo.toml", "../Cargo.toml"])
def test_read_from_rejects_relative_paths(path: str) -> None:
    with pytest.raises(ValidationError, match="not absolute path"):
        Manifest.read_from(path)


@pytest.mark.parametrize("path", ["Cargo.toml", "./Cargo.toml", "../Cargo.toml"])
def test_write_to_rejects_relative_paths(path: str) -> None:
    with pytest.raises(ValidationError, match="not absolute path"):
        Manifest.init().write_to(path)


def test_read_from_rejects_directory(tmp_path: Path) -> None:
    with pytest.raises(ValidationError, match="not file"):
        Manifest.read_from(tmp_path)


def test_write_to_rejects_directory(tmp_path: Path) -> None:
    with pytest.raises(ValidationError, match="not file"):
        Manifest.init().write_to(tmp_path)


def test_read_from_missing_file(tmp_path: Path) -> None:
    missing: Path = tmp_path / "Cargo.toml"

    with pytest.raises(ManifestIOError) as excinfo:
        Manifest.read_from(missing)

    assert excinfo.value.path == missing
    assert str(excinfo.value).startswith(f"failed to read file {missing}: ")


def test_read_from_invalid_toml_names_the_file(manifest_file: Path) -> None:
    write_manifest(manifest_file, "[workspace\n")

    with pytest.raises(ManifestParseError) as excinfo:
        Manifest.read_from(manifest_file)

    assert excinfo.value.path == manifest_file
    assert str(manifest_file) in str(excinfo.value)


def test_read_from_non_utf8_file(manifest_file: Path) -> None:
    manifest_file.write_bytes(b"name = \"\xff\"\n")

    with pytest.raises(ManifestIOError):
        Manifest.read_from(manifest_file)


def test_write_to_missing_directory(tmp_path: Path) -> None:
    target: Path = tmp_path / "missing" / "Cargo.toml"

    with pytest.raises(ManifestIOError, match="failed to write file"):
        Manifest.init().write_to(target)
