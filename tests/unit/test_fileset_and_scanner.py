"""Tests for file discovery and file-level scanning."""

from pathlib import Path

import pytest

from prototags.core.errors import SourceReadError
from prototags.core.fileset import collect_proto_files
from prototags.core.scanner import scan_file, scan_paths


@pytest.fixture
def proto_tree(tmp_path: Path) -> Path:
    """A small directory of schema files."""
    (tmp_path / "api").mkdir()
    (tmp_path / "vendor").mkdir()
    (tmp_path / "api" / "user.proto").write_text("package api;\nmessage User {}\n")
    (tmp_path / "api" / "notes.txt").write_text("message NotAProto {}\n")
    (tmp_path / "vendor" / "ext.proto").write_text("message Ext {}\n")
    (tmp_path / "root.proto").write_text("enum E { A = 0; }\n")
    return tmp_path


class TestDiscovery:
    def test_directory_is_walked(self, proto_tree: Path) -> None:
        files = collect_proto_files([proto_tree]).files
        assert files == [
            proto_tree / "api" / "user.proto",
            proto_tree / "root.proto",
            proto_tree / "vendor" / "ext.proto",
        ]

    def test_explicit_file_kept_regardless_of_suffix(self, proto_tree: Path) -> None:
        notes = proto_tree / "api" / "notes.txt"
        assert collect_proto_files([notes]).files == [notes]

    def test_extensions(self, proto_tree: Path) -> None:
        files = collect_proto_files([proto_tree], extensions=["txt"]).files
        assert files == [proto_tree / "api" / "notes.txt"]

    def test_exclude(self, proto_tree: Path) -> None:
        files = collect_proto_files([proto_tree], exclude=["vendor/*"]).files
        assert proto_tree / "vendor" / "ext.proto" not in files
        assert len(files) == 2

    def test_exclude_by_name(self, proto_tree: Path) -> None:
        files = collect_proto_files([proto_tree], exclude=["user.*"]).files
        assert proto_tree / "api" / "user.proto" not in files

    def test_duplicates_removed(self, proto_tree: Path) -> None:
        root = proto_tree / "root.proto"
        files = collect_proto_files([root, proto_tree, root]).files
        assert files.count(root) == 1

    def test_missing_path(self, tmp_path: Path) -> None:
        fileset = collect_proto_files([tmp_path / "missing.proto"])
        assert fileset.files == []
        assert isinstance(fileset.missing[0], SourceReadError)
        assert "No such file" in str(fileset.missing[0])

    def test_missing_paths_collected(self, proto_tree: Path) -> None:
        missing = proto_tree / "missing.proto"
        root = proto_tree / "root.proto"
        fileset = collect_proto_files([missing, root, proto_tree / "gone"])
        assert fileset.files == [root]
        assert [e.context.file for e in fileset.missing] == [missing, proto_tree / "gone"]
        assert all("No such file" in str(e) for e in fileset.missing)

    def test_nothing_missing(self, proto_tree: Path) -> None:
        fileset = collect_proto_files([proto_tree])
        assert fileset.missing == []


class TestScanFile:
    def test_tags_carry_file(self, proto_tree: Path) -> None:
        path = proto_tree / "api" / "user.proto"
        tags = scan_file(path)
        assert [(t.name, t.line, t.file) for t in tags] == [
            ("api", 1, path),
            ("User", 2, path),
        ]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SourceReadError):
            scan_file(tmp_path / "nope.proto")

    def test_undecodable_file(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.proto"
        bad.write_bytes(b"message \xff\xfe {}")
        with pytest.raises(SourceReadError, match="decode"):
            scan_file(bad)

    def test_other_encoding(self, tmp_path: Path) -> None:
        latin = tmp_path / "latin.proto"
        latin.write_bytes(b"// caf\xe9\nmessage M {}")
        assert [t.name for t in scan_file(latin, encoding="latin-1")] == ["M"]


class TestScanPaths:
    def test_independent_files(self, proto_tree: Path) -> None:
        files = collect_proto_files([proto_tree]).files
        result = scan_paths(files)
        assert result.ok
        assert result.files_scanned == 3
        assert [t.name for t in result.tags] == ["api", "User", "E", "A", "Ext"]

    def test_unreadable_file_does_not_stop_batch(self, proto_tree: Path) -> None:
        bad = proto_tree / "bad.proto"
        bad.write_bytes(b"\xff\xfe")
        result = scan_paths([bad, proto_tree / "root.proto"])
        assert not result.ok
        assert len(result.errors) == 1
        assert result.files_scanned == 1
        assert [t.name for t in result.tags] == ["E", "A"]

    def test_state_does_not_leak_between_files(self, tmp_path: Path) -> None:
        first = tmp_path / "a.proto"
        second = tmp_path / "b.proto"
        first.write_text("enum E {")
        second.write_text("X = 1; message M {}")
        result = scan_paths([first, second])
        assert [t.name for t in result.tags] == ["E", "M"]
