#!/usr/bin/env python3
"""
Tests for the tree engine primitives: resolution, cloning and equality.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging

import pytest
from valuefs import (
    Data,
    Directory,
    Mode,
    Path,
    Stat,
    Tree,
    clone,
    entries_equal,
    resolve,
    NoSuchFile,
    ExpectedDirectoryGotData,
)
from valuefs.tree import from_literal, to_literal, stat_of


@pytest.fixture
def root():
    """A small tree: /docs/readme (data) and /empty (directory)."""
    return from_literal({"docs": {"readme": "hello"}, "empty": {}})


class TestResolve:
    """Test walking paths through a tree."""

    def test_root_resolves_to_itself(self, root):
        assert resolve(root, Path.absolute([])) is root

    def test_finds_entries(self, root):
        assert resolve(root, Path.absolute(["docs", "readme"])) == Data(b"hello")
        assert isinstance(resolve(root, Path.absolute(["empty"])), Directory)

    def test_missing_last_component(self, root):
        assert resolve(root, Path.absolute(["docs", "nope"])) is None

    def test_missing_intermediate(self, root):
        with pytest.raises(NoSuchFile) as excinfo:
            resolve(root, Path.absolute(["nope", "deeper", "file"]))
        assert excinfo.value.path == Path.absolute(["nope"])

    def test_data_where_directory_expected(self, root):
        with pytest.raises(ExpectedDirectoryGotData) as excinfo:
            resolve(root, Path.absolute(["docs", "readme", "x"]))
        assert excinfo.value.path == Path.absolute(["docs", "readme"])

    def test_creates_parent_directories(self, root):
        assert resolve(root, Path.absolute(["a", "b", "c"]), create_parent_dirs=True) is None
        assert resolve(root, Path.absolute(["a", "b"])) == Directory()
        assert resolve(root, Path.absolute(["a", "b", "c"])) is None

    def test_creation_stops_at_data(self, root):
        with pytest.raises(ExpectedDirectoryGotData):
            resolve(root, Path.absolute(["docs", "readme", "x", "y"]),
                    create_parent_dirs=True)

    def test_stat_of(self, root):
        assert stat_of(root) is Stat.DIRECTORY
        assert stat_of(Data(b"")) is Stat.DATA
        assert stat_of(None) is Stat.NOTHING


class TestCloneAndEquality:
    """Test deep copies and structural comparison."""

    def test_clone_is_equal_but_independent(self, root):
        copy = clone(root)
        assert entries_equal(copy, root)
        assert copy is not root
        copy.children["docs"].children["readme"] = Data(b"changed")
        assert root.children["docs"].children["readme"] == Data(b"hello")

    def test_equality_ignores_insertion_order(self):
        a = Directory({"x": Data(b"1"), "y": Directory()})
        b = Directory({"y": Directory(), "x": Data(b"1")})
        assert entries_equal(a, b)

    def test_data_requires_bytes_like(self):
        assert Data(bytearray(b"ab")).content == b"ab"
        with pytest.raises(TypeError):
            Data(3)

    def test_inequalities(self):
        assert not entries_equal(Data(b"1"), Data(b"2"))
        assert not entries_equal(Data(b""), Directory())
        assert not entries_equal(Directory({"x": Directory()}), Directory({"y": Directory()}))
        assert not entries_equal(Directory(), None)
        assert entries_equal(None, None)

    def test_literal_round_trip(self, root):
        assert to_literal(root) == {"docs": {"readme": b"hello"}, "empty": {}}
        assert entries_equal(from_literal(to_literal(root)), root)

    def test_from_literal_rejects_other_types(self):
        with pytest.raises(TypeError):
            from_literal({"n": 5})


class TestTree:
    """Test Tree directly with absolute paths."""

    def test_mutations_report_whether_they_applied(self, root):
        tree = Tree(root)
        assert tree.write(Path.absolute(["new"]), b"x") is True
        assert tree.write(Path.absolute(["new"]), b"y", Mode.PLACID) is False
        assert tree.mkdir(Path.absolute(["empty"]), Mode.PLACID) is False
        assert tree.copy(Path.absolute(["new"]), Path.absolute(["docs"]), Mode.PLACID) is False
        assert tree.move(Path.absolute(["new"]), Path.absolute(["docs"]), Mode.PLACID) is False
        assert tree.read(Path.absolute(["new"])) == b"x"

    def test_trees_compare_structurally(self):
        assert Tree() == Tree(Directory())
        assert Tree(from_literal({"a": "b"})) != Tree()

    def test_placid_conflict_is_logged(self, root, caplog):
        tree = Tree(root)
        with caplog.at_level(logging.DEBUG, logger="valuefs.tree"):
            tree.write(Path.absolute(["docs", "readme"]), b"x", Mode.PLACID)
        assert "leaving it in place" in caplog.text
