"""
In-memory tree of directories and data blobs.

Every directory exclusively owns its children; there are no parent links, so
all algorithms walk top-down from the root. Paths handed to a Tree must be
absolute.

Conflict handling for operations whose destination is already occupied is
governed by Mode:

- TIMID: raise AlreadyExists
- PLACID: leave the tree untouched
- ASSERTIVE: replace whatever is there
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Set, Tuple, Union

from .errors import (
    AlreadyExists,
    CannotMoveIntoItself,
    CannotOperateOnRoot,
    CannotRemoveRoot,
    ExpectedDataGotDirectory,
    ExpectedDirectoryGotData,
    InvalidComponent,
    NoSuchFile,
)
from .path import Path

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Policy for a destination that is already occupied."""
    TIMID = 'timid'
    PLACID = 'placid'
    ASSERTIVE = 'assertive'


class Stat(Enum):
    """What a path resolves to."""
    DIRECTORY = 'directory'
    DATA = 'data'
    NOTHING = 'nothing'


@dataclass
class Data:
    """A leaf holding an opaque byte string."""
    content: bytes = b""

    def __post_init__(self):
        if not isinstance(self.content, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"Data content must be bytes-like, not {type(self.content).__name__}")
        self.content = bytes(self.content)


@dataclass
class Directory:
    """A directory mapping component names to entries."""
    children: Dict[str, 'Entry'] = field(default_factory=dict)


Entry = Union[Directory, Data]

# Nested dicts for directories, str (UTF-8) or bytes for data.
TreeLiteral = Union[str, bytes, Dict[str, 'TreeLiteral']]


def resolve(root: Directory, path: Path,
            create_parent_dirs: bool = False) -> Optional[Entry]:
    """
    Walk `path` from `root` and return the entry it names.

    Returns None if only the last component is missing. A missing
    intermediate directory is created when `create_parent_dirs` is set,
    otherwise NoSuchFile is raised. A path without components resolves to
    `root` itself.
    """
    entry: Entry = root
    components = path.components
    for index, name in enumerate(components):
        if isinstance(entry, Data):
            raise ExpectedDirectoryGotData(Path.absolute(components[:index]))
        child = entry.children.get(name)
        if child is None:
            if index == len(components) - 1:
                return None
            if not create_parent_dirs:
                raise NoSuchFile(Path.absolute(components[:index + 1]))
            child = Directory()
            entry.children[name] = child
        entry = child
    return entry


def stat_of(entry: Optional[Entry]) -> Stat:
    if entry is None:
        return Stat.NOTHING
    if isinstance(entry, Directory):
        return Stat.DIRECTORY
    return Stat.DATA


def clone(entry: Entry) -> Entry:
    """Deep copy of `entry` sharing no mutable state with it."""
    if isinstance(entry, Data):
        return Data(entry.content)
    return Directory({name: clone(child)
                      for name, child in entry.children.items()})


def entries_equal(a: Optional[Entry], b: Optional[Entry]) -> bool:
    """
    Structural equality of two (possibly absent) entries.

    Directories are equal when they hold the same set of names and each
    pair of children is equal; child order is irrelevant.
    """
    if a is None or b is None:
        return a is None and b is None
    if isinstance(a, Data) and isinstance(b, Data):
        return a.content == b.content
    if isinstance(a, Directory) and isinstance(b, Directory):
        if a.children.keys() != b.children.keys():
            return False
        return all(entries_equal(child, b.children[name])
                   for name, child in a.children.items())
    return False


def from_literal(literal: TreeLiteral) -> Entry:
    """Build an entry from nested dicts of str/bytes."""
    if isinstance(literal, dict):
        directory = Directory()
        for name, child in literal.items():
            if not isinstance(name, str) or not Path.is_component(name):
                raise InvalidComponent(name)
            directory.children[name] = from_literal(child)
        return directory
    if isinstance(literal, str):
        return Data(literal.encode('utf-8'))
    if isinstance(literal, (bytes, bytearray, memoryview)):
        return Data(bytes(literal))
    raise TypeError(f"Cannot build a tree entry from {type(literal).__name__}")


def to_literal(entry: Entry) -> TreeLiteral:
    """Render an entry as nested dicts of bytes."""
    if isinstance(entry, Data):
        return entry.content
    return {name: to_literal(child) for name, child in entry.children.items()}


class Tree:
    """
    A rooted tree supporting the filesystem operations.

    All paths are absolute. Mutating methods return True if they changed the
    tree and False if PLACID mode turned them into a no-op. Nothing is
    modified when a method raises.
    """

    def __init__(self, root: Optional[Directory] = None):
        self.root = root if root is not None else Directory()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tree):
            return NotImplemented
        return entries_equal(self.root, other.root)

    # Queries

    def ls(self, path: Path) -> Set[str]:
        entry = resolve(self.root, path)
        if entry is None:
            raise NoSuchFile(path)
        if isinstance(entry, Data):
            raise ExpectedDirectoryGotData(path)
        return set(entry.children)

    def stat(self, path: Path) -> Stat:
        return stat_of(resolve(self.root, path))

    def read(self, path: Path) -> bytes:
        entry = resolve(self.root, path)
        if entry is None:
            raise NoSuchFile(path)
        if isinstance(entry, Directory):
            raise ExpectedDataGotDirectory(path)
        return entry.content

    # Mutations

    def write(self, path: Path, content: bytes, mode: Mode = Mode.TIMID) -> bool:
        return self._put(path, Data(content), Mode(mode), 'write over')

    def mkdir(self, path: Path, mode: Mode = Mode.TIMID) -> bool:
        return self._put(path, Directory(), Mode(mode), 'recreate')

    def remove(self, path: Path) -> bool:
        if not path.components:
            raise CannotRemoveRoot()
        parent, entry = self._lookup(path)
        if entry is None:
            raise NoSuchFile(path)
        del parent.children[path.name]
        logger.debug("removed %s", path)
        return True

    def copy(self, src: Path, dst: Path, mode: Mode = Mode.TIMID) -> bool:
        source = resolve(self.root, src)
        if source is None:
            raise NoSuchFile(src)
        # Cloned before the destination is touched, so copying a directory
        # into its own subtree snapshots the original contents.
        return self._put(dst, clone(source), Mode(mode), 'copy onto')

    def move(self, src: Path, dst: Path, mode: Mode = Mode.TIMID) -> bool:
        mode = Mode(mode)
        if not src.components:
            raise CannotOperateOnRoot('move')
        if not dst.components:
            raise CannotOperateOnRoot('move onto')
        src_parent, source = self._lookup(src)
        if source is None:
            raise NoSuchFile(src)
        _, existing = self._lookup(dst)
        if src != dst and src.prefixes(dst):
            raise CannotMoveIntoItself(src, dst)
        if not self._claim(dst, existing, mode):
            return False
        if src != dst:
            del src_parent.children[src.name]
            self._place(dst, source)
        logger.debug("moved %s to %s", src, dst)
        return True

    # Helpers

    def _lookup(self, path: Path) -> Tuple[Optional[Directory], Optional[Entry]]:
        """
        Find the parent directory of a non-root path and the entry at it.

        Creates nothing. The parent is None when some ancestor is missing;
        data in place of an ancestor raises ExpectedDirectoryGotData.
        """
        directory = self.root
        components = path.components
        for index, name in enumerate(components[:-1]):
            child = directory.children.get(name)
            if child is None:
                return None, None
            if isinstance(child, Data):
                raise ExpectedDirectoryGotData(
                    Path.absolute(components[:index + 1]))
            directory = child
        return directory, directory.children.get(path.name)

    def _claim(self, path: Path, existing: Optional[Entry], mode: Mode) -> bool:
        """Apply the occupancy policy; False means leave the tree alone."""
        if existing is None:
            return True
        if mode is Mode.TIMID:
            raise AlreadyExists(path)
        if mode is Mode.PLACID:
            logger.debug("%s is occupied, leaving it in place", path)
            return False
        return True

    def _place(self, path: Path, entry: Entry) -> None:
        resolve(self.root, path, create_parent_dirs=True)
        parent = resolve(self.root, path.parent())
        parent.children[path.name] = entry

    def _put(self, path: Path, entry: Entry, mode: Mode, operation: str) -> bool:
        if not path.components:
            raise CannotOperateOnRoot(operation)
        _, existing = self._lookup(path)
        if not self._claim(path, existing, mode):
            return False
        self._place(path, entry)
        logger.debug("placed %s at %s", type(entry).__name__.lower(), path)
        return True
