"""
In-memory implementation of the Filesystem contract.

MemoryFs keeps a Tree and an absolute working directory. Relative paths are
joined onto the working directory before the tree sees them.
"""

import logging
from typing import Optional, Set

from .config import FsConfig
from .errors import ExpectedDirectoryGotData, NoSuchFile
from .path import Path, Pathish
from .store import Filesystem
from .tree import (
    Data,
    Directory,
    TreeLiteral,
    Mode,
    Stat,
    Tree,
    from_literal,
    resolve,
    to_literal,
)

logger = logging.getLogger(__name__)


class MemoryFs(Filesystem):
    """
    A filesystem living entirely in memory.

    Two MemoryFs instances compare equal when their trees are structurally
    equal; working directories are not compared.
    """

    def __init__(self, root: Optional[Directory] = None,
                 config: Optional[FsConfig] = None):
        self.config = config or FsConfig()
        self.tree = Tree(root)
        self._cwd = Path.absolute([])
        self.cd(self.config.initial_dir)

    @classmethod
    def from_literal(cls, literal: TreeLiteral,
                     config: Optional[FsConfig] = None) -> 'MemoryFs':
        """Create a store whose root holds the given nested dicts."""
        root = from_literal(literal)
        if isinstance(root, Data):
            raise TypeError("The root of a literal tree must be a dict")
        return cls(root, config)

    def to_literal(self) -> TreeLiteral:
        return to_literal(self.tree.root)

    def __eq__(self, other) -> bool:
        if not isinstance(other, MemoryFs):
            return NotImplemented
        return self.tree == other.tree

    def __repr__(self) -> str:
        return f"MemoryFs(cwd={str(self._cwd)!r})"

    def absolute(self, path: Pathish) -> Path:
        """Resolve `path` against the working directory."""
        path = Path.from_pathish(path)
        if path.is_absolute():
            return path
        return self._cwd.concat(path)

    # Filesystem contract

    def pwd(self) -> Path:
        return self._cwd

    def cd(self, path: Pathish) -> None:
        target = self.absolute(path)
        entry = resolve(self.tree.root, target)
        if entry is None:
            raise NoSuchFile(target)
        if isinstance(entry, Data):
            raise ExpectedDirectoryGotData(target)
        self._cwd = target
        logger.debug("working directory is now %s", target)

    def ls(self, path: Pathish = '.') -> Set[str]:
        return self.tree.ls(self.absolute(path))

    def stat(self, path: Pathish) -> Stat:
        return self.tree.stat(self.absolute(path))

    def read(self, path: Pathish) -> bytes:
        return self.tree.read(self.absolute(path))

    def write(self, path: Pathish, content: bytes, mode: Mode = Mode.TIMID) -> None:
        self.tree.write(self.absolute(path), content, mode)

    def mkdir(self, path: Pathish, mode: Mode = Mode.TIMID) -> None:
        self.tree.mkdir(self.absolute(path), mode)

    def remove(self, path: Pathish) -> None:
        self.tree.remove(self.absolute(path))

    def copy(self, src: Pathish, dst: Pathish, mode: Mode = Mode.TIMID) -> None:
        self.tree.copy(self.absolute(src), self.absolute(dst), mode)

    def move(self, src: Pathish, dst: Pathish, mode: Mode = Mode.TIMID) -> None:
        self.tree.move(self.absolute(src), self.absolute(dst), mode)
