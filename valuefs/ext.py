"""
Convenience layer over any Filesystem.

FilesystemExt forwards the contract to the wrapped store and adds text
helpers, existence checks, idempotent removal and structural comparison
against another store.
"""

import logging
from typing import Optional, Set

from .config import FsConfig
from .errors import InvalidEncoding
from .path import Path, Pathish
from .store import Filesystem
from .tree import Mode, Stat

logger = logging.getLogger(__name__)


class FilesystemExt(Filesystem):
    """Wraps a Filesystem, adding helpers built only on the contract."""

    def __init__(self, fs: Filesystem, config: Optional[FsConfig] = None):
        self.fs = fs
        self.config = config or getattr(fs, 'config', None) or FsConfig()

    def __repr__(self) -> str:
        return f"FilesystemExt({self.fs!r})"

    # Delegation

    def pwd(self) -> Path:
        return self.fs.pwd()

    def cd(self, path: Pathish) -> None:
        self.fs.cd(path)

    def ls(self, path: Pathish = '.') -> Set[str]:
        return self.fs.ls(path)

    def stat(self, path: Pathish) -> Stat:
        return self.fs.stat(path)

    def read(self, path: Pathish) -> bytes:
        return self.fs.read(path)

    def write(self, path: Pathish, content: bytes, mode: Mode = Mode.TIMID) -> None:
        self.fs.write(path, content, mode)

    def mkdir(self, path: Pathish, mode: Mode = Mode.TIMID) -> None:
        self.fs.mkdir(path, mode)

    def remove(self, path: Pathish) -> None:
        self.fs.remove(path)

    def copy(self, src: Pathish, dst: Pathish, mode: Mode = Mode.TIMID) -> None:
        self.fs.copy(src, dst, mode)

    def move(self, src: Pathish, dst: Pathish, mode: Mode = Mode.TIMID) -> None:
        self.fs.move(src, dst, mode)

    # Text

    def read_string(self, path: Pathish) -> str:
        """Read a file and decode it with the configured encoding."""
        content = self.fs.read(path)
        try:
            return content.decode(self.config.encoding)
        except UnicodeDecodeError as e:
            raise InvalidEncoding(path, self.config.encoding, e.reason) from e

    def write_string(self, path: Pathish, text: str, mode: Mode = Mode.TIMID) -> None:
        """Encode `text` with the configured encoding and write it."""
        self.fs.write(path, text.encode(self.config.encoding), mode)

    # Queries

    def exists(self, path: Pathish) -> bool:
        return self.fs.stat(path) is not Stat.NOTHING

    def is_dir(self, path: Pathish) -> bool:
        return self.fs.stat(path) is Stat.DIRECTORY

    def is_file(self, path: Pathish) -> bool:
        return self.fs.stat(path) is Stat.DATA

    def remove_if_exists(self, path: Pathish) -> bool:
        """
        Remove `path` if something is there.

        Returns whether anything was removed. Errors other than the path
        simply being absent propagate.
        """
        if self.fs.stat(path) is Stat.NOTHING:
            logger.debug("nothing to remove at %s", path)
            return False
        self.fs.remove(path)
        return True

    # Comparison

    def eq(self, other: Filesystem) -> bool:
        """
        Whether both stores hold structurally equal trees.

        The comparison starts at each store's root and ignores working
        directories.
        """
        return _subtrees_equal(self.fs, other, Path.absolute([]))


def _subtrees_equal(a: Filesystem, b: Filesystem, path: Path) -> bool:
    kind = a.stat(path)
    if kind is not b.stat(path):
        return False
    if kind is Stat.DATA:
        return a.read(path) == b.read(path)
    if kind is Stat.DIRECTORY:
        names = a.ls(path)
        if names != b.ls(path):
            return False
        return all(_subtrees_equal(a, b, path.concat(Path.relative([name])))
                   for name in names)
    return True
