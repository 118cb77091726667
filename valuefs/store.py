"""
The capability contract shared by every valuefs backend.

Paths may be given as Path objects or as strings (see parse_path). Relative
paths are resolved against the store's working directory.
"""

from abc import ABC, abstractmethod
from typing import Set

from .path import Path, Pathish
from .tree import Mode, Stat

# Names of the contract methods, in declaration order.
OPERATIONS = ('pwd', 'cd', 'ls', 'stat', 'read', 'write', 'mkdir', 'remove',
              'copy', 'move')


class Filesystem(ABC):
    """Abstract hierarchical store of directories and data."""

    @abstractmethod
    def pwd(self) -> Path:
        """Return the absolute working directory."""

    @abstractmethod
    def cd(self, path: Pathish) -> None:
        """Change the working directory; unchanged if this raises."""

    @abstractmethod
    def ls(self, path: Pathish = '.') -> Set[str]:
        """Return the names inside a directory."""

    @abstractmethod
    def stat(self, path: Pathish) -> Stat:
        """Report whether a path holds a directory, data, or nothing."""

    @abstractmethod
    def read(self, path: Pathish) -> bytes:
        """Return the bytes stored at a path."""

    @abstractmethod
    def write(self, path: Pathish, content: bytes, mode: Mode = Mode.TIMID) -> None:
        """Store bytes at a path, creating parent directories as needed."""

    @abstractmethod
    def mkdir(self, path: Pathish, mode: Mode = Mode.TIMID) -> None:
        """Create an empty directory, creating parent directories as needed."""

    @abstractmethod
    def remove(self, path: Pathish) -> None:
        """Delete an entry and everything below it."""

    @abstractmethod
    def copy(self, src: Pathish, dst: Pathish, mode: Mode = Mode.TIMID) -> None:
        """Place an independent deep copy of `src` at `dst`."""

    @abstractmethod
    def move(self, src: Pathish, dst: Pathish, mode: Mode = Mode.TIMID) -> None:
        """Move `src` to `dst`; `src` is untouched unless the move happens."""
