"""
valuefs - A minimal, platform-agnostic filesystem abstraction

This package provides an immutable, normalised Path type, an in-memory tree
store implementing a small filesystem contract, a convenience wrapper adding
text helpers and structural comparison, and an asynchronous projection of the
contract.
"""

__version__ = "0.1.0"

from .path import (
    Path,
    Pathish,
    parse_path,
)

from .tree import (
    Data,
    Directory,
    Entry,
    Mode,
    Stat,
    Tree,
    clone,
    entries_equal,
    resolve,
)

from .store import Filesystem
from .memory import MemoryFs
from .ext import FilesystemExt
from .aio import AsyncFilesystem
from .config import FsConfig

from .errors import (
    FsError,
    PathError,
    InvalidComponent,
    InvalidRelativity,
    EmptyPathString,
    EmptyComponent,
    RootOverflow,
    AbsoluteAppendError,
    RootOverflowOnConcat,
    NoSuchFile,
    ExpectedDirectoryGotData,
    ExpectedDataGotDirectory,
    AlreadyExists,
    ProtectionError,
    CannotRemoveRoot,
    CannotOperateOnRoot,
    CannotMoveIntoItself,
    InvalidEncoding,
)

__all__ = [
    # Paths
    "Path",
    "Pathish",
    "parse_path",

    # Tree engine
    "Data",
    "Directory",
    "Entry",
    "Mode",
    "Stat",
    "Tree",
    "clone",
    "entries_equal",
    "resolve",

    # Stores
    "Filesystem",
    "MemoryFs",
    "FilesystemExt",
    "AsyncFilesystem",
    "FsConfig",

    # Errors
    "FsError",
    "PathError",
    "InvalidComponent",
    "InvalidRelativity",
    "EmptyPathString",
    "EmptyComponent",
    "RootOverflow",
    "AbsoluteAppendError",
    "RootOverflowOnConcat",
    "NoSuchFile",
    "ExpectedDirectoryGotData",
    "ExpectedDataGotDirectory",
    "AlreadyExists",
    "ProtectionError",
    "CannotRemoveRoot",
    "CannotOperateOnRoot",
    "CannotMoveIntoItself",
    "InvalidEncoding",

    # Version info
    "__version__",
]
