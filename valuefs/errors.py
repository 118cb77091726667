"""
Exceptions raised by valuefs.

Every error derives from FsError and from the closest builtin exception, so
callers can catch either ``FsError`` or e.g. ``FileNotFoundError``.
"""

from typing import Optional


class FsError(Exception):
    """Base class for all valuefs errors."""

    def __init__(self, message: str, path: Optional[object] = None):
        super().__init__(message)
        self.path = path


# Path construction, parsing and composition

class PathError(FsError, ValueError):
    """A path could not be constructed, parsed or composed."""


class InvalidComponent(PathError):
    def __init__(self, component: str):
        super().__init__(f"Invalid path component: {component!r}", component)
        self.component = component


class InvalidRelativity(PathError):
    def __init__(self, parent_steps: object):
        super().__init__(
            f"Invalid relativity for a relative path: {parent_steps!r}")
        self.parent_steps = parent_steps


class EmptyPathString(PathError):
    def __init__(self):
        super().__init__("The empty string is not a valid path", "")


class EmptyComponent(PathError):
    def __init__(self, path: str):
        super().__init__(f"Empty path component in {path!r}", path)


class RootOverflow(PathError):
    def __init__(self, path: str):
        super().__init__(
            f"The '..' components of {path!r} step above the root", path)


class AbsoluteAppendError(PathError):
    def __init__(self, path: object):
        super().__init__(
            f"Cannot append the absolute path {str(path)!r} to another path",
            path)


class RootOverflowOnConcat(PathError):
    def __init__(self, base: object, other: object):
        super().__init__(
            f"Appending {str(other)!r} to {str(base)!r} steps above the root",
            base)
        self.other = other


# Tree resolution

class NoSuchFile(FsError, FileNotFoundError):
    def __init__(self, path: object):
        super().__init__(f"No such file or directory: {str(path)!r}", path)


class ExpectedDirectoryGotData(FsError, NotADirectoryError):
    def __init__(self, path: object):
        super().__init__(f"Not a directory: {str(path)!r}", path)


class ExpectedDataGotDirectory(FsError, IsADirectoryError):
    def __init__(self, path: object):
        super().__init__(f"Is a directory: {str(path)!r}", path)


class AlreadyExists(FsError, FileExistsError):
    def __init__(self, path: object):
        super().__init__(f"Already exists: {str(path)!r}", path)


# Protection

class ProtectionError(FsError, PermissionError):
    """The operation would damage the root or the tree's shape."""


class CannotRemoveRoot(ProtectionError):
    def __init__(self):
        super().__init__("Cannot remove the root directory", "/")


class CannotOperateOnRoot(ProtectionError):
    def __init__(self, operation: str):
        super().__init__(f"Cannot {operation} the root directory", "/")
        self.operation = operation


class CannotMoveIntoItself(ProtectionError):
    def __init__(self, src: object, dst: object):
        super().__init__(
            f"Cannot move {str(src)!r} into its own subtree at {str(dst)!r}",
            src)
        self.destination = dst


# Text helpers

class InvalidEncoding(FsError, ValueError):
    def __init__(self, path: object, encoding: str, reason: str):
        super().__init__(
            f"Contents of {str(path)!r} are not valid {encoding}: {reason}",
            path)
        self.encoding = encoding
