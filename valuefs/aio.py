"""
Asynchronous projection of the Filesystem contract.

Each coroutine runs the synchronous call to completion and returns its
result or raises its exception. No locking is done: callers must not run
overlapping mutations against the same store.
"""

import functools

from .store import OPERATIONS, Filesystem


def _project(name):
    sync = getattr(Filesystem, name)

    @functools.wraps(sync, updated=())
    async def method(self, *args, **kwargs):
        return getattr(self.fs, name)(*args, **kwargs)

    return method


class AsyncFilesystem:
    """Coroutine versions of every Filesystem operation on a wrapped store."""

    def __init__(self, fs: Filesystem):
        self.fs = fs

    def __repr__(self) -> str:
        return f"AsyncFilesystem({self.fs!r})"


for _name in OPERATIONS:
    setattr(AsyncFilesystem, _name, _project(_name))
del _name
