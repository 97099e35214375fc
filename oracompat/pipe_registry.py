"""Shared store of named message pipes, the common state behind pipe sessions."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, Optional

__all__ = [
    "PipeError",
    "PipeInfo",
    "PipeRegistry",
    "LOCALMSGSZ",
    "SHMEMMSGSZ",
    "MAX_PIPES",
    "MAX_EVENTS",
    "MAX_LOCKS",
]

LOCALMSGSZ = 8 * 1024
SHMEMMSGSZ = 30 * 1024
MAX_PIPES = 30
MAX_EVENTS = 30
MAX_LOCKS = 256

_UNLIMITED = -1


class PipeError(RuntimeError):
    """Raised when a pipe cannot be accessed, created or named."""

    def __init__(self, message: str, detail: Optional[str] = None) -> None:
        text = message if detail is None else f"{message}: {detail}"
        super().__init__(text)
        self.message = message
        self.detail = detail


@dataclass(frozen=True)
class PipeInfo:
    """A snapshot of one pipe as reported by :meth:`PipeRegistry.list_pipes`."""

    name: str
    items: int
    size: int
    limit: Optional[int]
    private: bool
    owner: Optional[str]


@dataclass(eq=False)
class _Pipe:
    name: str
    registered: bool = False
    private: bool = False
    owner: Optional[str] = None
    limit: int = _UNLIMITED
    size: int = 0
    items: Deque[tuple[Any, int]] = field(default_factory=deque)

    def has_room(self) -> bool:
        return self.limit == _UNLIMITED or len(self.items) < self.limit


def _check_name(pipe_name: Optional[str]) -> str:
    if pipe_name is None:
        raise PipeError("pipe name is NULL", "Pipename may not be NULL.")
    return pipe_name


class PipeRegistry:
    """A fixed number of pipe slots shared by all sessions, guarded by one lock.

    Pipes come into being implicitly on first use and vanish once emptied,
    unless they were registered explicitly with :meth:`create_pipe`.
    """

    def __init__(self, max_pipes: int = MAX_PIPES) -> None:
        if max_pipes <= 0:
            raise ValueError("max_pipes must be positive")
        self._slots: list[Optional[_Pipe]] = [None] * max_pipes
        self._lock = threading.RLock()
        self._sid = 0

    # -- internals --------------------------------------------------------

    def _find(self, name: str, user: Optional[str],
              only_check: bool) -> tuple[Optional[_Pipe], bool]:
        """Look a pipe up, creating it in a free slot unless ``only_check``."""
        for pipe in self._slots:
            if pipe is not None and pipe.name == name:
                if pipe.private and pipe.owner != user:
                    raise PipeError("insufficient privilege",
                                    "Insufficient privilege to access pipe")
                return pipe, False
        if only_check:
            return None, False
        for index, slot in enumerate(self._slots):
            if slot is None:
                pipe = _Pipe(name)
                self._slots[index] = pipe
                return pipe, True
        return None, False

    def _discard(self, pipe: _Pipe) -> None:
        for index, slot in enumerate(self._slots):
            if slot is pipe:
                self._slots[index] = None
                return

    # -- public interface -------------------------------------------------

    def new_session_id(self) -> int:
        """Hand out the next session number, starting at 1."""
        with self._lock:
            self._sid += 1
            return self._sid

    def send(self, pipe_name: str, message: Any = None, size: int = 0,
             limit: Optional[int] = None, user: Optional[str] = None) -> bool:
        """Append ``message`` to a pipe; return False when it cannot be stored.

        With ``message`` of None the pipe is only registered. A given
        ``limit`` is applied to a new pipe, or raises the limit of an
        existing one.
        """
        name = _check_name(pipe_name)
        with self._lock:
            pipe, created = self._find(name, user, only_check=False)
            if pipe is None:
                return False
            if created:
                pipe.registered = message is None
            if limit is not None and (created or pipe.limit < limit):
                pipe.limit = limit
            if message is None:
                return True
            if pipe.has_room():
                pipe.items.append((message, size))
                pipe.size += size
                return True
            if created:
                self._discard(pipe)
            return False

    def receive(self, pipe_name: str, user: Optional[str] = None) -> Optional[Any]:
        """Take the oldest message from a pipe, or None when there is none.

        Asking for a pipe that does not exist creates it empty. An
        implicitly created pipe is dropped when its last message is taken.
        """
        name = _check_name(pipe_name)
        with self._lock:
            pipe, created = self._find(name, user, only_check=False)
            if pipe is None or created or not pipe.items:
                return None
            message, size = pipe.items.popleft()
            pipe.size -= size
            if not pipe.items and not pipe.registered:
                self._discard(pipe)
            return message

    def create_pipe(self, pipe_name: str, limit: Optional[int] = None,
                    private: bool = False, user: Optional[str] = None) -> None:
        """Register a new pipe explicitly; a private pipe belongs to ``user``."""
        name = _check_name(pipe_name)
        with self._lock:
            pipe, created = self._find(name, user, only_check=False)
            if pipe is None:
                raise PipeError("lock request error",
                                "Failed exclusive locking of shared memory.")
            if not created:
                raise PipeError("pipe creation error", "Pipe is registered.")
            if private:
                pipe.private = True
                pipe.owner = user
            pipe.limit = _UNLIMITED if limit is None else limit
            pipe.registered = True

    def remove_pipe(self, pipe_name: str, purge: bool = False,
                    user: Optional[str] = None) -> None:
        """Drop all messages of a pipe and the pipe itself.

        With ``purge`` an explicitly registered pipe is kept, empty.
        A missing pipe is ignored.
        """
        name = _check_name(pipe_name)
        with self._lock:
            pipe, _ = self._find(name, user, only_check=True)
            if pipe is None:
                return
            pipe.items.clear()
            pipe.size = 0
            if not (purge and pipe.registered):
                self._discard(pipe)

    def list_pipes(self) -> list[PipeInfo]:
        """Snapshots of every existing pipe, in slot order."""
        with self._lock:
            return [
                PipeInfo(
                    name=pipe.name,
                    items=len(pipe.items),
                    size=pipe.size,
                    limit=None if pipe.limit == _UNLIMITED else pipe.limit,
                    private=pipe.private,
                    owner=pipe.owner if pipe.private else None,
                )
                for pipe in self._slots
                if pipe is not None
            ]