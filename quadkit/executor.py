"""A minimal frame-stepping executor for game-loop coroutines."""

from __future__ import annotations

import enum
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Coroutine, Generator

__all__ = ["ExecState", "FrameFuture", "FileLoadingFuture", "next_frame", "resume"]


class ExecState(enum.Enum):
    """State of one poll of the main coroutine."""

    RUN_ONCE = enum.auto()
    WAITING = enum.auto()


@dataclass
class _PollContext:
    state: ExecState = ExecState.RUN_ONCE


_current: ContextVar[_PollContext | None] = ContextVar(
    "quadkit_poll_context", default=None
)


def _poll_context() -> _PollContext:
    ctx = _current.get()
    if ctx is None:
        raise RuntimeError("frame futures can only be awaited from within resume()")
    return ctx


class FrameFuture:
    """Awaitable that lets exactly one frame boundary pass per resume."""

    def __await__(self) -> Generator[None, None, None]:
        while True:
            ctx = _poll_context()
            if ctx.state is ExecState.RUN_ONCE:
                ctx.state = ExecState.WAITING
                return None
            yield None


class FileLoadingFuture:
    """Awaitable that completes once its contents have been supplied."""

    def __init__(self) -> None:
        self._contents: bytes | BaseException | None = None
        self._ready = False

    @property
    def ready(self) -> bool:
        """True when contents are waiting to be taken."""
        return self._ready

    def set_result(self, contents: bytes | BaseException) -> None:
        """Supply the loaded bytes, or an exception to raise in the awaiter."""
        self._contents = contents
        self._ready = True

    def _take(self) -> bytes | BaseException | None:
        contents = self._contents
        self._contents = None
        self._ready = False
        return contents

    def __await__(self) -> Generator[None, None, bytes]:
        while True:
            ctx = _poll_context()
            if ctx.state is ExecState.RUN_ONCE and self._ready:
                contents = self._take()
                ctx.state = ExecState.WAITING
                if isinstance(contents, BaseException):
                    raise contents
                return contents
            yield None


def next_frame() -> FrameFuture:
    """Return an awaitable marking the end of the current frame."""
    return FrameFuture()


def resume(coroutine: Coroutine[Any, Any, Any]) -> bool:
    """Run the coroutine for one frame; return True once it has finished."""
    token = _current.set(_PollContext())
    try:
        coroutine.send(None)
    except StopIteration:
        return True
    finally:
        _current.reset(token)
    return False