"""Devices that hand out access to the stream holding a volume's bytes."""

from __future__ import annotations

import threading
from typing import Any, Awaitable, Callable, Generic, TypeVar

S = TypeVar("S")
R = TypeVar("R")


class SingleAccessDeviceError(Exception):
    """Base class for failures of a single-access device."""


class StreamInUseError(SingleAccessDeviceError):
    """The stream is already in use by another operation."""

    def __init__(self) -> None:
        super().__init__("some other process is already using the device's stream")


class FlushFailedError(SingleAccessDeviceError):
    """Flushing the underlying stream failed."""

    def __init__(self, error: BaseException) -> None:
        super().__init__(
            f"an error occurred while flushing the underlying stream: {error}"
        )
        self.error = error


class SingleAccessDevice(Generic[S]):
    """A device that allows only one user of its stream at a time.

    Any attempt to use the stream while it is already in use, including from
    inside an operation that holds it, raises StreamInUseError.
    """

    def __init__(self, stream: S) -> None:
        self._stream = stream
        self._lock = threading.Lock()

    def _acquire(self) -> None:
        if not self._lock.acquire(blocking=False):
            raise StreamInUseError()

    def with_stream(self, func: Callable[[S], R]) -> R:
        """Run ``func`` with the stream and return its result."""
        self._acquire()
        try:
            return func(self._stream)
        finally:
            self._lock.release()

    async def with_stream_async(self, func: Callable[[S], Awaitable[R]]) -> R:
        """Await ``func`` with the stream and return its result."""
        self._acquire()
        try:
            return await func(self._stream)
        finally:
            self._lock.release()

    def flush(self) -> None:
        """Flush the stream, raising FlushFailedError if it fails."""
        self._acquire()
        try:
            self._stream.flush()  # type: ignore[attr-defined]
        except OSError as error:
            raise FlushFailedError(error) from error
        finally:
            self._lock.release()

    async def flush_async(self) -> None:
        """Flush a stream whose ``flush`` is awaitable."""
        self._acquire()
        try:
            stream: Any = self._stream
            await stream.flush()
        except OSError as error:
            raise FlushFailedError(error) from error
        finally:
            self._lock.release()