"""A thread-safe set of volume IDs with an operation in progress."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator

VOLUME_OPERATION_ALREADY_EXISTS_FMT = (
    "An operation with the given volume key {} already exists"
)


class VolumeOperationAlreadyExists(RuntimeError):
    """Raised when a volume already has an operation in progress."""

    def __init__(self, volume_id: str) -> None:
        super().__init__(VOLUME_OPERATION_ALREADY_EXISTS_FMT.format(volume_id))
        self.volume_id = volume_id


class VolumeLocks:
    """Tracks which volumes have an ongoing operation."""

    def __init__(self) -> None:
        self._locks: set[str] = set()
        self._mutex = threading.Lock()

    def try_acquire(self, volume_id: str) -> bool:
        """Claim the volume; return False if it is already claimed."""
        with self._mutex:
            if volume_id in self._locks:
                return False
            self._locks.add(volume_id)
            return True

    def release(self, volume_id: str) -> None:
        """Release the volume; releasing an unclaimed volume does nothing."""
        with self._mutex:
            self._locks.discard(volume_id)

    @contextmanager
    def hold(self, volume_id: str) -> Iterator[str]:
        """Hold the volume for the duration of the block."""
        if not self.try_acquire(volume_id):
            raise VolumeOperationAlreadyExists(volume_id)
        try:
            yield volume_id
        finally:
            self.release(volume_id)