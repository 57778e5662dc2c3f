"""
Byte stores used as artifact sources and sinks.
"""

from __future__ import annotations

import os
import tempfile
import threading
from pathlib import Path


class MemoryStore:
    """Store keeping its content in memory."""

    def __init__(self, data: bytes | None = None) -> None:
        self._data = data
        self._lock = threading.Lock()

    def read(self) -> bytes:
        with self._lock:
            if self._data is None:
                msg = "Memory store is empty"
                raise FileNotFoundError(msg)
            return self._data

    def write(self, data: bytes) -> None:
        with self._lock:
            self._data = bytes(data)

    def exists(self) -> bool:
        return self._data is not None

    def delete(self) -> None:
        with self._lock:
            if self._data is None:
                msg = "Memory store is empty"
                raise FileNotFoundError(msg)
            self._data = None

    @property
    def data(self) -> bytes | None:
        return self._data


class FileStore:
    """Store backed by a file. Writes replace the file atomically."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def read(self) -> bytes:
        return self.path.read_bytes()

    def write(self, data: bytes) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".keylic-")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            Path(tmp_name).replace(self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def exists(self) -> bool:
        return self.path.exists()

    def delete(self) -> None:
        self.path.unlink()

    def __repr__(self) -> str:
        return f"FileStore({str(self.path)!r})"
