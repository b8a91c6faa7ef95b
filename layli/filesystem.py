"""File access through the operating system."""

from __future__ import annotations

import os

_FILE_MODE = 0o644


class OSFileReader:
    """Reads files from the local file system."""

    def read(self, path: str) -> bytes:
        """Return the whole contents of ``path``."""
        with open(path, "rb") as handle:
            return handle.read()


class OSFileWriter:
    """Writes files to the local file system."""

    def write(self, path: str, data: bytes) -> None:
        """Write ``data`` to ``path``, creating it with mode 0644 if needed."""
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _FILE_MODE)
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)