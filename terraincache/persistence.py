"""Append-only file for persisting cache commands."""

from __future__ import annotations

import os
from types import TracebackType


class Persistence:
    """Appends one command per line to a file, creating it if needed."""

    def __init__(self, filename: str | os.PathLike[str]) -> None:
        fd = os.open(filename, os.O_APPEND | os.O_CREAT | os.O_WRONLY, 0o644)
        self._file = os.fdopen(fd, "a", encoding="utf-8")

    @property
    def closed(self) -> bool:
        """True once the file has been closed."""
        return self._file.closed

    def append(self, cmd: str) -> None:
        """Write ``cmd`` followed by a newline."""
        self._file.write(cmd + "\n")
        self._file.flush()

    def close(self) -> None:
        """Close the underlying file."""
        self._file.close()

    def __enter__(self) -> Persistence:
        return self

    def __exit__(
        self,
        *args: type[BaseException] | BaseException | TracebackType | None,
    ) -> None:
        self.close()