"""Terrain tile representation and coordinate parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass

_UINT64_MAX = 2**64 - 1
_DIGITS = re.compile(r"[0-9]+")


def _parse_uint64(text: str) -> int:
    """Parse a base-10 unsigned 64-bit integer, rejecting signs, spaces and separators."""
    if not _DIGITS.fullmatch(text):
        raise ValueError(f"invalid unsigned integer: {text!r}")
    value = int(text)
    if value > _UINT64_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return value


@dataclass
class Terrain:
    """A terrain tile: its x, y, z coordinate and the (gzipped) tile bytes."""

    x: int = 0
    y: int = 0
    z: int = 0
    value: bytes = b""

    def marshal_binary(self) -> bytes:
        """Return the raw tile bytes."""
        return self.value

    def unmarshal_binary(self, data: bytes) -> None:
        """Replace the tile bytes with ``data``."""
        self.value = bytes(data)

    def is_root(self) -> bool:
        """Return True if this tile is one of the two root tiles."""
        return self.z == 0 and self.x in (0, 1) and self.y == 0

    def parse_coord(self, x: str, y: str, z: str, version: str | None = None) -> None:
        """Parse string coordinates and assign them; leaves the tile untouched on error."""
        xi = _parse_uint64(x)
        yi = _parse_uint64(y)
        zi = _parse_uint64(z)
        self.x, self.y, self.z = xi, yi, zi