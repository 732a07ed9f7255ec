"""Terrain tiles, an LRU cache with expiry, an append-only log and response cache keys."""

__version__ = "0.1.0"