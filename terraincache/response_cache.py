"""Keying of cached HTTP responses."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Mapping
from typing import Any, Union
from urllib.parse import urlsplit

KEY_HEADER = "X-Memcache-Key"

HeaderValue = Union[str, Iterable[str]]


class ResponseCache:
    """Holds cached response bodies keyed by request and the handler that produces them."""

    def __init__(self, handler: Callable[..., Any] | None = None) -> None:
        self.handler = handler
        self.entries: dict[str, bytes] = {}
        self._lock = threading.Lock()

    def generate_key(self, headers: Mapping[str, HeaderValue] | Any, url: str) -> str:
        """Return the cache key for a request.

        The first ``X-Memcache-Key`` header value wins; otherwise the request
        URI (path plus query) of ``url`` is used.
        """
        wanted = KEY_HEADER.lower()
        for name, value in headers.items():
            if name.lower() != wanted:
                continue
            if isinstance(value, str):
                return value
            for first in value:
                return first
        parts = urlsplit(url)
        uri = parts.path or "/"
        if parts.query:
            uri += "?" + parts.query
        return uri