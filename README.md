# terraincache

Building blocks for serving Cesium terrain tilesets: a terrain tile type
with coordinate parsing, a thread-safe LRU cache with optional expiry, an
append-only command log, and request keying for cached responses.

## Installing

```
pip install .
```

## Terrain tiles

`terraincache.terrain.Terrain` is a dataclass with `x`, `y`, `z` and `value`
(the gzipped tile bytes).

```python
from terraincache.terrain import Terrain

tile = Terrain()
tile.parse_coord("1", "0", "0", None)   # x, y, z, version
assert (tile.x, tile.y, tile.z) == (1, 0, 0)
assert tile.is_root()                   # z == 0, y == 0, x in (0, 1)

tile.unmarshal_binary(b"\x1f\x8b...")
data = tile.marshal_binary()
```

`parse_coord` accepts only base-10 digits in the range of an unsigned
64-bit integer; anything else raises `ValueError` and leaves the tile
unchanged. The `version` argument is accepted and ignored.

## LRU cache

`terraincache.cache.Cache(max_size, persist=None, clock=time.monotonic)`
holds string values. When it holds more than `max_size` entries, the least
recently used one is evicted.

```python
from terraincache.cache import Cache
from terraincache.persistence import Persistence

with Persistence("cache.aof") as aof:
    cache = Cache(100, aof)
    cache.set("key", "value", 0, False)   # ttl 0 means no expiry
    cache.set("tmp", "v", 30)             # expires after 30 seconds
    print(cache.get("key"))               # "value"
    print(cache.get("missing"))           # None
    print(len(cache), "key" in cache)
```

- `set(key, value, ttl=0, replaying=False)`: `ttl` is seconds or a
  `datetime.timedelta`. Unless `replaying` is true, a line `SET <key> <value>`
  is appended to the persistence file; a write failure is logged, not raised.
- `get(key)` returns the value, or `None` when the key is missing or has
  expired (an expired entry is removed). A hit marks the entry as recently used.
- `clean_expired_items()` removes all expired entries, then evicts the oldest
  entry if the cache is over capacity.
- `start_cleaning_server(stop_event=None, interval=60.0)` blocks, calling
  `clean_expired_items()` every `interval` seconds until `stop_event` is set;
  run it in a thread.

## Append-only file

`terraincache.persistence.Persistence(filename)` opens the file for
appending, creating it with mode `0644` if needed. `append(cmd)` writes the
command and a newline and flushes; `close()` closes the file and `closed`
reports whether it is closed. It is a context manager.

## Response cache keys

`terraincache.response_cache.ResponseCache(handler=None)` holds an `entries`
dictionary of response bodies and the `handler` that produces them.
`generate_key(headers, url)` returns the first `X-Memcache-Key` header value
(matched case-insensitively) if present, otherwise the request URI of `url`:
its path (or `/`) followed by `?query` when there is a query.

## What this package does not do

It does not include an HTTP server, a command to start one, request
handlers for `layer.json` or terrain tiles, or a store that reads tilesets
from disk. `ResponseCache` only computes keys and holds entries; it does not
wrap or serve requests itself.

## Tests

```
pip install .[test]
pytest
```