from email.message import Message

import pytest

from terraincache.response_cache import ResponseCache


@pytest.fixture
def cache():
    return ResponseCache()


def test_header_value_is_used_as_key(cache):
    assert cache.generate_key({"X-Memcache-Key": "tile-key"}, "/a/b") == "tile-key"


def test_header_lookup_ignores_case(cache):
    assert cache.generate_key({"x-memcache-key": "lower"}, "/a/b") == "lower"


def test_first_header_value_wins(cache):
    headers = {"X-Memcache-Key": ["first", "second"]}
    assert cache.generate_key(headers, "/a") == "first"


def test_message_headers_are_accepted(cache):
    message = Message()
    message["X-Memcache-Key"] = "one"
    message["X-Memcache-Key"] = "two"
    assert cache.generate_key(message, "/a") == "one"


def test_request_uri_keeps_path_and_query(cache):
    url = "http://localhost:8080/world/layer.json?v=1.0.0"
    assert cache.generate_key({}, url) == "/world/layer.json?v=1.0.0"


def test_request_uri_of_path_only(cache):
    assert cache.generate_key({"Accept": "*/*"}, "/world/0/0/0.terrain") == "/world/0/0/0.terrain"


def test_empty_path_becomes_root(cache):
    assert cache.generate_key({}, "http://localhost") == "/"


def test_fragment_is_not_part_of_key(cache):
    assert cache.generate_key({}, "/world/layer.json#top") == "/world/layer.json"


def test_starts_empty_with_given_handler():
    def handler():
        return None

    cache = ResponseCache(handler)
    assert cache.handler is handler
    assert cache.entries == {}