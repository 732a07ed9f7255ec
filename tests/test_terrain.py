import pytest

from terraincache.terrain import Terrain


def test_parse_coord_assigns_values():
    t = Terrain()
    t.parse_coord("3", "5", "7", "1.0.0")
    assert (t.x, t.y, t.z) == (3, 5, 7)


def test_parse_coord_accepts_uint64_max():
    big = "18446744073709551615"
    t = Terrain()
    t.parse_coord(big, "0", "0", "")
    assert t.x == int(big)


@pytest.mark.parametrize(
    "bad",
    ["-1", "+1", " 1", "1 ", "1_0", "", "abc", "0x10", "18446744073709551616"],
)
def test_parse_coord_rejects_invalid(bad):
    t = Terrain()
    with pytest.raises(ValueError):
        t.parse_coord(bad, "0", "0", "")


def test_parse_coord_failure_leaves_coordinates_unchanged():
    t = Terrain(x=1, y=2, z=3)
    with pytest.raises(ValueError):
        t.parse_coord("4", "5", "bad", "")
    assert (t.x, t.y, t.z) == (1, 2, 3)


@pytest.mark.parametrize(
    "x, y, z, expected",
    [
        (0, 0, 0, True),
        (1, 0, 0, True),
        (2, 0, 0, False),
        (0, 1, 0, False),
        (0, 0, 1, False),
        (1, 0, 1, False),
    ],
)
def test_is_root(x, y, z, expected):
    assert Terrain(x=x, y=y, z=z).is_root() is expected


def test_binary_round_trip():
    t = Terrain()
    payload = b"\x1f\x8b\x08\x00tile"
    t.unmarshal_binary(payload)
    assert t.marshal_binary() == payload


def test_default_value_is_empty():
    assert Terrain().marshal_binary() == b""