import numpy as np
import pytest

from crossroads.exceptions import CapacityError, GraphFormatError, InputError, MissingInputError
from crossroads.graph import RoadNetwork
from crossroads.io import format_network, parse_network, read_network, write_network


def test_parse_ignores_line_layout():
    g = parse_network("4 3 1 2\n2 3\n\n 3   4")
    assert g.n == 4
    assert g.roads == [(1, 2), (2, 3), (3, 4)]
    assert g.neighbors(2) == [1, 3]


def test_trailing_tokens_are_ignored():
    g = parse_network("2 1\n1 2\n7 7 7\n")
    assert g.roads == [(1, 2)]


def test_zero_roads():
    g = parse_network("5 0")
    assert g.n == 5
    assert g.m == 0


@pytest.mark.parametrize(
    "text, match",
    [
        ("", "header"),
        ("3", "header"),
        ("3 2 1 2 2", "road 2 of 2"),
        ("3 x", "token 1"),
        ("3 1 1 -2", "token 3"),
        ("3 1 1 2.0", "token 3"),
        ("99999999999999 0", "token 0 is out of range"),
        ("3 1 1 4294967296", "token 3 is out of range"),
    ],
)
def test_malformed_input(text, match):
    with pytest.raises(GraphFormatError, match=match):
        parse_network(text)


def test_road_outside_network():
    with pytest.raises(InputError):
        parse_network("2 1 1 3")


def test_fifth_road_in_file():
    with pytest.raises(CapacityError):
        parse_network("6 5 1 2 1 3 1 4 1 5 1 6")


def test_read_missing_file(tmp_path):
    with pytest.raises(MissingInputError):
        read_network(tmp_path / "input.txt")


def test_read_non_utf8_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_bytes(b"2 1\n1 \xff\n")
    with pytest.raises(GraphFormatError, match="not UTF-8") as exc:
        read_network(path)
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)


def test_read_default_path(write_input):
    write_input("2 1\n1 2\n")
    assert read_network().roads == [(1, 2)]


def test_written_network_reads_back(tmp_path):
    g = RoadNetwork.from_edges(5, [(4, 2), (1, 1), (2, 5), (3, 1)])
    out = tmp_path / "roads.txt"
    write_network(g, out)
    assert out.read_text(encoding="utf-8") == format_network(g)
    assert format_network(g).splitlines()[0] == "5 4"
    back = read_network(out)
    np.testing.assert_array_equal(back.slots, g.slots)
    assert back.roads == g.roads
