"""Tests for the search family.

Positions in "hello world":
    h e l l o _ w o r l d
    0 1 2 3 4 5 6 7 8 9 10
"""

from array import array

import pytest

from strview import NPOS, Address, StringView, U16StringView, WStringView


def test_scenario_hello_world(hello):
    assert hello.find(b"world") == 6
    assert hello.rfind(b"o") == 7
    assert hello.find_first_of(b"lo") == 2
    assert hello.find_first_not_of(b"helo wrd") == NPOS


def test_scenario_empty_view():
    empty = StringView(b"")

    assert empty.find(b"") == 0
    assert empty.find(b"x") == NPOS
    assert empty.rfind(b"") == 0
    assert empty.rfind(b"x") == NPOS


# find


def test_find_from_position(hello):
    assert hello.find(b"o") == 4
    assert hello.find(b"o", 5) == 7
    assert hello.find(b"o", 8) == NPOS
    assert hello.find(b"hello world") == 0
    assert hello.find(b"hello world!") == NPOS


def test_find_past_end_is_not_found(hello):
    assert hello.find(b"d", 11) == NPOS
    assert hello.find(b"d", 20) == NPOS
    assert hello.find(b"d", NPOS) == NPOS


@pytest.mark.parametrize("pos, expected", [(0, 0), (5, 5), (11, 11), (12, 11), (NPOS, 11)])
def test_find_empty_pattern(hello, pos, expected):
    assert hello.find(b"", pos) == expected


def test_find_single_unit(hello, whello):
    assert hello.find(ord("w")) == 6
    assert hello.find(ord("z")) == NPOS
    assert whello.find("w") == 6


def test_find_bounded_pattern(hello):
    assert hello.find(b"worldwide", 0, 5) == 6
    assert hello.find(b"worldwide", 0, 6) == NPOS
    assert hello.find(Address(b"hello world", 6), 0, 3) == 6


def test_find_terminated_pattern(hello):
    assert hello.find(Address(b"wor\0ld")) == 6
    assert hello.find(Address(b"xx\0"), 0) == NPOS


def test_find_in_sub_view_reports_sub_view_positions(hello):
    world = hello[6:]

    assert world.find(b"o") == 1
    assert world.find(b"hello") == NPOS


# rfind


def test_rfind(hello):
    assert hello.rfind(ord("o")) == 7
    assert hello.rfind(b"o", 6) == 4
    assert hello.rfind(b"o", 7) == 7
    assert hello.rfind(b"hello") == 0
    assert hello.rfind(b"world", 6) == 6
    assert hello.rfind(b"world", 5) == NPOS
    assert hello.rfind(b"hello world!") == NPOS


@pytest.mark.parametrize("pos, expected", [(0, 0), (3, 3), (11, 11), (100, 11), (NPOS, 11)])
def test_rfind_empty_pattern(hello, pos, expected):
    assert hello.rfind(b"", pos) == expected


def test_rfind_bounded_pattern(hello):
    assert hello.rfind(b"lox", NPOS, 1) == 9


# Character sets


def test_find_first_of(hello):
    assert hello.find_first_of(b"lo") == 2
    assert hello.find_first_of(b"lo", 5) == 7
    assert hello.find_first_of(ord(" ")) == 5
    assert hello.find_first_of(b"xyz") == NPOS
    assert hello.find_first_of(b"") == NPOS
    assert hello.find_first_of(b"d", 11) == NPOS


def test_find_first_of_bounded_set(hello):
    assert hello.find_first_of(b"xyzo", 0, 3) == NPOS
    assert hello.find_first_of(b"xyzo", 0, 4) == 4


def test_find_last_of(hello):
    assert hello.find_last_of(b"lo") == 9
    assert hello.find_last_of(b"lo", 8) == 7
    assert hello.find_last_of(b"h", 0) == 0
    assert hello.find_last_of(b"z") == NPOS
    assert hello.find_last_of(b"") == NPOS


def test_find_first_not_of(hello):
    assert hello.find_first_not_of(b"hel") == 4
    assert hello.find_first_not_of(b"", 3) == 3
    assert hello.find_first_not_of(ord("h")) == 1
    assert hello.find_first_not_of(b"x", 11) == NPOS


def test_find_last_not_of(hello):
    assert hello.find_last_not_of(b"dl") == 8
    assert hello.find_last_not_of(b"d", 9) == 9
    assert hello.find_last_not_of(b"") == 10
    assert hello.find_last_not_of(b"helo wrd") == NPOS


def test_set_searches_on_empty_view():
    empty = StringView()

    assert empty.find_first_of(b"a") == NPOS
    assert empty.find_last_of(b"a") == NPOS
    assert empty.find_first_not_of(b"a") == NPOS
    assert empty.find_last_not_of(b"a") == NPOS
    assert empty.find_last_not_of(b"") == NPOS


# Membership and other unit types


def test_membership_uses_find(hello):
    assert b"world" in hello
    assert ord("w") in hello
    assert b"" in hello
    assert b"xyz" not in hello
    assert StringView(b"lo w") in hello


def test_str_views(whello):
    assert whello.find("world") == 6
    assert whello.rfind("o") == 7
    assert whello.find_first_of("lo") == 2
    assert whello.find_last_not_of("dlr") == 7
    assert "wor" in whello


def test_sixteen_bit_views():
    v = U16StringView(array("H", map(ord, "hello world")))

    assert v.find(ord("w")) == 6
    assert v.find(array("H", map(ord, "wor"))) == 6
    assert v.rfind(U16StringView(array("H", map(ord, "o")))) == 7
    assert v.find_first_of(array("H", [0x263A, ord("r")])) == 8


def test_tokenizing_shares_storage():
    data = b"alpha beta  gamma"
    line = StringView(data)
    tokens = []
    pos = line.find_first_not_of(b" ")
    while pos != NPOS:
        end = line.find(b" ", pos)
        token = line.substr(pos, end - pos if end != NPOS else NPOS)
        tokens.append(token)
        pos = line.find_first_not_of(b" ", pos + token.size())

    assert tokens == [b"alpha", b"beta", b"gamma"]
    assert all(t.data().buffer is line.data().buffer for t in tokens)
