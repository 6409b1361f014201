# -*- coding: utf-8 -*-
"""Tests for the runner advance grammar."""

import pytest

from retrofield.advances import advance, advances
from retrofield.cursor import Cursor
from retrofield.exceptions import LexError, StructuralError, UnknownVariant
from retrofield.locations import FieldLocation
from retrofield.types import (
    Advance,
    AdvanceFlag,
    BallPath,
    Base,
    Fielder,
    FieldingError,
    InterferenceAt,
    Runner,
    Success,
    ThrowingError,
)


@pytest.mark.parametrize(
    "test_input,expected",
    [
        ("1-2", Advance(Base.FIRST, Base.SECOND)),
        ("B-1", Advance(Base.HOME, Base.FIRST)),
        ("3-H", Advance(Base.THIRD, Base.HOME)),
        ("2X3", Advance(Base.SECOND, Base.THIRD, out=True)),
        ("3-H(UR)", Advance(Base.THIRD, Base.HOME, False, (AdvanceFlag.UNEARNED,))),
        (
            "3-H(TUR)(RBI)",
            Advance(
                Base.THIRD,
                Base.HOME,
                False,
                (AdvanceFlag.TEAM_UNEARNED, AdvanceFlag.RBI),
            ),
        ),
        ("2-H(NORBI)", Advance(Base.SECOND, Base.HOME, False, (AdvanceFlag.NO_RBI,))),
        ("1-2(WP)", Advance(Base.FIRST, Base.SECOND, False, (AdvanceFlag.WILD_PITCH,))),
        (
            "BX2(84)",
            Advance(
                Base.HOME,
                Base.SECOND,
                True,
                (BallPath((Success(Fielder(8)), Success(Fielder(4)))),),
            ),
        ),
        (
            "1X3(7E4/TH)",
            Advance(
                Base.FIRST,
                Base.THIRD,
                True,
                (
                    BallPath(
                        (
                            Success(Fielder(7)),
                            FieldingError(Fielder(4), ThrowingError()),
                        )
                    ),
                ),
            ),
        ),
        (
            "B-1(2/INT)",
            Advance(
                Base.HOME,
                Base.FIRST,
                False,
                (InterferenceAt(FieldLocation.CATCHER),),
            ),
        ),
    ],
)
def test_advance(test_input, expected):
    found, cur = advance(Cursor(test_input))
    assert found == expected
    assert cur.at_end


def test_advance_runner():
    assert advance(Cursor("B-1"))[0].runner is Runner.BATTER
    assert advance(Cursor("2-3"))[0].runner is Runner.SECOND


@pytest.mark.parametrize(
    "test_input,expected",
    [
        ("B-1", "B-1"),
        ("H-1", "B-1"),
        ("3-H(NORBI)", "3-H(NR)"),
        ("2X3(E5)(UR)", "2X3(E5)(UR)"),
    ],
)
def test_advance_format(test_input, expected):
    """The batter is written as B and long spellings are shortened."""
    assert str(advance(Cursor(test_input))[0]) == expected


def test_advance_list():
    found, cur = advances(Cursor(".B-1;1-3;2-H"))
    assert [str(a) for a in found] == ["B-1", "1-3", "2-H"]
    assert cur.at_end


def test_advance_list_stops_at_unknown_character():
    found, cur = advances(Cursor(".1-2#"))
    assert len(found) == 1
    assert cur.remaining == "#"


@pytest.mark.parametrize(
    "test_input,error,position",
    [
        ("4-H", UnknownVariant, 0),
        ("1+2", LexError, 1),
        ("2-H(XYZ)", UnknownVariant, 3),
        ("2-H(UR", StructuralError, 5),
        ("2-H(75X)", UnknownVariant, 3),
        ("1X3(75;B-2", StructuralError, 6),
        ("1X3(7E4", StructuralError, 7),
        ("1X3(75", StructuralError, 6),
    ],
)
def test_advance_errors(test_input, error, position):
    with pytest.raises(error) as info:
        advance(Cursor(test_input))
    assert info.value.position == position
