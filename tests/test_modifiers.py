# -*- coding: utf-8 -*-
"""Tests for the modifier grammar."""

import pytest

from retrofield.cursor import Cursor
from retrofield.exceptions import LexError, UnknownVariant
from retrofield.locations import FieldLocation
from retrofield.modifiers import modifier
from retrofield.types import (
    Base,
    ChargedError,
    Fielder,
    HitLocation,
    Modifier,
    RelayThrow,
    Throw,
)


@pytest.mark.parametrize(
    "test_input,expected",
    [
        ("/F", Modifier.FLY),
        ("/FL", Modifier.FOUL),
        ("/FO", Modifier.FORCE_OUT),
        ("/FDP", Modifier.FLY_BALL_DOUBLE_PLAY),
        ("/G", Modifier.GROUND_BALL),
        ("/GDP", Modifier.GROUND_BALL_DOUBLE_PLAY),
        ("/BG", Modifier.GROUND_BALL_BUNT),
        ("/BGDP", Modifier.BUNT_GROUNDED_INTO_DOUBLE_PLAY),
        ("/SH", Modifier.SACRIFICE_HIT),
        ("/SF", Modifier.SACRIFICE_FLY),
        ("/INT", Modifier.INTERFERENCE),
        ("/IF", Modifier.INFIELD_FLY_RULE),
        ("/RINT", Modifier.RUNNER_INTERFERENCE),
        ("/COUB", Modifier.COURTESY_BATTER),
        ("/TP", Modifier.TRIPLE_PLAY),
        ("/C", Modifier.CALLED_THIRD_STRIKE),
        ("/E4", ChargedError(Fielder(4))),
        ("/R6", RelayThrow(Fielder(6))),
        ("/TH", Throw()),
        ("/TH2", Throw(Base.SECOND)),
        ("/THH", Throw(Base.HOME)),
        ("/78", HitLocation(FieldLocation.CENTER_LEFT)),
        ("/5", HitLocation(FieldLocation.THIRD_BASE)),
        ("/89XD", HitLocation(FieldLocation.EXTREMELY_DEEP_CENTER_RIGHT)),
    ],
)
def test_modifier(test_input, expected):
    """Test that longer codes win over the shorter codes they start with."""
    found, cur = modifier(Cursor(test_input))
    assert found == expected
    assert cur.at_end


def test_modifiers_run_together():
    """A ground ball to third can be written without a slash before the 5."""
    found, cur = modifier(Cursor("/G5"))
    assert found is Modifier.GROUND_BALL
    found, cur = modifier(cur)
    assert found == HitLocation(FieldLocation.THIRD_BASE)
    assert cur.at_end


@pytest.mark.parametrize(
    "test_input,error,position",
    [
        ("/XYZ", UnknownVariant, 1),
        ("/99", UnknownVariant, 1),
        ("/E0", UnknownVariant, 2),
        ("/", LexError, 1),
        ("/.", LexError, 1),
    ],
)
def test_modifier_errors(test_input, error, position):
    with pytest.raises(error) as info:
        modifier(Cursor(test_input))
    assert info.value.position == position


@pytest.mark.parametrize("code", [m.value for m in Modifier])
def test_every_code_in_catalogue(code):
    """Every catalogued code decodes to its own member."""
    found, cur = modifier(Cursor("/" + code))
    assert found is Modifier(code)
    assert cur.at_end
