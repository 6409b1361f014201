# -*- coding: utf-8 -*-
"""Tests for decoding whole event fields."""

import pytest

import retrofield
from retrofield import (
    Advance,
    AdvanceFlag,
    Base,
    Event,
    Fielder,
    FieldLocation,
    HitLocation,
    LexError,
    Modifier,
    Out,
    ParseError,
    Runner,
    Single,
    StructuralError,
    TrailingInput,
    UnknownVariant,
    parse_event,
)


def test_fly_out_with_assumed_batter():
    event = parse_event("8/F78", assume_batter=True)
    assert event == Event(
        Out(Fielder(8), (), Runner.BATTER),
        (Modifier.FLY, HitLocation(FieldLocation.CENTER_LEFT)),
        (),
    )


def test_fly_out_needs_runner_when_strict():
    with pytest.raises(StructuralError) as info:
        parse_event("8/F78")
    assert info.value.position == 1
    assert info.value.remaining == "/F78"


def test_single_with_advances():
    event = parse_event("S8/G4M.2-H;1-3")
    assert event.event_type == Single(Fielder(8))
    assert event.modifiers == (
        Modifier.GROUND_BALL,
        HitLocation(FieldLocation.MIDDLE_SECOND_BASE),
    )
    assert event.advances == (
        Advance(Base.SECOND, Base.HOME),
        Advance(Base.FIRST, Base.THIRD),
    )


def test_advance_parameters():
    event = parse_event("8(B)/F78.3-H(UR)")
    assert event.advances == (
        Advance(Base.THIRD, Base.HOME, False, (AdvanceFlag.UNEARNED,)),
    )


def test_ground_ball_double_play():
    event = parse_event("64(1)3/GDP.2-3")
    assert isinstance(event.event_type, retrofield.DoublePlay)
    assert event.event_type.runners_out == (Runner.FIRST, Runner.THIRD)
    assert event.modifiers == (Modifier.GROUND_BALL_DOUBLE_PLAY,)


@pytest.mark.parametrize(
    "test_input,expected",
    [
        ("S8/G4M.2-H;1-3", "S8/G/4M.2-H;1-3"),
        ("8/F78", "8(B)/F/78"),
        ("D7/L7D", "D7/L/7D"),
        ("54(1)/FO/G5.3-H;B-1", "54(1)/FO/G/5.3-H;B-1"),
        ("SB3;SB2", "SB2;SB3"),
        ("I", "IW"),
    ],
)
def test_canonical_text(test_input, expected):
    """Test that formatting writes every modifier behind its own slash."""
    assert str(parse_event(test_input, assume_batter=True)) == expected


@pytest.mark.parametrize(
    "test_input",
    [
        "S",
        "S8",
        "S78/L",
        "D7/L7D",
        "DGR/9",
        "T9/F9LD",
        "HR/F78XD",
        "H9/IPHR",
        "E6/G",
        "6E3/TH",
        "FC6.2X3(65)",
        "FLE7",
        "C/E2",
        "HP",
        "K",
        "K23",
        "K/C",
        "K+SB2",
        "K+WP.B-1",
        "K+CS2(2E4/TH).1-2",
        "W+SB3",
        "W+E2/TH.1-3",
        "IW",
        "NP",
        "BK.1-2;3-H(UR)",
        "DI.1-2",
        "OA.3-H",
        "PB.1-2",
        "WP.2-3;1-2",
        "CS2(26)",
        "CS2(2E4/TH).1-2",
        "PO1(13)",
        "PO2(E2/TH2).2-3",
        "POCS2(1361)",
        "SB2",
        "SB2;SB3",
        "SBH;SB3",
        "8(B)/F",
        "63/G6",
        "54(1)/FO/G5.3-H;B-1",
        "64(1)3/GDP",
        "8(B)84(2)/LDP",
        "1(B)16(2)63(1)/LTP",
        "S8/G4M.2-H(UR);1-3",
        "D7/L.3-H(RBI);2-H(NR);1X3(752)",
        "E2/TH.2-H(UR)",
        "S9.1-3(7/INT)",
        "T9/F.BX3(95E5)(TUR)",
        "2(B)/BG/SH.1-2",
        "46(1)/FO/R6/TH1",
        "S7/L7LS/MREV",
    ],
)
def test_round_trip(test_input):
    """Formatting a decoded field and decoding it again gives the same value."""
    event = parse_event(test_input)
    assert parse_event(str(event)) == event


@pytest.mark.parametrize(
    "test_input,error,position",
    [
        ("", LexError, 0),
        ("Q", LexError, 0),
        ("S8/", LexError, 3),
        ("S8/G.", LexError, 5),
        ("S0", UnknownVariant, 1),
        ("63/XYZ", UnknownVariant, 3),
        ("S8/G99", UnknownVariant, 4),
        ("S8.4-H", UnknownVariant, 3),
        ("S8.2-H(ZZ)", UnknownVariant, 6),
        ("CS2(2E4", StructuralError, 7),
        ("CS2(24X", StructuralError, 6),
        ("PO1(13.1-2", StructuralError, 6),
        ("8(B", StructuralError, 3),
        ("S8.1X3(75;B-2", StructuralError, 9),
        ("8(4)/F", UnknownVariant, 2),
        ("8/F78", StructuralError, 1),
        ("SB2;SB2", StructuralError, 6),
        ("S8.2-H#", TrailingInput, 6),
        ("S8.2-H(UR)!", TrailingInput, 10),
    ],
)
def test_errors(test_input, error, position):
    """Every failure carries its kind and the offset where it occurred."""
    with pytest.raises(error) as info:
        parse_event(test_input)
    assert info.value.position == position
    assert info.value.text == test_input
    assert isinstance(info.value, ParseError)


def test_error_message():
    with pytest.raises(TrailingInput) as info:
        parse_event("S8.2-H#")
    assert "offset 6" in str(info.value)
    assert info.value.remaining == "#"
