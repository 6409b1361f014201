# -*- coding: utf-8 -*-
"""Tests for reading event files."""

import logging

import pytest

from retrofield.exceptions import LexError, RecordError
from retrofield.reader import EventFileReader, PlayRecord, split_play

EVENT_FILE = """id,ANA201904040
version,2
info,visteam,SEA
info,hometeam,ANA
start,hanim001,"Mitch Haniger",0,1,9
play,1,0,hanim001,22,BCFBX,S8/G4M
play,1,0,smitm002,01,CX,64(1)3/GDP
com,"Nice turn"
play,1,1,troum001,??,,K
play,2,0,santd002,32,BBCBFB,W#
id,ANA201904050
info,visteam,SEA
info,hometeam,ANA
play,1,0,hanim001,00,X,ZZZ
play,1,0,smitm002,00,X,S8
id,ANA201904060
info,visteam,OAK
info,hometeam,ANA
play,1,0,semim001,10,BX,8/F78
"""


@pytest.fixture
def event_file(tmp_path):
    path = tmp_path / "2019ANA.EVA"
    path.write_text(EVENT_FILE)
    return str(path)


@pytest.mark.parametrize(
    "test_input,expected",
    [
        (
            "play,7,0,saboc001,01,CX,8/F78",
            PlayRecord(7, 0, "saboc001", (0, 1), "CX", "8/F78", None),
        ),
        (
            "play,1,1,troum001,??,,HR!\n",
            PlayRecord(1, 1, "troum001", None, "", "HR", "!"),
        ),
        (
            "play,9,0,santd002,32,BBCBFB,W#",
            PlayRecord(9, 0, "santd002", (3, 2), "BBCBFB", "W", "#"),
        ),
    ],
)
def test_split_play(test_input, expected):
    """Test splitting play records and separating the trailing note."""
    assert split_play(test_input) == expected


@pytest.mark.parametrize(
    "test_input",
    [
        "info,visteam,SEA",
        "play,1,0,x,00,X",
        "play,1,2,x,00,X,S8",
        "play,x,0,x,00,X,S8",
        "play,1,0,x,0,X,S8",
        "play,1,0,x,00,BZ,S8",
    ],
)
def test_split_play_errors(test_input):
    with pytest.raises(RecordError):
        split_play(test_input)


def test_data_frame(event_file):
    """A bad play abandons the rest of its game only."""
    frame = EventFileReader(event_file).data_frame()
    assert list(frame["EVENT_TX"]) == ["S8/G4M", "64(1)3/GDP", "K", "W"]
    assert set(frame["GAME_ID"]) == {"ANA201904040"}
    assert list(frame["AWAY_TEAM_ID"].unique()) == ["SEA"]
    assert list(frame["HIT_FL"]) == [1, 0, 0, 0]
    assert list(frame["PITCH_CT"]) == [5, 2, 0, 6]
    assert list(frame["NOTE_TX"]) == ["", "", "", "#"]
    assert frame["BALLS_CT"].isna().tolist() == [False, False, True, False]


def test_assume_batter(event_file):
    frame = EventFileReader(event_file, assume_batter=True).data_frame()
    last = frame.iloc[-1]
    assert last["GAME_ID"] == "ANA201904060"
    assert last["AWAY_TEAM_ID"] == "OAK"
    assert last["EVENT_CANONICAL_TX"] == "8(B)/F/78"
    assert last["BAT_DEST_ID"] == -1


def test_abandoned_game_is_logged(event_file, caplog):
    with caplog.at_level(logging.WARNING, logger="retrofield.reader"):
        list(EventFileReader(event_file).events())
    messages = [record.getMessage() for record in caplog.records]
    assert any("ANA201904050" in message for message in messages)
    assert any("ANA201904060" in message for message in messages)


def test_raise_on_error(event_file):
    with pytest.raises(LexError):
        list(EventFileReader(event_file, errors="raise").parse())


def test_events(event_file):
    game_id, record, event = next(EventFileReader(event_file).events())
    assert game_id == "ANA201904040"
    assert record.batter == "hanim001"
    assert str(event) == "S8/G/4M"


def test_bad_errors_argument(event_file):
    with pytest.raises(ValueError):
        EventFileReader(event_file, errors="ignore")


def test_pitch_sequence():
    record = split_play("play,3,1,troum001,12,C1>B*BX,S8")
    assert [str(pitch) for pitch in record.pitch_sequence] == [
        "C",
        "1",
        ">B",
        "*B",
        "X",
    ]
    assert sum(pitch.pitch_type.is_pitch for pitch in record.pitch_sequence) == 4
