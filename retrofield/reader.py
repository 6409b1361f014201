# -*- coding: utf-8 -*-
"""Reading Retrosheet event files into rows of decoded plays.

This module contains the EventFileReader class, which walks an event file
game by game and decodes the event field of every ``play`` record.
"""

import logging
import typing

import pandas as pd

from .event import parse_event
from .exceptions import RecordError, RetrofieldException
from .pitches import Pitch, parse_pitches, pitch_count
from .table import event_row
from .types import Event

logger = logging.getLogger(__name__)

# Trailing characters of an event field that annotate the play rather than
# describe it.
_NOTE_CODES = "#!?+-"

# play,inning,side,batter,count,pitches,event
_PLAY_FIELDS = 7


class PlayRecord(typing.NamedTuple):
    inning: int
    side: int
    batter: str
    count: typing.Optional[typing.Tuple[int, int]]
    pitches: str
    event_text: str
    note: typing.Optional[str]

    @property
    def pitch_sequence(self) -> typing.Tuple[Pitch, ...]:
        """The decoded pitches of the plate appearance so far."""
        return parse_pitches(self.pitches)


def split_play(line: str) -> PlayRecord:
    """Split a ``play`` record into its fields.

    Args:
        line: A line such as ``play,7,0,saboc001,01,CX,8/F78``.

    Returns:
        The record's fields. The count is None when recorded as ``??``.

    Raises:
        RecordError: If the line is not a well formed play record or its
            pitch sequence cannot be decoded.
    """
    fields = line.strip().split(",")
    if fields[0] != "play" or len(fields) != _PLAY_FIELDS:
        raise RecordError(f"Not a play record: {line.strip()!r}")
    _, inning, side, batter, count, pitches, event_text = fields
    if not inning.isdigit() or side not in ("0", "1"):
        raise RecordError(f"Bad inning or side in {line.strip()!r}")
    if count == "??":
        balls_strikes = None
    elif len(count) == 2 and count.isdigit():
        balls_strikes = (int(count[0]), int(count[1]))
    else:
        raise RecordError(f"Bad count {count!r} in {line.strip()!r}")
    parse_pitches(pitches)
    note = None
    if event_text and event_text[-1] in _NOTE_CODES:
        event_text, note = event_text[:-1], event_text[-1]
    return PlayRecord(
        int(inning), int(side), batter, balls_strikes, pitches, event_text, note
    )


class EventFileReader:
    """Parser for retrosheet event files.

    Attributes:
        path: Local path to the event file.
        assume_batter: Passed on to parse_event for every play.
        errors: "skip" to log and drop the rest of a game whose plays cannot
            be decoded, "raise" to propagate the error.
        current_game: Dictionary of information about the game being read.
    """

    def __init__(self, path: str, assume_batter: bool = False, errors: str = "skip"):
        if errors not in ("skip", "raise"):
            raise ValueError(f"errors must be 'skip' or 'raise', not {errors!r}")
        self.path = path
        self.assume_batter = assume_batter
        self.errors = errors
        self._reset_state()

    def data_frame(self) -> pd.DataFrame:
        """Parse the event file and return data frame.

        Returns:
            Pandas DataFrame with one row per decoded play.
        """
        return pd.DataFrame(self.parse())

    def events(self) -> typing.Iterator[typing.Tuple[str, PlayRecord, Event]]:
        """Yield the game id, record and decoded event of every play."""
        yield from self._read()

    def parse(self) -> typing.Iterator[dict]:
        """Executes parsing of the event file and generates tabular data.

        Yields:
            Tabular data entry for each play that occurs in the event file.
        """
        for game_id, record, event in self._read():
            row = {
                "GAME_ID": game_id,
                "AWAY_TEAM_ID": self.current_game.get("visteam", ""),
                "HOME_TEAM_ID": self.current_game.get("hometeam", ""),
                "INN_CT": record.inning,
                "BAT_HOME_ID": record.side,
                "BAT_ID": record.batter,
                "BALLS_CT": record.count[0] if record.count else None,
                "STRIKES_CT": record.count[1] if record.count else None,
                "PITCH_SEQ_TX": record.pitches,
                "PITCH_CT": pitch_count(record.pitch_sequence),
                "EVENT_TX": record.event_text,
                "NOTE_TX": record.note or "",
            }
            row.update(event_row(event))
            yield row

    def _reset_state(self):
        """Reset fields that track the state of the game currently being read."""
        self.current_game = None
        self._abandoned = False
        self._plays_in_game = 0

    def _read(self):
        self._reset_state()
        with open(self.path) as infile:
            for line in infile:
                fields = line.strip().split(",")
                if fields[0] == "id":
                    self._new_game(fields[1] if len(fields) > 1 else "")
                elif self.current_game is None or self._abandoned:
                    continue
                elif fields[0] == "info" and len(fields) >= 3:
                    self.current_game[fields[1]] = fields[2]
                elif fields[0] == "play":
                    decoded = self._process_play(line)
                    if decoded is not None:
                        yield (self.current_game["id"],) + decoded
        self._end_game()

    def _new_game(self, game_id: str):
        self._end_game()
        self._reset_state()
        self.current_game = {"id": game_id}

    def _end_game(self):
        if self.current_game is not None and not self._abandoned:
            logger.debug(
                "Read %d plays of game %s", self._plays_in_game, self.current_game["id"]
            )

    def _process_play(
        self, line: str
    ) -> typing.Optional[typing.Tuple[PlayRecord, Event]]:
        """Decode one play record, abandoning the game if it is malformed."""
        try:
            record = split_play(line)
            event = parse_event(record.event_text, assume_batter=self.assume_batter)
        except RetrofieldException as exc:
            if self.errors == "raise":
                raise
            logger.warning(
                "Abandoning game %s after %d plays: %s",
                self.current_game["id"],
                self._plays_in_game,
                exc,
            )
            self._abandoned = True
            return None
        self._plays_in_game += 1
        return record, event
