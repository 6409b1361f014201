# -*- coding: utf-8 -*-
"""Flatten decoded events into tabular columns.

Column names follow the BEVENT/cwevent conventions: ``*_FL`` columns are
0/1 flags, destinations are 0 (no movement), 1-3 (base reached), 4 (scored)
or -1 (put out).
"""

import typing

from . import types

_HIT_CODES = {
    types.Single: 1,
    types.Double: 2,
    types.GroundRuleDouble: 2,
    types.Triple: 3,
    types.SoloHomeRun: 4,
    types.InsideTheParkHomeRun: 4,
}

# Outcomes that put the batter on first.
_BATTER_TO_FIRST = (
    types.Error,
    types.FieldersChoice,
    types.HitByPitch,
    types.Interference,
    types.Walk,
)

_M = types.Modifier
_BATTED_BALL_CODES = {
    _M.GROUND_BALL: "G",
    _M.GROUND_BALL_DOUBLE_PLAY: "G",
    _M.GROUND_BALL_TRIPLE_PLAY: "G",
    _M.GROUND_BALL_BUNT: "G",
    _M.BUNT_GROUNDED_INTO_DOUBLE_PLAY: "G",
    _M.LINE_DRIVE: "L",
    _M.LINED_INTO_DOUBLE_PLAY: "L",
    _M.LINED_INTO_TRIPLE_PLAY: "L",
    _M.LINE_DRIVE_BUNT: "L",
    _M.FLY: "F",
    _M.FLY_BALL_DOUBLE_PLAY: "F",
    _M.INFIELD_FLY_RULE: "P",
    _M.POP_FLY: "P",
    _M.POP_UP_BUNT: "P",
    _M.BUNT_POPPED_INTO_DOUBLE_PLAY: "P",
}
_BUNTS = {
    _M.GROUND_BALL_BUNT,
    _M.BUNT_GROUNDED_INTO_DOUBLE_PLAY,
    _M.LINE_DRIVE_BUNT,
    _M.POP_UP_BUNT,
    _M.BUNT_POPPED_INTO_DOUBLE_PLAY,
    _M.SACRIFICE_HIT,
}
_DOUBLE_PLAYS = {
    _M.DOUBLE_PLAY,
    _M.GROUND_BALL_DOUBLE_PLAY,
    _M.LINED_INTO_DOUBLE_PLAY,
    _M.FLY_BALL_DOUBLE_PLAY,
    _M.BUNT_GROUNDED_INTO_DOUBLE_PLAY,
    _M.BUNT_POPPED_INTO_DOUBLE_PLAY,
}
_TRIPLE_PLAYS = {
    _M.TRIPLE_PLAY,
    _M.GROUND_BALL_TRIPLE_PLAY,
    _M.LINED_INTO_TRIPLE_PLAY,
}


def _plays(event: types.Event) -> typing.List[types.EventType]:
    """The basic play followed by the play nested in it, if any."""
    plays = [event.event_type]
    nested = getattr(event.event_type, "base_running_event", None)
    if nested is not None:
        plays.append(nested)
    return plays


def _ball_paths(event: types.Event) -> typing.Iterator[types.BallPath]:
    for play in _plays(event):
        path = getattr(play, "ball_path", None)
        if path is not None:
            yield path
    for advance in event.advances:
        for param in advance.parameters:
            if isinstance(param, types.BallPath):
                yield param


def errors(event: types.Event) -> typing.List[types.Fielder]:
    """Fielders charged with an error on the play, in order of appearance."""
    charged = []
    for play in _plays(event):
        if isinstance(play, (types.Error, types.ErrorOnFoulFlyBall)):
            charged.append(play.credited_fielder)
    for path in _ball_paths(event):
        if path.error is not None:
            charged.append(path.error.fielder)
    for modifier in event.modifiers:
        if isinstance(modifier, types.ChargedError):
            charged.append(modifier.fielder)
    return charged


def destinations(event: types.Event) -> typing.List[int]:
    """Destination of the batter and of the runners on first, second, third.

    The basic play sets the implied movement, explicit advances override it.
    """
    dest = [0] * 4
    for i, play in enumerate(_plays(event)):
        if type(play) in _HIT_CODES:
            dest[0] = _HIT_CODES[type(play)]
        elif isinstance(play, _BATTER_TO_FIRST):
            # An error after a strikeout or walk is not on the batter.
            if i == 0:
                dest[0] = 1
        elif isinstance(play, types.Strikeout):
            dest[0] = -1
        elif isinstance(play, types.Out):
            dest[play.runner_out.index] = -1
        elif isinstance(play, (types.DoublePlay, types.TriplePlay)):
            for runner in play.runners_out:
                dest[runner.index] = -1
        elif isinstance(play, types.StolenBase):
            for stolen in play.bases:
                dest[stolen.number - 1] = stolen.number
        elif isinstance(play, types.CaughtStealing):
            if play.ball_path.error is None:
                dest[play.base.number - 1] = -1
        elif isinstance(play, types.Pickoff):
            start = play.base.number
            if play.caught_stealing:
                start -= 1
            if play.ball_path.error is None:
                dest[start] = -1
    for advance in event.advances:
        runner = advance.runner.index
        dest[runner] = advance.ending_base.number
        if advance.out and not any(
            isinstance(param, types.BallPath) and param.error is not None
            for param in advance.parameters
        ):
            dest[runner] = -1
    return dest


def event_row(event: types.Event) -> dict:
    """Tabular columns describing a decoded event.

    Args:
        event: A decoded event.

    Returns:
        Dictionary of column name to value.
    """
    plays = _plays(event)
    modifiers = set(m for m in event.modifiers if isinstance(m, types.Modifier))
    advance_flags = set(
        param
        for advance in event.advances
        for param in advance.parameters
        if isinstance(param, types.AdvanceFlag)
    )
    row = {
        "EVENT_TYPE": type(event.event_type).__name__,
        "EVENT_CANONICAL_TX": str(event),
        "MODIFIERS": "/".join(str(m) for m in event.modifiers),
        "HIT_FL": _HIT_CODES.get(type(event.event_type), 0),
        "BATTEDBALL_CD": "",
        "BUNT_FL": int(bool(modifiers & _BUNTS)),
        "SH_FL": int(_M.SACRIFICE_HIT in modifiers),
        "SF_FL": int(_M.SACRIFICE_FLY in modifiers),
        "DP_FL": int(
            isinstance(event.event_type, types.DoublePlay)
            or bool(modifiers & _DOUBLE_PLAYS)
        ),
        "TP_FL": int(
            isinstance(event.event_type, types.TriplePlay)
            or bool(modifiers & _TRIPLE_PLAYS)
        ),
        "FOUL_FL": int(
            _M.FOUL in modifiers
            or isinstance(event.event_type, types.ErrorOnFoulFlyBall)
        ),
        "WP_FL": int(
            any(isinstance(p, types.WildPitch) for p in plays)
            or types.AdvanceFlag.WILD_PITCH in advance_flags
        ),
        "PB_FL": int(
            any(isinstance(p, types.PassedBall) for p in plays)
            or types.AdvanceFlag.PASSED_BALL in advance_flags
        ),
    }
    for modifier in event.modifiers:
        if modifier in _BATTED_BALL_CODES:
            row["BATTEDBALL_CD"] = _BATTED_BALL_CODES[modifier]
            break
    charged = errors(event)
    row["ERR_CT"] = len(charged)
    for i, fielder in enumerate(charged, 1):
        row[f"ERR{i}_FLD_CD"] = str(fielder)
    dest = destinations(event)
    row["BAT_DEST_ID"] = dest[0]
    row["RUN1_DEST_ID"] = dest[1]
    row["RUN2_DEST_ID"] = dest[2]
    row["RUN3_DEST_ID"] = dest[3]
    return row
