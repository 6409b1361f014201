# -*- coding: utf-8 -*-
"""Decoding of the pitch sequence field of a play record.

Each pitch is one letter, optionally preceded by a modifier: ``+`` (the
following pickoff throw was by the catcher), ``*`` (the pitch was blocked by
the catcher) or ``>`` (the runner went on the pitch). For example
``CB*BX`` is a called strike, a ball, a blocked ball, and a ball put in play.
"""

import dataclasses
import enum
import typing

from .exceptions import RecordError


class PitchType(enum.Enum):
    AUTOMATIC_STRIKE = "A"
    BALL = "B"
    CALLED_STRIKE = "C"
    FOUL = "F"
    HIT_BATTER = "H"
    INTENTIONAL_BALL = "I"
    STRIKE = "K"
    FOUL_BUNT = "L"
    MISSED_BUNT_ATTEMPT = "M"
    NO_PITCH = "N"
    FOUL_TIP_ON_BUNT = "O"
    PITCHOUT = "P"
    SWINGING_ON_PITCHOUT = "Q"
    FOUL_ON_PITCHOUT = "R"
    SWINGING_STRIKE = "S"
    FOUL_TIP = "T"
    UNKNOWN = "U"
    CALLED_BALL = "V"
    IN_PLAY = "X"
    IN_PLAY_ON_PITCHOUT = "Y"
    PICKOFF_THROW_FIRST = "1"
    PICKOFF_THROW_SECOND = "2"
    PICKOFF_THROW_THIRD = "3"
    NOT_INVOLVING_BATTER = "."

    @property
    def is_pitch(self) -> bool:
        """False for throws and markers that are not pitches to the batter."""
        return self not in _NOT_PITCHES


_NOT_PITCHES = {
    PitchType.NO_PITCH,
    PitchType.PICKOFF_THROW_FIRST,
    PitchType.PICKOFF_THROW_SECOND,
    PitchType.PICKOFF_THROW_THIRD,
    PitchType.NOT_INVOLVING_BATTER,
}


class PitchModifier(enum.Enum):
    CATCHER_PICKOFF_THROW = "+"
    BLOCKED_BY_CATCHER = "*"
    RUNNER_GOING = ">"


@dataclasses.dataclass(frozen=True)
class Pitch:
    pitch_type: PitchType
    modifier: typing.Optional[PitchModifier] = None

    def __str__(self) -> str:
        prefix = "" if self.modifier is None else self.modifier.value
        return prefix + self.pitch_type.value


_MODIFIER_CODES = {modifier.value: modifier for modifier in PitchModifier}
_PITCH_CODES = {pitch.value: pitch for pitch in PitchType}


def parse_pitches(text: str) -> typing.Tuple[Pitch, ...]:
    """Decode a pitch sequence.

    Args:
        text: The pitch field of a play record, possibly empty.

    Returns:
        The pitches in the order they were thrown.

    Raises:
        RecordError: If a character is not a pitch code, or a modifier is
            not followed by a pitch.
    """
    pitches = []
    modifier = None
    for pos, char in enumerate(text):
        if char in _MODIFIER_CODES and modifier is None:
            modifier = _MODIFIER_CODES[char]
        elif char in _PITCH_CODES:
            pitches.append(Pitch(_PITCH_CODES[char], modifier))
            modifier = None
        else:
            raise RecordError(f"Bad pitch {char!r} at offset {pos} in {text!r}")
    if modifier is not None:
        raise RecordError(f"Pitch sequence {text!r} ends with a modifier")
    return tuple(pitches)


def pitch_count(pitches: typing.Iterable[Pitch]) -> int:
    """Number of pitches thrown to the batter."""
    return sum(1 for pitch in pitches if pitch.pitch_type.is_pitch)
