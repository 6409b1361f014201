# -*- coding: utf-8 -*-
"""Hit location codes.

A location is a run of fielder digits naming the area of the field, followed
by letters that refine it: ``M`` (middle), ``L`` (line/foul), ``S`` (short),
``D`` (deep), ``XD`` (extra deep) and ``F`` (near the fence/foul territory).
The catalogue follows https://www.retrosheet.org/location.htm.
"""

import enum
import typing


class FieldLocation(enum.Enum):
    # Outfield
    EXTREMELY_DEEP_CENTER_LEFT = "78XD"
    EXTREMELY_DEEP_CENTER = "8XD"
    EXTREMELY_DEEP_CENTER_RIGHT = "89XD"
    DEEP_LEFT_FOUL_FENCE = "7LDF"
    DEEP_LEFT_FOUL = "7LD"
    DEEP_LEFT = "7D"
    DEEP_CENTER_LEFT = "78D"
    DEEP_CENTER = "8D"
    DEEP_CENTER_RIGHT = "89D"
    DEEP_RIGHT = "9D"
    DEEP_RIGHT_FOUL = "9LD"
    DEEP_RIGHT_FOUL_FENCE = "9LDF"
    LEFT_FOUL_FENCE = "7LF"
    LEFT_FOUL = "7L"
    LEFT = "7"
    CENTER_LEFT = "78"
    CENTER = "8"
    CENTER_RIGHT = "89"
    RIGHT = "9"
    RIGHT_FOUL = "9L"
    RIGHT_FOUL_FENCE = "9LF"
    SHORT_LEFT_FOUL_FENCE = "7LSF"
    SHORT_LEFT_FOUL = "7LS"
    SHORT_LEFT = "7S"
    SHORT_CENTER_LEFT = "78S"
    SHORT_CENTER = "8S"
    SHORT_CENTER_RIGHT = "89S"
    SHORT_RIGHT = "9S"
    SHORT_RIGHT_FOUL = "9LS"
    SHORT_RIGHT_FOUL_FENCE = "9LSF"

    # Infield
    DEEP_THIRD_BASE_FENCE = "5DF"
    DEEP_THIRD_BASE = "5D"
    DEEP_THIRD_SHORTSTOP = "56D"
    DEEP_SHORTSTOP = "6D"
    DEEP_MIDDLE_SHORTSTOP = "6MD"
    DEEP_MIDDLE_SECOND_BASE = "4MD"
    DEEP_SECOND_BASE = "4D"
    DEEP_SECOND_FIRST_BASE = "34D"
    DEEP_FIRST_BASE = "3D"
    DEEP_FIRST_BASE_FENCE = "3DF"
    THIRD_BASE_FENCE = "5F"
    THIRD_BASE = "5"
    THIRD_SHORTSTOP = "56"
    SHORTSTOP = "6"
    MIDDLE_SHORTSTOP = "6M"
    MIDDLE_SECOND_BASE = "4M"
    SECOND_BASE = "4"
    SECOND_FIRST_BASE = "34"
    FIRST_BASE = "3"
    FIRST_BASE_FENCE = "3F"
    SHORT_THIRD_BASE = "5S"
    SHORT_THIRD_SHORTSTOP = "56S"
    SHORT_SHORTSTOP = "6S"
    SHORT_MIDDLE_SHORTSTOP = "6MS"
    SHORT_MIDDLE_SECOND_BASE = "4MS"
    SHORT_SECOND_BASE = "4S"
    SHORT_SECOND_FIRST_BASE = "34S"
    SHORT_FIRST_BASE = "3S"
    PITCHER_THIRD = "15"
    PITCHER = "1"
    PITCHER_FIRST = "13"
    SHORT_PITCHER = "1S"
    CATCHER_THIRD_FENCE = "25F"
    CATCHER_THIRD = "25"
    CATCHER_FIRST = "23"
    CATCHER_FIRST_FENCE = "23F"
    CATCHER = "2"
    CATCHER_FENCE = "2F"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def lookup(cls, code: str) -> typing.Optional["FieldLocation"]:
        """Return the location for an exact code, or None if unknown."""
        try:
            return cls(code)
        except ValueError:
            return None
