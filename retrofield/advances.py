# -*- coding: utf-8 -*-
"""Grammar for the runner advances at the end of an event field.

    advances := "." advance (";" advance)*
    advance  := base ("-" | "X") base parameter*
"""

import re
import typing

from . import types
from .cursor import Cursor, first_of
from .exceptions import LexError, StructuralError, UnknownVariant
from .lexemes import ball_path, base
from .locations import FieldLocation

_PARENTHESISED = re.compile(r"\(([^()]*)\)")
_INTERFERENCE = re.compile(r"\(([1-9])/INT\)")

# NORBI is the long spelling of NR.
_FLAG_CODES = {
    "UR": types.AdvanceFlag.UNEARNED,
    "TUR": types.AdvanceFlag.TEAM_UNEARNED,
    "RBI": types.AdvanceFlag.RBI,
    "NR": types.AdvanceFlag.NO_RBI,
    "NORBI": types.AdvanceFlag.NO_RBI,
    "WP": types.AdvanceFlag.WILD_PITCH,
    "PB": types.AdvanceFlag.PASSED_BALL,
}


def _flag(code: str):
    """Grammar for the flag written as ``(code)``."""

    def parse(cur: Cursor):
        return _FLAG_CODES[code], cur.expect(f"({code})")

    parse.__name__ = code.lower()
    return parse


def interference(cur: Cursor) -> typing.Tuple[types.InterferenceAt, Cursor]:
    """Interference by the fielder at a location, e.g. ``(2/INT)``."""
    match = cur.match(_INTERFERENCE)
    if match is None:
        raise cur.error(LexError, "Expected an interference", ("'(<digit>/INT)'",))
    location = types.InterferenceAt(FieldLocation(match.group(1)))
    return location, cur.at(match.end())


_PARAMETERS = (ball_path,) + tuple(_flag(code) for code in _FLAG_CODES) + (
    interference,
)


def parameter(cur: Cursor) -> typing.Tuple[types.AdvanceParameter, Cursor]:
    """Parse one parenthesised advance parameter.

    Args:
        cur: Cursor at the opening parenthesis.

    Returns:
        A BallPath, AdvanceFlag or InterferenceAt and the cursor after it.

    Raises:
        UnknownVariant: If the parentheses hold no known parameter.
        StructuralError: If the parameter is never closed.
    """
    try:
        return first_of(cur, _PARAMETERS, "advance parameter")
    except (LexError, StructuralError) as exc:
        match = cur.match(_PARENTHESISED)
        if match is not None:
            raise cur.error(
                UnknownVariant,
                f"Unknown advance parameter {match.group(1)!r}",
                ("advance parameter",),
            ) from None
        if isinstance(exc, StructuralError):
            raise
        raise cur.error(
            StructuralError, "Unterminated advance parameter", ("')'",)
        ) from None


def advance(cur: Cursor) -> typing.Tuple[types.Advance, Cursor]:
    """Parse a runner advance such as ``1X3(75)`` or ``3-H(UR)``.

    Args:
        cur: Cursor at the starting base.

    Returns:
        The Advance and the cursor after its last parameter.
    """
    start, cur = base(cur)
    separator, cur = cur.expect_any(("-", "X"))
    end, cur = base(cur)
    parameters = []
    while cur.startswith("("):
        found, cur = parameter(cur)
        parameters.append(found)
    return types.Advance(start, end, separator == "X", tuple(parameters)), cur


def advances(cur: Cursor) -> typing.Tuple[typing.Tuple[types.Advance, ...], Cursor]:
    """The ``.``-introduced, ``;``-separated list of advances."""
    found, cur = advance(cur.expect("."))
    found = [found]
    while cur.startswith(";"):
        following, cur = advance(cur.advance())
        found.append(following)
    return tuple(found), cur
