# -*- coding: utf-8 -*-
"""Primitive lexemes and the ball path grammar.

    ball-path := "(" fielder* ("E" fielder ("/TH" base?)?)? ")"
"""

import re
import typing

from .cursor import Cursor, optional
from .exceptions import LexError, StructuralError, UnknownVariant
from .locations import FieldLocation
from .types import (
    BallPath,
    Base,
    Fielder,
    FieldingError,
    NonThrowingError,
    Runner,
    Success,
    ThrowingError,
)

_FIELDER_CODES = "123456789U"
_BASE_CODES = "123HB"
_RUNNER_CODES = "B123"
_HIT_LOCATION = re.compile(r"[1-9]+[XDLFSM]*")


def fielder(cur: Cursor) -> typing.Tuple[Fielder, Cursor]:
    """Parse a single fielder.

    Args:
        cur: Cursor at a fielder digit or ``U``.

    Returns:
        The fielder and the cursor after it.
    """
    char = cur.peek()
    if char == "0":
        raise cur.error(UnknownVariant, "There is no fielder 0", ("fielder",))
    if not char or char not in _FIELDER_CODES:
        raise cur.error(LexError, "Expected a fielder", ("fielder",))
    return Fielder.parse(char), cur.advance()


def fielders(cur: Cursor) -> typing.Tuple[typing.Tuple[Fielder, ...], Cursor]:
    """Zero or more fielders."""
    found = []
    while True:
        char = cur.peek()
        if char == "0":
            raise cur.error(UnknownVariant, "There is no fielder 0", ("fielder",))
        if not char or char not in _FIELDER_CODES:
            return tuple(found), cur
        found.append(Fielder.parse(char))
        cur = cur.advance()


def fielder_run(
    cur: Cursor,
) -> typing.Tuple[typing.Tuple[Fielder, ...], Fielder, Cursor]:
    """One or more fielders, split into the assisting ones and the last one.

    Returns:
        assisting: Every fielder but the last, in order.
        credited: The last fielder of the run.
        cursor: Position after the run.
    """
    found, after = fielders(cur)
    if not found:
        raise cur.error(LexError, "Expected a fielder", ("fielder",))
    return found[:-1], found[-1], after


def base(cur: Cursor) -> typing.Tuple[Base, Cursor]:
    """Parse a base, ``B`` and ``H`` both being home.

    Args:
        cur: Cursor at a base code.

    Returns:
        The base and the cursor after it.
    """
    char = cur.peek()
    if char and char in _BASE_CODES:
        return Base.parse(char), cur.advance()
    if char.isdigit():
        raise cur.error(UnknownVariant, f"There is no base {char}", ("base",))
    raise cur.error(LexError, "Expected a base", ("base",))


def runner(cur: Cursor) -> typing.Tuple[Runner, Cursor]:
    """Parse a runner: ``B`` for the batter or the base the runner is on."""
    char = cur.peek()
    if char and char in _RUNNER_CODES:
        return Runner(char), cur.advance()
    if char.isdigit():
        raise cur.error(UnknownVariant, f"There is no runner {char}", ("runner",))
    raise cur.error(LexError, "Expected a runner", ("runner",))


def _closing_paren(cur: Cursor, what: str) -> Cursor:
    if not cur.startswith(")"):
        raise cur.error(StructuralError, f"Unterminated {what}", ("')'",))
    return cur.advance()


def parenthesised_runner(cur: Cursor) -> typing.Tuple[Runner, Cursor]:
    """Parse a runner annotation such as ``(1)``.

    Args:
        cur: Cursor at the opening parenthesis.

    Returns:
        The runner and the cursor after the closing parenthesis.

    Raises:
        StructuralError: If the runner is not followed by ``)``.
    """
    found, cur = runner(cur.expect("("))
    return found, _closing_paren(cur, "runner annotation")


def field_location(cur: Cursor) -> typing.Tuple[FieldLocation, Cursor]:
    """Parse a hit location, the longest code the characters allow."""
    match = cur.match(_HIT_LOCATION)
    if match is None:
        raise cur.error(LexError, "Expected a hit location", ("hit location",))
    location = FieldLocation.lookup(match.group())
    if location is None:
        raise cur.error(
            UnknownVariant,
            f"Unknown hit location {match.group()!r}",
            ("hit location",),
        )
    return location, cur.at(match.end())


def _error_node(cur: Cursor) -> typing.Tuple[FieldingError, Cursor]:
    """``E`` and the fielder charged, optionally a throwing error."""
    cur = cur.expect("E")
    charged, cur = fielder(cur)
    if not cur.startswith("/TH"):
        return FieldingError(charged, NonThrowingError()), cur
    target, cur = optional(cur.advance(3), base)
    return FieldingError(charged, ThrowingError(target)), cur


def ball_path(cur: Cursor) -> typing.Tuple[BallPath, Cursor]:
    """A parenthesised fielding sequence, e.g. ``(2E4/TH)``.

    Args:
        cur: Cursor at the opening parenthesis.

    Returns:
        The ball path and the cursor after the closing parenthesis.

    Raises:
        StructuralError: If the sequence is not closed by ``)``.
    """
    cur = cur.expect("(")
    touches, cur = fielders(cur)
    nodes = [Success(touch) for touch in touches]
    if cur.startswith("E"):
        node, cur = _error_node(cur)
        nodes.append(node)
    return BallPath(tuple(nodes)), _closing_paren(cur, "ball path")
