# -*- coding: utf-8 -*-
"""Grammar for the modifiers that follow the basic play.

Modifiers are normally introduced by ``/`` but may also be run together, as
in ``/G5`` (ground ball, to the third baseman). A hit location is tried
first since it is the only modifier that starts with a digit. The letter
codes are then tried longest first, so ``FL`` is a foul rather than a fly
followed by a line drive.
"""

import re
import typing

from . import types
from .cursor import Cursor, first_of, optional
from .exceptions import LexError, UnknownVariant
from .lexemes import base, field_location, fielder

_CODE = re.compile(r"[A-Z]+")


def hit_location(cur: Cursor) -> typing.Tuple[types.HitLocation, Cursor]:
    """Where the ball was hit, e.g. ``78XD``."""
    location, cur = field_location(cur)
    return types.HitLocation(location), cur


def charged_error(cur: Cursor) -> typing.Tuple[types.ChargedError, Cursor]:
    """``E`` and the fielder charged with an error on the play."""
    charged, cur = fielder(cur.expect("E"))
    return types.ChargedError(charged), cur


def relay_throw(cur: Cursor) -> typing.Tuple[types.RelayThrow, Cursor]:
    """``R`` and the fielder who relayed the throw."""
    thrower, cur = fielder(cur.expect("R"))
    return types.RelayThrow(thrower), cur


def throw(cur: Cursor) -> typing.Tuple[types.Throw, Cursor]:
    """``TH`` and, if written, the base thrown to."""
    target, cur = optional(cur.expect("TH"), base)
    return types.Throw(target), cur


def _flag(modifier: types.Modifier):
    """Grammar for a modifier written as its fixed code."""

    def parse(cur: Cursor):
        return modifier, cur.expect(modifier.value)

    parse.__name__ = modifier.name.lower()
    return parse


def _catalogue():
    """Letter-led modifiers, ordered by the length of their code."""
    coded = [(len(modifier.value), _flag(modifier)) for modifier in types.Modifier]
    coded += [(1, charged_error), (1, relay_throw), (2, throw)]
    coded.sort(key=lambda entry: -entry[0])
    return tuple(grammar for _, grammar in coded)


_MODIFIERS = (hit_location,) + _catalogue()


def modifier(cur: Cursor) -> typing.Tuple[types.EventModifier, Cursor]:
    """One modifier, with or without its leading slash.

    Args:
        cur: Cursor at the slash or at the modifier.

    Returns:
        The modifier and the cursor after it.

    Raises:
        UnknownVariant: If a run of capital letters is not a known code.
    """
    if cur.startswith("/"):
        cur = cur.advance()
    try:
        return first_of(cur, _MODIFIERS, "modifier")
    except LexError:
        code = cur.match(_CODE)
        if code is None:
            raise
        raise cur.error(
            UnknownVariant, f"Unknown modifier {code.group()!r}", ("modifier",)
        ) from None
