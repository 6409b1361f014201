# -*- coding: utf-8 -*-
"""Assemble a whole event field from its three parts.

    event := event-type modifier* ("." advance (";" advance)*)?

For example ``S8/G4M.2-H;1-3`` is a single fielded by the center fielder
(``S8``), a ground ball through the middle (``/G4M``), and two advances.
"""

from .advances import advances as advance_list
from .cursor import Cursor
from .event_type import event_type
from .exceptions import TrailingInput
from .modifiers import modifier
from .types import Event


def parse_event(text: str, assume_batter: bool = False) -> Event:
    """Decode an event field.

    Args:
        text: The event field, e.g. ``"64(1)3/GDP.2-3"``.
        assume_batter: When a putout has no runner annotation and the
            fielder implies no runner (``8/F78``), credit the out to the
            batter instead of raising a StructuralError.

    Returns:
        The decoded Event.

    Raises:
        ParseError: One of its subclasses, carrying the offset at which the
            field stopped making sense.
    """
    cur = Cursor(text, 0, assume_batter)
    basic_play, cur = event_type(cur)
    modifiers = []
    while not cur.at_end and cur.peek() != ".":
        found, cur = modifier(cur)
        modifiers.append(found)
    advances = ()
    if cur.peek() == ".":
        advances, cur = advance_list(cur)
    if not cur.at_end:
        raise cur.error(
            TrailingInput, f"Unexpected {cur.remaining!r}", ("';'", "end of field")
        )
    return Event(basic_play, tuple(modifiers), advances)
