# -*- coding: utf-8 -*-
"""Cursor and combinators shared by the event field grammars.

Every grammar function takes a Cursor and returns ``(value, cursor)`` with
the cursor moved past what it consumed, or raises a ParseError. Cursors are
immutable, so a failed alternative leaves nothing to undo and the next
alternative starts from the same cursor.
"""

import dataclasses
import re
import typing

from .exceptions import LexError, ParseError

T = typing.TypeVar("T")
Grammar = typing.Callable[["Cursor"], typing.Tuple[T, "Cursor"]]

# Characters that may follow a complete outcome.
_OUTCOME_END = "/."


@dataclasses.dataclass(frozen=True)
class Cursor:
    """A position in an event field.

    Attributes:
        text: The whole event field.
        pos: Offset of the next unconsumed character.
        assume_batter: Treat an unannotated putout that implies no runner as
            a putout of the batter instead of failing.
    """

    text: str
    pos: int = 0
    assume_batter: bool = False

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    @property
    def remaining(self) -> str:
        return self.text[self.pos :]

    def peek(self) -> str:
        """The next character, or an empty string at the end."""
        return self.text[self.pos : self.pos + 1]

    def startswith(self, literal: str) -> bool:
        return self.text.startswith(literal, self.pos)

    def advance(self, count: int = 1) -> "Cursor":
        """A cursor count characters further on."""
        return dataclasses.replace(self, pos=self.pos + count)

    def at(self, pos: int) -> "Cursor":
        """A cursor at an absolute offset in the same text."""
        return dataclasses.replace(self, pos=pos)

    def match(self, pattern: re.Pattern) -> typing.Optional[re.Match]:
        """Match the pattern at the cursor without moving it."""
        return pattern.match(self.text, self.pos)

    def error(
        self,
        kind: typing.Type[ParseError],
        reason: str,
        expected: typing.Sequence[str] = (),
    ) -> ParseError:
        """Build an error of the given kind at the cursor.

        Args:
            kind: The ParseError subclass to build.
            reason: Short description of the failure.
            expected: Names of what would have been accepted here.

        Returns:
            The error, for the caller to raise.
        """
        return kind(reason, self.text, self.pos, expected)

    def expect(self, literal: str) -> "Cursor":
        """Consume a literal or raise a LexError."""
        if not self.startswith(literal):
            raise self.error(LexError, f"Expected {literal!r}", (repr(literal),))
        return self.advance(len(literal))

    def expect_any(self, literals: typing.Sequence[str]) -> typing.Tuple[str, "Cursor"]:
        """Consume the first of the literals that matches."""
        for literal in literals:
            if self.startswith(literal):
                return literal, self.advance(len(literal))
        raise self.error(
            LexError, "No literal matches", tuple(repr(lit) for lit in literals)
        )


def first_of(
    cur: Cursor, alternatives: typing.Sequence[Grammar], label: str
) -> typing.Tuple[typing.Any, Cursor]:
    """Return the result of the first alternative that parses.

    When all of them fail, the error that got furthest into the text is
    raised, the earliest alternative winning ties. If that is a LexError at
    the starting position nothing matched at all, and a LexError naming the
    whole choice is raised instead.
    """
    furthest = None
    for alternative in alternatives:
        try:
            return alternative(cur)
        except ParseError as exc:
            if furthest is None or exc.position > furthest.position:
                furthest = exc
    if furthest is None or (
        isinstance(furthest, LexError) and furthest.position <= cur.pos
    ):
        raise cur.error(LexError, f"No {label} matches", (label,))
    raise furthest


def optional(cur: Cursor, grammar: Grammar) -> typing.Tuple[typing.Any, Cursor]:
    """Parse with the grammar if possible, otherwise return None in place."""
    try:
        return grammar(cur)
    except ParseError:
        return None, cur


def outcome(grammar: Grammar) -> Grammar:
    """Wrap an outcome grammar so it only succeeds on a whole outcome token."""

    def parse(cur: Cursor):
        value, after = grammar(cur)
        if not after.at_end and after.peek() not in _OUTCOME_END:
            raise after.error(
                LexError,
                "Unexpected character after outcome",
                ("'/'", "'.'", "end of field"),
            )
        return value, after

    parse.__name__ = grammar.__name__
    return parse
