# -*- coding: utf-8 -*-
"""Exceptions raised by retrofield.

Nothing in this module imports from the rest of the package.
"""

import typing


class RetrofieldException(Exception):
    pass


class RecordError(RetrofieldException):
    """A play record line could not be split into its fields."""


class ParseError(RetrofieldException):
    """An event field could not be decoded.

    Attributes:
        text: The full event field being parsed.
        position: 0-based offset of the offending character.
        expected: Names of the alternatives that were acceptable there.
        reason: Short human readable description of the failure.
    """

    def __init__(
        self,
        reason: str,
        text: str,
        position: int,
        expected: typing.Sequence[str] = (),
    ):
        self.reason = reason
        self.text = text
        self.position = position
        self.expected = tuple(expected)
        super().__init__(self._message())

    @property
    def remaining(self) -> str:
        """The unconsumed suffix of the event field."""
        return self.text[self.position :]

    def _message(self) -> str:
        message = f"{self.reason} at offset {self.position} in {self.text!r}"
        if self.expected:
            message += f" (expected {', '.join(self.expected)})"
        return message


class LexError(ParseError):
    """No token of the expected kind starts at the position."""


class UnknownVariant(ParseError):
    """A token has the right shape but is not in its catalogue."""


class StructuralError(ParseError):
    """A required delimiter or runner annotation is missing or unmappable."""


class TrailingInput(ParseError):
    """The field parsed but characters were left over."""
