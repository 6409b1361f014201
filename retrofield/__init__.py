# -*- coding: utf-8 -*-
"""Retrofield: typed decoding of Retrosheet event fields."""

from .event import parse_event
from .exceptions import (
    LexError,
    ParseError,
    RecordError,
    RetrofieldException,
    StructuralError,
    TrailingInput,
    UnknownVariant,
)
from .locations import FieldLocation
from .pitches import Pitch, PitchModifier, PitchType, parse_pitches
from .types import (
    Advance,
    AdvanceFlag,
    Balk,
    BallPath,
    Base,
    CaughtStealing,
    ChargedError,
    DefensiveIndifference,
    Double,
    DoublePlay,
    Error,
    ErrorOnFoulFlyBall,
    Event,
    EventType,
    Fielder,
    FieldersChoice,
    FieldingError,
    GroundRuleDouble,
    HitByPitch,
    HitLocation,
    InsideTheParkHomeRun,
    Interference,
    InterferenceAt,
    Modifier,
    NonThrowingError,
    NoPlay,
    OtherAdvance,
    Out,
    PassedBall,
    Pickoff,
    RelayThrow,
    Runner,
    Single,
    SoloHomeRun,
    StolenBase,
    Strikeout,
    Success,
    Throw,
    ThrowingError,
    TriplePlay,
    Triple,
    UNKNOWN_FIELDER,
    Walk,
    WildPitch,
)

__version__ = "0.2.0"
