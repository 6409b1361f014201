# -*- coding: utf-8 -*-
"""Typed representation of a decoded event field.

Every value here is immutable and renders back to canonical event text with
``str()``. Feeding that text to ``retrofield.parse_event`` yields an equal
value.
"""

import dataclasses
import enum
import typing

from .locations import FieldLocation


def _freeze(obj, *names: str):
    """Store the named sequence attributes of a frozen dataclass as tuples."""
    for name in names:
        object.__setattr__(obj, name, tuple(getattr(obj, name)))


@dataclasses.dataclass(frozen=True)
class Fielder:
    """A defensive position, 1 (pitcher) through 9 (right field).

    A number of None is the unknown fielder, written ``U``.
    """

    number: typing.Optional[int] = None

    def __post_init__(self):
        if self.number is not None and not 1 <= self.number <= 9:
            raise ValueError(f"Fielder number must be 1-9, got {self.number}")

    @classmethod
    def parse(cls, code: str) -> "Fielder":
        if code == "U":
            return cls()
        if len(code) == 1 and code in "123456789":
            return cls(int(code))
        raise ValueError(f"Not a fielder code: {code!r}")

    @property
    def is_known(self) -> bool:
        return self.number is not None

    def __str__(self) -> str:
        return "U" if self.number is None else str(self.number)


UNKNOWN_FIELDER = Fielder()


class Base(enum.Enum):
    FIRST = "1"
    SECOND = "2"
    THIRD = "3"
    HOME = "H"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, code: str) -> "Base":
        try:
            return _BASE_CODES[code]
        except KeyError:
            raise ValueError(f"Not a base code: {code!r}") from None

    @property
    def number(self) -> int:
        """1 through 4, home being 4."""
        return _BASE_NUMBERS[self]


_BASE_CODES = {
    "1": Base.FIRST,
    "2": Base.SECOND,
    "3": Base.THIRD,
    "H": Base.HOME,
    "B": Base.HOME,
}
_BASE_NUMBERS = {Base.FIRST: 1, Base.SECOND: 2, Base.THIRD: 3, Base.HOME: 4}


class Runner(enum.Enum):
    BATTER = "B"
    FIRST = "1"
    SECOND = "2"
    THIRD = "3"

    def __str__(self) -> str:
        return self.value

    @property
    def index(self) -> int:
        """0 for the batter, otherwise the base the runner started on."""
        return 0 if self is Runner.BATTER else int(self.value)

    @staticmethod
    def from_fielder(fielder: Fielder) -> typing.Optional["Runner"]:
        """The runner implied by a putout at the base the fielder covers.

        Only the first, second and third basemen have a mapping; every other
        fielder returns None.
        """
        return _RUNNER_BY_FIELDER.get(fielder.number)


_RUNNER_BY_FIELDER = {3: Runner.THIRD, 4: Runner.SECOND, 5: Runner.FIRST}


@dataclasses.dataclass(frozen=True)
class NonThrowingError:
    def __str__(self) -> str:
        return ""


@dataclasses.dataclass(frozen=True)
class ThrowingError:
    base: typing.Optional[Base] = None

    def __str__(self) -> str:
        return "/TH" if self.base is None else f"/TH{self.base}"


FieldingErrorType = typing.Union[NonThrowingError, ThrowingError]


@dataclasses.dataclass(frozen=True)
class Success:
    fielder: Fielder

    def __str__(self) -> str:
        return str(self.fielder)


@dataclasses.dataclass(frozen=True)
class FieldingError:
    fielder: Fielder
    error_type: FieldingErrorType = NonThrowingError()

    def __str__(self) -> str:
        return f"E{self.fielder}{self.error_type}"


BallPathNode = typing.Union[Success, FieldingError]


@dataclasses.dataclass(frozen=True)
class BallPath:
    """A fielding sequence: clean touches, optionally ending in one error."""

    nodes: typing.Tuple[BallPathNode, ...] = ()

    def __post_init__(self):
        _freeze(self, "nodes")
        for node in self.nodes[:-1]:
            if isinstance(node, FieldingError):
                raise ValueError("An error must be the last node of a ball path")

    def __iter__(self):
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def body(self) -> str:
        """The nodes without the surrounding parentheses."""
        return "".join(str(node) for node in self.nodes)

    @property
    def error(self) -> typing.Optional[FieldingError]:
        if self.nodes and isinstance(self.nodes[-1], FieldingError):
            return self.nodes[-1]
        return None

    def __str__(self) -> str:
        return f"({self.body})"


def _fielder_text(fielders: typing.Iterable[Fielder]) -> str:
    return "".join(str(fielder) for fielder in fielders)


def _putout_group(
    assisting: typing.Iterable[Fielder],
    credited: Fielder,
    runner: Runner,
    explicit: bool,
) -> str:
    text = _fielder_text(assisting) + str(credited)
    if explicit or Runner.from_fielder(credited) != runner:
        text += f"({runner})"
    return text


class EventType:
    """Base class of the basic play outcomes."""


@dataclasses.dataclass(frozen=True)
class _Coded(EventType):
    """An outcome with no parameters, fully described by its code."""

    code: typing.ClassVar[str] = ""

    def __str__(self) -> str:
        return self.code


@dataclasses.dataclass(frozen=True)
class Out(EventType):
    credited_fielder: Fielder
    assisting_fielders: typing.Tuple[Fielder, ...]
    runner_out: Runner

    def __post_init__(self):
        _freeze(self, "assisting_fielders")

    def __str__(self) -> str:
        return _putout_group(
            self.assisting_fielders, self.credited_fielder, self.runner_out, False
        )


@dataclasses.dataclass(frozen=True)
class _MultiplePlay(EventType):
    outs: typing.ClassVar[int] = 0

    credited_fielders: typing.Tuple[Fielder, ...]
    assisting_fielders: typing.Tuple[Fielder, ...]
    runners_out: typing.Tuple[Runner, ...]

    def __post_init__(self):
        _freeze(self, "credited_fielders", "assisting_fielders", "runners_out")
        if len(self.credited_fielders) != self.outs:
            raise ValueError(f"Expected {self.outs} credited fielders")
        if len(self.runners_out) != self.outs:
            raise ValueError(f"Expected {self.outs} runners out")

    def __str__(self) -> str:
        # Only the concatenation of the assisting fielders is kept, so they
        # are all written in front of the first putout.
        groups = []
        last = self.outs - 1
        for i, (credited, runner) in enumerate(
            zip(self.credited_fielders, self.runners_out)
        ):
            assisting = self.assisting_fielders if i == 0 else ()
            groups.append(_putout_group(assisting, credited, runner, i < last))
        return "".join(groups)


@dataclasses.dataclass(frozen=True)
class DoublePlay(_MultiplePlay):
    outs: typing.ClassVar[int] = 2


@dataclasses.dataclass(frozen=True)
class TriplePlay(_MultiplePlay):
    outs: typing.ClassVar[int] = 3


@dataclasses.dataclass(frozen=True)
class Interference(_Coded):
    code: typing.ClassVar[str] = "C"


@dataclasses.dataclass(frozen=True)
class _Hit(EventType):
    code: typing.ClassVar[str] = ""

    credited_fielder: Fielder = UNKNOWN_FIELDER
    assisting_fielders: typing.Tuple[Fielder, ...] = ()

    def __post_init__(self):
        _freeze(self, "assisting_fielders")

    def __str__(self) -> str:
        if not self.assisting_fielders and not self.credited_fielder.is_known:
            return self.code
        return self.code + _fielder_text(self.assisting_fielders) + str(
            self.credited_fielder
        )


@dataclasses.dataclass(frozen=True)
class Single(_Hit):
    code: typing.ClassVar[str] = "S"


@dataclasses.dataclass(frozen=True)
class Double(_Hit):
    code: typing.ClassVar[str] = "D"


@dataclasses.dataclass(frozen=True)
class Triple(_Hit):
    code: typing.ClassVar[str] = "T"


@dataclasses.dataclass(frozen=True)
class GroundRuleDouble(_Coded):
    code: typing.ClassVar[str] = "DGR"


@dataclasses.dataclass(frozen=True)
class Error(EventType):
    credited_fielder: Fielder
    assisting_fielders: typing.Tuple[Fielder, ...] = ()

    def __post_init__(self):
        _freeze(self, "assisting_fielders")

    def __str__(self) -> str:
        return f"{_fielder_text(self.assisting_fielders)}E{self.credited_fielder}"


@dataclasses.dataclass(frozen=True)
class FieldersChoice(EventType):
    credited_fielder: Fielder

    def __str__(self) -> str:
        return f"FC{self.credited_fielder}"


@dataclasses.dataclass(frozen=True)
class ErrorOnFoulFlyBall(EventType):
    credited_fielder: Fielder

    def __str__(self) -> str:
        return f"FLE{self.credited_fielder}"


@dataclasses.dataclass(frozen=True)
class SoloHomeRun(_Coded):
    code: typing.ClassVar[str] = "HR"


@dataclasses.dataclass(frozen=True)
class InsideTheParkHomeRun(EventType):
    credited_fielder: Fielder

    def __str__(self) -> str:
        return f"H{self.credited_fielder}"


@dataclasses.dataclass(frozen=True)
class HitByPitch(_Coded):
    code: typing.ClassVar[str] = "HP"


@dataclasses.dataclass(frozen=True)
class Strikeout(EventType):
    """A strikeout, optionally fielded (``K23``) and optionally followed by
    a base running play on the same pitch (``K+SB2``)."""

    ball_path: BallPath = BallPath()
    base_running_event: typing.Optional[EventType] = None

    def __post_init__(self):
        if self.ball_path.error is not None:
            raise ValueError("A strikeout ball path holds clean touches only")

    def __str__(self) -> str:
        text = "K" + self.ball_path.body
        if self.base_running_event is not None:
            text += f"+{self.base_running_event}"
        return text


@dataclasses.dataclass(frozen=True)
class NoPlay(_Coded):
    code: typing.ClassVar[str] = "NP"


@dataclasses.dataclass(frozen=True)
class Walk(EventType):
    intentional: bool = False
    base_running_event: typing.Optional[EventType] = None

    def __str__(self) -> str:
        text = "IW" if self.intentional else "W"
        if self.base_running_event is not None:
            text += f"+{self.base_running_event}"
        return text


@dataclasses.dataclass(frozen=True)
class Balk(_Coded):
    code: typing.ClassVar[str] = "BK"


@dataclasses.dataclass(frozen=True)
class CaughtStealing(EventType):
    base: Base
    ball_path: BallPath

    def __str__(self) -> str:
        return f"CS{self.base}{self.ball_path}"


@dataclasses.dataclass(frozen=True)
class DefensiveIndifference(_Coded):
    code: typing.ClassVar[str] = "DI"


@dataclasses.dataclass(frozen=True)
class OtherAdvance(_Coded):
    code: typing.ClassVar[str] = "OA"


@dataclasses.dataclass(frozen=True)
class PassedBall(_Coded):
    code: typing.ClassVar[str] = "PB"


@dataclasses.dataclass(frozen=True)
class WildPitch(_Coded):
    code: typing.ClassVar[str] = "WP"


@dataclasses.dataclass(frozen=True)
class Pickoff(EventType):
    caught_stealing: bool
    base: Base
    ball_path: BallPath

    def __str__(self) -> str:
        code = "POCS" if self.caught_stealing else "PO"
        return f"{code}{self.base}{self.ball_path}"


@dataclasses.dataclass(frozen=True)
class StolenBase(EventType):
    """One or more steals on the same play, ordered by base."""

    bases: typing.Tuple[Base, ...]

    def __post_init__(self):
        _freeze(self, "bases")
        if not self.bases:
            raise ValueError("A stolen base needs at least one base")
        numbers = [base.number for base in self.bases]
        if any(a >= b for a, b in zip(numbers, numbers[1:])):
            raise ValueError("Stolen bases must be strictly increasing")

    def __str__(self) -> str:
        return ";".join(f"SB{base}" for base in self.bases)


class Modifier(enum.Enum):
    """Modifiers that are fully described by their code."""

    APPEAL_PLAY = "AP"
    POP_UP_BUNT = "BP"
    GROUND_BALL_BUNT = "BG"
    BUNT_GROUNDED_INTO_DOUBLE_PLAY = "BGDP"
    BATTER_INTERFERENCE = "BINT"
    LINE_DRIVE_BUNT = "BL"
    BATTING_OUT_OF_TURN = "BOOT"
    BUNT_POPPED_INTO_DOUBLE_PLAY = "BPDP"
    RUNNER_HIT_BY_BATTED_BALL = "BR"
    CALLED_THIRD_STRIKE = "C"
    COURTESY_BATTER = "COUB"
    COURTESY_FIELDER = "COUF"
    COURTESY_RUNNER = "COUR"
    DOUBLE_PLAY = "DP"
    FLY = "F"
    FLY_BALL_DOUBLE_PLAY = "FDP"
    FAN_INTERFERENCE = "FINT"
    FOUL = "FL"
    FORCE_OUT = "FO"
    GROUND_BALL = "G"
    GROUND_BALL_DOUBLE_PLAY = "GDP"
    GROUND_BALL_TRIPLE_PLAY = "GTP"
    INFIELD_FLY_RULE = "IF"
    INTERFERENCE = "INT"
    INSIDE_THE_PARK_HOME_RUN = "IPHR"
    LINE_DRIVE = "L"
    LINED_INTO_DOUBLE_PLAY = "LDP"
    LINED_INTO_TRIPLE_PLAY = "LTP"
    MANAGER_CHALLENGE = "MREV"
    NO_DOUBLE_PLAY = "NDP"
    OBSTRUCTION = "OBS"
    POP_FLY = "P"
    RUNNER_PASSED_RUNNER = "PR"
    RUNNER_INTERFERENCE = "RINT"
    SACRIFICE_FLY = "SF"
    SACRIFICE_HIT = "SH"
    TRIPLE_PLAY = "TP"
    UMPIRE_INTERFERENCE = "UINT"
    UMPIRE_REVIEW = "UREV"

    def __str__(self) -> str:
        return self.value


@dataclasses.dataclass(frozen=True)
class ChargedError:
    """An error charged to a fielder on the play (``E4``)."""

    fielder: Fielder

    def __str__(self) -> str:
        return f"E{self.fielder}"


@dataclasses.dataclass(frozen=True)
class RelayThrow:
    """A relay throw from the fielder that did not produce an out (``R6``)."""

    fielder: Fielder

    def __str__(self) -> str:
        return f"R{self.fielder}"


@dataclasses.dataclass(frozen=True)
class Throw:
    base: typing.Optional[Base] = None

    def __str__(self) -> str:
        return "TH" if self.base is None else f"TH{self.base}"


@dataclasses.dataclass(frozen=True)
class HitLocation:
    location: FieldLocation

    def __str__(self) -> str:
        return str(self.location)


EventModifier = typing.Union[Modifier, ChargedError, RelayThrow, Throw, HitLocation]


class AdvanceFlag(enum.Enum):
    UNEARNED = "UR"
    TEAM_UNEARNED = "TUR"
    RBI = "RBI"
    NO_RBI = "NR"
    WILD_PITCH = "WP"
    PASSED_BALL = "PB"

    def __str__(self) -> str:
        return f"({self.value})"


@dataclasses.dataclass(frozen=True)
class InterferenceAt:
    """Interference by the fielder at the location (``(2/INT)``)."""

    location: FieldLocation

    def __str__(self) -> str:
        return f"({self.location}/INT)"


AdvanceParameter = typing.Union[BallPath, AdvanceFlag, InterferenceAt]


@dataclasses.dataclass(frozen=True)
class Advance:
    """A runner moving from one base towards another.

    Attributes:
        starting_base: Base the runner started from, HOME for the batter.
        ending_base: Base the runner reached or was put out at.
        out: True if the runner was put out attempting the advance.
        parameters: Parenthesised qualifiers in order of appearance.
    """

    starting_base: Base
    ending_base: Base
    out: bool = False
    parameters: typing.Tuple[AdvanceParameter, ...] = ()

    def __post_init__(self):
        _freeze(self, "parameters")

    @property
    def runner(self) -> Runner:
        if self.starting_base is Base.HOME:
            return Runner.BATTER
        return Runner(self.starting_base.value)

    def __str__(self) -> str:
        start = "B" if self.starting_base is Base.HOME else str(self.starting_base)
        separator = "X" if self.out else "-"
        params = "".join(str(param) for param in self.parameters)
        return f"{start}{separator}{self.ending_base}{params}"


@dataclasses.dataclass(frozen=True)
class Event:
    event_type: EventType
    modifiers: typing.Tuple[EventModifier, ...] = ()
    advances: typing.Tuple[Advance, ...] = ()

    def __post_init__(self):
        _freeze(self, "modifiers", "advances")

    def __str__(self) -> str:
        text = str(self.event_type)
        text += "".join(f"/{modifier}" for modifier in self.modifiers)
        if self.advances:
            text += "." + ";".join(str(advance) for advance in self.advances)
        return text
