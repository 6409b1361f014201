# -*- coding: utf-8 -*-
"""Grammar for the basic play, the first part of an event field.

Many outcomes open with the same run of fielder digits (``63`` is an out,
``6E3`` an error, ``64(1)3`` a double play), and several codes are prefixes
of others (``D``/``DGR``/``DI``, ``H``/``HR``/``HP``, ``W``/``WP``). The
alternatives are therefore tried in a fixed order, and each one only counts
when it ends exactly where the outcome does: before a ``/``, a ``.`` or the
end of the field. A partial match is dropped and the next alternative starts
again from the same place.
"""

import typing

from . import types
from .cursor import Cursor, first_of, outcome
from .exceptions import StructuralError
from .lexemes import (
    ball_path,
    base,
    fielder,
    fielder_run,
    fielders,
    parenthesised_runner,
)

Parsed = typing.Tuple[types.EventType, Cursor]


def _putout(cur: Cursor, runner_required: bool):
    """A run of fielders ending in a putout, with its runner annotation.

    The runner is None when the annotation is optional and absent.
    """
    assisting, credited, cur = fielder_run(cur)
    runner = None
    if runner_required or cur.startswith("("):
        runner, cur = parenthesised_runner(cur)
    return assisting, credited, runner, cur


def _implied_runner(cur: Cursor, credited: types.Fielder) -> types.Runner:
    """The runner a putout by the fielder implies when none is written."""
    runner = types.Runner.from_fielder(credited)
    if runner is not None:
        return runner
    if cur.assume_batter:
        return types.Runner.BATTER
    raise cur.error(
        StructuralError,
        f"A putout by fielder {credited} needs an explicit runner",
        ("runner annotation",),
    )


def _putouts(cur: Cursor, count: int):
    """``count`` putout groups; all but the last must name their runner."""
    assisting, credited, runners = [], [], []
    for i in range(count):
        last = i == count - 1
        group_assisting, group_credited, runner, cur = _putout(cur, not last)
        if runner is None:
            runner = _implied_runner(cur, group_credited)
        assisting.extend(group_assisting)
        credited.append(group_credited)
        runners.append(runner)
    return tuple(assisting), tuple(credited), tuple(runners), cur


def out(cur: Cursor) -> Parsed:
    """A single putout, e.g. ``63`` or ``8(B)``.

    Args:
        cur: Cursor at the first fielder.

    Returns:
        An Out and the cursor after it.
    """
    assisting, credited, runners, cur = _putouts(cur, 1)
    return types.Out(credited[0], assisting, runners[0]), cur


def double_play(cur: Cursor) -> Parsed:
    """Two putouts, the first with its runner, e.g. ``64(1)3``."""
    assisting, credited, runners, cur = _putouts(cur, 2)
    return types.DoublePlay(credited, assisting, runners), cur


def triple_play(cur: Cursor) -> Parsed:
    """Three putouts, the first two with their runners."""
    assisting, credited, runners, cur = _putouts(cur, 3)
    return types.TriplePlay(credited, assisting, runners), cur


def _coded(event_class) -> typing.Callable[[Cursor], Parsed]:
    """Grammar for an outcome written as a fixed code."""

    def parse(cur: Cursor) -> Parsed:
        return event_class(), cur.expect(event_class.code)

    parse.__name__ = event_class.__name__.lower()
    return parse


def _hit(event_class) -> typing.Callable[[Cursor], Parsed]:
    """Grammar for S, D and T followed by the fielders that handled the ball."""

    def parse(cur: Cursor) -> Parsed:
        found, cur = fielders(cur.expect(event_class.code))
        if not found:
            return event_class(), cur
        return event_class(found[-1], found[:-1]), cur

    parse.__name__ = event_class.__name__.lower()
    return parse


interference = _coded(types.Interference)
single = _hit(types.Single)
ground_rule_double = _coded(types.GroundRuleDouble)
double = _hit(types.Double)
triple = _hit(types.Triple)
hit_by_pitch = _coded(types.HitByPitch)
no_play = _coded(types.NoPlay)
balk = _coded(types.Balk)
defensive_indifference = _coded(types.DefensiveIndifference)
other_advance = _coded(types.OtherAdvance)
passed_ball = _coded(types.PassedBall)
wild_pitch = _coded(types.WildPitch)


def error(cur: Cursor) -> Parsed:
    """An error, optionally after the fielders who handled the ball first.

    Args:
        cur: Cursor at the first fielder or at ``E``.

    Returns:
        An Error crediting the fielder after ``E``, and the cursor after it.
    """
    assisting, cur = fielders(cur)
    credited, cur = fielder(cur.expect("E"))
    return types.Error(credited, assisting), cur


def fielders_choice(cur: Cursor) -> Parsed:
    """``FC`` and the fielder who made the choice."""
    credited, cur = fielder(cur.expect("FC"))
    return types.FieldersChoice(credited), cur


def error_on_foul_fly_ball(cur: Cursor) -> Parsed:
    """``FLE`` and the fielder who dropped the foul fly."""
    credited, cur = fielder(cur.expect("FLE"))
    return types.ErrorOnFoulFlyBall(credited), cur


def solo_home_run(cur: Cursor) -> Parsed:
    """``HR`` or ``H`` with no fielder after it."""
    _, cur = cur.expect_any(("HR", "H"))
    return types.SoloHomeRun(), cur


def inside_the_park_home_run(cur: Cursor) -> Parsed:
    """``H`` or ``HR`` followed by the fielder who chased the ball."""
    _, cur = cur.expect_any(("HR", "H"))
    credited, cur = fielder(cur)
    return types.InsideTheParkHomeRun(credited), cur


def caught_stealing(cur: Cursor) -> Parsed:
    """Caught stealing, e.g. ``CS2(24)``.

    Args:
        cur: Cursor at ``CS``.

    Returns:
        A CaughtStealing with the base and ball path, and the cursor after it.
    """
    target, cur = base(cur.expect("CS"))
    path, cur = ball_path(cur)
    return types.CaughtStealing(target, path), cur


def pickoff(cur: Cursor) -> Parsed:
    """Pickoff, or pickoff caught stealing, e.g. ``PO1(13)``, ``POCS2(14)``."""
    code, cur = cur.expect_any(("POCS", "PO"))
    target, cur = base(cur)
    path, cur = ball_path(cur)
    return types.Pickoff(code == "POCS", target, path), cur


def stolen_base(cur: Cursor) -> Parsed:
    """One or more steals, e.g. ``SB2`` or ``SB3;SB2``."""
    stolen, cur = base(cur.expect("SB"))
    bases = [stolen]
    while cur.startswith(";SB"):
        at = cur.advance(3)
        stolen, cur = base(at)
        if stolen in bases:
            raise at.error(StructuralError, f"Base {stolen} is stolen twice")
        bases.append(stolen)
    return types.StolenBase(tuple(sorted(bases, key=lambda b: b.number))), cur


def _base_running_event(cur: Cursor):
    """The optional ``+`` play that follows a strikeout or walk."""
    if not cur.startswith("+"):
        return None, cur
    return first_of(cur.advance(), _BASE_RUNNING_EVENTS, "base running event")


def strikeout(cur: Cursor) -> Parsed:
    """``K``, the fielders who completed it and an optional ``+`` play."""
    touches, cur = fielders(cur.expect("K"))
    path = types.BallPath(tuple(types.Success(touch) for touch in touches))
    following, cur = _base_running_event(cur)
    return types.Strikeout(path, following), cur


def walk(cur: Cursor) -> Parsed:
    """``W``, or ``I``/``IW`` for an intentional walk, and an optional ``+`` play."""
    code, cur = cur.expect_any(("IW", "I", "W"))
    following, cur = _base_running_event(cur)
    return types.Walk(code.startswith("I"), following), cur


_BASE_RUNNING_EVENTS = tuple(
    outcome(grammar)
    for grammar in (
        stolen_base,
        caught_stealing,
        other_advance,
        pickoff,
        passed_ball,
        wild_pitch,
        defensive_indifference,
        error,
    )
)

# Priority order matters: earlier alternatives win whenever several of them
# could consume the same outcome.
_EVENT_TYPES = tuple(
    outcome(grammar)
    for grammar in (
        out,
        double_play,
        triple_play,
        interference,
        single,
        ground_rule_double,
        double,
        triple,
        error,
        fielders_choice,
        error_on_foul_fly_ball,
        solo_home_run,
        inside_the_park_home_run,
        hit_by_pitch,
        strikeout,
        no_play,
        walk,
        balk,
        caught_stealing,
        defensive_indifference,
        other_advance,
        passed_ball,
        wild_pitch,
        pickoff,
        stolen_base,
    )
)


def event_type(cur: Cursor) -> Parsed:
    """Parse the basic play at the cursor."""
    return first_of(cur, _EVENT_TYPES, "event type")
