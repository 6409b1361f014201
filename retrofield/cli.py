# -*- coding: utf-8 -*-
"""Command line interface to the event field decoder."""

import logging
import sys

import click

from .event import parse_event
from .exceptions import ParseError, RetrofieldException
from .reader import EventFileReader

_ASSUME_BATTER_HELP = (
    "Credit a putout with no runner annotation to the batter when the "
    "fielder implies no runner."
)


@click.group()
@click.option("-v", "--verbose", count=True, help="Log more, may be repeated.")
def main(verbose):
    """Decode Retrosheet event fields."""
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr
    )


@main.command()
@click.argument("fields", nargs=-1, required=True)
@click.option(
    "--assume-batter/--strict",
    default=True,
    envvar="RETROFIELD_ASSUME_BATTER",
    show_default=True,
    help=_ASSUME_BATTER_HELP,
)
def parse(fields, assume_batter):
    """Decode each FIELD and print its canonical text and structure."""
    failed = 0
    for field in fields:
        try:
            event = parse_event(field, assume_batter=assume_batter)
        except ParseError as exc:
            failed += 1
            click.secho(f"{field}: {exc}", fg="red", err=True)
            continue
        click.echo(f"{event}\t{event!r}")
    if failed:
        raise click.ClickException(
            f"{failed} of {len(fields)} fields could not be decoded"
        )


@main.command()
@click.argument("event_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-o",
    "--output",
    type=click.File("w"),
    default="-",
    help="Where to write the CSV, standard output by default.",
)
@click.option(
    "--assume-batter/--strict",
    default=True,
    envvar="RETROFIELD_ASSUME_BATTER",
    show_default=True,
    help=_ASSUME_BATTER_HELP,
)
@click.option(
    "--fail-fast",
    is_flag=True,
    help="Stop at the first play that cannot be decoded.",
)
def table(event_file, output, assume_batter, fail_fast):
    """Write one CSV row per play of EVENT_FILE."""
    reader = EventFileReader(
        event_file,
        assume_batter=assume_batter,
        errors="raise" if fail_fast else "skip",
    )
    try:
        frame = reader.data_frame()
    except RetrofieldException as exc:
        raise click.ClickException(str(exc))
    frame.to_csv(output, index=False)
