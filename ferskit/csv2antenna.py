"""Build an antenna description file from elevation and azimuth gain CSV data."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

logger = logging.getLogger(__name__)


class MalformedCsvError(ValueError):
    """Raised when a CSV line has no comma."""


def convert_csv(
    lines: Iterable[str],
    enclosing_tag: str = "gainsample",
    first_tag: str = "angle",
    second_tag: str = "gain",
) -> Iterator[str]:
    """Yield one XML block per ``first,second`` CSV line.

    Only the first comma splits a line; everything after it is the second value.
    """
    for line in lines:
        first, sep, second = line.partition(",")
        if not sep:
            raise MalformedCsvError(f"Malformed CSV line in input file {line}")
        second = second.removesuffix("\n")
        logger.debug("%s, %s", first, second)
        yield (
            f"\t<{enclosing_tag}>\n"
            f"\t\t<{first_tag}>{first}</{first_tag}><{second_tag}>{second}</{second_tag}>\n"
            f"\t</{enclosing_tag}>\n"
        )


def write_antenna(out: TextIO, elevation_lines: Iterable[str], azimuth_lines: Iterable[str]) -> None:
    """Write a complete antenna document from elevation and azimuth gain lines."""
    out.write("<antenna>\n<elevation>\n")
    out.writelines(convert_csv(elevation_lines))
    out.write("</elevation>\n<azimuth>\n")
    out.writelines(convert_csv(azimuth_lines))
    out.write("</azimuth>\n</antenna>\n")


def main(argv: list[str] | None = None) -> int:
    """Convert two gain CSV files into an antenna description file."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        print("Usage: csv2antenna <outfile> <elevation gains> <azimuth gains>", file=sys.stderr)
        return 2
    parser = argparse.Namespace(outfile=args[0], elevation=args[1], azimuth=args[2])
    try:
        with open(parser.elevation) as elevation, open(parser.azimuth) as azimuth:
            with open(parser.outfile, "w") as out:
                write_antenna(out, elevation, azimuth)
    except OSError as err:
        print(f"Could not open file: {err}", file=sys.stderr)
        return 2
    except MalformedCsvError as err:
        print(f"[ERROR] {err}", file=sys.stderr)
        return 1
    return 0