"""Random clutter platform generators producing simulation include blocks."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TextIO, TypeVar

_T = TypeVar("_T")

_FIXED_ROTATION = (
    "<fixedrotation><startazimuth>0.0</startazimuth><startelevation>0.0</startelevation>"
    "<azimuthrate>0</azimuthrate><elevationrate>0</elevationrate></fixedrotation>\n"
)


def _num(value: float) -> str:
    """Format a number the way a default text stream does (six significant digits)."""
    return f"{value:g}"


def _platform(x0: float, y0: float, x1: float, y1: float, end_time: float, rcs: float) -> str:
    return (
        '<platform name="clutter">\n'
        '<motionpath interpolation="cubic">\n'
        f"<positionwaypoint>\n<x>{_num(x0)}</x>\n<y>{_num(y0)}</y>\n"
        "<altitude>0</altitude>\n<time>0</time>\n</positionwaypoint>\n"
        f"<positionwaypoint>\n<x>{_num(x1)}</x>\n<y>{_num(y1)}</y>\n"
        f"<altitude>0</altitude>\n<time>{_num(end_time)}</time>\n</positionwaypoint>\n"
        "</motionpath>\n"
        f"{_FIXED_ROTATION}"
        '<target name="wings">\n<rcs type="isotropic">\n<value>'
        f"{_num(rcs)}"
        "</value>\n</rcs>\n</target>\n</platform>\n\n"
    )


def generate_clutter(
    samples: int,
    start_range: float,
    span: float,
    rcs: float,
    spread: float,
    end_time: float = 0.0,
    rng: random.Random | None = None,
) -> str:
    """Return an include block of ``samples`` clutter platforms placed along the x axis.

    Each platform starts uniformly in ``[start_range, start_range + span]`` and drifts
    by ``end_time`` times a Gaussian draw with standard deviation ``spread``.
    """
    rng = rng if rng is not None else random.Random()
    parts = ["<incblock>"]
    for _ in range(samples):
        pos = rng.uniform(start_range, start_range + span)
        drift = end_time * rng.gauss(0.0, spread)
        parts.append(_platform(pos, 0.0, pos + drift, 0.0, end_time, rcs))
    parts.append("</incblock>")
    return "".join(parts)


def generate_clutter_2d(
    samples: int,
    start_x: float,
    span_x: float,
    start_y: float,
    span_y: float,
    rcs: float,
    spread: float,
    end_time: float = 0.0,
    rng: random.Random | None = None,
) -> str:
    """Return an include block of ``samples`` clutter platforms scattered over a rectangle."""
    rng = rng if rng is not None else random.Random()
    parts = ["<incblock>"]
    for _ in range(samples):
        pos_x = rng.uniform(start_x, start_x + span_x)
        pos_y = rng.uniform(start_y, start_y + span_y)
        end_x = pos_x + end_time * rng.gauss(0.0, spread)
        end_y = pos_y + end_time * rng.gauss(0.0, spread)
        parts.append(_platform(pos_x, pos_y, end_x, end_y, end_time, rcs))
    parts.append("</incblock>")
    return "".join(parts)


class _InputError(Exception):
    pass


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask(prompt: str, tokens: Iterator[str], convert: Callable[[str], _T]) -> _T:
    print(prompt, end="", flush=True)
    try:
        token = next(tokens)
    except StopIteration:
        raise _InputError("unexpected end of input") from None
    try:
        return convert(token)
    except ValueError:
        raise _InputError(f"invalid value: {token!r}") from None


def main(argv: list[str] | None = None) -> int:
    """Ask for clutter parameters on standard input and write the block to a file."""
    parser = argparse.ArgumentParser(prog="cluttergen", description="Generate clutter platforms.")
    parser.add_argument("--2d", dest="two_d", action="store_true", help="scatter over x and y")
    args = parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    try:
        samples = _ask("Number of clutter samples: ", tokens, int)
        if args.two_d:
            start_x = _ask("Start range x: ", tokens, float)
            span_x = _ask("Range x: ", tokens, float)
            start_y = _ask("Start range y: ", tokens, float)
            span_y = _ask("Range y: ", tokens, float)
        else:
            start_x = _ask("Start range: ", tokens, float)
            span_x = _ask("Range: ", tokens, float)
        rcs = _ask("RCS: ", tokens, float)
        spread = _ask("Stdev of spreading: ", tokens, float)
        end_time = _ask("Simulation end time: ", tokens, float) if spread != 0 else 0.0
        filename = _ask("Filename: ", tokens, str)
    except _InputError as err:
        print(f"\nerror: {err}", file=sys.stderr)
        return 1

    if args.two_d:
        text = generate_clutter_2d(samples, start_x, span_x, start_y, span_y, rcs, spread, end_time)
    else:
        text = generate_clutter(samples, start_x, span_x, rcs, spread, end_time)

    try:
        Path(filename).write_text(text)
    except OSError as err:
        print(f"\nerror: could not write {filename}: {err}", file=sys.stderr)
        return 1
    return 0