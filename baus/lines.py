"""Line input and output for the CLI."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

import typer

from ranking import trim_line_ending


class InputError(Exception):
    """Raised when the input stream cannot be read or decoded."""


def read_lines(stream: TextIO) -> list[str]:
    """Consume ``stream`` fully and return its lines without line endings.

    Raises:
        InputError: If the stream is not valid text or cannot be read
    """
    try:
        return [trim_line_ending(line) for line in stream]
    except (UnicodeDecodeError, OSError) as e:
        raise InputError(str(e)) from e


def write_lines(lines: Iterable[str]) -> None:
    for line in lines:
        typer.echo(line)
