from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable

from termpic.errors import OutputWriteError
from termpic.terminal import CURSOR_HOME, ESC

FENCE = "```"


def strip_ansi(text: str) -> str:
    """Drop escape sequences: everything from ESC up to and including the next letter.

    Only meant for the sequences this package emits, not a general parser.
    """
    out = []
    in_escape = False
    for char in text:
        if char == ESC:
            in_escape = True
            continue
        if in_escape:
            if char.isascii() and char.isalpha():
                in_escape = False
            continue
        out.append(char)
    return "".join(out)


def format_output(lines: Iterable[str], markdown: bool = False) -> str:
    """Join lines for writing; markdown is fenced and never carries colour."""
    parts = []
    if markdown:
        parts.append(FENCE + "\n")
    for line in lines:
        if markdown:
            line = strip_ansi(line)
        parts.append(line + "\n")
    if markdown:
        parts.append(FENCE + "\n")
    return "".join(parts)


def write_output(lines: Iterable[str], markdown: bool = False, path: str | Path | None = None, stream=None) -> None:
    """Write a frame to ``path``, or to ``stream`` (stdout by default) when no path is given."""
    text = format_output(lines, markdown)
    try:
        if path is None:
            stream = stream if stream is not None else sys.stdout
            stream.write(text)
            stream.flush()
        else:
            Path(path).write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"Write failed: {e}") from e


def print_frame(lines: Iterable[str], stream=None, home: bool = False) -> None:
    """Print a frame to the terminal, optionally repainting from the top-left corner."""
    stream = stream if stream is not None else sys.stdout
    if home:
        stream.write(CURSOR_HOME)
    for line in lines:
        stream.write(line + "\n")
    stream.flush()
