"""Scan Markdown text for heading lines and decompose them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

from mdtoc.config import HEADING_MARKER

logger = logging.getLogger(__name__)

_FENCE = "```"
_ANCHOR_OPEN = "{"
_ANCHOR_CLOSE = "}"


@dataclass(frozen=True)
class Heading:
    """A single parsed heading line."""

    level: int
    name: str
    anchor: str


def iter_heading_lines(lines: Iterable[str], *, skip_code_blocks: bool = False) -> Iterator[str]:
    """Yield only the lines that start with the heading marker.

    Trailing newlines are stripped. With ``skip_code_blocks`` set, lines
    inside fenced code blocks are ignored.
    """
    in_code_block = False
    for line in lines:
        line = line.rstrip("\r\n")
        if skip_code_blocks and line.startswith(_FENCE):
            in_code_block = not in_code_block
            continue
        if in_code_block:
            continue
        if line.startswith(HEADING_MARKER):
            yield line


def slugify(name: str) -> str:
    """Derive an anchor from a display name.

    Lower-cases, keeps letters, digits and ``-``, maps spaces to ``-``
    and drops everything else.
    """
    chars: list[str] = []
    for char in name.lower():
        if char == " ":
            chars.append("-")
        elif char == "-" or char.isalpha() or char.isdigit():
            chars.append(char)
    return "".join(chars)


def parse_heading(line: str) -> Heading:
    """Split a marker-prefixed line into level, display name and anchor.

    A line made only of markers yields an empty name; callers skip it.
    """
    body = line.lstrip(HEADING_MARKER)
    level = len(line) - len(body)

    open_at = body.find(_ANCHOR_OPEN)
    if open_at < 0:
        return Heading(level=level, name=body.strip(), anchor=slugify(body.strip()))

    name = body[:open_at].strip()
    token = body[open_at + 1 :]
    close_at = token.find(_ANCHOR_CLOSE)
    if close_at >= 0:
        token = token[:close_at]
    token = token.strip()
    if token.startswith(HEADING_MARKER):
        token = token[1:]
    return Heading(level=level, name=name, anchor=token or slugify(name))


def iter_headings(
    lines: Iterable[str],
    *,
    max_level: int,
    skip_code_blocks: bool = False,
) -> Iterator[Heading]:
    """Yield parsed headings up to ``max_level``, skipping empty ones."""
    for line in iter_heading_lines(lines, skip_code_blocks=skip_code_blocks):
        heading = parse_heading(line)
        if heading.level > max_level or not heading.name:
            logger.debug("Skipping heading %r", line)
            continue
        yield heading
