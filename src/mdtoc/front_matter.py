"""Read the group label from a document's front matter."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from mdtoc.config import FRONT_MATTER_DELIMITER, PART_KEY


def parse_part_label(lines: Iterable[str]) -> str:
    """Return the ``part:`` value of a leading front-matter block.

    Anything else (no block, block closed without ``part:``, unterminated
    block) yields an empty label.
    """
    for index, line in enumerate(lines):
        if index == 0:
            if not line.startswith(FRONT_MATTER_DELIMITER):
                return ""
            continue
        if line.startswith(PART_KEY):
            return line[len(PART_KEY) :].strip()
        if line.startswith(FRONT_MATTER_DELIMITER):
            return ""
    return ""


def read_part_label(path: Path, encoding: str = "utf-8-sig") -> str:
    """Open ``path`` and read its group label."""
    with path.open(encoding=encoding) as handle:
        return parse_part_label(handle)
