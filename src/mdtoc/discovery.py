"""Locate candidate documents under a source root."""

from __future__ import annotations

from pathlib import Path


def find_documents(source_root: Path, *, extension: str, exclude: Path | None = None) -> list[Path]:
    """Return every file under ``source_root`` ending in ``extension``.

    The result is in traversal order; callers sort it.
    """
    excluded = exclude.resolve() if exclude is not None else None
    found: list[Path] = []
    for path in source_root.rglob(f"*{extension}"):
        if not path.is_file():
            continue
        if excluded is not None and path.resolve() == excluded:
            continue
        found.append(path)
    return found
