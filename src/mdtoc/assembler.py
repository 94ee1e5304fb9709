"""Assemble per-document topic trees into the grouped navigation tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from mdtoc.config import (
    MDTOC_DOC_EXTENSION,
    MDTOC_INDEX_NAME,
    MDTOC_LANDING_REF,
    MDTOC_MAX_SECTION_LEVEL,
)
from mdtoc.discovery import find_documents
from mdtoc.exceptions import IndexNotFoundError, NoDocumentsError, SourceNotFoundError
from mdtoc.front_matter import read_part_label
from mdtoc.headings import iter_headings
from mdtoc.schemas import TopicNode
from mdtoc.topic_tree import build_topic_tree

logger = logging.getLogger(__name__)


@dataclass
class BuildOptions:
    """Options for building a table of contents.

    Attributes:
        max_level: Deepest heading level included in the tree.
        extension: File extension of eligible documents.
        index_name: Base name (without extension) of the index document.
        landing_ref: Reference carried by the root element.
        skip_code_blocks: If True, ignore heading-like lines inside fenced
            code blocks.
        encoding: Text encoding of the source documents. The default
            also accepts a leading byte order mark.
    """

    max_level: int = MDTOC_MAX_SECTION_LEVEL
    extension: str = MDTOC_DOC_EXTENSION
    index_name: str = MDTOC_INDEX_NAME
    landing_ref: str = MDTOC_LANDING_REF
    skip_code_blocks: bool = False
    encoding: str = "utf-8-sig"


@dataclass(frozen=True)
class Document:
    """One input document."""

    path: Path
    ref: str

    @classmethod
    def from_path(cls, path: Path, source_root: Path) -> "Document":
        ref = path.relative_to(source_root).with_suffix("").as_posix()
        return cls(path=path, ref=ref)

    @property
    def sort_key(self) -> tuple[str, str]:
        return (self.path.name, self.ref)


def sort_documents(paths: Iterable[Path], source_root: Path) -> list[Document]:
    """Order documents by base name, independent of traversal order."""
    documents = [Document.from_path(path, source_root) for path in paths]
    return sorted(documents, key=lambda document: document.sort_key)


def build_document_topics(document: Document, options: BuildOptions) -> list[TopicNode]:
    """Scan one document and build its topic nodes."""
    with document.path.open(encoding=options.encoding) as handle:
        headings = iter_headings(
            handle,
            max_level=options.max_level,
            skip_code_blocks=options.skip_code_blocks,
        )
        return build_topic_tree(headings, document.ref)


def assemble_groups(documents: Iterable[Document], options: BuildOptions) -> list[TopicNode]:
    """Group adjacent documents that share a ``part:`` label.

    Only neighbours are merged: a label that reappears after a different
    one opens a new group.
    """
    groups: list[TopicNode] = []
    current: TopicNode | None = None
    for document in documents:
        label = read_part_label(document.path, encoding=options.encoding)
        if current is None or label != current.label:
            logger.info("Opening group %r at %s", label, document.ref)
            current = TopicNode(label=label)
            groups.append(current)
        current.children.extend(build_document_topics(document, options))
    return groups


def build_toc(source_root: Path, options: BuildOptions | None = None) -> TopicNode:
    """Build the complete navigation tree for ``source_root``.

    Raises:
        SourceNotFoundError: If ``source_root`` is not a directory.
        NoDocumentsError: If no eligible documents exist.
        IndexNotFoundError: If the index document is missing.
    """
    opts = options or BuildOptions()
    if not source_root.is_dir():
        raise SourceNotFoundError(f"Source root is not a directory: {source_root}")

    index_path = source_root / f"{opts.index_name}{opts.extension}"
    paths = find_documents(source_root, extension=opts.extension, exclude=index_path)
    if not paths:
        raise NoDocumentsError(f"No {opts.extension} documents found in {source_root}")
    if not index_path.is_file():
        raise IndexNotFoundError(f"Index document not found: {index_path}")

    title = read_part_label(index_path, encoding=opts.encoding)
    if not title:
        logger.warning("Index document %s declares no part: title", index_path)

    documents = sort_documents(paths, source_root)
    logger.debug("Processing %d documents", len(documents))
    return TopicNode(
        label=title,
        ref=opts.landing_ref,
        children=assemble_groups(documents, opts),
    )
