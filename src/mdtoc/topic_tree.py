"""Turn one document's flat heading sequence into nested topic nodes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from mdtoc.headings import Heading
from mdtoc.schemas import TopicNode

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    """An open ancestor on the builder stack."""

    level: int
    depth: int
    node: TopicNode


class TopicTreeBuilder:
    """Stack machine that nests headings for a single document.

    The first heading becomes the document's top node, referenced by the
    page itself and treated as level 1. Every later heading closes the open
    frames at its level or deeper and is attached to whatever frame remains,
    exactly one depth below it, however many levels the source skipped.
    """

    def __init__(self, doc_ref: str) -> None:
        self.doc_ref = doc_ref
        self.roots: list[TopicNode] = []
        self._stack: list[_Frame] = []
        self._started = False

    @property
    def depth(self) -> int:
        """Depth of the innermost open frame, 0 when nothing is open."""
        return self._stack[-1].depth if self._stack else 0

    def add(self, heading: Heading) -> TopicNode:
        if not self._started:
            self._started = True
            node = TopicNode(label=heading.name, ref=f"{self.doc_ref}.html")
            self.roots.append(node)
            self._stack.append(_Frame(level=1, depth=1, node=node))
            return node

        while self._stack and self._stack[-1].level >= heading.level:
            self._stack.pop()

        node = TopicNode(label=heading.name, ref=f"{self.doc_ref}.html#{heading.anchor}")
        if self._stack:
            self._stack[-1].node.children.append(node)
        else:
            self.roots.append(node)
        depth = min(heading.level, self.depth + 1)
        self._stack.append(_Frame(level=heading.level, depth=depth, node=node))
        return node

    def finish(self) -> list[TopicNode]:
        """Close every open frame and return the document's top-level nodes."""
        self._stack.clear()
        return self.roots


def build_topic_tree(headings: Iterable[Heading], doc_ref: str) -> list[TopicNode]:
    """Build the topic nodes for one document.

    Headings are expected to be pre-filtered by level and name (see
    ``mdtoc.headings.iter_headings``).
    """
    builder = TopicTreeBuilder(doc_ref)
    for heading in headings:
        builder.add(heading)
    roots = builder.finish()
    if not roots:
        logger.debug("No headings found in %s", doc_ref)
    return roots
