"""Render the navigation tree as indented XML."""

from __future__ import annotations

import logging
from pathlib import Path
from xml.sax.saxutils import quoteattr

from mdtoc.schemas import TopicNode

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
INDENT = "\t"
TAG = "topic"


def render_toc(root: TopicNode) -> str:
    """Render ``root`` and its descendants, one element line per node."""
    lines = [XML_DECLARATION]
    lines.extend(_render_node(root, 0))
    return "\n".join(lines) + "\n"


def _render_node(node: TopicNode, depth: int) -> list[str]:
    indent = INDENT * depth
    attrs = f"title={quoteattr(node.label)}"
    if node.ref is not None:
        attrs += f" href={quoteattr(node.ref)}"

    lines = [f"{indent}<{TAG} {attrs}>"]
    for child in node.children:
        lines.extend(_render_node(child, depth + 1))
    lines.append(f"{indent}</{TAG}>")
    return lines


def write_toc(root: TopicNode, output_path: Path) -> Path:
    """Render the tree and write it to ``output_path``.

    The document is rendered in full before the file is opened.
    """
    content = render_toc(root)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
    logger.info("Wrote table of contents to %s", output_path)
    return output_path
