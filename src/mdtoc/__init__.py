"""mdtoc: build a navigation tree from Markdown documents."""

from mdtoc.assembler import BuildOptions, build_toc
from mdtoc.exceptions import (
    ConfigurationError,
    IndexNotFoundError,
    MdtocError,
    NoDocumentsError,
    SourceNotFoundError,
)
from mdtoc.headings import Heading, iter_headings, parse_heading, slugify
from mdtoc.schemas import TopicNode
from mdtoc.serializer import render_toc, write_toc
from mdtoc.topic_tree import TopicTreeBuilder, build_topic_tree

__all__ = [
    "BuildOptions",
    "ConfigurationError",
    "Heading",
    "IndexNotFoundError",
    "MdtocError",
    "NoDocumentsError",
    "SourceNotFoundError",
    "TopicNode",
    "TopicTreeBuilder",
    "build_toc",
    "build_topic_tree",
    "iter_headings",
    "parse_heading",
    "render_toc",
    "slugify",
    "write_toc",
]
