"""Local configuration for mdtoc."""

from __future__ import annotations

import os


DEFAULT_OUTPUT_DIR = "_build"
DEFAULT_OUTPUT_FILE = "toc.xml"
DEFAULT_MAX_SECTION_LEVEL = 3
DEFAULT_DOC_EXTENSION = ".md"
DEFAULT_INDEX_NAME = "index"
DEFAULT_LANDING_REF = "index.html"

# Output location is relative to the current working directory, not the source root.
MDTOC_OUTPUT_DIR = os.getenv("MDTOC_OUTPUT_DIR", DEFAULT_OUTPUT_DIR)
MDTOC_OUTPUT_FILE = os.getenv("MDTOC_OUTPUT_FILE", DEFAULT_OUTPUT_FILE)
MDTOC_MAX_SECTION_LEVEL = int(os.getenv("MDTOC_MAX_SECTION_LEVEL", str(DEFAULT_MAX_SECTION_LEVEL)))
MDTOC_DOC_EXTENSION = os.getenv("MDTOC_DOC_EXTENSION", DEFAULT_DOC_EXTENSION)
MDTOC_INDEX_NAME = os.getenv("MDTOC_INDEX_NAME", DEFAULT_INDEX_NAME)
MDTOC_LANDING_REF = os.getenv("MDTOC_LANDING_REF", DEFAULT_LANDING_REF)

HEADING_MARKER = "#"
FRONT_MATTER_DELIMITER = "---"
PART_KEY = "part:"
