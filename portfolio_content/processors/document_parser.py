"""
Front matter parsing for locale documents.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict

import frontmatter
import yaml

from ..utils.error_handler import DocumentParseError, ErrorHandler

logger = logging.getLogger(__name__)

# Delimiter lines only; the stock boundary's trailing \s* also eats blank
# lines at the start of the body.
FRONT_MATTER_HANDLER = frontmatter.YAMLHandler(
    fm_boundary=re.compile(r"^-{3,}[ \t]*\r?$", re.MULTILINE)
)


@dataclass(frozen=True)
class ParsedDocument:
    """
    A document split into its front matter and body.

    ``metadata`` is the only place where untyped front matter values live;
    the model ``from_frontmatter`` constructors narrow it into entities.
    """

    metadata: Dict[str, Any] = field(default_factory=dict)
    body: str = ""


def parse_document(text: str) -> ParsedDocument:
    """
    Split raw document text into front matter and body.

    The body is everything after the newline that ends the closing
    ``---`` line, kept byte for byte. Text that does not open with a
    front matter block, or never closes it, is all body.

    Args:
        text: Full document text, optionally starting with a ``---`` block

    Returns:
        ParsedDocument with the decoded metadata and the remaining body
    """
    if not FRONT_MATTER_HANDLER.detect(text):
        return ParsedDocument(metadata={}, body=text)

    try:
        front_matter, content = FRONT_MATTER_HANDLER.split(text)
    except ValueError:
        return ParsedDocument(metadata={}, body=text)

    metadata = FRONT_MATTER_HANDLER.load(front_matter)
    if not isinstance(metadata, dict):
        metadata = {}

    if content.startswith("\n"):
        content = content[1:]

    return ParsedDocument(metadata=dict(metadata), body=content)


def read_document(path: str) -> ParsedDocument:
    """
    Read and parse a document from disk.

    I/O errors propagate unchanged. Malformed YAML is reported as
    DocumentParseError so the build stops with the offending path.

    Args:
        path: Path to the ``.mdx`` file

    Returns:
        ParsedDocument for the file
    """
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()

    try:
        return parse_document(text)
    except yaml.YAMLError as e:
        ErrorHandler(logger).log_parse_error(e, path)
        raise DocumentParseError(
            f"Invalid front matter in {path}: {str(e)}", path=path
        ) from e
