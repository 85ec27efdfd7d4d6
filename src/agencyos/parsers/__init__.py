"""Document parsers for framework source files."""

from pathlib import Path
from typing import Any

from .markdown import MarkdownParser
from .text import TextParser

PARSERS = {
    ".md": MarkdownParser,
    ".markdown": MarkdownParser,
    ".txt": TextParser,
    ".text": TextParser,
}


def parse_document(file_path: Path) -> dict[str, Any]:
    """Parse a framework file with the parser for its extension.

    Unknown extensions are read as plain text.
    """
    parser_cls = PARSERS.get(file_path.suffix.lower(), TextParser)
    return parser_cls().parse(file_path)


__all__ = ["PARSERS", "MarkdownParser", "TextParser", "parse_document"]
