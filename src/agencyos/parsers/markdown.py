"""Markdown framework document parser."""

import re
from pathlib import Path
from typing import Any

import yaml


class MarkdownParser:
    """Parse markdown files, extracting frontmatter and content."""

    def parse(self, file_path: Path) -> dict[str, Any]:
        """Parse a markdown file and return structured data."""
        text = file_path.read_text(encoding="utf-8", errors="replace")
        metadata: dict[str, Any] = {"source_type": "markdown"}

        # YAML frontmatter may carry id, name and category
        fm_match = re.match(r"^---\s*\n(.*?)\n---\s*\n", text, re.DOTALL)
        if fm_match:
            try:
                fm = yaml.safe_load(fm_match.group(1)) or {}
                if isinstance(fm, dict):
                    metadata.update(fm)
            except yaml.YAMLError:
                pass
            content = text[fm_match.end():]
        else:
            content = text

        if "name" not in metadata:
            title_match = re.match(r"^#\s+(.+)$", content, re.MULTILINE)
            metadata["name"] = title_match.group(1).strip() if title_match else file_path.stem

        return {"content": content, "metadata": metadata, "name": metadata["name"]}
