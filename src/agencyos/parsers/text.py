"""Plain text framework document parser."""

import re
from pathlib import Path
from typing import Any

# "Name: AIDA" style lines at the top of a file, up to the first blank line
_HEADER_LINE = re.compile(r"^(id|name|category)\s*:\s*(.*\S)\s*$", re.IGNORECASE)


class TextParser:
    """Parse plain text frameworks with an optional Name/Category/Id header."""

    def parse(self, file_path: Path) -> dict[str, Any]:
        text = file_path.read_text(encoding="utf-8", errors="replace")
        metadata: dict[str, Any] = {"source_type": "text"}

        lines = text.splitlines()
        header_len = 0
        for line in lines:
            match = _HEADER_LINE.match(line)
            if not match:
                break
            metadata[match.group(1).lower()] = match.group(2)
            header_len += 1

        if header_len and (header_len == len(lines) or not lines[header_len].strip()):
            content = "\n".join(lines[header_len:]).lstrip("\n")
        else:
            # Not a header block, keep the text as-is
            metadata = {"source_type": "text"}
            content = text

        if "name" not in metadata:
            first_line = content.strip().split("\n", 1)[0].strip()
            metadata["name"] = first_line if first_line and len(first_line) < 120 else file_path.stem

        return {"content": content, "metadata": metadata, "name": metadata["name"]}
