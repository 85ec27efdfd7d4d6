"""Tests for framework document parsers."""

import tempfile
from pathlib import Path

from agencyos.parsers import parse_document


def test_markdown_frontmatter():
    with tempfile.NamedTemporaryFile(suffix=".md", mode="w", delete=False) as f:
        f.write("---\nid: fw-9\nname: PAS\ncategory: copywriting_formula\n---\n# Problem Agitate Solve\n\nBody.")
        f.flush()
        doc = parse_document(Path(f.name))

    assert doc["name"] == "PAS"
    assert doc["metadata"]["id"] == "fw-9"
    assert doc["metadata"]["category"] == "copywriting_formula"
    assert doc["content"].startswith("# Problem Agitate Solve")


def test_markdown_name_from_heading():
    with tempfile.NamedTemporaryFile(suffix=".md", mode="w", delete=False) as f:
        f.write("# Hook Formula\n\nBody.")
        f.flush()
        doc = parse_document(Path(f.name))

    assert doc["name"] == "Hook Formula"


def test_text_and_unknown_extensions():
    with tempfile.NamedTemporaryFile(suffix=".xyz", mode="w", delete=False) as f:
        f.write("Before After Bridge\nBody text.")
        f.flush()
        doc = parse_document(Path(f.name))

    assert doc["name"] == "Before After Bridge"
    assert doc["metadata"]["source_type"] == "text"


def test_text_header_block():
    with tempfile.NamedTemporaryFile(suffix=".txt", mode="w", delete=False) as f:
        f.write("Name: Before After Bridge\nCategory: copywriting_formula\nId: bab\n\nBefore: pain.\n\nAfter: relief.")
        f.flush()
        doc = parse_document(Path(f.name))

    assert doc["name"] == "Before After Bridge"
    assert doc["metadata"]["category"] == "copywriting_formula"
    assert doc["metadata"]["id"] == "bab"
    assert doc["content"] == "Before: pain.\n\nAfter: relief."


def test_text_header_needs_blank_line():
    with tempfile.NamedTemporaryFile(suffix=".txt", mode="w", delete=False) as f:
        f.write("Name: not a header\nstill the same paragraph")
        f.flush()
        doc = parse_document(Path(f.name))

    assert "category" not in doc["metadata"]
    assert doc["name"] == "Name: not a header"
    assert doc["content"].startswith("Name: not a header")


def test_markdown_non_mapping_frontmatter():
    with tempfile.NamedTemporaryFile(suffix=".md", mode="w", delete=False) as f:
        f.write("---\n- one\n- two\n---\n# Listed\n\nBody.")
        f.flush()
        doc = parse_document(Path(f.name))

    assert doc["name"] == "Listed"
    assert doc["content"].startswith("# Listed")
