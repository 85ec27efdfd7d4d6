"""Tests for framework chunking."""

from agencyos.frameworks.chunker import chunk_text


def test_chunk_short_text():
    chunks = chunk_text("  One short paragraph.  ")
    assert len(chunks) == 1
    assert chunks[0].index == 0
    assert chunks[0].text == "One short paragraph."


def test_chunk_empty_text():
    assert chunk_text("") == []
    assert chunk_text("\n\n   \n\n") == []


def test_oversized_sentence_kept_whole():
    text = "a" * 4999 + "."
    chunks = chunk_text(text, 1000, 100)
    assert len(chunks) == 1
    assert len(chunks[0].text) == 5000


def test_chunk_size_bound():
    paragraphs = [" ".join(f"Point {p}.{s} matters here." for s in range(p % 9 + 1)) for p in range(80)]
    paragraphs.append(" ".join(f"Long paragraph sentence {i} keeps going." for i in range(60)))
    chunks = chunk_text("\n\n".join(paragraphs), 1000, 100)
    assert len(chunks) > 1
    assert [c.index for c in chunks] == list(range(len(chunks)))
    for c in chunks:
        assert 0 < len(c.text) <= 1000


def test_overlap_seeds_next_chunk():
    text = "A" * 600 + "\n\n" + "B" * 600
    chunks = chunk_text(text, 1000, 100)
    assert [c.text for c in chunks] == ["A" * 600, "A" * 100 + "\n\n" + "B" * 600]
    assert chunks[1].text.startswith(chunks[0].text[-100:])


def test_no_overlap():
    text = "A" * 600 + "\n\n" + "B" * 600
    assert [c.text for c in chunk_text(text, 1000, 0)] == ["A" * 600, "B" * 600]


def test_seed_dropped_when_it_would_overflow():
    text = "A" * 500 + "\n\n" + "B" * 950
    assert [c.text for c in chunk_text(text, 1000, 100)] == ["A" * 500, "B" * 950]


def test_paragraphs_packed_together():
    text = "First paragraph.\n\nSecond paragraph.\n\n\n\nThird."
    chunks = chunk_text(text, 1000, 100)
    assert [c.text for c in chunks] == ["First paragraph.\n\nSecond paragraph.\n\nThird."]


def test_long_paragraph_split_by_sentence_without_overlap():
    paragraph = " ".join(f"Sentence {i:02d} of the long paragraph." for i in range(40))
    chunks = chunk_text(paragraph, 1000, 100)
    assert len(chunks) == 2
    assert " ".join(c.text for c in chunks) == paragraph
    assert all(len(c.text) <= 1000 for c in chunks)


def test_source_order_preserved():
    paragraphs = [f"Section {i}: " + "x" * 300 for i in range(6)]
    chunks = chunk_text("\n\n".join(paragraphs), 1000, 100)
    positions = [next(i for i in range(6) if f"Section {i}:" in c.text.split("\n\n")[-1]) for c in chunks]
    assert positions == sorted(positions)


def test_overlap_larger_than_max_drops_seed():
    text = "A" * 80 + "\n\n" + "B" * 80 + "\n\n" + "C" * 80
    chunks = chunk_text(text, 100, 150)
    assert [c.text for c in chunks] == ["A" * 80, "B" * 80, "C" * 80]


def test_whitespace_only_line_separates_paragraphs():
    chunks = chunk_text("A" * 600 + "\n   \n" + "B" * 600, 1000, 0)
    assert [c.text for c in chunks] == ["A" * 600, "B" * 600]
