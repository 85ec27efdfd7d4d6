"""Overlapping paragraph/sentence chunking for framework documents."""

import re

from ..models import TextChunk


def chunk_text(text: str, max_chunk_size: int = 1000, overlap: int = 100) -> list[TextChunk]:
    """Split text into ordered chunks of at most max_chunk_size characters.

    Paragraphs are packed together until the next one would not fit. When a
    chunk is flushed, the next one is seeded with the last `overlap`
    characters of it. A paragraph that is too large on its own is packed by
    sentence instead, without overlap. A single sentence longer than
    max_chunk_size is kept whole as its own chunk.

    Args:
        text: The document to chunk.
        max_chunk_size: Maximum characters per chunk.
        overlap: Characters carried over from the previous chunk.

    Returns:
        List of TextChunk, indexed from 0 in source order.
    """
    chunks: list[str] = []
    current = ""

    for paragraph in re.split(r"\n\s*\n", text):
        paragraph = paragraph.strip()
        if not paragraph:
            continue

        candidate = f"{current}\n\n{paragraph}" if current else paragraph
        if len(candidate) <= max_chunk_size:
            current = candidate
            continue

        if current:
            chunks.append(current.strip())
            seed = current[-overlap:].strip() if overlap > 0 else ""
            seeded = f"{seed}\n\n{paragraph}" if seed else paragraph
            if len(seeded) <= max_chunk_size:
                current = seeded
                continue
            if len(paragraph) <= max_chunk_size:
                current = paragraph
                continue

        # Paragraph alone exceeds the limit: pack it by sentence
        current = _pack_sentences(paragraph, max_chunk_size, chunks)

    if current.strip():
        chunks.append(current.strip())

    return [TextChunk(index=i, text=c) for i, c in enumerate(chunks)]


def _pack_sentences(paragraph: str, max_chunk_size: int, chunks: list[str]) -> str:
    """Flush full sentence groups into chunks and return the open remainder."""
    current = ""
    for sentence in re.split(r"(?<=[.!?])\s+", paragraph):
        candidate = f"{current} {sentence}" if current else sentence
        if len(candidate) <= max_chunk_size:
            current = candidate
        else:
            if current:
                chunks.append(current.strip())
            current = sentence
    return current
