"""Framework chunk embedding and similarity search."""

import hashlib
import logging
from typing import Any

from rich.progress import Progress

from ..frameworks.chunker import chunk_text
from ..frameworks.context import rank_frameworks
from ..models import FrameworkChunkMatch, RelevantFramework

logger = logging.getLogger(__name__)


def chunk_id(framework_id: str, index: int) -> str:
    """Stable ID for one chunk of a framework."""
    return hashlib.sha256(f"{framework_id}:{index}".encode()).hexdigest()[:32]


class FrameworkIndex:
    """Chunks frameworks, embeds them with sentence-transformers and searches them."""

    def __init__(self, config: dict[str, Any], store=None, model=None):
        self.config = config
        self.model_name = config.get("embedding_model", "intfloat/e5-large-v2")
        self._store = store
        self._model = model

    @property
    def store(self):
        """Lazy-open the framework store."""
        if self._store is None:
            from .store import FrameworkStore
            self._store = FrameworkStore(
                self.config["chroma_path"],
                chunks_collection=self.config.get("collection", "framework_chunks"),
            )
        return self._store

    @property
    def model(self):
        """Lazy-load the embedding model."""
        if self._model is None:
            from sentence_transformers import SentenceTransformer
            self._model = SentenceTransformer(self.model_name)
        return self._model

    def _encode(self, texts: list[str]) -> list[list[float]]:
        return [[float(x) for x in vector] for vector in self.model.encode(texts)]

    def index_framework(
        self,
        framework_id: str,
        content: str,
        name: str = "",
        category: str | None = None,
    ) -> int:
        """Chunk and embed a framework, replacing any earlier chunks of it.

        Returns number of chunks stored.
        """
        chunk_cfg = self.config.get("chunking", {})
        chunks = chunk_text(
            content,
            max_chunk_size=chunk_cfg.get("max_chunk_size", 1000),
            overlap=chunk_cfg.get("overlap", 100),
        )

        # Chroma metadata values cannot be None
        meta = {"framework_id": framework_id, "name": name, "category": category or ""}
        self.store.delete_chunks(framework_id)
        self.store.save_framework(framework_id, content, meta)

        if not chunks:
            return 0

        batch_size = 32
        with Progress() as progress:
            task = progress.add_task("Embedding...", total=len(chunks))
            for i in range(0, len(chunks), batch_size):
                batch = chunks[i:i + batch_size]
                # e5 models need "passage: " prefix for documents
                self.store.add_chunks(
                    ids=[chunk_id(framework_id, c.index) for c in batch],
                    embeddings=self._encode([f"passage: {c.text}" for c in batch]),
                    texts=[c.text for c in batch],
                    metadatas=[{**meta, "chunk_index": c.index} for c in batch],
                )
                progress.advance(task, len(batch))

        logger.info(f"Indexed framework {framework_id} as {len(chunks)} chunk(s)")
        return len(chunks)

    def search(self, query: str, threshold: float = 0.7, limit: int = 5) -> list[FrameworkChunkMatch]:
        """Find framework chunks with cosine similarity >= threshold."""
        try:
            embedding = self._encode([f"query: {query}"])[0]
            nearest = self.store.nearest_chunks(embedding, n_results=limit)
        except Exception as e:
            logger.error(f"Framework search failed: {e}")
            return []

        matches = []
        for text, meta, distance in nearest:
            similarity = 1 - distance
            if similarity < threshold:
                continue
            meta = meta or {}
            matches.append(FrameworkChunkMatch(
                framework_id=meta.get("framework_id", ""),
                content=text or "",
                similarity=similarity,
                chunk_index=meta.get("chunk_index", 0),
                name=meta.get("name", ""),
                category=meta.get("category") or None,
            ))
        return matches

    def relevant_frameworks(
        self,
        query: str,
        threshold: float = 0.65,
        max_frameworks: int = 3,
    ) -> list[RelevantFramework]:
        """Whole frameworks ranked by their best matching chunk."""
        # Over-fetch chunks so enough distinct frameworks survive grouping
        matches = self.search(query, threshold=threshold, limit=max_frameworks * 3)
        ranked = rank_frameworks(matches, max_frameworks)
        if not ranked:
            return []

        try:
            stored = self.store.get_frameworks([fid for fid, _ in ranked])
        except Exception as e:
            logger.error(f"Error fetching full frameworks: {e}")
            return []

        frameworks = []
        for fid, score in ranked:
            if fid not in stored:
                logger.warning(f"No stored framework for ID {fid}")
                continue
            content, meta = stored[fid]
            frameworks.append(RelevantFramework(
                id=fid,
                name=meta.get("name", ""),
                content=content,
                category=meta.get("category") or None,
                relevance_score=score,
            ))
        return frameworks
