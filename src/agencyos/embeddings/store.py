"""ChromaDB storage for frameworks and their embedded chunks."""

from pathlib import Path
from typing import Any

import chromadb

# Whole framework bodies are looked up by ID only; chunks carry the embeddings
FRAMEWORKS_COLLECTION = "frameworks"


class FrameworkStore:
    """Persistent framework bodies plus a cosine-space chunk collection."""

    def __init__(self, chroma_path: str, chunks_collection: str = "framework_chunks"):
        path = Path(chroma_path)
        path.mkdir(parents=True, exist_ok=True)
        client = chromadb.PersistentClient(path=str(path))
        self.chunks = client.get_or_create_collection(
            name=chunks_collection,
            metadata={"hnsw:space": "cosine"},
        )
        self.frameworks = client.get_or_create_collection(name=FRAMEWORKS_COLLECTION)

    def save_framework(self, framework_id: str, content: str, meta: dict[str, Any]) -> None:
        # Chroma requires an embedding per record; bodies are never queried
        self.frameworks.upsert(
            ids=[framework_id], embeddings=[[0.0]], documents=[content], metadatas=[meta],
        )

    def delete_chunks(self, framework_id: str) -> None:
        """Drop every chunk previously stored for a framework."""
        self.chunks.delete(where={"framework_id": framework_id})

    def add_chunks(
        self,
        ids: list[str],
        embeddings: list[list[float]],
        texts: list[str],
        metadatas: list[dict[str, Any]],
    ) -> None:
        self.chunks.upsert(ids=ids, embeddings=embeddings, documents=texts, metadatas=metadatas)

    def nearest_chunks(self, embedding: list[float], n_results: int) -> list[tuple[str, dict, float]]:
        """(text, metadata, cosine distance) of the closest chunks, nearest first."""
        result = self.chunks.query(
            query_embeddings=[embedding],
            n_results=n_results,
            include=["documents", "metadatas", "distances"],
        )
        if not result["ids"] or not result["ids"][0]:
            return []
        return list(zip(result["documents"][0], result["metadatas"][0], result["distances"][0]))

    def get_frameworks(self, ids: list[str]) -> dict[str, tuple[str, dict]]:
        """Map framework ID to (content, metadata) for the IDs that exist."""
        result = self.frameworks.get(ids=ids, include=["documents", "metadatas"])
        return {
            fid: (result["documents"][i], result["metadatas"][i] or {})
            for i, fid in enumerate(result["ids"])
        }
