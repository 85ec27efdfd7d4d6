"""Data models used throughout agencyos."""

from dataclasses import asdict, dataclass, field
from typing import Any, Literal

EntityKind = Literal["client", "project", "content"]


@dataclass
class NamedEntity:
    """A client, project or content item that a mention can resolve to."""
    id: str
    name: str
    kind: EntityKind = "client"

    @classmethod
    def from_record(cls, record: Any, kind: EntityKind = "client") -> "NamedEntity":
        """Build from a NamedEntity or a row-like mapping with ``name`` or ``title``."""
        if isinstance(record, NamedEntity):
            return record
        name = record.get("name") or record.get("title") or ""
        return cls(id=str(record["id"]), name=str(name), kind=kind)


@dataclass
class MentionMatch:
    entity_kind: EntityKind
    entity_id: str


@dataclass
class ExtractionResult:
    """Everything one parse of a journal note produced."""
    mentioned_clients: list[str] = field(default_factory=list)
    mentioned_projects: list[str] = field(default_factory=list)
    mentioned_content: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)

    def add(self, match: MentionMatch) -> None:
        """Record a match unless its ID is already present for that kind."""
        target = {
            "client": self.mentioned_clients,
            "project": self.mentioned_projects,
            "content": self.mentioned_content,
        }[match.entity_kind]
        if match.entity_id not in target:
            target.append(match.entity_id)

    def to_dict(self) -> dict[str, list[str]]:
        return asdict(self)


@dataclass
class HighlightSpan:
    """A styled range inside a piece of text."""
    kind: Literal["mention", "tag"]
    start: int
    end: int
    text: str


@dataclass
class EntryGroup:
    """One recency bucket of journal entries."""
    label: str
    entries: list[Any] = field(default_factory=list)


@dataclass
class TextChunk:
    """A chunk of a framework document."""
    index: int
    text: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class FrameworkChunkMatch:
    """A stored framework chunk returned by similarity search."""
    framework_id: str
    content: str
    similarity: float
    chunk_index: int = 0
    name: str = ""
    category: str | None = None


@dataclass
class RelevantFramework:
    """A framework ranked by its best matching chunk."""
    id: str
    name: str
    content: str
    category: str | None
    relevance_score: float


@dataclass
class ClientContext:
    """Client details used to fill framework placeholders."""
    name: str | None = None
    industry: str | None = None
    target_audience: str | None = None
    demographics: str | None = None
    brand_voice: str | None = None
    goals: str | None = None
    problems: str | None = None
    solution: str | None = None
    unique_value: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ClientContext":
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)
