"""@mention and #tag extraction for journal notes."""

import html
import logging
import re
from typing import Any, Iterable

from ..models import EntityKind, ExtractionResult, HighlightSpan, MentionMatch, NamedEntity

logger = logging.getLogger(__name__)

# A word starts and ends on an alphanumeric; continuation words must be
# Capitalized or numeric, so "@Acme loved it" stops at "Acme".
_WORD = r"[A-Za-z0-9](?:[A-Za-z0-9&.\-]*[A-Za-z0-9])?"
_CONTINUATION = r"[A-Z0-9](?:[A-Za-z0-9&.\-]*[A-Za-z0-9])?"
_QUALIFIER = r"\([A-Za-z0-9 \t&.\-]*\)"

MENTION_PATTERN = re.compile(
    rf"@({_WORD}(?:[ \t]+(?:&[ \t]+)?{_CONTINUATION})*(?:[ \t]*{_QUALIFIER})?)"
)
TAG_PATTERN = re.compile(r"#(\w+)", re.ASCII)

_HIGHLIGHT_PATTERN = re.compile(
    rf"(?P<mention>{MENTION_PATTERN.pattern})|(?P<tag>{TAG_PATTERN.pattern})",
    re.ASCII,
)


def extract_mentions(
    text: str,
    clients: Iterable[Any],
    projects: Iterable[Any] | None = None,
    content: Iterable[Any] | None = None,
) -> ExtractionResult:
    """Resolve @mentions against the lookup lists and collect #tags.

    Args:
        text: Free-text note, may be empty.
        clients: Client records (NamedEntity or mappings with id/name).
        projects: Project records; None means projects are not searched.
        content: Content records (id/title); None means not searched.

    Returns:
        ExtractionResult with unique IDs and tags in first-seen order.
    """
    result = ExtractionResult()
    if not text:
        return result

    lookups: list[tuple[EntityKind, list[NamedEntity]]] = [
        ("client", _normalize(clients, "client")),
    ]
    if projects is not None:
        lookups.append(("project", _normalize(projects, "project")))
    if content is not None:
        lookups.append(("content", _normalize(content, "content")))

    for token in mention_tokens(text):
        needle = token.lower()
        for kind, entities in lookups:
            entity = resolve_mention(needle, entities)
            if entity is not None:
                result.add(MentionMatch(entity_kind=kind, entity_id=entity.id))

    result.tags = extract_tags(text)
    logger.debug(
        "Extracted %d client, %d project, %d content mentions and %d tags",
        len(result.mentioned_clients),
        len(result.mentioned_projects),
        len(result.mentioned_content),
        len(result.tags),
    )
    return result


def mention_tokens(text: str) -> list[str]:
    """Return the distinct mention tokens in text, original casing."""
    tokens: list[str] = []
    for match in MENTION_PATTERN.finditer(text):
        token = match.group(1)
        if token not in tokens:
            tokens.append(token)
    return tokens


def resolve_mention(token: str, entities: list[NamedEntity]) -> NamedEntity | None:
    """First exact name match, else first name containing the token."""
    token = token.lower()
    for entity in entities:
        if entity.name.lower() == token:
            return entity
    for entity in entities:
        if token in entity.name.lower():
            return entity
    return None


def extract_tags(text: str) -> list[str]:
    """Collect normalized #tags from whitespace-delimited words."""
    tags: list[str] = []
    for word in text.split():
        if not word.startswith("#"):
            continue
        tag = re.sub(r"[^a-z0-9]", "", word[1:].lower())
        if tag and tag not in tags:
            tags.append(tag)
    return tags


def find_highlights(text: str) -> list[HighlightSpan]:
    """Locate the mention and tag ranges that highlighting would style."""
    spans = []
    for match in _HIGHLIGHT_PATTERN.finditer(text):
        kind = "mention" if match.group("mention") else "tag"
        spans.append(HighlightSpan(kind=kind, start=match.start(), end=match.end(), text=match.group(0)))
    return spans


def render_highlights(
    text: str,
    escape: bool = True,
    mention_class: str = "mention",
    tag_class: str = "tag",
) -> str:
    """Render text with styled spans around mentions and tags.

    With escape=True the surrounding text and the tokens are HTML-escaped,
    so the output is safe for a raw-HTML sink.
    """
    classes = {"mention": mention_class, "tag": tag_class}
    _esc = html.escape if escape else (lambda s: s)

    parts = []
    pos = 0
    for span in find_highlights(text):
        parts.append(_esc(text[pos:span.start]))
        parts.append(f'<span class="{classes[span.kind]}">{_esc(span.text)}</span>')
        pos = span.end
    parts.append(_esc(text[pos:]))
    return "".join(parts)


def highlight(text: str, mention_class: str = "mention", tag_class: str = "tag") -> str:
    """Wrap @mentions and #tags in styling spans. Performs no escaping."""
    return render_highlights(text, escape=False, mention_class=mention_class, tag_class=tag_class)


def _normalize(records: Iterable[Any], kind: EntityKind) -> list[NamedEntity]:
    return [NamedEntity.from_record(r, kind) for r in records]
