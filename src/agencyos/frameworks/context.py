"""Turn framework search results into prompt context."""

from ..models import ClientContext, FrameworkChunkMatch, RelevantFramework
from .placeholders import fill_framework_placeholders

# Framework categories allowed for each purpose; None means no filtering
CATEGORY_MAP: dict[str, list[str] | None] = {
    "research": ["strategy_framework", "persuasion"],
    "content_generation": [
        "copywriting_formula",
        "structure_template",
        "prompt_template",
        "email",
        "social",
        "story_framework",
    ],
    "all": None,
}

CONTEXT_HEADER = (
    "## Relevant Marketing Frameworks\n\n"
    "Use these proven frameworks to inform your response:\n\n"
)


def rank_frameworks(matches: list[FrameworkChunkMatch], max_frameworks: int = 3) -> list[tuple[str, float]]:
    """Best similarity per framework, highest first, top max_frameworks."""
    scores: dict[str, float] = {}
    for match in matches:
        if match.similarity > scores.get(match.framework_id, 0):
            scores[match.framework_id] = match.similarity
    ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
    return ranked[:max_frameworks]


def filter_by_purpose(frameworks: list[RelevantFramework], purpose: str) -> list[RelevantFramework]:
    """Keep frameworks whose category suits the purpose."""
    if purpose not in CATEGORY_MAP:
        raise ValueError(f"Unknown framework purpose: {purpose}")
    allowed = CATEGORY_MAP[purpose]
    if allowed is None:
        return list(frameworks)
    return [f for f in frameworks if f.category and f.category in allowed]


def format_frameworks_for_prompt(
    frameworks: list[RelevantFramework],
    context: ClientContext | None = None,
) -> str:
    """Render frameworks as markdown sections for an AI prompt."""
    sections = []
    for framework in frameworks:
        content = framework.content
        if context is not None:
            content = fill_framework_placeholders(content, context)

        section = f"### {framework.name}"
        if framework.category:
            section += f"\n*Category: {framework.category}*"
        section += f"\n\n{content}"
        sections.append(section)

    return "\n\n---\n\n".join(sections)


def build_framework_context(
    frameworks: list[RelevantFramework],
    purpose: str = "all",
    context: ClientContext | None = None,
    max_frameworks: int = 5,
) -> tuple[str, list[str]]:
    """Filter, cap and format frameworks into a prompt block.

    Returns:
        (context block, IDs of the frameworks used); ("", []) when none remain.
    """
    selected = filter_by_purpose(frameworks, purpose)[:max_frameworks]
    if not selected:
        return "", []

    body = format_frameworks_for_prompt(selected, context)
    return f"{CONTEXT_HEADER}{body}\n\n---\n\n", [f.id for f in selected]
