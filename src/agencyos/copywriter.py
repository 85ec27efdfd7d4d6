"""Framework-grounded copy drafting with Claude."""

from typing import Any

import anthropic

from .embeddings.index import FrameworkIndex
from .frameworks.context import build_framework_context
from .models import ClientContext

SYSTEM_PROMPT = (
    "You are a senior marketing copywriter at an agency. Write clear, persuasive copy "
    "in the client's voice. When marketing frameworks are provided, apply them "
    "deliberately but do not name them in the copy."
)


def draft_copy(
    request: str,
    config: dict[str, Any],
    purpose: str = "content_generation",
    client: ClientContext | None = None,
    index: FrameworkIndex | None = None,
) -> dict:
    """Draft copy for a request, grounded in the most relevant frameworks.

    Returns dict with 'copy' and 'framework_ids' (frameworks used as context).
    """
    api_key = config.get("claude_api_key")
    if not api_key:
        raise ValueError(
            "Claude API key required. Set ANTHROPIC_API_KEY or claude_api_key in config."
        )

    search_cfg = config.get("search", {})
    index = index or FrameworkIndex(config)
    max_frameworks = search_cfg.get("max_frameworks", 3)
    # Category filtering discards some results, so fetch twice as many
    fetch = max_frameworks * 2 if purpose != "all" else max_frameworks
    frameworks = index.relevant_frameworks(
        request,
        threshold=search_cfg.get("threshold", 0.7),
        max_frameworks=fetch,
    )
    context, framework_ids = build_framework_context(
        frameworks, purpose=purpose, context=client, max_frameworks=max_frameworks,
    )

    client_block = ""
    if client is not None and client.name:
        client_block = f"Client: {client.name}\n"
        if client.industry:
            client_block += f"Industry: {client.industry}\n"
        if client.brand_voice:
            client_block += f"Brand voice: {client.brand_voice}\n"
        client_block += "\n"

    anthropic_client = anthropic.Anthropic(api_key=api_key)
    model = config.get("claude_model", "claude-sonnet-4-20250514")

    response = anthropic_client.messages.create(
        model=model,
        max_tokens=2000,
        system=SYSTEM_PROMPT,
        messages=[{
            "role": "user",
            "content": f"{context}{client_block}Request: {request}",
        }],
    )

    return {
        "copy": response.content[0].text,
        "framework_ids": framework_ids,
    }
