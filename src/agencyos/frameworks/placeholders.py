"""Fill bracketed placeholders in framework content with client details."""

import re
from typing import Callable

from ..models import ClientContext

# (placeholder names, value getter); names are matched case-insensitively as [NAME]
PLACEHOLDERS: list[tuple[list[str], Callable[[ClientContext], str]]] = [
    (["DEMOGRAPHIC", "DEMOGRAPHICS"],
     lambda c: c.demographics or c.target_audience or "your target audience"),
    (["TARGET AUDIENCE", "TARGET_AUDIENCE", "AUDIENCE"],
     lambda c: c.target_audience or "your ideal customers"),
    (["INDUSTRY"], lambda c: c.industry or "your industry"),
    (["BRAND", "BRAND NAME", "BRAND_NAME", "COMPANY"], lambda c: c.name or "your brand"),
    (["PRODUCT", "PRODUCT TYPE", "PRODUCT_TYPE", "SERVICE"],
     lambda c: c.industry or "your product/service"),
    (["VOICE", "BRAND VOICE", "BRAND_VOICE", "TONE"], lambda c: c.brand_voice or "your brand voice"),
    (["GOAL", "GOALS", "OBJECTIVE", "OBJECTIVES"], lambda c: c.goals or "your goals"),
    (["PROBLEM", "PROBLEMS", "PAIN POINT", "PAIN_POINT", "PAIN POINTS", "PAIN_POINTS"],
     lambda c: c.problems or "their problems"),
    (["SOLUTION", "METHODOLOGY"], lambda c: c.solution or "your solution"),
    (["USP", "UNIQUE VALUE", "UNIQUE_VALUE", "DIFFERENTIATOR", "VALUE PROP", "VALUE_PROP"],
     lambda c: c.unique_value or "your unique value"),
    (["CUSTOMER", "CUSTOMERS"], lambda c: c.target_audience or "your customers"),
    (["REGION", "LOCATION", "AREA"], lambda c: c.demographics or "your region"),
    (["NICHE"], lambda c: c.industry or "your niche"),
    (["MARKET"], lambda c: c.industry or "your market"),
    (["PRODUCT/SERVICE", "PRODUCT OR SERVICE"], lambda c: c.industry or "your product/service"),
]


def fill_framework_placeholders(content: str, context: ClientContext) -> str:
    """Replace [PLACEHOLDER] markers with client values or neutral defaults."""
    result = content
    for names, get_value in PLACEHOLDERS:
        value = get_value(context)
        for name in names:
            pattern = re.compile(rf"\[{re.escape(name)}\]", re.IGNORECASE)
            # Callable replacement keeps backslashes in client values literal
            result = pattern.sub(lambda _m: value, result)
    return result
