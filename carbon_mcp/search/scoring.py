from typing import Optional

from carbon_mcp.catalog.schemas import Component

# Points per matched field in search relevance
NAME_WEIGHT = 10
DESCRIPTION_WEIGHT = 5
WHEN_TO_USE_WEIGHT = 3
EXAMPLES_WEIGHT = 2

# Intent words this short are ignored ("a", "to", "of", ...)
MIN_INTENT_WORD_LENGTH = 3


def contains(text: Optional[str], needle_lower: str) -> bool:
    """Case-insensitive substring test; absent text never matches."""
    return text is not None and needle_lower in text.lower()


def matches_any_example(component: Component, needle_lower: str) -> bool:
    return any(needle_lower in example.lower() for example in component.examples)


def calculate_relevance(component: Component, query: str) -> int:
    """Score a search hit by the fields the query occurs in.

    Each field contributes at most once; examples count once no matter how
    many of them match.
    """
    query_lower = query.lower()
    score = 0
    if contains(component.name, query_lower):
        score += NAME_WEIGHT
    if contains(component.description, query_lower):
        score += DESCRIPTION_WEIGHT
    if contains(component.when_to_use, query_lower):
        score += WHEN_TO_USE_WEIGHT
    if matches_any_example(component, query_lower):
        score += EXAMPLES_WEIGHT
    return score


def intent_words(intent: str) -> list[str]:
    """Lower-cased whitespace-separated words long enough to be meaningful.

    Repeated words are kept; each occurrence scores separately.
    """
    return [w for w in intent.lower().split() if len(w) >= MIN_INTENT_WORD_LENGTH]


def component_text(component: Component) -> str:
    parts = [component.name, component.description, component.when_to_use]
    parts.extend(component.examples)
    return " ".join(p for p in parts if p is not None).lower()


def calculate_intent_score(component: Component, words: list[str]) -> int:
    text = component_text(component)
    return sum(1 for word in words if word in text)
