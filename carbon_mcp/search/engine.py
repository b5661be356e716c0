"""Catalog queries.

Every operation takes the CatalogStore, reads one snapshot, and returns a
JSON-ready dict. Matching is case-insensitive substring containment.
Results keep snapshot order; only suggest_components sorts.
"""

from typing import Optional

from carbon_mcp.catalog.errors import (
    ArgumentError,
    ComponentNotFoundError,
    TokensNotLoadedError,
)
from carbon_mcp.catalog.loader import CatalogLoader
from carbon_mcp.catalog.schemas import Component
from carbon_mcp.catalog.store import CatalogSnapshot, CatalogStore

from .scoring import (
    calculate_intent_score,
    calculate_relevance,
    contains,
    intent_words,
    matches_any_example,
)

MAX_SUGGESTIONS = 5


def _require_str(argument: str, value) -> str:
    if value is None:
        raise ArgumentError(argument)
    if not isinstance(value, str):
        raise ArgumentError(argument, f"Argument '{argument}' must be a string")
    return value


def _optional_str(argument: str, value) -> Optional[str]:
    # An empty filter is the same as no filter
    if value is None:
        return None
    return _require_str(argument, value) or None


def _optional_number(argument: str, value):
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ArgumentError(argument, f"Argument '{argument}' must be a number")
    return value or None


def require_component(snapshot: CatalogSnapshot, name: str) -> Component:
    component = snapshot.find_component(name)
    if component is None:
        raise ComponentNotFoundError(name)
    return component


def _in_category(category: Optional[str], wanted_lower: Optional[str]) -> bool:
    return wanted_lower is None or contains(category, wanted_lower)


def _component_row(comp: Component) -> dict:
    return {
        "name": comp.name,
        "description": comp.description,
        "category": comp.category,
        "importPath": comp.import_path,
    }


def list_components(
    store: CatalogStore, category: str = None, search: str = None
) -> dict:
    """List components, optionally filtered by category and/or text."""
    category = _optional_str("category", category)
    search = _optional_str("search", search)

    category_lower = category.lower() if category is not None else None
    search_lower = search.lower() if search is not None else None

    components = []
    for comp in store.snapshot().components:
        if not _in_category(comp.category, category_lower):
            continue
        if search_lower is not None and not (
            contains(comp.name, search_lower)
            or contains(comp.description, search_lower)
            or contains(comp.when_to_use, search_lower)
        ):
            continue
        row = _component_row(comp)
        row["propsCount"] = len(comp.props)
        components.append(row)

    return {"components": components, "total": len(components)}


def search_components(store: CatalogStore, query: str, category: str = None) -> dict:
    """Find components whose name, description, usage or examples contain query.

    Each hit carries a relevance score; hits are not reordered by it.
    """
    query = _require_str("query", query)
    category = _optional_str("category", category)

    query_lower = query.lower()
    category_lower = category.lower() if category is not None else None

    results = []
    for comp in store.snapshot().components:
        matched = (
            contains(comp.name, query_lower)
            or contains(comp.description, query_lower)
            or contains(comp.when_to_use, query_lower)
            or matches_any_example(comp, query_lower)
        )
        if not matched or not _in_category(comp.category, category_lower):
            continue
        row = _component_row(comp)
        row["relevance"] = calculate_relevance(comp, query)
        results.append(row)

    return {"query": query, "results": results, "total": len(results)}


def get_component(store: CatalogStore, name: str) -> dict:
    name = _require_str("name", name)
    comp = require_component(store.snapshot(), name)
    return {"resourceLink": comp.resource_uri, **_component_row(comp)}


def get_component_props(store: CatalogStore, name: str) -> dict:
    name = _require_str("name", name)
    comp = require_component(store.snapshot(), name)
    return {
        "name": comp.name,
        "props": [prop.to_dict() for prop in comp.props],
        "total": len(comp.props),
    }


def suggest_components(store: CatalogStore, intent: str) -> dict:
    """Rank components by how many intent words appear in their docs.

    Returns:
        Up to MAX_SUGGESTIONS components with a positive score, best first;
        ties keep snapshot order.
    """
    intent = _require_str("intent", intent)
    words = intent_words(intent)

    scored = []
    for comp in store.snapshot().components:
        score = calculate_intent_score(comp, words)
        if score > 0:
            scored.append((comp, score))

    scored.sort(key=lambda item: item[1], reverse=True)

    suggestions = []
    for comp, score in scored[:MAX_SUGGESTIONS]:
        suggestions.append(
            {
                "name": comp.name,
                "description": comp.description,
                "category": comp.category,
                "score": score,
                "importPath": comp.import_path,
            }
        )

    return {"intent": intent, "suggestions": suggestions}


def get_tokens(store: CatalogStore) -> dict:
    tokens = store.snapshot().tokens
    if tokens is None:
        raise TokensNotLoadedError()
    return tokens.to_dict()


def search_icons(
    store: CatalogStore, query: str, category: str = None, size=None
) -> dict:
    """Find icons by name or category, optionally with an exact size."""
    query = _require_str("query", query)
    category = _optional_str("category", category)
    size = _optional_number("size", size)

    query_lower = query.lower()
    category_lower = category.lower() if category is not None else None

    results = []
    for icon in store.snapshot().icons:
        if not (contains(icon.name, query_lower) or contains(icon.category, query_lower)):
            continue
        if not _in_category(icon.category, category_lower):
            continue
        if size is not None and icon.size != size:
            continue
        results.append(
            {
                "name": icon.name,
                "importPath": icon.import_path,
                "category": icon.category,
                "size": icon.size,
            }
        )

    return {"query": query, "results": results, "total": len(results)}


def search_pictograms(store: CatalogStore, query: str, category: str = None) -> dict:
    query = _require_str("query", query)
    category = _optional_str("category", category)

    query_lower = query.lower()
    category_lower = category.lower() if category is not None else None

    results = []
    for pictogram in store.snapshot().pictograms:
        if not (
            contains(pictogram.name, query_lower)
            or contains(pictogram.category, query_lower)
        ):
            continue
        if not _in_category(pictogram.category, category_lower):
            continue
        results.append(
            {
                "name": pictogram.name,
                "importPath": pictogram.import_path,
                "category": pictogram.category,
            }
        )

    return {"query": query, "results": results, "total": len(results)}


def refresh_catalog(store: CatalogStore, loader: CatalogLoader) -> dict:
    """Reload every snapshot file and replace the store contents."""
    stats = loader.load_into(store)
    return {"message": "Catalog reloaded", "stats": stats.to_dict()}
