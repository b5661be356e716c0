from .engine import (
    MAX_SUGGESTIONS,
    get_component,
    get_component_props,
    get_tokens,
    list_components,
    refresh_catalog,
    require_component,
    search_components,
    search_icons,
    search_pictograms,
    suggest_components,
)

__all__ = [
    "MAX_SUGGESTIONS",
    "get_component",
    "get_component_props",
    "get_tokens",
    "list_components",
    "refresh_catalog",
    "require_component",
    "search_components",
    "search_icons",
    "search_pictograms",
    "suggest_components",
]
