# UI catalog: record schemas, snapshot store and snapshot file loading

from .errors import (
    ArgumentError,
    CatalogError,
    CatalogLoadError,
    ComponentNotFoundError,
    TokensNotLoadedError,
    UnknownOperationError,
    UnknownResourceError,
)
from .schemas import (
    TOKEN_CATEGORIES,
    Component,
    Icon,
    LoadStats,
    Pictogram,
    Prop,
    TokenCollection,
)
from .store import CatalogSnapshot, CatalogStore
from .loader import CatalogLoader, CatalogSources

__all__ = [
    # Errors
    "CatalogError",
    "ArgumentError",
    "CatalogLoadError",
    "ComponentNotFoundError",
    "TokensNotLoadedError",
    "UnknownOperationError",
    "UnknownResourceError",
    # Schemas
    "TOKEN_CATEGORIES",
    "Component",
    "Prop",
    "Icon",
    "Pictogram",
    "TokenCollection",
    "LoadStats",
    # Store and loading
    "CatalogSnapshot",
    "CatalogStore",
    "CatalogLoader",
    "CatalogSources",
]
