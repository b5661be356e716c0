from .config import (
    DEBUG,
    CatalogPaths,
    default_data_dir,
    resolve_catalog_paths,
)

__all__ = [
    "DEBUG",
    "CatalogPaths",
    "default_data_dir",
    "resolve_catalog_paths",
]
