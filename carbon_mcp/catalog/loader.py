"""Reads catalog snapshot files into a CatalogStore.

Every existing file is parsed before the store is touched. If any file is
malformed the whole load fails with CatalogLoadError and the active
snapshot stays as it was. Missing files leave their collection unchanged.
"""

import json
import logging
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from carbon_mcp.core.config import CatalogPaths, resolve_catalog_paths

from .errors import CatalogLoadError
from .schemas import Component, Icon, LoadStats, Pictogram, TokenCollection
from .store import CatalogStore

logger = logging.getLogger("carbon-mcp")


@dataclass
class CatalogSources:
    """Parsed file contents; None marks a file that does not exist."""

    components: Optional[list[Component]] = None
    tokens: Optional[TokenCollection] = None
    icons: Optional[list[Icon]] = None
    pictograms: Optional[list[Pictogram]] = None


def _read_json(path: Path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogLoadError(path, f"invalid JSON ({e})") from e
    except UnicodeDecodeError as e:
        raise CatalogLoadError(path, f"not valid UTF-8 ({e})") from e
    except OSError as e:
        raise CatalogLoadError(path, str(e)) from e


def _read_list(path: Path, parse: Callable[[dict], object]) -> Optional[list]:
    if not path.exists():
        logger.debug("Snapshot file not found, keeping current data: %s", path)
        return None

    data = _read_json(path)
    if not isinstance(data, list):
        raise CatalogLoadError(path, "expected a JSON array")

    try:
        items = [parse(entry) for entry in data]
    except ValueError as e:
        raise CatalogLoadError(path, str(e)) from e

    logger.debug("Loaded %d entries from %s", len(items), path)
    return items


def _read_tokens(path: Path) -> Optional[TokenCollection]:
    if not path.exists():
        logger.debug("Token file not found, keeping current data: %s", path)
        return None

    data = _read_json(path)
    try:
        return TokenCollection.from_dict(data)
    except ValueError as e:
        raise CatalogLoadError(path, str(e)) from e


def _warn_duplicates(components: list[Component]) -> None:
    counts = Counter(c.name.lower() for c in components)
    duplicates = sorted(name for name, n in counts.items() if n > 1)
    if duplicates:
        logger.warning(
            "Duplicate component names (last entry wins): %s", ", ".join(duplicates)
        )


class CatalogLoader:
    """Loads the four snapshot files named by a CatalogPaths."""

    def __init__(self, paths: CatalogPaths = None):
        self.paths = paths or resolve_catalog_paths()

    def read(self) -> CatalogSources:
        sources = CatalogSources(
            components=_read_list(self.paths.components, Component.from_dict),
            tokens=_read_tokens(self.paths.tokens),
            icons=_read_list(self.paths.icons, Icon.from_dict),
            pictograms=_read_list(self.paths.pictograms, Pictogram.from_dict),
        )
        if sources.components:
            _warn_duplicates(sources.components)
        return sources

    def load_into(self, store: CatalogStore) -> LoadStats:
        """Read every source, then swap the results into the store."""
        sources = self.read()
        stats = store.load(
            components=sources.components,
            tokens=sources.tokens,
            icons=sources.icons,
            pictograms=sources.pictograms,
        )
        logger.info(
            "Catalog loaded: %d components, %d icons, %d pictograms, tokens %s",
            stats.components,
            stats.icons,
            stats.pictograms,
            "loaded" if stats.tokens_loaded else "absent",
        )
        return stats
