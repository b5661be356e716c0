import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

# Set CARBON_MCP_DEBUG=1 to get debug logging on stderr
DEBUG = os.environ.get("CARBON_MCP_DEBUG", "").lower() in ("1", "true", "yes")

COMPONENTS_FILE = "components.json"
TOKENS_FILE = "tokens.json"
ICONS_FILE = "icons.json"
PICTOGRAMS_FILE = "pictograms.json"

# Environment settings, one per snapshot file
ENV_COMPONENTS = "CARBON_DB"
ENV_TOKENS = "CARBON_TOKENS"
ENV_ICONS = "CARBON_ICONS"
ENV_PICTOGRAMS = "CARBON_PICTOS"
ENV_DATA_DIR = "CARBON_DATA_DIR"


@dataclass(frozen=True)
class CatalogPaths:
    """Locations of the four catalog snapshot files."""

    components: Path
    tokens: Path
    icons: Path
    pictograms: Path

    @property
    def data_dir(self) -> Path:
        return self.components.parent

    def as_env(self) -> dict[str, str]:
        """Return the paths as the environment settings that select them."""
        return {
            ENV_COMPONENTS: str(self.components),
            ENV_TOKENS: str(self.tokens),
            ENV_ICONS: str(self.icons),
            ENV_PICTOGRAMS: str(self.pictograms),
        }


def default_data_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    if environ is None:
        environ = os.environ
    data_dir = environ.get(ENV_DATA_DIR)
    if data_dir:
        return Path(data_dir).expanduser()
    return Path.cwd() / "data"


def resolve_catalog_paths(
    environ: Optional[Mapping[str, str]] = None,
) -> CatalogPaths:
    """Resolve snapshot file locations from the environment.

    CARBON_DB names the component catalog; its directory is the base data
    directory for every other file that has no override of its own. Without
    CARBON_DB the base directory is CARBON_DATA_DIR, or ./data.

    Args:
        environ: Mapping to read settings from (default: os.environ)

    Returns:
        CatalogPaths with all four locations filled in
    """
    if environ is None:
        environ = os.environ

    components_override = environ.get(ENV_COMPONENTS)
    if components_override:
        components = Path(components_override).expanduser()
        data_dir = components.parent
    else:
        data_dir = default_data_dir(environ)
        components = data_dir / COMPONENTS_FILE

    def _pick(env_name: str, filename: str) -> Path:
        override = environ.get(env_name)
        if override:
            return Path(override).expanduser()
        return data_dir / filename

    return CatalogPaths(
        components=components,
        tokens=_pick(ENV_TOKENS, TOKENS_FILE),
        icons=_pick(ENV_ICONS, ICONS_FILE),
        pictograms=_pick(ENV_PICTOGRAMS, PICTOGRAMS_FILE),
    )
