"""Register the carbon-mcp server in an editor's mcp.json."""

import json
import logging
import platform
from pathlib import Path
from typing import Optional

from carbon_mcp.core.config import CatalogPaths

logger = logging.getLogger("carbon-mcp")

SERVER_NAME = "carbon-mcp"
SERVER_COMMAND = "carbon-mcp"


def build_server_entry(paths: CatalogPaths, command: str = SERVER_COMMAND) -> dict:
    return {"command": command, "args": [], "env": paths.as_env()}


def candidate_config_paths(home: Path, system: str) -> list[Path]:
    """Possible mcp.json locations, most common first."""
    candidates = [home / ".cursor" / "mcp.json"]
    if system == "Windows":
        roaming = home / "AppData" / "Roaming" / "Cursor"
        candidates += [roaming / "User" / "mcp.json", roaming / "mcp.json"]
    elif system == "Darwin":
        support = home / "Library" / "Application Support" / "Cursor"
        candidates += [support / "User" / "mcp.json", support / "mcp.json"]
    elif system == "Linux":
        config = home / ".config" / "Cursor"
        candidates += [config / "User" / "mcp.json", config / "mcp.json"]
    return candidates


def find_editor_config_path(
    home: Optional[Path] = None, system: Optional[str] = None
) -> Path:
    """Return the first existing mcp.json, or the default location."""
    home = home or Path.home()
    system = system or platform.system()

    candidates = candidate_config_paths(home, system)
    for path in candidates:
        if path.exists():
            return path
    return candidates[0]


def update_editor_config(config_path: Path, entry: dict) -> str:
    """Add or replace the carbon-mcp entry in an mcp.json file.

    Returns:
        "unchanged", "updated" or "added"
    """
    config = {"mcpServers": {}}
    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError:
            logger.warning("Corrupt editor config %s, replacing it", config_path)
            config = {"mcpServers": {}}
        if not isinstance(config, dict):
            config = {"mcpServers": {}}

    servers = config.setdefault("mcpServers", {})
    existing = servers.get(SERVER_NAME)
    if existing == entry:
        return "unchanged"

    servers[SERVER_NAME] = entry
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=2)

    return "updated" if existing is not None else "added"
