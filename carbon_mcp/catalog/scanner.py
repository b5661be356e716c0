"""Offline generation of catalog snapshot files.

Builds the four JSON files the loader reads:
- icons.json / pictograms.json from an installed package's metadata.json,
  or by walking its lib/ folder when no metadata is shipped
- tokens.json from per-category token exports (<category>.json)
- components.json from a seed file of component documentation

Usage:
    icons = scan_icons(Path("node_modules/@carbon/icons"))
    write_snapshot(Path("data/icons.json"), [i.to_dict() for i in icons])
"""

import json
import logging
from pathlib import Path
from typing import Optional

from .heuristics import categorize_icon, categorize_pictogram
from .schemas import TOKEN_CATEGORIES, Component, Icon, Pictogram, Prop

logger = logging.getLogger("carbon-mcp")

ICONS_IMPORT_PREFIX = "@carbon/icons-react"
PICTOGRAMS_IMPORT_PREFIX = "@carbon/pictograms-react"
COMPONENTS_IMPORT_PREFIX = "@carbon/react"

# Used when no grid export is available
DEFAULT_GRID_TOKENS = {
    "breakpoints": {
        "sm": "0px",
        "md": "672px",
        "lg": "1056px",
        "xlg": "1312px",
        "max": "1584px",
    },
    "container": {
        "sm": "100%",
        "md": "100%",
        "lg": "100%",
        "xlg": "100%",
        "max": "100%",
    },
}

COMMON_PROPS = [
    Prop("children", "ReactNode", description="Child content of the component"),
    Prop("className", "string", description="Custom CSS class"),
    Prop("id", "string", description="Unique element identifier"),
    Prop("onClick", "() => void", description="Called when the element is clicked"),
]

COMPONENT_PROPS = {
    "Button": [
        Prop(
            "kind",
            '"primary" | "secondary" | "tertiary" | "ghost" | "danger"',
            description="Visual style of the button",
        ),
        Prop("size", '"sm" | "md" | "lg"', description="Button size"),
        Prop("disabled", "boolean", description="Whether the button is disabled"),
    ],
    "Modal": [
        Prop("open", "boolean", required=True, description="Whether the modal is open"),
        Prop(
            "onRequestClose",
            "() => void",
            required=True,
            description="Called to close the modal",
        ),
        Prop("modalHeading", "string", description="Modal title"),
    ],
    "DataTable": [
        Prop("rows", "Array<any>", required=True, description="Table data"),
        Prop(
            "headers",
            "Array<{key: string, header: string}>",
            required=True,
            description="Table headers",
        ),
        Prop("sortable", "boolean", description="Whether the table can be sorted"),
    ],
    "TextInput": [
        Prop("value", "string", description="Input value"),
        Prop(
            "onChange",
            "(event: ChangeEvent<HTMLInputElement>) => void",
            description="Called when the value changes",
        ),
        Prop("placeholder", "string", description="Placeholder text"),
        Prop("type", "string", description="Input type (text, email, password, etc.)"),
    ],
    "Select": [
        Prop("value", "string", description="Selected value"),
        Prop(
            "onChange",
            "(event: ChangeEvent<HTMLSelectElement>) => void",
            description="Called when the selection changes",
        ),
        Prop(
            "options",
            "Array<{value: string, text: string}>",
            required=True,
            description="Available options",
        ),
    ],
    "Checkbox": [
        Prop("checked", "boolean", description="Whether the checkbox is checked"),
        Prop("onChange", "(checked: boolean) => void", description="Called when the state changes"),
        Prop("labelText", "string", description="Label text"),
    ],
    "RadioButton": [
        Prop("checked", "boolean", description="Whether the radio button is selected"),
        Prop("onChange", "(checked: boolean) => void", description="Called when the state changes"),
        Prop("labelText", "string", description="Label text"),
        Prop("name", "string", required=True, description="Radio group name"),
    ],
}


def _load_metadata(package_dir: Path, key: str) -> Optional[list]:
    meta_path = package_dir / "metadata.json"
    if not meta_path.exists():
        return None
    try:
        with open(meta_path, "r", encoding="utf-8") as f:
            metadata = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable metadata %s: %s", meta_path, e)
        return None
    if not isinstance(metadata, dict):
        return None
    return metadata.get(key) or []


def _module_names(package_dir: Path) -> list[str]:
    """Names of the JS modules under lib/, excluding index files."""
    lib_dir = package_dir / "lib"
    if not lib_dir.is_dir():
        return []
    names = {p.stem for p in lib_dir.rglob("*.js") if p.stem != "index"}
    return sorted(names)


def scan_icons(package_dir: Path, import_prefix: str = ICONS_IMPORT_PREFIX) -> list[Icon]:
    """Index the icons of an installed icon package."""
    entries = _load_metadata(package_dir, "icons")
    if entries is not None:
        icons = [
            Icon(
                name=entry["name"],
                import_path=f"{import_prefix}/{entry['name']}",
                category=entry.get("category"),
                size=entry.get("size"),
            )
            for entry in entries
            if isinstance(entry, dict) and entry.get("name")
        ]
        logger.info("Loaded %d icons from metadata", len(icons))
        return icons

    icons = [
        Icon(name=name, import_path=f"{import_prefix}/{name}", category=categorize_icon(name))
        for name in _module_names(package_dir)
    ]
    logger.info("Found %d icons by scanning %s", len(icons), package_dir / "lib")
    return icons


def scan_pictograms(
    package_dir: Path, import_prefix: str = PICTOGRAMS_IMPORT_PREFIX
) -> list[Pictogram]:
    """Index the pictograms of an installed pictogram package."""
    entries = _load_metadata(package_dir, "pictograms")
    if entries is not None:
        pictograms = [
            Pictogram(
                name=entry["name"],
                import_path=f"{import_prefix}/{entry['name']}",
                category=entry.get("category"),
            )
            for entry in entries
            if isinstance(entry, dict) and entry.get("name")
        ]
        logger.info("Loaded %d pictograms from metadata", len(pictograms))
        return pictograms

    pictograms = [
        Pictogram(
            name=name,
            import_path=f"{import_prefix}/{name}",
            category=categorize_pictogram(name),
        )
        for name in _module_names(package_dir)
    ]
    logger.info("Found %d pictograms by scanning %s", len(pictograms), package_dir / "lib")
    return pictograms


def scan_tokens(tokens_dir: Path) -> dict:
    """Collect token exports, one <category>.json per category."""
    tokens = {name: {} for name in TOKEN_CATEGORIES}
    for name in TOKEN_CATEGORIES:
        path = tokens_dir / f"{name}.json"
        if not path.exists():
            continue
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Token export {path} must be a JSON object")
        tokens[name] = data

    if not tokens["grid"]:
        logger.info("No grid tokens in %s, using default breakpoints", tokens_dir)
        tokens["grid"] = json.loads(json.dumps(DEFAULT_GRID_TOKENS))

    return tokens


def build_components(
    seed_path: Path, import_prefix: str = COMPONENTS_IMPORT_PREFIX
) -> list[Component]:
    """Build component records from a seed file.

    The seed maps component name to {description, whenToUse, examples,
    category}. Every component gets the common props, followed by the props
    known for that component.
    """
    with open(seed_path, "r", encoding="utf-8") as f:
        seed = json.load(f)
    if not isinstance(seed, dict):
        raise ValueError(f"Seed file {seed_path} must map component names to objects")

    components = []
    for name, info in seed.items():
        info = info or {}
        if not isinstance(info, dict):
            raise ValueError(f"Seed entry '{name}' in {seed_path} must be an object")
        components.append(
            Component(
                name=name,
                import_path=f"{import_prefix}/{name}",
                description=info.get("description") or "",
                when_to_use=info.get("whenToUse") or "",
                examples=list(info.get("examples") or []),
                category=info.get("category") or "Other",
                props=[*COMMON_PROPS, *COMPONENT_PROPS.get(name, [])],
            )
        )

    components.sort(key=lambda c: c.name)
    logger.info("Built %d components from %s", len(components), seed_path)
    return components


def write_snapshot(path: Path, value) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(value, f, indent=2)
