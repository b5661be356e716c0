"""
Record schemas for the UI catalog.

Each record mirrors one entry of a snapshot file:
- components.json: list of Component (with nested Prop records)
- tokens.json: one TokenCollection object
- icons.json: list of Icon
- pictograms.json: list of Pictogram

Snapshot files use camelCase keys (importPath, whenToUse, defaultValue);
from_dict/to_dict translate between that shape and the dataclasses.
Optional fields are None when absent, so an empty string stays distinct
from a missing value.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

TOKEN_CATEGORIES = ("colors", "themes", "type", "layout", "motion", "grid")


def _require_object(data, owner: str) -> dict:
    if not isinstance(data, dict):
        raise ValueError(f"{owner} entry must be an object, got {type(data).__name__}")
    return data


def _require_name(data: dict, owner: str) -> str:
    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise ValueError(f"{owner} entry is missing a non-empty 'name'")
    return name


def _optional_str(data: dict, key: str, owner: str) -> Optional[str]:
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ValueError(f"{owner} field '{key}' must be a string")


def _drop_none(data: dict) -> dict:
    return {k: v for k, v in data.items() if v is not None}


@dataclass
class Prop:
    """One named property of a component."""

    name: str
    type: str = ""
    required: bool = False
    default_value: Any = None
    description: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "type": self.type,
            "required": self.required,
            "defaultValue": self.default_value,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Prop":
        data = _require_object(data, "prop")
        prop_type = data.get("type", "")
        if not isinstance(prop_type, str):
            raise ValueError("prop field 'type' must be a string")
        required = data.get("required", False)
        if not isinstance(required, bool):
            raise ValueError("prop field 'required' must be a boolean")
        return cls(
            name=_require_name(data, "prop"),
            type=prop_type,
            required=required,
            default_value=data.get("defaultValue"),
            description=_optional_str(data, "description", "prop"),
        )


@dataclass
class Component:
    """Documentation record for one UI component."""

    name: str
    import_path: str = ""
    description: Optional[str] = None
    when_to_use: Optional[str] = None
    examples: list[str] = field(default_factory=list)
    category: Optional[str] = None
    props: list[Prop] = field(default_factory=list)

    @property
    def resource_uri(self) -> str:
        return f"comp://{self.name}"

    def to_dict(self) -> dict:
        return _drop_none(
            {
                "name": self.name,
                "description": self.description,
                "whenToUse": self.when_to_use,
                "examples": list(self.examples),
                "category": self.category,
                "props": [_drop_none(p.to_dict()) for p in self.props],
                "importPath": self.import_path,
            }
        )

    @classmethod
    def from_dict(cls, data: dict) -> "Component":
        data = _require_object(data, "component")
        name = _require_name(data, "component")

        examples = data.get("examples") or []
        if not isinstance(examples, list) or not all(
            isinstance(e, str) for e in examples
        ):
            raise ValueError(f"component '{name}' examples must be a list of strings")

        props = data.get("props") or []
        if not isinstance(props, list):
            raise ValueError(f"component '{name}' props must be a list")

        import_path = data.get("importPath", "")
        if not isinstance(import_path, str):
            raise ValueError(f"component '{name}' importPath must be a string")

        return cls(
            name=name,
            import_path=import_path,
            description=_optional_str(data, "description", "component"),
            when_to_use=_optional_str(data, "whenToUse", "component"),
            examples=list(examples),
            category=_optional_str(data, "category", "component"),
            props=[Prop.from_dict(p) for p in props],
        )


@dataclass
class Icon:
    name: str
    import_path: str = ""
    category: Optional[str] = None
    size: Optional[float] = None
    # Snapshot entry as loaded, extra keys included
    source: Optional[dict] = field(default=None, compare=False, repr=False)

    def to_dict(self) -> dict:
        return _drop_none(
            {
                "name": self.name,
                "importPath": self.import_path,
                "category": self.category,
                "size": self.size,
            }
        )

    @classmethod
    def from_dict(cls, data: dict) -> "Icon":
        data = _require_object(data, "icon")
        size = data.get("size")
        if size is not None and (
            isinstance(size, bool) or not isinstance(size, (int, float))
        ):
            raise ValueError("icon field 'size' must be a number")
        return cls(
            name=_require_name(data, "icon"),
            import_path=data.get("importPath") or "",
            category=_optional_str(data, "category", "icon"),
            size=size,
            source=data,
        )


@dataclass
class Pictogram:
    name: str
    import_path: str = ""
    category: Optional[str] = None
    source: Optional[dict] = field(default=None, compare=False, repr=False)

    def to_dict(self) -> dict:
        return _drop_none(
            {
                "name": self.name,
                "importPath": self.import_path,
                "category": self.category,
            }
        )

    @classmethod
    def from_dict(cls, data: dict) -> "Pictogram":
        data = _require_object(data, "pictogram")
        return cls(
            name=_require_name(data, "pictogram"),
            import_path=data.get("importPath") or "",
            category=_optional_str(data, "category", "pictogram"),
            source=data,
        )


@dataclass
class TokenCollection:
    """Design tokens grouped by category.

    The document is kept exactly as loaded; only the known categories are
    checked to be objects.
    """

    data: dict = field(default_factory=dict)

    def category(self, name: str) -> dict:
        return self.data.get(name) or {}

    def counts(self) -> dict[str, int]:
        """Number of tokens per known category."""
        return {name: len(self.category(name)) for name in TOKEN_CATEGORIES}

    def to_dict(self) -> dict:
        return self.data

    @classmethod
    def from_dict(cls, data: dict) -> "TokenCollection":
        data = _require_object(data, "tokens")
        for name in TOKEN_CATEGORIES:
            value = data.get(name)
            if value is not None and not isinstance(value, dict):
                raise ValueError(f"token category '{name}' must be an object")
        return cls(data=data)


@dataclass
class LoadStats:
    """Collection sizes after a load or refresh."""

    components: int = 0
    icons: int = 0
    pictograms: int = 0
    tokens_loaded: bool = False

    def to_dict(self) -> dict:
        return {
            "components": self.components,
            "icons": self.icons,
            "pictograms": self.pictograms,
            "tokensLoaded": self.tokens_loaded,
        }
