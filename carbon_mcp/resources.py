"""Addressable catalog documents.

  - comp://<name>       Markdown page for one component
  - ds://tokens         Design tokens (JSON)
  - icons://list        Icon index (JSON)
  - pictograms://list   Pictogram index (JSON)
"""

import json
from dataclasses import dataclass

from carbon_mcp.catalog.errors import TokensNotLoadedError, UnknownResourceError
from carbon_mcp.catalog.schemas import Component, Prop
from carbon_mcp.catalog.store import CatalogSnapshot, CatalogStore
from carbon_mcp.search.engine import require_component

COMPONENT_SCHEME = "comp://"
TOKENS_URI = "ds://tokens"
ICONS_URI = "icons://list"
PICTOGRAMS_URI = "pictograms://list"

MARKDOWN = "text/markdown"
JSON_MIME = "application/json"


@dataclass
class ResourceDocument:
    uri: str
    mime_type: str
    text: str


def _cell(value) -> str:
    """Format a markdown table cell; pipes would split the cell."""
    return str(value).replace("|", "\\|")


def _format_default(value) -> str:
    if value is None:
        return "-"
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _prop_row(prop: Prop) -> str:
    return "| {} | `{}` | {} | {} | {} |".format(
        _cell(prop.name),
        _cell(prop.type),
        "Yes" if prop.required else "No",
        _cell(_format_default(prop.default_value)),
        _cell(prop.description) if prop.description else "-",
    )


def render_component_document(component: Component) -> str:
    """Render the markdown page for a component.

    Sections appear in a fixed order and only when they have content; the
    Import section is always present.
    """
    md = f"# {component.name}\n\n"

    if component.description:
        md += f"## Description\n\n{component.description}\n\n"

    if component.when_to_use:
        md += f"## When to use\n\n{component.when_to_use}\n\n"

    if component.examples:
        md += "## Examples\n\n"
        for index, example in enumerate(component.examples, start=1):
            md += f"{index}. {example}\n"
        md += "\n"

    md += (
        "## Import\n\n```javascript\n"
        f"import {{ {component.name} }} from '{component.import_path}';\n"
        "```\n\n"
    )

    if component.props:
        md += "## Props\n\n"
        md += "| Name | Type | Required | Default | Description |\n"
        md += "|------|------|----------|---------|-------------|\n"
        for prop in component.props:
            md += _prop_row(prop) + "\n"
        md += "\n"

    if component.category:
        md += f"## Category\n\n{component.category}\n\n"

    return md


def render_tokens_document(snapshot: CatalogSnapshot) -> str:
    if snapshot.tokens is None:
        raise TokensNotLoadedError()
    return json.dumps(snapshot.tokens.to_dict(), indent=2)


def _as_loaded(record) -> dict:
    return record.source if record.source is not None else record.to_dict()


def render_icons_document(snapshot: CatalogSnapshot) -> str:
    return json.dumps([_as_loaded(icon) for icon in snapshot.icons], indent=2)


def render_pictograms_document(snapshot: CatalogSnapshot) -> str:
    return json.dumps([_as_loaded(p) for p in snapshot.pictograms], indent=2)


def read_resource(store: CatalogStore, uri: str) -> ResourceDocument:
    """Resolve a resource URI against the current snapshot and render it."""
    snapshot = store.snapshot()

    if uri.startswith(COMPONENT_SCHEME):
        name = uri[len(COMPONENT_SCHEME) :]
        if not name:
            raise UnknownResourceError(uri)
        component = require_component(snapshot, name)
        return ResourceDocument(
            uri=component.resource_uri,
            mime_type=MARKDOWN,
            text=render_component_document(component),
        )
    if uri == TOKENS_URI:
        return ResourceDocument(uri, JSON_MIME, render_tokens_document(snapshot))
    if uri == ICONS_URI:
        return ResourceDocument(uri, JSON_MIME, render_icons_document(snapshot))
    if uri == PICTOGRAMS_URI:
        return ResourceDocument(uri, JSON_MIME, render_pictograms_document(snapshot))

    raise UnknownResourceError(uri)
