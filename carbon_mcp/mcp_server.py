"""MCP Server for the Carbon Design System catalog.

Tools:
  - carbon.list, carbon.search, carbon.get, carbon.props, carbon.suggest
  - carbon.tokens, carbon.icons.search, carbon.pictograms.search
  - carbon.refresh

Resources:
  - comp://{name}, ds://tokens, icons://list, pictograms://list

Requires: snapshot files in ./data (or CARBON_DB / CARBON_TOKENS /
CARBON_ICONS / CARBON_PICTOS). Generate them with `carbon-mcp-catalog scan`.

Usage:
    # Run directly (stdio transport)
    python mcp_server.py

    # Add to an editor's mcp.json:
    {
        "mcpServers": {
            "carbon-mcp": {
                "command": "carbon-mcp"
            }
        }
    }
"""

import json
import logging
import sys
from pathlib import Path

logger = logging.getLogger("carbon-mcp")

# Support source-based invocation:
#   python /path/to/repo/carbon_mcp/mcp_server.py
# In that mode, sys.path[0] is the package directory itself, so absolute
# imports like `from carbon_mcp...` need the repo root added explicitly.
if __package__ in (None, ""):
    repo_root = Path(__file__).resolve().parent.parent
    repo_root_str = str(repo_root)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)

from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from mcp.types import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    ErrorData,
    Resource,
    ResourceTemplate,
    TextContent,
    Tool,
)

from carbon_mcp import __version__
from carbon_mcp.catalog import (
    ArgumentError,
    CatalogError,
    CatalogLoadError,
    CatalogLoader,
    CatalogStore,
    ComponentNotFoundError,
    UnknownOperationError,
    UnknownResourceError,
)
from carbon_mcp.core import DEBUG, resolve_catalog_paths
from carbon_mcp.resources import (
    ICONS_URI,
    JSON_MIME,
    MARKDOWN,
    PICTOGRAMS_URI,
    TOKENS_URI,
    read_resource as read_resource_document,
)
from carbon_mcp.search import (
    get_component,
    get_component_props,
    get_tokens,
    list_components,
    refresh_catalog,
    search_components,
    search_icons,
    search_pictograms,
    suggest_components,
)

SERVER_NAME = "carbon-mcp"


# =============================================================================
# MCP Tool Definitions
# =============================================================================

TOOLS = [
    Tool(
        name="carbon.list",
        description="List @carbon/react components with optional filters.",
        inputSchema={
            "type": "object",
            "properties": {
                "category": {
                    "type": "string",
                    "description": "Filter by category (Form, Data Display, Navigation, etc.)",
                },
                "search": {
                    "type": "string",
                    "description": "Match against name, description or usage notes",
                },
            },
        },
    ),
    Tool(
        name="carbon.search",
        description="""Search components by name, description, usage notes or examples.

Each result carries a relevance score:
  name +10, description +5, when-to-use +3, examples +2.""",
        inputSchema={
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Search term"},
                "category": {"type": "string", "description": "Filter by category"},
            },
            "required": ["query"],
        },
    ),
    Tool(
        name="carbon.get",
        description="Return a resource link (comp://<name>) for one component.",
        inputSchema={
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "Component name"},
            },
            "required": ["name"],
        },
    ),
    Tool(
        name="carbon.props",
        description="Return the typed props of a component.",
        inputSchema={
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "Component name"},
            },
            "required": ["name"],
        },
    ),
    Tool(
        name="carbon.suggest",
        description="""Map a described intent to recommended components.

Example: "I need a clickable action" → Button""",
        inputSchema={
            "type": "object",
            "properties": {
                "intent": {
                    "type": "string",
                    "description": "Description of the desired behavior or use",
                },
            },
            "required": ["intent"],
        },
    ),
    Tool(
        name="carbon.tokens",
        description="Return design tokens (colors, themes, type, layout, motion, grid).",
        inputSchema={"type": "object", "properties": {}},
    ),
    Tool(
        name="carbon.icons.search",
        description="Search icons by name or category.",
        inputSchema={
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Search term"},
                "category": {"type": "string", "description": "Filter by category"},
                "size": {
                    "type": "number",
                    "description": "Filter by size (16, 20, 24, 32)",
                },
            },
            "required": ["query"],
        },
    ),
    Tool(
        name="carbon.pictograms.search",
        description="Search pictograms by name or category.",
        inputSchema={
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Search term"},
                "category": {"type": "string", "description": "Filter by category"},
            },
            "required": ["query"],
        },
    ),
    Tool(
        name="carbon.refresh",
        description="Reload the catalog snapshot files (components, tokens, icons, pictograms).",
        inputSchema={"type": "object", "properties": {}},
    ),
]

RESOURCES = [
    Resource(
        uri=TOKENS_URI,
        name="Design System Tokens",
        description="All Carbon Design System tokens",
        mimeType=JSON_MIME,
    ),
    Resource(
        uri=ICONS_URI,
        name="Icons List",
        description="Index of every available icon",
        mimeType=JSON_MIME,
    ),
    Resource(
        uri=PICTOGRAMS_URI,
        name="Pictograms List",
        description="Index of every available pictogram",
        mimeType=JSON_MIME,
    ),
]

RESOURCE_TEMPLATES = [
    ResourceTemplate(
        uriTemplate="comp://{name}",
        name="Component Documentation",
        description="Full documentation page for a Carbon React component",
        mimeType=MARKDOWN,
    ),
]


def to_mcp_error(error: CatalogError) -> McpError:
    """Translate a catalog failure into an MCP error response.

    Used for resource reads, where the error code reaches the client.
    """
    if isinstance(error, UnknownOperationError):
        code = METHOD_NOT_FOUND
    elif isinstance(
        error, (ComponentNotFoundError, UnknownResourceError, ArgumentError)
    ):
        code = INVALID_PARAMS
    else:
        code = INTERNAL_ERROR
    return McpError(ErrorData(code=code, message=str(error)))


def dispatch_tool(
    store: CatalogStore, loader: CatalogLoader, name: str, arguments: dict
) -> dict:
    """Run one tool call against the catalog and return its JSON result."""
    if name == "carbon.list":
        return list_components(
            store,
            category=arguments.get("category"),
            search=arguments.get("search"),
        )
    elif name == "carbon.search":
        return search_components(
            store,
            query=arguments.get("query"),
            category=arguments.get("category"),
        )
    elif name == "carbon.get":
        return get_component(store, arguments.get("name"))
    elif name == "carbon.props":
        return get_component_props(store, arguments.get("name"))
    elif name == "carbon.suggest":
        return suggest_components(store, arguments.get("intent"))
    elif name == "carbon.tokens":
        return get_tokens(store)
    elif name == "carbon.icons.search":
        return search_icons(
            store,
            query=arguments.get("query"),
            category=arguments.get("category"),
            size=arguments.get("size"),
        )
    elif name == "carbon.pictograms.search":
        return search_pictograms(
            store,
            query=arguments.get("query"),
            category=arguments.get("category"),
        )
    elif name == "carbon.refresh":
        return refresh_catalog(store, loader)
    raise UnknownOperationError(name)


def create_server(store: CatalogStore, loader: CatalogLoader) -> Server:
    """Build the MCP server bound to a catalog store and its loader."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return TOOLS

    @server.call_tool()
    async def call_tool(name: str, arguments: dict) -> list[TextContent]:
        """Handle tool calls.

        Catalog errors propagate; the server reports them to the client as
        an isError result whose text is the error message.
        """
        try:
            result = dispatch_tool(store, loader, name, arguments or {})
        except CatalogError as e:
            logger.debug("Tool %s failed: %s", name, e)
            raise

        return [
            TextContent(type="text", text=json.dumps(result, indent=2, default=str))
        ]

    @server.list_resources()
    async def list_resources() -> list[Resource]:
        return RESOURCES

    @server.list_resource_templates()
    async def list_resource_templates() -> list[ResourceTemplate]:
        return RESOURCE_TEMPLATES

    @server.read_resource()
    async def read_resource(uri) -> list[ReadResourceContents]:
        """Render a component page or one of the catalog JSON documents."""
        try:
            # AnyUrl may serialize with a trailing slash
            document = read_resource_document(store, str(uri).rstrip("/"))
        except CatalogError as e:
            raise to_mcp_error(e) from e
        return [ReadResourceContents(content=document.text, mime_type=document.mime_type)]

    return server


# =============================================================================
# Main
# =============================================================================


async def main():
    """Load the catalog and run the MCP server over stdio."""
    # Enable debug logging when CARBON_MCP_DEBUG is set
    if DEBUG:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s %(levelname)s: %(message)s",
            stream=sys.stderr,
        )
    else:
        logging.basicConfig(level=logging.WARNING, stream=sys.stderr)

    paths = resolve_catalog_paths()
    store = CatalogStore()
    loader = CatalogLoader(paths)

    print("Carbon MCP Server", file=sys.stderr)
    print(f"Data: {paths.data_dir}", file=sys.stderr)

    try:
        stats = loader.load_into(store)
    except CatalogLoadError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    print(
        f"Loaded: {stats.components} components, {stats.icons} icons, "
        f"{stats.pictograms} pictograms, tokens "
        f"{'loaded' if stats.tokens_loaded else 'missing'}",
        file=sys.stderr,
    )
    if stats.components == 0:
        print(
            "Warning: No components found. Run 'carbon-mcp-catalog scan' first.",
            file=sys.stderr,
        )

    server = create_server(store, loader)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream, write_stream, server.create_initialization_options()
        )


def cli_main():
    """Entry point for the carbon-mcp command."""
    import asyncio

    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
