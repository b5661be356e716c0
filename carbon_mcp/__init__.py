"""MCP server for the Carbon Design System component, token, icon and pictogram catalog."""

__version__ = "0.1.0"
