#!/usr/bin/env python3
"""
Carbon MCP - Catalog Management CLI

Usage:
    carbon-mcp-catalog status                       Show snapshot paths and counts
    carbon-mcp-catalog scan --seed seed.json        Build components.json
    carbon-mcp-catalog scan --icons DIR --pictograms DIR --tokens DIR
                                                    Build icon/pictogram/token files
    carbon-mcp-catalog mcp-config                   Print the editor mcp.json entry
    carbon-mcp-catalog mcp-config --write           Add/update it in the editor config
"""

import argparse
import json
import os
import sys
from pathlib import Path


def cmd_status(args):
    """Show where the snapshot files live and what they contain."""
    from carbon_mcp.catalog import CatalogLoadError, CatalogLoader, CatalogStore
    from carbon_mcp.core import resolve_catalog_paths

    paths = resolve_catalog_paths()
    print("Snapshot files:")
    for label, path in (
        ("Components", paths.components),
        ("Tokens", paths.tokens),
        ("Icons", paths.icons),
        ("Pictograms", paths.pictograms),
    ):
        marker = "" if path.exists() else "  (missing)"
        print(f"  {label}: {path}{marker}")
    print()

    store = CatalogStore()
    try:
        stats = CatalogLoader(paths).load_into(store)
    except CatalogLoadError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    print("Catalog:")
    print(f"  Components: {stats.components}")
    print(f"  Icons: {stats.icons}")
    print(f"  Pictograms: {stats.pictograms}")

    tokens = store.snapshot().tokens
    if tokens is None:
        print("  Tokens: not loaded")
    else:
        print("  Tokens:")
        for category, count in tokens.counts().items():
            print(f"    {category}: {count}")


def cmd_scan(args):
    """Generate snapshot files from installed packages and a seed file."""
    from carbon_mcp.catalog import scanner

    out_dir = Path(args.out).expanduser()
    if not any([args.seed, args.icons, args.pictograms, args.tokens]):
        print("ERROR: Nothing to scan. Pass --seed, --icons, --pictograms or --tokens")
        sys.exit(1)

    try:
        if args.seed:
            components = scanner.build_components(Path(args.seed).expanduser())
            scanner.write_snapshot(
                out_dir / "components.json", [c.to_dict() for c in components]
            )
            with_examples = sum(1 for c in components if c.examples)
            print(f"Components: {len(components)} ({with_examples} with examples)")

        if args.tokens:
            tokens = scanner.scan_tokens(Path(args.tokens).expanduser())
            scanner.write_snapshot(out_dir / "tokens.json", tokens)
            print(f"Tokens: {len(tokens)} categories")

        if args.icons:
            icons = scanner.scan_icons(Path(args.icons).expanduser())
            scanner.write_snapshot(out_dir / "icons.json", [i.to_dict() for i in icons])
            print(f"Icons: {len(icons)}")

        if args.pictograms:
            pictograms = scanner.scan_pictograms(Path(args.pictograms).expanduser())
            scanner.write_snapshot(
                out_dir / "pictograms.json", [p.to_dict() for p in pictograms]
            )
            print(f"Pictograms: {len(pictograms)}")

    except (OSError, ValueError) as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    print()
    print(f"Snapshot files written to: {out_dir}")


def cmd_mcp_config(args):
    """Print or install the editor configuration for the MCP server."""
    from carbon_mcp import editor_config
    from carbon_mcp.core import resolve_catalog_paths

    paths = resolve_catalog_paths()
    entry = editor_config.build_server_entry(paths)

    if not args.write:
        print(
            json.dumps({"mcpServers": {editor_config.SERVER_NAME: entry}}, indent=2)
        )
        return

    if args.config:
        config_path = Path(args.config).expanduser()
    else:
        config_path = editor_config.find_editor_config_path()

    try:
        outcome = editor_config.update_editor_config(config_path, entry)
    except OSError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    if outcome == "unchanged":
        print(f"{editor_config.SERVER_NAME} already configured in {config_path}")
    else:
        print(f"{editor_config.SERVER_NAME} {outcome} in {config_path}")
        print("Restart the editor to apply the change.")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Carbon MCP catalog management",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("status", help="Show snapshot paths and catalog counts")

    scan_parser = subparsers.add_parser("scan", help="Generate snapshot files")
    scan_parser.add_argument("--seed", help="Component seed JSON file")
    scan_parser.add_argument("--icons", help="Installed icon package directory")
    scan_parser.add_argument("--pictograms", help="Installed pictogram package directory")
    scan_parser.add_argument("--tokens", help="Directory of <category>.json token exports")
    scan_parser.add_argument(
        "--out",
        default=os.environ.get("CARBON_DATA_DIR", "data"),
        help="Output directory (default: $CARBON_DATA_DIR or ./data)",
    )

    config_parser = subparsers.add_parser(
        "mcp-config", help="Print or write the editor MCP configuration"
    )
    config_parser.add_argument(
        "--write", action="store_true", help="Update the editor's mcp.json"
    )
    config_parser.add_argument("--config", help="Explicit mcp.json path")

    args = parser.parse_args(argv)

    if args.command == "scan":
        cmd_scan(args)
    elif args.command == "mcp-config":
        cmd_mcp_config(args)
    else:
        cmd_status(args)


if __name__ == "__main__":
    main()
