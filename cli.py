#!/usr/bin/env python3
"""
CLI interface for react-native-expo-mcp.

Usage:
    expo-docs list
    expo-docs patterns components --topic pressable --compact
    expo-docs setup 7 --router react-navigation
    expo-docs call get-best-practices --arg category=all

This provides the same functionality as the MCP tools but via command line,
making it accessible to agents that don't support MCP.
"""

import argparse
import json
import sys
from typing import Any

from mcp.server.fastmcp.exceptions import ToolError

from content import FAMILIES
from logging_config import configure_logging
from models import ExpoMcpError
from server import call_tool
from server_config import LOG_LEVEL, SERVER_NAME, SERVER_VERSION
from tools import PATTERN_TOOLS, TOOL_NAMES

# Family slug -> tool name
FAMILY_TOOLS = {family: tool for tool, family in PATTERN_TOOLS.items()}


def parse_arg(pair: str) -> tuple[str, Any]:
    """
    Parse one --arg key=value pair.

    Values are read as JSON when they parse (numbers, booleans, lists),
    otherwise kept as plain strings.
    """
    key, sep, raw = pair.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"Expected key=value, got: {pair}")
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        value = raw
    return key, value


def run_tool(name: str, arguments: dict[str, Any]) -> None:
    """Call a tool and print its text; errors go to stderr with exit code 1."""
    try:
        result = call_tool(name, arguments)
    except ExpoMcpError as e:
        print(json.dumps(e.to_dict(), indent=2), file=sys.stderr)
        sys.exit(1)
    except ToolError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)
    print(result.text)


def cmd_list(args: argparse.Namespace) -> None:
    """List tool names."""
    for name in sorted(TOOL_NAMES):
        print(name)


def cmd_call(args: argparse.Namespace) -> None:
    """Call any tool with key=value arguments."""
    run_tool(args.tool, dict(args.arg or []))


def cmd_patterns(args: argparse.Namespace) -> None:
    """Pattern family sections."""
    run_tool(FAMILY_TOOLS[args.family], {"topic": args.topic, "compact": args.compact})


def cmd_setup(args: argparse.Namespace) -> None:
    """Setup tutorial step."""
    run_tool("get-setup-guide", {"step": args.step, "router": args.router})


def cmd_practices(args: argparse.Namespace) -> None:
    """Best practices for a category."""
    run_tool("get-best-practices", {"category": args.category, "router": args.router})


def cmd_generate(args: argparse.Namespace) -> None:
    """Starter project files."""
    run_tool("generate-project-files", {
        "app_name": args.app_name,
        "features": args.features,
        "include_ci": args.ci,
        "include_env_setup": not args.no_env,
        "router": args.router,
    })


def cmd_claude_md(args: argparse.Namespace) -> None:
    """CLAUDE.md for a project."""
    run_tool("generate-claude-md", {
        "app_name": args.app_name,
        "app_description": args.description,
        "features": args.features,
        "router": args.router,
    })


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="expo-docs",
        description="React Native + Expo guidance CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    expo-docs list
    expo-docs patterns state --topic selectors
    expo-docs patterns styling --compact
    expo-docs setup overview
    expo-docs setup 5 --router react-navigation
    expo-docs practices architecture
    expo-docs generate "Acme" --features auth catalog --ci
    expo-docs claude-md "Acme" --description "Online store"
    expo-docs call generate-env-setup --arg app_name=Acme
""",
    )
    parser.add_argument("--version", action="version", version=f"{SERVER_NAME} {SERVER_VERSION}")
    subparsers = parser.add_subparsers(dest="command", required=True)
    routers = ["expo-router", "react-navigation"]

    # list
    list_p = subparsers.add_parser("list", help="List tool names")
    list_p.set_defaults(func=cmd_list)

    # call
    call_p = subparsers.add_parser("call", help="Call any tool by name")
    call_p.add_argument("tool", help="Tool name (see 'list')")
    call_p.add_argument(
        "--arg",
        action="append",
        type=parse_arg,
        metavar="KEY=VALUE",
        help="Tool argument; repeatable. JSON values are decoded.",
    )
    call_p.set_defaults(func=cmd_call)

    # patterns
    patterns_p = subparsers.add_parser("patterns", help="Pattern family sections")
    patterns_p.add_argument("family", choices=sorted(FAMILIES), help="Pattern family")
    patterns_p.add_argument("--topic", help="Single topic key")
    patterns_p.add_argument("--compact", action="store_true", help="Rules only")
    patterns_p.set_defaults(func=cmd_patterns)

    # setup
    setup_p = subparsers.add_parser("setup", help="Setup tutorial")
    setup_p.add_argument("step", help="Step 1-13, 'overview' or 'all'")
    setup_p.add_argument("--router", choices=routers, default="expo-router")
    setup_p.set_defaults(func=cmd_setup)

    # practices
    practices_p = subparsers.add_parser("practices", help="Best practices")
    practices_p.add_argument("category", help="Category name or 'all'")
    practices_p.add_argument("--router", choices=routers, help="Default: both routers")
    practices_p.set_defaults(func=cmd_practices)

    # generate
    generate_p = subparsers.add_parser("generate", help="Starter project files")
    generate_p.add_argument("app_name", help="App name")
    generate_p.add_argument("--features", nargs="+", help="Feature names")
    generate_p.add_argument("--ci", action="store_true", help="Include GitHub Actions workflow")
    generate_p.add_argument("--no-env", action="store_true", help="Skip env/ config files")
    generate_p.add_argument("--router", choices=routers, default="expo-router")
    generate_p.set_defaults(func=cmd_generate)

    # claude-md
    claude_p = subparsers.add_parser("claude-md", help="CLAUDE.md project rules")
    claude_p.add_argument("app_name", help="App name")
    claude_p.add_argument("--description", help="Short app description")
    claude_p.add_argument("--features", nargs="+", help="Main features")
    claude_p.add_argument("--router", choices=routers, default="expo-router")
    claude_p.set_defaults(func=cmd_claude_md)

    return parser


def main(argv: list[str] | None = None) -> None:
    configure_logging(LOG_LEVEL)
    args = build_parser().parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
