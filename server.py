#!/usr/bin/env python3
"""
React Native + Expo MCP Server

Serves a fixed catalog of React Native / Expo guidance as MCP tools:
pattern cheat-sheets, a 13-step setup tutorial, best practices, and
generators for starter files, CLAUDE.md and env setup.

Every tool returns one text item. Unknown topics, steps and categories are
answered with guidance text listing the valid keys, not with errors.

Documentation is provided via MCP Resources, not a tool.

Architecture:
- content/: Markdown catalog loaded once into immutable registries
- resolvers/: Pure functions (no MCP) from arguments to catalog text
- generators/: Pure document builders for new projects
- tools/: Tool implementations (logging, result wrapping)
- server.py: Thin MCP wrappers (this file)
"""

import os
import signal
import sys
from typing import Annotated, Any, Callable, Literal

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from mcp.types import TextContent
from pydantic import Field

from content import FAMILIES, INIT_MOBILE_PROJECT_PROMPT
from logging_config import configure_logging, logger
from models import Router, ToolResult, UnknownToolError
from resolvers.patterns import list_topics
from resources.tools import get_tool_registry
from server_config import DEFAULT_ROUTER, LOG_LEVEL, SERVER_NAME, SERVER_VERSION
from tools import (
    do_get_patterns, do_get_setup_guide, do_get_best_practices, do_setup_new_project,
    do_get_troubleshooting, do_get_cheat_sheet, do_generate_project_files,
    do_generate_claude_md, do_generate_env_setup, PATTERN_TOOLS, TOOL_NAMES,
)

RouterName = Literal["expo-router", "react-navigation"]
CategoryName = Literal[
    "stack-choice", "architecture", "styling", "components", "state-management",
    "navigation", "performance", "recommendations", "all",
]


def _router(value: str | None) -> Router:
    return Router(value) if value else DEFAULT_ROUTER


def _optional_router(value: str | None) -> Router | None:
    return Router(value) if value else None


def _pattern_handler(tool: str) -> Callable[[dict[str, Any]], ToolResult]:
    return lambda p: do_get_patterns(tool, p.get("topic"), p.get("compact", False))


# Dispatch table for every tool.
# Each handler receives the arguments dict; missing optionals take defaults.
_DISPATCH: dict[str, Callable[[dict[str, Any]], ToolResult]] = {
    **{tool: _pattern_handler(tool) for tool in PATTERN_TOOLS},
    "get-setup-guide": lambda p: do_get_setup_guide(p["step"], _router(p.get("router"))),
    "setup-new-project": lambda p: do_setup_new_project(),
    "get-best-practices": lambda p: do_get_best_practices(
        p["category"], _optional_router(p.get("router")),
    ),
    "get-troubleshooting": lambda p: do_get_troubleshooting(),
    "get-cheat-sheet": lambda p: do_get_cheat_sheet(),
    "generate-project-files": lambda p: do_generate_project_files(
        app_name=p["app_name"], features=p.get("features"),
        include_ci=p.get("include_ci", False),
        include_env_setup=p.get("include_env_setup", True),
        router=_router(p.get("router")),
    ),
    "generate-claude-md": lambda p: do_generate_claude_md(
        app_name=p["app_name"], app_description=p.get("app_description"),
        features=p.get("features"), router=_router(p.get("router")),
    ),
    "generate-env-setup": lambda p: do_generate_env_setup(app_name=p["app_name"]),
}


def call_tool(name: str, arguments: dict[str, Any] | None = None) -> ToolResult:
    """
    Route a tool call through the dispatch table.

    Raises:
        UnknownToolError: name isn't a registered tool
        ToolError: the handler failed (logged with traceback; the server keeps serving)
    """
    handler = _DISPATCH.get(name)
    if handler is None:
        raise UnknownToolError(name, sorted(TOOL_NAMES))
    try:
        return handler(arguments or {})
    except Exception as e:
        logger.exception(f"Tool {name} failed")
        raise ToolError(f"{name} failed: {e}") from e


def _respond(name: str, **arguments: Any) -> list[TextContent]:
    """Run a tool and wrap its text in the response envelope."""
    result = call_tool(name, arguments)
    return [TextContent(**item) for item in result.to_content()]


# Initialize MCP server
mcp = FastMCP(
    SERVER_NAME,
    instructions=(
        "React Native + Expo guidance. Call the matching get-*-patterns tool before "
        "writing a component, screen, store, API hook or style; pass topic for one "
        "section and compact=true for rules only."
    ),
)


# ============================================================================
# TOOLS — Pattern families (one tool per family)
# ============================================================================

PATTERN_DESCRIPTIONS: dict[str, str] = {
    "get-component-patterns": (
        "Get React Native component patterns. Call this when creating any component: "
        "button, card, list item, image, form input. Covers Pressable, expo-image, "
        "React.memo, React Compiler, composable pattern, and uncontrolled TextInput."
    ),
    "get-screen-architecture": (
        "Get screen architecture patterns (Logic/UI separation). Call this when creating "
        "a new screen or route. Covers the Route file + ScreenUI file split, naming "
        "conventions, and why it matters for testability and SOLID principles."
    ),
    "get-navigation-patterns": (
        "Get Expo Router navigation patterns. Call this when working with routes, "
        "navigation, deep links, or auth guards. Covers file structure, layouts, AuthGuard, "
        "typed params, navigation API, deep linking, and layout groups."
    ),
    "get-state-patterns": (
        "Get state management patterns (Zustand + MMKV). Call this when creating a store "
        "or working with global state. Covers Zustand store setup, MMKV persistence adapter, "
        "selectors, useShallow, getState() for outside React, and store organization rules."
    ),
    "get-api-patterns": (
        "Get API and data fetching patterns (Axios + TanStack Query). Call this when "
        "creating API services or data fetching hooks. Covers Axios client with interceptors, "
        "domain-grouped services, custom query/mutation hooks, query key conventions, "
        "and QueryClient config."
    ),
    "get-styling-patterns": (
        "Get styling patterns (NativeWind / Tailwind CSS). Call this when styling components. "
        "Covers NativeWind v4 className approach, arbitrary values, cssInterop for "
        "third-party components, Tailwind config, JS constants, conditional styles, "
        "and setup checklist."
    ),
    "get-performance-patterns": (
        "Get performance optimization patterns. Call this when optimizing lists, images, "
        "bundle size, or animations. Covers FlashList/FlatList, image optimization, "
        "tree-shaking, barrel exports, React Compiler, Concurrent React (useDeferredValue, "
        "useTransition), InteractionManager, and Reanimated worklets."
    ),
    "get-project-structure": (
        "Get project folder structure and file placement guide. Call this when deciding "
        "where to place a new file. Covers the full folder tree, where to put screens/"
        "components/hooks/services/stores/types/constants, naming conventions, "
        "and import aliases."
    ),
    "get-typescript-patterns": (
        "Get TypeScript patterns for React Native. Call this when writing types or "
        "interfaces. Covers strict mode config, route param typing, API response types, "
        "model types, props interface naming, store types, generics for reusable hooks, "
        "as const, discriminated unions, and type guards."
    ),
    "get-memory-optimization": (
        "Get memory optimization patterns. Call this when debugging memory leaks or "
        "performance issues. Covers useEffect cleanup (listeners, timers, "
        "InteractionManager), closure memory leaks, React Native DevTools memory profiler, "
        "frame budget, view flattening, R8 shrinking for Android, and a common memory "
        "leak sources checklist."
    ),
}


def _pattern_tool(tool: str) -> Callable[..., list[TextContent]]:
    """Build the FastMCP wrapper for one pattern tool."""
    def pattern_tool(
        topic: Annotated[str | None, Field(
            description="Topic key for one section. Omit for every section.",
        )] = None,
        compact: Annotated[bool, Field(
            description="Rules only, without code examples (saves tokens).",
        )] = False,
    ) -> list[TextContent]:
        return _respond(tool, topic=topic, compact=compact)

    pattern_tool.__name__ = tool.replace("-", "_")
    return pattern_tool


for _tool, _family in PATTERN_TOOLS.items():
    mcp.add_tool(
        _pattern_tool(_tool),
        name=_tool,
        description=(
            f"{PATTERN_DESCRIPTIONS[_tool]}\n\n"
            f"Topics: {', '.join(FAMILIES[_family].topics)}"
        ),
        structured_output=False,
    )


# ============================================================================
# TOOLS — Setup and practices
# ============================================================================

@mcp.tool(name="get-setup-guide", structured_output=False)
def get_setup_guide(
    step: Annotated[int, Field(ge=1, le=13)] | Literal["overview", "all"],
    router: RouterName = "expo-router",
) -> list[TextContent]:
    """
    Step-by-step tutorial for a React Native + Expo project (13 steps).

    Args:
        step: Step number 1-13, "overview" for the step list, or "all" for every step
        router: "expo-router" or "react-navigation". Steps 2, 5 and 7 differ per router.

    Returns:
        Markdown for the requested step(s)
    """
    return _respond("get-setup-guide", step=step, router=router)


@mcp.tool(name="setup-new-project", structured_output=False)
def setup_new_project() -> list[TextContent]:
    """
    Condensed guide for creating a new Expo Router project from scratch.

    Covers project creation, TypeScript strict mode + path aliases, NativeWind v4,
    folder structure, Zustand + MMKV, Axios + TanStack Query, environment variables,
    EAS Build, OTA Updates, CI/CD, and build/deploy commands.
    """
    return _respond("setup-new-project")


@mcp.tool(name="get-best-practices", structured_output=False)
def get_best_practices(
    category: CategoryName,
    router: RouterName | None = None,
) -> list[TextContent]:
    """
    Best practices for a React Native + Expo stack.

    Args:
        category: stack-choice, architecture, styling, components, state-management,
            navigation, performance, recommendations, or "all"
        router: "expo-router" or "react-navigation". Omit to include both routers
            in architecture and navigation.

    Returns:
        Markdown guide; "all" joins every category with horizontal rules
    """
    return _respond("get-best-practices", category=category, router=router)


@mcp.tool(name="get-troubleshooting", structured_output=False)
def get_troubleshooting() -> list[TextContent]:
    """Common problems and fixes: Metro, builds, NativeWind, navigation, EAS."""
    return _respond("get-troubleshooting")


@mcp.tool(name="get-cheat-sheet", structured_output=False)
def get_cheat_sheet() -> list[TextContent]:
    """Command cheat sheet: Expo CLI, EAS, debugging, package management."""
    return _respond("get-cheat-sheet")


# ============================================================================
# TOOLS — Generators
# ============================================================================

@mcp.tool(name="generate-project-files", structured_output=False)
def generate_project_files(
    app_name: str,
    features: list[str] | None = None,
    include_ci: bool = False,
    include_env_setup: bool = True,
    router: RouterName = "expo-router",
) -> list[TextContent]:
    """
    Generate starter files for a NEW React Native + Expo project.

    Produces file contents as markdown (nothing is written): NativeWind config,
    navigation layouts, Zustand store, API client, env config, and sample screens.

    Args:
        app_name: App name
        features: List of features (e.g. ["auth", "catalog", "cart"])
        include_ci: Include GitHub Actions CI/CD
        include_env_setup: Include env/ configs and the env switch script
        router: "expo-router" (app/ layouts) or "react-navigation" (src/navigation/)

    Returns:
        Markdown with a "## path" heading and fenced block per file
    """
    return _respond(
        "generate-project-files", app_name=app_name, features=features,
        include_ci=include_ci, include_env_setup=include_env_setup, router=router,
    )


@mcp.tool(name="generate-claude-md", structured_output=False)
def generate_claude_md(
    app_name: str,
    app_description: str | None = None,
    features: list[str] | None = None,
    router: RouterName = "expo-router",
) -> list[TextContent]:
    """
    Generate a CLAUDE.md file with project rules for an AI coding assistant.

    Includes tech stack overview, architecture rules and code conventions.

    Args:
        app_name: App name
        app_description: Short description of the app
        features: List of main features
        router: "expo-router" or "react-navigation"
    """
    return _respond(
        "generate-claude-md", app_name=app_name, app_description=app_description,
        features=features, router=router,
    )


@mcp.tool(name="generate-env-setup", structured_output=False)
def generate_env_setup(app_name: str) -> list[TextContent]:
    """
    Generate per-environment config files (dev, staging, prod) and the env switch script.

    Args:
        app_name: App name; staging/prod API hosts use its lowercase slug
    """
    return _respond("generate-env-setup", app_name=app_name)


# ============================================================================
# PROMPTS
# ============================================================================

@mcp.prompt(
    name="init-mobile-project",
    description="Interactive wizard for setting up a new Expo mobile app",
)
def init_mobile_project() -> str:
    return INIT_MOBILE_PROJECT_PROMPT


# ============================================================================
# RESOURCES — Self-documenting MCP capabilities
# ============================================================================

@mcp.resource("expo://docs/overview")
def docs_overview() -> str:
    """Overview of the react-native-expo MCP server."""
    tool_docs = "\n".join(
        f"- `{r['uri']}` — {r['description']}" for r in _tool_registry.list_resources()
    )
    return f"""# {SERVER_NAME} {SERVER_VERSION}

React Native + Expo guidance served as MCP tools.

## Tools

| Tool | Purpose |
|------|---------|
| `get-*-patterns` (10 tools) | Code patterns per area; `topic` for one section, `compact` for rules only |
| `get-setup-guide` | 13-step setup tutorial (`step`: 1-13, `overview`, `all`) |
| `setup-new-project` | Condensed new-project walkthrough |
| `get-best-practices` | Stack and architecture guidance per category |
| `get-troubleshooting` | Common problems and fixes |
| `get-cheat-sheet` | Command reference |
| `generate-project-files` | Starter file contents for a new app |
| `generate-claude-md` | Project rules file |
| `generate-env-setup` | Per-environment configs |

## Router Variant

Setup steps 2, 5, 7, best practices and the generators take
`router`: `expo-router` (default) or `react-navigation`.

## Resources

- `expo://docs/overview` — This overview
- `expo://patterns/{{family}}` — Topic index for one pattern family ({', '.join(FAMILIES)})
- `expo://tools/{{tool_name}}` — Documentation for one tool

## Tool Documentation

{tool_docs}
"""


@mcp.resource("expo://patterns/{family}")
def pattern_topics(family: str) -> str:
    """Topic index for a pattern family."""
    if family not in FAMILIES:
        return f"# {family}\n\nUnknown family. Available: {', '.join(FAMILIES)}"
    return list_topics(FAMILIES[family])


# ============================================================================
# AUTO-GENERATED TOOL DOCUMENTATION RESOURCES
# ============================================================================

# Register tool descriptions for expo://tools/* resource generation
# Must be done after all tools have been added
_tool_registry = get_tool_registry()
_tool_registry.register_from_mcp(mcp)


@mcp.resource("expo://tools/{tool_name}")
def tool_resource(tool_name: str) -> str:
    """Auto-generated documentation for a specific tool from its description."""
    try:
        resource = _tool_registry.get_resource(f"expo://tools/{tool_name}")
        return resource["text"]
    except KeyError:
        return f"# {tool_name}\n\nTool not found."


# ============================================================================
# SERVER ENTRY POINT
# ============================================================================

def _shutdown_handler(signum: int, frame: object) -> None:
    """Handle termination signals by exiting immediately.

    os._exit() is required because sys.exit() raises SystemExit,
    which asyncio's event loop catches and ignores. The server
    would survive SIGTERM until stdin closes.
    """
    os._exit(0)


def main() -> None:
    configure_logging(LOG_LEVEL)
    signal.signal(signal.SIGTERM, _shutdown_handler)
    signal.signal(signal.SIGINT, _shutdown_handler)
    logger.info(f"Starting {SERVER_NAME} {SERVER_VERSION} ({len(TOOL_NAMES)} tools)")
    try:
        mcp.run()
    except Exception:
        logger.critical("Server error", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
