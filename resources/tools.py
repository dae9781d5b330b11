"""
Tool Documentation Resources

Generates expo://tools/* resources directly from registered tool descriptions.
Single source of truth — the descriptions clients see ARE the documentation.

Architecture Note:
    This module accesses FastMCP's internal `_tool_manager._tools` structure
    because the public `list_tools()` API is async and can't easily run at
    module load time. If FastMCP internals change, `register_from_mcp()` will
    log a warning and attempt an async fallback.

    Tested against: mcp>=1.10 (FastMCP)
"""

import asyncio
import logging
from typing import Any

from server_config import RESOURCE_SCHEME

logger = logging.getLogger(__name__)

TOOL_URI_PREFIX = f"{RESOURCE_SCHEME}://tools/"


def description_to_markdown(tool_name: str, description: str) -> str:
    """
    Convert a tool's description to clean markdown.

    Descriptions registered from docstrings carry their source indentation;
    strip the common indent below the first line and add a title.
    """
    if not description:
        return f"# {tool_name}\n\nNo documentation available."

    lines = description.strip().split('\n')
    if len(lines) > 1:
        # Find minimum indentation (excluding empty lines and first line)
        indents = [len(line) - len(line.lstrip())
                   for line in lines[1:] if line.strip()]
        min_indent = min(indents) if indents else 0
        lines = [lines[0]] + [line[min_indent:] if len(line) > min_indent else line
                              for line in lines[1:]]

    cleaned = '\n'.join(lines)

    return f"# {tool_name}\n\n{cleaned}"


class ToolResourceRegistry:
    """
    Registry for auto-generated tool documentation resources.

    Generates expo://tools/* resources from tool descriptions.
    """

    def __init__(self) -> None:
        self._descriptions: dict[str, str] = {}
        self._cache: dict[str, dict[str, str]] = {}

    def register_tool(self, name: str, description: str) -> None:
        """Register a tool for documentation generation."""
        self._descriptions[name] = description
        # Clear cache for this tool
        self._cache.pop(f"{TOOL_URI_PREFIX}{name}", None)

    def _register_from_mcp_sync(self, mcp_server: Any) -> int:
        """
        Synchronous registration using FastMCP internal API.

        WARNING: This accesses undocumented internal structure `_tool_manager._tools`.
        If FastMCP changes this structure, registration finds nothing and
        we fall back to async registration.

        Returns:
            Number of tools registered
        """
        count = 0
        tool_manager = getattr(mcp_server, '_tool_manager', None)
        tools = getattr(tool_manager, '_tools', None)
        if isinstance(tools, dict):
            for name, tool in tools.items():
                self.register_tool(name, getattr(tool, 'description', None) or "")
                count += 1
        return count

    def _register_from_mcp_async(self, mcp_server: Any) -> int:
        """
        Async fallback using public FastMCP API.

        Uses `mcp_server.list_tools()` which is the official public API.
        Called only if sync registration fails.

        Returns:
            Number of tools registered
        """
        async def _async_register() -> int:
            tools = await mcp_server.list_tools()
            for tool in tools:
                self.register_tool(tool.name, tool.description or "")
            return len(tools)

        try:
            asyncio.get_running_loop()
        except RuntimeError:
            # No running loop - safe to use asyncio.run()
            return asyncio.run(_async_register())

        # Can't run async in an already-running loop
        logger.warning("Cannot run async fallback: event loop already running")
        return 0

    def register_from_mcp(self, mcp_server: Any) -> None:
        """
        Register all tools from a FastMCP server instance.

        Attempts sync registration first (faster, uses internal API).
        Falls back to async registration if sync finds nothing.
        Logs warning if no tools are registered.

        Args:
            mcp_server: FastMCP instance with registered tools
        """
        count = self._register_from_mcp_sync(mcp_server)

        if count == 0:
            logger.warning(
                "Sync tool registration found 0 tools. "
                "FastMCP internal API may have changed. Trying async fallback..."
            )
            count = self._register_from_mcp_async(mcp_server)

        if count == 0:
            logger.warning(
                "Tool resource registry is empty after registration. "
                f"{TOOL_URI_PREFIX}* resources will not be available."
            )
            return

        logger.info(f"Tool resource registry: {count} tools registered for {TOOL_URI_PREFIX}* documentation")

        undocumented = sorted(
            name for name, description in self._descriptions.items()
            if not description.strip()
        )
        if undocumented:
            logger.warning(
                f"Tools without descriptions ({len(undocumented)}): {', '.join(undocumented)}"
            )

    def get_resource(self, uri: str) -> dict[str, str]:
        """
        Get resource by URI.

        Args:
            uri: Resource URI (e.g., "expo://tools/get-setup-guide")

        Returns:
            Resource dict with uri, mimeType, text

        Raises:
            KeyError: If tool not found
        """
        if uri in self._cache:
            return self._cache[uri]

        if not uri.startswith(TOOL_URI_PREFIX):
            raise KeyError(f"Not a tool resource: {uri}")

        tool_name = uri[len(TOOL_URI_PREFIX):]
        if tool_name not in self._descriptions:
            raise KeyError(f"Tool not found: {tool_name}")

        resource = {
            "uri": uri,
            "mimeType": "text/markdown",
            "text": description_to_markdown(tool_name, self._descriptions[tool_name]),
        }
        self._cache[uri] = resource
        return resource

    def list_resources(self) -> list[dict[str, str]]:
        """List all available tool resources."""
        resources: list[dict[str, str]] = []
        for name in sorted(self._descriptions):
            description = self._descriptions[name]
            # First line of the description
            first_line = description.strip().split('\n')[0] if description else "No description"
            resources.append({
                "uri": f"{TOOL_URI_PREFIX}{name}",
                "name": name,
                "description": first_line[:100],
            })
        return resources


# Global registry instance
_registry = ToolResourceRegistry()


def get_tool_registry() -> ToolResourceRegistry:
    """Get the global tool resource registry."""
    return _registry
