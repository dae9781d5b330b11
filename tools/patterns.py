"""
Pattern tools — one tool per pattern family.

Every get-*-patterns tool shares this handler; the tool name selects the
family. Optional topic narrows to one section, compact switches to the
rules-only text.
"""

from content import FAMILIES
from logging_config import log_tool_call, log_tool_result
from models import ToolName, ToolResult
from resolvers import resolve_pattern

# Tool name -> pattern family slug
PATTERN_TOOLS: dict[str, str] = {
    ToolName.COMPONENT_PATTERNS.value: "components",
    ToolName.SCREEN_ARCHITECTURE.value: "screen-architecture",
    ToolName.NAVIGATION_PATTERNS.value: "navigation",
    ToolName.STATE_PATTERNS.value: "state",
    ToolName.API_PATTERNS.value: "api",
    ToolName.STYLING_PATTERNS.value: "styling",
    ToolName.PERFORMANCE_PATTERNS.value: "performance",
    ToolName.PROJECT_STRUCTURE.value: "project-structure",
    ToolName.TYPESCRIPT_PATTERNS.value: "typescript",
    ToolName.MEMORY_OPTIMIZATION.value: "memory",
}


def do_get_patterns(tool: str, topic: str | None = None, compact: bool = False) -> ToolResult:
    """
    Resolve a pattern tool call.

    Args:
        tool: One of the PATTERN_TOOLS names
        topic: Optional topic key within the family
        compact: Rules-only text instead of full examples

    Returns:
        ToolResult with the family heading and section(s), or the
        unknown-topic diagnostic listing the family's topics
    """
    log_tool_call(tool, topic=topic, compact=compact)
    family = FAMILIES[PATTERN_TOOLS[tool]]
    text = resolve_pattern(family, topic, compact)
    log_tool_result(tool, text)
    return ToolResult(tool=tool, text=text)
