"""
Tools — MCP tool implementations.

Each tool group has its own module with the implementation logic.
server.py provides thin FastMCP wrappers that call into these.

Tool groups:
- patterns: ten get-*-patterns tools over the pattern families
- guides: setup tutorial, best practices, troubleshooting, cheat sheet
- generate: starter files, CLAUDE.md, env setup
"""

from models import ToolName

from .patterns import do_get_patterns, PATTERN_TOOLS
from .guides import (
    do_get_setup_guide,
    do_get_best_practices,
    do_setup_new_project,
    do_get_troubleshooting,
    do_get_cheat_sheet,
)
from .generate import do_generate_project_files, do_generate_claude_md, do_generate_env_setup

# Single source of truth for valid tool names.
TOOL_NAMES = frozenset(t.value for t in ToolName)

__all__ = [
    "do_get_patterns", "do_get_setup_guide", "do_get_best_practices",
    "do_setup_new_project", "do_get_troubleshooting", "do_get_cheat_sheet",
    "do_generate_project_files", "do_generate_claude_md", "do_generate_env_setup",
    "PATTERN_TOOLS", "TOOL_NAMES",
]
