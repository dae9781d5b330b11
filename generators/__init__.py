"""
Generators — Deterministic document builders for new projects.

No MCP awareness, no filesystem writes. Caller-supplied names are sanitised
(validation.py) before they reach a template.
"""

from .project_files import build_project_file_set, generate_project_files, render_file_set
from .claude_md import generate_claude_md
from .env_setup import build_env_file_set, generate_env_setup

__all__ = [
    "build_project_file_set",
    "generate_project_files",
    "render_file_set",
    "generate_claude_md",
    "build_env_file_set",
    "generate_env_setup",
]
