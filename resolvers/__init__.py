"""
Resolvers — Pure functions from small arguments to catalog text.

No MCP awareness, no I/O beyond the catalog loaded at import.
Bad keys produce diagnostic text, never exceptions.
"""

from .patterns import resolve_pattern, list_topics
from .setup_guide import (
    get_setup_overview,
    get_setup_step,
    get_all_setup_steps,
    resolve_setup_guide,
)
from .practices import get_best_practice

__all__ = [
    "resolve_pattern",
    "list_topics",
    "get_setup_overview",
    "get_setup_step",
    "get_all_setup_steps",
    "resolve_setup_guide",
    "get_best_practice",
]
