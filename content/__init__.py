"""
Content — the static catalog.

Markdown under data/ is read once at import into immutable registries:
- patterns: pattern families (full + compact sections per topic)
- setup_steps: 13-step tutorial, one table per router
- practices: best-practice documents per category and router choice
- extras: troubleshooting, cheat sheet, prompts

A missing or inconsistent file raises CatalogError at import.
"""

from .patterns import FAMILIES, FAMILY_DEFINITIONS
from .setup_steps import STEPS, STEP_TITLES, STEP_COUNT, NEW_PROJECT_GUIDE
from .practices import PRACTICES, CATEGORY_ORDER, SECTION_SEPARATOR
from .extras import TROUBLESHOOTING, CHEAT_SHEET, INIT_MOBILE_PROJECT_PROMPT

__all__ = [
    "FAMILIES", "FAMILY_DEFINITIONS",
    "STEPS", "STEP_TITLES", "STEP_COUNT", "NEW_PROJECT_GUIDE",
    "PRACTICES", "CATEGORY_ORDER", "SECTION_SEPARATOR",
    "TROUBLESHOOTING", "CHEAT_SHEET", "INIT_MOBILE_PROJECT_PROMPT",
]
