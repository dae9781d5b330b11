"""
Markdown catalog loading.

Every piece of static content lives as a markdown file under content/data/
(single source of truth). Files are read once and cached: the catalog
doesn't change during runtime.
"""

from functools import lru_cache

from models import CatalogError
from server_config import CONTENT_DIR

# Placeholder in a base document where a router-specific fragment is spliced
ROUTER_SLOT = "<!-- router-variant -->"


@lru_cache(maxsize=None)
def read_text(relative_path: str) -> str:
    """
    Load one catalog file, without leading or trailing blank lines.

    Raises:
        CatalogError: If the file isn't packaged
    """
    path = CONTENT_DIR / relative_path
    try:
        return path.read_text(encoding="utf-8").strip("\n")
    except FileNotFoundError:
        raise CatalogError(f"Missing catalog file: {relative_path}", path=str(path)) from None


def splice(base: str, fragment: str) -> str:
    """
    Replace the router slot in base with fragment.

    Raises:
        CatalogError: If base has no slot (the fragment would be lost)
    """
    if ROUTER_SLOT not in base:
        raise CatalogError("Base document has no router slot")
    return base.replace(ROUTER_SLOT, fragment)
