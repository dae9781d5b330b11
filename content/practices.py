"""
Best-practice guides, one document per category and router choice.

The router is optional for practices: with no router, the router-dependent
categories carry the material for both routers. Architecture ships a
dedicated combined fragment; navigation shows the two router fragments one
after the other.
"""

from types import MappingProxyType

from models import PracticeCategory, Router

from .loader import read_text, splice

# Categories in the order "all" renders them
CATEGORY_ORDER: tuple[PracticeCategory, ...] = tuple(
    c for c in PracticeCategory if c is not PracticeCategory.ALL
)

# Categories with a router slot in their base document
ROUTER_CATEGORIES = frozenset({PracticeCategory.ARCHITECTURE, PracticeCategory.NAVIGATION})

SECTION_SEPARATOR = "\n\n---\n\n"


def _router_fragment(category: PracticeCategory, router: Router | None) -> str:
    name = f"practices/{category.value}"
    if router is not None:
        return read_text(f"{name}.{router.value}.md")
    if category is PracticeCategory.ARCHITECTURE:
        return read_text(f"{name}.both.md")
    return SECTION_SEPARATOR.join(read_text(f"{name}.{r.value}.md") for r in Router)


def load_practice(category: PracticeCategory, router: Router | None) -> str:
    """Read one category's document for the given router choice."""
    base = read_text(f"practices/{category.value}.md")
    if category in ROUTER_CATEGORIES:
        return splice(base, _router_fragment(category, router))
    return base


def build_practice_table(router: Router | None) -> MappingProxyType[PracticeCategory, str]:
    return MappingProxyType({c: load_practice(c, router) for c in CATEGORY_ORDER})


# None is the "no router chosen" variant
PRACTICES: MappingProxyType[Router | None, MappingProxyType[PracticeCategory, str]] = MappingProxyType({
    router: build_practice_table(router) for router in (None, *Router)
})
