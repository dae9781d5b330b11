"""
Best-practice dispatch — category name to guide text.

Unknown categories return a message listing the valid ones.
"""

from content import PRACTICES, CATEGORY_ORDER, SECTION_SEPARATOR
from models import PracticeCategory, Router

AVAILABLE_CATEGORIES = ", ".join(c.value for c in PracticeCategory)


def get_best_practice(category: str | PracticeCategory, router: Router | None = None) -> str:
    """
    One category's guide, or every category for "all".

    Args:
        category: Category name (or enum member); "all" concatenates every category
        router: Router variant. None includes both routers' material.

    Returns:
        Guide text, or 'Категорія "<name>" не знайдена. Доступні: ...'
    """
    if isinstance(category, str):
        try:
            category = PracticeCategory(category)
        except ValueError:
            return f'Категорія "{category}" не знайдена. Доступні: {AVAILABLE_CATEGORIES}'

    table = PRACTICES[router]
    if category is PracticeCategory.ALL:
        return SECTION_SEPARATOR.join(table[c] for c in CATEGORY_ORDER)
    return table[category]
