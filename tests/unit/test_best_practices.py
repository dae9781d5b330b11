"""Tests for best-practice dispatch."""

import pytest

from content.loader import read_text
from models import PracticeCategory, Router
from resolvers import get_best_practice

CATEGORIES = [c.value for c in PracticeCategory if c is not PracticeCategory.ALL]


class TestSingleCategory:

    @pytest.mark.parametrize("category", CATEGORIES)
    def test_category_document(self, category: str) -> None:
        assert get_best_practice(category).startswith("# Best Practice: ")

    def test_enum_and_string_agree(self) -> None:
        assert get_best_practice(PracticeCategory.STYLING) == get_best_practice("styling")

    def test_unknown_category_lists_valid_names(self) -> None:
        result = get_best_practice("testing")
        assert result.startswith('Категорія "testing" не знайдена. Доступні: ')
        for category in PracticeCategory:
            assert category.value in result

    def test_router_independent_category_ignores_router(self) -> None:
        assert get_best_practice("styling", Router.REACT_NAVIGATION) == get_best_practice("styling")


class TestRouterVariants:

    @pytest.mark.parametrize("router", list(Router))
    def test_architecture_uses_router_fragment(self, router: Router) -> None:
        fragment = read_text(f"practices/architecture.{router.value}.md")
        assert fragment in get_best_practice("architecture", router)

    def test_architecture_without_router_uses_combined_fragment(self) -> None:
        result = get_best_practice("architecture")
        assert read_text("practices/architecture.both.md") in result
        assert read_text("practices/architecture.expo-router.md") not in result

    def test_navigation_single_router(self) -> None:
        result = get_best_practice("navigation", Router.EXPO_ROUTER)
        assert "## Expo Router — Типізація" in result
        assert "## React Navigation — Типізація" not in result

    def test_navigation_without_router_has_both_in_order(self) -> None:
        result = get_best_practice("navigation")
        expo = result.index("## Expo Router — Типізація")
        rn = result.index("## React Navigation — Типізація")
        assert expo < rn
        assert "\n\n---\n\n" in result[expo:rn]


class TestAllCategories:

    @pytest.mark.parametrize("router", [None, *Router])
    def test_all_joins_categories_in_order(self, router: Router | None) -> None:
        expected = "\n\n---\n\n".join(get_best_practice(c, router) for c in CATEGORIES)
        assert get_best_practice("all", router) == expected

    def test_all_contains_every_heading(self) -> None:
        result = get_best_practice(PracticeCategory.ALL)
        assert result.count("# Best Practice: ") >= len(CATEGORIES)
