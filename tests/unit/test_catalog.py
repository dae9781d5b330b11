"""
Tests for the packaged catalog and registry invariants.

The registries are built at import, so a broken data file fails the whole
test session at collection; these tests pin the shape of what loaded.
"""

import pytest

from content import (
    FAMILIES, FAMILY_DEFINITIONS, STEPS, STEP_COUNT, PRACTICES, CATEGORY_ORDER,
    NEW_PROJECT_GUIDE, TROUBLESHOOTING, CHEAT_SHEET, INIT_MOBILE_PROJECT_PROMPT,
)
from content.loader import ROUTER_SLOT, read_text, splice
from models import CatalogError, PatternFamily, PracticeCategory, Router


class TestPatternFamilies:

    def test_ten_families(self) -> None:
        assert len(FAMILIES) == 10
        assert list(FAMILIES) == list(FAMILY_DEFINITIONS)

    @pytest.mark.parametrize("slug", list(FAMILY_DEFINITIONS))
    def test_compact_keys_match_full_keys(self, slug: str) -> None:
        family = FAMILIES[slug]
        assert list(family.compact_sections) == list(family.sections)

    @pytest.mark.parametrize("slug", list(FAMILY_DEFINITIONS))
    def test_topics_in_declared_order(self, slug: str) -> None:
        title, topics = FAMILY_DEFINITIONS[slug]
        assert FAMILIES[slug].title == title
        assert FAMILIES[slug].topics == topics

    @pytest.mark.parametrize("slug", list(FAMILY_DEFINITIONS))
    def test_sections_start_with_subheading(self, slug: str) -> None:
        family = FAMILIES[slug]
        for topic in family.topics:
            assert family.sections[topic].startswith("## "), topic
            assert family.compact_sections[topic].startswith("## "), topic
            # Same heading in both modes
            assert (family.sections[topic].split("\n", 1)[0]
                    == family.compact_sections[topic].split("\n", 1)[0])

    def test_sections_are_read_only(self, components_family: PatternFamily) -> None:
        with pytest.raises(TypeError):
            components_family.sections["pressable"] = "changed"  # type: ignore[index]


class TestPatternFamilyValidation:

    def test_empty_sections_rejected(self) -> None:
        with pytest.raises(CatalogError, match="no sections"):
            PatternFamily(slug="empty", title="Empty", sections={})

    def test_compact_topic_without_full_entry_rejected(self) -> None:
        with pytest.raises(CatalogError, match="orphan"):
            PatternFamily(
                slug="x", title="X",
                sections={"a": "## A"},
                compact_sections={"a": "## A", "orphan": "## O"},
            )

    def test_missing_compact_entries_allowed(self) -> None:
        family = PatternFamily(slug="x", title="X", sections={"a": "## A", "b": "## B"},
                               compact_sections={"a": "## A"})
        assert family.topics == ("a", "b")

    def test_source_dict_is_copied(self) -> None:
        sections = {"a": "## A"}
        family = PatternFamily(slug="x", title="X", sections=sections)
        sections["b"] = "## B"
        assert family.topics == ("a",)


class TestLoader:

    def test_missing_file_raises_catalog_error(self) -> None:
        with pytest.raises(CatalogError) as exc_info:
            read_text("patterns/nope/missing.md")
        assert exc_info.value.to_dict()["kind"] == "catalog"
        assert "missing.md" in exc_info.value.message

    def test_text_is_trimmed(self) -> None:
        text = read_text("extras/cheat-sheet.md")
        assert not text.startswith("\n")
        assert not text.endswith("\n")

    def test_splice_fills_slot(self) -> None:
        assert splice(f"before\n\n{ROUTER_SLOT}\n\nafter", "middle") == "before\n\nmiddle\n\nafter"

    def test_splice_without_slot_raises(self) -> None:
        with pytest.raises(CatalogError):
            splice("no slot here", "fragment")


class TestSetupStepTables:

    @pytest.mark.parametrize("router", list(Router))
    def test_thirteen_steps(self, router: Router) -> None:
        assert STEP_COUNT == 13
        assert len(STEPS[router]) == 13

    @pytest.mark.parametrize("router", list(Router))
    def test_step_headings_numbered(self, router: Router) -> None:
        for number, text in enumerate(STEPS[router], start=1):
            assert text.startswith(f"# Крок {number} "), number

    @pytest.mark.parametrize("router", list(Router))
    def test_no_unfilled_slots(self, router: Router) -> None:
        assert not any(ROUTER_SLOT in text for text in STEPS[router])

    def test_only_router_steps_differ(self) -> None:
        expo, rn = STEPS[Router.EXPO_ROUTER], STEPS[Router.REACT_NAVIGATION]
        differing = {n for n in range(1, 14) if expo[n - 1] != rn[n - 1]}
        assert differing == {2, 5, 7}

    def test_step_two_names_router(self) -> None:
        assert "(Expo Router)" in STEPS[Router.EXPO_ROUTER][1].split("\n", 1)[0]
        assert "(React Navigation)" in STEPS[Router.REACT_NAVIGATION][1].split("\n", 1)[0]


class TestPracticeTables:

    def test_variants(self) -> None:
        assert set(PRACTICES) == {None, Router.EXPO_ROUTER, Router.REACT_NAVIGATION}

    def test_category_order_excludes_all(self) -> None:
        assert PracticeCategory.ALL not in CATEGORY_ORDER
        assert len(CATEGORY_ORDER) == 8
        assert CATEGORY_ORDER[0] is PracticeCategory.STACK_CHOICE
        assert CATEGORY_ORDER[-1] is PracticeCategory.RECOMMENDATIONS

    @pytest.mark.parametrize("router", [None, *Router])
    def test_every_category_is_a_best_practice_document(self, router: Router | None) -> None:
        for category in CATEGORY_ORDER:
            text = PRACTICES[router][category]
            assert text.startswith("# Best Practice: ")
            assert ROUTER_SLOT not in text

    def test_router_independent_categories_shared(self) -> None:
        for category in CATEGORY_ORDER:
            texts = {PRACTICES[r][category] for r in (None, *Router)}
            if category in (PracticeCategory.ARCHITECTURE, PracticeCategory.NAVIGATION):
                assert len(texts) == 3, category
            else:
                assert len(texts) == 1, category


class TestSingleDocuments:

    @pytest.mark.parametrize("text,heading", [
        (NEW_PROJECT_GUIDE, "# Setting Up a New Expo + React Native Project"),
        (TROUBLESHOOTING, "# Troubleshooting"),
        (CHEAT_SHEET, "# Cheat Sheet"),
    ])
    def test_heading(self, text: str, heading: str) -> None:
        assert text.startswith(heading)

    def test_prompt_mentions_every_pattern_tool(self) -> None:
        from tools import PATTERN_TOOLS
        for tool in PATTERN_TOOLS:
            assert f"`{tool}`" in INIT_MOBILE_PROJECT_PROMPT
