"""Tests for setup guide dispatch."""

import pytest

from content import STEP_TITLES
from models import Router
from resolvers import get_setup_overview, get_setup_step, get_all_setup_steps, resolve_setup_guide


class TestGetSetupStep:

    @pytest.mark.parametrize("step", [0, 14, -1, 100])
    @pytest.mark.parametrize("router", list(Router))
    def test_out_of_range_is_not_found(self, step: int, router: Router) -> None:
        result = get_setup_step(step, router)
        assert result == f"Крок {step} не знайдено. Доступні кроки: 1-13."

    @pytest.mark.parametrize("router", list(Router))
    def test_each_step_non_empty_and_distinct(self, router: Router) -> None:
        texts = [get_setup_step(n, router) for n in range(1, 14)]
        assert all(texts)
        assert len(set(texts)) == 13

    def test_default_router_is_expo_router(self) -> None:
        assert get_setup_step(2) == get_setup_step(2, Router.EXPO_ROUTER)

    def test_step_seven_example_follows_router(self) -> None:
        expo = get_setup_step(7, Router.EXPO_ROUTER)
        rn = get_setup_step(7, Router.REACT_NAVIGATION)
        assert expo.startswith("# Крок 7")
        assert rn.startswith("# Крок 7")
        assert expo != rn
        # Shared checkpoint after the example
        assert expo.rstrip().endswith(rn.rstrip().rsplit("\n", 1)[-1])


class TestOverview:

    def test_lists_every_title_numbered(self) -> None:
        overview = get_setup_overview()
        for number, title in enumerate(STEP_TITLES, start=1):
            assert f"\n{number}. {title}\n" in overview

    def test_heading_and_hints(self) -> None:
        overview = get_setup_overview()
        assert overview.startswith("# Setup Tutorial — Огляд\n\n")
        assert "(13 кроків)" in overview
        assert "`get-setup-guide`" in overview
        assert "`react-navigation`" in overview


class TestAllSteps:

    @pytest.mark.parametrize("router", list(Router))
    def test_all_steps_joined_with_rules(self, router: Router) -> None:
        expected = "\n\n---\n\n".join(get_setup_step(n, router) for n in range(1, 14))
        assert get_all_setup_steps(router) == expected

    def test_steps_appear_in_order(self) -> None:
        combined = get_all_setup_steps(Router.EXPO_ROUTER)
        positions = [combined.index(f"# Крок {n} ") for n in range(1, 14)]
        assert positions == sorted(positions)


class TestResolveSetupGuide:

    def test_overview(self) -> None:
        assert resolve_setup_guide("overview") == get_setup_overview()

    def test_all(self) -> None:
        rn = Router.REACT_NAVIGATION
        assert resolve_setup_guide("all", rn) == get_all_setup_steps(rn)

    def test_integer(self) -> None:
        assert resolve_setup_guide(5, Router.REACT_NAVIGATION) == get_setup_step(5, Router.REACT_NAVIGATION)

    def test_numeric_string(self) -> None:
        assert resolve_setup_guide("3") == get_setup_step(3)

    @pytest.mark.parametrize("step", ["setup", "", "14", "-2", "--5", "²", "٣", "1.5", " 3x"])
    def test_unrecognised_is_not_found(self, step: str) -> None:
        assert resolve_setup_guide(step) == f"Крок {step} не знайдено. Доступні кроки: 1-13."

    def test_padded_numeric_string(self) -> None:
        assert resolve_setup_guide(" 7 ") == get_setup_step(7)

    @pytest.mark.parametrize("step", [1.5, True, None, [3]])
    def test_non_integer_values_are_not_found(self, step: object) -> None:
        assert resolve_setup_guide(step) == f"Крок {step} не знайдено. Доступні кроки: 1-13."  # type: ignore[arg-type]
