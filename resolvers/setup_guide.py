"""
Setup guide dispatch — step number (or overview/all) to tutorial text.

Never raises for bad input: out-of-range steps return a "not found" message
naming the valid range.
"""

import re

from content import STEPS, STEP_TITLES, STEP_COUNT, SECTION_SEPARATOR
from models import Router

# Step given as text: optional sign, ASCII digits only
NUMERIC_STEP_PATTERN = re.compile(r"\s*-?\d+\s*", re.ASCII)


def get_setup_overview() -> str:
    """Numbered list of step titles plus usage hints."""
    steps = "\n".join(f"{i}. {title}" for i, title in enumerate(STEP_TITLES, start=1))
    return f"""# Setup Tutorial — Огляд

Повний гайд з налаштування React Native + Expo проекту ({STEP_COUNT} кроків):

{steps}

Використовуйте `get-setup-guide` з параметром `step` для отримання конкретного кроку.
Кроки 2, 5, 7 адаптуються під ваш вибір роутера (`expo-router` або `react-navigation`).
"""


def get_setup_step(step: int, router: Router = Router.EXPO_ROUTER) -> str:
    """One tutorial step, or a not-found message for anything outside 1..13."""
    if not 1 <= step <= STEP_COUNT:
        return f"Крок {step} не знайдено. Доступні кроки: 1-{STEP_COUNT}."
    return STEPS[router][step - 1]


def get_all_setup_steps(router: Router = Router.EXPO_ROUTER) -> str:
    """Every step in order, separated by horizontal rules."""
    return SECTION_SEPARATOR.join(STEPS[router])


def resolve_setup_guide(step: int | str, router: Router = Router.EXPO_ROUTER) -> str:
    """
    Dispatch the get-setup-guide argument.

    Args:
        step: 1..13, "overview", "all", or a numeric string
        router: Router variant for steps 2, 5 and 7

    Returns:
        Tutorial text, or the not-found message for unrecognised steps
    """
    if step == "overview":
        return get_setup_overview()
    if step == "all":
        return get_all_setup_steps(router)
    if isinstance(step, str) and NUMERIC_STEP_PATTERN.fullmatch(step):
        step = int(step)
    if not isinstance(step, int) or isinstance(step, bool):
        return f"Крок {step} не знайдено. Доступні кроки: 1-{STEP_COUNT}."
    return get_setup_step(step, router)
