"""
Setup tutorial content: 13 steps, assembled once per router.

Steps 2 and 5 ship as a whole document per router. Step 7 has one base
document with a router slot filled from a per-router fragment. Every other
step is shared by both routers.
"""

from types import MappingProxyType

from models import Router

from .loader import read_text, splice

STEP_TITLES: tuple[str, ...] = (
    "Install Required Tools",
    "Create New Expo Project",
    "Configure TypeScript",
    "Install NativeWind v4",
    "Setup Project Structure",
    "State Management (Zustand + MMKV)",
    "API Client (Axios + TanStack Query)",
    "Environment Variables",
    "EAS Build",
    "OTA Updates",
    "CI/CD (GitHub Actions)",
    "Build and Deploy",
    "Testing on Devices",
)

STEP_COUNT = len(STEP_TITLES)

# Steps whose whole document differs per router
ROUTER_DOCUMENT_STEPS = frozenset({2, 5})

# Steps with a router slot in a shared document
ROUTER_SLOT_STEPS = frozenset({7})


def load_step(step: int, router: Router) -> str:
    """Read one step's content for the given router."""
    name = f"setup/step{step:02d}"
    if step in ROUTER_DOCUMENT_STEPS:
        return read_text(f"{name}.{router.value}.md")
    if step in ROUTER_SLOT_STEPS:
        return splice(read_text(f"{name}.md"), read_text(f"{name}.{router.value}.md"))
    return read_text(f"{name}.md")


def build_step_table(router: Router) -> tuple[str, ...]:
    """All steps for one router, index 0 holding step 1."""
    return tuple(load_step(step, router) for step in range(1, STEP_COUNT + 1))


STEPS: MappingProxyType[Router, tuple[str, ...]] = MappingProxyType({
    router: build_step_table(router) for router in Router
})

# Condensed single-document walkthrough (setup-new-project tool)
NEW_PROJECT_GUIDE = read_text("setup/new-project.md")
