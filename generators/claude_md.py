"""
CLAUDE.md generator — project rules document for an AI coding assistant.

One shared body with router-specific slots: the navigation stack line,
architecture notes, the source tree, navigation rules and the typed
navigation bullet.
"""

from string import Template

from content.loader import read_text
from models import Router
from validation import sanitize_app_name, sanitize_features

NAVIGATION_STACK: dict[Router, str] = {
    Router.EXPO_ROUTER: "Expo Router (file-based routing)",
    Router.REACT_NAVIGATION: "React Navigation (native-stack + bottom-tabs)",
}

TYPED_NAVIGATION: dict[Router, str] = {
    Router.EXPO_ROUTER: "Типізовані route params",
    Router.REACT_NAVIGATION: "Typed navigation props (ParamList)",
}


def _router_slots(router: Router) -> dict[str, str]:
    prefix = f"claude-md/{router.value}"
    return {
        "navigation_stack": NAVIGATION_STACK[router],
        "architecture": read_text(f"{prefix}.architecture.md"),
        "source_tree": read_text(f"{prefix}.source-tree.md"),
        "navigation_rules": read_text(f"{prefix}.navigation-rules.md"),
        "typed_navigation": TYPED_NAVIGATION[router],
    }


def generate_claude_md(
    app_name: str,
    router: Router = Router.EXPO_ROUTER,
    app_description: str | None = None,
    features: list[str] | None = None,
) -> str:
    """
    Generate CLAUDE.md for a new project.

    Args:
        app_name: Used as the document title (sanitised)
        router: Navigation library the rules describe
        app_description: Optional "## Опис" section
        features: Optional "## Основні фічі" bullet list (sanitised, empty names dropped)

    Returns:
        Markdown document ending in a newline
    """
    description_section = f"\n## Опис\n{app_description}\n" if app_description else ""
    features_section = ""
    feature_names = sanitize_features(features)
    if feature_names:
        bullets = "\n".join(f"- {feature}" for feature in feature_names)
        features_section = f"\n## Основні фічі\n{bullets}\n"

    body = Template(read_text("claude-md/base.md")).substitute(_router_slots(router))
    return f"# {sanitize_app_name(app_name)}\n{description_section}{features_section}\n{body}\n"
