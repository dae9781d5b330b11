"""
Pattern family registry.

Each family is a directory under data/patterns/ holding one markdown file per
topic (full text) and the same files under compact/ (rules only). The topic
order below is the order sections render in; it is the only place a family's
topics are declared.
"""

from types import MappingProxyType

from models import PatternFamily

from .loader import read_text

# slug -> (title, topics in render order)
FAMILY_DEFINITIONS: dict[str, tuple[str, tuple[str, ...]]] = {
    "components": (
        "Component Patterns",
        ("pressable", "expo-image", "text-onpress", "memo",
         "react-compiler", "composable", "uncontrolled-input"),
    ),
    "screen-architecture": (
        "Screen Architecture: Logic/UI Separation",
        ("core-rule", "route-file", "screen-ui", "rules", "benefits"),
    ),
    "navigation": (
        "Navigation Patterns (Expo Router)",
        ("file-routing", "layouts", "auth-guard", "typed-params",
         "navigation-api", "deep-linking", "groups"),
    ),
    "state": (
        "State Management Patterns (Zustand + MMKV)",
        ("why-zustand", "why-mmkv", "mmkv-adapter", "store-pattern", "selectors",
         "use-shallow", "outside-react", "organization", "atomic-state"),
    ),
    "api": (
        "API Patterns (Axios + TanStack Query)",
        ("axios-client", "service-pattern", "query-hooks", "query-keys",
         "query-client-config", "rules"),
    ),
    "styling": (
        "Styling Patterns (NativeWind / Tailwind CSS)",
        ("nativewind", "arbitrary-values", "css-interop", "tailwind-config",
         "js-constants", "constants-rule", "conditional-styles", "checklist"),
    ),
    "performance": (
        "Performance Patterns",
        ("lists", "images", "tree-shaking", "barrel-exports", "bundle-analysis",
         "react-compiler", "concurrent-react", "interaction-manager",
         "animations", "checklist"),
    ),
    "project-structure": (
        "Project Structure",
        ("folder-tree", "file-placement", "naming", "import-aliases"),
    ),
    "typescript": (
        "TypeScript Patterns",
        ("strict-config", "route-params", "api-types", "model-types",
         "props-naming", "store-types", "generic-hooks", "as-const",
         "discriminated-unions", "type-guards"),
    ),
    "memory": (
        "Memory Optimization",
        ("effect-cleanup", "event-listeners", "timers", "closures",
         "devtools-profiler", "frame-budget", "view-flattening",
         "interaction-manager", "r8-shrinking", "leak-checklist"),
    ),
}


def load_family(slug: str, title: str, topics: tuple[str, ...]) -> PatternFamily:
    """Read one family's full and compact sections from the catalog."""
    base = f"patterns/{slug}"
    return PatternFamily(
        slug=slug,
        title=title,
        sections={topic: read_text(f"{base}/{topic}.md") for topic in topics},
        compact_sections={topic: read_text(f"{base}/compact/{topic}.md") for topic in topics},
    )


FAMILIES: MappingProxyType[str, PatternFamily] = MappingProxyType({
    slug: load_family(slug, title, topics)
    for slug, (title, topics) in FAMILY_DEFINITIONS.items()
})
