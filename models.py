"""
Type definitions for react-native-expo-mcp.

Dataclasses defining the contracts between layers:
- content/ builds registries of these structures from packaged markdown
- resolvers/ and generators/ consume them and return text
- tools/ wrap that text in ToolResult for the MCP envelope

All catalog values are immutable: they are built once at import and shared
across concurrent tool calls.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


# ============================================================================
# ERROR TYPES
# ============================================================================

class ErrorKind(Enum):
    """Categories of errors for consistent handling."""
    CATALOG = "catalog"                  # Packaged content missing or inconsistent
    UNKNOWN_TOOL = "unknown_tool"        # Tool name outside the closed set


class ExpoMcpError(Exception):
    """
    Structured error for consistent handling across layers.

    Content loaders raise these when the packaged catalog is broken.
    The dispatcher raises them for names outside the tool set.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for logging and CLI output."""
        return {
            "error": True,
            "kind": self.kind.value,
            "message": self.message,
            **self.details,
        }


class CatalogError(ExpoMcpError):
    """A packaged content file is missing or the registry is inconsistent."""

    def __init__(self, message: str, **details: Any):
        super().__init__(ErrorKind.CATALOG, message, details)


class UnknownToolError(ExpoMcpError):
    """Tool name is not one of the registered tools."""

    def __init__(self, name: str, supported: list[str]):
        super().__init__(
            ErrorKind.UNKNOWN_TOOL,
            f"Unknown tool: {name}. Supported: {supported}",
            {"tool": name},
        )


# ============================================================================
# VARIANTS AND CLOSED SETS
# ============================================================================

class Router(Enum):
    """Navigation library the generated content targets."""
    EXPO_ROUTER = "expo-router"
    REACT_NAVIGATION = "react-navigation"


class PracticeCategory(Enum):
    """Best-practice categories, in the order 'all' renders them."""
    STACK_CHOICE = "stack-choice"
    ARCHITECTURE = "architecture"
    STYLING = "styling"
    COMPONENTS = "components"
    STATE_MANAGEMENT = "state-management"
    NAVIGATION = "navigation"
    PERFORMANCE = "performance"
    RECOMMENDATIONS = "recommendations"
    ALL = "all"


class ToolName(Enum):
    """Every tool the server exposes."""
    COMPONENT_PATTERNS = "get-component-patterns"
    SCREEN_ARCHITECTURE = "get-screen-architecture"
    NAVIGATION_PATTERNS = "get-navigation-patterns"
    STATE_PATTERNS = "get-state-patterns"
    API_PATTERNS = "get-api-patterns"
    STYLING_PATTERNS = "get-styling-patterns"
    PERFORMANCE_PATTERNS = "get-performance-patterns"
    PROJECT_STRUCTURE = "get-project-structure"
    TYPESCRIPT_PATTERNS = "get-typescript-patterns"
    MEMORY_OPTIMIZATION = "get-memory-optimization"
    SETUP_GUIDE = "get-setup-guide"
    SETUP_NEW_PROJECT = "setup-new-project"
    BEST_PRACTICES = "get-best-practices"
    TROUBLESHOOTING = "get-troubleshooting"
    CHEAT_SHEET = "get-cheat-sheet"
    GENERATE_PROJECT_FILES = "generate-project-files"
    GENERATE_CLAUDE_MD = "generate-claude-md"
    GENERATE_ENV_SETUP = "generate-env-setup"


# ============================================================================
# PATTERN CATALOG TYPES
# ============================================================================

@dataclass(frozen=True)
class PatternFamily:
    """
    A titled, ordered collection of topic sections.

    sections holds the full text per topic; compact_sections holds the
    rules-only text. Topic order is the declared order of sections, and the
    available topics are always enumerated from the full map.
    """
    slug: str
    title: str
    sections: Mapping[str, str]
    compact_sections: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.sections:
            raise CatalogError(f"Pattern family '{self.slug}' has no sections", family=self.slug)
        extra = [key for key in self.compact_sections if key not in self.sections]
        if extra:
            raise CatalogError(
                f"Pattern family '{self.slug}' has compact topics without a full entry: {extra}",
                family=self.slug,
            )
        # Freeze the maps so the registry can be shared between threads
        object.__setattr__(self, "sections", MappingProxyType(dict(self.sections)))
        object.__setattr__(self, "compact_sections", MappingProxyType(dict(self.compact_sections)))

    @property
    def topics(self) -> tuple[str, ...]:
        """Topic keys in declared order."""
        return tuple(self.sections)


# ============================================================================
# GENERATOR TYPES
# ============================================================================

# Fence tag per file extension; checked in order so ".d.ts" lands on "tsx"
FENCE_LANGUAGES: tuple[tuple[tuple[str, ...], str], ...] = (
    ((".tsx", ".ts"), "tsx"),
    ((".js",), "js"),
    ((".json",), "json"),
    ((".css",), "css"),
    ((".yml", ".yaml"), "yaml"),
)


@dataclass(frozen=True)
class GeneratedFile:
    """One virtual file in a generated file set."""
    path: str
    content: str

    @property
    def fence_language(self) -> str:
        """Code fence tag derived from the path extension (empty if unknown)."""
        for suffixes, language in FENCE_LANGUAGES:
            if self.path.endswith(suffixes):
                return language
        return ""


@dataclass(frozen=True)
class FileSet:
    """
    Ordered file records plus the prose around them.

    Paths are not required to be unique.
    """
    title: str
    intro: str
    files: tuple[GeneratedFile, ...] = ()
    closing: str = ""

    @property
    def paths(self) -> list[str]:
        return [f.path for f in self.files]


# ============================================================================
# TOOL RESULT TYPES
# ============================================================================

@dataclass(frozen=True)
class ToolResult:
    """Text produced by one tool call."""
    tool: str
    text: str

    def to_content(self) -> list[dict[str, str]]:
        """Response envelope: exactly one text item."""
        return [{"type": "text", "text": self.text}]
