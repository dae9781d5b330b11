"""
Shared pytest fixtures for react-native-expo-mcp tests.

Small hand-built pattern families pin exact resolver output; the shipped
catalog (content.FAMILIES) is used for registry-wide properties.
"""

from pathlib import Path

import pytest

from content import FAMILIES
from models import PatternFamily

# Project root for locating packaged data
PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = PROJECT_ROOT / "content" / "data"


@pytest.fixture
def demo_family() -> PatternFamily:
    """Two topics with distinct full and compact text."""
    return PatternFamily(
        slug="demo",
        title="Demo Patterns",
        sections={"alpha": "## Alpha\nfull alpha", "beta": "## Beta\nfull beta"},
        compact_sections={"alpha": "## Alpha\nrule alpha", "beta": "## Beta\nrule beta"},
    )


@pytest.fixture
def partial_family() -> PatternFamily:
    """Compact map covers only the first topic."""
    return PatternFamily(
        slug="partial",
        title="Partial",
        sections={"alpha": "## Alpha\nfull alpha", "beta": "## Beta\nfull beta"},
        compact_sections={"alpha": "## Alpha\nrule alpha"},
    )


@pytest.fixture
def components_family() -> PatternFamily:
    """The shipped component patterns family."""
    return FAMILIES["components"]
