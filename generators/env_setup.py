"""
Environment setup generator — per-environment JSON configs plus the switch script.

Staging and production API hosts are derived from the app name slug.
"""

from models import FileSet
from validation import sanitize_app_name

from .project_files import render_file_set, render_templates
from .templates import ENV_FILES, ENV_PROFILE_FILES, ENV_SETUP_NOTES


def build_env_file_set(app_name: str) -> FileSet:
    """env.example.json, one config per environment, then the loader files."""
    name = sanitize_app_name(app_name)
    example, *loaders = ENV_FILES
    return FileSet(
        title=f"Environment Setup для {name}",
        intro="Створіть наступні файли:",
        files=render_templates((example, *ENV_PROFILE_FILES, *loaders), name),
        closing=ENV_SETUP_NOTES,
    )


def generate_env_setup(app_name: str) -> str:
    """Render the environment setup document for app_name."""
    return render_file_set(build_env_file_set(app_name))
