"""
Generator tools — starter files, CLAUDE.md and env setup for a new project.

Output is a markdown document describing the files; nothing is written to
the caller's filesystem.
"""

from generators import generate_claude_md, generate_env_setup, generate_project_files
from logging_config import log_tool_call, log_tool_result
from models import Router, ToolName, ToolResult


def do_generate_project_files(
    app_name: str,
    features: list[str] | None = None,
    include_ci: bool = False,
    include_env_setup: bool = True,
    router: Router = Router.EXPO_ROUTER,
) -> ToolResult:
    """
    Starter file set: config, layouts for the chosen router, store, API client.

    Args:
        app_name: App name shown in titles and sample screens
        features: Feature names listed in the header
        include_ci: Add the GitHub Actions EAS workflow
        include_env_setup: Add env/ configs and the env switch script
        router: expo-router or react-navigation layout files
    """
    tool = ToolName.GENERATE_PROJECT_FILES.value
    log_tool_call(tool, app_name=app_name, features=features, include_ci=include_ci,
                  include_env_setup=include_env_setup, router=router.value)
    text = generate_project_files(
        app_name,
        features=features,
        include_ci=include_ci,
        include_env_setup=include_env_setup,
        router=router,
    )
    log_tool_result(tool, text)
    return ToolResult(tool=tool, text=text)


def do_generate_claude_md(
    app_name: str,
    app_description: str | None = None,
    features: list[str] | None = None,
    router: Router = Router.EXPO_ROUTER,
) -> ToolResult:
    """CLAUDE.md with stack overview, architecture and code rules."""
    tool = ToolName.GENERATE_CLAUDE_MD.value
    log_tool_call(tool, app_name=app_name, features=features, router=router.value)
    text = generate_claude_md(app_name, router, app_description, features)
    log_tool_result(tool, text)
    return ToolResult(tool=tool, text=text)


def do_generate_env_setup(app_name: str) -> ToolResult:
    """Per-environment configs with hosts derived from the app name."""
    tool = ToolName.GENERATE_ENV_SETUP.value
    log_tool_call(tool, app_name=app_name)
    text = generate_env_setup(app_name)
    log_tool_result(tool, text)
    return ToolResult(tool=tool, text=text)
