"""
Guide tools — setup tutorial, best practices and the single-document extras.
"""

from content import CHEAT_SHEET, NEW_PROJECT_GUIDE, TROUBLESHOOTING
from logging_config import log_tool_call, log_tool_result
from models import Router, ToolName, ToolResult
from resolvers import get_best_practice, resolve_setup_guide


def _result(tool: ToolName, text: str) -> ToolResult:
    log_tool_result(tool.value, text)
    return ToolResult(tool=tool.value, text=text)


def do_get_setup_guide(step: int | str, router: Router = Router.EXPO_ROUTER) -> ToolResult:
    """
    Setup tutorial: one step (1-13), "overview" or "all".

    Steps 2, 5 and 7 follow the router choice. Out-of-range steps return a
    not-found message rather than an error.
    """
    log_tool_call(ToolName.SETUP_GUIDE.value, step=step, router=router.value)
    return _result(ToolName.SETUP_GUIDE, resolve_setup_guide(step, router))


def do_get_best_practices(category: str, router: Router | None = None) -> ToolResult:
    """
    Best-practice guide for one category, or "all".

    With no router, architecture and navigation cover both routers.
    """
    log_tool_call(ToolName.BEST_PRACTICES.value, category=category,
                  router=router.value if router else None)
    return _result(ToolName.BEST_PRACTICES, get_best_practice(category, router))


def do_setup_new_project() -> ToolResult:
    """Condensed new-project walkthrough in one document."""
    log_tool_call(ToolName.SETUP_NEW_PROJECT.value)
    return _result(ToolName.SETUP_NEW_PROJECT, NEW_PROJECT_GUIDE)


def do_get_troubleshooting() -> ToolResult:
    log_tool_call(ToolName.TROUBLESHOOTING.value)
    return _result(ToolName.TROUBLESHOOTING, TROUBLESHOOTING)


def do_get_cheat_sheet() -> ToolResult:
    log_tool_call(ToolName.CHEAT_SHEET.value)
    return _result(ToolName.CHEAT_SHEET, CHEAT_SHEET)
