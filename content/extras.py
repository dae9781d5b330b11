"""Single-document content: troubleshooting, cheat sheet, prompts."""

from .loader import read_text

TROUBLESHOOTING = read_text("extras/troubleshooting.md")

CHEAT_SHEET = read_text("extras/cheat-sheet.md")

INIT_MOBILE_PROJECT_PROMPT = read_text("prompts/init-mobile-project.md")
