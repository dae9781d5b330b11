"""
Input sanitising for values interpolated into generated files.

Handles:
- App names embedded in JSX text, markdown headings and JSON
- URL-safe slugs for placeholder hostnames
"""

import re

# =============================================================================
# PATTERNS
# =============================================================================

# Characters that would end or corrupt the surrounding snippet syntax:
# JSX expressions ({ } < >), JS/JSON strings (quotes, backslash, backtick),
# and string.Template placeholders ($)
APP_NAME_UNSAFE_PATTERN = re.compile(r'[{}<>"\'`\\$]')

# Control characters (newlines would split a markdown heading)
CONTROL_CHAR_PATTERN = re.compile(r'[\x00-\x1f\x7f]')

WHITESPACE_RUN_PATTERN = re.compile(r'\s+')

SLUG_SEPARATOR_PATTERN = re.compile(r'[^a-z0-9]+')

DEFAULT_SLUG = 'app'


# =============================================================================
# APP NAME
# =============================================================================

def sanitize_app_name(app_name: str) -> str:
    """
    Make an app name safe to embed verbatim in generated sources.

    Control characters become spaces, unsafe characters are dropped and
    whitespace runs collapse to one space. An empty name stays empty.

    Examples:
        'Acme'             -> 'Acme'
        'My {Cool}\\nApp'  -> 'My Cool App'
        'Bob\\'s "Shop"'   -> 'Bobs Shop'
    """
    name = CONTROL_CHAR_PATTERN.sub(' ', app_name or '')
    name = APP_NAME_UNSAFE_PATTERN.sub('', name)
    return WHITESPACE_RUN_PATTERN.sub(' ', name).strip()


def sanitize_features(features: list[str] | None) -> list[str]:
    """
    Sanitise feature names like app names, dropping any left empty.

    Examples:
        ['auth', 'a`b', '{}'] -> ['auth', 'ab']
    """
    cleaned = (sanitize_app_name(feature) for feature in features or [])
    return [feature for feature in cleaned if feature]


def slugify_app_name(app_name: str) -> str:
    """
    Lowercase hostname label for URL placeholders.

    Examples:
        'Acme'        -> 'acme'
        'My Cool App' -> 'my-cool-app'
        '!!!'         -> 'app'
    """
    slug = SLUG_SEPARATOR_PATTERN.sub('-', (app_name or '').lower()).strip('-')
    return slug or DEFAULT_SLUG
