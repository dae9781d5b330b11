"""
Pattern Resolver — Pure function from (family, topic, compact) to markdown.

No MCP awareness, no I/O. Unknown topics produce a diagnostic line rather
than an exception so the caller always gets displayable text.
"""

from models import PatternFamily


def resolve_pattern(
    family: PatternFamily,
    topic: str | None = None,
    compact: bool = False,
) -> str:
    """
    Render one topic, or the whole family, under the family title.

    Args:
        family: Pattern family to render
        topic: Topic key. None or "" renders every topic in declared order.
        compact: Use the rules-only text instead of the full text

    Returns:
        "# {title}\\n\\n" followed by either the section(s) or
        'Unknown topic: "<topic>". Available topics: a, b, c'.
        Available topics always come from the full map.
    """
    source = family.compact_sections if compact else family.sections
    heading = f"# {family.title}\n\n"

    if topic:
        section = source.get(topic)
        if section is None:
            available = ", ".join(family.topics)
            return f'{heading}Unknown topic: "{topic}". Available topics: {available}'
        return heading + section

    # Topics without a compact entry are skipped in compact mode
    return heading + "\n\n".join(source[key] for key in family.topics if key in source)


def list_topics(family: PatternFamily) -> str:
    """
    Topic index: one bullet per topic with its section heading.

    Returns:
        "# {title}\\n\\n- `key` — Heading" lines, in declared order
    """
    lines = []
    for key, section in family.sections.items():
        heading = section.split("\n", 1)[0].lstrip("#").strip()
        lines.append(f"- `{key}` — {heading}")
    return f"# {family.title}\n\n" + "\n".join(lines)
