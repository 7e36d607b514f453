"""
Message template compilation.

A compiler describes its messages with templates such as ``[parsing started {0}]``.
Literal text is escaped and every ordinal placeholder becomes a greedy capture
group, so the first placeholder's value is available as group 1.
"""

import re

from ..core.exceptions import TemplateError

PLACEHOLDER_PATTERN = re.compile(r"\{\d+\}")


def template_to_regex(template: str) -> str:
    """Translate a message template into regular expression source."""
    if not isinstance(template, str):
        raise TemplateError(
            f"Message template must be a string, got {type(template).__name__}",
            error_code="INVALID_TEMPLATE",
            template=repr(template),
        )
    literals = PLACEHOLDER_PATTERN.split(template)
    return "(.+)".join(re.escape(literal) for literal in literals)


def compile_template(template: str) -> re.Pattern:
    """
    Compile a message template into a case-insensitive matcher.

    The result is meant to be applied with ``fullmatch`` so that a template
    only accepts whole lines.

    Args:
        template: Literal text with ``{n}`` placeholders

    Returns:
        Compiled pattern with one capture group per placeholder

    Raises:
        TemplateError: If the template is not a string
    """
    return re.compile(template_to_regex(template), re.IGNORECASE)
