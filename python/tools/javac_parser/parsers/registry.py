"""
Pattern registry and the bootstrap sub-protocol.

A compiler wrapper may print its own message grammar before compiling::

    __patterns_start
    PARSING_STARTED=[parsing started {0}]
    WROTE=[wrote {0}]
    WARNING=warning:
    __patterns_end

Every block replaces the previously registered rules as a whole.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from loguru import logger

from ..core.data_structures import CompiledRule, ParserAction
from ..core.enums import ActionKind, LifecycleKind, MessageCategory
from ..streams.line_source import LineSource
from .templates import compile_template

PATTERNS_START = "__patterns_start"
PATTERNS_END = "__patterns_end"
CATEGORY_VALUE_DIVIDER = "="

_LIFECYCLE_KINDS = {
    MessageCategory.PARSING_STARTED: LifecycleKind.STARTED,
    MessageCategory.PARSING_COMPLETED: LifecycleKind.COMPLETED,
    MessageCategory.WROTE: LifecycleKind.WROTE,
}

_ACTION_KINDS = {
    MessageCategory.CHECKING: ActionKind.CHECKING,
    MessageCategory.LOADING: ActionKind.LOADING,
    MessageCategory.NOTE: ActionKind.NOTE,
    MessageCategory.STATISTICS: ActionKind.STATISTICS,
    MessageCategory.IGNORED: ActionKind.IGNORED,
}


def is_bootstrap_start(line: str) -> bool:
    return line == PATTERNS_START


def is_bootstrap_end(line: str) -> bool:
    return line == PATTERNS_END


def split_pattern_line(line: str) -> Optional[Tuple[str, str]]:
    """Split ``CATEGORY=TEMPLATE`` on the first divider; None if there is none."""
    category, divider, template = line.partition(CATEGORY_VALUE_DIVIDER)
    if not divider:
        return None
    return category, template


def create_action(category: MessageCategory, template: str) -> Optional[ParserAction]:
    """Build the action a category registers; WARNING registers none."""
    if category is MessageCategory.WARNING:
        return None

    rule = CompiledRule(
        category=category, template=template, matcher=compile_template(template)
    )
    if category in _LIFECYCLE_KINDS:
        return ParserAction(
            kind=ActionKind.FILE_LIFECYCLE,
            rule=rule,
            lifecycle=_LIFECYCLE_KINDS[category],
        )
    return ParserAction(kind=_ACTION_KINDS[category], rule=rule)


def find_action(
    rules: Sequence[ParserAction], line: str
) -> Optional[Tuple[ParserAction, re.Match]]:
    """Return the first rule, in registration order, accepting the whole line."""
    for action in rules:
        match = action.rule.match(line)
        if match is not None:
            return action, match
    return None


@dataclass
class BootstrapBlock:
    """Rules and warning prefix declared by one bootstrap block."""

    rules: List[ParserAction] = field(default_factory=list)
    warning_prefix: Optional[str] = None
    skipped: int = 0

    def add_line(self, line: str) -> None:
        parts = split_pattern_line(line)
        if parts is None:
            logger.warning(f"Incorrect compiler pattern line: {line!r}")
            self.skipped += 1
            return

        name, template = parts
        category = MessageCategory.lookup(name)
        if category is None:
            logger.debug(f"Ignoring unknown pattern category {name!r}")
            self.skipped += 1
            return

        if category is MessageCategory.WARNING:
            if not template:
                logger.warning("Ignoring empty warning prefix in pattern block")
                self.skipped += 1
                return
            self.warning_prefix = template
            return

        action = create_action(category, template)
        if action is not None:
            self.rules.append(action)


def read_bootstrap_block(source: LineSource) -> BootstrapBlock:
    """
    Consume pattern lines up to the end sentinel.

    The start sentinel must already have been consumed. End of stream also
    terminates the block.
    """
    block = BootstrapBlock()
    while True:
        line = source.pull_line()
        if line is None:
            logger.debug("Output ended inside a pattern block")
            break
        if is_bootstrap_end(line):
            break
        block.add_line(line)
    return block
