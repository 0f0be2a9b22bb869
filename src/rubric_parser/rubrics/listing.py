"""List rubric extraction.

Each line is tried against three grammars, first match wins:

    Grammar (20 points): Correct use of grammar
    1. Thesis - 15 points - Clear thesis statement
    Evidence: 25 points
    Strong supporting evidence            <- description of the line above

Lines matching none of them are skipped.
"""

import re

from ..utils.logging import get_logger
from .models import ListCriterion

logger = get_logger(__name__)


_PARENTHESIZED_POINTS = re.compile(
    r"^(.+?)\s*\((\d+)\s*points?\)\s*:?\s*(.+)$", re.IGNORECASE
)
_NUMBERED_DASHED = re.compile(
    r"^\d+\.\s*(.+?)\s*-\s*(\d+)\s*points?\s*-\s*(.+)$", re.IGNORECASE
)
_POINTS_HEADING = re.compile(r"^(.+?):\s*(\d+)\s*points?$", re.IGNORECASE)

_TOTAL_NAMES = {"total", "total points", "total score"}


def parse_list(lines: list[str]) -> list[ListCriterion]:
    """
    Extract list criteria from normalized rubric lines.

    Args:
        lines: Trimmed, non-empty rubric lines

    Returns:
        Criteria in line order; empty when no line matched
    """
    criteria = []
    i = 0
    while i < len(lines):
        line = lines[i].strip()
        i += 1

        match = _PARENTHESIZED_POINTS.match(line) or _NUMBERED_DASHED.match(line)
        if match:
            name, points, description = match.groups()
        else:
            match = _POINTS_HEADING.match(line)
            if not match:
                continue
            # Needs a following line to take its description from
            if i >= len(lines) or _is_total(match.group(1)):
                continue
            name, points = match.groups()
            description = lines[i]
            i += 1

        name = name.strip()
        if _is_total(name):
            continue
        criteria.append(
            ListCriterion(name=name, points=int(points), description=description.strip())
        )

    logger.debug(f"List parse: {len(criteria)} criteria from {len(lines)} lines")
    return criteria


def _is_total(name: str) -> bool:
    return name.strip().lower() in _TOTAL_NAMES
