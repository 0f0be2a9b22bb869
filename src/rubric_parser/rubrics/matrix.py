"""
Matrix rubric extraction.

Recovers performance levels (columns) and criteria (rows) from table-like
rubric text. Two layouts are understood:

    Criteria | Excellent (10) | Good (7) | Satisfactory (4)
    Organization | Clear structure | Mostly clear | Some structure

and the loosely delimited form

    Criteria: Excellent (10) Good (7) Satisfactory (4)
    Organization: Excellent (10): Clear structure Good (7): Mostly clear ...

Nothing here raises on malformed input: when no levels or no rows can be
recovered the parser returns None and the caller falls back.
"""

import re

from ..utils.logging import get_logger
from .models import MatrixCriterion, PerformanceLevel

logger = get_logger(__name__)


LEVEL_KEYWORDS = (
    "excellent",
    "good",
    "satisfactory",
    "needs improvement",
    "incomplete",
    "outstanding",
    "proficient",
    "developing",
    "beginning",
)

# Window for the keyword-only header search when the text has no pipes
HEADER_SEARCH_LIMIT = 5

_KEYWORD_ALTERNATION = "|".join(re.escape(k) for k in LEVEL_KEYWORDS)
_LEVEL_WITH_POINTS = re.compile(
    rf"({_KEYWORD_ALTERNATION})\s*\((\d+)\)", re.IGNORECASE
)
_CELL_WITH_POINTS = re.compile(r"^(.+?)\s*\((\d+)\)")
_POINTS_ONLY = re.compile(r"\(\d+\)")
_ROW_NAME = re.compile(r"^(.+?):\s*(.+)$")
_SEPARATOR_ROW = re.compile(r"^[\s|:\-]+$")
_DECLARED_TOTAL = re.compile(r"Total Points:\s*(\d+)", re.IGNORECASE)

MatrixParts = tuple[list[PerformanceLevel], list[MatrixCriterion], str | None]


def has_level_keyword(text: str) -> bool:
    """True if any performance level keyword occurs in the text."""
    lowered = text.lower()
    return any(keyword in lowered for keyword in LEVEL_KEYWORDS)


def find_declared_total(text: str) -> str | None:
    """Return the ``Total Points: N`` phrase verbatim, if present."""
    match = _DECLARED_TOTAL.search(text)
    return match.group(0) if match else None


def parse_matrix(lines: list[str], text: str | None = None) -> MatrixParts | None:
    """
    Extract a matrix rubric from normalized rubric lines.

    Args:
        lines: Trimmed, non-empty rubric lines
        text: Full rubric text the declared total is taken from; the
            joined lines are searched when omitted

    Returns:
        Tuple of (levels, criteria, declared_total), or None when either no
        performance levels or no criterion rows could be extracted
    """
    header_index = _find_header(lines)
    if header_index is None:
        logger.debug("Matrix parse: no header line found")
        return None

    levels = _extract_levels(lines[header_index])
    if not levels:
        logger.debug(f"Matrix parse: no levels in header {lines[header_index]!r}")
        return None

    criteria = []
    for line in lines[header_index + 1:]:
        if "total points" in line.lower() or _SEPARATOR_ROW.match(line):
            continue
        if "|" in line:
            criterion = _parse_pipe_row(line, len(levels))
        else:
            criterion = _parse_inline_row(line, levels)
        if criterion is not None:
            criteria.append(criterion)

    if not criteria:
        logger.debug("Matrix parse: levels found but no criterion rows")
        return None

    declared_total = find_declared_total(text if text is not None else "\n".join(lines))
    logger.debug(
        f"Matrix parse: {len(levels)} levels, {len(criteria)} criteria, "
        f"declared total {declared_total!r}"
    )
    return levels, criteria, declared_total


def _find_header(lines: list[str]) -> int | None:
    """Locate the line carrying the performance level names."""
    for i, line in enumerate(lines):
        if "criteria" in line.lower() and has_level_keyword(line):
            return i

    if any("|" in line for line in lines):
        window = lines
    else:
        window = lines[:HEADER_SEARCH_LIMIT]
    for i, line in enumerate(window):
        if has_level_keyword(line):
            return i

    return None


def _split_cells(line: str) -> list[str]:
    """Split a pipe row into trimmed cells, ignoring border pipes."""
    cells = [_clean_cell(cell) for cell in line.split("|")]
    if line.lstrip().startswith("|"):
        cells = cells[1:]
    if line.rstrip().endswith("|"):
        cells = cells[:-1]
    return cells


def _clean_cell(cell: str) -> str:
    return cell.strip().strip("*").strip()


def _is_criteria_label(cell: str) -> bool:
    """Whether a leading header cell names the criteria column."""
    if not cell or "criteria" in cell.lower():
        return True
    return not has_level_keyword(cell) and not _POINTS_ONLY.search(cell)


def _extract_levels(header: str) -> list[PerformanceLevel]:
    if "|" not in header:
        return [
            PerformanceLevel(name=match.group(1).strip(), points=int(match.group(2)))
            for match in _LEVEL_WITH_POINTS.finditer(header)
        ]

    cells = _split_cells(header)
    if cells and _is_criteria_label(cells[0]):
        cells = cells[1:]

    if not any(cells):
        return []

    # Unnamed inner columns stay, so row cells keep their positions
    levels = []
    for cell in cells:
        match = _CELL_WITH_POINTS.match(cell)
        if match:
            levels.append(
                PerformanceLevel(name=match.group(1).strip(), points=int(match.group(2)))
            )
        else:
            levels.append(PerformanceLevel(name=cell))
    return levels


def _parse_pipe_row(line: str, level_count: int) -> MatrixCriterion | None:
    cells = _split_cells(line)
    if not cells or not cells[0]:
        return None

    descriptions = cells[1:level_count + 1]
    descriptions += [""] * (level_count - len(descriptions))
    return MatrixCriterion(name=cells[0], descriptions=descriptions)


def _parse_inline_row(
    line: str, levels: list[PerformanceLevel]
) -> MatrixCriterion | None:
    """Parse ``Name: Excellent (10): text Good (7): text ...`` rows."""
    match = _ROW_NAME.match(line)
    if not match:
        return None

    name = match.group(1).strip()
    rest = match.group(2)
    if not name:
        return None

    descriptions = []
    for i, level in enumerate(levels):
        if not level.name:
            descriptions.append("")
            continue
        following = [l.name for l in levels[i + 1:] if l.name]
        boundary = re.escape(following[0]) if following else r"\bTotal\b"
        window = re.compile(
            rf"{re.escape(level.name)}\s*(?:\(\d+\))?:?\s*(.*?)"
            rf"(?=\s*(?:{boundary}|$))",
            re.IGNORECASE,
        )
        found = window.search(rest)
        descriptions.append(found.group(1).strip() if found else "")

    if not any(descriptions):
        return None
    return MatrixCriterion(name=name, descriptions=descriptions)
