"""
Rubric shape classification.

Decides which extraction strategy applies to a rubric section and returns
its canonical form. Matrix evidence wins over list evidence; anything that
yields no structure is passed through unchanged as an unstructured rubric.
"""

import re

from ..utils.logging import get_logger
from .listing import parse_list
from .matrix import LEVEL_KEYWORDS, has_level_keyword, parse_matrix
from .models import (
    ListRubric,
    MatrixRubric,
    ParsedInstructions,
    Rubric,
    UnstructuredRubric,
)
from .splitter import split_instructions

logger = get_logger(__name__)


_CRITERIA_HEADER = re.compile(
    r"criteria.*?(?:" + "|".join(re.escape(k) for k in LEVEL_KEYWORDS) + ")",
    re.IGNORECASE,
)


def normalize_lines(text: str) -> list[str]:
    """Split text into trimmed lines, dropping blank ones."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def has_table_marker(text: str, lines: list[str] | None = None) -> bool:
    """True for pipe tables or a ``Criteria ... Excellent`` style header."""
    if "|" in text:
        return True
    if lines is None:
        lines = normalize_lines(text)
    return any(_CRITERIA_HEADER.search(line) for line in lines)


def classify_and_parse(rubric_text: str) -> Rubric:
    """
    Convert free-form rubric text into its canonical structured form.

    Args:
        rubric_text: Rubric section of an assignment's instructions

    Returns:
        MatrixRubric, ListRubric, or UnstructuredRubric holding the
        original text unchanged
    """
    lines = normalize_lines(rubric_text)
    if not lines:
        return UnstructuredRubric(text=rubric_text)

    if has_level_keyword(rubric_text) and has_table_marker(rubric_text, lines):
        parts = parse_matrix(lines, rubric_text)
        if parts is not None:
            levels, criteria, declared_total = parts
            logger.debug("Classified rubric as matrix")
            return MatrixRubric(
                levels=levels, criteria=criteria, declared_total=declared_total
            )
        logger.debug("Matrix evidence found but no matrix extracted, trying list")

    criteria = parse_list(lines)
    if criteria:
        logger.debug("Classified rubric as list")
        return ListRubric(criteria=criteria)

    logger.debug("No rubric structure found, keeping text as is")
    return UnstructuredRubric(text=rubric_text)


def parse_instructions(raw: str) -> ParsedInstructions:
    """Split assignment instructions and parse their rubric section, if any."""
    split = split_instructions(raw)
    if split.rubric_text is None:
        return ParsedInstructions(description=split.description)

    return ParsedInstructions(
        description=split.description,
        rubric_text=split.rubric_text,
        rubric=classify_and_parse(split.rubric_text),
    )
