"""Separation of assignment instructions from their rubric section."""

import re

from .models import SplitInstructions

RUBRIC_SENTINEL = "--- RUBRIC ---"

_CODE_FENCE = re.compile(r"```(?:markdown|text)?\s*")


def split_instructions(raw: str) -> SplitInstructions:
    """Split an instructions blob on the first rubric sentinel.

    Only the first occurrence of the sentinel is honoured; anything after it,
    including later sentinels, belongs to the rubric text.

    Args:
        raw: Instructions text as stored on the assignment

    Returns:
        SplitInstructions with a trimmed description and the trimmed rubric
        text, or ``rubric_text=None`` when no sentinel is present
    """
    index = raw.find(RUBRIC_SENTINEL)
    if index == -1:
        return SplitInstructions(description=raw.strip(), rubric_text=None)

    return SplitInstructions(
        description=raw[:index].strip(),
        rubric_text=raw[index + len(RUBRIC_SENTINEL):].strip(),
    )


def strip_code_fences(text: str) -> str:
    """Remove markdown code fences that generated rubrics tend to carry."""
    return _CODE_FENCE.sub("", text).strip()


def compose_instructions(description: str | None, rubric_text: str) -> str:
    """Append a rubric section to assignment instructions.

    Args:
        description: Existing instructions (may be empty)
        rubric_text: Rubric to store after the sentinel

    Returns:
        Instructions blob that :func:`split_instructions` separates again
    """
    rubric = strip_code_fences(rubric_text)
    return f"{description or ''}\n\n{RUBRIC_SENTINEL}\n\n{rubric}"
