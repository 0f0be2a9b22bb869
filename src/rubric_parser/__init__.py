"""
Rubric Text Parser

Converts teacher-authored, free-form grading rubric text found in assignment
instructions into canonical matrix, list, or unstructured representations
ready for table rendering.
"""

from .rubrics import (
    ListRubric,
    MatrixRubric,
    ParsedInstructions,
    UnstructuredRubric,
    classify_and_parse,
    parse_instructions,
    split_instructions,
)

__version__ = "0.1.0"

__all__ = [
    "ListRubric",
    "MatrixRubric",
    "ParsedInstructions",
    "UnstructuredRubric",
    "classify_and_parse",
    "parse_instructions",
    "split_instructions",
]
