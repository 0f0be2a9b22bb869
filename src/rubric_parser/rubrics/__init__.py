"""
Rubrics module.

Splits assignment instructions, classifies the rubric section and converts
it into a canonical matrix, list, or unstructured representation.
"""

from .classifier import classify_and_parse, parse_instructions
from .listing import parse_list
from .loader import InstructionsLoader
from .matrix import LEVEL_KEYWORDS, parse_matrix
from .models import (
    ListCriterion,
    ListRubric,
    MatrixCriterion,
    MatrixRubric,
    ParsedInstructions,
    PerformanceLevel,
    Rubric,
    SplitInstructions,
    UnstructuredRubric,
)
from .splitter import (
    RUBRIC_SENTINEL,
    compose_instructions,
    split_instructions,
    strip_code_fences,
)

__all__ = [
    "LEVEL_KEYWORDS",
    "RUBRIC_SENTINEL",
    "InstructionsLoader",
    "ListCriterion",
    "ListRubric",
    "MatrixCriterion",
    "MatrixRubric",
    "ParsedInstructions",
    "PerformanceLevel",
    "Rubric",
    "SplitInstructions",
    "UnstructuredRubric",
    "classify_and_parse",
    "compose_instructions",
    "parse_instructions",
    "parse_list",
    "parse_matrix",
    "split_instructions",
    "strip_code_fences",
]
