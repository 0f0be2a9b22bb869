"""Canonical rubric data models.

A parsed rubric is exactly one of :class:`MatrixRubric`, :class:`ListRubric`
or :class:`UnstructuredRubric`. Renderers dispatch on the ``type`` tag.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Union


@dataclass
class PerformanceLevel:
    """A column of a matrix rubric, e.g. ``Excellent (10)``."""

    name: str
    points: int | None = None

    @property
    def label(self) -> str:
        """Header label, with the point value when one is known."""
        if self.points is None:
            return self.name
        return f"{self.name} ({self.points})"


@dataclass
class MatrixCriterion:
    """A row of a matrix rubric: one description per performance level."""

    name: str
    descriptions: list[str] = field(default_factory=list)


@dataclass
class ListCriterion:
    """A single (criterion, points, description) entry of a list rubric."""

    name: str
    points: int
    description: str = ""


@dataclass
class MatrixRubric:
    """Rubric with criteria as rows and performance levels as columns."""

    type: ClassVar[str] = "matrix"

    levels: list[PerformanceLevel] = field(default_factory=list)
    criteria: list[MatrixCriterion] = field(default_factory=list)
    declared_total: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "levels": [{"name": l.name, "points": l.points} for l in self.levels],
            "criteria": [
                {"name": c.name, "descriptions": list(c.descriptions)}
                for c in self.criteria
            ],
            "declared_total": self.declared_total,
        }


@dataclass
class ListRubric:
    """Flat rubric of point-bearing criteria."""

    type: ClassVar[str] = "list"

    criteria: list[ListCriterion] = field(default_factory=list)

    @property
    def total_points(self) -> int:
        """Sum of all criterion points (derived, never stored)."""
        return sum(c.points for c in self.criteria)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "criteria": [
                {"name": c.name, "points": c.points, "description": c.description}
                for c in self.criteria
            ],
            "total_points": self.total_points,
        }


@dataclass
class UnstructuredRubric:
    """Rubric text that could not be structured, kept exactly as given."""

    type: ClassVar[str] = "unstructured"

    text: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "text": self.text}


Rubric = Union[MatrixRubric, ListRubric, UnstructuredRubric]


@dataclass
class SplitInstructions:
    """Assignment instructions separated into description and rubric section."""

    description: str
    rubric_text: str | None = None


@dataclass
class ParsedInstructions:
    """Split instructions plus the canonical form of the rubric section."""

    description: str
    rubric_text: str | None = None
    rubric: Rubric | None = None

    @property
    def has_rubric(self) -> bool:
        return self.rubric is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "rubric_text": self.rubric_text,
            "rubric": self.rubric.to_dict() if self.rubric is not None else None,
        }
