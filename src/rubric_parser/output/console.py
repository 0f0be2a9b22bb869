"""Terminal rendering of canonical rubrics with rich."""

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..config.models import RenderSettings
from ..rubrics.models import (
    ListRubric,
    MatrixRubric,
    ParsedInstructions,
    Rubric,
    UnstructuredRubric,
)


def build_rubric_table(
    rubric: Rubric, settings: RenderSettings | None = None
) -> RenderableType:
    """Build a rich renderable for a rubric.

    Args:
        rubric: Canonical rubric to display
        settings: Presentation options

    Returns:
        A Table for matrix and list rubrics, plain Text otherwise
    """
    settings = settings or RenderSettings()

    if isinstance(rubric, MatrixRubric):
        table = Table(box=box.SQUARE, show_lines=True)
        table.add_column("Criteria", style="bold")
        for level in rubric.levels:
            table.add_column(level.label, justify="center")
        for criterion in rubric.criteria:
            table.add_row(
                criterion.name,
                *(description or settings.empty_cell for description in criterion.descriptions),
            )
        if settings.show_declared_total and rubric.declared_total:
            table.caption = rubric.declared_total
        return table

    if isinstance(rubric, ListRubric):
        table = Table(box=box.SQUARE, show_footer=True)
        table.add_column("Criterion", footer="Total:", style="bold")
        table.add_column("Points", footer=str(rubric.total_points), justify="center")
        table.add_column("Description")
        for criterion in rubric.criteria:
            table.add_row(criterion.name, str(criterion.points), criterion.description)
        return table

    if isinstance(rubric, UnstructuredRubric):
        return Text(rubric.text)

    raise TypeError(f"Unsupported rubric type: {type(rubric).__name__}")


def build_instructions_view(
    parsed: ParsedInstructions, settings: RenderSettings | None = None
) -> RenderableType:
    """Group the description panel and rubric table for display."""
    settings = settings or RenderSettings()
    renderables: list[RenderableType] = []

    if parsed.description:
        renderables.append(
            Panel(Text(parsed.description), title=settings.instructions_heading)
        )
    if parsed.rubric is not None:
        renderables.append(
            Panel(build_rubric_table(parsed.rubric, settings), title=settings.rubric_heading)
        )

    return Group(*renderables)
