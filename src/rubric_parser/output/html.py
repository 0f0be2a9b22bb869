"""HTML rendering of canonical rubrics."""

from html import escape

from ..config.models import RenderSettings
from ..rubrics.models import (
    ListRubric,
    MatrixRubric,
    ParsedInstructions,
    Rubric,
    UnstructuredRubric,
)


def render_rubric_html(rubric: Rubric, settings: RenderSettings | None = None) -> str:
    """Render a rubric as an HTML fragment.

    Args:
        rubric: Canonical rubric to render
        settings: Presentation options

    Returns:
        HTML table for matrix and list rubrics, a ``<pre>`` block otherwise
    """
    settings = settings or RenderSettings()

    if isinstance(rubric, MatrixRubric):
        return _render_matrix(rubric, settings)
    if isinstance(rubric, ListRubric):
        return _render_list(rubric)
    if isinstance(rubric, UnstructuredRubric):
        return f'<pre class="rubric-text">{escape(rubric.text)}</pre>'
    raise TypeError(f"Unsupported rubric type: {type(rubric).__name__}")


def render_instructions_html(
    parsed: ParsedInstructions, settings: RenderSettings | None = None
) -> str:
    """Render assignment instructions with their rubric section.

    Args:
        parsed: Result of :func:`parse_instructions`
        settings: Presentation options

    Returns:
        HTML fragment with the description block followed by the rubric
    """
    settings = settings or RenderSettings()
    html_parts = []

    if parsed.description:
        html_parts.extend([
            '<div class="assignment-instructions">',
            f"<strong>{escape(settings.instructions_heading)}</strong>",
            f'<div style="white-space: pre-wrap">{escape(parsed.description)}</div>',
            "</div>",
        ])

    if parsed.rubric is not None:
        html_parts.extend([
            '<div class="assignment-rubric">',
            f"<strong>{escape(settings.rubric_heading)}</strong>",
            render_rubric_html(parsed.rubric, settings),
            "</div>",
        ])

    return "\n".join(html_parts)


def _render_matrix(rubric: MatrixRubric, settings: RenderSettings) -> str:
    header = "".join(f"<th>{escape(level.label)}</th>" for level in rubric.levels)
    html_parts = [
        '<table class="rubric rubric-matrix">',
        f"<thead><tr><th>Criteria</th>{header}</tr></thead>",
        "<tbody>",
    ]

    for criterion in rubric.criteria:
        cells = "".join(
            f"<td>{escape(description or settings.empty_cell)}</td>"
            for description in criterion.descriptions
        )
        html_parts.append(f"<tr><td>{escape(criterion.name)}</td>{cells}</tr>")

    html_parts.append("</tbody>")
    if settings.show_declared_total and rubric.declared_total:
        span = len(rubric.levels) + 1
        html_parts.append(
            f'<tfoot><tr><td colspan="{span}">{escape(rubric.declared_total)}</td></tr></tfoot>'
        )
    html_parts.append("</table>")

    return "\n".join(html_parts)


def _render_list(rubric: ListRubric) -> str:
    html_parts = [
        '<table class="rubric rubric-list">',
        "<thead><tr><th>Criterion</th><th>Points</th><th>Description</th></tr></thead>",
        "<tbody>",
    ]

    for criterion in rubric.criteria:
        html_parts.append(
            f"<tr><td>{escape(criterion.name)}</td>"
            f"<td>{criterion.points}</td>"
            f"<td>{escape(criterion.description)}</td></tr>"
        )

    html_parts.extend([
        f"<tr><td>Total:</td><td>{rubric.total_points}</td><td></td></tr>",
        "</tbody>",
        "</table>",
    ])

    return "\n".join(html_parts)
