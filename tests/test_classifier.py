"""Tests for rubric shape classification and the whole-record parse."""

import pytest

from rubric_parser.rubrics import (
    ListCriterion,
    ListRubric,
    MatrixCriterion,
    MatrixRubric,
    PerformanceLevel,
    UnstructuredRubric,
    classify_and_parse,
    parse_instructions,
)

LIST_RUBRIC = (
    "Grammar (20 points): Correct use of grammar\n"
    "Content (30 points): Well organized\n"
    "Creativity (10 points): Original ideas"
)
MATRIX_RUBRIC = (
    "Criteria | Excellent (10) | Good (7) | Satisfactory (4)\n"
    "Organization | Clear structure | Mostly clear | Some structure\n"
    "Grammar | No errors | Few errors | Several errors\n"
    "Total Points: 20"
)
NUMBERED_RUBRIC = (
    "1. Thesis - 15 points - Clear thesis statement\n"
    "2. Evidence - 25 points - Strong supporting evidence"
)
INLINE_MATRIX_RUBRIC = (
    "Criteria: Excellent (10) Good (7)\n"
    "Thesis: Excellent (10): Sharp claim Good (7): Vague claim\n"
    "Evidence: Excellent (10): Many sources Good (7): Few sources"
)
PLAIN_TEXT = "Please submit a well-written essay discussing climate change."

SAMPLES = [
    LIST_RUBRIC,
    MATRIX_RUBRIC,
    NUMBERED_RUBRIC,
    INLINE_MATRIX_RUBRIC,
    PLAIN_TEXT,
    "",
    "   \n\t\n",
    "Criteria | Excellent | Good\n| Grammar |",
]


def test_list_rubric():
    rubric = classify_and_parse(LIST_RUBRIC)

    assert isinstance(rubric, ListRubric)
    assert [c.points for c in rubric.criteria] == [20, 30, 10]
    assert rubric.total_points == 60


def test_matrix_rubric():
    rubric = classify_and_parse(MATRIX_RUBRIC)

    assert rubric == MatrixRubric(
        levels=[
            PerformanceLevel("Excellent", 10),
            PerformanceLevel("Good", 7),
            PerformanceLevel("Satisfactory", 4),
        ],
        criteria=[
            MatrixCriterion("Organization", ["Clear structure", "Mostly clear", "Some structure"]),
            MatrixCriterion("Grammar", ["No errors", "Few errors", "Several errors"]),
        ],
        declared_total="Total Points: 20",
    )


def test_plain_text_is_unstructured():
    assert classify_and_parse(PLAIN_TEXT) == UnstructuredRubric(text=PLAIN_TEXT)


def test_numbered_list_rubric():
    rubric = classify_and_parse(NUMBERED_RUBRIC)

    assert isinstance(rubric, ListRubric)
    assert len(rubric.criteria) == 2
    assert rubric.total_points == 40


def test_inline_matrix_rubric():
    rubric = classify_and_parse(INLINE_MATRIX_RUBRIC)

    assert isinstance(rubric, MatrixRubric)
    assert [c.name for c in rubric.criteria] == ["Thesis", "Evidence"]
    assert rubric.criteria[1].descriptions == ["Many sources", "Few sources"]
    assert rubric.declared_total is None


@pytest.mark.parametrize("text", ["", "   \n\t\n", "\n\n"])
def test_blank_text_is_returned_untouched(text):
    assert classify_and_parse(text) == UnstructuredRubric(text=text)


def test_unstructured_text_is_not_trimmed():
    text = "  Be thoughtful and original.\n\n"

    assert classify_and_parse(text).text == text


@pytest.mark.parametrize("text", SAMPLES)
def test_parsing_is_deterministic(text):
    assert classify_and_parse(text) == classify_and_parse(text)


@pytest.mark.parametrize("text", SAMPLES)
def test_matrix_rows_match_level_count(text):
    rubric = classify_and_parse(text)

    if isinstance(rubric, MatrixRubric):
        for criterion in rubric.criteria:
            assert len(criterion.descriptions) == len(rubric.levels)


def test_pipe_table_wins_over_list_pattern():
    text = (
        "Criteria | Excellent (10) | Good (5)\n"
        "Grammar (10 points): Correct | Minor errors | Many errors"
    )

    rubric = classify_and_parse(text)

    assert isinstance(rubric, MatrixRubric)
    assert rubric.criteria[0].descriptions == ["Minor errors", "Many errors"]


def test_failed_matrix_falls_back_to_list():
    text = "Quality | Good\nParticipation (10 points): Attend class"

    rubric = classify_and_parse(text)

    assert rubric == ListRubric(criteria=[ListCriterion("Participation", 10, "Attend class")])


def test_level_words_without_table_marker_parse_as_list():
    text = "Excellent essays earn full marks.\nGrammar (20 points): Correct grammar"

    rubric = classify_and_parse(text)

    assert isinstance(rubric, ListRubric)
    assert rubric.total_points == 20


def test_parse_instructions_with_rubric():
    raw = f"Write an essay about your summer.\n\n--- RUBRIC ---\n\n{LIST_RUBRIC}"

    parsed = parse_instructions(raw)

    assert parsed.description == "Write an essay about your summer."
    assert parsed.rubric_text == LIST_RUBRIC
    assert isinstance(parsed.rubric, ListRubric)
    assert parsed.has_rubric


def test_parse_instructions_without_rubric():
    parsed = parse_instructions("  Read chapter 3.  ")

    assert parsed.description == "Read chapter 3."
    assert parsed.rubric_text is None
    assert parsed.rubric is None


def test_parse_instructions_with_empty_rubric_section():
    parsed = parse_instructions("Read chapter 3.\n--- RUBRIC ---\n")

    assert parsed.rubric == UnstructuredRubric(text="")


def test_to_dict_tags_variant():
    parsed = parse_instructions(f"Essay\n--- RUBRIC ---\n{NUMBERED_RUBRIC}")

    data = parsed.to_dict()

    assert data["rubric"]["type"] == "list"
    assert data["rubric"]["total_points"] == 40
    assert data["rubric"]["criteria"][0] == {
        "name": "Thesis",
        "points": 15,
        "description": "Clear thesis statement",
    }


def test_matrix_declared_total_is_verbatim():
    text = "Criteria | Excellent (10) | Good (5)\nThesis | a | b\nTotal Points:\n\n  20"

    rubric = classify_and_parse(text)

    assert isinstance(rubric, MatrixRubric)
    assert rubric.declared_total == "Total Points:\n\n  20"
