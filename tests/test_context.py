import pytest

from error_snippet.text import extract_with_context, line_count
from tests._shared_cases import SAMPLE_TEXT


@pytest.mark.parametrize(
    ("span", "context_lines", "expected_text", "expected_line"),
    [
        ((30, 35), 1, "let b = 2;\nlet c = a + b;\nlet d = c * 2;", 2),
        ((30, 35), 0, "let c = a + b;", 2),
        ((0, 10), 2, "let a = 1;\nlet b = 2;\nlet c = a + b;", 0),
        ((60, 71), 2, "let c = a + b;\nlet d = c * 2;\nlet e = (d + 3) * 2;", 4),
        ((22, 36), 1, "let b = 2;\nlet c = a + b;\nlet d = c * 2;", 2),
        ((4, 9), 1, "let a = 1;\nlet b = 2;", 0),
        ((64, 75), 1, "let d = c * 2;\nlet e = (d + 3) * 2;", 4),
    ],
    ids=[
        "with_context",
        "without_context",
        "beginning_boundary",
        "ending_boundary",
        "line_start",
        "first_line",
        "last_line",
    ],
)
def test_extract_with_context(
    span: tuple[int, int],
    context_lines: int,
    expected_text: str,
    expected_line: int,
) -> None:
    assert extract_with_context(SAMPLE_TEXT, span, context_lines) == (expected_text, expected_line)


def test_extract_spanning_several_lines_keeps_all_of_them() -> None:
    text, first = extract_with_context(SAMPLE_TEXT, (15, 40), 0)

    assert text == "let b = 2;\nlet c = a + b;\nlet d = c * 2;"
    assert first == 1


def test_extract_window_is_bounded() -> None:
    for start in range(0, len(SAMPLE_TEXT)):
        for context_lines in range(0, 3):
            text, _ = extract_with_context(SAMPLE_TEXT, (start, start + 1), context_lines)
            assert 1 <= line_count(text) <= 2 * context_lines + 1


def test_extract_falls_back_to_leading_lines_when_nothing_intersects() -> None:
    text, first = extract_with_context(SAMPLE_TEXT, (256, 280), 1)

    assert text == "let a = 1;\nlet b = 2;\nlet c = a + b;"
    assert text
    assert SAMPLE_TEXT.startswith(text)
    assert first == 1


def test_extract_fallback_for_reversed_span_starts_at_zero() -> None:
    text, _ = extract_with_context("abc", (3, 1), 1)

    assert text == "abc"


def test_extract_from_empty_content() -> None:
    assert extract_with_context("", (0, 5), 1) == ("", 1)
