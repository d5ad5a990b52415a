import pytest

from error_snippet.text import SpanRange


def test_span_range_coerces_ranges_and_pairs() -> None:
    assert SpanRange.of(range(2, 5)) == SpanRange(2, 5)
    assert SpanRange.of((2, 5)) == SpanRange(2, 5)

    existing = SpanRange(1, 3)
    assert SpanRange.of(existing) is existing


def test_span_range_rejects_invalid_input() -> None:
    with pytest.raises(ValueError):
        SpanRange.of(range(0, 10, 2))
    with pytest.raises(ValueError):
        SpanRange.of((1, 2, 3))  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        SpanRange.of("0..3")  # type: ignore[arg-type]


def test_span_range_allows_reversed_bounds() -> None:
    span = SpanRange(3, 1)

    assert span.len() == 0
    assert not span.contains(2)


def test_span_range_helpers() -> None:
    span = SpanRange.at(4, 3)

    assert span == SpanRange(4, 7)
    assert span.len() == 3
    assert span.contains(4)
    assert not span.contains(7)
    assert str(span) == "4..7"
    assert repr(span) == "SpanRange(4..7)"
