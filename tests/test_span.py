import copy

import pytest

from containerkit.span import Span, SpanError, main


def make_span(values, capacity=None):
    span = Span(len(values) if capacity is None else capacity)
    span.add_numbers(values)
    return span


def test_subject_example():
    span = make_span([6, 3, 17, 9, 11])
    assert span.shortest_span() == 2
    assert span.longest_span() == 17 - 3


def test_extreme_int_range():
    span = make_span([-2147483648, 2147483647])
    assert span.longest_span() == 4294967295
    assert span.shortest_span() == 4294967295


def test_duplicates_give_zero_shortest():
    span = make_span([7, 7, 7, 7])
    assert span.shortest_span() == 0
    assert span.longest_span() == 0


@pytest.mark.parametrize(
    "values",
    [[10, 3], [1, 2, 3, 4], [-5, 5, 0], [1000, 1], [-4, -1, -7, -10]],
)
def test_span_invariants(values):
    span = make_span(values)
    assert span.longest_span() == max(values) - min(values)
    assert 0 <= span.shortest_span() <= span.longest_span()


def test_default_capacity_is_zero():
    span = Span()
    assert span.max_size == 0
    with pytest.raises(SpanError, match="The Span is Full"):
        span.add_number(1)


def test_negative_capacity_rejected():
    with pytest.raises(SpanError, match="Initial Max Size Must be Positive"):
        Span(-1)


def test_add_number_when_full():
    span = make_span([1, 2])
    with pytest.raises(SpanError, match="The Span is Full, we can't add more numbers"):
        span.add_number(3)
    assert span.numbers == (1, 2)


def test_add_numbers_keeps_prefix_on_overflow():
    span = Span(2)
    with pytest.raises(SpanError, match="Add NUMBERS: Span Already Full"):
        span.add_numbers([4, 5, 6])
    assert span.numbers == (4, 5)
    assert len(span) == span.max_size


def test_empty_and_small_errors():
    span = Span(5)
    with pytest.raises(SpanError, match="No Shortest Span: Empty Container"):
        span.shortest_span()
    with pytest.raises(SpanError, match="No Longest Span: Empty Container"):
        span.longest_span()
    span.add_number(1)
    with pytest.raises(SpanError, match="No Shortest Span: Size too Small"):
        span.shortest_span()
    with pytest.raises(SpanError, match="No Longest Span: Size too Small"):
        span.longest_span()


def test_copy_is_independent():
    original = make_span([1, 9], capacity=3)
    clone = copy.copy(original)
    clone.add_number(5)
    assert list(original) == [1, 9]
    assert list(clone) == [1, 9, 5]
    assert clone.max_size == original.max_size


def test_describe_lists_values():
    span = make_span([6, 3])
    assert span.describe() == (
        "Vector Max Size: 2\nIndex: 0, Value [6]\nIndex: 1, Value [3]\n"
    )


def test_describe_empty():
    assert Span(4).describe() == (
        "Span is Empty: no members to printVector Max Size: 4\n"
    )


def test_main_output(capsys):
    assert main() == 0
    captured = capsys.readouterr()
    assert captured.err == "2nd Exception Error: No Longest Span: Empty Container\n"
    lines = captured.out.splitlines()
    assert lines.count("Vector Max Size: 10") == 2
    assert lines[0].startswith("The Longest Span is: ")