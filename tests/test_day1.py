import pytest

from advent24.day1 import parse_columns, similarity_score, total_distance

EXAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


def test_parse_columns_example():
    left, right = parse_columns(EXAMPLE)
    assert left == [3, 4, 2, 1, 3, 3]
    assert right == [4, 3, 5, 3, 9, 3]


def test_total_distance_example():
    assert total_distance(EXAMPLE) == 11


def test_similarity_score_example():
    assert similarity_score(EXAMPLE) == 31


def test_total_distance_is_symmetric():
    swapped = "".join(f"{b} {a}\n" for a, b in zip(*parse_columns(EXAMPLE)))
    assert total_distance(swapped) == total_distance(EXAMPLE)


def test_line_order_does_not_matter():
    lines = EXAMPLE.splitlines()
    reordered = "\n".join(reversed(lines))
    assert total_distance(reordered) == total_distance(EXAMPLE)
    assert similarity_score(reordered) == similarity_score(EXAMPLE)


def test_similarity_without_overlap_is_zero():
    assert similarity_score("1 2\n3 4\n") == 0


def test_crlf_lines_are_accepted():
    assert parse_columns(EXAMPLE.replace("\n", "\r\n")) == parse_columns(EXAMPLE)


def test_missing_second_column_raises():
    with pytest.raises(ValueError):
        parse_columns("3 4\n5\n")


def test_empty_line_raises():
    with pytest.raises(ValueError):
        parse_columns("3 4\n\n5 6\n")


def test_negative_number_raises():
    with pytest.raises(ValueError):
        total_distance("-3 4\n")


def test_non_number_raises():
    with pytest.raises(ValueError):
        similarity_score("a b\n")