import pytest

from ip_mac_mask._segments import (
    count_char,
    get_segment_bounds,
    get_segment_text_at,
    simulate_insert,
)


@pytest.mark.parametrize(
    "value,char,cursor_pos,selection_end,expected",
    [
        # caret insert
        ("192.168", "1", 3, None, "1921.168"),
        ("", "a", 0, None, "a"),
        ("00:1", "A", 4, None, "00:1A"),
        # selection is replaced
        ("abcdef", "X", 1, 4, "aXef"),
        ("192.168.1.1", "9", 0, 11, "9"),
    ],
)
def test_simulate_insert(value, char, cursor_pos, selection_end, expected):
    assert simulate_insert(value, char, cursor_pos, selection_end) == expected


def test_simulate_insert_leaves_value_alone():
    value = "1.2"
    simulate_insert(value, "3", 3)
    assert value == "1.2"


@pytest.mark.parametrize(
    "value,index,delimiter,expected",
    [
        ("192.168.1", 5, ".", (4, 7)),
        ("192.168.1", 9, ".", (8, 9)),
        # index sitting on a delimiter belongs to the segment on its left
        ("1.2", 1, ".", (0, 1)),
        # leading delimiter at index 0 doesn't push start past index
        (".1", 0, ".", (0, 0)),
        ("abc", 1, ":", (0, 3)),
        ("", 0, ":", (0, 0)),
        ("2001::1", 5, ":", (5, 5)),
    ],
)
def test_get_segment_bounds(value, index, delimiter, expected):
    start, end = get_segment_bounds(value, index, delimiter)
    assert (start, end) == expected
    assert 0 <= start <= index <= end <= len(value)


@pytest.mark.parametrize(
    "value,index,delimiter,expected",
    [
        ("2001:0db8", 6, ":", "0db8"),
        ("2001:0db8", 0, ":", "2001"),
        ("192.168.", 8, ".", ""),
        ("00:1A:2B", 4, ":", "1A"),
    ],
)
def test_get_segment_text_at(value, index, delimiter, expected):
    assert get_segment_text_at(value, index, delimiter) == expected


@pytest.mark.parametrize(
    "value,ch,expected",
    [
        ("1.2.3", ".", 2),
        ("2001::1", ":", 2),
        ("", ":", 0),
        ("abc", ".", 0),
    ],
)
def test_count_char(value, ch, expected):
    assert count_char(value, ch) == expected
