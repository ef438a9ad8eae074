import pytest

from ip_mac_mask._cursor import compute_new_cursor_position


@pytest.mark.parametrize(
    "old_value,new_value,old_cursor,expected",
    [
        # delimiter auto-inserted: shift right
        ("192.168.1", "192.168.1.", 9, 10),
        ("001", "00:1", 3, 4),
        # characters stripped: clamp to the new length
        ("1a2", "12", 3, 2),
        ("2001:::1", "2001::1", 6, 6),
        ("abc", "", 2, 0),
        # same length: untouched
        ("192.168", "192.168", 4, 4),
    ],
)
def test_compute_new_cursor_position(old_value, new_value, old_cursor, expected):
    assert compute_new_cursor_position(old_value, new_value, old_cursor) == expected
