def simulate_insert(
    value: str,
    char: str,
    cursor_pos: int,
    selection_end: int | None = None,
) -> str:
    """
    Preview the result of typing *char* at *cursor_pos* without touching *value*.

    Args:
        value: current text of the field
        char: text being inserted (normally a single key)
        cursor_pos: caret position, or start of the selection
        selection_end: end of the selection being replaced. Defaults to
            cursor_pos (plain caret, nothing replaced).

    Returns:
        The text the field would hold after the insertion.
    """
    if selection_end is None:
        selection_end = cursor_pos
    return value[:cursor_pos] + char + value[selection_end:]


def get_segment_bounds(value: str, index: int, delimiter: str) -> tuple[int, int]:
    """
    Return (start, end) of the delimiter-separated segment that contains *index*.

    start is one past the closest delimiter before *index* (0 if there is none),
    end is the closest delimiter at or after *index* (len(value) if there is none).
    """
    start = value.rfind(delimiter, 0, max(index, 0)) + 1
    end = value.find(delimiter, index)
    if end == -1:
        end = len(value)
    return start, end


def get_segment_text_at(value: str, index: int, delimiter: str) -> str:
    start, end = get_segment_bounds(value, index, delimiter)
    return value[start:end]


def count_char(value: str, ch: str) -> int:
    return value.count(ch)
