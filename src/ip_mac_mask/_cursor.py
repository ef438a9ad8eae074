def compute_new_cursor_position(old_value: str, new_value: str, old_cursor: int) -> int:
    """
    Work out where the caret belongs after *old_value* was rewritten to *new_value*.

    Formatting only strips characters or inserts delimiters, it never reorders
    them, so the caret keeps its place relative to the text it was next to:

      shorter - stripped characters: clamp to the new length
      longer  - delimiter inserted: shift right by the number of added characters
      same    - leave it where it was
    """
    if len(new_value) < len(old_value):
        return min(old_cursor, len(new_value))
    if len(new_value) > len(old_value):
        return old_cursor + (len(new_value) - len(old_value))
    return old_cursor
