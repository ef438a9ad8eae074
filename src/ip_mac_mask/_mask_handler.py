from typing import Callable, NamedTuple


class MaskHandler(NamedTuple):
    """
    The three operations every address mask provides.

    format:        raw text -> cleaned, re-delimited text (idempotent)
    validate:      text -> True only for a complete, well formed address
    is_valid_char: (char, current_value, cursor_pos, selection_end) -> whether
                   the keystroke should be let through
    """
    format: Callable[[str], str]
    validate: Callable[[str], bool]
    is_valid_char: Callable[[str, str, int, int | None], bool]
