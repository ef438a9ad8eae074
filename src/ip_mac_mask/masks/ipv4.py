import re

from ip_mac_mask._char_classes import is_digit
from ip_mac_mask._mask_handler import MaskHandler
from ip_mac_mask._segments import (
    count_char,
    get_segment_bounds,
    get_segment_text_at,
    simulate_insert,
)
from ip_mac_mask.config import MASK_METADATA

_METADATA = MASK_METADATA["ipv4"]
DELIMITER: str = _METADATA["delimiter"]
MAX_SEGMENTS: int = _METADATA["max_segments"]
MAX_SEGMENT_LENGTH: int = _METADATA["max_segment_length"]
MAX_OCTET_VALUE: int = _METADATA["max_octet_value"]

_INVALID_CHARS_RE = re.compile(r"[^0-9.]")
_LEADING_INT_RE = re.compile(r"[0-9]+")

OCTET_RE = r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
IPV4_RE = re.compile(rf"{OCTET_RE}(?:\.{OCTET_RE}){{3}}")


def _leading_int(segment: str) -> int | None:
    """Integer value of the digits at the start of *segment*, None if it has none."""
    match = _LEADING_INT_RE.match(segment)
    if match is None:
        return None
    return int(match.group())


def format_ipv4(value: str) -> str:
    """
    Clean up dotted-quad input as it's typed.

    Drops anything that isn't a digit or dot, keeps at most four segments of
    at most three digits, clamps octets above 255 to "255", and adds the next
    dot once the last segment typed can't take another digit.
    """
    cleaned = _INVALID_CHARS_RE.sub("", value)
    segments = cleaned.split(DELIMITER)

    valid_segments: list[str] = []
    for index, segment in enumerate(segments[:MAX_SEGMENTS]):
        segment = segment[:MAX_SEGMENT_LENGTH]

        number = _leading_int(segment)
        if number is not None and number > MAX_OCTET_VALUE:
            segment = str(MAX_OCTET_VALUE)

        valid_segments.append(segment)

        # auto-advance only past the segment currently being typed at the end
        is_last_typed = index == len(segments) - 1
        if index < MAX_SEGMENTS - 1 and is_last_typed and segment:
            if len(segment) == MAX_SEGMENT_LENGTH:
                valid_segments.append("")
            elif len(segment) == 2 and int(segment + "0") > MAX_OCTET_VALUE:
                valid_segments.append("")

    return DELIMITER.join(valid_segments)


def validate_ipv4(value: str) -> bool:
    return IPV4_RE.fullmatch(value) is not None


def is_valid_char_ipv4(
    char: str,
    current_value: str,
    cursor_pos: int,
    selection_end: int | None = None,
) -> bool:
    if char != DELIMITER and not is_digit(char):
        return False

    left = current_value[:cursor_pos]
    right = current_value[cursor_pos:]
    after = simulate_insert(current_value, char, cursor_pos, selection_end)

    if char == DELIMITER:
        if count_char(after, DELIMITER) > MAX_SEGMENTS - 1:
            return False
        # no leading dot, no empty octet
        if not left or left.endswith(DELIMITER):
            return False
        start, end = get_segment_bounds(current_value, cursor_pos, DELIMITER)
        if end - start == 0:
            return False
        if right.startswith(DELIMITER):
            return False
        return True

    segment_after = get_segment_text_at(after, cursor_pos + 1, DELIMITER)
    if len(segment_after) > MAX_SEGMENT_LENGTH:
        return False
    if len(segment_after) > 1 and segment_after.startswith("0"):
        return False
    number = _leading_int(segment_after)
    if number is not None and number > MAX_OCTET_VALUE:
        return False
    return True


ipv4 = MaskHandler(
    format=format_ipv4,
    validate=validate_ipv4,
    is_valid_char=is_valid_char_ipv4,
)
