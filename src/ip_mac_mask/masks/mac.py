import re

from ip_mac_mask._char_classes import is_hex_char
from ip_mac_mask._mask_handler import MaskHandler
from ip_mac_mask._segments import count_char, get_segment_text_at, simulate_insert
from ip_mac_mask.config import MASK_METADATA

_METADATA = MASK_METADATA["mac"]
DELIMITER: str = _METADATA["delimiter"]
MAX_SEGMENTS: int = _METADATA["max_segments"]
MAX_SEGMENT_LENGTH: int = _METADATA["max_segment_length"]
MAX_HEX_DIGITS: int = _METADATA["max_hex_digits"]

_INVALID_CHARS_RE = re.compile(r"[^0-9a-fA-F:]")
_NON_HEX_RE = re.compile(r"[^0-9a-fA-F]")

MAC_RE = re.compile(r"(?:[0-9a-fA-F]{2}:){5}[0-9a-fA-F]{2}")


def _hex_only(value: str) -> str:
    return _NON_HEX_RE.sub("", value)


def format_mac(value: str) -> str:
    """
    Normalise MAC input into colon-separated pairs.

    Two ways in:
      - text that already has colons and only short groups ("0:1a:2b") keeps
        its own grouping, up to six groups of two
      - anything else (digits typed one by one, "001a2b3c", "00-1a-2b") is
        reduced to its first twelve hex digits and re-chunked into pairs
    """
    cleaned = _INVALID_CHARS_RE.sub("", value)

    if DELIMITER in cleaned:
        raw_segments = [
            _hex_only(segment)
            for segment in cleaned.split(DELIMITER)[:MAX_SEGMENTS]
        ]
        if all(len(segment) <= MAX_SEGMENT_LENGTH for segment in raw_segments):
            return DELIMITER.join(
                segment[:MAX_SEGMENT_LENGTH] for segment in raw_segments
            )

    hex_digits = _hex_only(value)[:MAX_HEX_DIGITS]
    pairs = [
        hex_digits[i:i + MAX_SEGMENT_LENGTH]
        for i in range(0, len(hex_digits), MAX_SEGMENT_LENGTH)
    ]
    return DELIMITER.join(pairs)


def validate_mac(value: str) -> bool:
    return MAC_RE.fullmatch(value) is not None


def is_valid_char_mac(
    char: str,
    current_value: str,
    cursor_pos: int,
    selection_end: int | None = None,
) -> bool:
    if char != DELIMITER and not is_hex_char(char):
        return False

    if selection_end is None:
        selection_end = cursor_pos

    if char == DELIMITER:
        left = current_value[:cursor_pos]
        right = current_value[selection_end:]
        current_segment = _hex_only(
            get_segment_text_at(current_value, cursor_pos, DELIMITER)
        )

        # a colon only closes a full pair
        if len(current_segment) != MAX_SEGMENT_LENGTH:
            return False
        if count_char(current_value, DELIMITER) >= MAX_SEGMENTS - 1:
            return False
        if len(_hex_only(current_value)) >= MAX_HEX_DIGITS:
            return False
        if left.endswith(DELIMITER) or right.startswith(DELIMITER):
            return False
        return True

    after = simulate_insert(current_value, char, cursor_pos, selection_end)
    return len(_hex_only(after)) <= MAX_HEX_DIGITS


mac = MaskHandler(
    format=format_mac,
    validate=validate_mac,
    is_valid_char=is_valid_char_mac,
)
