import re

from ip_mac_mask._char_classes import is_hex_char
from ip_mac_mask._mask_handler import MaskHandler
from ip_mac_mask._segments import count_char, get_segment_text_at, simulate_insert
from ip_mac_mask.config import MASK_METADATA

_METADATA = MASK_METADATA["ipv6"]
DELIMITER: str = _METADATA["delimiter"]
MAX_COLONS: int = _METADATA["max_segments"] - 1
MAX_SEGMENT_LENGTH: int = _METADATA["max_segment_length"]
COMPRESSION_MARKER = DELIMITER * 2

_INVALID_CHARS_RE = re.compile(r"[^0-9a-fA-F:]")
_COLON_RUN_RE = re.compile(r":{3,}")

IPV6_RE = re.compile(
    r"""
    (?:
        (?:[0-9a-f]{1,4}:){7}[0-9a-f]{1,4}          # 1:2:3:4:5:6:7:8
      | (?:[0-9a-f]{1,4}:){1,7}:                    # 1::          1:2:3:4:5:6:7::
      | (?:[0-9a-f]{1,4}:){1,6}:[0-9a-f]{1,4}       # 1::8         1:2:3:4:5:6::8
      | (?:[0-9a-f]{1,4}:){1,5}(?::[0-9a-f]{1,4}){1,2}
      | (?:[0-9a-f]{1,4}:){1,4}(?::[0-9a-f]{1,4}){1,3}
      | (?:[0-9a-f]{1,4}:){1,3}(?::[0-9a-f]{1,4}){1,4}
      | (?:[0-9a-f]{1,4}:){1,2}(?::[0-9a-f]{1,4}){1,5}
      | [0-9a-f]{1,4}:(?::[0-9a-f]{1,4}){1,6}       # 1::3:4:5:6:7:8
      | :(?:(?::[0-9a-f]{1,4}){1,7}|:)              # ::2:3:4:5:6:7:8   ::
    )
    """,
    flags=re.IGNORECASE | re.VERBOSE,
)


def format_ipv6(value: str) -> str:
    """
    Keep hex digits and colons only, and squeeze any run of three or more
    colons down to a single "::".
    """
    cleaned = _INVALID_CHARS_RE.sub("", value)
    return _COLON_RUN_RE.sub(COMPRESSION_MARKER, cleaned)


def validate_ipv6(value: str) -> bool:
    """
    Full textual IPv6 check: eight hextets, or a single "::" standing in for
    one or more zero hextets. Embedded IPv4 tails and zone ids are not accepted.
    """
    return IPV6_RE.fullmatch(value) is not None


def is_valid_char_ipv6(
    char: str,
    current_value: str,
    cursor_pos: int,
    selection_end: int | None = None,
) -> bool:
    if char != DELIMITER and not is_hex_char(char):
        return False

    after = simulate_insert(current_value, char, cursor_pos, selection_end)

    if char == DELIMITER:
        left = current_value[:cursor_pos]
        right = current_value[cursor_pos:]

        if _COLON_RUN_RE.search(after):
            return False
        if after.count(COMPRESSION_MARKER) > 1:
            return False
        if COMPRESSION_MARKER not in after and count_char(after, DELIMITER) > MAX_COLONS:
            return False

        # a lone colon needs a hextet in front of it, unless it's completing "::"
        forming_marker = left.endswith(DELIMITER) or right.startswith(DELIMITER)
        current_segment = get_segment_text_at(current_value, cursor_pos, DELIMITER)
        if not forming_marker and not current_segment:
            return False
        return True

    segment_after = get_segment_text_at(after, cursor_pos + 1, DELIMITER)
    return len(segment_after) <= MAX_SEGMENT_LENGTH


ipv6 = MaskHandler(
    format=format_ipv6,
    validate=validate_ipv6,
    is_valid_char=is_valid_char_ipv6,
)
