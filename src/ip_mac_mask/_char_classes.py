HEX_CHARS = frozenset("0123456789abcdefABCDEF")
DIGIT_CHARS = frozenset("0123456789")


def is_hex_char(ch: str) -> bool:
    """True for a single ASCII hexadecimal digit."""
    return ch in HEX_CHARS


def is_digit(ch: str) -> bool:
    """True for a single ASCII decimal digit."""
    return ch in DIGIT_CHARS
