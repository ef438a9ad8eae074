from typing import Any, Dict, Final


MASK_METADATA: Dict[str, Dict[str, Any]] = {
    "ipv4": {
        "display_name":       "IPv4",
        "delimiter":          ".",
        "max_segments":       4,
        "max_segment_length": 3,
        "max_octet_value":    255,
        "placeholder":        "192.168.1.1",
    },
    "ipv6": {
        "display_name":       "IPv6",
        "delimiter":          ":",
        # eight hextets means seven colons when nothing is compressed
        "max_segments":       8,
        "max_segment_length": 4,
        "placeholder":        "2001:0db8::1",
    },
    "mac": {
        "display_name":       "MAC",
        "delimiter":          ":",
        "max_segments":       6,
        "max_segment_length": 2,
        "max_hex_digits":     12,
        "placeholder":        "00:1A:2B:3C:4D:5E",
    },
}

# mask used when a field doesn't name one
DEFAULT_MASK_TYPE: Final[str] = "ipv4"

# keys handed straight to the field, never run through is_valid_char
PASSTHROUGH_KEYS: Final[frozenset[str]] = frozenset({
    "Backspace",
    "Delete",
    "Tab",
    "Enter",
    "ArrowLeft",
    "ArrowRight",
    "ArrowUp",
    "ArrowDown",
    "Home",
    "End",
})

OUTPUT_FORMATS = ["json", "table", "none"]
