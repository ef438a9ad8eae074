import re
import sys
from typing import List

import pyperclip

IPV4_RE = r"""
    \b                       # word boundary
    (?:\d{1,3}\.){3}         # three octets and dots (0–999 each)
    \d{1,3}                  # final octet
    \b                       # word boundary
"""

MAC_RE = r"""
    \b
    (?:[0-9a-f]{2}[:-]){5}   # five pairs, colon or dash separated
    [0-9a-f]{2}              # final pair
    \b
"""

IPV6_RE = r"""
    (?:[0-9a-f]{0,4}:){2,7}  # 2–7 hextets and colons
    (?:
        [0-9a-f]{0,4}        # another hextet
      | :                    # or empty hextet (“::” compression)
    )
"""

# MAC before IPv6, six pairs of hex also look like a short IPv6 address
ADDRESS_RE = re.compile(
    rf"(?:{MAC_RE}|{IPV4_RE}|{IPV6_RE})", flags=re.IGNORECASE | re.VERBOSE
)


def parse_clipboard() -> List[str]:
    """
    Scrape the system clipboard for anything that *looks* like an IPv4, IPv6
    or MAC address.
    """

    try:
        raw_text = pyperclip.paste()
    except pyperclip.PyperclipException as exception:
        sys.exit(f"clipboard error: {exception}")

    return ADDRESS_RE.findall(raw_text)
