from types import MappingProxyType
from typing import Mapping

from ip_mac_mask._mask_handler import MaskHandler
from ip_mac_mask.masks.ipv4 import ipv4
from ip_mac_mask.masks.ipv6 import ipv6
from ip_mac_mask.masks.mac import mac

MASK_HANDLERS: Mapping[str, MaskHandler] = MappingProxyType({
    "ipv4": ipv4,
    "ipv6": ipv6,
    "mac": mac,
})


def get_mask_handler(mask_type: str) -> MaskHandler:
    """
    Look up the handler for *mask_type* ("ipv4", "ipv6" or "mac").

    Raises:
        ValueError: if mask_type isn't a known mask.
    """
    try:
        return MASK_HANDLERS[mask_type]
    except KeyError:
        known = ", ".join(MASK_HANDLERS)
        raise ValueError(f"Unknown mask type: {mask_type!r} (expected one of {known})") from None
