from importlib.metadata import version, PackageNotFoundError

from ip_mac_mask._cursor import compute_new_cursor_position
from ip_mac_mask._mask_handler import MaskHandler
from ip_mac_mask._masked_input import MaskedInput
from ip_mac_mask.registry import MASK_HANDLERS, get_mask_handler

try:
    __version__ = version("ip-mac-mask")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "MASK_HANDLERS",
    "MaskHandler",
    "MaskedInput",
    "compute_new_cursor_position",
    "get_mask_handler",
]
