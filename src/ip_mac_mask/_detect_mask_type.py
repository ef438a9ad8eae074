from ip_mac_mask.registry import MASK_HANDLERS


def _detect_mask_type(raw: str) -> str | None:
    """
    Guess which mask *raw* was meant for.

    Returns:
        The first registered mask type whose formatted form of raw validates,
        or None if no mask produces a complete address.
    """
    for mask_type, handler in MASK_HANDLERS.items():
        if handler.validate(handler.format(raw)):
            return mask_type
    return None
