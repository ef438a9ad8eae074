"""
Shared pytest fixtures for ip_mac_mask tests.
"""
import pytest

from ip_mac_mask.registry import MASK_HANDLERS


@pytest.fixture(params=list(MASK_HANDLERS))
def mask_type(request):
    return request.param


@pytest.fixture
def handler(mask_type):
    return MASK_HANDLERS[mask_type]


@pytest.fixture
def type_with_format():
    """Append *text* one character at a time, formatting after every key."""
    def _type(handler, text: str) -> list[str]:
        value = ""
        values = []
        for char in text:
            value = handler.format(value + char)
            values.append(value)
        return values
    return _type
