import pytest

from ip_mac_mask._masked_input import MaskedInput
from ip_mac_mask.config import PASSTHROUGH_KEYS


def test_typing_mac():
    field = MaskedInput("mac")
    trace = field.type_text("001A2B3C4D5E")

    assert all(row["accepted"] for row in trace)
    assert field.value == "00:1A:2B:3C:4D:5E"
    assert field.cursor == len(field.value)
    assert field.is_valid


def test_typing_mac_extra_digits_are_suppressed():
    field = MaskedInput("mac")
    field.type_text("001A2B3C4D5E")

    assert field.press("F") is False
    assert field.press(":") is False
    assert field.value == "00:1A:2B:3C:4D:5E"


def test_typing_ipv4_with_dots():
    field = MaskedInput("ipv4")
    trace = field.type_text("192.168.1.1")

    # "192" already advanced past the dot, so the typed one is dropped
    assert trace[3] == {"key": ".", "accepted": False, "value": "192.", "cursor": 4}
    assert field.value == "192.168.1.1"
    assert field.is_valid


def test_typing_ipv4_digits_only():
    field = MaskedInput("ipv4")
    trace = field.type_text("192168001001")

    for row in trace:
        assert row["value"].count(".") <= 3
        assert all(int(octet) <= 255 for octet in row["value"].split(".") if octet)
    # leading zeros are refused once the octet has a 0
    assert field.value == "192.168.0"
    assert not field.is_valid


@pytest.mark.parametrize(
    "mask_type,text",
    [
        ("ipv4", "10.0.0.255"),
        ("ipv4", "256.300.1.2.3.4"),
        ("ipv6", "2001:db8:::1::2"),
        ("ipv6", "fe80:0:0:0:0:0:0:1:2"),
        ("mac", "00:1a:2b:3c:4d:5e:6f"),
        ("mac", "0::1a2b"),
    ],
)
def test_accepted_keys_leave_a_formatted_value(mask_type, text):
    field = MaskedInput(mask_type)
    for key in text:
        field.press(key)
        assert field.handler.format(field.value) == field.value


def test_caret_follows_inserted_delimiter():
    field = MaskedInput("mac", "00:1A:2B")
    field.select(1)

    assert field.press("F") is True
    assert field.value == "0F:01:A2:B"
    assert field.cursor == 3


def test_typing_replaces_selection():
    field = MaskedInput("ipv4", "192.168.1.1")
    field.select(0, 3)

    assert field.press("1") is True
    assert field.value == "1.168.1.1"
    assert field.cursor == 1


def test_backspace_and_delete():
    field = MaskedInput("ipv4", "1.2")
    assert field.press("Backspace") is True
    assert field.value == "1."
    assert field.cursor == 2

    field = MaskedInput("ipv4", "192.168.1.1")
    field.select(0, 4)
    assert field.press("Delete") is True
    assert field.value == "168.1.1"
    assert field.cursor == 0


def test_navigation_keys():
    field = MaskedInput("ipv6", "2001")

    assert field.press("ArrowLeft") is True
    assert field.cursor == 3
    assert field.press("Home") is True
    assert field.cursor == 0
    assert field.press("ArrowRight") is True
    assert field.cursor == 1
    assert field.press("End") is True
    assert field.cursor == 4
    assert field.value == "2001"


@pytest.mark.parametrize("key", sorted(PASSTHROUGH_KEYS))
def test_passthrough_keys_never_suppressed(key):
    field = MaskedInput("mac", "00:1A")
    assert field.press(key) is True


def test_modifier_combinations_pass_through():
    field = MaskedInput("ipv4", "1.2")
    assert field.press("v", ctrl=True) is True
    assert field.press("a", meta=True) is True
    assert field.value == "1.2"


def test_non_printable_key_is_suppressed():
    field = MaskedInput("ipv4", "1")
    assert field.press("Shift") is False
    assert field.value == "1"


def test_paste_formats_text():
    field = MaskedInput("ipv6")
    field.paste("2001:0db8:::1 ")

    assert field.value == "2001:0db8::1"
    assert field.cursor == len(field.value)
    assert field.is_valid


def test_select_out_of_range():
    field = MaskedInput("ipv4", "1.2")
    with pytest.raises(ValueError):
        field.select(4)
    with pytest.raises(ValueError):
        field.select(2, 1)


def test_unknown_mask_type():
    with pytest.raises(ValueError):
        MaskedInput("eui64")
