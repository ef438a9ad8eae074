from typing import Any, Dict, List

from ip_mac_mask._cursor import compute_new_cursor_position
from ip_mac_mask._mask_handler import MaskHandler
from ip_mac_mask.config import DEFAULT_MASK_TYPE, PASSTHROUGH_KEYS
from ip_mac_mask.registry import get_mask_handler


class MaskedInput:
    """
    A text field with an address mask attached, minus the GUI.

    Mirrors what a masked input control does for each event:
      - keydown: printable keys go through the mask's is_valid_char and are
        dropped when it says no; navigation and editing keys always pass
      - input: the text is re-run through format and the caret is put back
        next to the character it was beside
      - paste: the pasted text is formatted and replaces the field

    Example:
        field = MaskedInput("mac")
        field.type_text("001a2b3c4d5e")
        field.value      # "00:1a:2b:3c:4d:5e"
        field.is_valid   # True
    """

    def __init__(self, mask_type: str = DEFAULT_MASK_TYPE, value: str = "") -> None:
        self.mask_type = mask_type
        self.handler: MaskHandler = get_mask_handler(mask_type)
        self.value = value
        self.selection_start = len(value)
        self.selection_end = len(value)

    def __repr__(self) -> str:
        return (
            f"MaskedInput({self.mask_type!r}, value={self.value!r}, "
            f"selection=({self.selection_start}, {self.selection_end}))"
        )

    @property
    def cursor(self) -> int:
        return self.selection_start

    @property
    def is_valid(self) -> bool:
        return self.handler.validate(self.value)

    def select(self, start: int, end: int | None = None) -> None:
        """
        Place the caret at *start*, or select start..end.

        Raises:
            ValueError: if the range doesn't satisfy 0 <= start <= end <= len(value).
        """
        if end is None:
            end = start
        if not 0 <= start <= end <= len(self.value):
            raise ValueError(
                f"selection ({start}, {end}) out of range for value of length {len(self.value)}"
            )
        self.selection_start = start
        self.selection_end = end

    def press(self, key: str, *, ctrl: bool = False, meta: bool = False) -> bool:
        """
        Deliver one keydown.

        Returns:
            False if the mask suppressed the key, True otherwise.
        """
        if ctrl or meta:
            return True

        if key in PASSTHROUGH_KEYS:
            self._apply_passthrough(key)
            return True

        if not self.handler.is_valid_char(
            key, self.value, self.selection_start, self.selection_end
        ):
            return False

        self._replace_selection(key)
        return True

    def paste(self, text: str) -> None:
        self.value = self.handler.format(text)
        self.select(len(self.value))

    def type_text(self, text: str) -> List[Dict[str, Any]]:
        """
        Press each character of *text* in turn.

        Returns:
            One row per key: the key, whether it was accepted, and the field's
            value and caret position afterwards.
        """
        trace: List[Dict[str, Any]] = []
        for key in text:
            accepted = self.press(key)
            trace.append({
                "key": key,
                "accepted": accepted,
                "value": self.value,
                "cursor": self.cursor,
            })
        return trace

    def _apply_passthrough(self, key: str) -> None:
        start, end = self.selection_start, self.selection_end

        if key == "Backspace":
            if start != end:
                self._delete_range(start, end)
            elif start > 0:
                self._delete_range(start - 1, start)
        elif key == "Delete":
            if start != end:
                self._delete_range(start, end)
            elif start < len(self.value):
                self._delete_range(start, start + 1)
        elif key == "ArrowLeft":
            self.select(start - 1 if start == end and start > 0 else start)
        elif key == "ArrowRight":
            self.select(end + 1 if start == end and end < len(self.value) else end)
        elif key in ("Home", "ArrowUp"):
            self.select(0)
        elif key in ("End", "ArrowDown"):
            self.select(len(self.value))
        # Tab and Enter leave the field untouched

    def _delete_range(self, start: int, end: int) -> None:
        self.value = self.value[:start] + self.value[end:]
        self.select(start)
        self._handle_input()

    def _replace_selection(self, text: str) -> None:
        start, end = self.selection_start, self.selection_end
        self.value = self.value[:start] + text + self.value[end:]
        self.select(start + len(text))
        self._handle_input()

    def _handle_input(self) -> None:
        old_value = self.value
        new_value = self.handler.format(old_value)
        if new_value == old_value:
            return
        cursor = compute_new_cursor_position(old_value, new_value, self.cursor)
        self.value = new_value
        self.select(cursor)
