import json
from typing import Any, Dict, Iterable, List

import tabulate

from ip_mac_mask.config import MASK_METADATA

RESULT_COLUMNS = [
    "input",
    "type",
    "formatted",
    "valid",
]

TRACE_COLUMNS = [
    "key",
    "accepted",
    "value",
    "cursor",
]


def _print_table(rows: Iterable[Dict[str, Any]], columns: List[str]) -> None:
    table = [
        [row.get(column_name, "") for column_name in columns]
        for row in rows
    ]
    tabulate.MIN_PADDING = 0
    print(
        tabulate.tabulate(
            table,
            headers=columns,
            tablefmt="simple_outline",
            stralign="left",
        )
    )


def _display_mask_results(
    *,
    results: List[Dict[str, Any]],
    output_format: str,
) -> None:
    """
    print the formatted / validated addresses in *results*.

    Args:
        results: one dict per input with "input", "mask_type", "formatted"
                 and "valid" keys
        output_format:
            - "json"  → pretty-print the result dicts
            - "table" → compact tabular summary (default)
            - "none"  → do nothing
    """

    if output_format == "json":
        print(json.dumps(results, indent=4))

    elif output_format == "table":
        rows = []
        for result in results:
            # show the mask's display name instead of its key
            display_name = MASK_METADATA[result["mask_type"]]["display_name"]
            rows.append(result | {"type": display_name})
        _print_table(rows, RESULT_COLUMNS)


def _display_keystroke_trace(
    *,
    raw: str,
    mask_type: str,
    trace: List[Dict[str, Any]],
    output_format: str,
) -> None:
    """print the key-by-key replay of *raw* through a masked field."""

    if output_format == "json":
        print(json.dumps({"input": raw, "mask_type": mask_type, "trace": trace}, indent=4))

    elif output_format == "table":
        display_name = MASK_METADATA[mask_type]["display_name"]
        print(f"Typing {raw!r} into a {display_name} field")
        _print_table(trace, TRACE_COLUMNS)
