import argparse
import sys
from typing import Any, Dict, List, cast

from ip_mac_mask import __version__
from ip_mac_mask._detect_mask_type import _detect_mask_type
from ip_mac_mask._display_mask_results import (
    _display_keystroke_trace,
    _display_mask_results,
)
from ip_mac_mask._masked_input import MaskedInput
from ip_mac_mask._parse_clipboard import parse_clipboard
from ip_mac_mask.config import MASK_METADATA, OUTPUT_FORMATS
from ip_mac_mask.registry import MASK_HANDLERS, get_mask_handler


def mask_addresses(
    *,
    user_input: List[str],
    mask_type: str = "auto",
    verbose: bool = True,
) -> List[Dict[str, Any]]:
    """
    Format and validate each string in *user_input*.

    Args:
        user_input: raw address strings
        mask_type: "auto" to detect each input's mask, or a mask type to force
        verbose: if True, print each input that's skipped

    Returns:
        One dict per input that could be matched to a mask, with the raw
        input, mask type, formatted value and whether it's a complete address.
    """
    results: List[Dict[str, Any]] = []

    for string in user_input:
        raw = string.strip()
        if not raw:
            continue

        if mask_type == "auto":
            detected = _detect_mask_type(raw)
            if detected is None:
                if verbose:
                    print(f"Skipped unrecognised address: {raw}")
                continue
        else:
            detected = mask_type

        handler = get_mask_handler(detected)
        formatted = handler.format(raw)
        results.append({
            "input": raw,
            "mask_type": detected,
            "formatted": formatted,
            "valid": handler.validate(formatted),
        })

    return results


def main(
    *,
    user_input: List[str],
    mask_type: str = "auto",
    output_format: str = "table",
    simulate: bool = False,
    verbose: bool = False,
) -> None:

    # display package version for user
    print(f"Package version: {__version__}")

    # if no cli input, check clipboard
    if not user_input:
        user_input = parse_clipboard()
        if not user_input:
            sys.exit("No addresses supplied and none detected in clipboard.")
        print(f"Found in clipboard: {user_input}")

    results = mask_addresses(
        user_input=user_input,
        mask_type=mask_type,
        verbose=verbose,
    )
    if not results:
        sys.exit("[ERROR] None of the supplied addresses matched a known mask.")

    if simulate:
        # replay every input one key at a time through a masked field
        for result in results:
            field = MaskedInput(result["mask_type"])
            trace = field.type_text(result["input"])
            _display_keystroke_trace(
                raw=result["input"],
                mask_type=result["mask_type"],
                trace=trace,
                output_format=output_format,
            )
        return

    _display_mask_results(results=results, output_format=output_format)


def cli():

    placeholders = ", ".join(
        f"{metadata['display_name']} {metadata['placeholder']}"
        for metadata in MASK_METADATA.values()
    )
    parser = argparse.ArgumentParser(
        description = "Format and validate IPv4, IPv6 and MAC addresses as an input mask would.",
        epilog = f"Examples: {placeholders}",
    )
    parser.add_argument(
        "addresses_pos",
        nargs="*",
        help="The address(es) to format. (positional argument)"
    )
    parser.add_argument(
        "--address",
        "--addresses",
        dest = "addresses_arg",
        help = "The address(es) to format.",
        nargs = '+'
    )
    parser.add_argument(
        "--type",
        "--mask_type",
        dest = "mask_type",
        choices = ["auto"] + list(MASK_HANDLERS.keys()),
        default = "auto",
        help = "Mask to apply. 'auto' picks the first mask each address validates under."
    )
    parser.add_argument(
        "--format",
        "--output_format",
        dest = "output_format",
        choices = OUTPUT_FORMATS,
        default = "table",
        help = "Output format: json, table, none (format and validate, but no output)"
    )
    parser.add_argument(
        "--simulate",
        action = "store_true",
        help = "Type each address into a masked field key by key and show every step."
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action = "store_true",
        help = "Report addresses that were skipped."
    )

    args = parser.parse_args()

    # parse addresses from positional or named argument, normalize to list
    user_input = cast(list[str], args.addresses_arg or args.addresses_pos)

    main(
        user_input = user_input,
        mask_type = args.mask_type,
        output_format = args.output_format,
        simulate = args.simulate,
        verbose = args.verbose,
    )

if __name__ == "__main__":
    cli()
