"""Worked examples for ``cardmask.mask``; run with ``python examples/basic.py``."""

from __future__ import annotations

from cardmask import MaskOptions, mask

CARD = "4532123456789012"

BASIC_EXAMPLES = [
    ("Default masking", CARD, {}),
    ("Show first 4 and last 4", CARD, {"unmasked_start": 4}),
    ("Custom mask character", CARD, {"mask_char": "•"}),
    ("Grouped format", CARD, {"grouping": 4}),
    ("Preserve spacing", "4532 1234 5678 9012", {"preserve_spacing": True}),
    ("Show last 6 digits", CARD, {"unmasked_end": 6}),
    ("Complete masking", CARD, {"unmasked_start": 0, "unmasked_end": 0}),
    ("Amex-style grouping", "378282246310005", {"grouping": (4, 6, 5)}),
    ("Dots and grouping", CARD, {"mask_char": "•", "grouping": 4, "unmasked_start": 4}),
    ("Number input", 4532123456789012, {}),
    ("Auto-strip formatting", "4532-1234-5678-9012", {}),
    ("Shortened mask", CARD, {"show_length": False}),
]

CARDS = [
    ("Visa", "4532123456789012"),
    ("Mastercard", "5500000000000004"),
    ("Amex", "378282246310005"),
]


def main() -> None:
    print("=== Basic usage ===")
    for index, (label, value, overrides) in enumerate(BASIC_EXAMPLES, start=1):
        print(f"{index:>2}. {label}: {value!r} -> {mask(value, **overrides)}")

    print("\n=== Card list ===")
    listing = MaskOptions(unmasked_start=4)
    for brand, number in CARDS:
        print(f"{brand}: {mask(number, listing)}")

    print("\n=== Receipt ===")
    print(mask(CARD, mask_char="•", grouping=4))

    print("\n=== Security levels ===")
    for label, visible in (("Low", 8), ("Medium", 4), ("High", 0)):
        print(f"{label:<7} {mask(CARD, unmasked_end=visible)}")


if __name__ == "__main__":
    main()
