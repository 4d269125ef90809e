"""Card number masking.

``mask`` turns a card number into its partially obscured display form. The
transform is pure: it reads only its arguments and never touches the
environment, so it is safe to call from any thread.
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import Any, List, Optional, Union

from cardmask.errors import ValidationError
from cardmask.models.options import DEFAULT_OPTIONS, Grouping, MaskOptions

logger = logging.getLogger(__name__)

MIN_CARD_DIGITS = 13
MAX_CARD_DIGITS = 19
SHORT_MASK_MAX = 4

CardInput = Union[str, int, float, Decimal, None]


def is_ascii_digit(char: str) -> bool:
    """Return True for the ten ASCII digits only."""

    return "0" <= char <= "9"


def extract_digits(text: str) -> str:
    """Drop every non-digit character, keeping the order of the digits."""

    return "".join(char for char in text if is_ascii_digit(char))


def expand_grouping(grouping: Grouping, length: int) -> List[int]:
    """Normalise a grouping option into an ordered list of group sizes.

    A scalar ``g`` expands to enough copies of ``g`` to cover ``length``
    characters; an explicit sequence is returned as a list untouched.
    """

    if isinstance(grouping, int):
        return [grouping] * math.ceil(length / grouping)
    return list(grouping)


def _stringify(value: CardInput) -> str:
    """Render numbers in plain decimal notation, never with an exponent or a trailing ``.0``."""

    if isinstance(value, float):
        value = Decimal(repr(value))
    if isinstance(value, Decimal):
        return format(value.normalize(), "f")
    return str(value)


def _apply_grouping(masked: str, grouping: Grouping) -> str:
    chunks: List[str] = []
    position = 0
    for size in expand_grouping(grouping, len(masked)):
        if position >= len(masked):
            break
        chunks.append(masked[position : position + size])
        position += size
    if position < len(masked):
        chunks.append(masked[position:])
    return " ".join(chunks)


def _restore_spacing(original: str, masked: str) -> str:
    replacements = iter(masked)
    return "".join(
        next(replacements, "") if is_ascii_digit(char) else char for char in original
    )


def mask(
    value: CardInput,
    options: Optional[MaskOptions] = None,
    **overrides: Any,
) -> str:
    """Mask a card number, leaving the configured leading/trailing digits visible.

    Args:
        value: Card number as text or a number. ``None`` yields ``""``.
        options: Masking configuration; defaults to ``MaskOptions()``.
        **overrides: Individual ``MaskOptions`` fields replacing those of ``options``.

    Returns:
        The display string. Inputs without any digit give ``""``.

    Raises:
        ValidationError: ``validate_input`` is set and the digit count is
            outside 13-19.
    """

    opts = (options or DEFAULT_OPTIONS).with_overrides(**overrides)

    if value is None:
        return ""

    original = _stringify(value)
    digits = extract_digits(original)
    if not digits:
        return ""

    total = len(digits)
    if opts.validate_input and not MIN_CARD_DIGITS <= total <= MAX_CARD_DIGITS:
        logger.debug("Rejecting card number with %d digits", total)
        raise ValidationError()

    start, end = opts.unmasked_start, opts.unmasked_end
    if start + end >= total:
        logger.debug("Visible windows cover all %d digits; returning unmasked", total)
        return digits

    hidden = total - start - end
    head, tail = digits[:start], digits[total - end :]
    if opts.show_length:
        masked = head + opts.mask_char * hidden + tail
    else:
        logger.debug("Collapsing hidden run of %d digits", hidden)
        masked = head + opts.mask_char * min(SHORT_MASK_MAX, hidden) + tail

    if opts.preserve_spacing and len(original) != total:
        if opts.grouping is not None:
            logger.debug("preserve_spacing set; ignoring grouping %r", opts.grouping)
        return _restore_spacing(original, masked)

    if opts.grouping is not None:
        return _apply_grouping(masked, opts.grouping)

    return masked


__all__ = [
    "CardInput",
    "MAX_CARD_DIGITS",
    "MIN_CARD_DIGITS",
    "SHORT_MASK_MAX",
    "expand_grouping",
    "extract_digits",
    "is_ascii_digit",
    "mask",
]
