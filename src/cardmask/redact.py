"""Mask card numbers embedded in free text."""

from __future__ import annotations

import re
from typing import Iterable, Optional

from cardmask.masking import mask
from cardmask.models.options import DEFAULT_OPTIONS, MaskOptions

# 13-19 digits, optionally split by single spaces or hyphens, not touching other digits.
_CARD_PATTERN = re.compile(r"(?<!\d)\d(?:[ -]?\d){12,18}(?!\d)")


def redact_text(value: str, options: Optional[MaskOptions] = None) -> str:
    """Mask every card-like digit run in ``value``, keeping its separators."""

    opts = (options or DEFAULT_OPTIONS).with_overrides(preserve_spacing=True)

    def _mask(match: re.Match[str]) -> str:
        return mask(match.group(), opts)

    return _CARD_PATTERN.sub(_mask, value)


def redact_lines(lines: Iterable[str], options: Optional[MaskOptions] = None) -> list[str]:
    """Apply redaction to a collection of lines."""

    return [redact_text(line, options) for line in lines]


__all__ = ["redact_lines", "redact_text"]
