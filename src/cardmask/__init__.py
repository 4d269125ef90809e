"""
Payment card number masking.

The package exposes ``mask`` for turning a card number into a partially
obscured display string, the ``MaskOptions`` model that configures it, and
helpers for redacting card numbers from free text and log output.
"""

from cardmask.errors import CardMaskError, ValidationError
from cardmask.masking import expand_grouping, extract_digits, mask
from cardmask.models.options import MaskOptions
from cardmask.redact import redact_lines, redact_text

__all__ = [
    "__version__",
    "CardMaskError",
    "MaskOptions",
    "ValidationError",
    "expand_grouping",
    "extract_digits",
    "mask",
    "redact_lines",
    "redact_text",
]

__version__ = "0.1.0"
