"""Pydantic models defining the masking configuration."""

from cardmask.models.options import DEFAULT_OPTIONS, Grouping, MaskOptions

__all__ = ["DEFAULT_OPTIONS", "Grouping", "MaskOptions"]
