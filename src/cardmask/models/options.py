"""Pydantic model describing how a card number is masked."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from cardmask.config import Settings

Grouping = Union[int, Tuple[int, ...]]


class MaskOptions(BaseModel):
    """Immutable masking configuration with documented defaults."""

    mask_char: str = Field(
        default="*",
        min_length=1,
        max_length=1,
        alias="maskChar",
        description="Character substituted for each hidden digit.",
    )
    unmasked_start: int = Field(
        default=0,
        ge=0,
        alias="unmaskedStart",
        description="Number of leading digits left visible.",
    )
    unmasked_end: int = Field(
        default=4,
        ge=0,
        alias="unmaskedEnd",
        description="Number of trailing digits left visible.",
    )
    preserve_spacing: bool = Field(
        default=False,
        alias="preserveSpacing",
        description=(
            "Reinsert the original separators at their original positions. "
            "Takes precedence over grouping when both are set."
        ),
    )
    grouping: Optional[Grouping] = Field(
        default=None,
        description="Group size, or ordered group sizes, used to re-space the output.",
    )
    show_length: bool = Field(
        default=True,
        alias="showLength",
        description="When false, the hidden run collapses to at most four mask characters.",
    )
    validate_input: bool = Field(
        default=False,
        alias="validateInput",
        description="Require 13-19 digits and raise ValidationError otherwise.",
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    @field_validator("grouping", mode="before")
    @classmethod
    def _reject_bool_grouping(cls, value: Any) -> Any:
        sizes = value if isinstance(value, (list, tuple)) else (value,)
        if any(isinstance(size, bool) for size in sizes):
            raise ValueError("group sizes must be integers, not booleans")
        return value

    @field_validator("grouping")
    @classmethod
    def _check_grouping(cls, value: Optional[Grouping]) -> Optional[Grouping]:
        if value is None:
            return None
        sizes = (value,) if isinstance(value, int) else value
        if not sizes:
            raise ValueError("grouping must contain at least one group size")
        if any(size < 1 for size in sizes):
            raise ValueError("group sizes must be positive integers")
        return value

    def with_overrides(self, **overrides: Any) -> "MaskOptions":
        """Return a validated copy with the given fields replaced.

        Overrides may use field names or their camel-case aliases.
        """

        if not overrides:
            return self
        names = {field.alias: name for name, field in type(self).model_fields.items() if field.alias}
        payload = self.model_dump()
        payload.update({names.get(key, key): value for key, value in overrides.items()})
        return type(self).model_validate(payload)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "MaskOptions":
        """Build options from the environment-driven defaults."""

        return cls(
            mask_char=settings.mask_char,
            unmasked_start=settings.unmasked_start,
            unmasked_end=settings.unmasked_end,
            show_length=settings.show_length,
            validate_input=settings.validate_input,
        )


DEFAULT_OPTIONS = MaskOptions()

__all__ = ["DEFAULT_OPTIONS", "Grouping", "MaskOptions"]
