from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from itemservice.core.errors import BindingErrors


class ValidationError(BaseModel):
    """Individual validation error"""
    object_name: str
    field: str | None = None  # None for object-level errors
    code: str  # required, range, max, totalPriceMin, etc.
    args: list[int] = Field(default_factory=list)
    codes: list[str] = Field(default_factory=list)  # message keys, most specific first

    @property
    def is_global(self) -> bool:
        return self.field is None


class ValidationResult(BaseModel):
    """Outcome of validating one object"""
    valid: bool
    errors: list[ValidationError]

    @classmethod
    def from_errors(cls, errors: BindingErrors) -> ValidationResult:
        collected = errors.all_errors
        return cls(valid=not collected, errors=collected)
