from __future__ import annotations

from typing import Any

from itemservice.schemas.validation import ValidationError

_MISSING = object()


def resolve_message_codes(
    code: str,
    object_name: str,
    field: str | None = None,
    rejected_value: Any = _MISSING,
) -> list[str]:
    """
    Candidate message keys, most specific first:
      field error:  range.item.price, range.price, range.int, range
      object error: totalPriceMin.item, totalPriceMin
    The type key is only added when a non-None rejected value is known.
    """
    if field is None:
        return [f"{code}.{object_name}", code]

    codes = [f"{code}.{object_name}.{field}", f"{code}.{field}"]
    if rejected_value is not _MISSING and rejected_value is not None:
        codes.append(f"{code}.{type(rejected_value).__name__}")
    codes.append(code)
    return codes


class BindingErrors:
    """
    Collects validation errors for a single target object, in the order they
    are rejected. Entries are never removed or merged.
    """

    def __init__(self, object_name: str = "item"):
        if not object_name:
            raise ValueError("object_name must not be empty")
        self.object_name = object_name
        self._errors: list[ValidationError] = []

    def reject_value(
        self,
        field: str,
        code: str,
        args: list[int] | None = None,
        *,
        rejected_value: Any = _MISSING,
    ) -> None:
        if not field:
            raise ValueError("field must not be empty; use reject() for object-level errors")
        if not code:
            raise ValueError("code must not be empty")

        self._errors.append(
            ValidationError(
                object_name=self.object_name,
                field=field,
                code=code,
                args=list(args or []),
                codes=resolve_message_codes(code, self.object_name, field, rejected_value),
            )
        )

    def reject(self, code: str, args: list[int] | None = None) -> None:
        if not code:
            raise ValueError("code must not be empty")

        self._errors.append(
            ValidationError(
                object_name=self.object_name,
                field=None,
                code=code,
                args=list(args or []),
                codes=resolve_message_codes(code, self.object_name),
            )
        )

    def has_errors(self) -> bool:
        return bool(self._errors)

    @property
    def error_count(self) -> int:
        return len(self._errors)

    @property
    def all_errors(self) -> list[ValidationError]:
        return list(self._errors)

    def field_errors(self, field: str | None = None) -> list[ValidationError]:
        """All field-level errors, or only those for `field` when given."""
        return [
            e for e in self._errors
            if e.field is not None and (field is None or e.field == field)
        ]

    def has_field_errors(self, field: str) -> bool:
        return any(e.field == field for e in self._errors)

    def global_errors(self) -> list[ValidationError]:
        return [e for e in self._errors if e.field is None]

    def __len__(self) -> int:
        return len(self._errors)

    def __repr__(self) -> str:
        return f"BindingErrors(object_name={self.object_name!r}, errors={[e.code for e in self._errors]!r})"
