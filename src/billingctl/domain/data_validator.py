"""DataValidatorBuilder — fluent field checks over a shared error list.

Usage::

    errors: list[ApiParameterError] = []
    builder = DataValidatorBuilder(errors).resource("item")
    builder.reset().parameter("serialNumber").value(serial).not_blank().not_null()
    builder.reset().parameter("grnId").value(grn_id).ignore_if_null().integer()
    builder.raise_if_errors()

INVARIANT: Every failing check appends one error. Checks never stop the
chain and never raise; only :meth:`raise_if_errors` raises.
"""

from __future__ import annotations

from typing import Any, Self

from billingctl.domain.errors import ApiParameterError, PlatformApiDataValidationError
from billingctl.domain.json_helper import coerce_integer


class DataValidatorBuilder:
    """Collects :class:`ApiParameterError` rows for one resource."""

    def __init__(self, errors: list[ApiParameterError]) -> None:
        self._errors = errors
        self._resource: str | None = None
        self._parameter: str | None = None
        self._value: Any = None
        self._ignore_null = False

    @property
    def errors(self) -> list[ApiParameterError]:
        return self._errors

    # ------------------------------------------------------------------
    # Chain setup
    # ------------------------------------------------------------------

    def resource(self, name: str) -> Self:
        self._resource = name
        return self

    def reset(self) -> Self:
        """Start a new field chain (the resource is kept)."""
        self._parameter = None
        self._value = None
        self._ignore_null = False
        return self

    def parameter(self, name: str) -> Self:
        self._parameter = name
        return self

    def value(self, value: Any) -> Self:
        self._value = value
        return self

    def ignore_if_null(self) -> Self:
        """Skip the rest of this chain when the value is None."""
        self._ignore_null = True
        return self

    # ------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------

    def not_null(self) -> Self:
        if self._skipped():
            return self
        if self._value is None:
            self._add("cannot.be.blank", f"The parameter {self._parameter} is mandatory.")
        return self

    def not_blank(self) -> Self:
        if self._skipped():
            return self
        if self._value is None or not str(self._value).strip():
            self._add("cannot.be.blank", f"The parameter {self._parameter} is mandatory.")
        return self

    def not_exceeding_length_of(self, max_length: int) -> Self:
        if self._skipped() or self._value is None:
            return self
        if len(str(self._value)) > max_length:
            self._add(
                "exceeds.max.length",
                f"The parameter {self._parameter} exceeds max length of {max_length}.",
                max_length,
            )
        return self

    def integer(self) -> Self:
        """Numeric-required: a present value must be integral."""
        if self._skipped() or self._value is None:
            return self
        if coerce_integer(self._value) is None:
            self._add("not.a.number", f"The parameter {self._parameter} must be a number.")
        return self

    def integer_greater_than_zero(self) -> Self:
        if self._skipped() or self._value is None:
            return self
        number = coerce_integer(self._value)
        if number is not None and number <= 0:
            self._add(
                "not.greater.than.zero",
                f"The parameter {self._parameter} must be greater than 0.",
                0,
            )
        return self

    # ------------------------------------------------------------------
    # Outcome
    # ------------------------------------------------------------------

    def raise_if_errors(self) -> None:
        """Raise the aggregate error when any check failed."""
        if self._errors:
            raise PlatformApiDataValidationError(self._errors, resource=self._resource)

    def _skipped(self) -> bool:
        return self._ignore_null and self._value is None

    def _add(self, suffix: str, message: str, *args: Any) -> None:
        prefix = f"validation.msg.{self._resource}" if self._resource else "validation.msg"
        self._errors.append(
            ApiParameterError.parameter_error(
                f"{prefix}.{self._parameter}.{suffix}",
                message,
                self._parameter or "",
                self._value,
                *args,
            )
        )
