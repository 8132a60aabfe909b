"""FromJsonHelper — JSON decoding and parameter extraction.

Payloads are decoded through a pydantic ``TypeAdapter`` bound to a JSON
object schema, so a body that is not an object fails the same way as a
malformed one.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from billingctl.domain.errors import (
    InvalidJsonError,
    InvalidParameterValueError,
    UnsupportedParameterError,
)

_JSON_OBJECT: TypeAdapter[dict[str, Any]] = TypeAdapter(dict[str, Any])


def _as_string(value: Any) -> str | None:
    """Primitive string form of *value*; None for null and non-primitives."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return str(value)
    return None


def coerce_integer(value: Any) -> int | None:
    """Return *value* as an int, or None when it is not integral.

    Accepts ints, integral floats, and digit strings (optionally signed).
    Booleans are not numbers here.

    Examples:
        >>> coerce_integer("42")
        42
        >>> coerce_integer(3.0)
        3
        >>> coerce_integer("4a") is None
        True
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        digits = text[1:] if text[:1] in ("+", "-") else text
        if digits.isascii() and digits.isdigit():
            return int(text)
    return None


def decode_body(body: str | bytes) -> str:
    """Request body as text; bytes must be UTF-8.

    Raises:
        InvalidJsonError: If *body* is bytes that are not valid UTF-8.
    """
    if isinstance(body, str):
        return body
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidJsonError(str(exc)) from exc


class FromJsonHelper:
    """Stateless helper shared by commands and validators."""

    def parse(self, json: str | None) -> dict[str, Any]:
        """Decode *json* into a parameter map.

        Raises:
            InvalidJsonError: If *json* is empty, blank, malformed, or not an object.
        """
        if json is None or not json.strip():
            raise InvalidJsonError()
        try:
            return _JSON_OBJECT.validate_json(json)
        except ValidationError as exc:
            raise InvalidJsonError(str(exc)) from exc

    def check_for_unsupported_parameters(
        self,
        json: str | Mapping[str, Any],
        supported_parameters: Collection[str],
    ) -> None:
        """Reject any key outside *supported_parameters*.

        Unsupported keys are reported in payload order.
        """
        element = self.parse(json) if isinstance(json, str) else json
        unsupported = [key for key in element if key not in supported_parameters]
        if unsupported:
            raise UnsupportedParameterError(unsupported)

    def parameter_exists(self, name: str, element: Mapping[str, Any]) -> bool:
        return name in element

    def extract_string_named(self, name: str, element: Mapping[str, Any]) -> str | None:
        """Trimmed string value; None when absent, blank, or not a primitive."""
        text = _as_string(element.get(name))
        if text is None or not text.strip():
            return None
        return text.strip()

    def extract_integer_named(self, name: str, element: Mapping[str, Any]) -> int | None:
        """Integer value; None when absent or blank.

        Raises:
            InvalidParameterValueError: If the value is present but not integral.
        """
        value = element.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        number = coerce_integer(value)
        if number is None:
            raise InvalidParameterValueError(name, value, "integer")
        return number

    def extract_boolean_named(self, name: str, element: Mapping[str, Any]) -> bool | None:
        value = element.get(name)
        if value is None or isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in ("true", "false"):
            return value.strip().lower() == "true"
        raise InvalidParameterValueError(name, value, "boolean")
