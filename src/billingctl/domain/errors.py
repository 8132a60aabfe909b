"""Error contracts for command validation.

Every error raised by this package derives from :class:`PlatformApiError`
and renders to an :class:`ApiGlobalErrorResponse`, the HTTP 400 body
callers already consume. Field violations are collected as
:class:`ApiParameterError` rows and raised together, never one at a time.

Errors raised by write services are not wrapped here.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

VALIDATION_ERRORS_EXIST = "validation.msg.validation.errors.exist"

_BAD_REQUEST_DEVELOPER_MESSAGE = (
    "The request was invalid. This typically will happen due to validation errors "
    "which are provided."
)


class ApiParameterError(BaseModel):
    """One parameter violation: ``(parameter, code, message)`` plus context."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    parameter_name: str
    user_message_globalisation_code: str
    default_user_message: str
    developer_message: str
    value: Any = None
    args: list[Any] = Field(default_factory=list)

    @classmethod
    def parameter_error(
        cls,
        code: str,
        message: str,
        parameter_name: str,
        value: Any = None,
        *args: Any,
    ) -> ApiParameterError:
        """Build an error whose developer and user messages are the same text."""
        return cls(
            parameter_name=parameter_name,
            user_message_globalisation_code=code,
            default_user_message=message,
            developer_message=message,
            value=value,
            args=list(args),
        )

    @property
    def code(self) -> str:
        return self.user_message_globalisation_code

    @property
    def message(self) -> str:
        return self.default_user_message


class ApiGlobalErrorResponse(BaseModel):
    """Wire shape of a rejected request (serialise with ``by_alias=True``)."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    developer_message: str
    http_status_code: str
    default_user_message: str
    user_message_globalisation_code: str
    errors: list[ApiParameterError] = Field(default_factory=list)


class PlatformApiError(Exception):
    """Base class for request errors that render as a client error response."""

    status_code: ClassVar[int] = 400

    def __init__(
        self,
        global_code: str,
        default_message: str,
        errors: Iterable[ApiParameterError] = (),
    ) -> None:
        super().__init__(default_message)
        self.global_code = global_code
        self.default_message = default_message
        self.errors: list[ApiParameterError] = list(errors)

    @property
    def parameter_names(self) -> list[str]:
        """Parameter names in error order (duplicates kept)."""
        return [e.parameter_name for e in self.errors]

    def to_response(self) -> ApiGlobalErrorResponse:
        return ApiGlobalErrorResponse(
            developer_message=_BAD_REQUEST_DEVELOPER_MESSAGE,
            http_status_code=str(self.status_code),
            default_user_message=self.default_message,
            user_message_globalisation_code=self.global_code,
            errors=self.errors,
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(global_code={self.global_code!r}, "
            f"errors={self.parameter_names!r})"
        )


class InvalidJsonError(PlatformApiError):
    """The request body is empty, blank, or not a JSON object."""

    def __init__(self, detail: str | None = None) -> None:
        message = "The request body is empty or is not a valid JSON object."
        super().__init__("error.msg.invalid.request.body", message)
        self.detail = detail


class UnsupportedParameterError(PlatformApiError):
    """The payload carries keys outside the command's supported set."""

    def __init__(self, unsupported: Iterable[str]) -> None:
        self.unsupported_parameters = list(unsupported)
        errors = [
            ApiParameterError.parameter_error(
                "error.msg.parameter.unsupported",
                f"The parameter {name} is not supported.",
                name,
            )
            for name in self.unsupported_parameters
        ]
        super().__init__(
            "error.msg.parameter.unsupported",
            "One or more parameters are not supported.",
            errors,
        )


class PlatformApiDataValidationError(PlatformApiError):
    """Aggregate of every field violation found in one validation pass."""

    def __init__(
        self,
        errors: Iterable[ApiParameterError],
        *,
        global_code: str = VALIDATION_ERRORS_EXIST,
        default_message: str = "Validation errors exist.",
        resource: str | None = None,
    ) -> None:
        super().__init__(global_code, default_message, errors)
        self.resource = resource


class InvalidParameterValueError(PlatformApiError):
    """A typed accessor could not coerce a parameter value."""

    def __init__(self, parameter_name: str, value: Any, expected: str) -> None:
        error = ApiParameterError.parameter_error(
            f"validation.msg.invalid.{expected}.format",
            f"The parameter {parameter_name} has value {value!r} which is invalid {expected}.",
            parameter_name,
            value,
        )
        super().__init__(VALIDATION_ERRORS_EXIST, "Validation errors exist.", [error])
        self.parameter_name = parameter_name


class UnsupportedCommandError(PlatformApiError):
    """No handler is registered for the requested command type."""

    def __init__(self, command_type: str | None) -> None:
        self.command_type = command_type
        super().__init__(
            "error.msg.command.unsupported",
            f"Command {command_type!r} is not supported.",
        )
