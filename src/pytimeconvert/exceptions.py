"""Library exceptions."""

from __future__ import annotations


class PyTimeConvertError(Exception):
    """Base exception for the library."""

    error_type = "unknown"
    default_error_code: str | None = None

    def __init__(
        self,
        message: str | None = None,
        *,
        error_code: str | None = None,
        detail: str | None = None,
        user_message: str | None = None,
    ) -> None:
        self.error_code = error_code or self.default_error_code
        self.detail = detail if detail is not None else message
        self.user_message = user_message
        super().__init__(message if message is not None else (detail or ""))


class ValidationError(PyTimeConvertError):
    """Raised when inputs fail validation."""

    error_type = "validation"
    default_error_code = "validation_error"


class ZoneError(ValidationError):
    """Raised when a zone specifier cannot be built."""

    error_type = "zone"
    default_error_code = "zone_error"


class CalendarError(ValidationError):
    """Raised when date or time components are out of range."""

    error_type = "calendar"
    default_error_code = "calendar_error"


class ConfigError(PyTimeConvertError):
    """Raised when converter configuration is invalid."""

    error_type = "config"
    default_error_code = "config_error"
