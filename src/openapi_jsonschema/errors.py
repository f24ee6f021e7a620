"""Error hierarchy for the openapi-jsonschema converter."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "ConversionError",
    "ConfigNotFoundError",
    "ConfigError",
    "InvalidTypeError",
    "ConversionFailedError",
    "MalformedSchemaError",
    "DocumentNotFoundError",
    "DocumentParseError",
    "ErrorCodes",
]


class ConversionError(Exception):
    """Base error for all converter errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(ConversionError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(ConversionError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class InvalidTypeError(ConversionError):
    """Raised when a schema declares a type outside the JSON Schema primitives."""

    def __init__(self, type_value: Any, path: str = "/", **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_TYPE",
            message=f'Type "{type_value}" is not a valid type',
            details={"type": type_value, "path": path},
            **kwargs,
        )

    @property
    def type_value(self) -> Any:
        """The rejected type value."""
        return self.details["type"]

    @property
    def path(self) -> str:
        """Location of the offending node inside the converted schema."""
        return self.details["path"]


class ConversionFailedError(ConversionError):
    """Raised when there is no schema left to convert."""

    def __init__(self, reason: str = "Schema is empty after preparation", **kwargs: Any) -> None:
        super().__init__(
            code="CONVERSION_FAILED",
            message=f"Conversion failed: {reason}",
            details={"reason": reason},
            **kwargs,
        )


class MalformedSchemaError(ConversionError):
    """Raised when a schema value has the wrong shape, e.g. a list where a node is expected."""

    def __init__(self, path: str, expected: str, actual: str, **kwargs: Any) -> None:
        super().__init__(
            code="MALFORMED_SCHEMA",
            message=f"Malformed schema at {path}: expected {expected}, got {actual}",
            details={"path": path, "expected": expected, "actual": actual},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """Location of the malformed value."""
        return self.details["path"]


class DocumentNotFoundError(ConversionError):
    """Raised when a source document file cannot be found."""

    def __init__(self, document_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="DOCUMENT_NOT_FOUND",
            message=f"Document not found: {document_path}",
            details={"document_path": document_path},
            **kwargs,
        )


class DocumentParseError(ConversionError):
    """Raised when a source document has invalid syntax or is not a mapping."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="DOCUMENT_PARSE_ERROR", message=message, **kwargs)


class ErrorCodes:
    """All converter error codes as constants.

    Use these instead of hardcoding error code strings.

    Example:
        if error.code == ErrorCodes.INVALID_TYPE:
            report_bad_type(error.details["path"])
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    INVALID_TYPE = "INVALID_TYPE"
    CONVERSION_FAILED = "CONVERSION_FAILED"
    MALFORMED_SCHEMA = "MALFORMED_SCHEMA"
    DOCUMENT_NOT_FOUND = "DOCUMENT_NOT_FOUND"
    DOCUMENT_PARSE_ERROR = "DOCUMENT_PARSE_ERROR"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
