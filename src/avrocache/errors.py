"""Error hierarchy for the avrocache package."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "AvroCacheError",
    "ConfigNotFoundError",
    "ConfigError",
    "InvalidIdentifierError",
    "SchemaNotFoundError",
    "SchemaParseError",
    "RegistryError",
    "UnconfiguredRegistryError",
    "UnknownSubjectError",
    "RegistryNotFoundError",
    "ErrorCodes",
]


class AvroCacheError(Exception):
    """Base error for all avrocache errors."""

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


class ConfigNotFoundError(AvroCacheError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(AvroCacheError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class InvalidIdentifierError(AvroCacheError):
    """Raised when resolve() receives something that is neither a global ID nor a name."""

    def __init__(self, identifier: Any, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_IDENTIFIER",
            message=f"Invalid schema identifier: {identifier!r}",
            details={"identifier": identifier},
            **kwargs,
        )


class SchemaNotFoundError(AvroCacheError):
    """Raised when a schema file cannot be found in the local schema store."""

    def __init__(self, schema_name: str, path: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            code="SCHEMA_NOT_FOUND",
            message=f"Schema not found: {schema_name}",
            details={"schema_name": schema_name, "path": path},
            **kwargs,
        )

    @property
    def schema_name(self) -> str:
        """The schema name that was looked up."""
        return self.details["schema_name"]


class SchemaParseError(AvroCacheError):
    """Raised when a schema file has invalid syntax."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="SCHEMA_PARSE_ERROR", message=message, **kwargs)


class RegistryError(AvroCacheError):
    """Raised when the schema registry fails or returns something unusable."""

    def __init__(
        self,
        message: str,
        status: int | None = None,
        error_code: int | None = None,
        code: str = "REGISTRY_ERROR",
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", None) or {}
        details.update({"status": status, "error_code": error_code})
        super().__init__(code=code, message=message, details=details, **kwargs)

    @property
    def status(self) -> int | None:
        """HTTP status returned by the registry, if any."""
        return self.details["status"]

    @property
    def error_code(self) -> int | None:
        """Registry-specific error code from the response body, if any."""
        return self.details["error_code"]


class UnconfiguredRegistryError(RegistryError):
    """Raised when no schema registry URL is configured."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(
            message="Schema registry url is not configured",
            code="UNCONFIGURED_REGISTRY",
            **kwargs,
        )


class UnknownSubjectError(RegistryError):
    """Raised when the registry confirms a subject does not exist."""

    def __init__(self, subject: str, **kwargs: Any) -> None:
        kwargs.setdefault("status", 404)
        kwargs.setdefault("error_code", 40401)
        super().__init__(
            message=f"Subject not found in registry: {subject}",
            code="UNKNOWN_SUBJECT",
            details={"subject": subject},
            **kwargs,
        )

    @property
    def subject(self) -> str:
        """The subject that is missing from the registry."""
        return self.details["subject"]


class RegistryNotFoundError(RegistryError):
    """Raised when a schema ID or subject version is missing from the registry."""

    def __init__(self, identifier: str | int, **kwargs: Any) -> None:
        kwargs.setdefault("status", 404)
        super().__init__(
            message=f"Not found in registry: {identifier}",
            code="REGISTRY_NOT_FOUND",
            details={"identifier": identifier},
            **kwargs,
        )


class ErrorCodes:
    """All avrocache error codes as constants.

    Example:
        if error.code == ErrorCodes.UNKNOWN_SUBJECT:
            register_from_files()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"
    SCHEMA_NOT_FOUND = "SCHEMA_NOT_FOUND"
    SCHEMA_PARSE_ERROR = "SCHEMA_PARSE_ERROR"
    REGISTRY_ERROR = "REGISTRY_ERROR"
    UNCONFIGURED_REGISTRY = "UNCONFIGURED_REGISTRY"
    UNKNOWN_SUBJECT = "UNKNOWN_SUBJECT"
    REGISTRY_NOT_FOUND = "REGISTRY_NOT_FOUND"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
