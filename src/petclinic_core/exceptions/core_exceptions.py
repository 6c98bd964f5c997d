"""
Exception hierarchy for the petclinic-core package.

Every error raised by the package derives from ``PetClinicException`` and
carries a human-readable ``message``, a stable ``error_code`` and a
``details`` mapping suitable for API error payloads.
"""

import logging
import time
from typing import Any, Dict, Iterable, List, Optional

_SENSITIVE_KEY_PARTS = ("password", "secret", "key", "token", "credential")


class PetClinicException(Exception):
    """
    Root of all petclinic-core errors.

    Attributes:
        message: Human-readable description
        error_code: Machine-readable code, defaults to the class name
        details: Extra structured context
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or type(self).__name__
        self.details = dict(details or {})

    def __str__(self) -> str:
        if not self.details:
            return self.message
        return f"{self.message} (Details: {self.details})"

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form of the error, stamped with the current time."""
        return {
            "error_type": type(self).__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "timestamp": time.time(),
        }

    def log_error(
        self, logger: Optional[logging.Logger] = None, level: int = logging.ERROR
    ) -> None:
        """Log this error, attaching ``to_dict()`` as ``exception_data``."""
        (logger or logging.getLogger(__name__)).log(
            level,
            f"{self.error_code}: {self.message}",
            extra={"exception_data": self.to_dict()},
        )


class ValidationException(PetClinicException):
    """Input or state rejected by a validation rule."""

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        validation_errors: Optional[Dict[str, Any]] = None,
    ):
        details: Dict[str, Any] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        if validation_errors:
            details["validation_errors"] = validation_errors
        super().__init__(message, "VALIDATION_ERROR", details)


class InvalidArgumentException(ValidationException):
    """
    A required argument is null, or names an entity the aggregate does not
    contain (for example an unknown pet id).
    """

    def __init__(
        self,
        message: str = "Invalid argument",
        argument: Optional[str] = None,
        value: Optional[Any] = None,
    ):
        super().__init__(message, field=argument, value=value)
        self.error_code = "INVALID_ARGUMENT"
        self.argument = argument


class BusinessRuleException(ValidationException):
    """A clinic rule was violated, e.g. two pets of one owner sharing a name."""

    def __init__(
        self,
        message: str = "Business rule violated",
        rule_name: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.error_code = "BUSINESS_RULE_ERROR"
        self.rule_name = rule_name
        if rule_name:
            self.details["rule_name"] = rule_name
        if context:
            self.details["context"] = context


class PhotoUploadException(ValidationException):
    """An uploaded pet photo was rejected."""

    def __init__(
        self,
        message: str = "Photo upload rejected",
        filename: Optional[str] = None,
    ):
        super().__init__(message, field="photo", value=filename)
        self.error_code = "PHOTO_UPLOAD_ERROR"


class FileTooLargeException(PhotoUploadException):
    """The upload is bigger than the configured limit."""

    def __init__(
        self,
        message: str = "File size exceeds maximum limit",
        size: Optional[int] = None,
        max_size: Optional[int] = None,
        filename: Optional[str] = None,
    ):
        super().__init__(message, filename=filename)
        self.error_code = "FILE_TOO_LARGE"
        if size is not None:
            self.details["size"] = size
        if max_size is not None:
            self.details["max_size"] = max_size


class UnsupportedFileTypeException(PhotoUploadException):
    """The upload has no extension, or one outside the image allow-list."""

    def __init__(
        self,
        message: str = "File type not supported",
        extension: Optional[str] = None,
        allowed_extensions: Optional[Iterable[str]] = None,
        filename: Optional[str] = None,
    ):
        super().__init__(message, filename=filename)
        self.error_code = "UNSUPPORTED_FILE_TYPE"
        self.details["extension"] = extension or ""
        if allowed_extensions is not None:
            self.details["allowed_extensions"] = list(allowed_extensions)


class InvalidFilenameException(PhotoUploadException):
    """The upload arrived without a filename."""

    def __init__(self, message: str = "Invalid filename"):
        super().__init__(message)
        self.error_code = "INVALID_FILENAME"


class DatabaseException(PetClinicException):
    """
    A database operation failed.

    The driver error, when there is one, is kept on ``original_error`` and
    its text copied into ``details``.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message, error_code, details)
        self.original_error = original_error
        if original_error is not None:
            self.details.setdefault("original_error", str(original_error))


class TransactionException(DatabaseException):
    """A transaction could not be committed and was rolled back."""

    def __init__(
        self,
        message: str = "Database transaction failed",
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message,
            error_code="DATABASE_TRANSACTION_ERROR",
            details={"operation": operation} if operation else None,
            original_error=original_error,
        )


class ConfigurationException(PetClinicException):
    """
    A setting is missing or malformed.

    Values of keys that look like secrets are recorded as ``[REDACTED]``.
    """

    def __init__(
        self,
        message: str = "Configuration error",
        config_key: Optional[str] = None,
        config_value: Optional[str] = None,
    ):
        details: Dict[str, Any] = {}
        if config_key:
            details["config_key"] = config_key
        if config_value:
            details["config_value"] = self._redact(config_key, config_value)
        super().__init__(message, "CONFIGURATION_ERROR", details)

    @staticmethod
    def _redact(key: Optional[str], value: str) -> str:
        if not key or any(part in key.lower() for part in _SENSITIVE_KEY_PARTS):
            return "[REDACTED]"
        return value


def format_validation_errors(errors: List[Dict[str, Any]]) -> Dict[str, List[str]]:
    """
    Group Pydantic ``ValidationError.errors()`` output by dotted field path.

    Errors without a location are filed under ``"root"``.
    """
    formatted: Dict[str, List[str]] = {}
    for error in errors:
        path = ".".join(str(part) for part in error.get("loc", ())) or "root"
        kind = error.get("type", "unknown")
        text = error.get("msg", "Validation error")
        if kind == "missing":
            text = "This field is required"
        elif kind != "value_error":
            text = f"{text} (type: {kind})"
        formatted.setdefault(path, []).append(text)
    return formatted


def create_error_response(
    exception: PetClinicException, include_debug: bool = False
) -> Dict[str, Any]:
    """
    Build the standard error payload for an exception.

    Args:
        exception: Error to describe
        include_debug: Add the raising module and class name

    Returns:
        ``{"success": False, "error": {...}}`` plus an optional ``debug`` block
    """
    error: Dict[str, Any] = {
        "type": type(exception).__name__,
        "code": exception.error_code,
        "message": exception.message,
    }
    if exception.details:
        error["details"] = exception.details

    response: Dict[str, Any] = {"success": False, "error": error}
    if include_debug:
        response["debug"] = {
            "timestamp": time.time(),
            "module": type(exception).__module__,
            "class_name": type(exception).__name__,
        }
    return response


def log_exception_context(
    exception: Exception,
    context: Dict[str, Any],
    logger: Optional[logging.Logger] = None,
    level: int = logging.ERROR,
) -> None:
    """Log any exception together with caller-supplied context."""
    logger = logger or logging.getLogger(__name__)

    if isinstance(exception, PetClinicException):
        data = exception.to_dict()
    else:
        data = {"error_type": type(exception).__name__, "message": str(exception)}
    data["context"] = context

    logger.log(
        level,
        f"{data['error_type']}: {exception} (context: {context})",
        extra={"exception_data": data},
    )
