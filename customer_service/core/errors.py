"""Error Hierarchy: typed, categorized exceptions for all Customer Service failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - The category is the abstract error kind; HTTP status codes are chosen by
      the api layer (api/error_handlers.py), never here
    - to_response() produces the REST error envelope
    - Absence of a customer inside the core is None/False, not an exception

Design Decisions:
    - Single hierarchy with CustomerServiceError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Abstract error kinds, mapped to transport statuses by the api layer."""
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    STORAGE = "storage"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and error envelopes."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    customer_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class CustomerServiceError(Exception):
    """Base exception for all Customer Service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "customer_id": self.context.customer_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Domain Errors ──────────────────────────────────────────────

class ConfigurationError(CustomerServiceError):
    """A required discriminator (customer type, country) is missing."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.ERROR, context,
        )
        self.field = field


class ResourceNotFoundError(CustomerServiceError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.customer_id = ctx.customer_id or resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx,
        )


# ─── Authorization Errors ───────────────────────────────────────

class AuthenticationError(CustomerServiceError):
    """Missing, unknown or expired credentials."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "UNAUTHORIZED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context,
        )


class UnsupportedGrantError(CustomerServiceError):
    """Token requested with a grant type other than client_credentials."""
    def __init__(self, grant_type: str, context: ErrorContext | None = None):
        super().__init__(
            f"Unsupported grant type: {grant_type}",
            "UNSUPPORTED_GRANT_TYPE", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context,
        )
        self.grant_type = grant_type


# ─── Infrastructure Errors ──────────────────────────────────────

class StorageError(CustomerServiceError):
    """Backing store operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = ctx.operation or operation
        super().__init__(
            f"Storage {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, ctx,
        )
        self.operation = operation
