"""Error hierarchy: categories, codes and the REST envelope."""

from customer_service.core.errors import (
    AuthenticationError, ConfigurationError, CustomerServiceError, ErrorCategory,
    ErrorSeverity, ResourceNotFoundError, StorageError, UnsupportedGrantError,
)


def test_configuration_error_envelope():
    exc = ConfigurationError("Customer type can not be null.", field="customer_type")

    body = exc.to_response()["error"]

    assert isinstance(exc, CustomerServiceError)
    assert body["code"] == "CONFIGURATION_ERROR"
    assert body["message"] == "Customer type can not be null."
    assert body["category"] == "configuration"
    assert body["severity"] == "error"


def test_not_found_records_the_id():
    exc = ResourceNotFoundError("Customer", "abc")
    assert exc.message == "Customer 'abc' not found"
    assert exc.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert exc.to_response()["error"]["context"]["customer_id"] == "abc"


def test_storage_error_is_critical():
    exc = StorageError("Connection refused", "execute")
    assert exc.message == "Storage execute failed: Connection refused"
    assert exc.severity == ErrorSeverity.CRITICAL
    assert exc.context.operation == "execute"


def test_authorization_errors():
    assert AuthenticationError("nope").category == ErrorCategory.AUTHENTICATION
    grant = UnsupportedGrantError("password")
    assert grant.category == ErrorCategory.VALIDATION
    assert "password" in grant.message
