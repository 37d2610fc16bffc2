from collections.abc import Generator
from contextlib import contextmanager

from botocore.exceptions import ClientError


class PagerError(Exception):
    """Base exception for all pagewindow errors."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class UninitializedQueryError(PagerError):
    """Raised when init() runs before a query collaborator was attached."""

    def __init__(self, message: str = "Uninitialized query") -> None:
        super().__init__(message)


class PagerNotInitializedError(PagerError):
    """Raised when a value computed by init() is read before init() ran."""

    def __init__(self, attribute: str) -> None:
        super().__init__(f"'{attribute}' is not available before init() has been called")
        self.attribute = attribute


class PagerFrozenError(PagerError):
    """Raised when pager state is changed after init()."""

    def __init__(self, attribute: str) -> None:
        super().__init__(f"Cannot change '{attribute}' after init() has been called")
        self.attribute = attribute


class TableNotFoundError(PagerError):
    """Raised when the DynamoDB table backing a query does not exist."""

    def __init__(self, table_name: str, original_error: Exception | None = None) -> None:
        super().__init__(f"Table '{table_name}' not found", original_error)
        self.table_name = table_name


class ProvisionedThroughputExceededError(PagerError):
    """Raised when DynamoDB throttles requests."""

    def __init__(
        self, message: str = "Request rate exceeded", original_error: Exception | None = None
    ) -> None:
        super().__init__(message, original_error)


class RequestTimeoutError(PagerError):
    """Raised when a request to DynamoDB times out."""

    def __init__(
        self, message: str = "Request timed out", original_error: Exception | None = None
    ) -> None:
        super().__init__(message, original_error)


class ValidationError(PagerError):
    """Raised for request validation errors reported by DynamoDB."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message, original_error)


@contextmanager
def handle_dynamo_errors(table_name: str | None = None) -> Generator[None, None, None]:
    """
    Context manager that catches botocore.exceptions.ClientError
    and raises the appropriate PagerError subclass.

    Args:
        table_name: Optional table name for better error messages

    Usage:
        with handle_dynamo_errors(table_name="users"):
            client.scan(...)
    """
    try:
        yield
    except ClientError as e:
        error_code = e.response.get("Error", {}).get("Code", "Unknown")
        error_message = e.response.get("Error", {}).get("Message", str(e))

        if error_code == "ResourceNotFoundException":
            raise TableNotFoundError(table_name=table_name or "unknown", original_error=e) from e

        if error_code in (
            "ProvisionedThroughputExceededException",
            "ThrottlingException",
            "RequestLimitExceeded",
        ):
            raise ProvisionedThroughputExceededError(message=error_message, original_error=e) from e

        if error_code in ("ValidationException", "SerializationException"):
            raise ValidationError(message=error_message, original_error=e) from e

        if error_code in ("RequestTimeout", "RequestTimeoutException"):
            raise RequestTimeoutError(message=error_message, original_error=e) from e

        # Unknown error: wrap in generic PagerError
        raise PagerError(
            message=f"DynamoDB error ({error_code}): {error_message}", original_error=e
        ) from e
