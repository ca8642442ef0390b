# ---------------------------------
# TYPED EXCEPTIONS
# ---------------------------------


class PortalError(Exception):
    """Base class for all request-portal domain errors."""


class RequestNotFoundError(PortalError):
    """Raised when no request record matches the given identifier."""

    def __init__(self, request_id: str):
        self.request_id = request_id
        super().__init__(f"Request not found: {request_id}")


class MissingRequiredFieldError(PortalError):
    """Raised when a record lacks data the script templates need."""

    def __init__(self, field: str, account_type: str):
        self.field = field
        self.account_type = account_type
        super().__init__(f"Field '{field}' is required for {account_type.upper()} requests")


class RequestValidationError(PortalError):
    """Raised when submitted fields fail structural validation."""
    pass
