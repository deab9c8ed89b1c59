"""
Application Custom Exceptions

Purpose:
    - Standardize error handling across Melodic
    - Prevent leaking internal errors
    - Maintain consistent API error format
"""

# Messages
from . import messages





class AppException(Exception):
    """
    Base application exception.
    """

    def __init__(
        self,
        error_code: str,
        message: str,
        status_code: int = 400,
        details: str = None,
        needs_api_key: bool = False
    ):
        """
        Args:
            error_code (str): Unique business error identifier
            message (str): User-friendly error message
            status_code (int): HTTP status code (default: 400)
            details (str): Optional internal/debug details
            needs_api_key (bool): Tells the client to prompt for a key
        """

        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        self.needs_api_key = needs_api_key

        super().__init__(message)



    def to_dict(self) -> dict:
        """
        Convert exception to standardized API response format.
        """

        response = {
            "status": "error",
            "error_code": self.error_code,
            "message": self.message
        }

        if self.details:
            response["details"] = self.details

        if self.needs_api_key:
            response["needsApiKey"] = True

        return response





# --------------------------------------------
# Specific Exception Types
# --------------------------------------------

class ValidationException(AppException):
    """
    Raised when validation fails.
    """

    def __init__(self, message: str, error_code: str = "VALIDATION_ERROR", details: str = None):
        super().__init__(
            error_code = error_code,
            message = message,
            status_code = 400,
            details = details
        )





class ConfigurationException(AppException):
    """
    Raised when a provider credential is missing on the server.
    """

    def __init__(self, provider: str, env_var: str):
        super().__init__(
            error_code = "CONFIGURATION_ERROR",
            message = messages.ERROR["PROVIDER_KEY_MISSING"].format(provider = provider, env_var = env_var),
            status_code = 500,
            needs_api_key = True
        )
        self.provider = provider
        self.env_var = env_var





class UpstreamException(AppException):
    """
    Raised when the provider answers with a non-success status or a
    payload we cannot read.
    """

    def __init__(self, provider: str, upstream_status: int = None, body: str = None):
        status_text = upstream_status if upstream_status is not None else "no response"
        message = messages.ERROR["UPSTREAM_FAILED"].format(
            provider = provider, status = status_text, body = body or ""
        )
        super().__init__(
            error_code = "UPSTREAM_ERROR",
            message = message.strip(),
            status_code = 500,
            details = body
        )
        self.provider = provider
        self.upstream_status = upstream_status





class StorageException(AppException):
    """
    Raised when a write to the message store fails.
    """

    def __init__(self, error_code: str, message: str, details: str = None):
        super().__init__(
            error_code = error_code,
            message = message,
            status_code = 500,
            details = details
        )





class NotFoundException(AppException):
    """
    Raised when resource is not found.
    """

    def __init__(self, message: str = "Resource not found"):
        super().__init__(
            error_code = "NOT_FOUND",
            message = message,
            status_code = 404
        )





class InternalServerException(AppException):
    """
    Raised for unexpected system errors.
    """

    def __init__(self, details: str = None):
        super().__init__(
            error_code = "INTERNAL_SERVER_ERROR",
            message = "Something went wrong. Please try again later.",
            status_code = 500,
            details  = details
        )
