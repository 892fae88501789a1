"""Exceptions raised by the site REST clients."""


class ClientError(Exception):
    """Base exception for all site client errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ConnectionError(ClientError):
    """Raised when the site cannot be reached after all retries."""

    pass


class APIError(ClientError):
    """Raised when the site answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int, *args, **kwargs):
        self.status_code = status_code
        super().__init__(message, *args, **kwargs)


class AuthenticationError(APIError):
    """Raised on 401/403 responses; the access token is missing or lacks rights."""

    def __init__(self, message: str = "Access denied", status_code: int = 401):
        super().__init__(message, status_code=status_code)


class RateLimitError(APIError):
    """Raised when the site throttles the request (429)."""

    def __init__(self, message: str = "Request throttled"):
        super().__init__(message, status_code=429)


class NotFoundError(APIError):
    """Raised when a file or folder does not exist (404)."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)
