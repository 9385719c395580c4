"""Custom exception hierarchy for the webinar backend application layer."""


class WebinarBackendError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and suggested status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(WebinarBackendError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class WebinarNotFoundError(NotFoundError):
    """Webinar not found error."""

    def __init__(self, webinar_id: str | None = None) -> None:
        """Initialize with the identifier that was looked up."""
        self.webinar_id = webinar_id
        super().__init__("Webinar not found")
