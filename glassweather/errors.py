"""Error hierarchy for the weather widget.

Per-cycle failures (transport, API, decode, template) are caught at the stage
that produced them. ``SetupError`` is the only kind that aborts startup.
"""


class WidgetError(Exception):
    """Base class for every error raised by the widget."""


class TransportError(WidgetError):
    """Raised when a request never produced a usable HTTP response."""

    def __init__(self, message: str, endpoint: str = ""):
        super().__init__(message)
        self.endpoint = endpoint


class ApiError(WidgetError):
    """Raised when the provider answers with a decodable error envelope."""

    def __init__(
        self,
        message: str,
        code: int = 0,
        status_code: int | None = None,
        endpoint: str = "",
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.endpoint = endpoint


class DecodeError(WidgetError):
    """Raised when a response body does not match the expected shape."""

    def __init__(self, message: str, endpoint: str = ""):
        super().__init__(message)
        self.endpoint = endpoint


class TemplateError(WidgetError):
    """Raised when rendering a valid model fails inside the template engine."""


class SetupError(WidgetError):
    """Raised for unrecoverable configuration or template problems at startup."""
