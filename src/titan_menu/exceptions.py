"""Errors raised by the TitanSchools menu client"""


class TitanMenuError(Exception):
    """Base class for every error raised by titan_menu"""


class ConfigurationError(TitanMenuError, ValueError):
    """A required configuration value is missing"""


class TitanApiError(TitanMenuError):
    """The TitanSchools API answered with an HTTP error status.

    Attributes:
        status_code: HTTP status returned by the API
        error_description: The ``error_description`` field of the error body, if any
    """

    def __init__(self, message: str, status_code: int, error_description: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.error_description = error_description


class UpstreamUnavailable(TitanApiError):
    """The API reported a server-side (5xx) failure"""

    def __init__(self, status_code: int, error_description: str | None = None):
        super().__init__(
            f"The TitanSchools API is unavailable: {error_description}",
            status_code,
            error_description,
        )


class UpstreamRejected(TitanApiError):
    """The API rejected the request (4xx), usually because of bad config values"""

    def __init__(self, status_code: int, error_description: str | None = None):
        super().__init__(
            "The TitanSchools API sure didn't like the request we sent and responded with: "
            f"{error_description or status_code}. Maybe double check your config values.",
            status_code,
            error_description,
        )
