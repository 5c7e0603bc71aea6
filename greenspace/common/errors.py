"""Domain errors and failure typing."""


class GreenspaceError(Exception):
    """Base class for catalogue failures."""

    error_code = "GREENSPACE_ERROR"


class ConfigError(GreenspaceError):
    """Raised for invalid or missing configuration."""

    error_code = "CONFIG_ERROR"


class StageError(GreenspaceError):
    """Raised for ingestion stage failures."""

    error_code = "STAGE_ERROR"


class RetrievalError(StageError):
    """Raised when the raw dataset text cannot be retrieved."""

    error_code = "RETRIEVAL_ERROR"


class HttpRequestError(RetrievalError):
    """Raised when an HTTP request fails or returns a non-success status."""

    error_code = "HTTP_ERROR"


class RetryableHttpError(HttpRequestError):
    pass
