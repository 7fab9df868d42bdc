from typing import Optional


class APIError(Exception):
    """Unified error class for everything the pipeline raises."""

    def __init__(self, source: str, code: str, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.source = source
        self.code = code
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "code": self.code,
            "message": self.message,
            **({"details": self.details} if self.details else {}),
        }


class ValidationError(APIError):
    """Bad or missing request parameter (HTTP 400)."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__("request", "VALIDATION_ERROR", message, details)


class UpstreamError(APIError):
    """FotMob answered with a non-success status or an unreadable body."""

    def __init__(self, status: Optional[int], url: str, code: Optional[str] = None, details: Optional[str] = None):
        super().__init__(
            "FotMob",
            code or str(status),
            f"FotMob {status}: {url}",
            details,
        )
        self.status = status
        self.url = url


class NetworkError(APIError):
    """Transport failure: timeout, DNS, refused connection."""

    def __init__(self, url: str, details: Optional[str] = None, timeout: bool = False):
        super().__init__(
            "FotMob",
            "TIMEOUT" if timeout else "NETWORK_ERROR",
            "FotMob did not respond in time." if timeout else "A network error occurred.",
            details,
        )
        self.url = url


class EmptyResultError(APIError):
    """A resource exists upstream but carries no usable rows."""

    def __init__(self, what: str, details: Optional[str] = None):
        super().__init__("FotMob", "EMPTY_RESULT", f"No {what} found", details)
