from typing import Optional


class GemfetchError(Exception):
    """base class for exceptions in gemfetch."""
    pass


class NotFoundError(GemfetchError):
    """raised when the registry has no gem with the requested name."""
    def __init__(self, package_name: str):
        self.package_name = package_name
        super().__init__(f"Gem '{package_name}' not found")


class HttpError(GemfetchError):
    """raised when the request fails or the registry answers with an error status."""
    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class DecodeError(HttpError):
    """raised when a successful response body does not decode into a gem record."""
    pass


class UrlError(GemfetchError):
    """raised when a value cannot be turned into a valid request URL."""
    def __init__(self, value: str, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid URL component {value!r}: {reason}")
