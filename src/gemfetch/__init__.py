"""synchronous client for the RubyGems.org gem metadata API."""
from .domain.errors import GemfetchError, NotFoundError, HttpError, DecodeError, UrlError
from .domain.models import PackageInfo, DependencyList, DependencyEntry
from .registry.client import RegistryClient

__version__ = "0.1.0"

__all__ = [
    "RegistryClient",
    "PackageInfo",
    "DependencyList",
    "DependencyEntry",
    "GemfetchError",
    "NotFoundError",
    "HttpError",
    "DecodeError",
    "UrlError",
]
