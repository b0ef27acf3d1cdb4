import logging
from typing import Optional, Type, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from ..config import DEFAULT_REGISTRY_URL
from ..domain.errors import NotFoundError, HttpError, DecodeError, UrlError
from ..domain.models import PackageInfo

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class RegistryClient:
    """
    synchronous client for the RubyGems.org gem metadata endpoint.

    one instance can be shared between threads: the only state is the
    base URL and the underlying httpx.Client.
    """

    def __init__(self, base_url: str = DEFAULT_REGISTRY_URL, client: Optional[httpx.Client] = None):
        self.base_url = self._parse_base_url(base_url)
        # an injected client belongs to the caller and is left open by close()
        self._owns_client = client is None
        self.client = client if client is not None else httpx.Client(follow_redirects=True)

    def __enter__(self) -> "RegistryClient":
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        if self._owns_client:
            self.client.close()

    def fetch_package_info(self, name: str) -> PackageInfo:
        """
        fetch the published metadata of a gem.

        args:
            name: gem name, e.g. "rails"

        returns:
            the decoded PackageInfo

        raises:
            UrlError: if the name cannot be turned into a request URL
            NotFoundError: if the registry answers 404
            DecodeError: if the body is not a valid gem record
            HttpError: for any other transport failure or error status
        """
        url = self._build_url(name)
        package = self._get(url, name, PackageInfo)
        logger.debug(f"decoded {package!r}")
        return package

    def _get(self, url: httpx.URL, name: str, model: Type[ModelT]) -> ModelT:
        logger.info(f"GET {url}")
        try:
            response = self.client.get(url)
        except httpx.InvalidURL as e:
            raise UrlError(name, str(e)) from e
        except httpx.HTTPError as e:
            raise HttpError(f"Request to {url} failed: {e}", url=str(url)) from e

        if response.status_code == 404:
            raise NotFoundError(name)

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise HttpError(
                f"HTTP {response.status_code}: {response.reason_phrase} for {url}",
                url=str(url),
                status_code=response.status_code,
            ) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise DecodeError(
                f"Invalid JSON from {url}: {e}",
                url=str(url),
                status_code=response.status_code,
            ) from e
        logger.debug(f"raw payload for {name}: {payload}")

        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise DecodeError(
                f"Unexpected response shape from {url}: {e}",
                url=str(url),
                status_code=response.status_code,
            ) from e

    def _build_url(self, name: str) -> httpx.URL:
        if not name or not name.strip():
            raise UrlError(name, "gem name is empty")
        if name in (".", ".."):
            raise UrlError(name, "dot segments are not gem names")
        if "/" in name or "\\" in name:
            raise UrlError(name, "path separators are not allowed")
        if any(ord(c) < 0x20 or ord(c) == 0x7F for c in name):
            raise UrlError(name, "control characters are not allowed")

        try:
            segment = quote(name, safe="")
        except UnicodeEncodeError as e:
            raise UrlError(name, "not encodable as UTF-8") from e

        try:
            return self.base_url.join(f"{segment}.json")
        except httpx.InvalidURL as e:
            raise UrlError(name, str(e)) from e

    @staticmethod
    def _parse_base_url(base_url: str) -> httpx.URL:
        try:
            url = httpx.URL(base_url)
        except httpx.InvalidURL as e:
            raise UrlError(base_url, str(e)) from e

        if url.scheme not in ("http", "https") or not url.host:
            raise UrlError(base_url, "expected an http(s) URL with a host")

        # relative joins only stay under /gems/ with a trailing slash
        if not url.path.endswith("/"):
            url = url.copy_with(path=url.path + "/")
        return url
