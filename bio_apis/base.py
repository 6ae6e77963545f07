"""
Base client class with common functionality.

Features:
- Lazily created httpx.AsyncClient (or a caller-supplied one)
- One request per call; no retries, caching or rate limiting
- Consistent mapping of transport failures and HTTP statuses to exceptions
- JSON / pydantic / gzip decoding that fails loudly instead of defaulting
"""

import gzip
import logging
import zlib
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from bio_apis.exceptions import (
    AuthenticationError,
    DecodeError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    RemoteError,
    ServiceUnavailableError,
    TimeoutError,
)
from bio_apis.schemas import DataSource
from bio_apis.settings import api_settings

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class BaseClient:
    """
    Base class for provider clients.

    Subclasses set `source` and build URLs from settings; this class owns the
    HTTP round trip and the error taxonomy.
    """

    source: DataSource  # Must be set by subclass

    def __init__(
        self,
        timeout: int | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize client.

        Args:
            timeout: Request timeout in seconds
            client: Pre-configured httpx client. It is not closed by close().
        """
        self._timeout = timeout or api_settings.timeout
        self._client = client
        self._owns_client = client is None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                headers=self._get_default_headers(),
                follow_redirects=True,
            )
        return self._client

    def _get_default_headers(self) -> dict[str, str]:
        """Get default HTTP headers."""
        return {"User-Agent": api_settings.user_agent}

    # ==========================================================================
    # HTTP Request
    # ==========================================================================

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: dict | None = None,
        json_data: Any = None,
        data: dict | None = None,
        headers: dict | None = None,
        resource_type: str = "resource",
        resource_id: str | None = None,
    ) -> httpx.Response:
        """
        Make a single HTTP request and map failures to client exceptions.

        Args:
            method: HTTP method (GET, POST, HEAD)
            url: Absolute URL
            params: Query parameters
            json_data: JSON body
            data: Form-encoded body
            headers: Additional headers
            resource_type: Label used in NotFoundError
            resource_id: Identifier used in NotFoundError (defaults to url)

        Returns:
            The successful (2xx) response

        Raises:
            NetworkError: Transport failure (TimeoutError on timeout)
            NotFoundError: HTTP 404
            RemoteError: Any other non-success status
        """
        client = await self._get_client()

        if api_settings.log_requests:
            logger.info(f"[{self.source.value}] {method} {url}")

        try:
            response = await client.request(
                method,
                url,
                params=params,
                json=json_data,
                data=data,
                headers=headers,
            )
        except httpx.TimeoutException as e:
            raise TimeoutError(
                f"Request timed out after {self._timeout}s",
                source=self.source.value,
                timeout=self._timeout,
            ) from e
        except httpx.RequestError as e:
            raise NetworkError(
                f"Request failed: {e}",
                source=self.source.value,
            ) from e

        self._raise_for_status(response, resource_type, resource_id or url)
        return response

    def _raise_for_status(
        self,
        response: httpx.Response,
        resource_type: str,
        resource_id: str,
    ) -> None:
        """Raise the matching RemoteError subclass for a non-2xx response."""
        status = response.status_code
        if 200 <= status < 300:
            return

        body = response.text
        logger.warning(f"[{self.source.value}] HTTP {status} for {resource_type} {resource_id}")

        if status == 404:
            raise NotFoundError(
                resource_type=resource_type,
                resource_id=resource_id,
                source=self.source.value,
                response_body=body,
            )

        if status == 429:
            retry_after = response.headers.get("Retry-After")
            raise RateLimitError(
                source=self.source.value,
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
                response_body=body,
            )

        if status in (401, 403):
            raise AuthenticationError(
                f"Authentication failed: {body[:200]}",
                source=self.source.value,
                status_code=status,
                response_body=body,
            )

        if status >= 500:
            raise ServiceUnavailableError(
                f"Server error: {status}",
                source=self.source.value,
                status_code=status,
                response_body=body,
            )

        raise RemoteError(
            f"Request failed: {body[:500]}",
            source=self.source.value,
            status_code=status,
            response_body=body,
        )

    # ==========================================================================
    # Convenience wrappers
    # ==========================================================================

    async def get_json(self, url: str, **kwargs) -> Any:
        """GET and parse a JSON body."""
        response = await self.request("GET", url, **kwargs)
        return self.parse_json(response)

    async def post_json(self, url: str, payload: Any, **kwargs) -> Any:
        """POST a JSON body and parse a JSON body back."""
        response = await self.request("POST", url, json_data=payload, **kwargs)
        return self.parse_json(response)

    async def post_form_text(self, url: str, form: dict, **kwargs) -> str:
        """POST a form-encoded body and return the text body."""
        response = await self.request("POST", url, data=form, **kwargs)
        return response.text

    async def get_text(self, url: str, **kwargs) -> str:
        """GET a text body (SDF, Mol2, plain text)."""
        response = await self.request("GET", url, **kwargs)
        return response.text

    async def get_bytes(self, url: str, **kwargs) -> bytes:
        """GET an undecoded body."""
        response = await self.request("GET", url, **kwargs)
        return response.content

    async def head_ok(self, url: str) -> bool:
        """
        Check whether a resource exists with a HEAD request.

        Only a 404 means absent. Any other error status (403 from a file host,
        5xx) is raised like for every other request, so a failing host is not
        reported as a missing file.
        """
        try:
            await self.request("HEAD", url)
        except NotFoundError:
            return False
        return True

    # ==========================================================================
    # Decoding
    # ==========================================================================

    def parse_json(self, response: httpx.Response) -> Any:
        """Parse a JSON body, raising DecodeError if it isn't JSON."""
        try:
            return response.json()
        except ValueError as e:
            logger.debug(f"[{self.source.value}] Undecodable body: {response.text[:200]!r}")
            raise DecodeError(
                f"Invalid JSON response: {e}",
                source=self.source.value,
            ) from e

    def parse_model(self, model_cls: type[M], payload: Any) -> M:
        """Validate a decoded payload against a record type."""
        try:
            return model_cls.model_validate(payload)
        except PydanticValidationError as e:
            first = e.errors()[0] if e.errors() else {}
            field = ".".join(str(p) for p in first.get("loc", ()))
            raise DecodeError(
                f"Unexpected {model_cls.__name__} payload: {e.error_count()} error(s)",
                source=self.source.value,
                field=field or None,
            ) from e

    def decompress_text(self, data: bytes) -> str:
        """Decompress a gzip payload and decode it as UTF-8 text."""
        raw = decompress_gzip(data, source=self.source.value)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(
                f"Decompressed payload is not UTF-8 text: {e}",
                source=self.source.value,
            ) from e

    # ==========================================================================
    # Cleanup
    # ==========================================================================

    async def close(self) -> None:
        """Close HTTP client and release resources."""
        if self._client and self._owns_client:
            await self._client.aclose()
        if self._owns_client:
            self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


def decompress_gzip(data: bytes, source: str | None = None) -> bytes:
    """
    Decompress a gzip stream.

    Raises:
        DecodeError: If data is not a complete, valid gzip stream
    """
    if not data:
        raise DecodeError("Empty gzip stream", source=source)
    try:
        return gzip.decompress(data)
    except (OSError, EOFError, zlib.error) as e:
        raise DecodeError(f"Invalid gzip data: {e}", source=source) from e
