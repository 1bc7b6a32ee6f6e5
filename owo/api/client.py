"""
whats-th.is API Client.

Async HTTP client for the four endpoints the CLI uses. Each call is a
single request/response round trip; nothing is retried.

Status handling is shared by every operation:
    200        -> success, body decoded into the operation's record
    401        -> AuthenticationError
    other      -> APIStatusError carrying the status code
    no reply   -> TransportError
    bad body   -> ResponseDecodeError

Usage:
    config = build_client_config()
    async with OwoClient(config) as client:
        short = await client.shorten("https://example.com")
"""

from typing import Any, BinaryIO, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from owo.api.schemas import DeleteResponse, FileListResponse, UploadResponse
from owo.core.config import ClientConfig
from owo.core.exceptions import (
    APIStatusError,
    AuthenticationError,
    ConfigurationError,
    ResponseDecodeError,
    TransportError,
)
from owo.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

SHORTEN_PATH = "/shorten/polr"
UPLOAD_PATH = "/upload/pomf"
UPLOAD_ASSOCIATED_PATH = "/upload/pomf/associated"
OBJECTS_PATH = "/objects"


def display_url(result_domain: str, response: UploadResponse) -> str:
    """Compose the public URL of the first uploaded file."""
    if not response.files:
        raise ResponseDecodeError("Upload response contained no files")
    return f"https://{result_domain}/{response.files[0].url}"


class OwoClient:
    """
    HTTP client for the whats-th.is API.

    Features:
    - Raw token in the Authorization header, fixed User-Agent
    - Structured debug logging of requests/responses (token never logged)
    - Status codes and bodies mapped to typed results or OwoError subclasses
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the API client.

        Args:
            config: Resolved client configuration; must carry a token.
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests).

        Raises:
            ConfigurationError: If config has no API token.
        """
        if not config.token:
            raise ConfigurationError(
                "No API token provided. Pass --key or set OWO_KEY."
            )
        self.config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                timeout=self.config.timeout,
                headers={
                    "Authorization": self.config.token,
                    "User-Agent": self.config.user_agent,
                },
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "OwoClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def request(
        self,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Send one request and enforce the status contract.

        Args:
            method: HTTP method (GET, POST, DELETE)
            path: API path (e.g., /objects)
            **kwargs: Additional arguments for httpx

        Returns:
            httpx.Response with status 200

        Raises:
            TransportError: On connection or protocol failure
            AuthenticationError: On HTTP 401
            APIStatusError: On any other non-200 status
        """
        client = await self._get_client()

        log_with_source(logger, "api", "debug", "API request", method=method, path=path)

        try:
            response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            log_with_source(
                logger,
                "api",
                "error",
                "API request failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise TransportError(f"{method} {path} failed: {e}") from e

        log_with_source(
            logger,
            "api",
            "debug",
            "API response",
            method=method,
            path=path,
            status_code=response.status_code,
        )

        if response.status_code == 401:
            raise AuthenticationError()
        if response.status_code != 200:
            raise APIStatusError(response.status_code)
        return response

    def _decode(self, response: httpx.Response, model: type[ModelT]) -> ModelT:
        """Validate a 200 JSON body against `model`."""
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            raise ResponseDecodeError(
                f"Unexpected {model.__name__} body: {e}"
            ) from e

    async def shorten(self, url: str) -> str:
        """
        Shorten a URL.

        Returns:
            The shortened URL, exactly as the API returned it.
        """
        response = await self.request(
            "GET",
            SHORTEN_PATH,
            params={"action": "shorten", "url": url},
        )
        return response.text

    async def upload(
        self,
        stream: BinaryIO,
        mime_type: str,
        file_name: str,
        associated: bool = False,
    ) -> UploadResponse:
        """
        Upload one file as multipart/form-data.

        The stream is read to exhaustion and sent unmodified in the `files[]`
        part; `type` carries the MIME type as a text field.

        Args:
            stream: Readable binary stream with the file contents
            mime_type: MIME type, e.g. "image/png"
            file_name: Name the service should record for the upload
            associated: Link the upload to the token's account so it can be deleted later

        Returns:
            UploadResponse describing the stored file(s)
        """
        path = UPLOAD_ASSOCIATED_PATH if associated else UPLOAD_PATH
        response = await self.request(
            "POST",
            path,
            data={"type": mime_type},
            files={"files[]": (file_name, stream, mime_type)},
        )
        return self._decode(response, UploadResponse)

    async def upload_url(
        self,
        stream: BinaryIO,
        mime_type: str,
        file_name: str,
        result_domain: str,
        associated: bool = False,
    ) -> str:
        """Upload a file and return its public URL on `result_domain`."""
        result = await self.upload(stream, mime_type, file_name, associated=associated)
        return display_url(result_domain, result)

    async def list_files(self, limit: int, offset: int) -> FileListResponse:
        """List one page of objects associated with the token's account."""
        response = await self.request(
            "GET",
            OBJECTS_PATH,
            params={"limit": limit, "offset": offset},
        )
        return self._decode(response, FileListResponse)

    async def delete_file(self, key: str) -> DeleteResponse:
        """Delete an associated object by key (no domain, e.g. "abc123.png")."""
        response = await self.request("DELETE", f"{OBJECTS_PATH}/{quote(key, safe='')}")
        return self._decode(response, DeleteResponse)
