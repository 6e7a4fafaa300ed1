"""
HTTP client that executes one RequestDescriptor.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
import time
from typing import Any

import httpx

from httpcli.config import ClientConfig, get_config
from httpcli.exceptions import FileReadError, TransportError, UsageError
from httpcli.models import (
    FileContents,
    HTTPResponse,
    InlineData,
    RequestDescriptor,
)

logger = logging.getLogger(__name__)

DEFAULT_SCHEME = "http://"
KNOWN_SCHEMES = ("http://", "https://")

# Inline data is labelled as JSON unless the caller sets a Content-Type
DEFAULT_DATA_CONTENT_TYPE = "application/json"


def normalize_url(url: str) -> str:
    """Prefix http:// unless the URL already names http or https."""
    if url.lower().startswith(KNOWN_SCHEMES):
        return url
    return DEFAULT_SCHEME + url


def resolve_body(descriptor: RequestDescriptor) -> tuple[list[tuple[str, str]], dict[str, Any]]:
    """Work out the final header list and the httpx body arguments.

    Any file is read completely here, before a connection is opened.
    """
    headers = list(descriptor.headers)
    body = descriptor.body

    if body is None:
        return headers, {}

    if isinstance(body, InlineData):
        if not descriptor.has_header("Content-Type"):
            headers.append(("Content-Type", DEFAULT_DATA_CONTENT_TYPE))
        return headers, {"content": body.text.encode("utf-8")}

    if isinstance(body, FileContents):
        try:
            data = body.path.read_bytes()
        except OSError as e:
            raise FileReadError(body.path, e) from e
        logger.debug("Read %d bytes from %s", len(data), body.path)

        if body.multipart:
            return headers, {"files": {"file": (body.path.name, data)}}
        return headers, {"content": data}

    raise TypeError(f"Unsupported request body: {body!r}")


class HTTPClient:
    """Sends a single request per descriptor with no retries."""

    def __init__(self, config: ClientConfig | None = None):
        self.config = config or get_config()
        self._client: httpx.Client | None = None

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                timeout=httpx.Timeout(self.config.timeout),
                verify=self.config.verify_ssl,
                follow_redirects=self.config.follow_redirects,
                headers={"User-Agent": self.config.user_agent},
                transport=self.config.transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()

    def request(self, descriptor: RequestDescriptor) -> HTTPResponse:
        """Send the request described by ``descriptor`` and return the response.

        HTTP error statuses are returned like any other response. Raises
        FileReadError if the body file cannot be read (nothing is sent),
        TransportError if the request cannot be delivered.
        """
        url = normalize_url(descriptor.url)
        headers, body_kwargs = resolve_body(descriptor)
        method = descriptor.method.value

        logger.debug("Sending %s %s with %d header(s)", method, url, len(headers))

        client = self._get_client()
        start_time = time.time()

        try:
            response = client.request(
                method=method,
                url=url,
                headers=headers,
                **body_kwargs,
            )
        except httpx.InvalidURL as e:
            raise UsageError(f"Invalid URL {url!r}: {e}") from e
        except httpx.TimeoutException as e:
            raise TransportError(f"Request timed out after {self.config.timeout}s", e) from e
        except httpx.ConnectError as e:
            raise TransportError(f"Connection failed: {e}", e) from e
        except httpx.TransportError as e:
            raise TransportError(f"Request failed: {e}", e) from e

        elapsed_ms = (time.time() - start_time) * 1000
        logger.debug("Received %d from %s in %.0fms", response.status_code, response.url, elapsed_ms)

        return HTTPResponse(
            status_code=response.status_code,
            status_text=response.reason_phrase,
            headers=response.headers.multi_items(),
            body=response.text,
            body_bytes=response.content,
            elapsed_ms=elapsed_ms,
            url=str(response.url),
            content_type=response.headers.get("content-type"),
            request_method=response.request.method,
            request_headers=response.request.headers.multi_items(),
        )


def execute(descriptor: RequestDescriptor, config: ClientConfig | None = None) -> HTTPResponse:
    """Send one request with a short-lived client."""
    with HTTPClient(config) as client:
        return client.request(descriptor)
