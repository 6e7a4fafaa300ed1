"""
Request and response models.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Method(str, Enum):
    """Supported HTTP methods."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class InlineData:
    """Request body given literally on the command line."""
    text: str


@dataclass(frozen=True)
class FileContents:
    """Request body read from a file when the request is sent."""
    path: Path
    multipart: bool = False  # upload as a form part named "file"


RequestBody = InlineData | FileContents


@dataclass
class RequestDescriptor:
    """One parsed invocation: what to send and where."""
    method: Method
    url: str
    headers: list[tuple[str, str]] = field(default_factory=list)
    body: RequestBody | None = None

    def has_header(self, name: str) -> bool:
        name = name.lower()
        return any(key.lower() == name for key, _ in self.headers)


@dataclass
class HTTPResponse:
    """HTTP response details."""
    status_code: int
    status_text: str
    headers: list[tuple[str, str]]
    body: str
    body_bytes: bytes
    elapsed_ms: float
    url: str = ""
    content_type: str | None = None

    # What was actually sent, after httpx added its default headers
    request_method: str = ""
    request_headers: list[tuple[str, str]] = field(default_factory=list)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def is_redirect(self) -> bool:
        return 300 <= self.status_code < 400

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        return 500 <= self.status_code < 600
