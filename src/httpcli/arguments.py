"""
Turn parsed command-line values into a RequestDescriptor.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import re
from pathlib import Path

from httpcli.exceptions import HeaderFormatError, UsageError
from httpcli.models import FileContents, InlineData, Method, RequestDescriptor


# RFC 9110 token characters
_HEADER_NAME = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")


def parse_header(token: str) -> tuple[str, str]:
    """Parse a header in 'name=value' format.

    Only the first '=' separates name from value, so values may contain '='.
    """
    if "=" not in token:
        raise HeaderFormatError(token)

    name, value = token.split("=", 1)
    if not name:
        raise HeaderFormatError(token, "header name is empty")
    if not _HEADER_NAME.match(name):
        raise HeaderFormatError(token, f"{name!r} is not a valid header name")
    if "\r" in value or "\n" in value:
        raise HeaderFormatError(token, "header value contains a line break")
    if not value.isascii():
        raise HeaderFormatError(token, "header value must be ASCII")

    return name, value


def parse_headers(tokens: list[str] | tuple[str, ...]) -> list[tuple[str, str]]:
    """Parse every -H token, keeping command-line order and duplicates."""
    return [parse_header(token) for token in tokens]


def build_descriptor(
    method: Method | str,
    url: str,
    headers: list[tuple[str, str]] | None = None,
    data: str | None = None,
    file: str | Path | None = None,
    multipart: bool = False,
) -> RequestDescriptor:
    """Validate the combination of options and build the request descriptor.

    The file is not opened here; a missing file surfaces when the request
    is executed.
    """
    try:
        method = Method(method.upper())
    except ValueError:
        raise UsageError(f"Unsupported method: {method}") from None
    if not url or not url.strip():
        raise UsageError("URL must not be empty")
    if data is not None and file is not None:
        raise UsageError("Use either -d/--data or -f/--file, not both")
    if multipart and file is None:
        raise UsageError("--form requires -f/--file")

    body = None
    if file is not None:
        body = FileContents(path=Path(file), multipart=multipart)
    elif data is not None:
        body = InlineData(text=data)

    return RequestDescriptor(
        method=method,
        url=url.strip(),
        headers=list(headers or []),
        body=body,
    )
