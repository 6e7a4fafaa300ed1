"""
Exceptions raised while building or sending a request.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from pathlib import Path

import click


class HttpCliError(Exception):
    """Base exception for failures after the command line was parsed."""
    pass


class UsageError(click.UsageError):
    """Command-line arguments that click accepted but that cannot be used together."""
    pass


class HeaderFormatError(ValueError):
    """A -H token that is not a usable ``name=value`` pair."""

    def __init__(self, token: str, reason: str = "expected name=value"):
        self.token = token
        self.reason = reason
        super().__init__(f"invalid header {token!r}: {reason}")


class FileReadError(HttpCliError):
    """The request body file could not be read."""

    def __init__(self, path: Path | str, cause: OSError):
        self.path = Path(path)
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"Cannot read file {str(self.path)!r}: {reason}")


class TransportError(HttpCliError):
    """The request could not be delivered (DNS, connection, TLS, timeout)."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)
