"""
Configuration management for httpcli.

Defaults only; command-line options override them per invocation.
"""

from dataclasses import dataclass

import httpx

from httpcli import __version__


@dataclass
class ClientConfig:
    """Settings for the outbound HTTP client."""

    timeout: float = 10.0
    verify_ssl: bool = True
    follow_redirects: bool = True
    user_agent: str = f"httpcli/{__version__}"

    # Replaces the network layer, e.g. httpx.MockTransport in tests
    transport: httpx.BaseTransport | None = None


# Global config instance
_config: ClientConfig | None = None


def get_config() -> ClientConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ClientConfig()
    return _config


def set_config(config: ClientConfig | None) -> None:
    """Set the global configuration instance (None restores the defaults)."""
    global _config
    _config = config
