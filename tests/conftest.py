import logging
from typing import Any, Callable

import httpx
import pytest

from httpcli.config import ClientConfig, set_config


class RecordingHandler:
    """MockTransport handler that remembers every request it receives."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status = 200
        self.text = "ok"
        self.response_headers: dict[str, str] = {}
        self.error: Callable[[httpx.Request], Exception] | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error(request)
        return httpx.Response(self.status, text=self.text, headers=self.response_headers)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture
def recorder() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def mock_config(recorder: RecordingHandler) -> Any:
    config = ClientConfig(transport=httpx.MockTransport(recorder))
    set_config(config)
    yield config
    set_config(None)


@pytest.fixture(autouse=True)
def _reset_logging() -> Any:
    yield
    logger = logging.getLogger("httpcli")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
