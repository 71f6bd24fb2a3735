"""Sequential HTTP session used by the smoke-check scripts."""

import time
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from finance_tracker.config import settings
from finance_tracker.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class StepResult:
    """One request made during a smoke run."""

    method: str
    path: str
    status_code: int

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class SmokeSession:
    """Issue requests one at a time against a running backend.

    Every request is recorded in ``results`` in the order it was made. No
    retries are attempted; transport errors propagate to the caller.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self._client = client or httpx.Client(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else settings.request_timeout,
        )
        self.results: list[StepResult] = []

    def __enter__(self) -> "SmokeSession":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def request(self, method: str, path: str, payload: Any = None) -> httpx.Response:
        if payload is None:
            response = self._client.request(method, path)
        else:
            response = self._client.request(method, path, json=payload)
        self.results.append(StepResult(method=method, path=path, status_code=response.status_code))
        logger.debug("Request completed", method=method, path=path, status_code=response.status_code)
        return response

    def get(self, path: str) -> httpx.Response:
        return self.request("GET", path)

    def post(self, path: str, payload: Any = None) -> httpx.Response:
        return self.request("POST", path, payload)


def wait_for_server(delay: Optional[float] = None) -> None:
    """Give a freshly started backend a moment before the first request."""
    seconds = settings.smoke_startup_delay if delay is None else delay
    if seconds > 0:
        logger.info("Waiting for server to start", seconds=seconds)
        time.sleep(seconds)
