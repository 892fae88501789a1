"""Base client for site REST requests."""

import logging
from abc import ABC, abstractmethod
from time import sleep
from typing import Any

import httpx

from .exceptions import (
    APIError,
    AuthenticationError,
    ConnectionError,
    NotFoundError,
    RateLimitError,
)

logger = logging.getLogger(__name__)


class Client(ABC):
    """Shared HTTP plumbing for the site clients.

    The httpx.Client is created on first use unless one is injected; an
    injected client stays open when this client closes.

    Config keys:
        base_url (required): URL of the web the client talks to
        timeout: Seconds before a request times out (default: 30)
        retry_attempts: Tries per request on connect errors and timeouts (default: 3)
        retry_delay: Seconds to wait between tries (default: 1)
        headers: Headers sent with every request, e.g. Authorization
    """

    def __init__(self, config: dict, http_client: httpx.Client | None = None):
        if "base_url" not in config:
            raise ValueError("config must include 'base_url'")

        self._config = config
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def config(self) -> dict:
        return dict(self._config)

    @property
    def base_url(self) -> str:
        return str(self._config["base_url"]).rstrip("/")

    @property
    def timeout(self) -> float:
        return float(self._config.get("timeout", 30))

    @property
    def retry_attempts(self) -> int:
        return int(self._config.get("retry_attempts", 3))

    @property
    def retry_delay(self) -> float:
        return float(self._config.get("retry_delay", 1))

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._config.get("headers", {}))

    @property
    def client(self) -> httpx.Client:
        """The underlying httpx client, created on first access."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.headers,
                follow_redirects=True,
            )
        return self._client

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None

    def _handle_response(self, response: httpx.Response) -> httpx.Response:
        """Return a successful response or raise the matching ClientError.

        Raises:
            AuthenticationError: For 401 and 403 responses
            NotFoundError: For 404 responses
            RateLimitError: For 429 responses
            APIError: For other non-2xx responses
        """
        if response.is_success:
            return response

        status_code = response.status_code

        if status_code in (401, 403):
            raise AuthenticationError(
                f"Access denied ({status_code}): {response.url}",
                status_code=status_code,
            )
        elif status_code == 404:
            raise NotFoundError(f"Resource not found: {response.url}")
        elif status_code == 429:
            raise RateLimitError(f"Request throttled: {response.url}")
        else:
            raise APIError(
                f"API error {status_code}: {response.url}",
                status_code=status_code,
            )

    def _request(
        self,
        method: str,
        path: str,
        **kwargs,
    ) -> httpx.Response:
        """Send a request relative to base_url, retrying transport failures.

        Raises:
            ConnectionError: When every attempt hit a connect error or timeout
            ClientError: The mapped error for a non-2xx response
        """
        last_exception: Exception | None = None

        for attempt in range(self.retry_attempts):
            try:
                response = self.client.request(method, path, **kwargs)
                return self._handle_response(response)
            except (httpx.ConnectError, httpx.TimeoutException) as e:
                last_exception = e
                logger.warning(
                    f"{method} {path} failed on try {attempt + 1} of {self.retry_attempts}: {e}"
                )
            if attempt < self.retry_attempts - 1:
                sleep(self.retry_delay)

        msg = f"Connection to {self.base_url} failed after {self.retry_attempts} attempts"
        raise ConnectionError(msg) from last_exception

    def get(self, path: str, **kwargs) -> httpx.Response:
        return self._request("GET", path, **kwargs)

    def post(self, path: str, **kwargs) -> httpx.Response:
        return self._request("POST", path, **kwargs)

    @abstractmethod
    def fetch(self, *args, **kwargs) -> Any:
        """Read a resource from the web."""
        pass
