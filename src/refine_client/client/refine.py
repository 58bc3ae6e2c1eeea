"""OpenRefine HTTP transport."""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable, TypeVar

import httpx

from refine_client.client.errors import RefineConnectionError
from refine_client.config.constants import DEFAULT_MAX_RETRIES
from refine_client.config.models import ServerProfile

T = TypeVar("T")

log = logging.getLogger(__name__)


class RefineClient:
    """Synchronous transport for the OpenRefine command API.

    Commands build their own requests; the client only resolves URLs,
    sends requests and hands raw responses to a response handler.
    """

    def __init__(self, profile: ServerProfile) -> None:
        self.profile = profile
        self.base_url = profile.url
        if not profile.verify_ssl:
            print("Warning: TLS certificate verification is disabled", file=sys.stderr)
        transport = httpx.HTTPTransport(retries=DEFAULT_MAX_RETRIES)
        self._client = httpx.Client(
            base_url=self.base_url,
            verify=profile.verify_ssl,
            timeout=profile.timeout,
            transport=transport,
            follow_redirects=False,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> RefineClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def create_url(self, path: str) -> httpx.URL:
        """Resolve a command path against the server base URL."""
        return httpx.URL(f"{self.base_url}/{path.lstrip('/')}")

    def execute(
        self,
        request: httpx.Request,
        handler: Callable[[httpx.Response], T],
    ) -> T:
        """Send *request* and return what *handler* makes of the response.

        The response is closed once the handler returns or raises.
        """
        log.debug("refine.request", extra={"method": request.method, "url": str(request.url)})
        try:
            response = self._client.send(request, stream=True)
        except httpx.ConnectError as exc:
            raise RefineConnectionError(
                f"Cannot connect to server at {self.profile.url}: {exc}"
            ) from exc
        except httpx.TimeoutException as exc:
            raise RefineConnectionError(
                f"Request to {self.profile.url} timed out: {exc}"
            ) from exc
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise RefineConnectionError(
                f"Invalid URL for server at {self.profile.url}: {exc}"
            ) from exc
        try:
            log.debug(
                "refine.response",
                extra={"url": str(request.url), "status": response.status_code},
            )
            return handler(response)
        except httpx.TimeoutException as exc:
            raise RefineConnectionError(
                f"Reading the response from {self.profile.url} timed out: {exc}"
            ) from exc
        except httpx.TransportError as exc:
            raise RefineConnectionError(
                f"Connection to {self.profile.url} failed while reading the response: {exc}"
            ) from exc
        finally:
            response.close()
