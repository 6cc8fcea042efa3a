"""Outbound request / inbound response shapes and the httpx transport that exchanges them."""

import logging
import ssl
import threading
from collections.abc import Mapping
from typing import Any, Optional, Union

import httpx
from attrs import define, field

from .errors import ApiConnectionError

logger = logging.getLogger(__name__)


@define(frozen=True)
class HttpRequest:
    method: str
    url: str
    correlation_token: str
    headers: Mapping[str, str] = field(factory=dict)
    body: Optional[bytes] = None

    @property
    def path(self) -> str:
        """URL path without the query string, as signed by the MAC."""
        return httpx.URL(self.url).path

    @property
    def query_string(self) -> str:
        return httpx.URL(self.url).query.decode("ascii")


@define(frozen=True)
class HttpResponse:
    status_code: int
    headers: Mapping[str, str]
    body: bytes = b""

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


def _format_headers(headers: Mapping[str, str]) -> str:
    return "\n".join(f"{key}: {value}" for key, value in headers.items())


@define
class HttpClient:
    """Sends :class:`HttpRequest` objects over a pooled ``httpx.Client``.

    Attributes:
        verify (Union[bool, str, ssl.SSLContext]): ``True`` for the default CA bundle, a path to a
            CA bundle file, or ``False`` to skip certificate verification.
        debugging (bool): Trace every request and response, tagged with its correlation token.
        debug_file (Optional[str]): Append the trace to this file instead of the module logger.
        httpx_args (dict[str, Any]): Extra keyword arguments for the ``httpx.Client`` constructor.
    """

    verify: Union[bool, str, ssl.SSLContext] = True
    debugging: bool = False
    debug_file: Optional[str] = None
    httpx_args: dict[str, Any] = field(factory=dict)
    _client: Optional[httpx.Client] = field(default=None, init=False)
    _lock: Any = field(factory=threading.Lock, init=False, repr=False, eq=False)

    def set_httpx_client(self, client: httpx.Client) -> "HttpClient":
        """Manually set the underlying httpx.Client

        **NOTE**: This will override any other settings on the client, including TLS verification.
        """
        self._client = client
        return self

    def get_httpx_client(self) -> httpx.Client:
        """Get the underlying httpx.Client, constructing a new one if not previously set"""
        with self._lock:
            if self._client is None:
                verify = self.verify
                if isinstance(verify, str):
                    verify = ssl.create_default_context(cafile=verify)
                self._client = httpx.Client(verify=verify, **self.httpx_args)
            return self._client

    def close(self) -> None:
        with self._lock:
            if self._client is not None:
                self._client.close()
                self._client = None

    def send(self, request: HttpRequest, timeout: Optional[float] = None) -> HttpResponse:
        """Perform one HTTP exchange.

        Raises:
            ApiConnectionError: If DNS resolution, connecting, TLS or the read fails or times out.
        """
        client = self.get_httpx_client()
        outbound = client.build_request(
            request.method,
            request.url,
            headers=dict(request.headers),
            content=request.body,
            timeout=httpx.Timeout(timeout or None),
        )
        self._trace_request(request)

        try:
            inbound = client.send(outbound)
        except httpx.TransportError as exc:
            raise ApiConnectionError(
                f"Could not connect to the API ({request.url}): {exc}",
                url=request.url,
            ) from exc

        response = HttpResponse(
            status_code=inbound.status_code,
            headers=dict(inbound.headers.items()),
            body=inbound.content,
        )
        self._trace_response(request, response)
        return response

    def _trace_request(self, request: HttpRequest) -> None:
        if not self.debugging:
            return
        body = request.body.decode("utf-8", errors="replace") if request.body else ""
        self._write_trace(
            f"[{request.correlation_token}] > {request.method} {request.url}\n"
            f"{_format_headers(request.headers)}\n\n{body}"
        )

    def _trace_response(self, request: HttpRequest, response: HttpResponse) -> None:
        if not self.debugging:
            return
        self._write_trace(
            f"[{request.correlation_token}] < {response.status_code}\n"
            f"{_format_headers(response.headers)}\n\n{response.text}"
        )

    def _write_trace(self, message: str) -> None:
        if self.debug_file is None:
            logger.debug(message)
            return
        with open(self.debug_file, "a", encoding="utf-8") as sink:
            sink.write(message + "\n\n")


__all__ = ["HttpClient", "HttpRequest", "HttpResponse"]
