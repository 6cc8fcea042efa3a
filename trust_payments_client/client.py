import json
import logging
import os
import threading
import uuid
from collections.abc import Mapping
from typing import Any, Optional, Union

import httpx
from attrs import define, evolve, field, setters

from .auth import MacAuthenticator
from .errors import ApiError, ConfigurationError, VersioningError
from .http import HttpClient, HttpRequest, HttpResponse
from .serializer import ObjectSerializer
from .types import ApiResponse, File

logger = logging.getLogger(__name__)

VERSION = "1.0.0"
DEFAULT_BASE_URL = "https://ep.trustpayments.com:443/api"
DEFAULT_CONNECTION_TIMEOUT = 20


def _validate_user_id(instance: Any, attribute: Any, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError("The user id must be an integer.")


def _validate_timeout(instance: Any, attribute: Any, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
        raise ConfigurationError("Timeout value must be numeric and a non-negative number.")


def _validate_user_agent(instance: Any, attribute: Any, value: Any) -> None:
    if not isinstance(value, str):
        raise ConfigurationError("User-agent must be a string.")


def _validate_certificate_authority(instance: Any, attribute: Any, value: Any) -> None:
    if value is not None and not os.path.isfile(value):
        raise ConfigurationError(f"The certificate authority file does not exist: {value}")


def _validate_headers(instance: Any, attribute: Any, value: Any) -> None:
    for key in value:
        if not isinstance(key, str):
            raise ConfigurationError("The header key must be a string.")


def _strip_trailing_slash(value: str) -> str:
    return value.rstrip("/")


def _drop_http_client(instance: "ApiClient", attribute: Any, value: Any) -> Any:
    # TLS and tracing settings are baked into the pooled httpx client
    instance.close()
    return value


_RECONFIGURE_TRANSPORT = setters.pipe(setters.convert, setters.validate, _drop_http_client)


def _merge_headers(*sources: Mapping[str, Any]) -> dict[str, str]:
    """Merge header mappings; a later source replaces an earlier key regardless of case."""
    merged: dict[str, str] = {}
    for source in sources:
        for key, value in source.items():
            for existing in [name for name in merged if name.lower() == key.lower()]:
                del merged[existing]
            merged[key] = str(value)
    return merged


def _has_header(headers: Mapping[str, str], name: str) -> bool:
    return any(key.lower() == name.lower() for key in headers)


@define
class ApiClient:
    """A class for keeping track of data related to the API and dispatching signed calls

    The following are accepted as keyword arguments:

        ``user_id``: The id of the application user the requests are made for.

        ``application_key``: The base64 authentication key of that user. It is decoded once here and
        only ever used to derive per-request MACs.

        ``base_url``: The base URL for the API, all requests are made to a relative path to this URL

        ``default_headers``: A dictionary of headers to be sent with every request

        ``connection_timeout``: Seconds before the transport gives up; ``0`` disables the timeout.

        ``certificate_authority``: Path to a CA bundle used to verify the server. Uses the httpx default
        bundle when ``None``.

        ``verify_certificate_authority``: Whether or not to verify the SSL certificate of the API server.
        This should be True in production, but can be set to False for testing purposes.

        ``debugging``: Trace request and response bytes to ``debug_file`` or the
        ``trust_payments_client.http`` logger.

        ``temp_folder_path``: Directory for downloaded files.

        ``httpx_args``: A dictionary of additional arguments to be passed to the ``httpx.Client`` constructor.

    Raises:
        ConfigurationError: If any setting is invalid, at construction or on assignment.
    """

    user_id: int = field(validator=_validate_user_id, on_setattr=setters.frozen)
    application_key: str = field(repr=False, on_setattr=setters.frozen)
    base_url: str = field(default=DEFAULT_BASE_URL, converter=_strip_trailing_slash, kw_only=True)
    user_agent: str = field(
        default=f"Python-Client/{VERSION}/python",
        validator=_validate_user_agent,
        kw_only=True,
    )
    default_headers: dict[str, str] = field(factory=dict, validator=_validate_headers, kw_only=True)
    connection_timeout: Union[int, float] = field(
        default=DEFAULT_CONNECTION_TIMEOUT,
        validator=_validate_timeout,
        kw_only=True,
    )
    certificate_authority: Optional[str] = field(
        default=None,
        validator=_validate_certificate_authority,
        on_setattr=_RECONFIGURE_TRANSPORT,
        kw_only=True,
    )
    verify_certificate_authority: bool = field(default=True, on_setattr=_RECONFIGURE_TRANSPORT, kw_only=True)
    debugging: bool = field(default=False, on_setattr=_RECONFIGURE_TRANSPORT, kw_only=True)
    debug_file: Optional[str] = field(default=None, on_setattr=_RECONFIGURE_TRANSPORT, kw_only=True)
    temp_folder_path: Optional[str] = field(default=None, kw_only=True)
    httpx_args: dict[str, Any] = field(factory=dict, on_setattr=_RECONFIGURE_TRANSPORT, kw_only=True)
    _authenticator: MacAuthenticator = field(init=False, repr=False)
    _http_client: Optional[HttpClient] = field(default=None, init=False, repr=False)
    _lock: Any = field(factory=threading.RLock, init=False, repr=False, eq=False)

    def __attrs_post_init__(self) -> None:
        self._authenticator = MacAuthenticator.from_application_key(self.user_id, self.application_key)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "ApiClient":
        """Build a client from ``TRUST_PAYMENTS_USER_ID``, ``TRUST_PAYMENTS_APPLICATION_KEY`` and
        the optional ``TRUST_PAYMENTS_BASE_URL``; keyword arguments override the environment."""
        try:
            user_id = int(os.environ["TRUST_PAYMENTS_USER_ID"])
        except KeyError as exc:
            raise ConfigurationError("TRUST_PAYMENTS_USER_ID is not set.") from exc
        except ValueError as exc:
            raise ConfigurationError("TRUST_PAYMENTS_USER_ID must be an integer.") from exc

        base_url = os.getenv("TRUST_PAYMENTS_BASE_URL")
        if base_url:
            kwargs.setdefault("base_url", base_url)
        return cls(user_id, os.getenv("TRUST_PAYMENTS_APPLICATION_KEY", ""), **kwargs)

    # Configuration

    def add_default_header(self, key: str, value: Any) -> "ApiClient":
        if not isinstance(key, str):
            raise ConfigurationError("The header key must be a string.")
        self.default_headers[key] = self.get_serializer().to_header_value(value)
        return self

    def with_headers(self, headers: dict[str, str]) -> "ApiClient":
        """Get a new client matching this one with additional default headers"""
        return evolve(self, default_headers={**self.default_headers, **headers})

    def reset_connection_timeout(self) -> "ApiClient":
        self.connection_timeout = DEFAULT_CONNECTION_TIMEOUT
        return self

    def get_serializer(self) -> ObjectSerializer:
        return ObjectSerializer(temp_folder_path=self.temp_folder_path, debugging=self.debugging)

    def get_http_client(self) -> HttpClient:
        """Get the transport, constructing a new one if not previously set"""
        with self._lock:
            if self._http_client is None:
                verify: Union[bool, str] = self.verify_certificate_authority
                if verify and self.certificate_authority is not None:
                    verify = self.certificate_authority
                self._http_client = HttpClient(
                    verify=verify,
                    debugging=self.debugging,
                    debug_file=self.debug_file,
                    httpx_args=self.httpx_args,
                )
            return self._http_client

    def close(self) -> None:
        with self._lock:
            if self._http_client is not None:
                self._http_client.close()
                self._http_client = None

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *args: Any, **kwargs: Any) -> None:
        self.close()

    @staticmethod
    def select_header_accept(accepts: list[str]) -> Optional[str]:
        if not accepts or not accepts[0]:
            return None
        if any("application/json" in accept.lower() for accept in accepts):
            return "application/json"
        return ",".join(accepts)

    @staticmethod
    def select_header_content_type(content_types: list[str]) -> str:
        if not content_types or not content_types[0]:
            return "application/json"
        if any("application/json" in content_type.lower() for content_type in content_types):
            return "application/json"
        return ",".join(content_types)

    # Dispatch

    @staticmethod
    def generate_unique_token() -> str:
        """A random 8-4-4-4-12 uppercase hexadecimal token identifying one call."""
        return str(uuid.uuid4()).upper()

    def build_request_url(self, resource_path: str, query_params: Optional[Mapping[str, Any]] = None) -> str:
        """Join ``resource_path`` to the base URL and append the encoded query, if any.

        Query values are formatted by the serializer: dates as ISO-8601, booleans as
        ``true``/``false``, lists as comma separated values. ``None`` values are left out.
        """
        url = self.base_url + resource_path
        params = {key: value for key, value in (query_params or {}).items() if value is not None}
        if params:
            url = f"{url}?{self._encode_query(params)}"
        return url

    def _encode_query(self, query_params: Mapping[str, Any]) -> str:
        serializer = self.get_serializer()
        return str(httpx.QueryParams({key: serializer.to_query_value(value) for key, value in query_params.items()}))

    def call_api(
        self,
        resource_path: str,
        method: str,
        query_params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        header_params: Optional[Mapping[str, Any]] = None,
        response_type: Any = None,
        endpoint_path: Optional[str] = None,
    ) -> ApiResponse[Any]:
        """Sign and send one request, then classify the response.

        Args:
            resource_path: Path relative to ``base_url``.
            method: HTTP method.
            query_params: Appended as a URL-encoded query string when non-empty.
            body: Model, JSON-compatible value, ``bytes`` or :class:`File`. Files and bytes are sent as is.
            header_params: Per-call headers; they override default headers with the same name.
            response_type: Type to deserialize a 2xx body into. ``File``, ``bytes`` and ``str`` return
                the raw body; ``None`` returns the decoded JSON (or text when the body is not JSON).
            endpoint_path: Unexpanded path template, used for logging.

        Raises:
            VersioningError: If the API answers 409.
            ApiError: If the API answers with any other non-2xx status.
            ApiConnectionError: If the exchange itself fails.
            SerializationError: If the body cannot be converted into ``response_type``.
        """
        method = method.upper()
        serializer = self.get_serializer()
        request = HttpRequest(
            method=method,
            url=self.build_request_url(resource_path, query_params),
            correlation_token=self.generate_unique_token(),
            body=self._encode_body(body, serializer),
        )

        call_headers = {key: serializer.to_header_value(value) for key, value in (header_params or {}).items()}
        headers = _merge_headers(self.default_headers, call_headers, {"User-Agent": self.user_agent})
        if request.body is not None and not _has_header(headers, "Content-Type"):
            headers["Content-Type"] = self._body_content_type(body)
        headers = _merge_headers(headers, self._authenticator.authentication_headers(method, request.path))
        request = evolve(request, headers=headers)

        logger.debug(
            "Calling %s %s [%s] (endpoint %s)",
            method,
            request.url,
            request.correlation_token,
            endpoint_path or resource_path,
        )
        response = self.get_http_client().send(request, timeout=self.connection_timeout)
        logger.debug("Received %s for %s %s [%s]", response.status_code, method, request.url, request.correlation_token)

        return self._build_response(request, response, resource_path, response_type, serializer)

    @staticmethod
    def _encode_body(body: Any, serializer: ObjectSerializer) -> Optional[bytes]:
        if body is None:
            return None
        if isinstance(body, File):
            return body.payload.read()
        if isinstance(body, (bytes, bytearray)):
            return bytes(body)
        return json.dumps(serializer.sanitize_for_serialization(body)).encode("utf-8")

    @staticmethod
    def _body_content_type(body: Any) -> str:
        if isinstance(body, File):
            return body.mime_type or "application/octet-stream"
        if isinstance(body, (bytes, bytearray)):
            return "application/octet-stream"
        return "application/json"

    @staticmethod
    def _decode_body(response: HttpResponse) -> Any:
        if not response.body:
            return None
        try:
            return json.loads(response.body)
        except ValueError:
            return response.text

    def _build_response(
        self,
        request: HttpRequest,
        response: HttpResponse,
        resource_path: str,
        response_type: Any,
        serializer: ObjectSerializer,
    ) -> ApiResponse[Any]:
        status_code = response.status_code
        if 200 <= status_code <= 299:
            data: Any
            if response_type is File:
                data = serializer.deserialize_file(response.body, response.headers)
            elif response_type is bytes:
                data = response.body
            elif response_type is str:
                data = response.text
            else:
                data = self._decode_body(response)
                if response_type is not None:
                    data = serializer.deserialize(data, response_type, headers=response.headers)
            return ApiResponse(status_code=status_code, headers=response.headers, data=data)

        if status_code == 409:
            raise VersioningError(resource_path)

        raise ApiError(
            f"Error {status_code} connecting to the API ({request.url}) : {response.text}",
            status_code,
            response.headers,
            self._decode_body(response),
        )


__all__ = ["DEFAULT_BASE_URL", "DEFAULT_CONNECTION_TIMEOUT", "VERSION", "ApiClient"]
