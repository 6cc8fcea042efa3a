"""MAC request authentication.

Every request is signed with an HMAC-SHA512 over
``"{version}|{user_id}|{timestamp}|{METHOD}|{path}"``, keyed by the base64-decoded
application key.
"""

import base64
import binascii
import hashlib
import hmac
import time
from typing import Optional

from attrs import define, field

from .errors import ConfigurationError

MAC_VERSION = 1


def _decode_application_key(application_key: str) -> bytes:
    if not application_key:
        raise ConfigurationError("The application key cannot be empty or None.")
    try:
        return base64.b64decode(application_key, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ConfigurationError("The application key is not valid base64.") from exc


@define(frozen=True)
class MacAuthenticator:
    """Computes the ``x-mac-*`` headers for one request.

    Instances are immutable and hold no per-request state, so one authenticator can sign
    requests from several threads at once.
    """

    user_id: int
    _secret: bytes = field(repr=False, alias="secret")

    @classmethod
    def from_application_key(cls, user_id: int, application_key: str) -> "MacAuthenticator":
        """Decode ``application_key`` once, failing fast on an unusable key."""
        return cls(user_id=user_id, secret=_decode_application_key(application_key))

    def secured_data(self, method: str, path: str, timestamp: int) -> str:
        return "|".join([str(MAC_VERSION), str(self.user_id), str(timestamp), method.upper(), path])

    def calculate_mac(self, method: str, path: str, timestamp: int) -> str:
        digest = hmac.new(
            self._secret,
            self.secured_data(method, path, timestamp).encode("utf-8"),
            hashlib.sha512,
        ).digest()
        return base64.b64encode(digest).decode("ascii")

    def authentication_headers(self, method: str, path: str, timestamp: Optional[int] = None) -> dict[str, str]:
        """Headers binding the caller, the current time, the method and the path (without query string)."""
        if timestamp is None:
            timestamp = int(time.time())
        return {
            "x-mac-version": str(MAC_VERSION),
            "x-mac-userid": str(self.user_id),
            "x-mac-timestamp": str(timestamp),
            "x-mac-value": self.calculate_mac(method, path, timestamp),
        }


__all__ = ["MAC_VERSION", "MacAuthenticator"]
