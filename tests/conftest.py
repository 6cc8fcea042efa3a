import base64

import httpx
import pytest

from trust_payments_client import ApiClient

SECRET_KEY = base64.b64encode(b"secret").decode("ascii")
BASE_URL = "https://ep.example.test/api"


class Recorder:
    """Mock transport handler: records outgoing requests and replays queued responses."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response] = []

    def queue(self, status_code: int = 200, **kwargs) -> "Recorder":
        self._responses.append(httpx.Response(status_code, **kwargs))
        return self

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            return httpx.Response(200, json={})
        return self._responses.pop(0)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def api_client(recorder):
    client = ApiClient(
        42,
        SECRET_KEY,
        base_url=BASE_URL,
        httpx_args={"transport": httpx.MockTransport(recorder)},
    )
    yield client
    client.close()
