import base64
import inspect
import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

from cognito_auth import AuthHandler, CognitoConfiguration, Region

CLIENT_ID = "client-123"


def make_token(payload: Any, header: Dict[str, Any] | None = None) -> str:
    """Compact JWT with an unpadded base64url payload and a dummy signature."""

    def _segment(obj: Any) -> str:
        raw = obj if isinstance(obj, bytes) else json.dumps(obj).encode("utf-8")
        return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")

    return ".".join([_segment(header or {"alg": "RS256", "kid": "k1"}), _segment(payload), "c2lnbmF0dXJl"])


class RecordingTransport:
    """Collects every request and answers with `responder(request)`."""

    def __init__(self, responder: Callable[[httpx.Request], Any]):
        self.responder = responder
        self.requests: List[httpx.Request] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responder(request)
        if inspect.isawaitable(response):
            response = await response
        return response

    @property
    def last_body(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)

    @property
    def last_target(self) -> str:
        return self.requests[-1].headers["X-Amz-Target"]


@pytest.fixture
def configuration() -> CognitoConfiguration:
    return CognitoConfiguration(region=Region.EU_CENTRAL_1, client_id=CLIENT_ID)


@pytest.fixture
def make_handler(configuration):
    """
    Build an AuthHandler whose httpx client is backed by a MockTransport.

    Returns (handler, recorder).
    """
    def _make(responder: Callable[[httpx.Request], Any], config: CognitoConfiguration | None = None):
        recorder = RecordingTransport(responder)
        client = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
        handler = AuthHandler(config or configuration, client)
        return handler, recorder

    return _make


def respond(status_code: int = 200, body: Any = None, text: str | None = None):
    def _responder(request: httpx.Request) -> httpx.Response:
        if text is not None:
            return httpx.Response(status_code, text=text)
        return httpx.Response(status_code, json=body if body is not None else {})

    return _responder
