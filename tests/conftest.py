"""Pytest configuration and fixtures."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Dict, List, Optional, Tuple, Union
from unittest.mock import MagicMock

import pytest
import requests

from paydock.core.config import PaydockConfig
from paydock.core.dispatcher import ServiceHelper

SECRET_KEY = "sk_test_default"


def make_response(
    status_code: int,
    body: Union[str, bytes],
    content_type: str = "application/json",
) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = body if isinstance(body, bytes) else body.encode("utf-8")
    response.headers["Content-Type"] = content_type
    response.encoding = "utf-8"
    return response


def make_session(*responses) -> MagicMock:
    """A fake session whose ``request`` returns (or raises) ``responses`` in order."""
    session = MagicMock(spec=requests.Session)
    session.request.side_effect = list(responses)
    return session


@pytest.fixture
def config() -> PaydockConfig:
    return PaydockConfig(
        secret_key=SECRET_KEY,
        base_url="https://api-sandbox.paydock.com/v1/",
        timeout_milliseconds=5000,
    )


@pytest.fixture
def charge_payload() -> str:
    return (
        '{"status": 201, "error": null, "resource": {"type": "charge", "data": '
        '{"_id": "ch_123", "amount": 10.50, "currency": "AUD", "status": "complete", '
        '"reference": "order-1", "meta": {"channel": "web"}, '
        '"created_at": "2024-01-02T03:04:05.000Z", "transactions": [{"type": "sale"}]}}}'
    )


@dataclass
class RecordedRequest:
    method: str
    path: str
    headers: Dict[str, str]
    body: bytes


@dataclass
class PaydockServer:
    """A local HTTP server that replies with queued ``(status, body)`` pairs."""

    base_url: str
    received: List[RecordedRequest] = field(default_factory=list)
    replies: List[Tuple[int, str]] = field(default_factory=list)
    delay_seconds: float = 0.0

    def reply(self, status: int, body: str) -> None:
        self.replies.append((status, body))

    @property
    def last(self) -> Optional[RecordedRequest]:
        return self.received[-1] if self.received else None


def _handler_for(state: PaydockServer):
    class Handler(BaseHTTPRequestHandler):
        def _handle(self) -> None:
            length = int(self.headers.get("Content-Length") or 0)
            body = self.rfile.read(length) if length else b""
            state.received.append(
                RecordedRequest(
                    method=self.command,
                    path=self.path,
                    headers={key.lower(): value for key, value in self.headers.items()},
                    body=body,
                )
            )
            if state.delay_seconds:
                time.sleep(state.delay_seconds)
            status, reply = state.replies.pop(0) if state.replies else (200, "{}")
            payload = reply.encode("utf-8")
            self.send_response(status)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(payload)))
            self.end_headers()
            self.wfile.write(payload)

        do_GET = _handle
        do_POST = _handle
        do_PUT = _handle
        do_DELETE = _handle

        def log_message(self, format, *args):  # noqa: A002
            pass

    return Handler


@pytest.fixture
def paydock_server():
    state = PaydockServer(base_url="")
    server = ThreadingHTTPServer(("127.0.0.1", 0), _handler_for(state))
    state.base_url = f"http://127.0.0.1:{server.server_address[1]}/v1/"
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield state
    finally:
        server.shutdown()
        server.server_close()


@pytest.fixture
def live_helper(paydock_server):
    config = PaydockConfig(
        secret_key=SECRET_KEY,
        base_url=paydock_server.base_url,
        timeout_milliseconds=2000,
    )
    session = requests.Session()
    session.trust_env = False
    try:
        yield ServiceHelper(config, session)
    finally:
        session.close()
