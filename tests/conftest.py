"""Shared fixtures: a fake Content Server built on httpx.MockTransport."""
import asyncio
import io
from typing import List, Optional
from urllib.parse import parse_qs

import httpx
import pytest
from rich.console import Console

from csupload.reporting import ConsoleReporter

BASE_URL = "http://cs.test/otcs/cs.exe"


class FakeContentServer:
    """Records requests and tracks how many node creations are in flight."""

    def __init__(
        self,
        node_status: int = 200,
        auth_json: Optional[dict] = None,
        auth_text: Optional[str] = None,
        delay: float = 0.0,
    ):
        self.node_status = node_status
        self.auth_json = {"ticket": "TICKET-1"} if auth_json is None else auth_json
        self.auth_text = auth_text
        self.delay = delay
        self.auth_requests: List[httpx.Request] = []
        self.node_requests: List[httpx.Request] = []
        self.in_flight = 0
        self.peak_in_flight = 0

    @property
    def total_requests(self) -> int:
        return len(self.auth_requests) + len(self.node_requests)

    def auth_form(self, index: int = 0) -> dict:
        return parse_qs(self.auth_requests[index].content.decode())

    async def handler(self, request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/api/v1/auth"):
            self.auth_requests.append(request)
            if self.auth_text is not None:
                return httpx.Response(200, text=self.auth_text)
            return httpx.Response(200, json=self.auth_json)

        if request.url.path.endswith("/api/v1/nodes/"):
            self.node_requests.append(request)
            self.in_flight += 1
            self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
            try:
                await asyncio.sleep(self.delay)
            finally:
                self.in_flight -= 1
            return httpx.Response(self.node_status, json={"id": 12345})

        return httpx.Response(404)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_server():
    return FakeContentServer()


@pytest.fixture
def source_file(tmp_path):
    path = tmp_path / "win.ini"
    path.write_text("; for 16-bit app support\n[fonts]\n")
    return path


@pytest.fixture
def reporter_output():
    buffer = io.StringIO()
    reporter = ConsoleReporter(Console(file=buffer, width=200, color_system=None))
    return reporter, buffer
