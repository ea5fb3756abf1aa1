import json
import re

import httpx
import pytest

from ckanaction.client import CKAN

BASE_URL = "http://ckan.test"


class FakeCKAN:
    """Stands in for a CKAN site: records each request and answers with a
    canned response (a success envelope unless told otherwise)."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload = {"help": "http://ckan.test/api/3/action/help_show", "success": True, "result": []}
        self.raw: bytes | None = None
        self.error: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def action(self) -> str:
        return self.last.url.path.rsplit("/", 1)[-1]

    def body(self) -> dict:
        return json.loads(self.last.content)


def multipart_parts(request: httpx.Request) -> dict[str, tuple[str | None, bytes]]:
    """Split a multipart request into {field name: (filename, payload)}."""
    boundary = request.headers["content-type"].split("boundary=", 1)[1].encode()
    parts = {}
    for piece in request.content.split(b"--" + boundary):
        if not piece or piece.startswith(b"--"):
            continue
        head, payload = piece[2:].split(b"\r\n\r\n", 1)
        head_text = head.decode()
        name = re.search(r'name="([^"]+)"', head_text).group(1)
        filename = re.search(r'filename="([^"]+)"', head_text)
        parts[name] = (filename.group(1) if filename else None, payload[:-2])
    return parts


@pytest.fixture
def fake():
    return FakeCKAN()


@pytest.fixture
async def http(fake):
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake.handler)) as c:
        yield c


@pytest.fixture
def ckan(http):
    return CKAN(url=BASE_URL, http=http)


@pytest.fixture
def authed(http):
    return CKAN(url=BASE_URL, token="tok-123", http=http)
