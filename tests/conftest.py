"""Shared fixtures: virtual-time scheduler, image bytes and a recording HTTP mock."""
import io

import httpx
import pytest
from PIL import Image


# ---------------------------------------------------------------------------
# Virtual time
# ---------------------------------------------------------------------------

class FakeInterval:
    def __init__(self, scheduler, seconds, callback):
        self.seconds   = seconds
        self.callback  = callback
        self.due       = scheduler.now + seconds
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """Scheduler whose clock only moves when advance() is called."""

    def __init__(self):
        self.now       = 0.0
        self.intervals = []

    def set_interval(self, seconds, callback):
        interval = FakeInterval(self, seconds, callback)
        self.intervals.append(interval)
        return interval

    @property
    def live(self):
        return [i for i in self.intervals if not i.cancelled]

    def advance(self, seconds):
        target = self.now + seconds
        while True:
            due = [i for i in self.live if i.due <= target]
            if not due:
                break
            interval = min(due, key=lambda i: i.due)
            self.now = interval.due
            interval.due += interval.seconds
            interval.callback()
        self.now = target


@pytest.fixture
def scheduler():
    return FakeScheduler()


# ---------------------------------------------------------------------------
# Image bytes
# ---------------------------------------------------------------------------

def _encode(fmt: str, color) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (8, 8), color).save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture
def jpeg_bytes():
    return _encode("JPEG", (200, 160, 40))


@pytest.fixture
def png_bytes():
    return _encode("PNG", (20, 20, 20))


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------

def respond(status: int = 200, content: bytes = b"", headers: dict | None = None, json=None):
    """Route handler building a fresh response for every request."""
    def handler(request):
        if json is not None:
            return httpx.Response(status, json=json, headers=headers)
        return httpx.Response(status, content=content, headers=headers)
    return handler


class Recorder:
    """MockTransport handler that records requests and serves a URL → handler map."""

    def __init__(self, routes: dict):
        self.routes   = routes
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get(str(request.url))
        if handler is None:
            return httpx.Response(404, text="not found")
        return handler(request)

    def urls(self):
        return [str(r.url) for r in self.requests]


@pytest.fixture
def mock_http():
    clients = []

    def factory(routes: dict):
        recorder = Recorder(routes)
        client   = httpx.Client(transport=httpx.MockTransport(recorder), follow_redirects=False)
        clients.append(client)
        return client, recorder

    yield factory
    for c in clients:
        c.close()
