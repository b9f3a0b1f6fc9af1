import http.server
import os
import socketserver
import threading
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

INDEX_HTML = """<!DOCTYPE html>
<html><head><title>Home</title></head>
<body><h1>Bienvenido</h1><p>Static landing page.</p></body></html>
"""

NO_HEADING_HTML = """<!DOCTYPE html>
<html><head><title>Resources</title></head>
<body><p>This page forgot its heading.</p></body></html>
"""

HIDDEN_HEADING_HTML = """<!DOCTYPE html>
<html><head><title>Terms</title></head>
<body><h1 style="display:none">Hidden</h1></body></html>
"""

CONSOLE_ERROR_HTML = """<!DOCTYPE html>
<html><head><title>Console</title></head>
<body><p>Loading...</p><script>console.log("ignored"); console.error("boom");</script></body></html>
"""


class CleanUrlHandler(http.server.SimpleHTTPRequestHandler):
    """Static handler that also serves /page as /page.html."""

    directory = None

    def __init__(self, *args, **kwargs):
        super().__init__(*args, directory=self.directory, **kwargs)

    def do_GET(self):
        path = self.translate_path(self.path)
        if not os.path.isdir(path) and not os.path.exists(path):
            if os.path.exists(path + ".html"):
                self.path += ".html"
        super().do_GET()

    def log_message(self, format, *args):
        pass


@pytest.fixture
def site_dir(tmp_path):
    site = tmp_path / "site"
    site.mkdir()
    (site / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    (site / "resources.html").write_text(NO_HEADING_HTML, encoding="utf-8")
    (site / "terms.html").write_text(HIDDEN_HEADING_HTML, encoding="utf-8")
    (site / "console-error.html").write_text(CONSOLE_ERROR_HTML, encoding="utf-8")
    return site


@pytest.fixture
def static_server(site_dir):
    """Serves site_dir on a free port; yields the base URL."""
    handler = type("SiteHandler", (CleanUrlHandler,), {"directory": str(site_dir)})
    httpd = socketserver.ThreadingTCPServer(("127.0.0.1", 0), handler)
    httpd.daemon_threads = True
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{httpd.server_address[1]}"
    finally:
        httpd.shutdown()
        httpd.server_close()


@pytest_asyncio.fixture
async def browser():
    async with async_playwright() as p:
        try:
            browser = await p.chromium.launch(headless=True, args=["--no-sandbox", "--disable-setuid-sandbox"])
        except PlaywrightError as e:
            pytest.skip(f"Chromium not available: {e.message}")
        try:
            yield browser
        finally:
            await browser.close()


def make_response(status=200, status_text="OK"):
    response = MagicMock()
    response.status = status
    response.status_text = status_text
    response.ok = 200 <= status < 300
    return response


def build_fake_page(status=200, status_text="OK"):
    """A stand-in for playwright's Page that renders instantly."""
    page = MagicMock()
    page.handlers = {}
    page.on = MagicMock(side_effect=lambda event, handler: page.handlers.setdefault(event, []).append(handler))
    page.goto = AsyncMock(return_value=make_response(status, status_text))
    page.locator.return_value.first.wait_for = AsyncMock(return_value=None)
    page.wait_for_load_state = AsyncMock(return_value=None)
    page.screenshot = AsyncMock(return_value=b"\x89PNG\r\n\x1a\nfake-image-bytes")
    page.content = AsyncMock(return_value="<html><body><p>snapshot</p></body></html>")
    page.close = AsyncMock()
    return page


@pytest.fixture
def fake_page():
    return build_fake_page()


@pytest.fixture
def fake_browser(fake_page):
    browser = MagicMock()
    browser.new_page = AsyncMock(return_value=fake_page)
    return browser

