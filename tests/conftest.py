"""Pytest fixtures for status checker tests."""

import json

import httpx
import pytest

from url_status_checker import SourceCookie, StaticCookieSource

# 2100-01-01, far enough out that the jar never treats it as expired
FAR_FUTURE = 4102444800


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it handles."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


def site(request: httpx.Request) -> httpx.Response:
    """Small fake site: a protected page, redirects and a teapot."""
    path = request.url.path
    if path == "/redirect":
        return httpx.Response(302, headers={"Location": "/final"})
    if path == "/moved":
        return httpx.Response(301, headers={"Location": f"{request.url.scheme}://{request.url.host}/final"})
    if path == "/secure":
        # Only logged-in users get the page
        return httpx.Response(200 if "session=abc" in request.headers.get("cookie", "") else 403)
    if path == "/teapot":
        return httpx.Response(418)
    return httpx.Response(200)


@pytest.fixture
def transport():
    """Recording transport serving the fake site."""
    return RecordingTransport(site)


@pytest.fixture
def session_cookies() -> list[SourceCookie]:
    """Cookies of a browser logged in to example.com."""
    return [
        SourceCookie(name="session", value="abc", domain="example.com", expiry=FAR_FUTURE),
        SourceCookie(name="theme", value="dark", domain="example.com"),
    ]


@pytest.fixture
def cookie_source(session_cookies) -> StaticCookieSource:
    return StaticCookieSource(session_cookies)


@pytest.fixture
def selenium_cookies() -> list[dict]:
    """Cookies in the shape returned by Selenium's driver.get_cookies()."""
    return [
        {
            "name": "session",
            "value": "abc",
            "domain": "example.com",
            "path": "/",
            "secure": False,
            "httpOnly": True,
            "expiry": FAR_FUTURE,
            "sameSite": "Lax",
        },
        {"name": "theme", "value": "dark", "domain": ".example.com", "path": "/", "secure": False},
    ]


@pytest.fixture
def cookie_file(tmp_path, selenium_cookies):
    """JSON file holding a dumped driver.get_cookies()."""
    path = tmp_path / "cookies.json"
    path.write_text(json.dumps(selenium_cookies))
    return path
