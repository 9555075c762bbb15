"""Cookie sources: where the browser session's cookies come from."""

import json
from pathlib import Path
from typing import Any, Iterable, Protocol

from .cookies import SourceCookie
from .exceptions import CookieFileError


class CookieSource(Protocol):
    """Anything that can report the browser's current cookie set."""

    def get_cookies(self) -> Iterable[SourceCookie]: ...


def _coerce(cookies: Iterable[SourceCookie | dict[str, Any]]) -> list[SourceCookie]:
    return [c if isinstance(c, SourceCookie) else SourceCookie.from_dict(c) for c in cookies]


class WebDriverCookieSource:
    """Cookies from a live Selenium WebDriver.

    Reads ``driver.get_cookies()`` on every call, so the cookie set always
    reflects the page the driver currently has loaded.
    """

    def __init__(self, driver):
        self.driver = driver

    def get_cookies(self) -> list[SourceCookie]:
        return _coerce(self.driver.get_cookies())


class PlaywrightCookieSource:
    """Cookies from a live Playwright BrowserContext."""

    def __init__(self, context, urls: list[str] | None = None):
        """Initialize source.

        Args:
            context: Playwright BrowserContext (sync API)
            urls: Optional URLs to restrict cookies to, as accepted by
                ``context.cookies()``
        """
        self.context = context
        self.urls = urls

    def get_cookies(self) -> list[SourceCookie]:
        if self.urls:
            return _coerce(self.context.cookies(self.urls))
        return _coerce(self.context.cookies())


class StaticCookieSource:
    """Fixed cookie set, e.g. loaded from a file."""

    def __init__(self, cookies: Iterable[SourceCookie | dict[str, Any]] = ()):
        self.cookies = _coerce(cookies)

    def get_cookies(self) -> list[SourceCookie]:
        return list(self.cookies)


def load_cookie_file(path: Path) -> StaticCookieSource:
    """Load cookies saved from a browser session.

    Accepts either a JSON list of cookie dicts (a dumped
    ``driver.get_cookies()``) or a Playwright ``storage_state`` file, which
    keeps its cookies under a top-level ``cookies`` key.

    Raises:
        CookieFileError: If the file is missing or not a recognised format
    """
    path = Path(path)
    if not path.exists():
        raise CookieFileError(f"Cookie file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CookieFileError(f"Cannot read cookie file {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CookieFileError(f"Cookie file is not valid JSON: {path} ({e})") from e

    if isinstance(data, dict):
        data = data.get("cookies")
    if not isinstance(data, list):
        raise CookieFileError(f"No cookie list found in {path}")

    try:
        return StaticCookieSource(data)
    except (KeyError, TypeError, ValueError) as e:
        raise CookieFileError(f"Malformed cookie entry in {path}: {e}") from e
