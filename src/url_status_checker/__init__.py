"""HTTP status checks for pages behind a browser login.

Copies the cookies of a running Selenium or Playwright session into an
httpx request, so a protected URL can be status-checked without logging in
again.
"""

from .checker import StatusChecker, parse_target_uri
from .config import CheckerConfig
from .cookies import CookieOverride, SourceCookie, mirror_cookies
from .exceptions import CookieFileError, InvalidURIError, StatusCheckError, URLStatusCheckerError
from .methods import RequestMethod
from .sources import (
    CookieSource,
    PlaywrightCookieSource,
    StaticCookieSource,
    WebDriverCookieSource,
    load_cookie_file,
)

__all__ = [
    "StatusChecker",
    "parse_target_uri",
    "CheckerConfig",
    "RequestMethod",
    "SourceCookie",
    "CookieOverride",
    "mirror_cookies",
    "CookieSource",
    "WebDriverCookieSource",
    "PlaywrightCookieSource",
    "StaticCookieSource",
    "load_cookie_file",
    "URLStatusCheckerError",
    "InvalidURIError",
    "StatusCheckError",
    "CookieFileError",
]
