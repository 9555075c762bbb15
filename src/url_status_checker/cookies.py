"""Mirror browser session cookies into an httpx cookie jar.

Browser automation tools hand back cookies as plain dicts. Selenium's
``driver.get_cookies()`` uses ``expiry`` and ``httpOnly``; Playwright's
``context.cookies()`` uses ``expires`` (``-1`` for session cookies) and the
same ``httpOnly`` key. Both are normalised to SourceCookie before being
copied into the jar used for the status check request.
"""

import logging
from dataclasses import dataclass
from http.cookiejar import Cookie
from typing import Any, Iterable

import httpx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceCookie:
    """Cookie as held by the browser session."""

    name: str
    value: str
    domain: str = ""
    path: str = "/"
    secure: bool = False
    expiry: int | None = None
    http_only: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SourceCookie":
        """Create from a Selenium or Playwright cookie dict."""
        expiry = data.get("expiry", data.get("expires"))
        if expiry is not None:
            expiry = int(expiry)
            # Playwright reports session cookies as -1
            if expiry < 0:
                expiry = None

        return cls(
            name=data["name"],
            value=data.get("value", ""),
            domain=data.get("domain", ""),
            path=data.get("path") or "/",
            secure=bool(data.get("secure", False)),
            expiry=expiry,
            http_only=bool(data.get("httpOnly", False)),
        )


@dataclass(frozen=True)
class CookieOverride:
    """Force the cookie with a given name onto a different domain."""

    name: str
    domain: str

    def __post_init__(self):
        if not self.name:
            raise ValueError("Cookie override requires a cookie name")
        if not self.domain:
            raise ValueError("Cookie override requires a domain")

    def applies_to(self, cookie: SourceCookie) -> bool:
        return cookie.name == self.name


def jar_domain(domain: str) -> str:
    """Domain as the cookie jar matches it.

    The jar compares dotless hosts such as ``localhost`` as ``localhost.local``,
    so a browser cookie for ``localhost`` is stored under that name.
    """
    if domain and "." not in domain.lstrip("."):
        return domain + ".local"
    return domain


def to_jar_cookie(cookie: SourceCookie, domain: str) -> Cookie:
    """Build a cookiejar entry carrying the source cookie's attributes."""
    domain = jar_domain(domain)
    rest = {"HttpOnly": None} if cookie.http_only else {}
    return Cookie(
        version=0,
        name=cookie.name,
        value=cookie.value,
        port=None,
        port_specified=False,
        domain=domain,
        domain_specified=bool(domain),
        domain_initial_dot=domain.startswith("."),
        path=cookie.path,
        path_specified=True,
        secure=cookie.secure,
        expires=cookie.expiry,
        discard=cookie.expiry is None,
        comment=None,
        comment_url=None,
        rest=rest,
        rfc2109=False,
    )


def mirror_cookies(
    source_cookies: Iterable[SourceCookie],
    override: CookieOverride | None = None,
    log: logging.Logger | None = None,
) -> httpx.Cookies:
    """Copy browser cookies into a new httpx cookie jar.

    Args:
        source_cookies: Cookies currently held by the browser session
        override: Optional rule moving one named cookie to another domain
        log: Logger for override decisions (defaults to module logger)

    Returns:
        Fresh httpx.Cookies containing one entry per source cookie
    """
    log = log or logger
    store = httpx.Cookies()

    for source in source_cookies:
        if override is not None and override.applies_to(source):
            log.info("Setting domain %s for cookie %s", override.domain, source.name)
            domain = override.domain
        else:
            domain = source.domain
        store.jar.set_cookie(to_jar_cookie(source, domain))

    return store
