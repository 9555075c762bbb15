"""HTTP status checks that reuse a browser session's cookies."""

import logging
from urllib.parse import ParseResult, SplitResult

import httpx

from .config import CheckerConfig
from .cookies import CookieOverride, mirror_cookies
from .exceptions import InvalidURIError, StatusCheckError
from .methods import RequestMethod
from .sources import CookieSource


TargetURI = str | httpx.URL | ParseResult | SplitResult


def parse_target_uri(value: TargetURI) -> httpx.URL:
    """Parse a target into an absolute http(s) URL.

    Raises:
        InvalidURIError: If the value cannot be parsed or is not absolute
    """
    if isinstance(value, (ParseResult, SplitResult)):
        value = value.geturl()

    try:
        url = httpx.URL(value)
    except (httpx.InvalidURL, TypeError) as e:
        raise InvalidURIError(f"Invalid URI {value!r}: {e}") from e

    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidURIError(f"URI must be an absolute http(s) URL: {value!r}")
    return url


class StatusChecker:
    """Check the HTTP status code of a URL as the browser would see it.

    By default the browser's cookies are copied into the request so pages
    that need a login can be checked. Turn that off with
    ``set_mimic_cookies(False)`` to check as an anonymous user.

    Redirects are not followed by default, so a 302 is returned as 302.

    Not thread-safe: use one instance per sequence of checks.
    """

    def __init__(
        self,
        cookie_source: CookieSource | None = None,
        config: CheckerConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
        logger: logging.Logger | None = None,
    ):
        """Initialize checker.

        Args:
            cookie_source: Browser session to copy cookies from. None means
                there are no cookies to copy.
            config: Transport settings. If None, defaults are used.
            transport: Optional httpx transport (e.g. httpx.MockTransport)
            logger: Logger to report on; defaults to this module's logger
        """
        self.cookie_source = cookie_source
        self.config = config or CheckerConfig()
        self.transport = transport
        self.log = logger or logging.getLogger(__name__)

        self.target_uri: httpx.URL | None = None
        self.method = RequestMethod.GET
        self.follow_redirects = False
        self.mimic_cookies = True
        self.cookie_override: CookieOverride | None = None
        self._cookie_store: httpx.Cookies | None = None

    def set_target_uri(self, value: TargetURI) -> None:
        """Specify the URL to perform the status check on."""
        self.target_uri = parse_target_uri(value)

    def set_method(self, method: RequestMethod | str) -> None:
        """Set the HTTP request method (defaults to GET)."""
        self.method = RequestMethod.parse(method)

    def set_follow_redirects(self, value: bool) -> None:
        """Follow redirects before returning the status code?

        If True, a 302 is not returned; you get the status code of the
        final response instead. Defaults to False.
        """
        self.follow_redirects = bool(value)

    def set_mimic_cookies(self, value: bool) -> None:
        """Copy the browser's cookie state into the request (defaults to True).

        If False the request is made as an anonymous user.
        """
        self.mimic_cookies = bool(value)

    def set_cookie_domain_override(self, cookie_name: str, domain: str) -> None:
        """Send the named cookie with ``domain`` instead of its browser domain.

        Replaces any override set earlier.

        Raises:
            ValueError: If either argument is empty
        """
        self.cookie_override = CookieOverride(name=cookie_name, domain=domain)

    def clear_cookie_domain_override(self) -> None:
        """Send every cookie with its browser domain again."""
        self.cookie_override = None

    @property
    def cookie_store(self) -> httpx.Cookies | None:
        """Cookies mirrored for the most recent check, if any."""
        return self._cookie_store

    def build_cookie_store(self) -> httpx.Cookies:
        """Mirror the cookie source's current cookies into a new jar."""
        source_cookies = self.cookie_source.get_cookies() if self.cookie_source else []
        return mirror_cookies(source_cookies, self.cookie_override, log=self.log)

    def check_status(self) -> int:
        """Perform the request and return its HTTP status code.

        Returns:
            Status code exactly as sent by the server

        Raises:
            InvalidURIError: If no target URI has been set
            StatusCheckError: If the request fails (DNS, connection,
                timeout, malformed response)
        """
        if self.target_uri is None:
            raise InvalidURIError("No target URI set")

        self.log.info("Mimic browser cookie state: %s", self.mimic_cookies)
        self._cookie_store = self.build_cookie_store() if self.mimic_cookies else None

        client_kwargs = {
            "timeout": self.config.timeout,
            "verify": self.config.verify_ssl,
            "follow_redirects": self.follow_redirects,
            "headers": {"User-Agent": self.config.user_agent},
        }
        if self._cookie_store is not None:
            client_kwargs["cookies"] = self._cookie_store
        if self.transport is not None:
            client_kwargs["transport"] = self.transport

        method = self.method.value
        self.log.info("Sending %s request for: %s", method, self.target_uri)
        try:
            with httpx.Client(**client_kwargs) as client:
                resp = client.request(method, self.target_uri)
        except httpx.RequestError as e:
            raise StatusCheckError(f"{method} {self.target_uri} failed: {e}") from e

        self.log.info("HTTP %s request status: %d", method, resp.status_code)
        return resp.status_code
