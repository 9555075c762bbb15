"""Configuration handling for status checks."""

import os
from dataclasses import dataclass

DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:145.0) Gecko/20100101 Firefox/145.0"


@dataclass
class CheckerConfig:
    """Transport settings for a StatusChecker.

    These only shape how the request is sent. What gets requested (target,
    method, redirect policy, cookies) is set on the checker itself.

    SSL verification is on by default. Disable it for test environments
    running self-signed certificates.
    """

    timeout: float = 30.0
    verify_ssl: bool = True
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> "CheckerConfig":
        """Load configuration from environment variables.

        Environment variables:
            URL_STATUS_TIMEOUT: Request timeout in seconds
            URL_STATUS_VERIFY_SSL: Set to "false" to disable SSL verification
            URL_STATUS_USER_AGENT: User-Agent header sent with the request

        Returns:
            CheckerConfig instance

        Raises:
            ValueError: If URL_STATUS_TIMEOUT is not a number
        """
        timeout = os.environ.get("URL_STATUS_TIMEOUT", "30")
        try:
            timeout_seconds = float(timeout)
        except ValueError:
            raise ValueError(f"URL_STATUS_TIMEOUT must be a number of seconds, got {timeout!r}") from None

        return cls(
            timeout=timeout_seconds,
            verify_ssl=os.environ.get("URL_STATUS_VERIFY_SSL", "").lower() != "false",
            user_agent=os.environ.get("URL_STATUS_USER_AGENT") or DEFAULT_USER_AGENT,
        )
