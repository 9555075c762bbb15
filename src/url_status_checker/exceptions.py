"""Custom exceptions for URL status checks."""


class URLStatusCheckerError(Exception):
    """Base exception for status checker errors."""

    pass


class InvalidURIError(URLStatusCheckerError, ValueError):
    """Target URI could not be parsed or is not absolute."""

    pass


class StatusCheckError(URLStatusCheckerError, IOError):
    """Request failed before a status code was received."""

    pass


class CookieFileError(URLStatusCheckerError):
    """Cookie file is missing or not in a recognised format."""

    pass
