"""HTTP request methods supported by the status checker."""

from enum import Enum


class RequestMethod(str, Enum):
    """HTTP method used for a status check (defaults to GET)."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"

    @classmethod
    def parse(cls, value: "RequestMethod | str") -> "RequestMethod":
        """Resolve a method name (case-insensitive) to a RequestMethod.

        Raises:
            ValueError: If the name is not a supported method.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            supported = ", ".join(m.value for m in cls)
            raise ValueError(f"Unsupported HTTP method: {value!r} (expected one of {supported})") from None
