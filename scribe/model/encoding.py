"""RFC 3986 percent-encoding used for every OAuth key, value, and URL."""

from urllib.parse import quote, unquote


def percent_encode(value: str) -> str:
    """Percent-encode a value according to RFC 3986.

    Encodes all characters except unreserved: A-Z, a-z, 0-9, -, ., _, ~
    """
    return quote(str(value), safe="~")


def percent_decode(value: str) -> str:
    """Reverse :func:`percent_encode`. A literal ``+`` stays a ``+``."""
    return unquote(value)
