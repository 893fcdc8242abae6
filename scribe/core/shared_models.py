"""Shared enums used across the model, the signature engine, and the Api strategies."""

from enum import Enum


class Verb(str, Enum):
    """HTTP verbs a Request can be issued with."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    PATCH = "PATCH"

    @property
    def carries_body(self) -> bool:
        """Whether requests with this verb send their parameters as a form body."""
        return self in (Verb.POST, Verb.PUT, Verb.PATCH)


class SignatureType(str, Enum):
    """Where signature material is placed on an outbound request.

    HEADER puts it in ``Authorization`` (``OAuth ...`` for 1.0a, ``Bearer ...``
    for 2.0); QUERY_STRING adds it as query parameters.
    """

    HEADER = "header"
    QUERY_STRING = "query_string"


class TokenFormat(str, Enum):
    """Body format of a provider's token endpoint response."""

    FORM = "form"
    JSON = "json"


class OAuthVersion(str, Enum):
    """Protocol version implemented by a service."""

    V1_0A = "1.0"
    V2_0 = "2.0"
