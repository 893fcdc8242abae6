"""Shared exceptions module."""

from typing import Optional


class ScribeException(Exception):
    """Base exception for the scribe OAuth engine."""

    pass


class MalformedUrlError(ScribeException):
    """Exception raised when a URL cannot be parsed."""

    def __init__(self, url: Optional[str] = None, message: Optional[str] = "Malformed URL"):
        """Create a new MalformedUrlError instance.

        Args:
        ----
            url (str, optional): The offending URL.
            message (str, optional): The error message. Has default message.

        """
        self.url = url
        self.message = message
        super().__init__(f"{message}: {url}" if url is not None else message)


class InvalidUrlError(MalformedUrlError):
    """Raised when parameters cannot be appended to a malformed base URL."""

    pass


class OAuthConnectionError(ScribeException, ConnectionError):
    """Exception raised when the transport fails (DNS, timeout, refused connection).

    The underlying transport fault is chained as ``__cause__``.
    """

    def __init__(self, message: Optional[str] = "There was a problem while creating a connection"):
        """Create a new OAuthConnectionError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class SigningError(ScribeException):
    """Exception raised when a request cannot be signed."""

    def __init__(self, message: Optional[str] = "Could not sign request"):
        """Create a new SigningError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class TokenExchangeError(ScribeException):
    """Exception raised when a token endpoint answers unsuccessfully or unparseably."""

    def __init__(
        self,
        message: Optional[str] = "Token exchange failed",
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        """Create a new TokenExchangeError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.
            status_code (int, optional): HTTP status of the token endpoint response.
            body (str, optional): Raw body of the token endpoint response.

        """
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(self.message)


class InvalidConfigurationError(ScribeException):
    """Exception raised when a service is built from incomplete configuration."""

    def __init__(self, message: Optional[str] = "Invalid OAuth configuration"):
        """Create a new InvalidConfigurationError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class RequestAlreadySentError(ScribeException):
    """Raised when a request is sent, or signed, after it was already sent."""

    def __init__(self, message: Optional[str] = "Request has already been sent"):
        """Create a new RequestAlreadySentError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class UnsupportedOperationError(ScribeException):
    """Raised when a protocol version does not support the requested step."""

    pass
