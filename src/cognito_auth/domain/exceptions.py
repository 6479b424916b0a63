from __future__ import annotations

from typing import Optional


class AuthError(Exception):
    """Base class for every failure an auth operation can report."""
    pass


class TransportError(AuthError):
    """Raised when the request never got a response (connect error, timeout)."""
    pass


class ProviderError(AuthError):
    """
    Raised when the identity provider rejected the request.

    `error_type` is the provider's exception name (the `__type` field of the
    error body, e.g. "NotAuthorizedException") when it sends one.
    """

    def __init__(
        self,
        message: str,
        *,
        error_type: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.status_code = status_code


class DecodingError(AuthError):
    """Raised when a body or token segment does not have the expected shape."""
    pass


class MalformedTokenError(AuthError):
    """Raised when a token is not in the compact header.payload.signature form."""
    pass
