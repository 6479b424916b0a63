from __future__ import annotations

import binascii
import re

import structlog
from jwt.utils import base64url_decode

from ...domain.entities import Claims
from ...domain.exceptions import DecodingError, MalformedTokenError
from .codec import deserialize

logger = structlog.get_logger(__name__)

_BASE64URL = re.compile(r"[A-Za-z0-9_-]*={0,2}")


class UnverifiedClaimsDecoder:
    """
    Reads the payload segment of a compact JWT (header.payload.signature).

    The signature is NOT checked, nor are expiry, issuer or audience. Use
    this to show profile data from an id token you just received from the
    provider, never to make an authorization decision.
    """

    def decode(self, token: str) -> Claims:
        """
        Raises:
            MalformedTokenError if there is no payload segment.
            DecodingError if the payload is not base64url encoded JSON.
        """
        segments = token.split(".")
        if len(segments) < 2:
            raise MalformedTokenError("Token has no payload segment")

        payload_segment = segments[1]
        if not _BASE64URL.fullmatch(payload_segment):
            raise DecodingError("Token payload is not base64url encoded")

        try:
            raw = base64url_decode(payload_segment)
        except (binascii.Error, ValueError) as exc:
            raise DecodingError(f"Token payload is not base64url encoded: {exc}") from exc

        claims = deserialize(raw, Claims)
        logger.debug("Decoded token claims", token_use=claims.token_use)
        return claims
