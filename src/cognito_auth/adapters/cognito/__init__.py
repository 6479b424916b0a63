"""
cognito_auth.adapters.cognito

Cognito Identity Provider JSON protocol:

- catalog: operation -> X-Amz-Target + request/response shapes
- codec: wire JSON <-> pydantic models
- RequestDispatcher: one POST per operation, httpx-based
- UnverifiedClaimsDecoder: payload segment of an id token
"""

from __future__ import annotations

from .catalog import OperationSpec, operations, spec_for, target_for
from .claims import UnverifiedClaimsDecoder
from .codec import deserialize, serialize
from .dispatcher import RequestDispatcher

__all__ = [
    "OperationSpec",
    "operations",
    "spec_for",
    "target_for",
    "serialize",
    "deserialize",
    "RequestDispatcher",
    "UnverifiedClaimsDecoder",
]
