from __future__ import annotations

import os
from typing import Mapping, Optional

from .settings import CognitoConfiguration


def configuration_from_env(environ: Optional[Mapping[str, str]] = None) -> CognitoConfiguration:
    """
    Build a CognitoConfiguration from environment variables.

    Required: COGNITO_REGION, COGNITO_CLIENT_ID.
    Optional: COGNITO_ORIGIN, COGNITO_ENDPOINT_URL.
    """
    env = os.environ if environ is None else environ

    def _get(key: str) -> Optional[str]:
        raw = env.get(key)
        if raw is None:
            return None
        raw = raw.strip()
        return raw or None

    region = _get("COGNITO_REGION")
    client_id = _get("COGNITO_CLIENT_ID")
    if not all([region, client_id]):
        missing = [
            n
            for n, v in [
                ("COGNITO_REGION", region),
                ("COGNITO_CLIENT_ID", client_id),
            ]
            if not v
        ]
        raise RuntimeError(f"Missing Cognito settings: {', '.join(missing)}")

    return CognitoConfiguration(
        region=region,
        client_id=client_id,
        origin=_get("COGNITO_ORIGIN"),
        endpoint_url=_get("COGNITO_ENDPOINT_URL"),
    )
