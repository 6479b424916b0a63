from __future__ import annotations

from typing import Mapping, Optional, Union

import httpx

from .application.auth_handler import AuthHandler
from .config import CognitoConfiguration, configuration_from_env
from .domain.constants import Region


def create_auth_handler(
        *,
        region: Union[Region, str],
        client_id: str,
        origin: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
) -> AuthHandler:
    """
    High-level factory: Cognito app client settings -> AuthHandler.
    """
    configuration = CognitoConfiguration(
        region=region,
        client_id=client_id,
        origin=origin,
        endpoint_url=endpoint_url,
    )
    return AuthHandler(configuration, client, timeout=timeout)


def create_auth_handler_from_env(
        environ: Optional[Mapping[str, str]] = None,
        *,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
) -> AuthHandler:
    """Same as create_auth_handler, with settings read by configuration_from_env."""
    return AuthHandler(configuration_from_env(environ), client, timeout=timeout)
