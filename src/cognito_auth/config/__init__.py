"""
cognito_auth.config

- CognitoConfiguration: region, app client id and request defaults.
- configuration_from_env: convenience loader for env-driven hosts.
"""

from __future__ import annotations

from .env import configuration_from_env
from .settings import CognitoConfiguration

__all__ = [
    "CognitoConfiguration",
    "configuration_from_env",
]
