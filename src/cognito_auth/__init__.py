"""
cognito_auth

Async client for the AWS Cognito Identity Provider user API: sign-up,
sign-in, password management, user attributes and id token claims.
"""

__version__ = "0.1.0"

from .domain.constants import AuthFlow, Operation, Region
from .domain.entities import Address, Claims
from .domain.exceptions import (
    AuthError,
    DecodingError,
    MalformedTokenError,
    ProviderError,
    TransportError,
)
from .domain.messages import (
    CodeDeliveryDetails,
    ForgotPasswordResponse,
    GetAttributeVerificationCodeResponse,
    GetUserResponse,
    MFAOption,
    SignInResponse,
    SignUpResponse,
    UpdateUserAttributesResponse,
    UserAttribute,
)
from .domain.ports import RequestConfiguration
from .domain.value_objects import Outcome, Result

from .config import CognitoConfiguration, configuration_from_env
from .application.auth_handler import AuthHandler
from .factory import create_auth_handler, create_auth_handler_from_env

__all__ = [
    "__version__",
    # domain core
    "AuthFlow",
    "Operation",
    "Region",
    "Address",
    "Claims",
    "Result",
    "Outcome",
    "RequestConfiguration",
    # wire shapes
    "UserAttribute",
    "CodeDeliveryDetails",
    "MFAOption",
    "SignUpResponse",
    "SignInResponse",
    "GetUserResponse",
    "UpdateUserAttributesResponse",
    "ForgotPasswordResponse",
    "GetAttributeVerificationCodeResponse",
    # exceptions
    "AuthError",
    "TransportError",
    "ProviderError",
    "DecodingError",
    "MalformedTokenError",
    # configuration
    "CognitoConfiguration",
    "configuration_from_env",
    # facade
    "AuthHandler",
    "create_auth_handler",
    "create_auth_handler_from_env",
]
