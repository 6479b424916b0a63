from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Type

from pydantic import BaseModel

from ...domain import messages as m
from ...domain.constants import TARGET_PREFIX, Operation


@dataclass(frozen=True, slots=True)
class OperationSpec:
    """
    Everything fixed about one operation: its routing target, the request
    body shape and the response shape (None when the response body carries
    nothing the caller needs).
    """
    target: str
    request: Type[BaseModel]
    response: Optional[Type[BaseModel]] = None

    @property
    def header_value(self) -> str:
        return f"{TARGET_PREFIX}.{self.target}"


_CATALOG: Mapping[Operation, OperationSpec] = MappingProxyType({
    Operation.SIGN_UP: OperationSpec("SignUp", m.SignUpRequest, m.SignUpResponse),
    Operation.CONFIRM_SIGN_UP: OperationSpec("ConfirmSignUp", m.ConfirmSignUpRequest),
    Operation.SIGN_IN: OperationSpec("InitiateAuth", m.InitiateAuthRequest, m.SignInResponse),
    Operation.SIGN_OUT: OperationSpec("GlobalSignOut", m.AccessTokenRequest),
    Operation.GET_USER: OperationSpec("GetUser", m.AccessTokenRequest, m.GetUserResponse),
    Operation.CHANGE_PASSWORD: OperationSpec("ChangePassword", m.ChangePasswordRequest),
    Operation.DELETE_USER: OperationSpec("DeleteUser", m.AccessTokenRequest),
    Operation.UPDATE_USER_ATTRIBUTES: OperationSpec(
        "UpdateUserAttributes",
        m.UpdateUserAttributesRequest,
        m.UpdateUserAttributesResponse,
    ),
    Operation.FORGOT_PASSWORD: OperationSpec(
        "ForgotPassword",
        m.ForgotPasswordRequest,
        m.ForgotPasswordResponse,
    ),
    Operation.CONFIRM_FORGOT_PASSWORD: OperationSpec(
        "ConfirmForgotPassword",
        m.ConfirmForgotPasswordRequest,
    ),
    Operation.GET_USER_ATTRIBUTE_VERIFICATION_CODE: OperationSpec(
        "GetUserAttributeVerificationCode",
        m.GetUserAttributeVerificationCodeRequest,
        m.GetAttributeVerificationCodeResponse,
    ),
    Operation.VERIFY_USER_ATTRIBUTE: OperationSpec(
        "VerifyUserAttribute",
        m.VerifyUserAttributeRequest,
    ),
})


def spec_for(operation: Operation) -> OperationSpec:
    return _CATALOG[operation]


def target_for(operation: Operation) -> str:
    """Value of the X-Amz-Target header for `operation`."""
    return _CATALOG[operation].header_value


def operations() -> tuple[Operation, ...]:
    return tuple(_CATALOG)
