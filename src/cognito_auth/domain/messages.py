"""
Wire shapes of the Cognito Identity Provider JSON protocol.

Field names are snake_case in Python and PascalCase on the wire (the alias
generator handles the common case; irregular names carry an explicit alias).
Optional fields left as None are omitted when serialized.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_pascal

from .constants import AuthFlow


class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        frozen=True,
    )


class UserAttribute(WireModel):
    name: str
    value: str


class CodeDeliveryDetails(WireModel):
    attribute_name: Optional[str] = None
    delivery_medium: Optional[str] = None
    destination: Optional[str] = None


class MFAOption(WireModel):
    attribute_name: Optional[str] = None
    delivery_medium: Optional[str] = None


# --- Requests ------------------------------------------------------------


class SignUpRequest(WireModel):
    client_id: str
    username: str
    password: str
    user_attributes: List[UserAttribute] = Field(default_factory=list)


class ConfirmSignUpRequest(WireModel):
    client_id: str
    username: str
    confirmation_code: str


class AuthParameters(WireModel):
    username: str = Field(alias="USERNAME")
    password: str = Field(alias="PASSWORD")


class InitiateAuthRequest(WireModel):
    auth_flow: AuthFlow
    client_id: str
    auth_parameters: AuthParameters


class AccessTokenRequest(WireModel):
    """Body shared by GetUser, GlobalSignOut and DeleteUser."""
    access_token: str


class UpdateUserAttributesRequest(WireModel):
    access_token: str
    user_attributes: List[UserAttribute]


class ChangePasswordRequest(WireModel):
    access_token: str
    previous_password: str
    proposed_password: str


class ForgotPasswordRequest(WireModel):
    client_id: str
    username: str


class ConfirmForgotPasswordRequest(WireModel):
    client_id: str
    confirmation_code: str
    username: str
    password: str


class GetUserAttributeVerificationCodeRequest(WireModel):
    access_token: str
    attribute_name: str
    client_metadata: Optional[Dict[str, str]] = None


class VerifyUserAttributeRequest(WireModel):
    access_token: str
    attribute_name: str
    code: str


# --- Responses -----------------------------------------------------------


class SignUpResponse(WireModel):
    code_delivery_details: Optional[CodeDeliveryDetails] = None
    user_confirmed: bool
    user_sub: str


class SignInResponse(WireModel):
    """
    Result of a USER_PASSWORD_AUTH InitiateAuth call.

    Cognito nests the tokens under "AuthenticationResult"; a flat body with
    the token fields at the top level is accepted too. When Cognito answers
    with a challenge instead, the token fields are None and `challenge_name`
    tells the caller what to do next.
    """
    access_token: Optional[str] = None
    id_token: Optional[str] = None
    refresh_token: Optional[str] = None
    expires_in: Optional[int] = None
    token_type: Optional[str] = None

    challenge_name: Optional[str] = None
    challenge_parameters: Optional[Dict[str, str]] = None
    session: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _flatten_authentication_result(cls, data: Any) -> Any:
        if isinstance(data, dict) and "AuthenticationResult" in data:
            nested = data["AuthenticationResult"]
            flat = {k: v for k, v in data.items() if k != "AuthenticationResult"}
            if nested is None:
                return flat
            if not isinstance(nested, dict):
                raise ValueError("AuthenticationResult must be an object")
            flat.update(nested)
            return flat
        return data

    @property
    def is_challenge(self) -> bool:
        return self.challenge_name is not None


class GetUserResponse(WireModel):
    username: str
    user_attributes: List[UserAttribute] = Field(default_factory=list)
    mfa_options: Optional[List[MFAOption]] = Field(default=None, alias="MFAOptions")
    preferred_mfa_setting: Optional[str] = None
    user_mfa_setting_list: Optional[List[str]] = Field(default=None, alias="UserMFASettingList")


class UpdateUserAttributesResponse(WireModel):
    code_delivery_details_list: List[CodeDeliveryDetails] = Field(default_factory=list)


class ForgotPasswordResponse(WireModel):
    code_delivery_details: CodeDeliveryDetails


class GetAttributeVerificationCodeResponse(WireModel):
    code_delivery_details: CodeDeliveryDetails


class ProviderErrorBody(WireModel):
    """Body of every non-200 response."""
    message: str = Field(alias="message")
    error_type: Optional[str] = Field(default=None, alias="__type")
