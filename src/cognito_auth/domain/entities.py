from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Address(BaseModel):
    """
    OIDC address claim.
    See https://openid.net/specs/openid-connect-core-1_0.html#AddressClaim
    """
    model_config = ConfigDict(frozen=True)

    formatted: Optional[str] = None
    street_address: Optional[str] = None
    locality: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


class Claims(BaseModel):
    """
    Claims carried by a Cognito id token.

    OIDC standard claims plus the Cognito registered ones. Every field is
    optional; unknown keys are dropped, except `custom:*` user pool
    attributes which end up in `custom_attributes` (without the prefix).

    Nothing here is verified. Treat it as informational only.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # --- OIDC standard claims ---------------------------------------------
    sub: Optional[str] = None
    name: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    middle_name: Optional[str] = None
    nickname: Optional[str] = None
    preferred_username: Optional[str] = None
    profile: Optional[str] = None
    picture: Optional[str] = None
    website: Optional[str] = None
    email: Optional[str] = None
    email_verified: Optional[bool] = None
    gender: Optional[str] = None
    birthdate: Optional[str] = None
    zoneinfo: Optional[str] = None
    locale: Optional[str] = None
    phone_number: Optional[str] = None
    phone_number_verified: Optional[bool] = None
    address: Optional[Address] = None
    updated_at: Optional[int] = None

    # --- Token / Cognito claims -------------------------------------------
    iss: Optional[str] = None
    aud: Optional[Union[str, List[str]]] = None
    exp: Optional[int] = None
    iat: Optional[int] = None
    auth_time: Optional[int] = None
    token_use: Optional[str] = None
    jti: Optional[str] = None
    origin_jti: Optional[str] = None
    event_id: Optional[str] = None
    cognito_username: Optional[str] = Field(default=None, alias="cognito:username")
    cognito_groups: Optional[List[str]] = Field(default=None, alias="cognito:groups")

    custom_attributes: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _collect_custom_attributes(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        custom = {
            key[len("custom:"):]: value
            for key, value in data.items()
            if isinstance(key, str) and key.startswith("custom:")
        }
        if not custom:
            return data
        return {**data, "custom_attributes": custom}
