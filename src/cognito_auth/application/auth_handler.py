from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

import httpx
import structlog
from pydantic import BaseModel

from ..adapters.cognito.catalog import spec_for
from ..adapters.cognito.claims import UnverifiedClaimsDecoder
from ..adapters.cognito.codec import deserialize, serialize
from ..adapters.cognito.dispatcher import RequestDispatcher
from ..domain import messages as m
from ..domain.constants import AuthFlow, Operation
from ..domain.entities import Claims
from ..domain.exceptions import DecodingError, MalformedTokenError
from ..domain.ports import RequestConfiguration
from ..domain.value_objects import Result

logger = structlog.get_logger(__name__)


class AuthHandler:
    """
    Async Cognito user API.

    Every network operation does exactly one round-trip and returns a
    Result; nothing is retried or cached. Operations whose response has no
    useful body succeed with `Result.success(None)` and never look at it.

    The httpx client is shared by concurrent calls. Pass your own to control
    timeouts, proxies or pooling; otherwise one is created and closed with
    the handler.
    """

    def __init__(
        self,
        configuration: RequestConfiguration,
        client: Optional[httpx.AsyncClient] = None,
        *,
        timeout: float = 30.0,
    ) -> None:
        self.configuration = configuration
        self._dispatcher = RequestDispatcher(configuration, client, timeout=timeout)
        self._claims_decoder = UnverifiedClaimsDecoder()

    async def aclose(self) -> None:
        await self._dispatcher.close()

    async def __aenter__(self) -> "AuthHandler":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # ------------------------------------------------------------------ #
    # sign up
    # ------------------------------------------------------------------ #

    async def sign_up(
        self,
        username: str,
        password: str,
        attributes: Optional[Sequence[m.UserAttribute]] = None,
    ) -> Result[m.SignUpResponse]:
        return await self._call(
            Operation.SIGN_UP,
            m.SignUpRequest(
                client_id=self.configuration.client_id,
                username=username,
                password=password,
                user_attributes=list(attributes or []),
            ),
        )

    async def confirm_sign_up(self, username: str, confirmation_code: str) -> Result[None]:
        return await self._call(
            Operation.CONFIRM_SIGN_UP,
            m.ConfirmSignUpRequest(
                client_id=self.configuration.client_id,
                username=username,
                confirmation_code=confirmation_code,
            ),
        )

    # ------------------------------------------------------------------ #
    # session
    # ------------------------------------------------------------------ #

    async def sign_in(self, username: str, password: str) -> Result[m.SignInResponse]:
        return await self._call(
            Operation.SIGN_IN,
            m.InitiateAuthRequest(
                auth_flow=AuthFlow.USER_PASSWORD_AUTH,
                client_id=self.configuration.client_id,
                auth_parameters=m.AuthParameters(username=username, password=password),
            ),
        )

    async def sign_out(self, access_token: str) -> Result[None]:
        """Global sign-out: revokes every token issued to the user."""
        return await self._call(
            Operation.SIGN_OUT,
            m.AccessTokenRequest(access_token=access_token),
        )

    # ------------------------------------------------------------------ #
    # user
    # ------------------------------------------------------------------ #

    async def get_user(self, access_token: str) -> Result[m.GetUserResponse]:
        return await self._call(
            Operation.GET_USER,
            m.AccessTokenRequest(access_token=access_token),
        )

    async def update_user_attributes(
        self,
        access_token: str,
        attributes: Sequence[m.UserAttribute],
    ) -> Result[m.UpdateUserAttributesResponse]:
        return await self._call(
            Operation.UPDATE_USER_ATTRIBUTES,
            m.UpdateUserAttributesRequest(
                access_token=access_token,
                user_attributes=list(attributes),
            ),
        )

    async def delete_user(self, access_token: str) -> Result[None]:
        return await self._call(
            Operation.DELETE_USER,
            m.AccessTokenRequest(access_token=access_token),
        )

    # ------------------------------------------------------------------ #
    # passwords
    # ------------------------------------------------------------------ #

    async def change_password(
        self,
        access_token: str,
        current_password: str,
        new_password: str,
    ) -> Result[None]:
        return await self._call(
            Operation.CHANGE_PASSWORD,
            m.ChangePasswordRequest(
                access_token=access_token,
                previous_password=current_password,
                proposed_password=new_password,
            ),
        )

    async def forgot_password(self, username: str) -> Result[m.ForgotPasswordResponse]:
        return await self._call(
            Operation.FORGOT_PASSWORD,
            m.ForgotPasswordRequest(
                client_id=self.configuration.client_id,
                username=username,
            ),
        )

    async def confirm_forgot_password(
        self,
        confirmation_code: str,
        username: str,
        password: str,
    ) -> Result[None]:
        return await self._call(
            Operation.CONFIRM_FORGOT_PASSWORD,
            m.ConfirmForgotPasswordRequest(
                client_id=self.configuration.client_id,
                confirmation_code=confirmation_code,
                username=username,
                password=password,
            ),
        )

    # ------------------------------------------------------------------ #
    # attribute verification
    # ------------------------------------------------------------------ #

    async def get_user_attribute_verification_code(
        self,
        access_token: str,
        attribute_name: str,
        client_metadata: Optional[Dict[str, str]] = None,
    ) -> Result[m.GetAttributeVerificationCodeResponse]:
        return await self._call(
            Operation.GET_USER_ATTRIBUTE_VERIFICATION_CODE,
            m.GetUserAttributeVerificationCodeRequest(
                access_token=access_token,
                attribute_name=attribute_name,
                client_metadata=client_metadata,
            ),
        )

    async def verify_user_attribute(
        self,
        access_token: str,
        attribute_name: str,
        code: str,
    ) -> Result[None]:
        return await self._call(
            Operation.VERIFY_USER_ATTRIBUTE,
            m.VerifyUserAttributeRequest(
                access_token=access_token,
                attribute_name=attribute_name,
                code=code,
            ),
        )

    # ------------------------------------------------------------------ #
    # tokens
    # ------------------------------------------------------------------ #

    def get_claims(self, id_token: str) -> Result[Claims]:
        """
        Decode the claims of an id token without verifying it.

        Local only, no network access.
        """
        try:
            return Result.success(self._claims_decoder.decode(id_token))
        except (MalformedTokenError, DecodingError) as exc:
            return Result.failure(exc)

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    async def _call(self, operation: Operation, payload: BaseModel) -> Result[Any]:
        spec = spec_for(operation)
        if not isinstance(payload, spec.request):
            raise TypeError(
                f"{operation.value} expects {spec.request.__name__}, "
                f"got {type(payload).__name__}"
            )

        outcome = await self._dispatcher.send(operation, serialize(payload))
        if outcome.is_failure:
            return Result.failure(outcome.error)

        if spec.response is None:
            return Result.success(None)

        try:
            return Result.success(deserialize(outcome.value or "", spec.response))
        except DecodingError as exc:
            logger.warning(
                "Unreadable success response",
                operation=operation.value,
                shape=spec.response.__name__,
            )
            return Result.failure(exc)
