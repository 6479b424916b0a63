from __future__ import annotations

from typing import Optional

import httpx
import structlog

from ...domain.constants import AMZ_JSON_CONTENT_TYPE, TARGET_HEADER, Operation
from ...domain.exceptions import DecodingError, ProviderError, TransportError
from ...domain.messages import ProviderErrorBody
from ...domain.ports import RequestConfiguration
from ...domain.value_objects import Outcome, Result
from .catalog import spec_for
from .codec import deserialize

logger = structlog.get_logger(__name__)


class RequestDispatcher:
    """
    Sends one operation to the identity provider and classifies the answer.

    - exactly one POST per call, no retries
    - HTTP 200 -> success with the raw body
    - anything else -> ProviderError parsed from the body, or DecodingError
      when the body is not a provider error
    - connect errors / timeouts -> TransportError
    """

    def __init__(
        self,
        configuration: RequestConfiguration,
        client: Optional[httpx.AsyncClient] = None,
        *,
        timeout: float = 30.0,
    ) -> None:
        self._configuration = configuration
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def build_headers(self, operation: Operation) -> httpx.Headers:
        headers = httpx.Headers({
            "Content-Type": AMZ_JSON_CONTENT_TYPE,
            TARGET_HEADER: spec_for(operation).header_value,
        })
        self._configuration.setup_default_request(headers)
        return headers

    async def send(self, operation: Operation, payload: str) -> Outcome:
        headers = self.build_headers(operation)
        log = logger.bind(operation=operation.value, target=headers.get(TARGET_HEADER))

        log.debug("Dispatching request")
        try:
            response = await self._client.post(
                self._configuration.request_url,
                headers=headers,
                content=payload.encode("utf-8"),
            )
        except httpx.HTTPError as exc:
            log.warning("Request failed before a response arrived", error=str(exc))
            error = TransportError(f"{operation.value} request failed: {exc}")
            error.__cause__ = exc
            return Result.failure(error)

        if response.status_code == httpx.codes.OK:
            return Result.success(response.text)

        try:
            body = deserialize(response.text, ProviderErrorBody)
        except DecodingError as exc:
            log.warning(
                "Unreadable error response",
                status_code=response.status_code,
            )
            error = DecodingError(
                f"{operation.value} failed with status {response.status_code} "
                f"and an unreadable error body: {exc}"
            )
            error.__cause__ = exc
            return Result.failure(error)

        log.info(
            "Request rejected by identity provider",
            status_code=response.status_code,
            error_type=body.error_type,
        )
        return Result.failure(
            ProviderError(
                body.message,
                error_type=body.error_type,
                status_code=response.status_code,
            )
        )
