from __future__ import annotations

from typing import MutableMapping, Protocol


class RequestConfiguration(Protocol):
    """
    Port for the settings the dispatcher needs to reach the identity provider.

    The default implementation is `cognito_auth.config.CognitoConfiguration`;
    anything with these members can be plugged in instead.
    """

    @property
    def request_url(self) -> str:
        """Endpoint every operation is POSTed to."""
        ...

    @property
    def client_id(self) -> str:
        """App client id sent with operations that require one."""
        ...

    def setup_default_request(self, headers: MutableMapping[str, str]) -> None:
        """
        Contribute headers to an outgoing request.

        Called once per request, after the content type and routing header
        are set. Values written here win over the request-specific ones.
        """
        ...
