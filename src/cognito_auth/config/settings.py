from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, MutableMapping, Optional, Union

from ..domain.constants import Region


@dataclass(frozen=True, slots=True)
class CognitoConfiguration:
    """
    Cognito user pool client settings.

    Host code decides how to construct this (env, config file, etc.).
    `endpoint_url` replaces the regional endpoint, e.g. for LocalStack.
    """
    region: Union[Region, str]
    client_id: str
    origin: Optional[str] = None
    endpoint_url: Optional[str] = None
    default_headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.client_id:
            raise ValueError("client_id must not be empty")
        if not self.region_code:
            raise ValueError("region must not be empty")
        # freeze the caller's mapping
        object.__setattr__(self, "default_headers", MappingProxyType(dict(self.default_headers)))

    @property
    def region_code(self) -> str:
        if isinstance(self.region, Region):
            return self.region.value
        return str(self.region).strip()

    @property
    def request_url(self) -> str:
        if self.endpoint_url:
            b = self.endpoint_url.strip()
            return b if b.endswith("/") else b + "/"
        return f"https://cognito-idp.{self.region_code}.amazonaws.com/"

    def setup_default_request(self, headers: MutableMapping[str, str]) -> None:
        headers.update(self.default_headers)
        if self.origin:
            headers["Origin"] = self.origin
