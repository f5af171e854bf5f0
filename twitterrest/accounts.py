"""Account credential verification, and the base shared by REST services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import requests

from .api import Endpoint


def _json_object(data: Any) -> Any:
    return data or {}


def _json_array(data: Any) -> Any:
    return data or []


class _Service:
    """A group of API methods below one path prefix."""

    def __init__(self, endpoint: Endpoint, prefix: str) -> None:
        self._endpoint = endpoint.path(prefix)

    def _send(
        self,
        method: str,
        path: str,
        params: Any,
        decode: Callable[[Any], Any] = _json_object,
    ) -> tuple[Any, requests.Response]:
        data, response = self._endpoint.request(method, path, query=params)
        return decode(data), response


@dataclass
class AccountVerifyParams:
    include_entities: bool | None = None
    skip_status: bool | None = None
    include_email: bool | None = None


class AccountService(_Service):
    """Methods under the ``account/`` endpoints."""

    def __init__(self, endpoint: Endpoint) -> None:
        super().__init__(endpoint, "account/")

    def verify_credentials(
        self, params: AccountVerifyParams | None = None
    ) -> tuple[dict[str, Any], requests.Response]:
        """Return the authorized user as decoded JSON; raises if credentials are invalid."""
        return self._send("GET", "verify_credentials.json", params)