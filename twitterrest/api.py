"""HTTP plumbing shared by the API services.

Authentication is left to the caller: pass a ``requests.Session`` that
already signs its requests (OAuth1 user auth or OAuth2 application auth).
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any
from urllib.parse import urljoin

import requests

from .errors import APIError, relevant_error

API_BASE = "https://api.twitter.com/1.1/"


def _is_zero(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, list, tuple)):
        return len(value) == 0
    return False


def _format(value: Any) -> str | list[str]:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return [_format(item) for item in value]  # type: ignore[misc]
    return str(value)


def encode_params(params: Any) -> dict[str, Any]:
    """Encode a params dataclass or mapping as query/form values.

    ``None`` values are dropped; empty strings and zero numbers are dropped
    unless a dataclass field sets ``metadata={"omitempty": False}``. A field
    may rename its key with ``metadata={"name": ...}``. Booleans become
    ``"true"``/``"false"``.
    """
    if params is None:
        return {}
    if dataclasses.is_dataclass(params) and not isinstance(params, type):
        items = [
            (
                f.metadata.get("name", f.name),
                getattr(params, f.name),
                f.metadata.get("omitempty", True),
            )
            for f in dataclasses.fields(params)
        ]
    elif isinstance(params, Mapping):
        items = [(key, value, True) for key, value in params.items()]
    else:
        raise TypeError(f"cannot encode parameters of type {type(params).__name__}")
    encoded: dict[str, Any] = {}
    for name, value, omitempty in items:
        if value is None or (omitempty and _is_zero(value)):
            continue
        encoded[name] = _format(value)
    return encoded


def _decode(response: requests.Response) -> Any:
    if response.status_code == 204 or not response.content:
        return None
    return response.json()


def _succeeded(response: requests.Response) -> bool:
    return 200 <= response.status_code < 300


class Endpoint:
    """A base URL bound to an HTTP session, from which API calls are made."""

    def __init__(self, session: requests.Session | None = None, base_url: str = API_BASE) -> None:
        self.session = session if session is not None else requests.Session()
        self.base_url = base_url

    def path(self, path: str) -> "Endpoint":
        """Return a new endpoint whose base URL is resolved against ``path``."""
        return Endpoint(self.session, urljoin(self.base_url, path))

    def request(
        self,
        method: str,
        path: str,
        query: Any = None,
        form: Any = None,
        json_body: Any = None,
    ) -> tuple[Any, requests.Response]:
        """Send a request and return the decoded JSON body and the response.

        A successful response without a body yields ``None``; so does an
        unsuccessful one that carries no error details. Raises
        :class:`APIError` when the API reports errors and ``ValueError`` when
        the body is not valid JSON.
        """
        url = urljoin(self.base_url, path)
        response = self.session.request(
            method,
            url,
            params=encode_params(query) or None,
            data=encode_params(form) or None,
            json=json_body,
        )
        http_error: BaseException | None = None
        data: Any = None
        try:
            data = _decode(response)
        except ValueError as exc:
            http_error = exc
        api_error: APIError | None = None
        if not _succeeded(response):
            api_error = APIError.from_dict(data if isinstance(data, Mapping) else None)
            api_error.response = response
            data = None
        error = relevant_error(http_error, api_error)
        if error is not None:
            raise error
        return data, response