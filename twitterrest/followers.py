"""Followers of a user, as cursored collections, and the shared record helpers."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

import requests

from .accounts import _Service
from .api import Endpoint


class _Record:
    """Builds a dataclass from decoded JSON; missing or empty values keep their defaults."""

    @classmethod
    def from_dict(cls, data: dict | None):
        data = data or {}
        values = {}
        for spec in fields(cls):
            raw = data.get(spec.name)
            if raw:
                values[spec.name] = list(raw) if isinstance(raw, list) else raw
        return cls(**values)


@dataclass
class _Cursored(_Record):
    next_cursor: int = 0
    next_cursor_str: str = ""
    previous_cursor: int = 0
    previous_cursor_str: str = ""


@dataclass
class _IDPage(_Cursored):
    ids: list[int] = field(default_factory=list)


@dataclass
class _UserPage(_Cursored):
    users: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class _UserPageParams:
    user_id: int | None = None
    screen_name: str | None = None
    cursor: int | None = None
    count: int | None = None


@dataclass
class _UserListParams(_UserPageParams):
    skip_status: bool | None = None
    include_user_entities: bool | None = None


class _UserGraphService(_Service):
    """The ``ids`` and ``list`` endpoints shared by followers and friends."""

    _prefix: str
    _id_page: type[_IDPage]
    _user_page: type[_UserPage]

    def __init__(self, endpoint: Endpoint) -> None:
        super().__init__(endpoint, self._prefix)

    def ids(self, params: _UserPageParams | None = None) -> tuple[Any, requests.Response]:
        """Return a cursored page of user ids."""
        return self._send("GET", "ids.json", params, self._id_page.from_dict)

    def list(self, params: _UserListParams | None = None) -> tuple[Any, requests.Response]:
        """Return a cursored page of users as decoded JSON."""
        return self._send("GET", "list.json", params, self._user_page.from_dict)


class FollowerIDs(_IDPage):
    """Ids of users following someone."""

    @classmethod
    def from_dict(cls, data: dict | None) -> FollowerIDs:
        """Build from decoded JSON."""
        return super().from_dict(data)


class Followers(_UserPage):
    """Users following someone; each user is decoded JSON."""

    @classmethod
    def from_dict(cls, data: dict | None) -> Followers:
        """Build from decoded JSON."""
        return super().from_dict(data)


class FollowerIDParams(_UserPageParams):
    """Parameters of FollowerService.ids."""


class FollowerListParams(_UserListParams):
    """Parameters of FollowerService.list."""


class FollowerService(_UserGraphService):
    """Methods under the ``followers/`` endpoints: users following the specified user."""

    _prefix = "followers/"
    _id_page = FollowerIDs
    _user_page = Followers

    def __init__(self, endpoint: Endpoint) -> None:
        super().__init__(endpoint)

    def ids(self, params: FollowerIDParams | None = None) -> tuple[FollowerIDs, requests.Response]:
        """Return a cursored page of ids of users following the specified user."""
        return super().ids(params)

    def list(self, params: FollowerListParams | None = None) -> tuple[Followers, requests.Response]:
        """Return a cursored page of users following the specified user."""
        return super().list(params)