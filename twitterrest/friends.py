"""Users a user follows, as cursored collections."""

from __future__ import annotations

import requests

from .api import Endpoint
from .followers import _IDPage, _UserGraphService, _UserListParams, _UserPage, _UserPageParams


class FriendIDs(_IDPage):
    """Ids of users someone follows."""

    @classmethod
    def from_dict(cls, data: dict | None) -> FriendIDs:
        """Build from decoded JSON."""
        return super().from_dict(data)


class Friends(_UserPage):
    """Users someone follows; each user is decoded JSON."""

    @classmethod
    def from_dict(cls, data: dict | None) -> Friends:
        """Build from decoded JSON."""
        return super().from_dict(data)


class FriendIDParams(_UserPageParams):
    """Parameters of FriendService.ids."""


class FriendListParams(_UserListParams):
    """Parameters of FriendService.list."""


class FriendService(_UserGraphService):
    """Methods under the ``friends/`` endpoints: users the specified user is following."""

    _prefix = "friends/"
    _id_page = FriendIDs
    _user_page = Friends

    def __init__(self, endpoint: Endpoint) -> None:
        super().__init__(endpoint)

    def ids(self, params: FriendIDParams | None = None) -> tuple[FriendIDs, requests.Response]:
        """Return a cursored page of ids of users the specified user follows."""
        return super().ids(params)

    def list(self, params: FriendListParams | None = None) -> tuple[Friends, requests.Response]:
        """Return a cursored page of users the specified user follows."""
        return super().list(params)