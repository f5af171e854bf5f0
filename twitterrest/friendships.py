"""Friendships: following, unfollowing and relationships between users."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import requests

from .accounts import _Service
from .api import Endpoint
from .followers import _Record
from .friends import FriendIDs

_UserResult = tuple[dict[str, Any], requests.Response]
_IDsResult = tuple[FriendIDs, requests.Response]


@dataclass
class _FriendshipUserParams:
    screen_name: str | None = None
    user_id: int | None = None


@dataclass
class FriendshipCreateParams(_FriendshipUserParams):
    follow: bool | None = None


class FriendshipDestroyParams(_FriendshipUserParams):
    """Parameters of FriendshipService.destroy."""


@dataclass
class FriendshipShowParams:
    source_id: int | None = None
    source_screen_name: str | None = None
    target_id: int | None = None
    target_screen_name: str | None = None


@dataclass
class FriendshipPendingParams:
    cursor: int | None = None


@dataclass
class _RelationshipUser(_Record):
    id: int = 0
    id_str: str = ""
    screen_name: str = ""
    following: bool = False
    followed_by: bool = False


class RelationshipTarget(_RelationshipUser):
    """The target user of a relationship."""


@dataclass
class RelationshipSource(_RelationshipUser):
    """The source user of a relationship."""

    can_dm: bool = False
    blocking: bool = False
    muting: bool = False
    all_replies: bool = False
    want_retweets: bool = False
    marked_spam: bool = False
    notifications_enabled: bool = False


@dataclass
class Relationship:
    """The relation between a source user and a target user."""

    source: RelationshipSource = field(default_factory=RelationshipSource)
    target: RelationshipTarget = field(default_factory=RelationshipTarget)

    @classmethod
    def from_dict(cls, data: dict | None) -> "Relationship":
        data = data or {}
        return cls(
            source=RelationshipSource.from_dict(data.get("source")),
            target=RelationshipTarget.from_dict(data.get("target")),
        )


def _relationship(data: Any) -> Relationship | None:
    relationship = (data or {}).get("relationship")
    return None if relationship is None else Relationship.from_dict(relationship)


class FriendshipService(_Service):
    """Methods under the ``friendships/`` endpoints. Users are returned as decoded JSON."""

    def __init__(self, endpoint: Endpoint) -> None:
        super().__init__(endpoint, "friendships/")

    def create(self, params: FriendshipCreateParams | None = None) -> _UserResult:
        """Follow the specified user and return that user."""
        return self._send("POST", "create.json", params)

    def show(
        self, params: FriendshipShowParams | None = None
    ) -> tuple[Relationship | None, requests.Response]:
        """Return the relationship between two arbitrary users."""
        return self._send("GET", "show.json", params, _relationship)

    def destroy(self, params: FriendshipDestroyParams | None = None) -> _UserResult:
        """Unfollow the specified user and return that user."""
        return self._send("POST", "destroy.json", params)

    def outgoing(self, params: FriendshipPendingParams | None = None) -> _IDsResult:
        """Return ids of protected users with a pending follow request from the authenticated user."""
        return self._send("GET", "outgoing.json", params, FriendIDs.from_dict)

    def incoming(self, params: FriendshipPendingParams | None = None) -> _IDsResult:
        """Return ids of users with a pending request to follow the authenticated user."""
        return self._send("GET", "incoming.json", params, FriendIDs.from_dict)