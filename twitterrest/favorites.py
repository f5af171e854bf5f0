"""Liked (favorited) tweets.

The like action was once called favorite; the API keeps that name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests

from .accounts import _json_array, _Service
from .api import Endpoint

_TweetResult = tuple[dict[str, Any], requests.Response]


@dataclass
class FavoriteListParams:
    user_id: int | None = None
    screen_name: str | None = None
    count: int | None = None
    since_id: int | None = None
    max_id: int | None = None
    include_entities: bool | None = None
    tweet_mode: str | None = None


@dataclass
class _TweetIDParams:
    id: int | None = None


class FavoriteCreateParams(_TweetIDParams):
    """Parameters of FavoriteService.create."""


class FavoriteDestroyParams(_TweetIDParams):
    """Parameters of FavoriteService.destroy."""


class FavoriteService(_Service):
    """Methods under the ``favorites/`` endpoints. Tweets are returned as decoded JSON."""

    def __init__(self, endpoint: Endpoint) -> None:
        super().__init__(endpoint, "favorites/")

    def list(self, params: FavoriteListParams | None = None) -> tuple[list[Any], requests.Response]:
        """Return liked tweets of the specified user."""
        return self._send("GET", "list.json", params, _json_array)

    def create(self, params: FavoriteCreateParams | None = None) -> _TweetResult:
        """Like the specified tweet."""
        return self._send("POST", "create.json", params)

    def destroy(self, params: FavoriteDestroyParams | None = None) -> _TweetResult:
        """Remove the like from the specified tweet."""
        return self._send("POST", "destroy.json", params)