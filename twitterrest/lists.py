"""Twitter Lists: membership, subscription and management endpoints."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any

import requests

from .api import Endpoint
from .errors import APIError


@dataclass
class TwitterList:
    """A Twitter List. Its owning user is kept as decoded JSON."""

    slug: str = ""
    name: str = ""
    created_at: str = ""
    uri: str = ""
    subscriber_count: int = 0
    id_str: str = ""
    member_count: int = 0
    mode: str = ""
    id: int = 0
    full_name: str = ""
    description: str = ""
    user: dict[str, Any] | None = None
    following: bool = False

    @classmethod
    def from_dict(cls, data: dict | None) -> "TwitterList":
        data = data or {}
        return cls(
            slug=data.get("slug") or "",
            name=data.get("name") or "",
            created_at=data.get("created_at") or "",
            uri=data.get("uri") or "",
            subscriber_count=data.get("subscriber_count") or 0,
            id_str=data.get("id_str") or "",
            member_count=data.get("member_count") or 0,
            mode=data.get("mode") or "",
            id=data.get("id") or 0,
            full_name=data.get("full_name") or "",
            description=data.get("description") or "",
            user=data.get("user"),
            following=bool(data.get("following")),
        )


def _cursors(data: dict) -> dict[str, Any]:
    return {
        "next_cursor": data.get("next_cursor") or 0,
        "next_cursor_str": data.get("next_cursor_str") or "",
        "previous_cursor": data.get("previous_cursor") or 0,
        "previous_cursor_str": data.get("previous_cursor_str") or "",
    }


def _users(data: dict) -> list[dict[str, Any]]:
    return list(data.get("users") or [])


def _lists(data: dict) -> list[TwitterList]:
    return [TwitterList.from_dict(item) for item in data.get("lists") or []]


@dataclass
class Members:
    """A cursored collection of list members (decoded JSON users)."""

    users: list[dict[str, Any]] = field(default_factory=list)
    next_cursor: int = 0
    next_cursor_str: str = ""
    previous_cursor: int = 0
    previous_cursor_str: str = ""

    @classmethod
    def from_dict(cls, data: dict | None) -> "Members":
        data = data or {}
        return cls(users=_users(data), **_cursors(data))


@dataclass
class Membership:
    """A cursored collection of lists a user is on."""

    lists: list[TwitterList] = field(default_factory=list)
    next_cursor: int = 0
    next_cursor_str: str = ""
    previous_cursor: int = 0
    previous_cursor_str: str = ""

    @classmethod
    def from_dict(cls, data: dict | None) -> "Membership":
        data = data or {}
        return cls(lists=_lists(data), **_cursors(data))


@dataclass
class Ownership:
    """A cursored collection of lists a user owns."""

    lists: list[TwitterList] = field(default_factory=list)
    next_cursor: int = 0
    next_cursor_str: str = ""
    previous_cursor: int = 0
    previous_cursor_str: str = ""

    @classmethod
    def from_dict(cls, data: dict | None) -> "Ownership":
        data = data or {}
        return cls(lists=_lists(data), **_cursors(data))


@dataclass
class Subscribers:
    """A cursored collection of users subscribed to a list (decoded JSON users)."""

    users: list[dict[str, Any]] = field(default_factory=list)
    next_cursor: int = 0
    next_cursor_str: str = ""
    previous_cursor: int = 0
    previous_cursor_str: str = ""

    @classmethod
    def from_dict(cls, data: dict | None) -> "Subscribers":
        data = data or {}
        return cls(users=_users(data), **_cursors(data))


@dataclass
class Subscribed:
    """A cursored collection of lists a user is subscribed to."""

    lists: list[TwitterList] = field(default_factory=list)
    next_cursor: int = 0
    next_cursor_str: str = ""
    previous_cursor: int = 0
    previous_cursor_str: str = ""

    @classmethod
    def from_dict(cls, data: dict | None) -> "Subscribed":
        data = data or {}
        return cls(lists=_lists(data), **_cursors(data))


@dataclass
class ListsListParams:
    user_id: int | None = None
    screen_name: str | None = None
    reverse: bool | None = None


@dataclass
class ListsMembersParams:
    list_id: int | None = None
    slug: str | None = None
    owner_screen_name: str | None = None
    owner_id: int | None = None
    count: int | None = None
    cursor: int | None = None
    include_entities: bool | None = None
    skip_status: bool | None = None


@dataclass
class ListsMembersShowParams:
    list_id: int | None = None
    slug: str | None = None
    user_id: int | None = None
    screen_name: str | None = None
    owner_screen_name: str | None = None
    owner_id: int | None = None
    include_entities: bool | None = None
    skip_status: bool | None = None


@dataclass
class ListsMembershipsParams:
    user_id: int | None = None
    screen_name: str | None = None
    count: int | None = None
    cursor: int | None = None
    filter_to_owned_lists: bool | None = None


@dataclass
class ListsOwnershipsParams:
    user_id: int | None = None
    screen_name: str | None = None
    count: int | None = None
    cursor: int | None = None


@dataclass
class ListsShowParams:
    list_id: int | None = None
    slug: str | None = None
    owner_screen_name: str | None = None
    owner_id: int | None = None


@dataclass
class ListsStatusesParams:
    list_id: int | None = None
    slug: str | None = None
    owner_screen_name: str | None = None
    owner_id: int | None = None
    since_id: int | None = None
    max_id: int | None = None
    count: int | None = None
    include_entities: bool | None = None
    include_retweets: bool | None = field(default=None, metadata={"name": "include_rts"})


@dataclass
class ListsSubscribersParams:
    list_id: int | None = None
    slug: str | None = None
    owner_screen_name: str | None = None
    owner_id: int | None = None
    count: int | None = None
    cursor: int | None = None
    include_entities: bool | None = None
    skip_status: bool | None = None


@dataclass
class ListsSubscribersShowParams:
    owner_screen_name: str | None = None
    owner_id: int | None = None
    list_id: int | None = None
    slug: str | None = None
    user_id: int | None = None
    screen_name: str | None = None
    include_entities: bool | None = None
    skip_status: bool | None = None


@dataclass
class ListsSubscriptionsParams:
    user_id: int | None = None
    screen_name: str | None = None
    count: int | None = None
    cursor: int | None = None


@dataclass
class ListsCreateParams:
    name: str | None = None
    mode: str | None = None
    description: str | None = None


@dataclass
class ListsDestroyParams:
    owner_screen_name: str | None = None
    owner_id: int | None = None
    list_id: int | None = None
    slug: str | None = None


@dataclass
class ListsMembersCreateParams:
    list_id: int | None = None
    slug: str | None = None
    user_id: int | None = None
    screen_name: str | None = None
    owner_screen_name: str | None = None
    owner_id: int | None = None


@dataclass
class ListsMembersCreateAllParams:
    list_id: int | None = None
    slug: str | None = None
    user_id: str | None = None
    screen_name: str | None = None
    owner_screen_name: str | None = None
    owner_id: int | None = None


@dataclass
class ListsMembersDestroyParams:
    list_id: int | None = None
    slug: str | None = None
    user_id: int | None = None
    screen_name: str | None = None
    owner_screen_name: str | None = None
    owner_id: int | None = None


@dataclass
class ListsMembersDestroyAllParams:
    list_id: int | None = None
    slug: str | None = None
    user_id: str | None = None
    screen_name: str | None = None
    owner_screen_name: str | None = None
    owner_id: int | None = None


@dataclass
class ListsSubscribersCreateParams:
    owner_screen_name: str | None = None
    owner_id: int | None = None
    list_id: int | None = None
    slug: str | None = None


@dataclass
class ListsSubscribersDestroyParams:
    list_id: int | None = None
    slug: str | None = None
    owner_screen_name: str | None = None
    owner_id: int | None = None


@dataclass
class ListsUpdateParams:
    list_id: int | None = None
    slug: str | None = None
    name: str | None = None
    mode: str | None = None
    description: str | None = None
    owner_screen_name: str | None = None
    owner_id: int | None = None


class ListsService:
    """Methods under the ``lists/`` endpoints.

    The membership, subscription-change and update calls report transport and
    decoding failures but, like the API client they mirror, do not raise on
    error details in the response body; inspect the returned response instead.
    """

    def __init__(self, endpoint: Endpoint) -> None:
        self._endpoint = endpoint.path("lists/")

    def _get(self, path: str, params: Any) -> tuple[Any, requests.Response]:
        return self._endpoint.request("GET", path, query=params)

    def _post_unchecked(self, path: str, params: Any) -> tuple[Any, requests.Response]:
        try:
            return self._endpoint.request("POST", path, form=params)
        except APIError as exc:
            return None, exc.response

    def list(
        self, params: ListsListParams | None = None
    ) -> tuple[list[TwitterList], requests.Response]:
        """Return all lists the user subscribes to, including their own."""
        if params is not None and params.reverse is False:
            params = dataclasses.replace(params, reverse=None)
        data, response = self._get("list.json", params)
        return [TwitterList.from_dict(item) for item in data or []], response

    def members(self, params: ListsMembersParams | None = None) -> tuple[Members, requests.Response]:
        """Return the members of the specified list."""
        data, response = self._get("members.json", params)
        return Members.from_dict(data), response

    def members_show(
        self, params: ListsMembersShowParams | None = None
    ) -> tuple[dict[str, Any], requests.Response]:
        """Return the user if they are a member of the specified list."""
        data, response = self._get("members/show.json", params)
        return data or {}, response

    def memberships(
        self, params: ListsMembershipsParams | None = None
    ) -> tuple[Membership, requests.Response]:
        """Return the lists the specified user has been added to."""
        data, response = self._get("memberships.json", params)
        return Membership.from_dict(data), response

    def ownerships(
        self, params: ListsOwnershipsParams | None = None
    ) -> tuple[Ownership, requests.Response]:
        """Return the lists owned by the specified user."""
        data, response = self._get("ownerships.json", params)
        return Ownership.from_dict(data), response

    def show(self, params: ListsShowParams | None = None) -> tuple[TwitterList, requests.Response]:
        """Return the specified list."""
        data, response = self._get("show.json", params)
        return TwitterList.from_dict(data), response

    def statuses(
        self, params: ListsStatusesParams | None = None
    ) -> tuple[list[dict[str, Any]], requests.Response]:
        """Return tweets (decoded JSON) authored by members of the specified list."""
        data, response = self._get("statuses.json", params)
        return list(data or []), response

    def subscribers(
        self, params: ListsSubscribersParams | None = None
    ) -> tuple[Subscribers, requests.Response]:
        """Return the subscribers of the specified list."""
        data, response = self._get("subscribers.json", params)
        return Subscribers.from_dict(data), response

    def subscribers_show(
        self, params: ListsSubscribersShowParams | None = None
    ) -> tuple[dict[str, Any], requests.Response]:
        """Return the user if they subscribe to the specified list."""
        data, response = self._get("subscribers/show.json", params)
        return data or {}, response

    def subscriptions(
        self, params: ListsSubscriptionsParams | None = None
    ) -> tuple[Subscribed, requests.Response]:
        """Return the lists the specified user is subscribed to."""
        data, response = self._get("subscriptions.json", params)
        return Subscribed.from_dict(data), response

    def create(
        self, name: str, params: ListsCreateParams | None = None
    ) -> tuple[TwitterList, requests.Response]:
        """Create a new list named ``name`` for the authenticated user."""
        form = dataclasses.replace(params or ListsCreateParams(), name=name)
        data, response = self._endpoint.request("POST", "create.json", form=form)
        return TwitterList.from_dict(data), response

    def destroy(
        self, params: ListsDestroyParams | None = None
    ) -> tuple[TwitterList, requests.Response]:
        """Delete the specified list and return it."""
        data, response = self._endpoint.request("POST", "destroy.json", form=params)
        return TwitterList.from_dict(data), response

    def members_create(self, params: ListsMembersCreateParams | None = None) -> requests.Response:
        """Add a member to a list."""
        return self._post_unchecked("members/create.json", params)[1]

    def members_create_all(
        self, params: ListsMembersCreateAllParams | None = None
    ) -> requests.Response:
        """Add several members to a list."""
        return self._post_unchecked("members/create_all.json", params)[1]

    def members_destroy(self, params: ListsMembersDestroyParams | None = None) -> requests.Response:
        """Remove a member from a list."""
        return self._post_unchecked("members/destroy.json", params)[1]

    def members_destroy_all(
        self, params: ListsMembersDestroyAllParams | None = None
    ) -> requests.Response:
        """Remove several members from a list."""
        return self._post_unchecked("members/destroy_all.json", params)[1]

    def subscribers_create(
        self, params: ListsSubscribersCreateParams | None = None
    ) -> tuple[TwitterList, requests.Response]:
        """Subscribe the authenticated user to the specified list."""
        data, response = self._post_unchecked("subscribers/create.json", params)
        return TwitterList.from_dict(data), response

    def subscribers_destroy(
        self, params: ListsSubscribersDestroyParams | None = None
    ) -> requests.Response:
        """Unsubscribe the authenticated user from the specified list."""
        return self._post_unchecked("subscribers/destroy.json", params)[1]

    def update(self, params: ListsUpdateParams | None = None) -> requests.Response:
        """Update the specified list."""
        return self._post_unchecked("update.json", params)[1]