import pytest
import requests
import responses
from responses import matchers

from twitterrest.api import Endpoint
from twitterrest.friends import (
    FriendIDParams,
    FriendIDs,
    FriendListParams,
    Friends,
    FriendService,
)

ROOT = "https://api.twitter.com/1.1/friends/"
PAGE = dict(
    next_cursor=1516837838944119498,
    next_cursor_str="1516837838944119498",
    previous_cursor=-1516924983503961435,
    previous_cursor_str="-1516924983503961435",
)
START = 1516933260114270762


@pytest.fixture
def friends_api():
    with responses.RequestsMock() as rsps:
        yield rsps, FriendService(Endpoint(requests.Session()))


def _expect(rsps, name, body, query):
    rsps.add(responses.GET, f"{ROOT}{name}.json", json=body, match=[matchers.query_param_matcher(query)])


def test_ids(friends_api):
    rsps, api = friends_api
    friend_ids = [178082406, 3318241001, 1318020818, 191714329, 376703838]
    _expect(rsps, "ids", {"ids": friend_ids, **PAGE}, {"user_id": "623265148", "count": "5", "cursor": str(START)})
    page, _ = api.ids(FriendIDParams(user_id=623265148, count=5, cursor=START))
    assert page == FriendIDs(ids=friend_ids, **PAGE)


def test_list(friends_api):
    rsps, api = friends_api
    _expect(
        rsps,
        "list",
        {"users": [{"id": 123}], **PAGE},
        {
            "screen_name": "example_user",
            "count": "5",
            "cursor": str(START),
            "skip_status": "true",
            "include_user_entities": "false",
        },
    )
    params = FriendListParams(
        screen_name="example_user", count=5, cursor=START, skip_status=True, include_user_entities=False
    )
    page, _ = api.list(params)
    assert page == Friends(users=[{"id": 123}], **PAGE)


def test_empty_page_keeps_defaults():
    assert FriendIDs.from_dict(None) == FriendIDs()