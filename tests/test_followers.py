import pytest
import requests
import responses
from responses import matchers

from twitterrest.api import Endpoint
from twitterrest.followers import (
    FollowerIDParams,
    FollowerIDs,
    FollowerListParams,
    Followers,
    FollowerService,
)

BASE = "https://api.twitter.com/1.1/followers/"
NEXT, PREVIOUS = 1516837838944119498, -1516924983503961435
CURSORS = {
    f"{side}_cursor{suffix}": str(value) if suffix else value
    for side, value in (("next", NEXT), ("previous", PREVIOUS))
    for suffix in ("", "_str")
}
FOLLOWER_IDS = [178082406, 3318241001, 1318020818, 191714329, 376703838]
CURSOR = 1516933260114270762


@pytest.mark.parametrize(
    "name, query, params, body, expected",
    [
        (
            "ids",
            {"user_id": "623265148", "count": "5", "cursor": str(CURSOR)},
            FollowerIDParams(user_id=623265148, count=5, cursor=CURSOR),
            {"ids": FOLLOWER_IDS, **CURSORS},
            FollowerIDs(ids=FOLLOWER_IDS, **CURSORS),
        ),
        (
            "list",
            {
                "screen_name": "example_user",
                "count": "5",
                "cursor": str(CURSOR),
                "skip_status": "true",
                "include_user_entities": "false",
            },
            FollowerListParams(
                screen_name="example_user",
                count=5,
                cursor=CURSOR,
                skip_status=True,
                include_user_entities=False,
            ),
            {"users": [{"id": 123}], **CURSORS},
            Followers(users=[{"id": 123}], **CURSORS),
        ),
    ],
)
def test_follower_calls(name, query, params, body, expected):
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET, f"{BASE}{name}.json", json=body, match=[matchers.query_param_matcher(query)]
        )
        service = FollowerService(Endpoint(requests.Session()))
        result, _ = getattr(service, name)(params)
    assert result == expected


def test_missing_fields_keep_defaults():
    assert Followers.from_dict({"users": None, "next_cursor": 7}) == Followers(next_cursor=7)