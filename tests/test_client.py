import pytest
import requests
import responses
from responses import matchers

from twitterrest.accounts import AccountVerifyParams
from twitterrest.client import Client
from twitterrest.errors import APIError, ErrorDetail
from twitterrest.lists import ListsShowParams, TwitterList

DEFAULT_BASE = "https://api.twitter.com/1.1/"


@pytest.fixture
def rsps():
    with responses.RequestsMock() as mock:
        yield mock


def test_uses_given_session():
    session = requests.Session()
    client = Client(session)
    assert client.session is session
    assert client.base_url == DEFAULT_BASE


def test_accounts_verify_credentials(rsps):
    rsps.add(
        responses.GET,
        DEFAULT_BASE + "account/verify_credentials.json",
        json={"name": "Dalton Hubble", "id": 623265148},
        match=[
            matchers.query_param_matcher({"include_entities": "false", "include_email": "true"})
        ],
    )
    client = Client(requests.Session())
    user, _ = client.accounts.verify_credentials(
        AccountVerifyParams(include_entities=False, include_email=True)
    )
    assert user == {"name": "Dalton Hubble", "id": 623265148}


def test_custom_base_url_routes_services(rsps):
    base = "http://localhost/1.1/"
    rsps.add(
        responses.GET,
        base + "lists/show.json",
        json={"full_name": "@twitter/team", "member_count": 643},
        match=[matchers.query_param_matcher({"slug": "team", "owner_screen_name": "twitter"})],
    )
    client = Client(requests.Session(), base)
    twitter_list, response = client.lists.show(
        ListsShowParams(slug="team", owner_screen_name="twitter")
    )
    assert twitter_list == TwitterList(full_name="@twitter/team", member_count=643)
    assert response.url.startswith(base)


def test_config_get(rsps):
    rsps.add(
        responses.GET,
        DEFAULT_BASE + "help/configuration.json",
        json={"short_url_length": 23, "non_username_paths": ["about"]},
    )
    config, _ = Client().config.get()
    assert config.short_url_length == 23
    assert config.non_username_paths == ["about"]


def test_direct_messages_error_is_raised(rsps):
    rsps.add(
        responses.DELETE,
        DEFAULT_BASE + "direct_messages/events/destroy.json",
        status=404,
        json={"errors": [{"code": 34, "message": "Sorry, that page does not exist"}]},
    )
    client = Client(requests.Session())
    with pytest.raises(APIError) as excinfo:
        client.direct_messages.events_destroy("1063573894173323269")
    assert excinfo.value == APIError([ErrorDetail(code=34, message="Sorry, that page does not exist")])


def test_friendships_show_through_client(rsps):
    rsps.add(
        responses.GET,
        DEFAULT_BASE + "friendships/show.json",
        json={
            "relationship": {
                "source": {"id": 8649302, "screen_name": "foo", "muting": True},
                "target": {"id": 12148, "screen_name": "bar", "following": True},
            }
        },
    )
    relationship, _ = Client(requests.Session()).friendships.show()
    assert relationship.source.screen_name == "foo"
    assert relationship.target.following is True