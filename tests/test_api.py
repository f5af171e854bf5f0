from dataclasses import dataclass, field

import pytest
import requests
import responses
from responses import matchers

from twitterrest.api import API_BASE, Endpoint, encode_params
from twitterrest.errors import APIError, ErrorDetail


@dataclass
class _Params:
    user_id: int | None = None
    screen_name: str | None = None
    count: int = 0
    skip_status: bool | None = None
    include_entities: bool | None = None


@dataclass
class _RenamedParams:
    include_retweets: bool | None = field(default=None, metadata={"name": "include_rts"})
    text: str = field(default="", metadata={"omitempty": False})


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def endpoint():
    return Endpoint(requests.Session())


def test_encode_params_drops_unset_and_zero_values():
    encoded = encode_params(_Params(user_id=623265148, count=0, skip_status=True, include_entities=False))
    assert encoded == {"user_id": "623265148", "skip_status": "true", "include_entities": "false"}


def test_encode_params_metadata_rename_and_keep_empty():
    assert encode_params(_RenamedParams(include_retweets=True)) == {"include_rts": "true", "text": ""}


def test_encode_params_none_and_mapping():
    assert encode_params(None) == {}
    assert encode_params({"id": 12345, "cursor": None, "slug": ""}) == {"id": "12345"}


def test_encode_params_rejects_other_types():
    with pytest.raises(TypeError):
        encode_params(42)


def test_path_resolves_against_base(endpoint):
    sub = endpoint.path("account/")
    assert sub.base_url == API_BASE + "account/"
    assert sub.session is endpoint.session


def test_request_decodes_success(mocked, endpoint):
    mocked.add(
        responses.GET,
        API_BASE + "account/verify_credentials.json",
        json={"name": "Dalton Hubble", "id": 623265148},
        match=[matchers.query_param_matcher({"include_email": "true"})],
    )
    data, resp = endpoint.path("account/").request(
        "GET", "verify_credentials.json", query={"include_email": True}
    )
    assert data == {"name": "Dalton Hubble", "id": 623265148}
    assert resp.status_code == 200


def test_request_raises_api_error(mocked, endpoint):
    mocked.add(
        responses.DELETE,
        API_BASE + "direct_messages/events/destroy.json",
        status=404,
        json={"errors": [{"code": 34, "message": "Sorry, that page does not exist"}]},
    )
    with pytest.raises(APIError) as info:
        endpoint.request("DELETE", "direct_messages/events/destroy.json")
    assert info.value.errors == [ErrorDetail(message="Sorry, that page does not exist", code=34)]
    assert info.value.response.status_code == 404


def test_request_failure_without_details_returns_none(mocked, endpoint):
    mocked.add(responses.GET, API_BASE + "help/configuration.json", status=500, json={})
    data, resp = endpoint.request("GET", "help/configuration.json")
    assert data is None
    assert resp.status_code == 500


def test_request_no_content(mocked, endpoint):
    mocked.add(responses.DELETE, API_BASE + "x.json", status=204)
    data, resp = endpoint.request("DELETE", "x.json")
    assert data is None
    assert resp.status_code == 204


def test_request_invalid_json_raises(mocked, endpoint):
    mocked.add(responses.GET, API_BASE + "x.json", body="not json")
    with pytest.raises(ValueError):
        endpoint.request("GET", "x.json")


def test_request_sends_form(mocked, endpoint):
    mocked.add(
        responses.POST,
        API_BASE + "lists/create.json",
        json={"slug": "goonies"},
        match=[matchers.urlencoded_params_matcher({"name": "Goonies", "mode": "public"})],
    )
    data, _ = endpoint.request("POST", "lists/create.json", form={"name": "Goonies", "mode": "public"})
    assert data == {"slug": "goonies"}


def test_request_sends_json(mocked, endpoint):
    body = {"event": {"type": "message_create"}}
    mocked.add(
        responses.POST,
        API_BASE + "direct_messages/events/new.json",
        json=body,
        match=[matchers.json_params_matcher(body)],
    )
    data, _ = endpoint.request("POST", "direct_messages/events/new.json", json_body=body)
    assert data == body