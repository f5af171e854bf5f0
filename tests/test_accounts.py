import pytest
import requests
import responses
from responses import matchers

from twitterrest.accounts import AccountService, AccountVerifyParams
from twitterrest.api import Endpoint
from twitterrest.errors import APIError

VERIFY_URL = "https://api.twitter.com/1.1/account/verify_credentials.json"


@pytest.fixture
def verify():
    with responses.RequestsMock() as mock:
        yield mock, AccountService(Endpoint(requests.Session())).verify_credentials


def test_verify_credentials(verify):
    mock, call = verify
    mock.add(
        responses.GET,
        VERIFY_URL,
        json={"name": "Example User", "id": 623265148},
        match=[matchers.query_param_matcher({"include_entities": "false", "include_email": "true"})],
    )
    user, resp = call(AccountVerifyParams(include_entities=False, include_email=True))
    assert (user, resp.status_code) == ({"name": "Example User", "id": 623265148}, 200)


def test_verify_credentials_invalid(verify):
    mock, call = verify
    mock.add(
        responses.GET,
        VERIFY_URL,
        status=401,
        json={"errors": [{"code": 89, "message": "Invalid or expired token."}]},
    )
    with pytest.raises(APIError) as info:
        call()
    assert info.value.errors[0].code == 89