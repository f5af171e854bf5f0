"""The Twitter REST API client, grouping every service behind one object.

Authentication is up to the caller: hand in a ``requests.Session`` that
signs its requests with OAuth1 user credentials or an OAuth2 application
token, and every service call is made through it.
"""

from __future__ import annotations

import requests

from .accounts import AccountService
from .api import API_BASE, Endpoint
from .config import ConfigService
from .direct_messages import DirectMessageService
from .favorites import FavoriteService
from .followers import FollowerService
from .friends import FriendService
from .friendships import FriendshipService
from .lists import ListsService


class Client:
    """Access to the Twitter API services through one HTTP session.

    Required parameters are positional; optional ones go in a params
    dataclass, or are left out.
    """

    def __init__(self, session: requests.Session | None = None, base_url: str = API_BASE) -> None:
        endpoint = Endpoint(session, base_url)
        self.session = endpoint.session
        self.base_url = endpoint.base_url
        self.accounts = AccountService(endpoint)
        self.config = ConfigService(endpoint)
        self.direct_messages = DirectMessageService(endpoint)
        self.favorites = FavoriteService(endpoint)
        self.followers = FollowerService(endpoint)
        self.friends = FriendService(endpoint)
        self.friendships = FriendshipService(endpoint)
        self.lists = ListsService(endpoint)