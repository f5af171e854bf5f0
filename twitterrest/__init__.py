"""Client for the Twitter REST API v1.1: accounts, configuration, favorites,
followers, friends, friendships, direct messages and lists."""

__version__ = "0.1.0"