# twitterrest

A small client for the Twitter REST API v1.1, built on `requests`. It covers
account verification, the configuration endpoint, favorites (likes),
followers, friends, friendships, direct messages and lists.

## Installation

```
pip install twitterrest
```

## Authentication

`twitterrest.client.Client` takes any `requests.Session` (or creates a plain
one when none is given). Authorizing requests is left to that session: attach
an OAuth1 signer for user context, or an application-only bearer token.

```python
import requests

from twitterrest.client import Client

session = requests.Session()
session.headers["Authorization"] = "Bearer token"

client = Client(session)
```

`Client(session, base_url)` also accepts another base URL, which defaults to
`https://api.twitter.com/1.1/`. The client exposes the services `accounts`,
`config`, `direct_messages`, `favorites`, `followers`, `friends`,
`friendships` and `lists`.

## Usage

Required values are positional arguments; optional ones go in a params
dataclass, or are left out. Parameters that are `None`, empty strings or zero
are not sent. Every call returns a pair of the result and the
`requests.Response`.

```python
from twitterrest.accounts import AccountVerifyParams
from twitterrest.followers import FollowerListParams
from twitterrest.lists import ListsCreateParams

user, response = client.accounts.verify_credentials(
    AccountVerifyParams(skip_status=True, include_email=True)
)
print(user["screen_name"])

page, _ = client.followers.list(FollowerListParams(screen_name="example", count=5))
for follower in page.users:
    print(follower["screen_name"])
print(page.next_cursor)

new_list, _ = client.lists.create("Goonies", ListsCreateParams(mode="public"))
print(new_list.slug)
```

Users and tweets come back as decoded JSON dictionaries. Cursored pages
(`FollowerIDs`, `Followers`, `FriendIDs`, `Friends`, `Members`, `Membership`,
`Ownership`, `Subscribers`, `Subscribed`), lists (`TwitterList`),
relationships (`Relationship`), the configuration (`Config`) and direct
messages are dataclasses.

Direct message events:

```python
from twitterrest.direct_messages import DirectMessageEventsListParams

events, _ = client.direct_messages.events_list(DirectMessageEventsListParams(count=10))
for event in events.events:
    print(event.message.data.text)
```

## Errors

When Twitter answers with a non-2xx status and an `errors` body, the call
raises `twitterrest.errors.APIError`. Its string form is
`twitter: <code> <message>`, taken from the first error; its `errors`
attribute holds every `ErrorDetail` and its `response` attribute the HTTP
response. A non-2xx answer without error details raises nothing and yields an
empty result. A body that is not valid JSON raises `ValueError`, and
transport failures come through as the exceptions `requests` raises.

The list calls `members_create`, `members_create_all`, `members_destroy`,
`members_destroy_all`, `subscribers_create`, `subscribers_destroy` and
`update` do not raise `APIError`; check the returned response instead.

## Back-off

`twitterrest.backoffs.ExponentialBackOff` is a randomized exponential
back-off: `next_backoff()` returns the next wait as a `timedelta`, or `None`
once `max_elapsed_time` has passed, and `reset()` starts over.
`new_exponential_backoff()` starts at 5 seconds and caps at 320 seconds;
`new_aggressive_exponential_backoff()` starts at 1 minute and caps at 16
minutes. Both double the delay each time.

## What it does not do

There is no streaming API client, no timeline, status, search or user lookup
service, and no command-line tool. The package makes no OAuth handshakes of
its own.

## Running the tests

```
pip install -e ".[test]"
pytest
```