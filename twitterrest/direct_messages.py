"""Direct Messages: the event-based API and the older message API."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

import requests

from .api import Endpoint
from .entities import (
    Entities,
    ExtendedEntity,
    HashtagEntity,
    MediaEntity,
    MediaSize,
    MentionEntity,
    URLEntity,
)

_RUBY_DATE = "%a %b %d %H:%M:%S %z %Y"
_ENTITIES_KEY = "entitites"


def _url_entity_dict(entity: URLEntity) -> dict[str, Any]:
    return {
        "indices": list(entity.indices),
        "display_url": entity.display_url,
        "expanded_url": entity.expanded_url,
        "url": entity.url,
    }


def _media_size_dict(size: MediaSize) -> dict[str, Any]:
    return {"w": size.width, "h": size.height, "resize": size.resize}


def _media_dict(media: MediaEntity) -> dict[str, Any]:
    return {
        **_url_entity_dict(media),
        "id": media.id,
        "id_str": media.id_str,
        "media_url": media.media_url,
        "media_url_https": media.media_url_https,
        "source_status_id": media.source_status_id,
        "source_status_id_str": media.source_status_id_str,
        "type": media.type,
        "sizes": {
            "thumb": _media_size_dict(media.sizes.thumb),
            "large": _media_size_dict(media.sizes.large),
            "medium": _media_size_dict(media.sizes.medium),
            "small": _media_size_dict(media.sizes.small),
        },
        "video_info": {
            "aspect_ratio": list(media.video_info.aspect_ratio),
            "duration_millis": media.video_info.duration_millis,
            "variants": [
                {"content_type": v.content_type, "bitrate": v.bitrate, "url": v.url}
                for v in media.video_info.variants
            ],
        },
    }


def _hashtag_dict(tag: HashtagEntity) -> dict[str, Any]:
    return {"indices": list(tag.indices), "text": tag.text}


def _mention_dict(mention: MentionEntity) -> dict[str, Any]:
    return {
        "indices": list(mention.indices),
        "id": mention.id,
        "id_str": mention.id_str,
        "name": mention.name,
        "screen_name": mention.screen_name,
    }


def _entities_dict(entities: Entities) -> dict[str, Any]:
    return {
        "hashtags": [_hashtag_dict(h) for h in entities.hashtags],
        "media": [_media_dict(m) for m in entities.media],
        "urls": [_url_entity_dict(u) for u in entities.urls],
        "user_mentions": [_mention_dict(m) for m in entities.user_mentions],
    }


def _decode_media(data: dict | None) -> MediaEntity:
    return ExtendedEntity.from_dict({"media": [data or {}]}).media[0]


@dataclass
class DirectMessageTarget:
    recipient_id: str = ""

    @classmethod
    def from_dict(cls, data: dict | None) -> "DirectMessageTarget":
        return cls(recipient_id=(data or {}).get("recipient_id") or "")

    def to_dict(self) -> dict[str, Any]:
        return {"recipient_id": self.recipient_id}


@dataclass
class DirectMessageQuickReplyOption:
    label: str = ""
    description: str = ""
    metadata: str = ""

    @classmethod
    def from_dict(cls, data: dict | None) -> "DirectMessageQuickReplyOption":
        data = data or {}
        return cls(
            label=data.get("label") or "",
            description=data.get("description") or "",
            metadata=data.get("metadata") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"label": self.label}
        if self.description:
            out["description"] = self.description
        if self.metadata:
            out["metadata"] = self.metadata
        return out


@dataclass
class DirectMessageQuickReply:
    type: str = ""
    options: list[DirectMessageQuickReplyOption] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict | None) -> "DirectMessageQuickReply":
        data = data or {}
        return cls(
            type=data.get("type") or "",
            options=[
                DirectMessageQuickReplyOption.from_dict(o) for o in data.get("options") or []
            ],
        )

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "options": [o.to_dict() for o in self.options]}


@dataclass
class DirectMessageCTA:
    type: str = ""
    label: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: dict | None) -> "DirectMessageCTA":
        data = data or {}
        return cls(
            type=data.get("type") or "",
            label=data.get("label") or "",
            url=data.get("url") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "label": self.label, "url": self.url}


@dataclass
class DirectMessageDataAttachment:
    type: str = ""
    media: MediaEntity = field(default_factory=MediaEntity)

    @classmethod
    def from_dict(cls, data: dict | None) -> "DirectMessageDataAttachment":
        data = data or {}
        return cls(type=data.get("type") or "", media=_decode_media(data.get("media")))

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "media": _media_dict(self.media)}


@dataclass
class DirectMessageData:
    """The contents of a Direct Message event."""

    text: str = ""
    entities: Entities | None = None
    attachment: DirectMessageDataAttachment | None = None
    quick_reply: DirectMessageQuickReply | None = None
    ctas: list[DirectMessageCTA] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict | None) -> "DirectMessageData":
        data = data or {}
        entities = data.get(_ENTITIES_KEY)
        attachment = data.get("attachment")
        quick_reply = data.get("quick_reply")
        return cls(
            text=data.get("text") or "",
            entities=None if entities is None else Entities.from_dict(entities),
            attachment=None
            if attachment is None
            else DirectMessageDataAttachment.from_dict(attachment),
            quick_reply=None
            if quick_reply is None
            else DirectMessageQuickReply.from_dict(quick_reply),
            ctas=[DirectMessageCTA.from_dict(c) for c in data.get("ctas") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"text": self.text}
        if self.entities is not None:
            out[_ENTITIES_KEY] = _entities_dict(self.entities)
        if self.attachment is not None:
            out["attachment"] = self.attachment.to_dict()
        if self.quick_reply is not None:
            out["quick_reply"] = self.quick_reply.to_dict()
        if self.ctas:
            out["ctas"] = [c.to_dict() for c in self.ctas]
        return out


@dataclass
class DirectMessageEventMessage:
    """Message contents along with sender and target recipient."""

    sender_id: str = ""
    target: DirectMessageTarget | None = None
    data: DirectMessageData | None = None

    @classmethod
    def from_dict(cls, data: dict | None) -> "DirectMessageEventMessage":
        data = data or {}
        target = data.get("target")
        message_data = data.get("message_data")
        return cls(
            sender_id=data.get("sender_id") or "",
            target=None if target is None else DirectMessageTarget.from_dict(target),
            data=None if message_data is None else DirectMessageData.from_dict(message_data),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.sender_id:
            out["sender_id"] = self.sender_id
        out["target"] = None if self.target is None else self.target.to_dict()
        out["message_data"] = None if self.data is None else self.data.to_dict()
        return out


@dataclass
class DirectMessageEvent:
    """A single Direct Message sent or received."""

    created_at: str = ""
    id: str = ""
    type: str = ""
    message: DirectMessageEventMessage | None = None

    @classmethod
    def from_dict(cls, data: dict | None) -> "DirectMessageEvent":
        data = data or {}
        message = data.get("message_create")
        return cls(
            created_at=data.get("created_timestamp") or "",
            id=data.get("id") or "",
            type=data.get("type") or "",
            message=None if message is None else DirectMessageEventMessage.from_dict(message),
        )

    def to_dict(self) -> dict[str, Any]:
        """Encode the event as the API expects it in a request body."""
        out: dict[str, Any] = {}
        if self.created_at:
            out["created_timestamp"] = self.created_at
        if self.id:
            out["id"] = self.id
        out["type"] = self.type
        out["message_create"] = None if self.message is None else self.message.to_dict()
        return out


@dataclass
class DirectMessageEvents:
    """A page of Direct Message events."""

    events: list[DirectMessageEvent] = field(default_factory=list)
    next_cursor: str = ""

    @classmethod
    def from_dict(cls, data: dict | None) -> "DirectMessageEvents":
        data = data or {}
        return cls(
            events=[DirectMessageEvent.from_dict(e) for e in data.get("events") or []],
            next_cursor=data.get("next_cursor") or "",
        )


@dataclass
class DirectMessageEventsNewParams:
    event: DirectMessageEvent | None = None


@dataclass
class DirectMessageEventsShowParams:
    id: str | None = None


@dataclass
class DirectMessageEventsListParams:
    cursor: str | None = None
    count: int | None = None


@dataclass
class DirectMessage:
    """A direct message to a single recipient (deprecated API).

    Sender and recipient users are kept as decoded JSON.
    """

    created_at: str = ""
    entities: Entities | None = None
    id: int = 0
    id_str: str = ""
    recipient: dict[str, Any] | None = None
    recipient_id: int = 0
    recipient_screen_name: str = ""
    sender: dict[str, Any] | None = None
    sender_id: int = 0
    sender_screen_name: str = ""
    text: str = ""

    @classmethod
    def from_dict(cls, data: dict | None) -> "DirectMessage":
        data = data or {}
        entities = data.get("entities")
        return cls(
            created_at=data.get("created_at") or "",
            entities=None if entities is None else Entities.from_dict(entities),
            id=data.get("id") or 0,
            id_str=data.get("id_str") or "",
            recipient=data.get("recipient"),
            recipient_id=data.get("recipient_id") or 0,
            recipient_screen_name=data.get("recipient_screen_name") or "",
            sender=data.get("sender"),
            sender_id=data.get("sender_id") or 0,
            sender_screen_name=data.get("sender_screen_name") or "",
            text=data.get("text") or "",
        )

    def created_at_time(self) -> datetime:
        """Parse ``created_at``; raises ValueError if it is not a valid timestamp."""
        return datetime.strptime(self.created_at, _RUBY_DATE)


@dataclass
class DirectMessageGetParams:
    since_id: int | None = None
    max_id: int | None = None
    count: int | None = None
    include_entities: bool | None = None
    skip_status: bool | None = None


@dataclass
class DirectMessageSentParams:
    since_id: int | None = None
    max_id: int | None = None
    count: int | None = None
    page: int | None = None
    include_entities: bool | None = None


@dataclass
class DirectMessageNewParams:
    user_id: int | None = None
    screen_name: str | None = None
    text: str = field(default="", metadata={"omitempty": False})


@dataclass
class DirectMessageDestroyParams:
    id: int | None = None
    include_entities: bool | None = None


def _unwrap_event(data: Any) -> DirectMessageEvent | None:
    event = (data or {}).get("event")
    return None if event is None else DirectMessageEvent.from_dict(event)


class DirectMessageService:
    """Methods under the ``direct_messages/`` endpoints."""

    def __init__(self, endpoint: Endpoint) -> None:
        self._base = endpoint
        self._endpoint = endpoint.path("direct_messages/")

    def events_new(
        self, params: DirectMessageEventsNewParams | None = None
    ) -> tuple[DirectMessageEvent | None, requests.Response]:
        """Publish a new Direct Message event and return it."""
        event = None if params is None else params.event
        body = {"event": None if event is None else event.to_dict()}
        data, response = self._endpoint.request("POST", "events/new.json", json_body=body)
        return _unwrap_event(data), response

    def events_show(
        self, id: str, params: DirectMessageEventsShowParams | None = None
    ) -> tuple[DirectMessageEvent | None, requests.Response]:
        """Return a single Direct Message event by id."""
        query = dataclasses.replace(params or DirectMessageEventsShowParams(), id=id)
        data, response = self._endpoint.request("GET", "events/show.json", query=query)
        return _unwrap_event(data), response

    def events_list(
        self, params: DirectMessageEventsListParams | None = None
    ) -> tuple[DirectMessageEvents, requests.Response]:
        """Return sent and received events from the last 30 days, newest first."""
        data, response = self._endpoint.request("GET", "events/list.json", query=params)
        return DirectMessageEvents.from_dict(data), response

    def events_destroy(self, id: str) -> requests.Response:
        """Delete the Direct Message event with the given id."""
        _, response = self._endpoint.request(
            "DELETE", "events/destroy.json", query=DirectMessageEventsShowParams(id=id)
        )
        return response

    def show(self, id: int) -> tuple[DirectMessage, requests.Response]:
        """Return the requested Direct Message (deprecated API)."""
        data, response = self._endpoint.request("GET", "show.json", query={"id": id})
        return DirectMessage.from_dict(data), response

    def get(
        self, params: DirectMessageGetParams | None = None
    ) -> tuple[list[DirectMessage], requests.Response]:
        """Return recent Direct Messages received (deprecated API)."""
        data, response = self._base.request("GET", "direct_messages.json", query=params)
        return [DirectMessage.from_dict(d) for d in data or []], response

    def sent(
        self, params: DirectMessageSentParams | None = None
    ) -> tuple[list[DirectMessage], requests.Response]:
        """Return recent Direct Messages sent (deprecated API)."""
        data, response = self._endpoint.request("GET", "sent.json", query=params)
        return [DirectMessage.from_dict(d) for d in data or []], response

    def new(
        self, params: DirectMessageNewParams | None = None
    ) -> tuple[DirectMessage, requests.Response]:
        """Send a new Direct Message to a user (deprecated API)."""
        data, response = self._endpoint.request(
            "POST", "new.json", form=params or DirectMessageNewParams()
        )
        return DirectMessage.from_dict(data), response

    def destroy(
        self, id: int, params: DirectMessageDestroyParams | None = None
    ) -> tuple[DirectMessage, requests.Response]:
        """Delete the Direct Message with the given id and return it (deprecated API)."""
        form = dataclasses.replace(params or DirectMessageDestroyParams(), id=id)
        data, response = self._endpoint.request("POST", "destroy.json", form=form)
        return DirectMessage.from_dict(data), response