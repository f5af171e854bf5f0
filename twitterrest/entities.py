"""Entities: metadata parsed out of tweet and user text."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Callable


class Indices(tuple):
    """Start (inclusive) and end (exclusive) offsets within text."""

    __slots__ = ()

    def __new__(cls, start: int = 0, end: int = 0) -> "Indices":
        return super().__new__(cls, (start, end))

    def __repr__(self) -> str:
        return f"Indices({self[0]}, {self[1]})"

    def start(self) -> int:
        """Index at which the entity starts, inclusive."""
        return self[0]

    def end(self) -> int:
        """Index at which the entity ends, exclusive."""
        return self[1]


@dataclass
class HashtagEntity:
    indices: Indices = field(default_factory=Indices)
    text: str = ""


@dataclass
class URLEntity:
    indices: Indices = field(default_factory=Indices)
    display_url: str = ""
    expanded_url: str = ""
    url: str = ""


@dataclass
class MediaSize:
    width: int = 0
    height: int = 0
    resize: str = ""


@dataclass
class MediaSizes:
    thumb: MediaSize = field(default_factory=MediaSize)
    large: MediaSize = field(default_factory=MediaSize)
    medium: MediaSize = field(default_factory=MediaSize)
    small: MediaSize = field(default_factory=MediaSize)


@dataclass
class VideoVariant:
    content_type: str = ""
    bitrate: int = 0
    url: str = ""


@dataclass
class VideoInfo:
    aspect_ratio: tuple[int, int] = (0, 0)
    duration_millis: int = 0
    variants: list[VideoVariant] = field(default_factory=list)


@dataclass
class MediaEntity(URLEntity):
    id: int = 0
    id_str: str = ""
    media_url: str = ""
    media_url_https: str = ""
    source_status_id: int = 0
    source_status_id_str: str = ""
    type: str = ""
    sizes: MediaSizes = field(default_factory=MediaSizes)
    video_info: VideoInfo = field(default_factory=VideoInfo)


@dataclass
class MentionEntity:
    indices: Indices = field(default_factory=Indices)
    id: int = 0
    id_str: str = ""
    name: str = ""
    screen_name: str = ""


_Parse = Callable[[Any], Any]


def _build(cls: type, data: dict | None, keys: dict[str, str], convert: dict[str, _Parse]) -> Any:
    """Fill a dataclass from decoded JSON; empty scalars keep their defaults."""
    data = data or {}
    values = {}
    for spec in fields(cls):
        raw = data.get(keys.get(spec.name, spec.name))
        if spec.name in convert:
            values[spec.name] = convert[spec.name](raw)
        elif raw:
            values[spec.name] = raw
    return cls(**values)


def _parser(cls: type, keys: dict[str, str] | None = None, **convert: _Parse) -> _Parse:
    return lambda data: _build(cls, data, keys or {}, convert)


def _many(parse: _Parse) -> _Parse:
    return lambda raw: [parse(item) for item in raw or []]


def _indices(value: Any) -> Indices:
    return Indices(*value) if value else Indices()


def _pair(value: Any) -> tuple[int, int]:
    ratio = value or (0, 0)
    return (ratio[0], ratio[1])


_media_size = _parser(MediaSize, {"width": "w", "height": "h"})
_media_sizes = _parser(
    MediaSizes, **dict.fromkeys(("thumb", "large", "medium", "small"), _media_size)
)
_video_info = _parser(VideoInfo, aspect_ratio=_pair, variants=_many(_parser(VideoVariant)))
_media = _parser(MediaEntity, indices=_indices, sizes=_media_sizes, video_info=_video_info)

_ENTITY_PARSERS: dict[str, _Parse] = {
    "hashtags": _many(_parser(HashtagEntity, indices=_indices)),
    "media": _many(_media),
    "urls": _many(_parser(URLEntity, indices=_indices)),
    "user_mentions": _many(_parser(MentionEntity, indices=_indices)),
}


@dataclass
class Entities:
    """Hashtags, media, URLs and mentions parsed from a piece of text."""

    hashtags: list[HashtagEntity] = field(default_factory=list)
    media: list[MediaEntity] = field(default_factory=list)
    urls: list[URLEntity] = field(default_factory=list)
    user_mentions: list[MentionEntity] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict | None) -> "Entities":
        return _build(cls, data, {}, _ENTITY_PARSERS)


@dataclass
class UserEntities:
    """Entities parsed from a user's url and description fields."""

    url: Entities = field(default_factory=Entities)
    description: Entities = field(default_factory=Entities)

    @classmethod
    def from_dict(cls, data: dict | None) -> "UserEntities":
        return _build(cls, data, {}, dict.fromkeys(("url", "description"), Entities.from_dict))


@dataclass
class ExtendedEntity:
    """Media information attached to a tweet."""

    media: list[MediaEntity] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict | None) -> "ExtendedEntity":
        return _build(cls, data, {}, {"media": _many(_media)})