"""Twitter's current configuration (``help/configuration``)."""

from __future__ import annotations

from dataclasses import dataclass, field

import requests

from .api import Endpoint


@dataclass
class SinglePhotoSize:
    height: int = 0
    width: int = 0
    resize: str = ""


@dataclass
class PhotoSizes:
    large: SinglePhotoSize | None = None
    medium: SinglePhotoSize | None = None
    small: SinglePhotoSize | None = None
    thumb: SinglePhotoSize | None = None


def _photo_size(data: dict | None) -> SinglePhotoSize | None:
    if data is None:
        return None
    return SinglePhotoSize(
        height=data.get("h") or 0,
        width=data.get("w") or 0,
        resize=data.get("resize") or "",
    )


@dataclass
class Config:
    characters_reserved_per_media: int = 0
    dm_text_character_limit: int = 0
    max_media_per_upload: int = 0
    photo_size_limit: int = 0
    photo_sizes: PhotoSizes | None = None
    short_url_length: int = 0
    short_url_length_https: int = 0
    non_username_paths: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict | None) -> "Config":
        data = data or {}
        sizes = data.get("photo_sizes")
        return cls(
            characters_reserved_per_media=data.get("characters_reserved_per_media") or 0,
            dm_text_character_limit=data.get("dm_text_character_limit") or 0,
            max_media_per_upload=data.get("max_media_per_upload") or 0,
            photo_size_limit=data.get("photo_size_limit") or 0,
            photo_sizes=None
            if sizes is None
            else PhotoSizes(
                large=_photo_size(sizes.get("large")),
                medium=_photo_size(sizes.get("medium")),
                small=_photo_size(sizes.get("small")),
                thumb=_photo_size(sizes.get("thumb")),
            ),
            short_url_length=data.get("short_url_length") or 0,
            short_url_length_https=data.get("short_url_length_https") or 0,
            non_username_paths=list(data.get("non_username_paths") or []),
        )


class ConfigService:
    """Access to the ``help/`` configuration endpoint."""

    def __init__(self, endpoint: Endpoint) -> None:
        self._endpoint = endpoint.path("help/")

    def get(self) -> tuple[Config, requests.Response]:
        """Fetch the current configuration."""
        data, response = self._endpoint.request("GET", "configuration.json")
        return Config.from_dict(data), response