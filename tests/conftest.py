# tests/conftest.py
from __future__ import annotations

import copy
from typing import Dict, List, Optional

import pytest

from wpmedia.common import settings as settings_mod
from wpmedia.domain.entities.image_size import RegisteredSize
from wpmedia.services.mappers.media_item import MediaItemFactory


class FakeSizeRegistry:
    def __init__(self, sizes: Optional[Dict[str, RegisteredSize]] = None):
        self.sizes = dict(sizes or {})

    def lookup(self, name: str) -> Optional[RegisteredSize]:
        return self.sizes.get(name)


class FakeFileSize:
    """Records every probed URL and answers with a fixed size."""

    def __init__(self, size: int = 0):
        self.size = size
        self.calls: List[str] = []

    def probe(self, url: str) -> int:
        self.calls.append(url)
        return self.size


WP_SIZES = {
    "thumbnail": RegisteredSize(width=150, height=150),
    "medium": RegisteredSize(width=300, height=200),
    "large": RegisteredSize(width=768, height=1024),
}

_IMAGE_RECORD = {
    "id": 42,
    "date": "2024-03-01T10:15:00",
    "modified": "2024-03-02T08:00:00",
    "link": "https://example.com/?attachment_id=42",
    "title": {"rendered": "Sunset"},
    "caption": {"rendered": "<p>Over the bay</p>"},
    "alt_text": "A red sunset",
    "mime_type": "image/jpeg",
    "source_url": "https://example.com/wp-content/uploads/2024/03/photo.jpg",
    "media_details": {
        "width": 1920,
        "height": 1080,
        "sizes": {
            "medium": {"source_url": "https://example.com/wp-content/uploads/2024/03/photo-300x169.jpg"},
            "large": {"source_url": "https://example.com/wp-content/uploads/2024/03/photo-1024x576.jpg"},
        },
    },
    "meta": [],
}

_VIDEO_RECORD = {
    "id": "7",
    "date": "2024-01-05T12:00:00",
    "modified": "",
    "link": "https://example.com/clip/",
    "title": {"rendered": "Clip"},
    "caption": {"rendered": ""},
    "alt_text": "",
    "mime_type": "video/mp4",
    "source_url": "https://example.com/wp-content/uploads/clip.mp4",
    "media_details": {"length_formatted": "1:02", "width": 640, "height": 360},
    "meta": {"artist": "Someone"},
    "_embedded": {
        "wp:featuredmedia": [
            {"id": 8, "source_url": "https://example.com/wp-content/uploads/clip-poster.jpg"},
        ],
    },
}


@pytest.fixture()
def image_record() -> dict:
    return copy.deepcopy(_IMAGE_RECORD)


@pytest.fixture()
def video_record() -> dict:
    return copy.deepcopy(_VIDEO_RECORD)


@pytest.fixture()
def size_registry() -> FakeSizeRegistry:
    return FakeSizeRegistry(WP_SIZES)


@pytest.fixture()
def file_size() -> FakeFileSize:
    return FakeFileSize(size=2048)


@pytest.fixture()
def factory(size_registry, file_size) -> MediaItemFactory:
    return MediaItemFactory(size_registry=size_registry, file_size=file_size)


@pytest.fixture(autouse=True)
def _fresh_settings():
    settings_mod.get_settings.cache_clear()
    yield
    settings_mod.get_settings.cache_clear()


@pytest.fixture()
def make_size_registry():
    return FakeSizeRegistry


@pytest.fixture()
def make_file_size():
    return FakeFileSize
