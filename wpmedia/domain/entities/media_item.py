# wpmedia/domain/entities/media_item.py
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from datetime import datetime
from typing import Any, ClassVar, Dict, Optional

from wpmedia.domain.entities.image_size import ImageSize
from wpmedia.domain.enums.media_kind import MediaKind


@dataclass
class MediaItem:
    """
    A media library entry as the UI sees it. This is the generic/file
    variant; the subclasses below add per-kind fields.

    Optional fields stay None when the source record had no value, so
    callers can tell "unknown" apart from "empty".

    Invariants that we keep here:
      - id is a non-empty string
      - file_size_bytes is non-negative (0 means unknown)
    """
    kind: ClassVar[MediaKind] = MediaKind.file

    # Identity
    id: str
    mime_type: str

    # Always populated from the record
    url: str = ""
    title: str = ""
    filename: str = ""
    link: str = ""
    name: str = ""

    # Only when present upstream
    alt: Optional[str] = None
    caption: Optional[str] = None
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None

    file_size_bytes: int = 0

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id:
            raise ValueError("id must be a non-empty string")
        if self.file_size_bytes < 0:
            raise ValueError("file_size_bytes must be >= 0")

    def as_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["kind"] = str(self.kind)
        return d


@dataclass
class Document(MediaItem):
    kind: ClassVar[MediaKind] = MediaKind.document


@dataclass
class Image(MediaItem):
    kind: ClassVar[MediaKind] = MediaKind.image

    width: int = 0
    height: int = 0
    # thumbnail/medium/large (when registered), then full
    sizes: Optional[Dict[str, ImageSize]] = None

    def __post_init__(self):
        super().__post_init__()
        if self.width < 0:
            raise ValueError("width must be >= 0")
        if self.height < 0:
            raise ValueError("height must be >= 0")


@dataclass
class TimedMedia(MediaItem):
    """Shared shape of audio and video items."""
    length_formatted: Optional[str] = None
    meta: Optional[Any] = None  # opaque passthrough
    preview_image_url: Optional[str] = None
    preview_thumb_url: Optional[str] = None

    def set_preview(self, url: str) -> None:
        self.preview_image_url = url
        self.preview_thumb_url = url


@dataclass
class Video(TimedMedia):
    kind: ClassVar[MediaKind] = MediaKind.video


@dataclass
class Audio(TimedMedia):
    kind: ClassVar[MediaKind] = MediaKind.audio
