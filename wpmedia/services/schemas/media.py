# wpmedia/services/schemas/media.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from wpmedia.domain.enums.media_kind import MediaKind
from wpmedia.domain.enums.orientation import Orientation


class ImageSizeRead(BaseModel):
    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)
    orientation: Orientation
    url: str

    model_config = ConfigDict(from_attributes=True)


# ---------- Shared base ----------
class MediaItemRead(BaseModel):
    """
    Wire shape handed to the media picker UI. Fields that do not apply to
    the item's kind, or were unknown upstream, stay None; serialize with
    `model_dump(exclude_none=True)` to drop them.
    """
    kind: MediaKind
    id: str
    mime_type: str

    url: str
    title: str
    filename: str
    link: str
    name: str

    alt: Optional[str] = None
    caption: Optional[str] = None
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None

    file_size_bytes: int = Field(0, ge=0)

    # image
    width: Optional[int] = Field(None, ge=0)
    height: Optional[int] = Field(None, ge=0)
    sizes: Optional[Dict[str, ImageSizeRead]] = None

    # audio / video
    length_formatted: Optional[str] = None
    meta: Optional[Any] = None
    preview_image_url: Optional[str] = None
    preview_thumb_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True, use_enum_values=False)
