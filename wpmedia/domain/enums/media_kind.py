from __future__ import annotations
from enum import StrEnum

class MediaKind(StrEnum):
    image = "image"
    video = "video"
    audio = "audio"
    document = "document"
    file = "file"
