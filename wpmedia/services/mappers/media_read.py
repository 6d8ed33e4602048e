# wpmedia/services/mappers/media_read.py
from __future__ import annotations

from wpmedia.domain.entities.media_item import Image, MediaItem, TimedMedia
from wpmedia.services.schemas.media import ImageSizeRead, MediaItemRead


def to_read_schema(item: MediaItem) -> MediaItemRead:
    out = MediaItemRead(
        kind=item.kind,
        id=item.id,
        mime_type=item.mime_type,
        url=item.url,
        title=item.title,
        filename=item.filename,
        link=item.link,
        name=item.name,
        alt=item.alt,
        caption=item.caption,
        created_at=item.created_at,
        modified_at=item.modified_at,
        file_size_bytes=item.file_size_bytes,
    )

    if isinstance(item, Image):
        out.width = item.width
        out.height = item.height
        if item.sizes is not None:
            out.sizes = {name: ImageSizeRead(**size.as_dict()) for name, size in item.sizes.items()}

    if isinstance(item, TimedMedia):
        out.length_formatted = item.length_formatted
        out.meta = item.meta
        out.preview_image_url = item.preview_image_url
        out.preview_thumb_url = item.preview_thumb_url

    return out
