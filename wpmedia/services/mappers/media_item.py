# wpmedia/services/mappers/media_item.py
from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from wpmedia.common.dates import parse_timestamp
from wpmedia.common.logging import get_logger
from wpmedia.common.lookup import dig, get_field, rendered
from wpmedia.common.urls import url_basename
from wpmedia.domain.entities.media_item import Audio, Document, Image, MediaItem, TimedMedia, Video
from wpmedia.domain.enums.media_kind import MediaKind
from wpmedia.domain.policies.variant_selector import select_variant
from wpmedia.domain.ports.file_size import FileSizePort
from wpmedia.domain.ports.size_registry import SizeRegistryPort
from wpmedia.services.mappers.image_sizes import required_dimension, resolve_sizes

logger = get_logger(__name__)

Builder = Callable[[str, str, Any], MediaItem]


def featured_media_url(record: Any) -> str:
    """
    URL of the record's embedded featured media
    (`_embedded["wp:featuredmedia"][0].source_url`), or "" when any link
    of that chain is missing.
    """
    url = dig(record, "_embedded", "wp:featuredmedia", 0, "source_url", default="")
    return str(url)


class MediaItemFactory:
    """
    Turns one raw media record from the WordPress REST API
    (`/wp/v2/media`, optionally with `_embed`) into a typed MediaItem.

    Collaborators are injected so the factory stays side-effect free in
    tests; by default it uses the configured size registry and the HTTP
    HEAD probe.
    """

    def __init__(
        self,
        size_registry: Optional[SizeRegistryPort] = None,
        file_size: Optional[FileSizePort] = None,
    ):
        if size_registry is None:
            from wpmedia.services.registry.settings_size_registry import SettingsSizeRegistry
            size_registry = SettingsSizeRegistry()
        if file_size is None:
            from wpmedia.services.probe.http_file_size import HttpFileSizeProbe
            file_size = HttpFileSizeProbe()

        self.size_registry = size_registry
        self.file_size = file_size
        self._builders: Dict[MediaKind, Builder] = {
            MediaKind.image: self.create_image,
            MediaKind.video: self.create_video,
            MediaKind.audio: self.create_audio,
            MediaKind.document: self.create_document,
            MediaKind.file: self.create_file,
        }

    # ---- Public API -----------------------------------------------------------
    def create(self, record: Any) -> MediaItem:
        """Build the typed item, overlay the common fields, probe the size."""
        item_id = _normalize_id(get_field(record, "id"))
        mime_type = str(get_field(record, "mime_type") or "")

        kind = select_variant(mime_type)
        logger.debug("Mapping media record %s (%s) as %s", item_id, mime_type or "-", kind)

        item = self._builders[kind](item_id, mime_type, record)
        self.apply_common_fields(item, record)
        return item

    def create_image(self, item_id: str, mime_type: str, record: Any) -> Image:
        details = get_field(record, "media_details")
        item = Image(
            id=item_id,
            mime_type=mime_type,
            width=required_dimension(details, "width"),
            height=required_dimension(details, "height"),
        )

        sizes = resolve_sizes(record, self.size_registry)
        if sizes:
            item.sizes = sizes
        return item

    def create_video(self, item_id: str, mime_type: str, record: Any) -> Video:
        return self._fill_timed(Video(id=item_id, mime_type=mime_type), record)

    def create_audio(self, item_id: str, mime_type: str, record: Any) -> Audio:
        return self._fill_timed(Audio(id=item_id, mime_type=mime_type), record)

    def create_document(self, item_id: str, mime_type: str, record: Any) -> Document:
        return Document(id=item_id, mime_type=mime_type)

    def create_file(self, item_id: str, mime_type: str, record: Any) -> MediaItem:
        return MediaItem(id=item_id, mime_type=mime_type)

    def apply_common_fields(self, item: MediaItem, record: Any) -> MediaItem:
        """
        Fields every kind shares. Optional ones are only set when the record
        has a non-empty value. The size probe runs last.
        """
        source_url = str(get_field(record, "source_url") or "")

        item.url = source_url
        item.title = rendered(get_field(record, "title"))
        item.filename = url_basename(source_url)
        item.link = str(get_field(record, "link") or "")
        item.name = item.id

        alt = get_field(record, "alt_text")
        if alt:
            item.alt = str(alt)

        caption = rendered(get_field(record, "caption"))
        if caption:
            item.caption = caption

        created_at = parse_timestamp(get_field(record, "date"))
        if created_at:
            item.created_at = created_at

        modified_at = parse_timestamp(get_field(record, "modified"))
        if modified_at:
            item.modified_at = modified_at

        item.file_size_bytes = self._probe_size(source_url)
        return item

    # ---- Helpers --------------------------------------------------------------
    def _fill_timed(self, item: TimedMedia, record: Any) -> TimedMedia:
        length = dig(record, "media_details", "length_formatted")
        if length:
            item.length_formatted = str(length)

        meta = get_field(record, "meta")
        if meta:
            item.meta = meta

        preview = featured_media_url(record)
        if preview:
            item.set_preview(preview)
        return item

    def _probe_size(self, url: str) -> int:
        try:
            size = int(self.file_size.probe(url))
        except Exception as e:  # size stays unknown; never fails the record
            logger.warning("File size probe raised for %s: %s", url, e)
            return 0
        return size if size > 0 else 0


def _normalize_id(raw: Any) -> str:
    if raw is None or raw == "":
        raise ValueError("media record has no id")
    return str(raw)
