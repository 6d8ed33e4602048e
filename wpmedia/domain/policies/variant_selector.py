# wpmedia/domain/policies/variant_selector.py
from __future__ import annotations

from typing import Dict, Optional

from wpmedia.domain.enums.media_kind import MediaKind

# Keyed on the MIME top-level type. WordPress reports non-image uploads
# with media_type "file", so the mime_type prefix is what we dispatch on.
_PREFIX_TO_KIND: Dict[str, MediaKind] = {
    "image": MediaKind.image,
    "video": MediaKind.video,
    "audio": MediaKind.audio,
    "application": MediaKind.document,
}


def mime_prefix(mime_type: Optional[str]) -> str:
    """Text before the first "/" (the whole value when there is none)."""
    if not mime_type:
        return ""
    return str(mime_type).split("/", 1)[0]


def select_variant(mime_type: Optional[str]) -> MediaKind:
    """
    Total mapping from a MIME type string to the item kind to build.
    Unknown prefixes, slash-less values like "file" and "" all give
    MediaKind.file.
    """
    return _PREFIX_TO_KIND.get(mime_prefix(mime_type), MediaKind.file)
