# wpmedia/services/mappers/image_sizes.py
from __future__ import annotations

from typing import Any, Dict, Sequence

from wpmedia.common.lookup import dig, get_field
from wpmedia.domain.entities.image_size import ImageSize
from wpmedia.domain.ports.size_registry import SizeRegistryPort

# Offered in this order; "full" always comes last.
PRESET_SIZES: Sequence[str] = ("thumbnail", "medium", "large")
FULL_SIZE = "full"


def resolve_sizes(record: Any, registry: SizeRegistryPort) -> Dict[str, ImageSize]:
    """
    Build the ordered size-name -> ImageSize mapping for an image record.

    - No `media_details.sizes` on the record: {} (not an error).
    - Each preset the registry knows gets the registry's dimensions and
      the record's URL for that size, falling back to `source_url`
      only when that URL is absent or null.
      Presets the registry doesn't know are skipped.
    - "full" is always appended with the original asset's dimensions.
    """
    available = dig(record, "media_details", "sizes")
    if not available:
        return {}

    source_url = get_field(record, "source_url") or ""
    sizes: Dict[str, ImageSize] = {}

    for name in PRESET_SIZES:
        registered = registry.lookup(name)
        if not registered:
            continue
        url = dig(available, name, "source_url")
        if url is None:
            url = source_url
        sizes[name] = ImageSize.from_dimensions(registered.width, registered.height, url)

    details = get_field(record, "media_details")
    sizes[FULL_SIZE] = ImageSize.from_dimensions(
        required_dimension(details, "width"),
        required_dimension(details, "height"),
        source_url,
    )
    return sizes


def required_dimension(details: Any, key: str) -> int:
    # width/height are always present for images; a record without them is malformed
    value = get_field(details, key)
    if value is None:
        raise KeyError(f"media_details.{key}")
    return int(value)
