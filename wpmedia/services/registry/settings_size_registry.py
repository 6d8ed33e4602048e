# wpmedia/services/registry/settings_size_registry.py
from __future__ import annotations

from typing import Mapping, Optional

from wpmedia.common.settings import ImageSizeConfig, get_settings
from wpmedia.domain.entities.image_size import RegisteredSize
from wpmedia.domain.ports.size_registry import SizeRegistryPort


class SettingsSizeRegistry(SizeRegistryPort):
    """
    Size registry backed by configuration (IMAGE_SIZES), standing in for
    the presets registered on the remote site.
    """

    def __init__(self, sizes: Optional[Mapping[str, ImageSizeConfig | RegisteredSize | Mapping]] = None):
        raw = get_settings().image_sizes if sizes is None else sizes
        self._sizes = {name: _to_registered(size) for name, size in raw.items()}

    def lookup(self, name: str) -> Optional[RegisteredSize]:
        return self._sizes.get(name)

    def names(self) -> list[str]:
        return list(self._sizes)


def _to_registered(size) -> RegisteredSize:
    if isinstance(size, RegisteredSize):
        return size
    if isinstance(size, Mapping):
        size = ImageSizeConfig(**size)
    return RegisteredSize(width=int(size.width), height=int(size.height))
