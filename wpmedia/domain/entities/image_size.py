# wpmedia/domain/entities/image_size.py
from __future__ import annotations

from dataclasses import dataclass, asdict

from wpmedia.domain.enums.orientation import Orientation


@dataclass(frozen=True)
class RegisteredSize:
    """Pixel box the host environment registers for a named size preset."""
    width: int
    height: int


@dataclass(frozen=True)
class ImageSize:
    """
    One rendition of an image as offered to the UI: the preset's
    dimensions, derived orientation and the URL to fetch it from.
    """
    width: int
    height: int
    orientation: Orientation
    url: str

    def __post_init__(self):
        if self.width < 0:
            raise ValueError("width must be >= 0")
        if self.height < 0:
            raise ValueError("height must be >= 0")

    @classmethod
    def from_dimensions(cls, width: int, height: int, url: str) -> "ImageSize":
        return cls(
            width=width,
            height=height,
            orientation=Orientation.for_dimensions(width, height),
            url=url,
        )

    def as_dict(self):
        d = asdict(self)
        d["orientation"] = str(self.orientation)
        return d
