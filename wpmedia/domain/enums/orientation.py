from __future__ import annotations
from enum import StrEnum

class Orientation(StrEnum):
    portrait = "portrait"
    landscape = "landscape"

    @classmethod
    def for_dimensions(cls, width: int, height: int) -> "Orientation":
        # square counts as landscape
        return cls.portrait if height > width else cls.landscape
