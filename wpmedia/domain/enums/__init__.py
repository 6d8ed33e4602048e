from wpmedia.domain.enums.media_kind import MediaKind
from wpmedia.domain.enums.orientation import Orientation
__all__ = [
    "MediaKind",
    "Orientation",
]
