from wpmedia.services.schemas.media import ImageSizeRead, MediaItemRead

__all__ = ["ImageSizeRead", "MediaItemRead"]
