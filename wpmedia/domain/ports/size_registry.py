from __future__ import annotations
from typing import Optional, Protocol
from wpmedia.domain.entities.image_size import RegisteredSize

class SizeRegistryPort(Protocol):
    def lookup(self, name: str) -> Optional[RegisteredSize]: ...
