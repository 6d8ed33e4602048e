from __future__ import annotations
from typing import Protocol

class FileSizePort(Protocol):
    # Best effort: must return 0 rather than raise when the size is unknown.
    def probe(self, url: str) -> int: ...
