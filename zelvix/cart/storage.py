"""
Key-value slots the cart can be persisted to
Each storage holds one serialized payload; the cart store owns the format
"""

from pathlib import Path
from typing import Optional, Protocol
import logging
import os

logger = logging.getLogger(__name__)

class CartStorage(Protocol):
    """Capability interface for a single persistent slot"""

    def load(self) -> Optional[bytes]:
        ...

    def save(self, payload: bytes) -> None:
        ...

    def clear(self) -> None:
        ...

class NullCartStorage:
    """Used when nothing persistent is available; every read is empty"""

    def load(self) -> Optional[bytes]:
        return None

    def save(self, payload: bytes) -> None:
        pass

    def clear(self) -> None:
        pass

class MemoryCartStorage:
    """Process-local slot, handy for tests and short-lived sessions"""

    def __init__(self, payload: Optional[bytes] = None):
        self._payload = payload

    def load(self) -> Optional[bytes]:
        return self._payload

    def save(self, payload: bytes) -> None:
        self._payload = payload

    def clear(self) -> None:
        self._payload = None

    @property
    def is_empty(self) -> bool:
        return self._payload is None

class FileCartStorage:
    """Slot backed by one JSON file on disk"""

    def __init__(self, directory, key: str):
        self.path = Path(directory) / f"{key}.json"

    def load(self) -> Optional[bytes]:
        try:
            return self.path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning(f"Cart slot {self.path} unreadable: {e}")
            return None

    def save(self, payload: bytes) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(".tmp")
            tmp_path.write_bytes(payload)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.warning(f"Cart slot {self.path} not writable: {e}")

    def clear(self) -> None:
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Cart slot {self.path} could not be removed: {e}")

    @property
    def exists(self) -> bool:
        return self.path.exists()
