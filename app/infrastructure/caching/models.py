"""Cache data structures."""

import json
import time
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional

Clock = Callable[[], float]


class CacheStrategy(str, Enum):
    """Storage tiers a CacheService can use."""

    MEMORY = "memory"
    DISK = "disk"
    HYBRID = "hybrid"

    @classmethod
    def from_string(cls, value: str) -> "CacheStrategy":
        """Convert string to CacheStrategy enum.

        Raises:
            ValueError: If value is not a known strategy.
        """
        try:
            return cls(value.lower())
        except ValueError as e:
            raise ValueError(f"Unsupported cache strategy: {value}") from e

    @property
    def uses_memory(self) -> bool:
        return self is not CacheStrategy.DISK

    @property
    def uses_disk(self) -> bool:
        return self is not CacheStrategy.MEMORY


def now_ms(clock: Optional[Clock] = None) -> int:
    """Current time as epoch milliseconds.

    Args:
        clock: Callable returning epoch seconds (default: time.time).
    """
    return int((clock or time.time)() * 1000)


def estimate_size(data: Any) -> int:
    """Approximate size in bytes of the serialized form of data.

    Two bytes per character of the JSON encoding. Used only for capacity
    accounting.
    """
    return len(json.dumps(data, default=str)) * 2


@dataclass
class CacheEntry:
    """A cached value with its write time and lifetime.

    Attributes:
        data: Cached value.
        timestamp: Epoch milliseconds of the last write.
        ttl: Time-to-live in seconds.
        size: Approximate size in bytes, see estimate_size().
    """

    data: Any
    timestamp: int
    ttl: int
    size: int

    @classmethod
    def create(cls, data: Any, ttl: int, clock: Optional[Clock] = None) -> "CacheEntry":
        return cls(
            data=data, timestamp=now_ms(clock), ttl=ttl, size=estimate_size(data)
        )

    def is_expired(self, at_ms: int | None = None) -> bool:
        """Check whether the entry has outlived its TTL.

        Args:
            at_ms: Reference time in epoch milliseconds (default: now).
        """
        reference = now_ms() if at_ms is None else at_ms
        return reference - self.timestamp >= self.ttl * 1000

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "CacheEntry":
        """Rebuild an entry from its JSON form.

        Raises:
            KeyError: If a required field is absent.
        """
        return cls(
            data=payload["data"],
            timestamp=int(payload["timestamp"]),
            ttl=int(payload["ttl"]),
            size=int(payload.get("size", estimate_size(payload["data"]))),
        )
