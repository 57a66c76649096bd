"""
In-process TTL cache for pricing lookups.
"""

import threading
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Callable, Dict, Hashable, Optional, Union

import structlog
from pydantic import BaseModel, Field

from ..models.licensing import LicensingCost, LicensingInput
from ..models.pricing import ProviderPricing
from ..models.types import CloudProvider, Distribution
from .registry import PricingRegistry, get_registry

logger = structlog.get_logger(__name__)

DEFAULT_TTL_SECONDS = 300
DEFAULT_MAX_ENTRIES = 1024


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _key_part(value) -> str:
    return value.value if isinstance(value, Enum) else str(value)


class CacheEntry(BaseModel):
    """Pricing cache entry"""

    value: Any
    created_at: datetime = Field(default_factory=_now)
    expires_at: datetime
    hit_count: int = Field(default=0)

    def is_expired(self) -> bool:
        """Check if cache entry is expired"""
        return _now() >= self.expires_at

    def is_valid(self) -> bool:
        """Check if cache entry is valid"""
        return not self.is_expired()


class PricingCache:
    """Thread-safe TTL cache keyed by the full lookup input.

    Expired entries are purged on every insert and the oldest entry is
    evicted once ``max_entries`` is reached. A TTL of 0 stores nothing.
    """

    def __init__(
        self, ttl_seconds: int = DEFAULT_TTL_SECONDS, max_entries: int = DEFAULT_MAX_ENTRIES
    ):
        if ttl_seconds < 0:
            raise ValueError("ttl_seconds must be >= 0")
        if max_entries < 1:
            raise ValueError("max_entries must be >= 1")
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._entries: Dict[Hashable, CacheEntry] = {}
        self._lock = threading.Lock()
        self._misses = 0

    def get(self, key: Hashable) -> Optional[Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                return None
            if entry.is_expired():
                del self._entries[key]
                self._misses += 1
                logger.debug("Cache entry expired", key=str(key), expired_at=entry.expires_at)
                return None
            entry.hit_count += 1
            return entry.value

    def set(self, key: Hashable, value: Any) -> None:
        if self.ttl_seconds == 0:
            return
        created = _now()
        with self._lock:
            self._purge_expired()
            # Re-inserting moves the key to the newest position
            self._entries.pop(key, None)
            while len(self._entries) >= self.max_entries:
                oldest = next(iter(self._entries))
                del self._entries[oldest]
                logger.debug("Cache entry evicted", key=str(oldest), max_entries=self.max_entries)
            self._entries[key] = CacheEntry(
                value=value,
                created_at=created,
                expires_at=created + timedelta(seconds=self.ttl_seconds),
            )

    def _purge_expired(self) -> None:
        expired = [key for key, entry in self._entries.items() if entry.is_expired()]
        for key in expired:
            del self._entries[key]

    def get_or_compute(self, key: Hashable, compute: Callable[[], Any]) -> Any:
        """Cached value for ``key``, computing and storing it on a miss"""
        value = self.get(key)
        if value is not None:
            return value
        value = compute()
        self.set(key, value)
        return value

    def invalidate(self, key: Optional[Hashable] = None) -> int:
        """Drop one entry, or every entry when ``key`` is None"""
        with self._lock:
            if key is None:
                removed = len(self._entries)
                self._entries.clear()
            else:
                removed = 1 if self._entries.pop(key, None) is not None else 0
        logger.debug("Cache invalidated", key=None if key is None else str(key), removed=removed)
        return removed

    def stats(self) -> Dict[str, Any]:
        """Get pricing cache statistics"""
        with self._lock:
            entries = list(self._entries.values())
            misses = self._misses

        total_entries = len(entries)
        valid_entries = sum(1 for entry in entries if entry.is_valid())
        total_hits = sum(entry.hit_count for entry in entries)

        return {
            "total_entries": total_entries,
            "valid_entries": valid_entries,
            "expired_entries": total_entries - valid_entries,
            "total_cache_hits": total_hits,
            "total_cache_misses": misses,
            "ttl_seconds": self.ttl_seconds,
            "max_entries": self.max_entries,
        }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class CachedPricingService:
    """Registry front end that memoises pricing bundles and licensing costs"""

    def __init__(
        self,
        registry: Optional[PricingRegistry] = None,
        cache: Optional[PricingCache] = None,
        enabled: bool = True,
    ):
        self.registry = registry or get_registry()
        self.cache = cache if cache is not None else PricingCache()
        self.enabled = enabled

    def get_pricing(
        self, provider: Union[CloudProvider, str], region: Optional[str] = None
    ) -> ProviderPricing:
        if not self.enabled:
            return self.registry.get_pricing(provider, region)
        key = ("pricing", _key_part(provider), region)
        return self.cache.get_or_compute(key, lambda: self.registry.get_pricing(provider, region))

    def calculate_licensing_cost(
        self, distribution: Union[Distribution, str], licensing_input: LicensingInput
    ) -> LicensingCost:
        if not self.enabled:
            return self.registry.calculate_licensing_cost(distribution, licensing_input)
        key = ("licensing", _key_part(distribution), licensing_input.model_dump_json())
        return self.cache.get_or_compute(
            key, lambda: self.registry.calculate_licensing_cost(distribution, licensing_input)
        )

    def invalidate(self) -> int:
        return self.cache.invalidate()
