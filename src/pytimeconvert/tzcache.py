"""Process-wide cache of timezone database handles."""

from __future__ import annotations

import logging
import threading
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

_LOGGER = logging.getLogger(__name__)


class ZoneCache:
    """Read-through cache mapping zone names to ``ZoneInfo`` handles.

    Entries are added on first successful lookup and never evicted, so the
    cache is bounded by the number of distinct names ever requested. Names are
    matched case-insensitively against the timezone database; the handle's
    ``key`` carries the canonical spelling. Concurrent inserts of the same
    name are idempotent because ``ZoneInfo`` itself returns one instance per
    key.
    """

    def __init__(self) -> None:
        self._zones: dict[str, ZoneInfo] = {}
        self._lock = threading.Lock()
        self._names: dict[str, str] | None = None

    def __contains__(self, name: object) -> bool:
        return name in self._zones

    def __len__(self) -> int:
        return len(self._zones)

    def get(self, name: str) -> ZoneInfo | None:
        """Return the handle for ``name`` or ``None`` when it is not a known zone."""
        if not isinstance(name, str) or not name or name != name.strip():
            return None
        cached = self._zones.get(name)
        if cached is not None:
            return cached
        canonical = self._canonical_name(name)
        try:
            zone = ZoneInfo(canonical)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            _LOGGER.debug("Zone %s is not in the timezone database", name)
            return None
        with self._lock:
            self._zones.setdefault(canonical, zone)
            return self._zones.setdefault(name, zone)

    def clear(self) -> None:
        """Drop cached handles (used in tests)."""
        with self._lock:
            self._zones.clear()
            self._names = None

    def _canonical_name(self, name: str) -> str:
        names = self._known_names()
        return names.get(name.lower(), name)

    def _known_names(self) -> dict[str, str]:
        names = self._names
        if names is None:
            with self._lock:
                if self._names is None:
                    self._names = {key.lower(): key for key in available_timezones()}
                    _LOGGER.debug("Loaded %s timezone names", len(self._names))
                names = self._names
        return names


ZONE_CACHE = ZoneCache()
