#
# MIT License
#
# (C) Copyright 2026 Hewlett Packard Enterprise Development LP
#
# Permission is hereby granted, free of charge, to any person obtaining a
# copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included
# in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL
# THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR
# OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE,
# ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR
# OTHER DEALINGS IN THE SOFTWARE.
#
"""
A bounded, time-gated response cache.
"""
from collections import namedtuple
import logging
import time

from cachetools import LRUCache

LOGGER = logging.getLogger(__name__)

DEFAULT_CACHE_SIZE = 1000
DEFAULT_CACHE_EXPIRY = 60

CacheEntry = namedtuple('CacheEntry', ['value', 'ctime'])


class _LoggingLRUCache(LRUCache):
    """An LRUCache that logs the keys it evicts."""

    def popitem(self):
        key, value = super().popitem()
        LOGGER.debug('Evicted %s from cache', key)
        return key, value


class ResponseCache:
    """An LRU cache whose entries are only served while younger than a TTL.

    Stale entries are not removed on lookup; they remain until they are
    overwritten or pushed out when the cache is full.
    """

    def __init__(self, size=DEFAULT_CACHE_SIZE, expiry=DEFAULT_CACHE_EXPIRY):
        """Create a ResponseCache.

        Args:
            size (int): the maximum number of entries.
            expiry (int or float): the default maximum age of an entry in seconds.

        Raises:
            ValueError: if `size` is less than one.
        """
        if size < 1:
            raise ValueError(f'Cache size must be at least 1, not {size}.')
        self.size = size
        self.expiry = expiry
        self._entries = _LoggingLRUCache(maxsize=size)

    def __len__(self):
        return len(self._entries)

    def __contains__(self, key):
        return key in self._entries

    def put(self, key, value):
        """Store `value` under `key`, or purge `key` when `value` is None.

        Args:
            key (str): the cache key.
            value: the value to store, or None to purge.

        Returns:
            True if a value was stored, False if the entry was purged.
        """
        if value is None:
            LOGGER.debug('Purging %s from cache', key)
            self._entries[key] = None
            return False

        LOGGER.debug('Writing %s to cache', key)
        self._entries[key] = CacheEntry(value, time.monotonic())
        return True

    def get(self, key, ttl=None):
        """Get the value stored under `key` if it is recent enough.

        Args:
            key (str): the cache key.
            ttl (int or float): maximum age in seconds for this lookup. Falls
                back to the cache's default expiry.

        Returns:
            The cached value, or None on a miss.
        """
        max_age = ttl or self.expiry

        entry = self._entries.get(key)
        if entry is not None and time.monotonic() - entry.ctime <= max_age:
            LOGGER.debug('Cache hit for %s', key)
            return entry.value

        LOGGER.debug('Cache miss for %s', key)
        return None

    def clear(self):
        """Remove every entry."""
        self._entries.clear()
