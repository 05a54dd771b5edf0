from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from functools import lru_cache

from ryandata_addressinput.data.constants import REGION_CODE_ALIASES
from ryandata_addressinput.data.metadata import RegionMetadata
from ryandata_addressinput.models.enums import AddressDataKey

logger = logging.getLogger(__name__)


class BaseRegionDataSource(ABC):
    """Abstract base class for region metadata sources.

    Provides common caching and aliasing logic and defines the interface that
    all region data source implementations must follow. Sources are read-only
    once loaded, so they can be shared freely.
    """

    def __init__(self, cache_size: int = 512) -> None:
        """Initialize the data source.

        Args:
            cache_size: Maximum number of parsed region records to cache.
        """
        self._cache_size = cache_size
        self._setup_cache()

    def _setup_cache(self) -> None:
        """Set up LRU cache for region lookups."""
        self._cached_get_metadata = lru_cache(maxsize=self._cache_size)(self._get_metadata_impl)

    @abstractmethod
    def _get_metadata_impl(self, region_code: str) -> RegionMetadata | None:
        """Internal implementation of the region lookup.

        Args:
            region_code: Region code exactly as stored in the table.

        Returns:
            Parsed RegionMetadata if the region has an entry, None otherwise.
        """
        ...

    @abstractmethod
    def region_codes(self) -> list[str]:
        """Get all region codes with an entry, sorted."""
        ...

    def get_metadata(self, region_code: str) -> RegionMetadata | None:
        """Get the metadata record for a region.

        Regions without an entry of their own fall back to their alias, if any.

        Args:
            region_code: Two-letter region code, or "ZZ" for the defaults.

        Returns:
            RegionMetadata if found, None otherwise.
        """
        metadata = self._cached_get_metadata(region_code)
        if metadata is None and region_code in REGION_CODE_ALIASES:
            alias = REGION_CODE_ALIASES[region_code]
            logger.debug("Using region data of %s for %s", alias, region_code)
            metadata = self._cached_get_metadata(alias)
        if metadata is None:
            logger.debug("No region data for %s", region_code)
        return metadata

    def get_value(self, region_code: str, key: AddressDataKey) -> str | None:
        """Get one metadata value for a region.

        Args:
            region_code: Two-letter region code.
            key: Metadata key to read.

        Returns:
            The string value, or None if the region or key is absent.
        """
        metadata = self.get_metadata(region_code)
        if metadata is None:
            return None
        return metadata.get(key)

    def has_region(self, region_code: str) -> bool:
        """Check if a region has metadata (directly or through an alias)."""
        return self.get_metadata(region_code) is not None

    def clear_cache(self) -> None:
        """Clear the parsed region cache."""
        self._cached_get_metadata.cache_clear()
