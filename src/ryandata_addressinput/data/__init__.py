"""Region metadata sources.

This module provides data source implementations over the per-region
formatting metadata table, plus convenience accessors for the default source.
"""

from __future__ import annotations

from ryandata_addressinput.data.base import BaseRegionDataSource
from ryandata_addressinput.data.constants import DEFAULT_REGION_CODE, REGION_CODE_ALIASES
from ryandata_addressinput.data.factory import RegionDataSourceFactory
from ryandata_addressinput.data.json_source import (
    JSONRegionDataSource,
    get_default_region_data_source,
)
from ryandata_addressinput.data.mapping_source import MappingRegionDataSource
from ryandata_addressinput.data.metadata import LabelOverride, RegionMetadata
from ryandata_addressinput.models.enums import AddressDataKey

__all__ = [
    "BaseRegionDataSource",
    "JSONRegionDataSource",
    "MappingRegionDataSource",
    "RegionDataSourceFactory",
    "RegionMetadata",
    "LabelOverride",
    "DEFAULT_REGION_CODE",
    "REGION_CODE_ALIASES",
    "get_default_region_data_source",
    # Convenience functions
    "get_region_metadata",
    "get_region_value",
    "get_region_codes",
]


def get_region_metadata(region_code: str) -> RegionMetadata | None:
    """Get the metadata record for a region from the default source.

    Args:
        region_code: Two-letter region code.

    Returns:
        RegionMetadata if found, None otherwise.
    """
    return get_default_region_data_source().get_metadata(region_code)


def get_region_value(region_code: str, key: AddressDataKey) -> str | None:
    """Get one metadata value for a region from the default source.

    Args:
        region_code: Two-letter region code.
        key: Metadata key to read.

    Returns:
        The string value, or None if the region or key is absent.
    """
    return get_default_region_data_source().get_value(region_code, key)


def get_region_codes() -> list[str]:
    """Get every region code in the default source, sorted."""
    return get_default_region_data_source().region_codes()
