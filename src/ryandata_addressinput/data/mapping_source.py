from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import ValidationError

from ryandata_addressinput.data.base import BaseRegionDataSource
from ryandata_addressinput.data.metadata import RegionMetadata
from ryandata_addressinput.models.errors import PACKAGE_NAME, RyanDataAddressError


class MappingRegionDataSource(BaseRegionDataSource):
    """Data source over a caller-supplied region code -> metadata string mapping.

    Each value is a JSON object string such as
    ``'{"fmt":"%N%n%O%n%A%n%C","require":"AC"}'``. Strings are parsed lazily on
    first access to a region.

    Example:
        >>> source = MappingRegionDataSource({"ZZ": '{"fmt":"%N%n%A%n%C"}'})
        >>> source.get_metadata("ZZ").fmt
        '%N%n%A%n%C'
    """

    def __init__(self, mapping: Mapping[str, str], cache_size: int = 512) -> None:
        """Initialize mapping data source.

        Args:
            mapping: Region code to metadata JSON string. Copied on construction.
            cache_size: Maximum number of parsed region records to cache.
        """
        self._mapping: Mapping[str, str] = MappingProxyType(dict(mapping))
        super().__init__(cache_size=cache_size)

    def _get_metadata_impl(self, region_code: str) -> RegionMetadata | None:
        json_string = self._mapping.get(region_code)
        if json_string is None:
            return None
        try:
            return RegionMetadata.model_validate_json(json_string)
        except ValidationError as e:
            raise RyanDataAddressError(
                "invalid_region_data",
                f"Invalid json for region code {region_code}",
                {"package": PACKAGE_NAME, "region": region_code, "value": json_string},
            ) from e

    def region_codes(self) -> list[str]:
        """Get all region codes with an entry, sorted."""
        return sorted(self._mapping)
