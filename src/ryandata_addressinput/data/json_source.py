from __future__ import annotations

import json
import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Union

from pydantic import ValidationError

from ryandata_addressinput.data.base import BaseRegionDataSource
from ryandata_addressinput.data.constants import BUNDLED_REGION_DATA, REGION_DATA_PATH_ENV
from ryandata_addressinput.data.metadata import RegionMetadata
from ryandata_addressinput.models.errors import PACKAGE_NAME, RyanDataAddressError


class JSONRegionDataSource(BaseRegionDataSource):
    """Data source that loads region metadata from a JSON file.

    The file holds one object keyed by region code, each value being that
    region's metadata object. By default the bundled regions.json is used.
    """

    def __init__(
        self,
        json_path: Union[str, Path] | None = None,
        cache_size: int = 512,
    ) -> None:
        """Initialize JSON data source.

        Args:
            json_path: Path to a JSON file. If None, uses bundled regions.json.
            cache_size: Maximum number of parsed region records to cache.
        """
        self._json_path = json_path
        self._raw: dict[str, Any] = {}
        self._loaded = False

        super().__init__(cache_size=cache_size)

    def _read_json(self) -> Any:
        """Read and decode the JSON document."""
        if self._json_path:
            with open(self._json_path, encoding="utf-8") as f:
                return json.load(f)

        data_file = resources.files("ryandata_addressinput.data").joinpath(BUNDLED_REGION_DATA)
        with data_file.open("r", encoding="utf-8") as f:
            return json.load(f)

    def _load_data(self) -> None:
        """Load the region table from the JSON file."""
        if self._loaded:
            return

        document = self._read_json()
        if not isinstance(document, dict):
            raise RyanDataAddressError(
                "invalid_region_data",
                "Region data must be a JSON object keyed by region code",
                {"package": PACKAGE_NAME, "path": str(self._json_path or BUNDLED_REGION_DATA)},
            )
        self._raw = document
        self._loaded = True

    def _ensure_loaded(self) -> None:
        """Ensure data is loaded before access."""
        if not self._loaded:
            self._load_data()

    def _get_metadata_impl(self, region_code: str) -> RegionMetadata | None:
        """Parse the metadata record for a region.

        Args:
            region_code: Region code exactly as stored in the table.

        Returns:
            RegionMetadata if found, None otherwise.
        """
        self._ensure_loaded()
        entry = self._raw.get(region_code)
        if entry is None:
            return None
        try:
            return RegionMetadata.model_validate(entry)
        except ValidationError as e:
            raise RyanDataAddressError(
                "invalid_region_data",
                f"Invalid metadata for region code {region_code}",
                {"package": PACKAGE_NAME, "region": region_code, "error": str(e)},
            ) from e

    def region_codes(self) -> list[str]:
        """Get all region codes with an entry, sorted."""
        self._ensure_loaded()
        return sorted(self._raw)


@lru_cache(maxsize=1)
def get_default_region_data_source() -> JSONRegionDataSource:
    """Get the default JSON region data source singleton.

    Honors the RYANDATA_ADDRESSINPUT_REGION_DATA environment variable, which
    may point at an alternate region JSON file.

    Returns:
        Shared JSONRegionDataSource instance.
    """
    return JSONRegionDataSource(os.getenv(REGION_DATA_PATH_ENV) or None)
