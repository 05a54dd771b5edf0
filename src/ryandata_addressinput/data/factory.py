from __future__ import annotations

from typing import Any, ClassVar

from ryandata_addressinput.core.factory import PluginFactory
from ryandata_addressinput.protocols import RegionDataSourceProtocol


class RegionDataSourceFactory(PluginFactory[RegionDataSourceProtocol]):
    """Factory for creating region data source instances.

    Example:
        >>> source = RegionDataSourceFactory.create("json")
        >>> source = RegionDataSourceFactory.create("json", json_path="/path/to/regions.json")
        >>> source = RegionDataSourceFactory.create("mapping", mapping={"ZZ": '{"fmt":"%A"}'})

        # Register custom source
        >>> RegionDataSourceFactory.register("sqlite", SQLiteRegionDataSource)
    """

    _registry: ClassVar[dict[str, type[RegionDataSourceProtocol]]] = {}
    _default_type: ClassVar[str] = "json"
    _entity_name: ClassVar[str] = "region data source"

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        """Ensure default data sources are registered."""
        if "json" not in cls._registry:
            from ryandata_addressinput.data.json_source import JSONRegionDataSource

            cls._registry["json"] = JSONRegionDataSource
        if "mapping" not in cls._registry:
            from ryandata_addressinput.data.mapping_source import MappingRegionDataSource

            cls._registry["mapping"] = MappingRegionDataSource

    @classmethod
    def create(  # type: ignore[override]
        cls,
        source_type: str | None = None,
        **kwargs: Any,
    ) -> RegionDataSourceProtocol:
        """Create a region data source instance.

        Args:
            source_type: Type of data source to create. Defaults to "json".
            **kwargs: Arguments to pass to the data source constructor.

        Returns:
            Region data source instance.
        """
        return super().create(source_type, **kwargs)
