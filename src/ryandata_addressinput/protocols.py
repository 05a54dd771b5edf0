from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from abstract_validation_base import ValidationResult

    from ryandata_addressinput.data.metadata import RegionMetadata
    from ryandata_addressinput.models import AddressData, AddressDataKey


@runtime_checkable
class RegionDataSourceProtocol(Protocol):
    """Protocol for per-region metadata sources.

    Implementations expose a read-only mapping from region code to metadata,
    supporting different backends (bundled JSON, caller-supplied mappings, ...).
    """

    def get_metadata(self, region_code: str) -> RegionMetadata | None:
        """Get the metadata record for a region.

        Args:
            region_code: Two-letter region code, or "ZZ" for the defaults.

        Returns:
            RegionMetadata if the region has an entry, None otherwise.
        """
        ...

    def get_value(self, region_code: str, key: AddressDataKey) -> str | None:
        """Get one metadata value for a region.

        Args:
            region_code: Two-letter region code.
            key: Metadata key to read.

        Returns:
            The string value, or None if the region or key is absent.
        """
        ...

    def region_codes(self) -> list[str]:
        """Get all region codes with an entry, sorted."""
        ...


@runtime_checkable
class ValidatorProtocol(Protocol):
    """Protocol for structural address validation implementations."""

    def validate(self, address: AddressData) -> ValidationResult:
        """Validate an address.

        Args:
            address: AddressData to validate.

        Returns:
            ValidationResult containing validation status and any errors.
        """
        ...

    @property
    def name(self) -> str:
        """Name of this validator for error reporting."""
        ...
