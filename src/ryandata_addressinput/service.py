from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from ryandata_addressinput.core.format_interpreter import FormatInterpreter
from ryandata_addressinput.core.lookup_key import LookupKey, LookupKeyBuilder
from ryandata_addressinput.data import get_default_region_data_source
from ryandata_addressinput.models import (
    AddressData,
    AddressField,
    FormOptions,
    FormOptionsSnapshot,
    KeyType,
    RyanDataValidationError,
    ScriptType,
    WidthType,
)
from ryandata_addressinput.validation.validators import create_default_validators

if TYPE_CHECKING:
    import pandas as pd
    from abstract_validation_base import ValidationResult

    from ryandata_addressinput.protocols import RegionDataSourceProtocol, ValidatorProtocol

logger = logging.getLogger(__name__)

AddressInput = AddressData | Mapping[str, Any]


class AddressFormatService:
    """High-level facade for address formatting operations.

    Combines the region data source, form options and validators to answer
    the common questions: which fields a region uses, which are required,
    and how an address is printed.

    Example:
        >>> service = AddressFormatService()
        >>> service.field_order("US")[:2]
        [<AddressField.RECIPIENT: 'N'>, <AddressField.ORGANIZATION: 'O'>]

        >>> address = AddressData(
        ...     region_code="US",
        ...     address_lines=["1098 Alta Ave"],
        ...     administrative_area="CA",
        ...     locality="Mountain View",
        ...     postal_code="94043",
        ... )
        >>> service.envelope_lines(address)
        ['1098 Alta Ave', 'Mountain View, CA 94043']

        # Custom components
        >>> from ryandata_addressinput.data import JSONRegionDataSource
        >>> service = AddressFormatService(data_source=JSONRegionDataSource("/path/to/regions.json"))
    """

    def __init__(
        self,
        data_source: RegionDataSourceProtocol | None = None,
        form_options: FormOptions | FormOptionsSnapshot | None = None,
        validator: ValidatorProtocol | None = None,
    ) -> None:
        """Initialize the format service.

        Args:
            data_source: Region metadata source. Defaults to the bundled table.
            form_options: Hidden fields and custom field orders. Mutable options
                are snapshotted here; later changes are not seen.
            validator: Validator implementation. Defaults to the structural
                validators.
        """
        self._data_source = data_source or get_default_region_data_source()
        if isinstance(form_options, FormOptions):
            form_options = form_options.create_snapshot()
        self._form_options = form_options or FormOptionsSnapshot()
        self._interpreter = FormatInterpreter(self._form_options, self._data_source)

        if validator is not None:
            self._validator = validator
        else:
            self._validator = create_default_validators(self._data_source)

    @property
    def data_source(self) -> RegionDataSourceProtocol:
        """Get the data source instance."""
        return self._data_source

    @property
    def form_options(self) -> FormOptionsSnapshot:
        return self._form_options

    @property
    def interpreter(self) -> FormatInterpreter:
        return self._interpreter

    @property
    def validator(self) -> ValidatorProtocol:
        """Get the validator instance."""
        return self._validator

    # -------------------------------------------------------------------------
    # Field layout
    # -------------------------------------------------------------------------

    def field_order(
        self, region_code: str, script_type: ScriptType = ScriptType.LOCAL
    ) -> list[AddressField]:
        """Get the fields of a region in display order, custom order applied.

        Args:
            region_code: Region to look up. Unknown regions use the defaults.
            script_type: LOCAL or LATIN.

        Returns:
            Fields in display order, with STREET_ADDRESS expanded into the two
            address line fields.
        """
        return self._interpreter.get_address_field_order(script_type, region_code)

    def visible_field_order(
        self, region_code: str, script_type: ScriptType = ScriptType.LOCAL
    ) -> list[AddressField]:
        """Like field_order(), without the fields hidden by the form options."""
        return [
            field
            for field in self.field_order(region_code, script_type)
            if not self._form_options.is_hidden(field)
        ]

    def required_fields(self, region_code: str) -> frozenset[AddressField]:
        """Get the fields a region requires (always including COUNTRY)."""
        return self._interpreter.get_required_fields(region_code)

    def field_widths(
        self, region_code: str, script_type: ScriptType = ScriptType.LOCAL
    ) -> dict[AddressField, WidthType]:
        """Get the input width of every field a region displays.

        Returns:
            Mapping in display order from field to its region width.
        """
        return {
            field: field.width_for_region(region_code, self._data_source)
            for field in self.field_order(region_code, script_type)
        }

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def to_address(self, address: AddressInput) -> AddressData:
        """Coerce a mapping of AddressData attributes into an AddressData.

        Raises:
            RyanDataValidationError: If the mapping holds invalid values.
        """
        if isinstance(address, AddressData):
            return address
        try:
            return AddressData.model_validate(dict(address))
        except ValidationError as e:
            logger.warning("Rejected address input: %s", e.error_count())
            raise RyanDataValidationError(e) from e

    def envelope_lines(self, address: AddressInput) -> list[str]:
        """Lay out an address as envelope lines.

        Empty fields and the punctuation around them are dropped. The address
        is not validated.
        """
        return self._interpreter.get_envelope_address(self.to_address(address))

    def format_address(self, address: AddressInput, separator: str = "\n") -> str:
        """Format an address as a single string.

        Args:
            address: AddressData or mapping of its attributes.
            separator: String placed between envelope lines.
        """
        return separator.join(self.envelope_lines(address))

    def validate(self, address: AddressInput) -> ValidationResult:
        """Check that an address holds the fields its region requires.

        Returns:
            ValidationResult from the configured validator.
        """
        return self._validator.validate(self.to_address(address))

    def lookup_key(self, address: AddressInput) -> LookupKey:
        """Build the DATA lookup key for an address, e.g. "data/US/CA"."""
        return (
            LookupKeyBuilder(KeyType.DATA)
            .set_address_data(self.to_address(address))
            .build()
        )

    # -------------------------------------------------------------------------
    # Pandas integration methods
    # -------------------------------------------------------------------------

    def format_dataframe(
        self,
        df: pd.DataFrame,
        columns: Mapping[str, str] | None = None,
        *,
        prefix: str = "",
        separator: str = "\n",
        inplace: bool = False,
    ) -> pd.DataFrame:
        """Add an envelope column built from the address columns of a DataFrame.

        Args:
            df: Input DataFrame.
            columns: Mapping of AddressData attribute to column name. Defaults to
                every column named like an AddressData attribute.
            prefix: Prefix for the new column name.
            separator: String placed between envelope lines.
            inplace: If True, modify df in place.

        Returns:
            DataFrame with a new "<prefix>envelope" column.
        """
        from ryandata_addressinput.pandas_ext import dataframe_to_addresses

        if not inplace:
            df = df.copy()

        addresses = dataframe_to_addresses(df, columns)
        df[f"{prefix}envelope"] = [
            self.format_address(address, separator=separator) for address in addresses
        ]
        return df


# Module-level convenience function
_default_service: AddressFormatService | None = None


def get_default_service() -> AddressFormatService:
    """Get the default AddressFormatService singleton.

    Returns:
        Shared AddressFormatService instance with default configuration.
    """
    global _default_service
    if _default_service is None:
        _default_service = AddressFormatService()
    return _default_service


def format_address(address: AddressInput, separator: str = "\n") -> str:
    """Format an address using the default service.

    Args:
        address: AddressData or mapping of its attributes.
        separator: String placed between envelope lines.

    Returns:
        The envelope lines joined by separator.
    """
    return get_default_service().format_address(address, separator=separator)


def get_field_order(
    region_code: str, script_type: ScriptType = ScriptType.LOCAL
) -> list[AddressField]:
    """Get a region's fields in display order using the default service."""
    return get_default_service().field_order(region_code, script_type)


def get_required_fields(region_code: str) -> frozenset[AddressField]:
    """Get a region's required fields using the default service."""
    return get_default_service().required_fields(region_code)
