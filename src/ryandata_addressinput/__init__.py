"""ryandata-addressinput: International address formats and lookup keys.

This package interprets per-region address metadata:
- Field order, required fields and input widths for every region
- Envelope formatting of populated addresses
- Hierarchical lookup keys ("data/US/CA") for region metadata
- Structural validators, pandas integration and a small CLI

Quick Start:
    >>> from ryandata_addressinput import AddressDataBuilder, AddressFormatService
    >>> service = AddressFormatService()
    >>> address = (
    ...     AddressDataBuilder()
    ...     .set_country("US")
    ...     .set_address("1098 Alta Ave")
    ...     .set_admin_area("CA")
    ...     .set_locality("Mountain View")
    ...     .set_postal_code("94043")
    ...     .build()
    ... )
    >>> service.envelope_lines(address)
    ['1098 Alta Ave', 'Mountain View, CA 94043']

    # Field layout
    >>> service.field_order("JP", ScriptType.LATIN)

    # Lookup keys
    >>> from ryandata_addressinput import LookupKey
    >>> str(LookupKey.from_string("data/US/CA").parent_key)
    'data/US'
"""

from __future__ import annotations  # noqa: I001

# Import order is intentional to avoid circular imports - do not auto-fix
from ryandata_addressinput.models import (
    AddressData,
    AddressDataBuilder,
    AddressDataKey,
    AddressField,
    FormOptions,
    FormOptionsSnapshot,
    KeyType,
    PACKAGE_NAME,
    RyanDataAddressError,
    RyanDataValidationError,
    ScriptType,
    WidthType,
)
from ryandata_addressinput.data import (
    BaseRegionDataSource,
    JSONRegionDataSource,
    MappingRegionDataSource,
    RegionDataSourceFactory,
    RegionMetadata,
    get_default_region_data_source,
    get_region_codes,
    get_region_metadata,
    get_region_value,
)
from ryandata_addressinput.core import (
    FormatInterpreter,
    LookupKey,
    LookupKeyBuilder,
    get_language_subtag,
    get_widget_compatible_language_code,
    is_explicit_latin_script,
    tokenize,
)
from ryandata_addressinput.protocols import RegionDataSourceProtocol, ValidatorProtocol
from ryandata_addressinput.validation import (
    RequiredFieldsValidator,
    UnusedFieldsValidator,
    create_default_validators,
)
from ryandata_addressinput.service import (
    AddressFormatService,
    format_address,
    get_default_service,
    get_field_order,
    get_required_fields,
)
from ryandata_addressinput.pandas_ext import format_addresses, register_accessor

__version__ = "0.1.0"
__package_name__ = "ryandata-addressinput"

__all__ = [
    # Version
    "__version__",
    # Primary interface
    "AddressFormatService",
    "get_default_service",
    "format_address",
    "get_field_order",
    "get_required_fields",
    # Models
    "AddressData",
    "AddressDataBuilder",
    "AddressDataKey",
    "AddressField",
    "FormOptions",
    "FormOptionsSnapshot",
    "KeyType",
    "ScriptType",
    "WidthType",
    # Errors
    "PACKAGE_NAME",
    "RyanDataAddressError",
    "RyanDataValidationError",
    # Core
    "FormatInterpreter",
    "LookupKey",
    "LookupKeyBuilder",
    "tokenize",
    "is_explicit_latin_script",
    "get_language_subtag",
    "get_widget_compatible_language_code",
    # Protocols
    "RegionDataSourceProtocol",
    "ValidatorProtocol",
    # Data sources
    "BaseRegionDataSource",
    "JSONRegionDataSource",
    "MappingRegionDataSource",
    "RegionDataSourceFactory",
    "RegionMetadata",
    "get_default_region_data_source",
    "get_region_codes",
    "get_region_metadata",
    "get_region_value",
    # Validators
    "RequiredFieldsValidator",
    "UnusedFieldsValidator",
    "create_default_validators",
    # Pandas integration
    "format_addresses",
    "register_accessor",
]
