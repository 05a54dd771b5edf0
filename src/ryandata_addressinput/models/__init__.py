"""Address models package.

This package contains the field enumerations, the AddressData value object
and its builder, form options and the package error types.
"""

from __future__ import annotations

from ryandata_addressinput.models.address import (
    AddressData,
    normalize_address_lines,
    trim_to_null,
)
from ryandata_addressinput.models.builder import AddressDataBuilder
from ryandata_addressinput.models.enums import (
    ADDRESS_LINE_FIELDS,
    SINGLE_VALUE_FIELDS,
    AddressDataKey,
    AddressField,
    KeyType,
    ScriptType,
    WidthType,
)
from ryandata_addressinput.models.errors import (
    PACKAGE_NAME,
    RyanDataAddressError,
    RyanDataValidationError,
)
from ryandata_addressinput.models.form_options import FormOptions, FormOptionsSnapshot

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "RyanDataAddressError",
    "RyanDataValidationError",
    # Enums and constants
    "AddressField",
    "AddressDataKey",
    "KeyType",
    "ScriptType",
    "WidthType",
    "ADDRESS_LINE_FIELDS",
    "SINGLE_VALUE_FIELDS",
    # Address models
    "AddressData",
    "AddressDataBuilder",
    "normalize_address_lines",
    "trim_to_null",
    # Form options
    "FormOptions",
    "FormOptionsSnapshot",
]
