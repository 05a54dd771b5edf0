"""Structural address validators.

These validators only check whether fields are present where a region
expects them. They never check that values are correct (that a postal code
exists, or matches the administrative area).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from abstract_validation_base import (
    BaseValidator,
    CompositeValidator,
    ValidationResult,
    ValidatorPipelineBuilder,
)

from ryandata_addressinput.core.format_interpreter import (
    get_format_string,
    get_required_fields,
)
from ryandata_addressinput.core.language import is_explicit_latin_script
from ryandata_addressinput.core.tokenizer import iter_fields
from ryandata_addressinput.data.constants import DEFAULT_REGION_CODE
from ryandata_addressinput.models.enums import (
    SINGLE_VALUE_FIELDS,
    AddressField,
    ScriptType,
)
from ryandata_addressinput.protocols import RegionDataSourceProtocol

if TYPE_CHECKING:
    from ryandata_addressinput.models import AddressData


class RequiredFieldsValidator(BaseValidator["AddressData"]):
    """Validates that every field the region requires has a value.

    Addresses without a region are checked against the "ZZ" defaults, and
    always fail on COUNTRY.
    """

    def __init__(self, data_source: RegionDataSourceProtocol) -> None:
        """Initialize required fields validator.

        Args:
            data_source: Region metadata source.
        """
        self._data_source = data_source

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "required_fields"

    def validate(self, address: AddressData) -> ValidationResult:
        """Validate that required fields are present.

        Args:
            address: AddressData to validate.

        Returns:
            ValidationResult with one error per missing field.
        """
        result = ValidationResult(is_valid=True)
        region_code = address.region_code or DEFAULT_REGION_CODE
        required = get_required_fields(region_code, self._data_source)

        # Sorted for stable error order
        for field in sorted(required, key=lambda f: f.name):
            if not address.has_value(field):
                result.add_error(
                    field=field.name,
                    message=f"Missing required field {field.name} ({field.code}) for {region_code}",
                    value=None,
                )
        return result


class UnusedFieldsValidator(BaseValidator["AddressData"]):
    """Flags populated fields that the region's format never displays.

    COUNTRY is never flagged since envelopes leave it implicit.
    """

    def __init__(self, data_source: RegionDataSourceProtocol) -> None:
        self._data_source = data_source

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "unused_fields"

    def validate(self, address: AddressData) -> ValidationResult:
        result = ValidationResult(is_valid=True)
        script_type = (
            ScriptType.LATIN
            if is_explicit_latin_script(address.language_code)
            else ScriptType.LOCAL
        )
        format_string = get_format_string(script_type, address.region_code, self._data_source)
        displayed = set(iter_fields(format_string))

        candidates = [AddressField.STREET_ADDRESS, *sorted(SINGLE_VALUE_FIELDS, key=lambda f: f.name)]
        for field in candidates:
            if field is AddressField.COUNTRY or field in displayed:
                continue
            if address.has_value(field):
                value = (
                    "\n".join(address.address_lines)
                    if field is AddressField.STREET_ADDRESS
                    else address.get_field_value(field)
                )
                result.add_error(
                    field=field.name,
                    message=(
                        f"Field {field.name} ({field.code}) is not used by the "
                        f"address format of {address.region_code or DEFAULT_REGION_CODE}"
                    ),
                    value=value,
                )
        return result


def create_default_validators(
    data_source: RegionDataSourceProtocol,
    check_unused_fields: bool = True,
) -> CompositeValidator[AddressData]:
    """Create default structural validation pipeline.

    Args:
        data_source: Region metadata source.
        check_unused_fields: If True, also flag populated fields the region
            doesn't display.

    Returns:
        CompositeValidator with default validators configured.
    """
    builder: ValidatorPipelineBuilder[AddressData] = ValidatorPipelineBuilder(
        "address_structure_validation"
    )
    builder.add(RequiredFieldsValidator(data_source))
    if check_unused_fields:
        builder.add(UnusedFieldsValidator(data_source))
    return builder.build()
