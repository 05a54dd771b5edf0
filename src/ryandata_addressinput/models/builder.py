"""Address builder for programmatic address construction.

This module provides a fluent builder interface for constructing immutable
AddressData objects. A builder may be reused to produce several instances.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Self

from pydantic import ValidationError

from ryandata_addressinput.models.address import (
    _FIELD_ATTRIBUTES,
    normalize_address_lines,
    trim_to_null,
)
from ryandata_addressinput.models.enums import (
    ADDRESS_LINE_FIELDS,
    SINGLE_VALUE_FIELDS,
    AddressField,
)
from ryandata_addressinput.models.errors import RyanDataValidationError

if TYPE_CHECKING:
    from ryandata_addressinput.models.address import AddressData


class AddressDataBuilder:
    """Builder for programmatic AddressData construction.

    Example:
        >>> address = (
        ...     AddressDataBuilder()
        ...     .set_country("US")
        ...     .add_address_line("1098 Alta Ave")
        ...     .set_admin_area("CA")
        ...     .set_locality("Mountain View")
        ...     .set_postal_code("94043")
        ...     .build()
        ... )
    """

    def __init__(self) -> None:
        self._fields: dict[AddressField, str] = {}
        # Not normalized until build(); may contain None placeholders
        self._address_lines: list[str | None] = []
        self._language: str | None = None

    @classmethod
    def from_address(cls, address: AddressData) -> AddressDataBuilder:
        """Create a builder pre-populated with the values of an existing address."""
        return cls().set_address_data(address)

    def set_country(self, region_code: str) -> Self:
        """Set the region code."""
        return self.set(AddressField.COUNTRY, region_code)

    def set_admin_area(self, admin_area: str | None) -> Self:
        """Set the administrative area (state, province, prefecture...)."""
        return self.set(AddressField.ADMIN_AREA, admin_area)

    def set_locality(self, locality: str | None) -> Self:
        """Set the locality (city)."""
        return self.set(AddressField.LOCALITY, locality)

    def set_dependent_locality(self, dependent_locality: str | None) -> Self:
        """Set the dependent locality (suburb, district)."""
        return self.set(AddressField.DEPENDENT_LOCALITY, dependent_locality)

    def set_postal_code(self, postal_code: str | None) -> Self:
        """Set the postal code."""
        return self.set(AddressField.POSTAL_CODE, postal_code)

    def set_sorting_code(self, sorting_code: str | None) -> Self:
        """Set the sorting code."""
        return self.set(AddressField.SORTING_CODE, sorting_code)

    def set_organization(self, organization: str | None) -> Self:
        """Set the organization."""
        return self.set(AddressField.ORGANIZATION, organization)

    def set_recipient(self, recipient: str | None) -> Self:
        """Set the recipient name."""
        return self.set(AddressField.RECIPIENT, recipient)

    def set_landmark_address_descriptor(self, descriptor: str | None) -> Self:
        """Set the landmark address descriptor."""
        return self.set(AddressField.LANDMARK_ADDRESS_DESCRIPTOR, descriptor)

    def set_landmark_affix(self, affix: str | None) -> Self:
        """Set the landmark affix."""
        return self.set(AddressField.LANDMARK_AFFIX, affix)

    def set_landmark_name(self, name: str | None) -> Self:
        """Set the landmark name."""
        return self.set(AddressField.LANDMARK_NAME, name)

    def set_language_code(self, language_code: str | None) -> Self:
        """Set the BCP-47 language tag of the address."""
        self._language = language_code
        return self

    def set_address_lines(self, lines: Iterable[str]) -> Self:
        """Replace all address lines."""
        self._address_lines = list(lines)
        return self

    def add_address_line(self, line: str) -> Self:
        """Append an address line."""
        self._address_lines.append(line)
        return self

    def set_address(self, address: str) -> Self:
        """Replace all address lines with a single, possibly multi-line, string."""
        self._address_lines = list(normalize_address_lines([address]))
        return self

    def set_address_line_1(self, value: str | None) -> Self:
        """Set the first address line. Deprecated, prefer set_address_lines()."""
        return self._set_address_line(1, value)

    def set_address_line_2(self, value: str | None) -> Self:
        """Set the second address line. Deprecated, prefer set_address_lines()."""
        return self._set_address_line(2, value)

    def set(self, field: AddressField, value: str | None) -> Self:
        """Set a field by enum.

        Single-valued fields are trimmed and cleared when blank. STREET_ADDRESS
        replaces (or clears) every address line, and the legacy line fields set
        one line.
        """
        if field in SINGLE_VALUE_FIELDS:
            trimmed = trim_to_null(value)
            if trimmed is None:
                self._fields.pop(field, None)
            else:
                self._fields[field] = trimmed
        elif field is AddressField.STREET_ADDRESS:
            if value is None:
                self._address_lines.clear()
            else:
                self.set_address(value)
        else:
            self._set_address_line(ADDRESS_LINE_FIELDS.index(field) + 1, value)
        return self

    def set_address_data(self, address: AddressData) -> Self:
        """Copy every value of an existing address into this builder."""
        self._fields.clear()
        for field in SINGLE_VALUE_FIELDS:
            self.set(field, address.get_field_value(field))
        self._address_lines = list(address.address_lines)
        self._language = address.language_code
        return self

    def _set_address_line(self, line_number: int, value: str | None) -> Self:
        lines = self._address_lines
        if trim_to_null(value) is None:
            if line_number < len(lines):
                # Clearing a line that isn't the last one leaves a gap
                lines[line_number - 1] = None
            elif line_number == len(lines):
                lines.pop()
                while lines and lines[-1] is None:
                    lines.pop()
        else:
            while len(lines) < line_number:
                lines.append(None)
            lines[line_number - 1] = value
        return self

    def reset(self) -> Self:
        """Reset the builder to empty state."""
        self._fields = {}
        self._address_lines = []
        self._language = None
        return self

    def build(self) -> AddressData:
        """Build an immutable AddressData from the current builder state.

        Returns:
            New AddressData instance; the builder keeps its state.

        Raises:
            RyanDataValidationError: If the collected values fail model validation.
        """
        from ryandata_addressinput.models.address import AddressData

        data: dict[str, object] = {
            _FIELD_ATTRIBUTES[field]: value for field, value in self._fields.items()
        }
        data["address_lines"] = list(self._address_lines)
        data["language_code"] = self._language
        try:
            return AddressData.model_validate(data)
        except ValidationError as e:
            raise RyanDataValidationError(e) from e
