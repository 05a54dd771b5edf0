"""Address value object.

This module contains the immutable AddressData Pydantic model used as input
to envelope formatting and lookup key construction.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ryandata_addressinput.models.enums import ADDRESS_LINE_FIELDS, AddressField
from ryandata_addressinput.models.errors import PACKAGE_NAME, RyanDataAddressError


# Characters up to and including the space are trimmed from values
_TRIM_CHARS = "".join(chr(c) for c in range(0x21))


def trim_to_null(value: str | None) -> str | None:
    """Trim ASCII control characters and spaces; return None for blank input."""
    if value is None:
        return None
    trimmed = value.strip(_TRIM_CHARS)
    return trimmed or None


def normalize_address_lines(lines: Iterable[str | None]) -> tuple[str, ...]:
    """Split lines on embedded line breaks, trim them, and drop empty results.

    Args:
        lines: Raw address lines, possibly None or containing "\\n".

    Returns:
        Tuple of non-empty, trimmed lines in their original order.
    """
    normalized: list[str] = []
    for line in lines:
        if line is None:
            continue
        for part in line.split("\n"):
            trimmed = trim_to_null(part)
            if trimmed is not None:
                normalized.append(trimmed)
    return tuple(normalized)


class AddressData(BaseModel):
    """An immutable international postal address.

    Single-valued fields are trimmed, and blank values are stored as None.
    Address lines never contain line breaks: input lines are split on "\\n",
    with empty results dropped.

    Example:
        >>> address = AddressData(
        ...     region_code="US",
        ...     address_lines=["1098 Alta Ave"],
        ...     administrative_area="CA",
        ...     locality="Mountain View",
        ...     postal_code="94043",
        ... )
        >>> address.address_line_1
        '1098 Alta Ave'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    region_code: str | None = Field(
        default=None,
        description="CLDR region code of the address (e.g. 'US', 'JP')",
    )
    address_lines: tuple[str, ...] = Field(
        default=(),
        description="Free-form street address lines, most specific part of the address",
    )
    administrative_area: str | None = Field(
        default=None, description="Top-level administrative subdivision (state, province)"
    )
    locality: str | None = Field(default=None, description="City or town")
    dependent_locality: str | None = Field(
        default=None, description="Sublocality such as a neighbourhood or suburb"
    )
    postal_code: str | None = Field(default=None, description="Postal code, often alphanumeric")
    sorting_code: str | None = Field(
        default=None, description="Sorting code (CEDEX in France, for example)"
    )
    organization: str | None = Field(default=None, description="Firm or organization")
    recipient: str | None = Field(default=None, description="Name of the recipient")
    language_code: str | None = Field(
        default=None, description="BCP-47 language tag the address is written in"
    )
    landmark_address_descriptor: str | None = Field(
        default=None, description="Landmark address descriptor"
    )
    landmark_affix: str | None = Field(default=None, description="Landmark affix")
    landmark_name: str | None = Field(default=None, description="Landmark name")

    @field_validator(
        "region_code",
        "administrative_area",
        "locality",
        "dependent_locality",
        "postal_code",
        "sorting_code",
        "organization",
        "recipient",
        "language_code",
        "landmark_address_descriptor",
        "landmark_affix",
        "landmark_name",
        mode="before",
    )
    @classmethod
    def _trim_value(cls, value: Any) -> Any:
        if isinstance(value, str):
            return trim_to_null(value)
        return value

    @field_validator("address_lines", mode="before")
    @classmethod
    def _normalize_lines(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, str):
            return normalize_address_lines([value])
        if isinstance(value, Iterable):
            items = list(value)
            if all(item is None or isinstance(item, str) for item in items):
                return normalize_address_lines(items)
            return items
        return value

    @property
    def address_line_1(self) -> str | None:
        """First address line. Deprecated, prefer ``address_lines``."""
        return self._get_address_line(1)

    @property
    def address_line_2(self) -> str | None:
        """Second address line with any further lines joined by ", ".

        Deprecated, prefer ``address_lines``.
        """
        return self._get_address_line(2)

    def _get_address_line(self, line_number: int) -> str | None:
        lines = self.address_lines
        if line_number < len(ADDRESS_LINE_FIELDS) or line_number >= len(lines):
            return lines[line_number - 1] if line_number <= len(lines) else None
        # Last legacy line absorbs every remaining line
        return ", ".join(lines[line_number - 1 :])

    def get_field_value(self, field: AddressField) -> str | None:
        """Return the value of a single-valued field.

        Args:
            field: Any field other than STREET_ADDRESS.

        Raises:
            RyanDataAddressError: If asked for the multi-valued STREET_ADDRESS field.
        """
        if field is AddressField.STREET_ADDRESS:
            raise RyanDataAddressError(
                "multi_value_field",
                f"Multi-value fields not supported: {field.name}",
                {"package": PACKAGE_NAME, "field": field.name},
            )
        if field is AddressField.ADDRESS_LINE_1:
            return self.address_line_1
        if field is AddressField.ADDRESS_LINE_2:
            return self.address_line_2
        return getattr(self, _FIELD_ATTRIBUTES[field])

    def has_value(self, field: AddressField) -> bool:
        """Return True if the address holds any data for this field."""
        if field is AddressField.STREET_ADDRESS:
            return bool(self.address_lines)
        return bool(self.get_field_value(field))

    def to_dict(self) -> dict[str, Any]:
        """Convert the address to a plain dictionary."""
        data = self.model_dump()
        data["address_lines"] = list(self.address_lines)
        return data


_FIELD_ATTRIBUTES: dict[AddressField, str] = {
    AddressField.COUNTRY: "region_code",
    AddressField.ADMIN_AREA: "administrative_area",
    AddressField.LOCALITY: "locality",
    AddressField.DEPENDENT_LOCALITY: "dependent_locality",
    AddressField.POSTAL_CODE: "postal_code",
    AddressField.SORTING_CODE: "sorting_code",
    AddressField.ORGANIZATION: "organization",
    AddressField.RECIPIENT: "recipient",
    AddressField.LANDMARK_ADDRESS_DESCRIPTOR: "landmark_address_descriptor",
    AddressField.LANDMARK_AFFIX: "landmark_affix",
    AddressField.LANDMARK_NAME: "landmark_name",
}
