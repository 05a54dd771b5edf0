"""Address field enumerations and constants."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from ryandata_addressinput.models.errors import PACKAGE_NAME, RyanDataAddressError

if TYPE_CHECKING:
    from ryandata_addressinput.protocols import RegionDataSourceProtocol


class WidthType(str, Enum):
    """Classification of the visual width of address input fields."""

    LONG = "L"
    SHORT = "S"

    @classmethod
    def of(cls, char: str) -> WidthType:
        """Decode a width character from region metadata.

        Args:
            char: Width character ('N' or 'S' for short, 'L' for long).

        Returns:
            The matching WidthType.

        Raises:
            RyanDataAddressError: If the character is not a width code.
        """
        if char in ("N", "S"):
            return cls.SHORT
        if char == "L":
            return cls.LONG
        raise RyanDataAddressError(
            "invalid_width",
            f"Invalid width character: {char}",
            {"package": PACKAGE_NAME, "value": char},
        )


class AddressField(str, Enum):
    """Enumeration of all address fields, valued by their metadata character code.

    One field may stand for more than one input in a form (STREET_ADDRESS), but
    each input is identified by exactly one field.
    """

    COUNTRY = "R"
    ADDRESS_LINE_1 = "1"  # deprecated, use STREET_ADDRESS
    ADDRESS_LINE_2 = "2"  # deprecated, use STREET_ADDRESS
    STREET_ADDRESS = "A"
    ADMIN_AREA = "S"
    LOCALITY = "C"
    DEPENDENT_LOCALITY = "D"
    POSTAL_CODE = "Z"
    SORTING_CODE = "X"
    RECIPIENT = "N"
    ORGANIZATION = "O"
    LANDMARK_ADDRESS_DESCRIPTOR = "T"
    LANDMARK_AFFIX = "F"
    LANDMARK_NAME = "L"

    @property
    def code(self) -> str:
        """Single-character identifier used in region metadata."""
        return self.value

    @property
    def default_width(self) -> WidthType:
        """Width used when the region does not override it."""
        if self in (AddressField.POSTAL_CODE, AddressField.SORTING_CODE):
            return WidthType.SHORT
        return WidthType.LONG

    @classmethod
    def of(cls, code: str) -> AddressField:
        """Return the field for a metadata character code.

        Raises:
            RyanDataAddressError: If the code does not correspond to a field.
        """
        field = _FIELDS_BY_CODE.get(code)
        if field is None:
            raise RyanDataAddressError(
                "invalid_field",
                f"Invalid field character: {code}",
                {"package": PACKAGE_NAME, "value": code},
            )
        return field

    def width_for_region(
        self,
        region_code: str,
        data_source: RegionDataSourceProtocol | None = None,
    ) -> WidthType:
        """Return this field's width, taking per-region overrides into account.

        Args:
            region_code: Region to look up overrides for.
            data_source: Region data source. Defaults to the bundled table.
        """
        from ryandata_addressinput.core.format_interpreter import get_width_override

        width = get_width_override(self, region_code, data_source)
        return width if width is not None else self.default_width


_FIELDS_BY_CODE: dict[str, AddressField] = {f.value: f for f in AddressField}

# Fields superseded by STREET_ADDRESS, in line order
ADDRESS_LINE_FIELDS: tuple[AddressField, ...] = (
    AddressField.ADDRESS_LINE_1,
    AddressField.ADDRESS_LINE_2,
)

# Fields holding exactly one string value
SINGLE_VALUE_FIELDS: frozenset[AddressField] = frozenset(AddressField) - {
    AddressField.STREET_ADDRESS,
    *ADDRESS_LINE_FIELDS,
}


class ScriptType(str, Enum):
    """Script an address is written in, relative to its region.

    Japan's local script is Japanese; a Japanese address may also be written in
    Latin script. Regions that only use Latin script always use LOCAL.
    """

    LATIN = "latin"
    LOCAL = "local"


class KeyType(str, Enum):
    """Lookup key types: address data keys and example address keys."""

    DATA = "data"
    EXAMPLES = "examples"


class AddressDataKey(str, Enum):
    """Named fields found in the per-region metadata."""

    COUNTRIES = "countries"
    FMT = "fmt"
    ID = "id"
    ISOID = "isoid"
    KEY = "key"
    LANG = "lang"
    LANGUAGES = "languages"
    LFMT = "lfmt"
    LOCALITY_NAME_TYPE = "locality_name_type"
    NAME = "name"
    REQUIRE = "require"
    STATE_NAME_TYPE = "state_name_type"
    SUBLOCALITY_NAME_TYPE = "sublocality_name_type"
    SUB_KEYS = "sub_keys"
    SUB_LNAMES = "sub_lnames"
    SUB_MORES = "sub_mores"
    SUB_NAMES = "sub_names"
    UPPER = "upper"
    WIDTH_OVERRIDES = "width_overrides"
    XZIP = "xzip"
    ZIP = "zip"
    ZIP_NAME_TYPE = "zip_name_type"
    POSTPREFIX = "postprefix"
    POSTURL = "posturl"

    @classmethod
    def get(cls, key_name: str | None) -> AddressDataKey | None:
        """Case-insensitive lookup by metadata key name; None if unknown."""
        if key_name is None:
            return None
        try:
            return cls(key_name.lower())
        except ValueError:
            return None
