"""Address format interpreter.

Reads per-region format templates to work out which fields a region uses,
in which order, which of them are required, how wide their inputs should be,
and how a populated address is laid out on an envelope.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ryandata_addressinput.core.language import is_explicit_latin_script
from ryandata_addressinput.core.tokenizer import (
    NEW_LINE,
    field_for_token,
    is_field_token,
    tokenize,
)
from ryandata_addressinput.data.constants import DEFAULT_REGION_CODE
from ryandata_addressinput.models.enums import (
    AddressDataKey,
    AddressField,
    ScriptType,
    WidthType,
)
from ryandata_addressinput.models.errors import PACKAGE_NAME, RyanDataAddressError
from ryandata_addressinput.models.form_options import FormOptionsSnapshot

if TYPE_CHECKING:
    from ryandata_addressinput.models.address import AddressData
    from ryandata_addressinput.protocols import RegionDataSourceProtocol

logger = logging.getLogger(__name__)


def _resolve_source(
    data_source: RegionDataSourceProtocol | None,
) -> RegionDataSourceProtocol:
    if data_source is not None:
        return data_source
    from ryandata_addressinput.data.json_source import get_default_region_data_source

    return get_default_region_data_source()


def get_format_string(
    script_type: ScriptType,
    region_code: str | None,
    data_source: RegionDataSourceProtocol | None = None,
) -> str:
    """Select the template for a region and script.

    LATIN uses the region's Latin-script template when it has one, otherwise
    its primary template. Regions without a template use the "ZZ" default.

    Raises:
        RyanDataAddressError: If the default region has no template.
    """
    source = _resolve_source(data_source)
    format_string: str | None = None
    if region_code is not None:
        if script_type is ScriptType.LATIN:
            format_string = source.get_value(region_code, AddressDataKey.LFMT)
        if format_string is None:
            format_string = source.get_value(region_code, AddressDataKey.FMT)
    if format_string is None:
        logger.debug("No %s format for region %s, using default", script_type.value, region_code)
        format_string = source.get_value(DEFAULT_REGION_CODE, AddressDataKey.FMT)
    if format_string is None:
        raise RyanDataAddressError(
            "invalid_region_data",
            "Could not obtain a default address field order",
            {"package": PACKAGE_NAME, "region": DEFAULT_REGION_CODE},
        )
    return format_string


def get_required_fields(
    region_code: str,
    data_source: RegionDataSourceProtocol | None = None,
) -> frozenset[AddressField]:
    """Return the fields a region requires, always including COUNTRY.

    Uses the region's "require" metadata, falling back to the "ZZ" default.

    Raises:
        RyanDataAddressError: If the metadata holds an invalid field code.
    """
    source = _resolve_source(data_source)
    require = source.get_value(region_code, AddressDataKey.REQUIRE)
    if require is None:
        require = source.get_value(DEFAULT_REGION_CODE, AddressDataKey.REQUIRE)
    return parse_required_fields(require or "")


def parse_required_fields(require: str) -> frozenset[AddressField]:
    """Decode a string of field codes (e.g. "ACSZ") into a required-field set."""
    required = {AddressField.COUNTRY}
    required.update(AddressField.of(code) for code in require)
    return frozenset(required)


def parse_width_overrides(overrides: str) -> dict[AddressField, WidthType] | None:
    """Decode a width override string such as "%C:L%S:S".

    The string is a sequence of "%" + field code + ":" + width character.

    Returns:
        Mapping of field to width, or None if any segment is malformed.

    Raises:
        RyanDataAddressError: If a well-formed segment uses an unknown field or
            width character.
    """
    if not overrides.startswith("%"):
        return None
    widths: dict[AddressField, WidthType] = {}
    for segment in overrides[1:].split("%"):
        if len(segment) != 3 or segment[1] != ":":
            return None
        widths[AddressField.of(segment[0])] = WidthType.of(segment[2])
    return widths


def get_width_override(
    field: AddressField,
    region_code: str,
    data_source: RegionDataSourceProtocol | None = None,
) -> WidthType | None:
    """Return the width override for a field in a region, or None if there's none.

    A malformed override string yields None for every field of the region.
    """
    source = _resolve_source(data_source)
    overrides = source.get_value(region_code, AddressDataKey.WIDTH_OVERRIDES)
    if not overrides:
        return None
    widths = parse_width_overrides(overrides)
    if widths is None:
        logger.debug("Malformed width overrides for region %s: %r", region_code, overrides)
        return None
    return widths.get(field)


def apply_custom_field_order(
    field_order: list[AddressField],
    custom_order: tuple[AddressField, ...] | list[AddressField],
) -> list[AddressField]:
    """Reorder fields according to a custom order.

    Fields in the custom order that are absent from field_order are dropped.
    Every slot holding a custom-ordered field is then filled with the next
    custom field, in custom order. Other fields keep their position.

    Args:
        field_order: Fields as found in the template, no duplicates.
        custom_order: Caller-supplied order, no duplicates.

    Returns:
        A new, reordered list.

    Raises:
        RyanDataAddressError: If custom_order contains duplicates.
    """
    if len(set(custom_order)) != len(custom_order):
        raise RyanDataAddressError(
            "duplicate_field",
            f"Duplicate address field in custom order: {[f.name for f in custom_order]}",
            {"package": PACKAGE_NAME},
        )
    visible = set(field_order)
    custom = [f for f in custom_order if f in visible]
    if len(custom) != len(custom_order):
        logger.debug(
            "Ignoring custom ordered fields not present in template: %s",
            [f.name for f in custom_order if f not in visible],
        )
    custom_members = set(custom)
    result: list[AddressField] = []
    next_custom = 0
    for field in field_order:
        if field in custom_members:
            result.append(custom[next_custom])
            next_custom += 1
        else:
            result.append(field)
    return result


class FormatInterpreter:
    """Address format interpreter.

    Example:
        >>> interpreter = FormatInterpreter()
        >>> interpreter.get_address_field_order(ScriptType.LOCAL, "US")[:3]
        [<AddressField.RECIPIENT: 'N'>, <AddressField.ORGANIZATION: 'O'>, <AddressField.ADDRESS_LINE_1: '1'>]
    """

    def __init__(
        self,
        form_options: FormOptionsSnapshot | None = None,
        data_source: RegionDataSourceProtocol | None = None,
    ) -> None:
        """Initialize the interpreter.

        Args:
            form_options: Snapshot holding custom field orders. Defaults to none.
            data_source: Region metadata source. Defaults to the bundled table.

        Raises:
            RyanDataAddressError: If the data source has no default template.
        """
        self._form_options = form_options or FormOptionsSnapshot()
        self._data_source = _resolve_source(data_source)
        # Fail early rather than on first use
        get_format_string(ScriptType.LOCAL, DEFAULT_REGION_CODE, self._data_source)

    @property
    def form_options(self) -> FormOptionsSnapshot:
        return self._form_options

    @property
    def data_source(self) -> RegionDataSourceProtocol:
        return self._data_source

    def get_format_string(self, script_type: ScriptType, region_code: str | None) -> str:
        """Return the template used for a region and script."""
        return get_format_string(script_type, region_code, self._data_source)

    def get_address_field_order(
        self, script_type: ScriptType, region_code: str
    ) -> list[AddressField]:
        """Return the fields of a region's format in display order.

        STREET_ADDRESS is expanded into ADDRESS_LINE_1 and ADDRESS_LINE_2.

        Args:
            script_type: LOCAL for the local format, LATIN for the Latin one.
            region_code: Region to look up.
        """
        format_string = self.get_format_string(script_type, region_code)
        return self.get_address_field_order_for_format(format_string, region_code)

    def get_address_field_order_for_format(
        self, format_string: str, region_code: str
    ) -> list[AddressField]:
        """Return the fields of an explicit template in display order.

        Only the first reference to a field counts. The region's custom order,
        if any, is applied before expanding STREET_ADDRESS.
        """
        seen: set[AddressField] = set()
        field_order: list[AddressField] = []
        for token in tokenize(format_string):
            if not is_field_token(token):
                continue
            field = field_for_token(token)
            if field not in seen:
                seen.add(field)
                field_order.append(field)

        custom_order = self._form_options.get_custom_field_order(region_code)
        if custom_order:
            field_order = apply_custom_field_order(field_order, custom_order)

        # Two legacy address lines replace the street address
        if AddressField.STREET_ADDRESS in field_order:
            index = field_order.index(AddressField.STREET_ADDRESS)
            field_order[index : index + 1] = [
                AddressField.ADDRESS_LINE_1,
                AddressField.ADDRESS_LINE_2,
            ]
        return field_order

    def get_required_fields(self, region_code: str) -> frozenset[AddressField]:
        """Return the fields required for a region (COUNTRY is always included)."""
        return get_required_fields(region_code, self._data_source)

    def get_width_override(self, field: AddressField, region_code: str) -> WidthType | None:
        """Return the region's width override for a field, or None."""
        return get_width_override(field, region_code, self._data_source)

    def get_envelope_address(self, address: AddressData) -> list[str]:
        """Lay out an address as envelope lines.

        For example::

            John Doe
            Dnar Corp
            5th St
            Santa Monica CA 90123

        Empty fields are left out together with the literal text attached to
        them, and empty lines are dropped. The address is not validated.

        Args:
            address: Populated address.

        Returns:
            Non-empty lines in envelope order.
        """
        script_type = (
            ScriptType.LATIN if is_explicit_latin_script(address.language_code) else ScriptType.LOCAL
        )
        tokens = tokenize(self.get_format_string(script_type, address.region_code))
        pruned = _prune_tokens(tokens, address)

        lines: list[str] = []
        current: list[str] = []
        for token in pruned:
            if token == NEW_LINE:
                if current:
                    lines.append("".join(current))
                    current = []
            elif is_field_token(token):
                field = field_for_token(token)
                if field is AddressField.STREET_ADDRESS:
                    address_lines = address.address_lines
                    if address_lines:
                        current.append(address_lines[0])
                        if len(address_lines) > 1:
                            lines.append("".join(current))
                            current = []
                            lines.extend(address_lines[1:])
                elif field is AddressField.COUNTRY:
                    # The country is implicit on an envelope
                    continue
                else:
                    current.append(address.get_field_value(field) or "")
            else:
                current.append(token)
        if current:
            lines.append("".join(current))
        return lines


def _prune_tokens(tokens: list[str], address: AddressData) -> list[str]:
    """Drop empty fields and the literals attached to them.

    Newlines are always kept. A literal is kept only if it does not precede a
    dropped field and does not follow one (unless the last kept token is a
    field).
    """
    pruned: list[str] = []
    last = len(tokens) - 1
    for i, token in enumerate(tokens):
        if token == NEW_LINE:
            pruned.append(token)
        elif is_field_token(token):
            if address.has_value(field_for_token(token)):
                pruned.append(token)
        else:
            not_before_empty_field = (
                i == last
                or tokens[i + 1] == NEW_LINE
                or address.has_value(field_for_token(tokens[i + 1]))
            )
            not_after_removed_field = (
                i == 0
                or not is_field_token(tokens[i - 1])
                or (bool(pruned) and is_field_token(pruned[-1]))
            )
            if not_before_empty_field and not_after_removed_field:
                pruned.append(token)
    return pruned
