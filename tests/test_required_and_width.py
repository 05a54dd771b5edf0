import pytest

from ryandata_addressinput.core.format_interpreter import (
    FormatInterpreter,
    get_required_fields,
    get_width_override,
    parse_required_fields,
    parse_width_overrides,
)
from ryandata_addressinput.models import AddressField, RyanDataAddressError, WidthType

A = AddressField


class TestRequiredFields:
    """Tests for decoding required field codes."""

    def test_us(self, fake_source) -> None:
        assert get_required_fields("US", fake_source) == {
            A.COUNTRY,
            A.STREET_ADDRESS,
            A.LOCALITY,
            A.ADMIN_AREA,
            A.POSTAL_CODE,
        }

    def test_unknown_region_uses_default(self, fake_source) -> None:
        assert get_required_fields("XX", fake_source) == {A.COUNTRY, A.STREET_ADDRESS, A.LOCALITY}

    def test_region_without_require_uses_default(self, fake_source) -> None:
        assert get_required_fields("XB", fake_source) == {A.COUNTRY, A.STREET_ADDRESS, A.LOCALITY}

    def test_country_always_required(self) -> None:
        assert parse_required_fields("") == {A.COUNTRY}

    def test_invalid_code_raises(self) -> None:
        with pytest.raises(RyanDataAddressError) as exc_info:
            parse_required_fields("AQ")
        assert exc_info.value.type == "invalid_field"

    def test_interpreter_method(self, fake_source) -> None:
        interpreter = FormatInterpreter(data_source=fake_source)
        assert interpreter.get_required_fields("JP") == {
            A.COUNTRY,
            A.STREET_ADDRESS,
            A.ADMIN_AREA,
            A.POSTAL_CODE,
        }

    def test_bundled_data(self) -> None:
        assert get_required_fields("DE") == {A.COUNTRY, A.STREET_ADDRESS, A.LOCALITY, A.POSTAL_CODE}


class TestWidthOverrides:
    """Tests for decoding per-region width overrides."""

    def test_parse(self) -> None:
        assert parse_width_overrides("%C:L%S:S") == {A.LOCALITY: WidthType.LONG, A.ADMIN_AREA: WidthType.SHORT}

    @pytest.mark.parametrize("overrides", ["%C L", "C:L", "%C:", "%C:LL", "%:L", "%C:L%", "%C:L%SS"])
    def test_malformed_returns_none(self, overrides: str) -> None:
        assert parse_width_overrides(overrides) is None

    def test_unknown_width_character_raises(self) -> None:
        with pytest.raises(RyanDataAddressError) as exc_info:
            parse_width_overrides("%C:Q")
        assert exc_info.value.type == "invalid_width"

    def test_lookup(self, fake_source) -> None:
        assert get_width_override(A.LOCALITY, "XW", fake_source) is WidthType.LONG
        assert get_width_override(A.ADMIN_AREA, "XW", fake_source) is WidthType.SHORT
        assert get_width_override(A.POSTAL_CODE, "XW", fake_source) is None

    def test_malformed_region_has_no_overrides(self, fake_source) -> None:
        assert get_width_override(A.LOCALITY, "XB", fake_source) is None

    def test_region_without_overrides(self, fake_source) -> None:
        assert get_width_override(A.ADMIN_AREA, "ZZ", fake_source) is None
        assert get_width_override(A.ADMIN_AREA, "XX", fake_source) is None

    def test_bundled_data(self) -> None:
        assert get_width_override(A.DEPENDENT_LOCALITY, "CN") is WidthType.SHORT
        assert get_width_override(A.LOCALITY, "HK") is WidthType.LONG
