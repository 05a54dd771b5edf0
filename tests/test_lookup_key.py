from __future__ import annotations

import pytest

from ryandata_addressinput.core.lookup_key import LookupKey, LookupKeyBuilder
from ryandata_addressinput.models import (
    AddressData,
    AddressField,
    KeyType,
    RyanDataAddressError,
    ScriptType,
)

A = AddressField


class TestDecoding:
    """Tests for decoding key strings."""

    @pytest.mark.parametrize(
        "key_string",
        [
            "data",
            "data/US",
            "data/US/CA",
            "data/US/CA/Mountain View",
            "data/CN/广东省/深圳市/南山区",
            "data/US--en",
            "data/CA/QC--fr",
            "data/TW/台北市--zh-Hant",
            "examples/TW/local/_default",
            "examples/JP/latin/ja-Latn",
        ],
    )
    def test_round_trip(self, key_string: str) -> None:
        assert str(LookupKey.from_string(key_string)) == key_string

    def test_nodes(self) -> None:
        key = LookupKey.from_string("data/US/CA/Mountain View--en")
        assert key.key_type is KeyType.DATA
        assert key.nodes == {A.COUNTRY: "US", A.ADMIN_AREA: "CA", A.LOCALITY: "Mountain View"}
        assert key.language_code == "en"
        assert key.script_type is ScriptType.LOCAL

    def test_trailing_slash_ignored(self) -> None:
        assert str(LookupKey.from_string("data/US/CA/")) == "data/US/CA"

    def test_empty_node_truncates(self) -> None:
        assert str(LookupKey.from_string("data/US//Mt View")) == "data/US"

    def test_extra_parts_fold_into_dependent_locality(self) -> None:
        key = LookupKey.from_string("data/C/A/L/D/E")
        assert key.nodes[A.DEPENDENT_LOCALITY] == "D/E"
        assert str(key) == "data/C/A/L/D/E"

    @pytest.mark.parametrize("key_string", ["", "/", "foo/US", "Data/US", "data--en"])
    def test_wrong_key_type(self, key_string: str) -> None:
        with pytest.raises(RyanDataAddressError) as exc_info:
            LookupKey.from_string(key_string)
        assert exc_info.value.type == "invalid_key"

    @pytest.mark.parametrize(
        "key_string",
        ["data/US--en--fr", "data/US--en/CA", "data/US/CA--", "data/US/--en"],
    )
    def test_malformed_language_suffix(self, key_string: str) -> None:
        with pytest.raises(RyanDataAddressError) as exc_info:
            LookupKey.from_string(key_string)
        assert exc_info.value.type == "invalid_key"

    def test_examples_key(self) -> None:
        key = LookupKey.from_string("examples/JP/latin/ja-Latn")
        assert key.key_type is KeyType.EXAMPLES
        assert key.script_type is ScriptType.LATIN
        assert key.language_code == "ja-Latn"
        assert key.nodes == {A.COUNTRY: "JP"}

    def test_examples_default_language(self) -> None:
        key = LookupKey.from_string("examples/TW/local/_default")
        assert key.language_code is None

    def test_examples_invalid_script(self) -> None:
        with pytest.raises(RyanDataAddressError) as exc_info:
            LookupKey.from_string("examples/TW/cyrillic/_default")
        assert exc_info.value.type == "invalid_key"


class TestNavigation:
    """Tests for parent and upper level keys."""

    def test_parent_key(self) -> None:
        parent = LookupKey.from_string("data/US/CA").parent_key
        assert parent is not None
        assert str(parent) == "data/US"
        assert parent.nodes == {A.COUNTRY: "US"}

    def test_parent_keeps_language_and_script(self) -> None:
        key = (
            LookupKeyBuilder.from_key_string("data/JP/Tokyo--ja-Latn")
            .set_script_type(ScriptType.LATIN)
            .build()
        )
        parent = key.parent_key
        assert parent is not None
        assert str(parent) == "data/JP--ja-Latn"
        assert parent.script_type is ScriptType.LATIN

    def test_root_parent(self) -> None:
        country = LookupKey.from_string("data/US").parent_key
        assert country is not None
        assert str(country) == "data"
        assert country.parent_key is None

    def test_parent_of_examples_key_raises(self) -> None:
        with pytest.raises(RyanDataAddressError) as exc_info:
            _ = LookupKey.from_string("examples/US/local/_default").parent_key
        assert exc_info.value.type == "unsupported_key_type"

    def test_key_for_upper_level_field(self) -> None:
        key = LookupKey.from_string("data/US/CA/Mountain View--en")
        upper = key.key_for_upper_level_field(A.ADMIN_AREA)
        assert upper is not None
        assert str(upper) == "data/US/CA--en"
        assert key.key_for_upper_level_field(A.LOCALITY) == key

    def test_key_for_upper_level_field_absent_level(self) -> None:
        key = LookupKey.from_string("data/US")
        assert key.key_for_upper_level_field(A.LOCALITY) is None

    def test_key_for_upper_level_field_outside_hierarchy(self) -> None:
        key = LookupKey.from_string("data/US/CA")
        assert key.key_for_upper_level_field(A.POSTAL_CODE) is None

    def test_key_for_upper_level_field_examples_raises(self) -> None:
        with pytest.raises(RyanDataAddressError):
            LookupKey.from_string("examples/US/local/_default").key_for_upper_level_field(A.COUNTRY)

    def test_value_for_upper_level_field(self) -> None:
        key = LookupKey.from_string("data/US/CA")
        assert key.value_for_upper_level_field(A.COUNTRY) == "US"
        assert key.value_for_upper_level_field(A.LOCALITY) == ""


class TestBuilder:
    """Tests for LookupKeyBuilder."""

    def test_nodes_in_order(self) -> None:
        key = (
            LookupKeyBuilder(KeyType.DATA)
            .set_node(A.COUNTRY, "US")
            .set_node(A.ADMIN_AREA, "CA")
            .set_language_code("en")
            .build()
        )
        assert str(key) == "data/US/CA--en"

    def test_skipping_a_level_raises(self) -> None:
        with pytest.raises(RyanDataAddressError) as exc_info:
            LookupKeyBuilder(KeyType.DATA).set_node(A.COUNTRY, "US").set_node(A.LOCALITY, "SF")
        assert exc_info.value.type == "invalid_hierarchy"

    def test_field_outside_hierarchy_raises(self) -> None:
        with pytest.raises(RyanDataAddressError) as exc_info:
            LookupKeyBuilder(KeyType.DATA).set_node(A.POSTAL_CODE, "94043")
        assert exc_info.value.type == "invalid_hierarchy"

    def test_clearing_a_level_clears_deeper_levels(self) -> None:
        builder = LookupKeyBuilder.from_key_string("data/US/CA/Mountain View")
        assert str(builder.set_node(A.ADMIN_AREA, None).build()) == "data/US"

    def test_root_key_drops_language(self) -> None:
        assert str(LookupKeyBuilder(KeyType.DATA).set_language_code("en").build()) == "data"

    def test_examples_key_without_country(self) -> None:
        assert str(LookupKeyBuilder(KeyType.EXAMPLES).build()) == "examples"

    def test_builder_is_reusable(self) -> None:
        builder = LookupKeyBuilder(KeyType.DATA).set_node(A.COUNTRY, "US")
        first = builder.build()
        second = builder.set_node(A.ADMIN_AREA, "CA").build()
        assert str(first) == "data/US"
        assert str(second) == "data/US/CA"

    def test_from_key(self) -> None:
        key = LookupKey.from_string("data/US/CA--en")
        assert LookupKeyBuilder.from_key(key).build() == key

    def test_set_address_data(self) -> None:
        address = AddressData(
            region_code="US",
            administrative_area="CA",
            locality="Mountain View",
            language_code="en",
        )
        key = LookupKeyBuilder(KeyType.DATA).set_address_data(address).build()
        assert str(key) == "data/US/CA/Mountain View--en"
        assert key.script_type is ScriptType.LOCAL

    def test_set_address_data_stops_at_missing_level(self) -> None:
        address = AddressData(region_code="US", locality="Mountain View")
        key = LookupKeyBuilder(KeyType.DATA).set_address_data(address).build()
        assert str(key) == "data/US"

    def test_set_address_data_latin_script(self) -> None:
        address = AddressData(region_code="JP", administrative_area="Tokyo", language_code="ja-Latn")
        key = LookupKeyBuilder(KeyType.DATA).set_address_data(address).build()
        assert key.script_type is ScriptType.LATIN
        assert str(key) == "data/JP/Tokyo--ja-Latn"


class TestIdentity:
    """Equality and hashing use the key string."""

    def test_equal_keys(self) -> None:
        first = LookupKey.from_string("data/US/CA")
        second = LookupKeyBuilder(KeyType.DATA).set_node(A.COUNTRY, "US").set_node(A.ADMIN_AREA, "CA").build()
        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_different_keys(self) -> None:
        assert LookupKey.from_string("data/US") != LookupKey.from_string("data/US--en")
        assert LookupKey.from_string("data/US") != "data/US"

    def test_immutable(self) -> None:
        key = LookupKey.from_string("data/US")
        with pytest.raises(AttributeError):
            key.language_code = "en"  # type: ignore[misc]

    def test_has_valid_key_prefix(self) -> None:
        assert LookupKey.has_valid_key_prefix("data/US")
        assert LookupKey.has_valid_key_prefix("examples/US/local/_default")
        assert not LookupKey.has_valid_key_prefix("foo/US")
