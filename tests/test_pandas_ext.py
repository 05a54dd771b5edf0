import pytest

# Skip all tests if pandas is not installed
pytest.importorskip("pandas")

import pandas as pd  # noqa: E402

from ryandata_addressinput import (  # noqa: E402
    AddressFormatService,
    RyanDataValidationError,
    format_addresses,
    register_accessor,
)
from ryandata_addressinput.pandas_ext import dataframe_to_addresses  # noqa: E402


@pytest.fixture
def address_frame() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "region_code": ["US", "US"],
            "address_lines": ["1098 Alta Ave", "5th St\nSuite 100"],
            "locality": ["Mountain View", "Santa Monica"],
            "administrative_area": ["CA", float("nan")],
            "postal_code": ["94043", "90123"],
            "notes": ["keep", "keep"],
        },
        index=[10, 20],
    )


class TestDataframeToAddresses:
    """Test dataframe_to_addresses function."""

    def test_default_columns(self, address_frame: pd.DataFrame) -> None:
        addresses = dataframe_to_addresses(address_frame)
        assert len(addresses) == 2
        assert addresses[0].locality == "Mountain View"
        assert addresses[1].address_lines == ("5th St", "Suite 100")

    def test_missing_cells_are_absent(self, address_frame: pd.DataFrame) -> None:
        addresses = dataframe_to_addresses(address_frame)
        assert addresses[1].administrative_area is None

    def test_column_mapping(self) -> None:
        df = pd.DataFrame({"country": ["US"], "city": ["Austin"], "zip": [78701]})
        addresses = dataframe_to_addresses(
            df, {"region_code": "country", "locality": "city", "postal_code": "zip"}
        )
        assert addresses[0].locality == "Austin"
        assert addresses[0].postal_code == "78701"

    def test_integer_column_with_missing_rows(self) -> None:
        """An integer column with gaps is stored as floats but still reads as text."""
        df = pd.DataFrame({"region_code": ["US", "US"], "postal_code": [94043, None]})
        addresses = dataframe_to_addresses(df)
        assert addresses[0].postal_code == "94043"
        assert addresses[1].postal_code is None

    def test_rejected_value_is_wrapped(self) -> None:
        df = pd.DataFrame({"region_code": ["US"], "postal_code": [940.5]})
        with pytest.raises(RyanDataValidationError):
            dataframe_to_addresses(df)

    def test_missing_address_lines(self) -> None:
        df = pd.DataFrame({"region_code": ["US"], "address_lines": [None]})
        assert dataframe_to_addresses(df)[0].address_lines == ()

    def test_unknown_attribute(self) -> None:
        df = pd.DataFrame({"city": ["Austin"]})
        with pytest.raises(ValueError):
            dataframe_to_addresses(df, {"city": "city"})

    def test_missing_column(self) -> None:
        df = pd.DataFrame({"city": ["Austin"]})
        with pytest.raises(KeyError):
            dataframe_to_addresses(df, {"locality": "town"})


class TestFormatAddresses:
    """Test format_addresses DataFrame function."""

    def test_adds_envelope_column(self, address_frame: pd.DataFrame) -> None:
        result = format_addresses(address_frame)

        assert "envelope" in result.columns
        assert "envelope" not in address_frame.columns
        assert result["envelope"].iloc[0] == "1098 Alta Ave\nMountain View, CA 94043"
        assert result["envelope"].iloc[1] == "5th St\nSuite 100\nSanta Monica 90123"
        assert list(result["notes"]) == ["keep", "keep"]

    def test_prefix_separator_inplace(self, address_frame: pd.DataFrame) -> None:
        result = format_addresses(address_frame, prefix="addr_", separator=", ", inplace=True)

        assert result is address_frame
        assert address_frame["addr_envelope"].iloc[0] == "1098 Alta Ave, Mountain View, CA 94043"

    def test_service_method(self, fake_source, address_frame: pd.DataFrame) -> None:
        service = AddressFormatService(data_source=fake_source)
        result = service.format_dataframe(address_frame, separator=" / ")
        assert result["envelope"].iloc[0] == "1098 Alta Ave / Mountain View, CA 94043"


class TestAccessor:
    """Test the DataFrame accessor."""

    def test_envelope(self, address_frame: pd.DataFrame) -> None:
        register_accessor()
        envelopes = address_frame.addrfmt.envelope(separator=" | ")

        assert isinstance(envelopes, pd.Series)
        assert list(envelopes.index) == [10, 20]
        assert envelopes[10] == "1098 Alta Ave | Mountain View, CA 94043"

    def test_lookup_keys(self, address_frame: pd.DataFrame) -> None:
        register_accessor()
        keys = address_frame.addrfmt.lookup_keys()

        assert list(keys) == ["data/US/CA/Mountain View", "data/US"]

    def test_register_twice(self) -> None:
        register_accessor()
        register_accessor()
        assert hasattr(pd.DataFrame, "addrfmt")
