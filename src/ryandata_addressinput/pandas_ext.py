from __future__ import annotations

import numbers
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from ryandata_addressinput.models import AddressData, RyanDataValidationError

if TYPE_CHECKING:
    import pandas as pd

    from ryandata_addressinput.service import AddressFormatService

ADDRESS_ATTRIBUTES: tuple[str, ...] = tuple(AddressData.model_fields)


def _cell_value(value: Any) -> Any:
    """Return None for missing cells (None, NaN, NA), the value otherwise.

    Whole numbers become strings, including those pandas stored as floats
    because the column has missing cells (94043.0 becomes "94043").
    """
    import pandas as pd

    if value is None:
        return None
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return value


def _resolve_columns(
    df: pd.DataFrame, columns: Mapping[str, str] | None
) -> dict[str, str]:
    if columns is None:
        return {attr: attr for attr in ADDRESS_ATTRIBUTES if attr in df.columns}
    unknown = sorted(set(columns) - set(ADDRESS_ATTRIBUTES))
    if unknown:
        raise ValueError(f"Unknown address attributes in column mapping: {unknown}")
    missing = sorted(col for col in columns.values() if col not in df.columns)
    if missing:
        raise KeyError(f"Columns not found in DataFrame: {missing}")
    return dict(columns)


def dataframe_to_addresses(
    df: pd.DataFrame,
    columns: Mapping[str, str] | None = None,
) -> list[AddressData]:
    """Build one AddressData per DataFrame row.

    Args:
        df: Input DataFrame.
        columns: Mapping of AddressData attribute to column name. Defaults to
            every column named like an AddressData attribute.

    Returns:
        Addresses in row order. Missing cells are treated as absent values.

    Raises:
        RyanDataValidationError: If a row holds values AddressData rejects.
    """
    mapping = _resolve_columns(df, columns)
    addresses: list[AddressData] = []
    for record in df[list(mapping.values())].to_dict(orient="records"):
        values = {attr: _cell_value(record[col]) for attr, col in mapping.items()}
        if values.get("address_lines") is None:
            values.pop("address_lines", None)
        try:
            addresses.append(AddressData.model_validate(values))
        except ValidationError as e:
            raise RyanDataValidationError(e) from e
    return addresses


class AddressFormatAccessor:
    """Pandas accessor for address formatting.

    Usage:
        >>> from ryandata_addressinput.pandas_ext import register_accessor
        >>> register_accessor()
        >>> df = pd.DataFrame({"region_code": ["US"], "locality": ["Austin"]})
        >>> df.addrfmt.envelope()
    """

    def __init__(self, pandas_obj: pd.DataFrame) -> None:
        """Initialize the accessor.

        Args:
            pandas_obj: The pandas DataFrame this accessor is attached to.
        """
        self._obj = pandas_obj
        self._service: AddressFormatService | None = None

    def _get_service(self) -> AddressFormatService:
        """Get the default AddressFormatService instance."""
        if self._service is None:
            from ryandata_addressinput.service import get_default_service

            self._service = get_default_service()
        return self._service

    def addresses(self, columns: Mapping[str, str] | None = None) -> list[AddressData]:
        """Get one AddressData per row."""
        return dataframe_to_addresses(self._obj, columns)

    def envelope(
        self,
        *,
        columns: Mapping[str, str] | None = None,
        separator: str = "\n",
        service: AddressFormatService | None = None,
    ) -> pd.Series:
        """Format every row as envelope text.

        Args:
            columns: Mapping of AddressData attribute to column name.
            separator: String placed between envelope lines.
            service: Optional AddressFormatService to use.

        Returns:
            Series of formatted addresses aligned with the DataFrame index.
        """
        import pandas as pd

        svc = service or self._get_service()
        return pd.Series(
            [svc.format_address(a, separator=separator) for a in self.addresses(columns)],
            index=self._obj.index,
            dtype="object",
        )

    def lookup_keys(
        self,
        *,
        columns: Mapping[str, str] | None = None,
        service: AddressFormatService | None = None,
    ) -> pd.Series:
        """Get the DATA lookup key string of every row (e.g. "data/US/CA")."""
        import pandas as pd

        svc = service or self._get_service()
        return pd.Series(
            [str(svc.lookup_key(a)) for a in self.addresses(columns)],
            index=self._obj.index,
            dtype="object",
        )


def register_accessor(name: str = "addrfmt") -> None:
    """Register the address format accessor on pandas DataFrames.

    After calling this, you can use:
        >>> df.addrfmt.envelope()

    Args:
        name: Name for the accessor (default: "addrfmt").
    """
    import pandas as pd

    if not hasattr(pd.DataFrame, name):
        pd.api.extensions.register_dataframe_accessor(name)(AddressFormatAccessor)


def format_addresses(
    df: pd.DataFrame,
    columns: Mapping[str, str] | None = None,
    prefix: str = "",
    separator: str = "\n",
    inplace: bool = False,
) -> pd.DataFrame:
    """Format addresses in a DataFrame and add an envelope column.

    Note: Prefer using AddressFormatService.format_dataframe() instead.

    Args:
        df: Input DataFrame with address columns.
        columns: Mapping of AddressData attribute to column name.
        prefix: Prefix to add to the new column name.
        separator: String placed between envelope lines.
        inplace: If True, modify DataFrame in place.

    Returns:
        DataFrame with a new "<prefix>envelope" column.
    """
    from ryandata_addressinput.service import get_default_service

    return get_default_service().format_dataframe(
        df,
        columns,
        prefix=prefix,
        separator=separator,
        inplace=inplace,
    )
