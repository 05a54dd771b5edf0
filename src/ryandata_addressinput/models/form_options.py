"""Form options controlling field visibility and ordering.

FormOptions is the mutable staging object; FormOptionsSnapshot is the
immutable view consumed by the format interpreter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Self

from ryandata_addressinput.models.enums import AddressField
from ryandata_addressinput.models.errors import PACKAGE_NAME, RyanDataAddressError


class FormOptions:
    """Mutable options for hiding, locking and reordering address fields.

    Example:
        >>> options = (
        ...     FormOptions()
        ...     .set_hidden(AddressField.SORTING_CODE)
        ...     .set_custom_field_order("US", AddressField.ORGANIZATION, AddressField.RECIPIENT)
        ... )
        >>> snapshot = options.create_snapshot()
    """

    def __init__(self) -> None:
        self._hidden_fields: set[AddressField] = set()
        self._readonly_fields: set[AddressField] = set()
        self._blacklisted_regions: set[str] = set()
        self._custom_field_order: dict[str, tuple[AddressField, ...]] = {}

    def set_hidden(self, field: AddressField) -> Self:
        """Hide a field. Calls are cumulative."""
        self._hidden_fields.add(field)
        return self

    def set_readonly(self, field: AddressField) -> Self:
        """Mark a field read-only. Calls are cumulative."""
        self._readonly_fields.add(field)
        return self

    def blacklist_region(self, region_code: str) -> Self:
        """Exclude a region from selection. Calls are cumulative."""
        self._blacklisted_regions.add(region_code.upper())
        return self

    def set_custom_field_order(self, region_code: str, *fields: AddressField) -> Self:
        """Set the order of address fields for a region.

        Fields named here are moved, in the given relative order, into the slots
        previously occupied by any of them. Other fields keep their position.
        Fields the region does not display are ignored, so a custom order can
        never add fields. An empty field list removes the override.

        Raises:
            RyanDataAddressError: If a field appears more than once.
        """
        if not fields:
            self._custom_field_order.pop(region_code, None)
            return self
        if len(set(fields)) != len(fields):
            raise RyanDataAddressError(
                "duplicate_field",
                f"Duplicate address field in custom order: {[f.name for f in fields]}",
                {"package": PACKAGE_NAME, "region": region_code},
            )
        self._custom_field_order[region_code] = tuple(fields)
        return self

    def create_snapshot(self) -> FormOptionsSnapshot:
        """Return an immutable snapshot of the current options."""
        return FormOptionsSnapshot(
            hidden_fields=frozenset(self._hidden_fields),
            readonly_fields=frozenset(self._readonly_fields),
            blacklisted_regions=frozenset(self._blacklisted_regions),
            custom_field_order=MappingProxyType(dict(self._custom_field_order)),
        )


@dataclass(frozen=True)
class FormOptionsSnapshot:
    """Immutable snapshot of FormOptions."""

    hidden_fields: frozenset[AddressField] = frozenset()
    readonly_fields: frozenset[AddressField] = frozenset()
    blacklisted_regions: frozenset[str] = frozenset()
    custom_field_order: MappingProxyType[str, tuple[AddressField, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def is_hidden(self, field: AddressField) -> bool:
        return field in self.hidden_fields

    def is_readonly(self, field: AddressField) -> bool:
        return field in self.readonly_fields

    def is_blacklisted_region(self, region_code: str) -> bool:
        return region_code.upper() in self.blacklisted_regions

    def get_custom_field_order(self, region_code: str) -> tuple[AddressField, ...]:
        """Return the custom order for a region, or an empty tuple if none is set."""
        return self.custom_field_order.get(region_code, ())
