"""Hierarchical lookup keys for region metadata.

There are two key types. DATA keys follow the address hierarchy
COUNTRY -> ADMIN_AREA -> LOCALITY -> DEPENDENT_LOCALITY, e.g.
"data/US/CA/Mountain View--en". EXAMPLES keys identify example addresses,
e.g. "examples/TW/local/_default".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Self

from ryandata_addressinput.core.language import is_explicit_latin_script
from ryandata_addressinput.models.address import trim_to_null
from ryandata_addressinput.models.enums import AddressField, KeyType, ScriptType
from ryandata_addressinput.models.errors import PACKAGE_NAME, RyanDataAddressError

if TYPE_CHECKING:
    from ryandata_addressinput.models.address import AddressData

logger = logging.getLogger(__name__)

# Sub-administrative areas are not part of the hierarchy
HIERARCHY: tuple[AddressField, ...] = (
    AddressField.COUNTRY,
    AddressField.ADMIN_AREA,
    AddressField.LOCALITY,
    AddressField.DEPENDENT_LOCALITY,
)

SLASH_DELIM = "/"
DASH_DELIM = "--"
DEFAULT_LANGUAGE = "_default"


def _invalid_key(message: str, value: str) -> RyanDataAddressError:
    return RyanDataAddressError(
        "invalid_key",
        message,
        {"package": PACKAGE_NAME, "value": value},
    )


def _split(text: str, delimiter: str) -> list[str]:
    """Split text, dropping trailing empty parts."""
    parts = text.split(delimiter)
    while parts and not parts[-1]:
        parts.pop()
    return parts


@dataclass(frozen=True, eq=False)
class LookupKey:
    """Immutable lookup key.

    Build instances with LookupKeyBuilder or LookupKey.from_string(). The
    canonical string is computed once and is used for equality and hashing.

    Attributes:
        key_type: DATA or EXAMPLES.
        script_type: Script of the data the key refers to.
        values: Hierarchy values, shallowest first (a prefix of HIERARCHY).
        language_code: Optional language tag.
    """

    key_type: KeyType
    script_type: ScriptType = ScriptType.LOCAL
    values: tuple[str, ...] = ()
    language_code: str | None = None
    key_string: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if len(self.values) > len(HIERARCHY):
            raise RyanDataAddressError(
                "invalid_hierarchy",
                f"Lookup key has more than {len(HIERARCHY)} hierarchy levels",
                {"package": PACKAGE_NAME, "value": list(self.values)},
            )
        object.__setattr__(self, "key_string", self._create_key_string())

    @classmethod
    def from_string(cls, key_string: str) -> LookupKey:
        """Decode a key string such as "data/US/CA".

        Raises:
            RyanDataAddressError: If the string is not a valid key.
        """
        return LookupKeyBuilder.from_key_string(key_string).build()

    @staticmethod
    def has_valid_key_prefix(key: str) -> bool:
        """Return True if the string starts with a known key type name."""
        return any(key.startswith(key_type.value) for key_type in KeyType)

    @property
    def nodes(self) -> dict[AddressField, str]:
        """Hierarchy values keyed by field, in hierarchy order."""
        return dict(zip(HIERARCHY, self.values))

    def _create_key_string(self) -> str:
        parts = [self.key_type.value]
        if self.key_type is KeyType.DATA:
            parts.extend(self.values)
            key = SLASH_DELIM.join(parts)
            # Root keys never carry a language
            if self.language_code is not None and self.values:
                key += DASH_DELIM + self.language_code
            return key
        if self.values:
            parts.extend(
                [
                    self.values[0],
                    self.script_type.value,
                    self.language_code or DEFAULT_LANGUAGE,
                ]
            )
        return SLASH_DELIM.join(parts)

    def _require_data_key(self) -> None:
        if self.key_type is not KeyType.DATA:
            raise RyanDataAddressError(
                "unsupported_key_type",
                "Only data keys support hierarchy navigation",
                {"package": PACKAGE_NAME, "value": self.key_string},
            )

    @property
    def parent_key(self) -> LookupKey | None:
        """Return the key one level up, e.g. "data/US" for "data/US/CA".

        The root key ("data") has no parent and returns None.

        Raises:
            RyanDataAddressError: If this is not a DATA key.
        """
        self._require_data_key()
        if not self.values:
            return None
        return LookupKey(
            key_type=self.key_type,
            script_type=self.script_type,
            values=self.values[:-1],
            language_code=self.language_code,
        )

    def key_for_upper_level_field(self, address_field: AddressField) -> LookupKey | None:
        """Return the key truncated at a hierarchy level.

        Args:
            address_field: A field in the hierarchy.

        Returns:
            The key down to and including that level, or None if the field is
            not in the hierarchy or is more granular than this key. For
            example LOCALITY on "data/US" returns None.

        Raises:
            RyanDataAddressError: If this is not a DATA key.
        """
        self._require_data_key()
        if address_field not in HIERARCHY:
            return None
        depth = HIERARCHY.index(address_field) + 1
        if depth > len(self.values):
            return None
        return LookupKey(
            key_type=self.key_type,
            script_type=self.script_type,
            values=self.values[:depth],
            language_code=self.language_code,
        )

    def value_for_upper_level_field(self, address_field: AddressField) -> str:
        """Return the value for a hierarchy field, or "" if the key doesn't have it.

        For "data/US/CA", COUNTRY gives "US".
        """
        return self.nodes.get(address_field, "")

    def __str__(self) -> str:
        return self.key_string

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LookupKey):
            return NotImplemented
        return self.key_string == other.key_string

    def __hash__(self) -> int:
        return hash(self.key_string)


class LookupKeyBuilder:
    """Mutable staging object for LookupKey.

    Example:
        >>> key = (
        ...     LookupKeyBuilder(KeyType.DATA)
        ...     .set_node(AddressField.COUNTRY, "US")
        ...     .set_node(AddressField.ADMIN_AREA, "CA")
        ...     .build()
        ... )
        >>> str(key)
        'data/US/CA'
    """

    def __init__(self, key_type: KeyType) -> None:
        self.key_type = key_type
        self.script_type = ScriptType.LOCAL
        self.language_code: str | None = None
        self._values: list[str] = []

    @classmethod
    def from_key(cls, key: LookupKey) -> Self:
        """Start from an existing key."""
        builder = cls(key.key_type)
        builder.script_type = key.script_type
        builder.language_code = key.language_code
        builder._values = list(key.values)
        return builder

    @classmethod
    def from_key_string(cls, key_string: str) -> Self:
        """Start from a key string.

        A DATA key deeper than DEPENDENT_LOCALITY has its extra parts folded
        into the dependent locality, so "data/C/A/L/D/E" gets "D/E". An empty
        node ends the key: "data/US//Mt View" becomes "data/US". The language
        suffix ("--en") may appear once, on the last node.

        Raises:
            RyanDataAddressError: If the key type is unknown, the script of an
                EXAMPLES key is not "local" or "latin", or the language suffix
                is malformed.
        """
        parts = _split(key_string, SLASH_DELIM)
        if not parts or parts[0] not in (KeyType.DATA.value, KeyType.EXAMPLES.value):
            raise _invalid_key(f"Wrong key type: {parts[0] if parts else key_string!r}", key_string)

        builder = cls(KeyType(parts[0]))
        if builder.key_type is KeyType.DATA:
            builder._parse_data_parts(parts[1:], key_string)
        else:
            builder._parse_example_parts(parts[1:], key_string)
        return builder

    def _parse_data_parts(self, parts: list[str], key_string: str) -> None:
        if len(parts) > len(HIERARCHY):
            logger.debug("Folding extra lookup key parts into dependent locality: %s", key_string)
            last = len(HIERARCHY) - 1
            parts = parts[:last] + [SLASH_DELIM.join(parts[last:])]

        for part in parts:
            value = trim_to_null(part)
            if value is None:
                break
            if self.language_code is not None:
                raise _invalid_key("Language code is only allowed on the last node", key_string)
            if DASH_DELIM in value:
                pieces = _split(value, DASH_DELIM)
                if len(pieces) != 2 or not pieces[0]:
                    raise _invalid_key(
                        "Wrong format: node should be <last node value>--<language code>",
                        key_string,
                    )
                value, self.language_code = pieces
            self._values.append(value)

    def _parse_example_parts(self, parts: list[str], key_string: str) -> None:
        if parts:
            self._values.append(parts[0])
        if len(parts) > 1:
            try:
                self.script_type = ScriptType(parts[1])
            except ValueError:
                raise _invalid_key(
                    "Script type has to be either latin or local", key_string
                ) from None
        if len(parts) > 2 and parts[2] != DEFAULT_LANGUAGE:
            self.language_code = parts[2]

    def set_language_code(self, language_code: str | None) -> Self:
        self.language_code = language_code
        return self

    def set_script_type(self, script_type: ScriptType) -> Self:
        self.script_type = script_type
        return self

    def set_node(self, address_field: AddressField, value: str | None) -> Self:
        """Set the value of a hierarchy level.

        Setting None clears the level and every deeper one.

        Raises:
            RyanDataAddressError: If the field is outside the hierarchy or a
                shallower level has not been set.
        """
        if address_field not in HIERARCHY:
            raise RyanDataAddressError(
                "invalid_hierarchy",
                f"{address_field.name} is not part of the lookup key hierarchy",
                {"package": PACKAGE_NAME, "value": address_field.value},
            )
        depth = HIERARCHY.index(address_field)
        value = trim_to_null(value)
        if value is None:
            del self._values[depth:]
            return self
        if depth > len(self._values):
            raise RyanDataAddressError(
                "invalid_hierarchy",
                f"Cannot set {address_field.name} before {HIERARCHY[depth - 1].name}",
                {"package": PACKAGE_NAME, "value": address_field.value},
            )
        self._values[depth:depth + 1] = [value]
        return self

    def set_address_data(self, address: AddressData) -> Self:
        """Set the hierarchy from an address.

        Levels are taken until the first missing one, so an address with a
        locality but no administrative area gives "data/US".
        """
        self.language_code = address.language_code
        if is_explicit_latin_script(address.language_code):
            self.script_type = ScriptType.LATIN

        self._values = []
        for value in (
            address.region_code,
            address.administrative_area,
            address.locality,
            address.dependent_locality,
        ):
            if value is None:
                break
            self._values.append(value)
        return self

    def build(self) -> LookupKey:
        return LookupKey(
            key_type=self.key_type,
            script_type=self.script_type,
            values=tuple(self._values),
            language_code=self.language_code,
        )
