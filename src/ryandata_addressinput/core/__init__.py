"""Format interpretation and lookup key core.

Usage:
    from ryandata_addressinput.core import (
        FormatInterpreter,
        LookupKey,
        LookupKeyBuilder,
        tokenize,
    )
"""

from __future__ import annotations  # noqa: I001

# Import order is intentional to avoid circular imports - do not auto-fix
from ryandata_addressinput.core.factory import PluginFactory
from ryandata_addressinput.core.tokenizer import (
    ESCAPE,
    NEW_LINE,
    field_for_token,
    is_field_token,
    is_newline,
    iter_fields,
    tokenize,
)
from ryandata_addressinput.core.language import (
    get_language_subtag,
    get_widget_compatible_language_code,
    is_explicit_latin_script,
)
from ryandata_addressinput.core.format_interpreter import (
    FormatInterpreter,
    apply_custom_field_order,
    get_format_string,
    get_required_fields,
    get_width_override,
    parse_required_fields,
    parse_width_overrides,
)
from ryandata_addressinput.core.lookup_key import HIERARCHY, LookupKey, LookupKeyBuilder

__all__ = [
    # Factory
    "PluginFactory",
    # Tokenizer
    "ESCAPE",
    "NEW_LINE",
    "tokenize",
    "is_newline",
    "is_field_token",
    "field_for_token",
    "iter_fields",
    # Language tags
    "is_explicit_latin_script",
    "get_language_subtag",
    "get_widget_compatible_language_code",
    # Format interpretation
    "FormatInterpreter",
    "apply_custom_field_order",
    "get_format_string",
    "get_required_fields",
    "get_width_override",
    "parse_required_fields",
    "parse_width_overrides",
    # Lookup keys
    "HIERARCHY",
    "LookupKey",
    "LookupKeyBuilder",
]
