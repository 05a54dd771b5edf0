"""Language tag helpers.

Only the small subset of BCP-47 needed for choosing between local and
Latin-script formats is handled here: a 2-3 letter language subtag, an
optional 4 letter script subtag and an optional 2 letter region subtag,
separated by "-" or "_".
"""

from __future__ import annotations

import re

from ryandata_addressinput.data.constants import NON_LATIN_LOCAL_LANGUAGE_COUNTRIES

LATIN_SCRIPT = "LATN"

_SCRIPT_PATTERN = re.compile(r"\w{2,3}[-_](\w{4})")
_LANGUAGE_PATTERN = re.compile(r"(\w{2,3})(?:[-_](\w{4}))?(?:[-_](\w{2}))?")


def is_explicit_latin_script(language_code: str | None) -> bool:
    """Return True if the tag carries an explicit Latin script subtag.

    Example:
        >>> is_explicit_latin_script("ja-Latn")
        True
        >>> is_explicit_latin_script("ja")
        False
    """
    if not language_code:
        return False
    match = _SCRIPT_PATTERN.match(language_code.upper())
    return match is not None and match.group(1) == LATIN_SCRIPT


def get_language_subtag(language_code: str) -> str:
    """Return the lower-cased language subtag, or "und" if the tag is not recognised."""
    match = _LANGUAGE_PATTERN.fullmatch(language_code)
    if match is None:
        return "und"
    return match.group(1).lower()


def get_widget_compatible_language_code(language_code: str, region_code: str) -> str:
    """Return the tag to use when looking up region data for a language.

    For regions with a non-Latin local script, a language other than the local
    one is rewritten to prefer Latin-script names (e.g. "en" in JP becomes
    "en_latn"). Any region subtag in the input is preserved.
    """
    local_language = NON_LATIN_LOCAL_LANGUAGE_COUNTRIES.get(region_code.upper())
    if local_language is None:
        return language_code
    match = _LANGUAGE_PATTERN.fullmatch(language_code)
    if match is None:
        return language_code
    language = match.group(1).lower()
    if language == local_language:
        return language_code
    country = match.group(3)
    if country:
        return f"{language}_latn_{country.upper()}"
    return f"{language}_latn"
