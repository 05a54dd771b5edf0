"""Centralized constants for region metadata lookup.

This module provides the single source of truth for the default region,
region aliases and language information used throughout the package.
"""

from __future__ import annotations

# Region holding the default (fallback) metadata for every other region
DEFAULT_REGION_CODE = "ZZ"

# Regions without data of their own that borrow another region's entry
REGION_CODE_ALIASES: dict[str, str] = {
    "CQ": "GG",  # Sark uses Guernsey's data
}

# Regions whose local language is written in a non-Latin script
NON_LATIN_LOCAL_LANGUAGE_COUNTRIES: dict[str, str] = {
    "AE": "ar",
    "AM": "hy",
    "CN": "zh",
    "EG": "ar",
    "HK": "zh",
    "JP": "ja",
    "KP": "ko",
    "KR": "ko",
    "MO": "zh",
    "RU": "ru",
    "TH": "th",
    "TW": "zh",
    "UA": "uk",
    "VN": "vi",
}

# Environment variable pointing at an alternate region metadata JSON file
REGION_DATA_PATH_ENV = "RYANDATA_ADDRESSINPUT_REGION_DATA"

# Name of the bundled region metadata resource
BUNDLED_REGION_DATA = "regions.json"
