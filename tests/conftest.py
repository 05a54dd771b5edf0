"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

import pytest
from hypothesis import Verbosity, settings

from ryandata_addressinput.data import MappingRegionDataSource
from ryandata_addressinput.models import AddressData

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)

# Small region table covering defaults, Latin formats and width overrides
FAKE_REGION_DATA: dict[str, str] = {
    "ZZ": '{"fmt":"%N%n%O%n%A%n%C","require":"AC"}',
    "US": (
        '{"fmt":"%N%n%O%n%A%n%C, %S %Z","require":"ACSZ",'
        '"width_overrides":"%S:S"}'
    ),
    "JP": (
        '{"fmt":"〒%Z%n%S%n%A%n%O%n%N","lfmt":"%N%n%O%n%A, %S%n%Z",'
        '"require":"ASZ","width_overrides":"%S:S"}'
    ),
    "GG": '{"fmt":"%N%n%O%n%A%n%C%nGUERNSEY%n%Z","require":"ACZ"}',
    "XB": '{"fmt":"%N%n%A%n%C","width_overrides":"%C L"}',
    "XW": '{"fmt":"%A%n%C","width_overrides":"%C:L%S:S"}',
}


@pytest.fixture
def fake_source() -> MappingRegionDataSource:
    """Region data source over FAKE_REGION_DATA."""
    return MappingRegionDataSource(FAKE_REGION_DATA)


@pytest.fixture
def us_address() -> AddressData:
    """A complete US address."""
    return AddressData(
        region_code="US",
        recipient="John Doe",
        organization="Dnar Corp",
        address_lines=["5th St"],
        locality="Santa Monica",
        administrative_area="CA",
        postal_code="90123",
    )
