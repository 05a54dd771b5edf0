"""Structural address validation.

This module provides validators checking that addresses hold the fields
their region requires and displays.
"""

from abstract_validation_base import BaseValidator, CompositeValidator, ValidatorPipelineBuilder

from ryandata_addressinput.validation.validators import (
    RequiredFieldsValidator,
    UnusedFieldsValidator,
    create_default_validators,
)

__all__ = [
    "BaseValidator",
    "CompositeValidator",
    "ValidatorPipelineBuilder",
    "RequiredFieldsValidator",
    "UnusedFieldsValidator",
    "create_default_validators",
]
