"""Address-specific error classes.

These classes provide package-specific error handling for address formatting,
lookup key decoding and region metadata access.
"""

from __future__ import annotations

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "ryandata_addressinput"


class RyanDataAddressError(PydanticCustomError):
    """Custom exception for ryandata_addressinput that wraps Pydantic errors.

    Inherits from PydanticCustomError to maintain full compatibility with Pydantic's
    error handling while providing package identification. The error type names
    the failure category (``invalid_field``, ``invalid_key``, ...).
    """


class RyanDataValidationError(Exception):
    """Custom exception that wraps pydantic.ValidationError with package identification.

    Raised when model construction fails (for example a non-string value passed
    to an AddressData field), keeping access to the original error details.
    """

    def __init__(self, validation_error: Exception, context: dict | None = None):
        """Initialize RyanDataValidationError.

        Args:
            validation_error: The pydantic.ValidationError to wrap.
            context: Optional additional context to include.
        """
        from pydantic import ValidationError as PydanticValidationError

        self.original_error = validation_error
        self.context = {"package": PACKAGE_NAME, **(context or {})}

        if isinstance(validation_error, PydanticValidationError):
            self.errors_list = validation_error.errors()
            error_messages = "; ".join(e.get("msg", str(e)) for e in self.errors_list)
        else:
            self.errors_list = []
            error_messages = str(validation_error)

        super().__init__(error_messages)

    def errors(self) -> list:
        """Get the list of validation errors.

        Returns:
            List of error dictionaries from the original ValidationError.
        """
        return self.errors_list

    def __repr__(self) -> str:
        """Detailed representation."""
        return f"RyanDataValidationError({self.original_error!r}, context={self.context})"
