"""Region metadata record models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ryandata_addressinput.models.enums import AddressDataKey


class LabelOverride(BaseModel):
    """A region-specific label for one field, optionally for one language."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    field: str
    label: str | None = None
    message: str | None = None
    lang: str | None = None


class RegionMetadata(BaseModel):
    """Immutable metadata for one region.

    String-valued keys are addressed through AddressDataKey; unknown keys
    found in the source JSON are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    countries: str | None = None
    fmt: str | None = Field(default=None, description="Display template")
    id: str | None = None
    isoid: str | None = None
    key: str | None = None
    lang: str | None = Field(default=None, description="Default language")
    languages: str | None = Field(default=None, description="Supported languages, '~'-separated")
    lfmt: str | None = Field(default=None, description="Latin-script display template")
    locality_name_type: str | None = None
    name: str | None = None
    require: str | None = Field(default=None, description="Required field codes")
    state_name_type: str | None = None
    sublocality_name_type: str | None = None
    sub_keys: str | None = None
    sub_lnames: str | None = None
    sub_mores: str | None = None
    sub_names: str | None = None
    upper: str | None = Field(default=None, description="Field codes rendered upper-case")
    width_overrides: str | None = Field(default=None, description="Width override pairs")
    xzip: str | None = None
    zip: str | None = Field(default=None, description="Postal code pattern or prefix")
    zip_name_type: str | None = None
    postprefix: str | None = None
    posturl: str | None = None
    label_overrides: tuple[LabelOverride, ...] = ()

    def get(self, key: AddressDataKey) -> str | None:
        """Return the string value stored under a metadata key, or None."""
        return getattr(self, key.value)

    def labels_for(self, language: str | None = None) -> dict[str, str]:
        """Return field code to label overrides applicable to a language.

        Overrides without a language apply to every language; language-specific
        ones take precedence.
        """
        labels: dict[str, str] = {}
        for override in self.label_overrides:
            if override.label and override.lang is None:
                labels[override.field] = override.label
        for override in self.label_overrides:
            if override.label and language is not None and override.lang == language:
                labels[override.field] = override.label
        return labels
