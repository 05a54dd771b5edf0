from __future__ import annotations

import logging
from typing import Optional

import typer

from ryandata_addressinput.core.lookup_key import LookupKey
from ryandata_addressinput.models import (
    AddressDataBuilder,
    AddressField,
    RyanDataAddressError,
    RyanDataValidationError,
    ScriptType,
)
from ryandata_addressinput.service import get_default_service

app = typer.Typer(help="Inspect international address formats and lookup keys.")


def _fail(message: str) -> None:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


def _is_required(field: AddressField, required: frozenset[AddressField]) -> bool:
    # A required street address means at least the first line
    if field is AddressField.ADDRESS_LINE_1:
        return AddressField.STREET_ADDRESS in required
    return field in required


@app.callback()
def main_callback(
    verbose: bool = typer.Option(  # noqa: B008
        False,
        "--verbose",
        "-v",
        help="Log debug output (fallbacks, aliases) to stderr.",
    ),
) -> None:
    """Inspect international address formats and lookup keys."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def fields(
    region: str = typer.Argument(..., help="Region code, e.g. US or JP."),  # noqa: B008
    latin: bool = typer.Option(  # noqa: B008
        False,
        "--latin",
        help="Use the Latin-script format where the region has one.",
    ),
) -> None:
    """Print the fields of a region in display order."""
    service = get_default_service()
    region = region.upper()
    script_type = ScriptType.LATIN if latin else ScriptType.LOCAL
    try:
        order = service.field_order(region, script_type)
        required = service.required_fields(region)
        widths = service.field_widths(region, script_type)
    except RyanDataAddressError as exc:
        _fail(str(exc))
        return

    if not service.data_source.has_region(region):
        typer.echo(f"No data for {region}, showing the default format.", err=True)
    for field in order:
        marker = "*" if _is_required(field, required) else " "
        typer.echo(f"{marker} {field.code} {field.name:<28} {widths[field].name}")


@app.command("format")
def format_(
    region: str = typer.Option(..., "--region", "-r", help="Region code."),  # noqa: B008
    line: Optional[list[str]] = typer.Option(  # noqa: B008
        None, "--line", "-l", help="Street address line (repeatable)."
    ),
    admin_area: Optional[str] = typer.Option(None, "--admin-area"),  # noqa: B008
    locality: Optional[str] = typer.Option(None, "--locality"),  # noqa: B008
    dependent_locality: Optional[str] = typer.Option(None, "--dependent-locality"),  # noqa: B008
    postal_code: Optional[str] = typer.Option(None, "--postal-code"),  # noqa: B008
    sorting_code: Optional[str] = typer.Option(None, "--sorting-code"),  # noqa: B008
    organization: Optional[str] = typer.Option(None, "--organization"),  # noqa: B008
    recipient: Optional[str] = typer.Option(None, "--recipient"),  # noqa: B008
    landmark_descriptor: Optional[str] = typer.Option(None, "--landmark-descriptor"),  # noqa: B008
    landmark_affix: Optional[str] = typer.Option(None, "--landmark-affix"),  # noqa: B008
    landmark_name: Optional[str] = typer.Option(None, "--landmark-name"),  # noqa: B008
    language: Optional[str] = typer.Option(  # noqa: B008
        None, "--language", help="Language tag, e.g. ja-Latn for the Latin format."
    ),
) -> None:
    """Print an address as envelope lines."""
    builder = (
        AddressDataBuilder()
        .set_country(region.upper())
        .set_address_lines(line or [])
        .set_admin_area(admin_area)
        .set_locality(locality)
        .set_dependent_locality(dependent_locality)
        .set_postal_code(postal_code)
        .set_sorting_code(sorting_code)
        .set_organization(organization)
        .set_recipient(recipient)
        .set_landmark_address_descriptor(landmark_descriptor)
        .set_landmark_affix(landmark_affix)
        .set_landmark_name(landmark_name)
        .set_language_code(language)
    )
    try:
        lines = get_default_service().envelope_lines(builder.build())
    except (RyanDataAddressError, RyanDataValidationError) as exc:
        _fail(str(exc))
        return
    for text in lines:
        typer.echo(text)


@app.command()
def key(
    key_string: str = typer.Argument(..., help='Lookup key, e.g. "data/US/CA".'),  # noqa: B008
    parent: bool = typer.Option(  # noqa: B008
        False,
        "--parent",
        help="Also print the parent key (data keys only).",
    ),
) -> None:
    """Decode a lookup key and print its canonical form and nodes."""
    try:
        lookup_key = LookupKey.from_string(key_string)
        parent_key = lookup_key.parent_key if parent else None
    except RyanDataAddressError as exc:
        _fail(str(exc))
        return

    typer.echo(str(lookup_key))
    typer.echo(f"type: {lookup_key.key_type.value}")
    typer.echo(f"script: {lookup_key.script_type.value}")
    for field, value in lookup_key.nodes.items():
        typer.echo(f"{field.name.lower()}: {value}")
    if lookup_key.language_code:
        typer.echo(f"language: {lookup_key.language_code}")
    if parent:
        typer.echo(f"parent: {parent_key if parent_key is not None else '-'}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
