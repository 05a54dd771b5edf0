"""Format template tokenizer.

Region templates use "%" as an escape character: "%n" is a newline and
"%<code>" references the address field with that code (see AddressField).
Everything else is literal text. For example "%N%n%O%n%A%n%C, %S %Z" splits
into "%N", "%n", "%O", "%n", "%A", "%n", "%C", ", ", "%S", " ", "%Z".
"""

from __future__ import annotations

from ryandata_addressinput.models.enums import AddressField
from ryandata_addressinput.models.errors import PACKAGE_NAME, RyanDataAddressError

ESCAPE = "%"
NEW_LINE = "%n"


def tokenize(format_string: str) -> list[str]:
    """Split a format template into newline, field and literal tokens.

    Concatenating the tokens reproduces the input exactly. Consecutive literal
    characters are merged into a single token. An escape is always two
    characters long, whether or not the escaped character is a known field
    code; see field_for_token() for the strict lookup.

    Args:
        format_string: Template such as "%N%n%O%n%A%n%C".

    Returns:
        List of tokens in template order (may contain duplicates).

    Raises:
        RyanDataAddressError: If the template ends with an unescaped "%".
    """
    tokens: list[str] = []
    literal: list[str] = []
    escaped = False
    for char in format_string:
        if escaped:
            escaped = False
            tokens.append(ESCAPE + char)
        elif char == ESCAPE:
            if literal:
                tokens.append("".join(literal))
                literal = []
            escaped = True
        else:
            literal.append(char)
    if escaped:
        raise RyanDataAddressError(
            "malformed_template",
            "Format template ends with a dangling escape character",
            {"package": PACKAGE_NAME, "value": format_string},
        )
    if literal:
        tokens.append("".join(literal))
    return tokens


def is_newline(token: str) -> bool:
    return token == NEW_LINE


def is_field_token(token: str) -> bool:
    """Return True if the token (e.g. "%C") references a field rather than a literal or newline."""
    return token != NEW_LINE and token.startswith(ESCAPE)


def field_for_token(token: str) -> AddressField:
    """Return the field referenced by a field token.

    Raises:
        RyanDataAddressError: If the escaped character is not a field code.
    """
    return AddressField.of(token[1])


def iter_fields(format_string: str) -> list[AddressField]:
    """Return every field referenced by a template, in order, duplicates included."""
    return [field_for_token(t) for t in tokenize(format_string) if is_field_token(t)]
