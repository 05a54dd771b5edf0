import pytest

from ryandata_addressinput.core.tokenizer import (
    field_for_token,
    is_field_token,
    is_newline,
    iter_fields,
    tokenize,
)
from ryandata_addressinput.models import AddressField, RyanDataAddressError


def test_tokenize_us_template() -> None:
    assert tokenize("%N%n%O%n%A%n%C, %S %Z") == [
        "%N",
        "%n",
        "%O",
        "%n",
        "%A",
        "%n",
        "%C",
        ", ",
        "%S",
        " ",
        "%Z",
    ]


def test_tokenize_leading_literal() -> None:
    assert tokenize("〒%Z%n%S") == ["〒", "%Z", "%n", "%S"]


def test_tokenize_only_literal() -> None:
    assert tokenize("GUERNSEY") == ["GUERNSEY"]
    assert tokenize("") == []


def test_unknown_escape_is_kept_until_resolved() -> None:
    """Unknown escapes tokenize fine but fail on field lookup."""
    tokens = tokenize("%Q, %C")
    assert tokens == ["%Q", ", ", "%C"]
    with pytest.raises(RyanDataAddressError) as exc_info:
        field_for_token(tokens[0])
    assert exc_info.value.type == "invalid_field"


def test_escaped_percent_is_a_two_char_escape() -> None:
    assert tokenize("%%%C") == ["%%", "%C"]


def test_trailing_escape_is_malformed() -> None:
    with pytest.raises(RyanDataAddressError) as exc_info:
        tokenize("%N%n%")
    assert exc_info.value.type == "malformed_template"


def test_token_predicates() -> None:
    assert is_newline("%n")
    assert not is_newline("%N")
    assert is_field_token("%N")
    assert not is_field_token("%n")
    assert not is_field_token(", ")


def test_iter_fields_keeps_duplicates() -> None:
    assert iter_fields("%C %C%n%Z") == [
        AddressField.LOCALITY,
        AddressField.LOCALITY,
        AddressField.POSTAL_CODE,
    ]
