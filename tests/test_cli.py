from typer.testing import CliRunner

from ryandata_addressinput import cli

runner = CliRunner()


def test_fields_lists_region_layout() -> None:
    result = runner.invoke(cli.app, ["fields", "us"])

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0].startswith("  N RECIPIENT")
    assert any(line.startswith("* 1 ADDRESS_LINE_1") for line in lines)
    assert any(line.startswith("  2 ADDRESS_LINE_2") for line in lines)
    assert any(line.startswith("* S ADMIN_AREA") and line.endswith("SHORT") for line in lines)
    assert any(line.startswith("* C LOCALITY") and line.endswith("LONG") for line in lines)


def test_fields_latin_format() -> None:
    result = runner.invoke(cli.app, ["fields", "JP", "--latin"])

    assert result.exit_code == 0
    assert "RECIPIENT" in result.stdout.splitlines()[0]


def test_fields_unknown_region_uses_defaults() -> None:
    result = runner.invoke(cli.app, ["fields", "XX"])

    assert result.exit_code == 0
    assert "LOCALITY" in result.stdout


def test_format_prints_envelope() -> None:
    result = runner.invoke(
        cli.app,
        [
            "format",
            "--region",
            "us",
            "--line",
            "1098 Alta Ave",
            "--locality",
            "Mountain View",
            "--admin-area",
            "CA",
            "--postal-code",
            "94043",
        ],
    )

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["1098 Alta Ave", "Mountain View, CA 94043"]


def test_format_multiple_lines() -> None:
    result = runner.invoke(
        cli.app,
        ["format", "-r", "US", "-l", "5th St", "-l", "Suite 100", "--locality", "Austin"],
    )

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["5th St", "Suite 100", "Austin"]


def test_format_landmark_fields() -> None:
    result = runner.invoke(
        cli.app,
        [
            "format",
            "-r",
            "IN",
            "-l",
            "12 MG Road",
            "--landmark-descriptor",
            "Near",
            "--landmark-affix",
            "Opp.",
            "--landmark-name",
            "City Mall",
            "--locality",
            "Bengaluru",
            "--postal-code",
            "560001",
            "--admin-area",
            "Karnataka",
        ],
    )

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "12 MG Road",
        "Near",
        "Opp.",
        "City Mall",
        "Bengaluru 560001",
        "Karnataka",
    ]


def test_key_with_parent() -> None:
    result = runner.invoke(cli.app, ["key", "data/US/CA--en", "--parent"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "data/US/CA--en",
        "type: data",
        "script: local",
        "country: US",
        "admin_area: CA",
        "language: en",
        "parent: data/US--en",
    ]


def test_key_parent_of_examples_key_fails() -> None:
    result = runner.invoke(cli.app, ["key", "examples/JP/latin", "--parent"])

    assert result.exit_code == 1


def test_key_root_has_no_parent() -> None:
    result = runner.invoke(cli.app, ["key", "data", "--parent"])

    assert result.exit_code == 0
    assert result.stdout.splitlines()[-1] == "parent: -"


def test_invalid_key_exits_with_error() -> None:
    result = runner.invoke(cli.app, ["key", "lookup/US"])

    assert result.exit_code == 1
