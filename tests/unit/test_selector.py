from __future__ import annotations

from pathlib import Path

import pytest

from qualifier.domain.errors import SelectorError
from qualifier.selector import (
    choose_location,
    extract_digits,
    is_odd,
    load_artifact,
    parity_number,
    select_artifact,
)

ODD_LOCATION = "odd.sql"
EVEN_LOCATION = "even.sql"


@pytest.mark.parametrize(
    ("identifier", "digits", "number"),
    [
        ("AB1234CD45", "123445", 45),
        ("XY0099EF22", "009922", 22),
        ("REG12347", "12347", 47),
        ("A7", "7", 7),
        ("X0Y0", "00", 0),
        ("12-34-05", "123405", 5),
    ],
)
def test_parity_number_uses_last_two_digits(identifier: str, digits: str, number: int) -> None:
    assert extract_digits(identifier) == digits
    assert parity_number(identifier) == number


def test_odd_identifier_selects_artifact_a() -> None:
    assert is_odd("AB1234CD45") is True
    assert choose_location("AB1234CD45", ODD_LOCATION, EVEN_LOCATION) == ("A", ODD_LOCATION)


def test_even_identifier_selects_artifact_b() -> None:
    assert is_odd("XY0099EF22") is False
    assert choose_location("XY0099EF22", ODD_LOCATION, EVEN_LOCATION) == ("B", EVEN_LOCATION)


def test_single_digit_identifier_uses_that_digit() -> None:
    assert choose_location("ONLY3", ODD_LOCATION, EVEN_LOCATION)[0] == "A"
    assert choose_location("ONLY8", ODD_LOCATION, EVEN_LOCATION)[0] == "B"


@pytest.mark.parametrize("identifier", ["NODIGITS", "", "--"])
def test_identifier_without_digits_raises(identifier: str) -> None:
    with pytest.raises(SelectorError, match="No digits found"):
        parity_number(identifier)


def test_selection_is_deterministic() -> None:
    picks = {choose_location("AB1234CD45", ODD_LOCATION, EVEN_LOCATION) for _ in range(5)}
    assert picks == {("A", ODD_LOCATION)}


def test_non_ascii_digits_are_ignored() -> None:
    # Arabic-Indic digits are not decimal ASCII digits
    assert extract_digits("REG١٢2") == "2"


def test_load_artifact_trims_surrounding_whitespace(tmp_path: Path) -> None:
    source = tmp_path / "query.sql"
    source.write_text("\n\n  SELECT 1;\n  \n", encoding="utf-8")

    artifact = load_artifact("A", str(source))

    assert artifact.content == "SELECT 1;"
    assert artifact.name == "A"
    assert artifact.location == str(source)


def test_load_artifact_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(SelectorError, match="Could not load artifact B"):
        load_artifact("B", str(tmp_path / "missing.sql"))


def test_load_packaged_artifacts() -> None:
    odd = load_artifact("A", "resource:q1.sql")
    even = load_artifact("B", "resource:q2.sql")

    assert odd.content.startswith("SELECT")
    assert even.content.startswith("SELECT")
    assert odd.content != even.content


def test_select_artifact_only_reads_chosen_location(
    artifact_files: tuple[Path, Path], tmp_path: Path, odd_query: str
) -> None:
    q1, _ = artifact_files
    missing_even = tmp_path / "does-not-exist.sql"

    artifact = select_artifact("AB1234CD45", str(q1), str(missing_even))

    assert artifact.name == "A"
    assert artifact.content == odd_query


def test_select_artifact_even(artifact_files: tuple[Path, Path], even_query: str) -> None:
    q1, q2 = artifact_files
    artifact = select_artifact("XY0099EF22", str(q1), str(q2))
    assert artifact.name == "B"
    assert artifact.content == even_query
