from __future__ import annotations
import logging
import pytest
from hk_identity_card.extraction import HkidParts, extract_hkid


def test_canonical_form() -> None:
    assert extract_hkid("A123456(3)") == HkidParts("A", "123456", "3")


def test_two_letter_prefix() -> None:
    assert extract_hkid("CA182361(0)") == HkidParts("CA", "182361", "0")


def test_lowercase_is_normalised() -> None:
    assert extract_hkid("ab000030(a)") == HkidParts("AB", "000030", "A")


@pytest.mark.parametrize(
    "raw",
    [
        "A1234563",  # no brackets
        "A123456(3",  # opening bracket only
        "A1234563)",  # closing bracket only
        "A123456((3))",
        "HKID: A123456(3), issued 2001",
        "  a123456(3)  ",
    ],
)
def test_tolerated_shapes(raw: str) -> None:
    assert extract_hkid(raw) == HkidParts("A", "123456", "3")


def test_first_occurrence_wins() -> None:
    parts = extract_hkid("A123456(3) and B987654(1)")
    assert parts is not None
    assert parts.prefix == "A"


def test_three_letters_uses_last_two() -> None:
    # No match can start at 'A' (a letter then no digits follows "AB"), so the
    # search resumes at 'B' and takes "BC" as the prefix.
    assert extract_hkid("ABC123456(3)") == HkidParts("BC", "123456", "3")


def test_seventh_digit_becomes_check_character() -> None:
    # Exactly six digits are taken, the next one is read as the check character
    assert extract_hkid("A1234567") == HkidParts("A", "123456", "7")


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "12345",
        "123456(3)",  # no prefix
        "A12345(3)",  # five digits
        "A123456(B)",  # check character must be 0-9 or A
        "A123456()",
        "A\uff11\uff12\uff13\uff14\uff15\uff16(3)",  # full-width digits
        "\u212a123456(3)",  # Kelvin sign
    ],
)
def test_rejected_shapes(raw: str) -> None:
    assert extract_hkid(raw) is None


def test_failure_log_omits_input(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="hk_identity_card")
    assert extract_hkid("secret-12345") is None
    assert "no HKID pattern found" in caplog.text
    assert "secret" not in caplog.text
