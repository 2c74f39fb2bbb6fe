import pytest

from luhncheck.checks import (
    REASON_CHECKSUM_MISMATCH,
    REASON_NON_DIGIT,
    REASON_OK,
    REASON_TOO_SHORT,
    check_code,
    check_codes,
)
from luhncheck.validators import is_valid


def test_valid_code_reports_total() -> None:
    result = check_code("059")
    assert result.valid
    assert result.reason == REASON_OK
    assert result.checksum == 10


def test_checksum_mismatch_keeps_total() -> None:
    result = check_code("059 0")
    assert not result.valid
    assert result.reason == REASON_CHECKSUM_MISMATCH
    assert result.checksum == 14


@pytest.mark.parametrize("code", ["", " ", "1", " 7 ", "a", "\t", " x "])
def test_too_short(code: str) -> None:
    result = check_code(code)
    assert result.reason == REASON_TOO_SHORT
    assert result.checksum is None


@pytest.mark.parametrize("code", ["ab", "05a9", "055\t5", "4111-1111-1111-1111"])
def test_non_digit(code: str) -> None:
    result = check_code(code)
    assert result.reason == REASON_NON_DIGIT
    assert result.checksum is None


@pytest.mark.parametrize(
    "code",
    ["059", "059 0", "1", "", "x", "046 043 65", "8273 1232 7352 0569", "12\n"],
)
def test_agrees_with_is_valid(code: str) -> None:
    assert check_code(code).valid is is_valid(code)


def test_check_codes_keeps_order_and_index() -> None:
    results = check_codes(["059", "1", "055 5"])
    assert [r.index for r in results] == [0, 1, 2]
    assert [r.valid for r in results] == [True, False, True]


def test_to_dict_is_stable() -> None:
    assert check_code("059", index=3).to_dict() == {
        "index": 3,
        "code": "059",
        "valid": True,
        "reason": "ok",
        "checksum": 10,
        "why": "Verified: checksum total is a multiple of 10.",
    }
