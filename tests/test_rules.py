"""Tests for fieldcheck.validation.rules — the primitive rules."""

from datetime import date, timedelta

import pytest

from fieldcheck.errors import ContractViolation
from fieldcheck.validation.rules import (
    POSTAL_CODE_PATTERNS,
    validate_date_of_birth,
    validate_email,
    validate_phone,
    validate_postal_code,
    validate_required,
    validate_text,
)

PHONE_FORMAT = "Invalid phone number format. Use 07123-456789."

# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------


class TestValidateText:
    def test_required_valid(self) -> None:
        assert validate_text("John", 2, 50, True) == ""

    def test_optional_valid(self) -> None:
        assert validate_text("Doe", 2, 50, False) == ""

    def test_too_short(self) -> None:
        assert validate_text("J", 2, 50, True) == "Must be 2-50 characters."

    def test_too_long(self) -> None:
        assert validate_text("A" * 51, 2, 50, True) == "Must be 2-50 characters."

    def test_empty_required(self) -> None:
        assert validate_text("", 2, 50, True) == "This field is required."

    def test_whitespace_required(self) -> None:
        assert validate_text("   ", 2, 50, True) == "This field is required."

    def test_empty_optional(self) -> None:
        assert validate_text("", 2, 50, False) == ""

    def test_whitespace_optional_ignores_length(self) -> None:
        assert validate_text(" " * 80, 2, 50, False) == ""

    def test_length_counts_untrimmed_value(self) -> None:
        # "a" is one character, but the padding brings it to three
        assert validate_text(" a ", 2, 50, True) == ""
        assert validate_text(" " + "a" * 50, 2, 50, True) == "Must be 2-50 characters."

    @pytest.mark.parametrize(("min_len", "max_len"), [(1, 1), (2, 50), (2, 100), (0, 5), (3, 7)])
    def test_bounds_are_inclusive(self, min_len: int, max_len: int) -> None:
        message = f"Must be {min_len}-{max_len} characters."
        if min_len > 0:
            assert validate_text("x" * min_len, min_len, max_len, True) == ""
        assert validate_text("x" * max_len, min_len, max_len, True) == ""
        if min_len > 1:
            assert validate_text("x" * (min_len - 1), min_len, max_len, True) == message
        assert validate_text("x" * (max_len + 1), min_len, max_len, True) == message
        assert validate_text("", min_len, max_len, True) == "This field is required."


class TestValidateTextContract:
    @pytest.mark.parametrize(
        "args",
        [
            (None, 2, 50, True),
            (42, 2, 50, True),
            ("John", "2", 50, True),
            ("John", 2, 50.0, True),
            ("John", 2, 50, "yes"),
            ("John", True, 50, True),
            ("John", 2, 50, 1),
        ],
    )
    def test_wrong_types_raise(self, args: tuple) -> None:
        with pytest.raises(ContractViolation, match="validate_text expects"):
            validate_text(*args)

    def test_is_a_type_error(self) -> None:
        with pytest.raises(TypeError):
            validate_text(None, 2, 50, True)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


class TestValidateRequired:
    def test_present(self) -> None:
        assert validate_required("Male") is True

    def test_whitespace_only(self) -> None:
        assert validate_required(" ") is False

    def test_empty(self) -> None:
        assert validate_required("") is False

    def test_not_a_string(self) -> None:
        assert validate_required(None) is False
        assert validate_required(True) is False

    def test_idempotent(self) -> None:
        results = {validate_required("Female") for _ in range(3)}
        assert results == {True}


# ---------------------------------------------------------------------------
# Email
# ---------------------------------------------------------------------------


class TestValidateEmail:
    def test_valid(self) -> None:
        assert validate_email("john.doe@example.com") == ""

    def test_minimal(self) -> None:
        assert validate_email("a@b.c") == ""

    def test_missing_at(self) -> None:
        assert validate_email("invalid") == "Invalid email format."

    def test_missing_domain(self) -> None:
        assert validate_email("invalid@") == "Invalid email format."

    def test_missing_tld(self) -> None:
        assert validate_email("user@example") == "Invalid email format."

    def test_inner_whitespace(self) -> None:
        assert validate_email("john doe@example.com") == "Invalid email format."

    def test_double_at(self) -> None:
        assert validate_email("a@b@c.d") == "Invalid email format."

    def test_empty(self) -> None:
        assert validate_email("") == "Email is required."


# ---------------------------------------------------------------------------
# Date of birth
# ---------------------------------------------------------------------------

TODAY = date(2025, 6, 1)


class TestValidateDateOfBirth:
    def test_valid(self) -> None:
        assert validate_date_of_birth("1990-05-15") == ""

    def test_today_is_valid(self) -> None:
        assert validate_date_of_birth("2025-06-01", today=TODAY) == ""

    def test_tomorrow_is_future(self) -> None:
        tomorrow = (date.today() + timedelta(days=1)).isoformat()
        assert validate_date_of_birth(tomorrow) == "Date of birth cannot be in the future."

    def test_future_with_pinned_today(self) -> None:
        assert (
            validate_date_of_birth("2025-06-02", today=TODAY)
            == "Date of birth cannot be in the future."
        )

    def test_too_old(self) -> None:
        assert validate_date_of_birth("1800-01-01") == "Please enter a valid date of birth."

    def test_age_uses_calendar_years(self) -> None:
        # 120 calendar years apart, even though not 120 full years elapsed
        assert validate_date_of_birth("1905-12-31", today=TODAY) == ""
        assert (
            validate_date_of_birth("1904-12-31", today=TODAY)
            == "Please enter a valid date of birth."
        )

    def test_custom_max_age(self) -> None:
        assert (
            validate_date_of_birth("1990-05-15", today=TODAY, max_age=18)
            == "Please enter a valid date of birth."
        )

    def test_unparseable(self) -> None:
        assert validate_date_of_birth("not-a-date") == "Please enter a valid date of birth."

    def test_basic_format_rejected(self) -> None:
        assert validate_date_of_birth("19900515", today=TODAY) == "Please enter a valid date of birth."

    def test_week_date_rejected(self) -> None:
        assert validate_date_of_birth("1990-W20-2", today=TODAY) == "Please enter a valid date of birth."

    def test_non_ascii_digits_rejected(self) -> None:
        value = "\u0661\u0669\u0669\u0660-\u0660\u0665-\u0661\u0665"
        assert validate_date_of_birth(value, today=TODAY) == "Please enter a valid date of birth."

    def test_impossible_date(self) -> None:
        assert validate_date_of_birth("1990-02-30") == "Please enter a valid date of birth."

    def test_surrounding_whitespace(self) -> None:
        assert validate_date_of_birth(" 1990-05-15 ", today=TODAY) == ""

    def test_empty(self) -> None:
        assert validate_date_of_birth("") == "Date of birth is required."


# ---------------------------------------------------------------------------
# Phone
# ---------------------------------------------------------------------------


class TestValidatePhone:
    def test_valid(self) -> None:
        assert validate_phone("07123-456789") == ""

    def test_too_short(self) -> None:
        assert validate_phone("07123-45678") == PHONE_FORMAT

    def test_too_long(self) -> None:
        assert validate_phone("07123-4567890") == PHONE_FORMAT

    def test_no_dash(self) -> None:
        assert validate_phone("07123456789") == PHONE_FORMAT

    def test_non_numeric(self) -> None:
        assert validate_phone("abcde-123456") == PHONE_FORMAT

    def test_trailing_newline(self) -> None:
        assert validate_phone("07123-456789\n") == PHONE_FORMAT

    def test_empty(self) -> None:
        assert validate_phone("") == "Phone number is required."


# ---------------------------------------------------------------------------
# Postal code
# ---------------------------------------------------------------------------


class TestValidatePostalCode:
    @pytest.mark.parametrize(
        ("value", "country"),
        [
            ("10001", "United States"),
            ("10001-1234", "United States"),
            ("SW1A 1AA", "United Kingdom"),
            ("AB12 3CD", "United Kingdom"),
            ("M1 1AE", "United Kingdom"),
            ("12345", "Unknown"),
            ("K1A 0B1", "Canada"),
        ],
    )
    def test_valid(self, value: str, country: str) -> None:
        assert validate_postal_code(value, country) == ""

    def test_invalid_us(self) -> None:
        assert (
            validate_postal_code("ABCDE", "United States")
            == "Invalid postal code for United States."
        )

    def test_invalid_us_extension(self) -> None:
        assert validate_postal_code("10001-12", "United States") != ""

    def test_invalid_uk(self) -> None:
        assert (
            validate_postal_code("12345", "United Kingdom")
            == "Invalid postal code for United Kingdom."
        )

    def test_uk_is_case_sensitive(self) -> None:
        assert validate_postal_code("sw1a 1aa", "United Kingdom") != ""

    def test_default_pattern_too_short(self) -> None:
        assert validate_postal_code("12", "Unknown") == "Invalid postal code for Unknown."

    def test_default_pattern_too_long(self) -> None:
        assert validate_postal_code("12345678901", "France") == "Invalid postal code for France."

    def test_country_interpolated_verbatim(self) -> None:
        assert validate_postal_code("!!!", "") == "Invalid postal code for ."

    def test_empty(self) -> None:
        assert validate_postal_code("", "United States") == "Postal/Zip code is required."

    @pytest.mark.parametrize(
        ("value", "country"),
        [
            ("\u0661\u0662\u0663\u0664\u0665", "United States"),
            ("10001-\u0661\u0662\u0663\u0664", "United States"),
            ("SW\u0661A \u0661AA", "United Kingdom"),
        ],
    )
    def test_non_ascii_digits_rejected(self, value: str, country: str) -> None:
        assert validate_postal_code(value, country) == f"Invalid postal code for {country}."

    def test_patterns_read_only(self) -> None:
        with pytest.raises(TypeError):
            POSTAL_CODE_PATTERNS["France"] = POSTAL_CODE_PATTERNS["United States"]  # type: ignore[index]
