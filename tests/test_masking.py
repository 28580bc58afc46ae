"""Tests for placeholder masks, phone numbers and SSNs."""

import pytest

from calutil import (
    PatternByDigitCount,
    SinglePattern,
    format_phone,
    format_ssn,
    mask_format,
)

US_PHONES = PatternByDigitCount(
    {
        7: "###-####",
        10: "(###) ###-####",
        11: "# (###) ###-####",
    }
)


def test_reveal_placeholders():
    assert mask_format("1234567890", "(###) ###-####") == "(123) 456-7890"
    assert mask_format(1234567890, "(###) ###-####") == "(123) 456-7890"


def test_mask_placeholders_consume_input():
    assert mask_format("1234567890123456", "****-****-####-####") == "****-****-9012-3456"
    assert mask_format(1234567890123456, "****-****-####-####") == "****-****-9012-3456"


def test_exhausted_input_leaves_placeholders():
    assert mask_format("12", "###-###") == "12#-###"
    assert mask_format("1", "*-#") == "*-#"
    assert mask_format("", "###") == "###"
    assert mask_format(None, "(###)") == "(###)"


def test_extra_input_is_ignored():
    assert mask_format("123456", "##-##") == "12-34"


def test_pattern_without_placeholders_passes_through():
    assert mask_format("123", "n/a") == "n/a"
    assert mask_format("123", "") == ""


def test_result_length_matches_pattern():
    patterns = ["(###) ###-####", "****-####", "#", "", "--##--**--", "###-###"]
    values = ["", "1", "12345", "12345678901234567890"]
    for pattern in patterns:
        for value in values:
            assert len(mask_format(value, pattern)) == len(pattern)


def test_multibyte_characters():
    """Test that substitution works per character, not per byte."""
    assert mask_format("ñandú", "#-#-#-#-#") == "ñ-a-n-d-ú"
    assert mask_format("日本語", "«#*#»") == "«日*語»"
    assert mask_format("12", "№ ##") == "№ 12"


def test_literal_asterisks_in_value_are_revealed():
    assert mask_format("a*b", "###") == "a*b"


def test_format_phone_strips_non_digits():
    pattern = "(###) ###-####"
    assert format_phone("123-456-7890", pattern) == mask_format("1234567890", pattern)
    assert format_phone("(123) 456.7890", pattern) == "(123) 456-7890"
    assert format_phone(1234567890, SinglePattern(pattern)) == "(123) 456-7890"


def test_format_phone_picks_pattern_by_digit_count():
    assert format_phone("555-0199", US_PHONES) == "555-0199"
    assert format_phone("800 555 0199", US_PHONES) == "(800) 555-0199"
    assert format_phone("+1 800 555 0199", US_PHONES) == "1 (800) 555-0199"


def test_format_phone_digit_count_thresholds():
    """Test that 11+ digits use key 11, 10 uses key 10, shorter uses key 7."""
    assert US_PHONES.select("1" * 12) == "# (###) ###-####"
    assert US_PHONES.select("1" * 11) == "# (###) ###-####"
    assert US_PHONES.select("1" * 10) == "(###) ###-####"
    assert US_PHONES.select("1" * 9) == "###-####"
    assert US_PHONES.select("") == "###-####"


def test_format_phone_without_digits_keeps_placeholders():
    assert format_phone("call me", "(###) ###-####") == "(###) ###-####"
    assert format_phone("", US_PHONES) == "###-####"
    assert format_phone(None, "###") == "###"


def test_format_phone_missing_table_key():
    patterns = PatternByDigitCount({10: "(###) ###-####"})
    assert format_phone("8005550199", patterns) == "(800) 555-0199"

    with pytest.raises(ValueError, match="No phone pattern for 7-digit numbers"):
        format_phone("555-0199", patterns)


def test_format_phone_ignores_non_ascii_digits():
    # Arabic-Indic digits are not phone digits here
    assert format_phone("٥٥٥1234", "####") == "1234"


def test_format_ssn():
    assert format_ssn("123456789", "###-##-####") == "123-45-6789"
    assert format_ssn(123456789, "***-**-####") == "***-**-6789"
    assert format_ssn("1234", "###-##-####") == "123-4#-####"
