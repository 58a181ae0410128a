"""Tests for the whole-string validators and the pattern registry."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from malaysian_patterns import DataClass, REGISTRY, describe, get_spec, validate
from malaysian_patterns.patterns import SENTENCE_PATTERNS, scan_sentence


# ── Registry ─────────────────────────────────────────────────────────

def test_registry_has_one_spec_per_class():
    assert set(REGISTRY) == set(DataClass)
    for dc, spec in REGISTRY.items():
        assert spec.data_class is dc


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        REGISTRY[DataClass.NAME] = None


@pytest.mark.parametrize("data_class", list(DataClass))
def test_every_example_validates(data_class):
    examples = get_spec(data_class).examples
    assert examples
    for example in examples:
        assert validate(data_class, example), example


def test_describe():
    info = describe(DataClass.EMAIL)
    assert info["pattern_source"] == r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
    assert info["description"] == "Standard email address format"
    assert "user@example.com" in info["examples"]


def test_lookup_by_string():
    assert get_spec("Phone") is REGISTRY[DataClass.PHONE]
    assert validate("email", "admin@gov.my")


def test_unknown_class_rejected():
    with pytest.raises(ValueError):
        DataClass.parse("address")


# ── Name ─────────────────────────────────────────────────────────────

@pytest.mark.parametrize("value", [
    "Siti Nurhaliza binti Ahmad",
    "Aminah bte Hassan",
    "Nurul Ain",
    "O'Neil",
    "Mr. Tan",
])
def test_valid_names(value):
    assert validate(DataClass.NAME, value)


@pytest.mark.parametrize("value", [
    "123Ahmad",
    "User@Name",
    "A",
    "Name with numbers 123",
    "Special#Characters",
    "VeryLongNameThatExceedsTheTypicalLengthLimitForMalaysianNames",
    "",
    "Name_with_underscore",
    "Name%with%percent",
])
def test_invalid_names(value):
    assert not validate(DataClass.NAME, value)


def test_name_length_bounds():
    assert validate(DataClass.NAME, "Ab")
    assert validate(DataClass.NAME, "a" * 50)
    assert not validate(DataClass.NAME, "a" * 51)


def test_slash_connective_is_not_a_name_character():
    # s/o and d/o are found by the extractor but fail the whole-string pattern
    assert not validate(DataClass.NAME, "Rajesh s/o Krishnan")


# ── Phone ────────────────────────────────────────────────────────────

@pytest.mark.parametrize("value", [
    "+60123456789",
    "60123456789",
    "0123456789",
    "012-3456789",
    "+603-12345678",
    "03-12345678",
    "019-1234567",
    "017-8901234",
    "016-7654321",
    "04-1234567",
    "07-3456789",
    "011-12345678",
])
def test_valid_phones(value):
    assert validate(DataClass.PHONE, value)


@pytest.mark.parametrize("value", [
    "123456",
    "+1234567890",
    "abc123456789",
    "012345",
    "+60-12-345-6789",
    "60 123 456 789",
    "012.345.6789",
    "++60123456789",
    "601234567890123",
])
def test_invalid_phones(value):
    assert not validate(DataClass.PHONE, value)


def test_three_digit_area_code_needs_no_hyphen():
    assert not validate(DataClass.PHONE, "082-123456")
    assert validate(DataClass.PHONE, "0821234567")


# ── Email ────────────────────────────────────────────────────────────

@pytest.mark.parametrize("value", [
    "user@example.com",
    "siti123@yahoo.com.my",
    "test.email+tag@domain.co.uk",
    "user_name@domain.org",
    "firstname.lastname@company.com.my",
])
def test_valid_emails(value):
    assert validate(DataClass.EMAIL, value)


@pytest.mark.parametrize("value", [
    "invalid.email",
    "@domain.com",
    "user@",
    "user name@domain.com",
    "user@domain",
    "user@@domain.com",
    "user@.com",
    "user@domain.c",
])
def test_invalid_emails(value):
    assert not validate(DataClass.EMAIL, value)


def test_email_grammar_is_permissive():
    # Not RFC: leading dots and doubled dots pass
    assert validate(DataClass.EMAIL, ".user@domain.com")
    assert validate(DataClass.EMAIL, "user@domain..com")


# ── Trimming and totality ────────────────────────────────────────────

@pytest.mark.parametrize("data_class,value", [
    (DataClass.NAME, "Lim Wei Ming"),
    (DataClass.PHONE, "012-3456789"),
    (DataClass.EMAIL, "lim.wei@company.my"),
    (DataClass.PHONE, "abc"),
])
def test_surrounding_whitespace_ignored(data_class, value):
    assert validate(data_class, f" {value} ") == validate(data_class, value)
    assert validate(data_class, f"\t{value}\n") == validate(data_class, value)


def test_interior_whitespace_matters():
    assert not validate(DataClass.PHONE, "012 3456789")


def test_non_text_input_does_not_raise():
    assert validate(DataClass.PHONE, 60123456789)
    assert isinstance(validate(DataClass.NAME, None), bool)
    assert not validate(DataClass.EMAIL, 42)


def test_empty_string_fails_every_class():
    for dc in DataClass:
        assert not validate(dc, "")
        assert not validate(dc, "   ")


# ── Sentence scan ────────────────────────────────────────────────────

def test_scan_order_follows_detectors():
    order = [dc for dc, _ in SENTENCE_PATTERNS]
    assert order == [DataClass.NAME, DataClass.PHONE, DataClass.EMAIL]


def test_scan_reports_offsets():
    text = "Tan Ah Kow: 016-7654321"
    spans = scan_sentence(text)
    assert [(s.data_class, s.value) for s in spans] == [
        (DataClass.NAME, "Tan Ah Kow"),
        (DataClass.PHONE, "016-7654321"),
    ]
    for s in spans:
        assert text[s.start:s.end] == s.value


def test_scan_phone_allows_space_separator():
    spans = scan_sentence("call 012 3456789 now")
    assert [s.value for s in spans] == ["012 3456789"]
