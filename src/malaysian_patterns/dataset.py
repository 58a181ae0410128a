"""Fixed labelled dataset for QA annotation, plus sample sentences."""

from __future__ import annotations

from .types import DataClass, LabeledCase

_NAMES_VALID = [
    "Ahmad bin Abdullah",
    "Siti Nurhaliza binti Ahmad",
    "Lim Wei Ming",
    "Tan Ah Kow",
    "Rajesh s/o Krishnan",
    "Priya d/o Raman",
    "Muhammad Al-Fatih",
    "Lee Chong Wei",
    "Nurul Ain",
    "Wong Kar Wai",
    "Deepika Padukone",
    "Aziz bin Omar",
    "Fatimah Az-Zahra",
    "Chen Li Hua",
    "Ravi Kumar",
    "Aminah bte Hassan",
]

_NAMES_INVALID = [
    "123Ahmad",
    "User@Name",
    "A",
    "Name with numbers 123",
    "Special#Characters",
    "VeryLongNameThatExceedsTheTypicalLengthLimitForMalaysianNames",
    "",
    "Name_with_underscore",
    "Name%with%percent",
]

_PHONES_VALID = [
    "+60123456789",
    "60123456789",
    "0123456789",
    "012-3456789",
    "+603-12345678",
    "03-12345678",
    "082-123456",
    "019-1234567",
    "017-8901234",
    "016-7654321",
    "04-1234567",
    "07-3456789",
]

_PHONES_INVALID = [
    "123456",
    "+1234567890",
    "abc123456789",
    "012345",
    "+60-12-345-6789",
    "60 123 456 789",
    "012.345.6789",
    "++60123456789",
    "601234567890123",
]

_EMAILS_VALID = [
    "user@example.com",
    "ahmad.ibrahim@gmail.com",
    "siti123@yahoo.com.my",
    "lim.wei@company.my",
    "test.email+tag@domain.co.uk",
    "user_name@domain.org",
    "firstname.lastname@company.com.my",
    "admin@gov.my",
    "support@bank.com.my",
]

_EMAILS_INVALID = [
    "invalid.email",
    "@domain.com",
    "user@",
    "user name@domain.com",
    "user@domain",
    "user@@domain.com",
    "user@.com",
    ".user@domain.com",
    "user@domain..com",
]

# (data class, values, expected match, category)
_GROUPS = [
    (DataClass.NAME, _NAMES_VALID, True, "Valid Malaysian Name"),
    (DataClass.NAME, _NAMES_INVALID, False, "Invalid Name Format"),
    (DataClass.PHONE, _PHONES_VALID, True, "Valid Malaysian Phone"),
    (DataClass.PHONE, _PHONES_INVALID, False, "Invalid Phone Format"),
    (DataClass.EMAIL, _EMAILS_VALID, True, "Valid Email"),
    (DataClass.EMAIL, _EMAILS_INVALID, False, "Invalid Email Format"),
]


def generate_test_dataset() -> list[LabeledCase]:
    """All labelled cases; ids are ``<class>-<n>`` with n counting across classes."""
    cases: list[LabeledCase] = []
    n = 1
    for data_class, values, expected, category in _GROUPS:
        for value in values:
            cases.append(LabeledCase(
                id=f"{data_class.value}-{n}",
                value=value,
                data_class=data_class,
                expected_match=expected,
                category=category,
            ))
            n += 1
    return cases


SAMPLE_SENTENCES = (
    "Hi, my name is Ahmad bin Abdullah and you can reach me at 012-3456789 or email me at ahmad.abdullah@gmail.com",
    "Please contact Siti Nurhaliza at +60123456789 or siti.nurhaliza@yahoo.com.my for more information",
    "Lim Wei Ming from Kuala Lumpur can be reached at 03-12345678 or lim.weiming@company.my",
    "Dr. Rajesh s/o Krishnan is available at 019-8765432 and his email is rajesh.krishnan@hospital.my",
    "For urgent matters, call Tan Ah Kow at +603-87654321 or send an email to tan.ahkow@business.com.my",
    "Priya d/o Raman works at the office, her contact is 017-2345678 and email priya.raman@office.org",
    "Muhammad Al-Fatih can be contacted via phone 016-9876543 or email muhammad.alfatih@university.edu.my",
    "Lee Chong Wei's assistant can be reached at 04-1234567 or assistant@leechongwei.com",
    "Contact our customer service team at 1300-88-1234 or support@company.com.my for assistance",
    "The meeting with Wong Kar Wai is scheduled for tomorrow, please call 082-765432 or email wong.karwai@film.my",
)
