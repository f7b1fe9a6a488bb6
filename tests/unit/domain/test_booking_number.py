import uuid

import pytest

from app.domain.value_objects.booking_number import BookingNumber


def test_generate_returns_unique_uuids():
    numbers = {BookingNumber.generate() for _ in range(50)}
    assert len(numbers) == 50
    for number in numbers:
        assert uuid.UUID(number.value).version == 4


def test_parse_normalizes_case_and_whitespace():
    raw = "  3F2B8C1E-9A4D-4E0B-8F61-2C7D5E9A1B30 "
    assert BookingNumber.parse(raw).value == "3f2b8c1e-9a4d-4e0b-8f61-2c7d5e9a1b30"


@pytest.mark.parametrize("raw", ["", "not-a-uuid", "12345", "3f2b8c1e-9a4d-4e0b-8f61"])
def test_parse_rejects_malformed_tokens(raw):
    with pytest.raises(ValueError):
        BookingNumber.parse(raw)


def test_parse_rejects_non_strings():
    with pytest.raises(ValueError):
        BookingNumber.parse(None)  # type: ignore[arg-type]


def test_equality_with_strings_and_hash():
    number = BookingNumber.generate()
    assert number == number.value
    assert number == BookingNumber(number.value.upper())
    assert {number: 1}[BookingNumber(number.value)] == 1


def test_is_immutable():
    number = BookingNumber.generate()
    with pytest.raises(AttributeError):
        number.value = "other"  # type: ignore[misc]
