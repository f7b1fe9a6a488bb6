from dataclasses import replace
from datetime import timedelta
from decimal import Decimal

import pytest

from app.domain.entities.rental import CarCategory, Rental, RentalStatus
from app.domain.errors import (
    BookingNumberAlreadyExistsError,
    RentalAlreadyCompletedError,
    RentalNotFoundError,
)
from app.domain.value_objects.booking_number import BookingNumber
from tests.constants import FIXED_NOW, PICKUP_AT


def make_rental(n: int = 1, **overrides) -> Rental:
    fields = dict(
        booking_number=BookingNumber(value=f"00000000-0000-0000-0000-{n:012d}"),
        registration_number=f"REG{n}",
        customer_id="19800101-1234",
        email_address="jane@example.com",
        category=CarCategory.SMALL_CAR,
        pickup_datetime=PICKUP_AT,
        pickup_meter_reading=1000,
        created_at=FIXED_NOW,
    )
    fields.update(overrides)
    return Rental(**fields)


def completed(rental: Rental) -> Rental:
    done = replace(rental)
    done.complete(
        return_datetime=PICKUP_AT + timedelta(days=2),
        return_meter_reading=1200,
        calculated_price=Decimal("200.00"),
        completed_at=FIXED_NOW,
    )
    return done


async def test_insert_assigns_sequential_ids(rental_repo):
    first = await rental_repo.insert(make_rental(1))
    second = await rental_repo.insert(make_rental(2))

    assert (first.id, second.id) == (1, 2)


async def test_insert_rejects_duplicate_booking_number(rental_repo):
    await rental_repo.insert(make_rental(1))

    with pytest.raises(BookingNumberAlreadyExistsError):
        await rental_repo.insert(make_rental(1, registration_number="OTHER"))

    assert len(rental_repo.rentals) == 1


async def test_get_returns_copy(rental_repo):
    saved = await rental_repo.insert(make_rental(1))

    fetched = await rental_repo.get_by_booking_number(saved.booking_number)
    fetched.registration_number = "CHANGED"

    again = await rental_repo.get_by_booking_number(saved.booking_number)
    assert again.registration_number == "REG1"


async def test_get_missing_returns_none(rental_repo):
    assert await rental_repo.get_by_booking_number(make_rental(9).booking_number) is None


async def test_complete_transitions_once(rental_repo):
    saved = await rental_repo.insert(make_rental(1))

    result = await rental_repo.complete(completed(saved))

    assert result.status == RentalStatus.COMPLETED
    assert result.calculated_price == Decimal("200.00")

    with pytest.raises(RentalAlreadyCompletedError):
        await rental_repo.complete(completed(saved))


async def test_complete_does_not_touch_pickup_fields(rental_repo):
    saved = await rental_repo.insert(make_rental(1))
    attempt = completed(saved)
    attempt.registration_number = "HIJACK"

    result = await rental_repo.complete(attempt)

    assert result.registration_number == "REG1"


async def test_complete_unknown_rental(rental_repo):
    with pytest.raises(RentalNotFoundError):
        await rental_repo.complete(completed(make_rental(5)))


async def test_list_by_status(rental_repo):
    first = await rental_repo.insert(make_rental(1))
    await rental_repo.insert(make_rental(2))
    await rental_repo.complete(completed(first))

    active = await rental_repo.list_by_status(RentalStatus.ACTIVE)
    done = await rental_repo.list_by_status(RentalStatus.COMPLETED)

    assert [r.id for r in active] == [2]
    assert [r.id for r in done] == [1]


async def test_transaction_rolls_back_on_error(rental_repo, tx_manager):
    with pytest.raises(RuntimeError):
        async with tx_manager.start():
            await rental_repo.insert(make_rental(1))
            raise RuntimeError("boom")

    assert rental_repo.rentals == {}
    saved = await rental_repo.insert(make_rental(2))
    assert saved.id == 1
