from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_use_cases
from app.api.schemas.rentals import (
    PickupRentalRequest,
    RentalResponse,
    ReturnRentalRequest,
    rental_to_response,
)
from app.domain.errors import RentalNotFoundError

router = APIRouter()


@router.post(
    "/rentals/pickup",
    response_model=RentalResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_pickup(
    payload: PickupRentalRequest,
    use_cases=Depends(get_use_cases),
) -> RentalResponse:
    rental = await use_cases["register_pickup"].execute(
        registration_number=payload.registration_number,
        customer_id=payload.customer_id,
        category=payload.category,
        pickup_datetime=payload.pickup_datetime,
        pickup_meter_reading=payload.pickup_meter_reading,
        email_address=payload.email_address,
    )
    return rental_to_response(rental)


@router.post(
    "/rentals/{booking_number}/return",
    response_model=RentalResponse,
    status_code=status.HTTP_200_OK,
)
async def register_return(
    booking_number: str,
    payload: ReturnRentalRequest,
    use_cases=Depends(get_use_cases),
) -> RentalResponse:
    rental = await use_cases["register_return"].execute(
        booking_number=booking_number,
        return_datetime=payload.return_datetime,
        return_meter_reading=payload.return_meter_reading,
    )
    return rental_to_response(rental)


@router.get("/rentals", response_model=list[RentalResponse])
async def list_rentals(use_cases=Depends(get_use_cases)) -> list[RentalResponse]:
    rentals = await use_cases["list_rentals"].execute()
    return [rental_to_response(r) for r in rentals]


# Declared before /rentals/{booking_number} so "active" is not taken as a booking number
@router.get("/rentals/active", response_model=list[RentalResponse])
async def list_active_rentals(use_cases=Depends(get_use_cases)) -> list[RentalResponse]:
    rentals = await use_cases["list_active_rentals"].execute()
    return [rental_to_response(r) for r in rentals]


@router.get("/rentals/{booking_number}", response_model=RentalResponse)
async def get_rental(
    booking_number: str,
    use_cases=Depends(get_use_cases),
) -> RentalResponse:
    rental = await use_cases["get_rental"].execute(booking_number=booking_number)
    if rental is None:
        raise RentalNotFoundError(booking_number)
    return rental_to_response(rental)
