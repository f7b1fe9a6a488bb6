from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import AsyncSessionLocal
from app.application.interfaces.booking_number_generator import RandomBookingNumberGenerator
from app.application.interfaces.clock import SystemClock
from app.application.use_cases.get_invoice import GetInvoiceUseCase
from app.application.use_cases.query_rentals import (
    GetRentalUseCase,
    ListActiveRentalsUseCase,
    ListRentalsUseCase,
)
from app.application.use_cases.register_pickup import RegisterPickupUseCase
from app.application.use_cases.register_return import RegisterReturnUseCase
from app.config import Settings, get_settings
from app.domain.pricing.resolver import PriceCalculatorResolver
from app.infrastructure.db.repositories.rental_repo_sql import RentalRepoSQL
from app.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from app.infrastructure.in_memory.rental_repo import InMemoryRentalRepo
from app.infrastructure.in_memory.transaction_manager import InMemoryTransactionManager
from app.infrastructure.pdf.reportlab_invoice_renderer import ReportLabInvoiceRenderer


async def get_session(settings: Settings = Depends(get_settings)) -> AsyncSession | None:
    if settings.use_in_memory:
        yield None
        return
    async with AsyncSessionLocal() as session:
        yield session


@lru_cache(maxsize=1)
def _in_memory_bundle():
    rental_repo = InMemoryRentalRepo()
    return {
        "rental_repo": rental_repo,
        "tx_manager": InMemoryTransactionManager(rental_repo),
    }


@lru_cache(maxsize=1)
def _shared_services():
    return {
        "price_resolver": PriceCalculatorResolver(),
        "invoice_renderer": ReportLabInvoiceRenderer(),
        "clock": SystemClock(),
        "booking_number_generator": RandomBookingNumberGenerator(),
    }


def get_use_cases(
    settings: Settings = Depends(get_settings),
    session: AsyncSession | None = Depends(get_session),
):
    if settings.use_in_memory:
        bundle = _in_memory_bundle()
        rental_repo = bundle["rental_repo"]
        tx_manager = bundle["tx_manager"]
    else:
        if not session:
            raise RuntimeError("DB session not available")
        rental_repo = RentalRepoSQL(session)
        tx_manager = SQLAlchemyTransactionManager(session)

    services = _shared_services()
    return {
        "register_pickup": RegisterPickupUseCase(
            rental_repo=rental_repo,
            booking_number_generator=services["booking_number_generator"],
            clock=services["clock"],
            transaction_manager=tx_manager,
        ),
        "register_return": RegisterReturnUseCase(
            rental_repo=rental_repo,
            price_resolver=services["price_resolver"],
            price_config=settings.price_config(),
            clock=services["clock"],
            transaction_manager=tx_manager,
        ),
        "get_rental": GetRentalUseCase(rental_repo=rental_repo),
        "list_rentals": ListRentalsUseCase(rental_repo=rental_repo),
        "list_active_rentals": ListActiveRentalsUseCase(rental_repo=rental_repo),
        "get_invoice": GetInvoiceUseCase(
            rental_repo=rental_repo,
            invoice_renderer=services["invoice_renderer"],
            clock=services["clock"],
        ),
    }
