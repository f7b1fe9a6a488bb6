"""
Pytest configuration and shared fixtures.

Este módulo provee fixtures reutilizables para:
- Casos de uso con repositorio in-memory, reloj fijo y números de reserva predecibles
- Base de datos SQLite in-memory (aiosqlite) para el repositorio SQL
- Cliente HTTP de prueba (FastAPI TestClient) con estado in-memory limpio
- Payloads de ejemplo
"""

from decimal import Decimal
from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.api.dependencies import _in_memory_bundle
from app.application.interfaces.booking_number_generator import FakeBookingNumberGenerator
from app.application.interfaces.clock import FakeClock
from app.application.use_cases.register_pickup import RegisterPickupUseCase
from app.application.use_cases.register_return import RegisterReturnUseCase
from app.domain.entities.rental import CarCategory
from app.domain.pricing.config import PriceCalculationConfig
from app.domain.pricing.resolver import PriceCalculatorResolver
from app.infrastructure.db.tables import metadata
from app.infrastructure.in_memory.rental_repo import InMemoryRentalRepo
from app.infrastructure.in_memory.transaction_manager import InMemoryTransactionManager
from app.main import app
from tests.constants import FIXED_NOW, PICKUP_AT

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ============================================================================
# FIXTURES DE DOMINIO / CASOS DE USO
# ============================================================================

@pytest.fixture
def price_config() -> PriceCalculationConfig:
    return PriceCalculationConfig(base_day_rental=Decimal("100"), base_km_price=Decimal("5"))


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(FIXED_NOW)


@pytest.fixture
def booking_numbers() -> FakeBookingNumberGenerator:
    return FakeBookingNumberGenerator()


@pytest.fixture
def rental_repo() -> InMemoryRentalRepo:
    return InMemoryRentalRepo()


@pytest.fixture
def tx_manager(rental_repo: InMemoryRentalRepo) -> InMemoryTransactionManager:
    return InMemoryTransactionManager(rental_repo)


@pytest.fixture
def register_pickup(rental_repo, booking_numbers, clock, tx_manager) -> RegisterPickupUseCase:
    return RegisterPickupUseCase(
        rental_repo=rental_repo,
        booking_number_generator=booking_numbers,
        clock=clock,
        transaction_manager=tx_manager,
    )


@pytest.fixture
def register_return(rental_repo, price_config, clock, tx_manager) -> RegisterReturnUseCase:
    return RegisterReturnUseCase(
        rental_repo=rental_repo,
        price_resolver=PriceCalculatorResolver(),
        price_config=price_config,
        clock=clock,
        transaction_manager=tx_manager,
    )


@pytest.fixture
def pickup(register_pickup: RegisterPickupUseCase):
    """Factory: registra un pickup con valores por defecto sobreescribibles."""

    async def _pickup(**overrides):
        params = {
            "registration_number": "ABC123",
            "customer_id": "19800101-1234",
            "category": CarCategory.SMALL_CAR,
            "pickup_datetime": PICKUP_AT,
            "pickup_meter_reading": 1000,
            "email_address": "jane@example.com",
        }
        params.update(overrides)
        return await register_pickup.execute(**params)

    return _pickup


# ============================================================================
# FIXTURES DE BASE DE DATOS
# ============================================================================

@pytest_asyncio.fixture
async def test_engine():
    engine = create_async_engine(TEST_DATABASE_URL, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """
    Sesión nueva por test; el repositorio SQL abre y confirma su propia
    transacción a través del SQLAlchemyTransactionManager.
    """
    session_maker = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        yield session


# ============================================================================
# FIXTURES DE CLIENTE HTTP
# ============================================================================

@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """TestClient con un repositorio in-memory vacío por test."""
    _in_memory_bundle.cache_clear()
    with TestClient(app) as test_client:
        yield test_client
    _in_memory_bundle.cache_clear()
    app.dependency_overrides.clear()


@pytest.fixture
def sample_pickup_payload() -> dict:
    return {
        "registration_number": "ABC123",
        "customer_id": "19800101-1234",
        "category": "SmallCar",
        "pickup_datetime": "2026-02-01T10:00:00",
        "pickup_meter_reading": 1000,
        "email_address": "jane@example.com",
    }
