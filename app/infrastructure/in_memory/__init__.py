"""Implementaciones in-memory para desarrollo y testing."""

from app.infrastructure.in_memory.rental_repo import InMemoryRentalRepo
from app.infrastructure.in_memory.transaction_manager import InMemoryTransactionManager

__all__ = [
    # Repositories
    "InMemoryRentalRepo",
    # Infrastructure
    "InMemoryTransactionManager",
]
