"""
Capa de Infraestructura - Servicio de Rentas.

Esta capa contiene las implementaciones concretas de los puertos (interfaces).

Estructura:
- db/: Tabla, repositorio SQL y transacciones (SQLAlchemy async)
- in_memory/: Implementaciones in-memory para desarrollo y testing
- pdf/: Generación de facturas PDF (ReportLab)
"""

from app.infrastructure.db.repositories.rental_repo_sql import RentalRepoSQL
from app.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from app.infrastructure.in_memory import InMemoryRentalRepo, InMemoryTransactionManager
from app.infrastructure.pdf import ReportLabInvoiceRenderer

__all__ = [
    # Database
    "RentalRepoSQL",
    "SQLAlchemyTransactionManager",
    # In-Memory Implementations
    "InMemoryRentalRepo",
    "InMemoryTransactionManager",
    # Documents
    "ReportLabInvoiceRenderer",
]
