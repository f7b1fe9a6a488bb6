import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.deps import engine
from app.api.error_handlers import register_exception_handlers
from app.api.routers.health import router as health_router
from app.api.routers.invoices import router as invoices_router
from app.api.routers.rentals import router as rentals_router
from app.config import get_settings
from app.infrastructure.db.tables import metadata

settings = get_settings()

# Configure structured logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Starting Rental Service API",
        extra={"environment": settings.environment, "use_in_memory": settings.use_in_memory},
    )
    if not settings.use_in_memory:
        # Initialize DB tables (for dev/demo purposes)
        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
    yield
    await engine.dispose()


app = FastAPI(
    title="Rental Service API",
    version="0.1.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(health_router, tags=["Health"])
app.include_router(rentals_router, prefix="/api", tags=["Rentals"])
app.include_router(invoices_router, prefix="/api", tags=["Invoices"])
