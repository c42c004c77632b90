import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from debt_engine.config import settings
from debt_engine.api.routes import amortization, debts, dti, health, simulations

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(
        "Debt engine ready (horizon cap %d months, materiality %.2f%%)",
        settings.DEFAULT_HORIZON_CAP_MONTHS, settings.MATERIALITY_THRESHOLD_PCT,
    )
    yield


app = FastAPI(title="Debt Optimization Engine", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/api")
app.include_router(debts.router, prefix="/api")
app.include_router(amortization.router, prefix="/api")
app.include_router(simulations.router, prefix="/api")
app.include_router(dti.router, prefix="/api")
