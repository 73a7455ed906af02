import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from api.routers import health, packing, packing_items, trips
from core.config import settings
from core.logging import setup_logging
from services.store import get_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    store = get_store()
    logger.info("Travel organizer API started with %s storage.", store.backend)
    yield
    logger.info("Travel organizer API shutting down.")


app = FastAPI(
    title="Travel Organizer API",
    description="Plan trips and keep a generated packing checklist for each of them.",
    version="0.1.0",
    lifespan=lifespan,
)

# Allow the frontend dev servers to call the API.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/", tags=["Root"], include_in_schema=False)
def read_root():
    """Redirect to the interactive API docs"""
    return RedirectResponse(url="/docs")


# Mount all routers with the /api prefix
app.include_router(health.router, prefix="/api")
app.include_router(trips.router, prefix="/api")
app.include_router(packing.router, prefix="/api")
app.include_router(packing_items.router, prefix="/api")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000, log_level=settings.LOG_LEVEL.lower())
