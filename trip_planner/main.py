"""
FastAPI Application Entry Point.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import router
from .config import settings
from .services.tracker_store import get_tracker_store
from .services.trip_store import get_trip_store


logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the stores at startup; drain their writers at shutdown."""
    trip_store = get_trip_store()
    tracker_store = get_tracker_store()
    logger.info(f"Data directory: {settings.data_dir}")
    yield
    trip_store.close()
    tracker_store.close()
    logger.info("Stores flushed")


# Create FastAPI app
app = FastAPI(
    title="Trip Planner",
    description="Trips, day-by-day itineraries, parked ideas and travel trackers",
    version="1.0.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "data_dir": str(settings.data_dir),
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "trip_planner.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
