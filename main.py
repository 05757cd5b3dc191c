import logging
from contextlib import asynccontextmanager
from typing import Dict, Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import DEBUG, LOG_LEVEL, PORT
from data_ingestion.webhooks import close_webhook_client

from routers.flights import router as flights_router
from routers.operations import router as operations_router
from routers.weather import router as weather_router
from routers.bookings import router as bookings_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.WARNING),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def _add_cors(application: FastAPI):
    """Add CORS middleware to an app."""
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@asynccontextmanager
async def lifespan(main_app: FastAPI):
    """Application lifespan events"""
    logger.info("IAOS operations dashboard starting up...")

    yield

    await close_webhook_client()
    logger.info("IAOS operations dashboard shut down, webhook client closed")


app = FastAPI(
    title="IAOS Operations Dashboard",
    description=(
        "## IAOS Operations Dashboard\n\n"
        "Page data for the airport operations dashboard, proxied from n8n webhooks:\n\n"
        "- **Flight Schedule**: Arrivals, departures and the full schedule, 15 flights per page\n"
        "- **Operations**: Baggage tracking, checked-in passengers and NOTAMs\n"
        "- **Safety Measures**: NOTAM severity tiers with recommended actions\n"
        "- **Weather**: City weather lookups\n"
        "- **Bookings**: Dispatch a selected flight to the PMS\n"
    ),
    version=VERSION,
    lifespan=lifespan,
    debug=DEBUG,
)
_add_cors(app)

app.include_router(flights_router)
app.include_router(operations_router)
app.include_router(weather_router)
app.include_router(bookings_router)


@app.get("/")
async def root() -> Dict[str, Any]:
    """Service information"""
    return {
        "name": "IAOS Operations Dashboard",
        "version": VERSION,
        "status": "operational",
        "documentation": "/docs",
    }


@app.get("/health")
async def health_check() -> Dict[str, str]:
    """Simple health check endpoint"""
    return {"status": "healthy", "version": VERSION}


# Application entry point
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=PORT,
        reload=DEBUG,
        access_log=DEBUG
    )
