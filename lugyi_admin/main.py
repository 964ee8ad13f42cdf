# /lugyi_admin/main.py

# --- Core FastAPI Imports ---
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from . import config

# --- Application-specific Router Imports ---
from .routers import announces_router, dashboard_router, views_router

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # This code runs ONCE when the application starts up.
    config.configure_logging()
    logger.info("%s %s starting", config.APP_TITLE, config.APP_VERSION)
    yield


# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title=config.APP_TITLE,
    description="Administrative backend for the Lugyi media platform: announcements and analytics.",
    version=config.APP_VERSION,
    lifespan=lifespan,
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Static Assets for the server-rendered shells ---
app.mount("/assets", StaticFiles(directory=str(STATIC_DIR / "assets")), name="assets")

# --- API Router Inclusion ---
app.include_router(dashboard_router.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(announces_router.router, prefix="/api/announces", tags=["Announcements"])

# --- Page Routes (HTML) ---
app.include_router(views_router.router)


# --- Health Check Endpoint ---
@app.get("/health", tags=["Health Check"])
async def read_health():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "Lugyi Admin is running!", "version": app.version}
