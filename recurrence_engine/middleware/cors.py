"""CORS configuration for the recurrence picker UI."""
from fastapi.middleware.cors import CORSMiddleware
import logging

from recurrence_engine.config import Settings

logger = logging.getLogger(__name__)

# Base allowed origins for development
DEFAULT_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


def allowed_origins(settings: Settings) -> list:
    """Development origins plus the configured frontend URL."""
    origins = list(DEFAULT_ORIGINS)
    if settings.frontend_url and settings.frontend_url not in origins:
        origins.append(settings.frontend_url)
    return origins


def add_cors_middleware(app, settings: Settings):
    """Add CORS middleware to the FastAPI application."""
    # In production, use allow_origin_regex for wildcard support (Vercel deployments)
    if settings.environment == "production":
        logger.info("Using production CORS with Vercel wildcard support")
        app.add_middleware(
            CORSMiddleware,
            allow_origin_regex=r"https://.*\.vercel\.app",
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    else:
        origins = allowed_origins(settings)
        logger.info(f"Using development CORS with origins: {origins}")
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
