"""Main FastAPI application for the Recurring Task Pattern Engine."""
import logging

from fastapi import FastAPI

from recurrence_engine.config import get_settings
from recurrence_engine.middleware.cors import add_cors_middleware
from recurrence_engine.routers import recurrence_router

settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title="Recurring Task Pattern Engine API",
    description="Validation, projection and description of recurring task patterns",
    version="1.0.0",
)

# Add CORS middleware
add_cors_middleware(app, settings)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": "1.0.0"}


@app.get("/")
async def root():
    """Root endpoint - API welcome message."""
    return {
        "message": "Welcome to the Recurring Task Pattern Engine API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
    }


app.include_router(recurrence_router, prefix="/api")  # Recurrence endpoints: /api/recurrence/...

logger.info("Recurrence service routes registered")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "recurrence_engine.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
