"""Main FastAPI application"""
from fastapi import FastAPI
from marketplace_api.config import get_settings
from marketplace_api.middleware.cors import setup_cors
from marketplace_api.middleware.error_handler import setup_error_handlers
import logging

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="VA Marketplace API",
    description="Notification emails and hourly rate insights for the VA marketplace",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Setup CORS
setup_cors(app)

# Error responses and the catch-all middleware
setup_error_handlers(app)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "va-marketplace-api", "environment": settings.environment}


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "VA Marketplace API",
        "version": "1.0.0",
        "docs": "/docs"
    }

# Import and include routers
from marketplace_api.routers import notifications, rates

app.include_router(notifications.router, prefix="/api", tags=["Notifications"])
app.include_router(rates.router, prefix="/api/rates", tags=["Rates"])

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
