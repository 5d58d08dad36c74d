"""
FastAPI entrypoint for the Travel Ledger backend application.
"""
from datetime import datetime
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from tripledger.core.config import settings
from tripledger.core.logging_config import setup_logging
from tripledger.api.router import api_router

setup_logging()

app = FastAPI(
    title=f"{settings.APP_NAME} API",
    description="Backend API for travel expense tracking",
    version=settings.APP_VERSION
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"message": f"{settings.APP_NAME} API is running"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/api/version")
async def version():
    """Report the running API version."""
    return {
        "version": settings.APP_VERSION,
        "timestamp": datetime.utcnow().isoformat()
    }
