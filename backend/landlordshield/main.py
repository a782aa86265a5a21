"""LandlordShield compliance FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from landlordshield.config import get_settings
from landlordshield.routers import compliance, health

_settings = get_settings()

app = FastAPI(
    title="LandlordShield API",
    description="Compliance deadlines and readiness scores for UK landlords",
    version="0.1.0",
)

# CORS - allow frontend origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        _settings.app_url,
        "http://localhost:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers - all prefixed with /api
app.include_router(health.router, prefix="/api")
app.include_router(compliance.router, prefix="/api")
