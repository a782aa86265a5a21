"""Health check endpoints."""

from fastapi import APIRouter

from landlordshield.services.compliance.regulatory_calendar import CALENDAR_VERSION

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict:
    """Health check, with the regulatory data edition being served."""
    return {
        "status": "healthy",
        "service": "landlordshield-api",
        "version": "0.1.0",
        "calendarVersion": CALENDAR_VERSION,
    }
