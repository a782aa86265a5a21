"""Shared schema helpers and standard error handling."""

from fastapi import HTTPException

from landlordshield.services.compliance.errors import ComplianceInputError


def handle_compliance_error(exc: ComplianceInputError) -> HTTPException:
    """Map a compliance-layer input fault to a 422."""
    return HTTPException(status_code=422, detail=str(exc))
