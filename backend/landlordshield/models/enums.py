"""Enumerations shared by compliance records, deadlines and scores."""

import enum


class Domain(str, enum.Enum):
    TAX = "tax"
    TENANCY_RIGHTS = "tenancy-rights"
    ENERGY = "energy"
    CERTIFICATE = "certificate"
    CUSTOM = "custom"


# Tags the data layer stored before the domains were renamed
LEGACY_DOMAIN_TAGS: dict[str, Domain] = {
    "mtd": Domain.TAX,
    "renters_rights": Domain.TENANCY_RIGHTS,
    "epc": Domain.ENERGY,
}

# The three regulatory areas that carry a readiness score
SCORED_DOMAINS: tuple[Domain, ...] = (
    Domain.TAX,
    Domain.TENANCY_RIGHTS,
    Domain.ENERGY,
)


def coerce_domain(value: object) -> Domain:
    """Map a raw domain tag to a Domain; unknown tags become CUSTOM."""
    if isinstance(value, Domain):
        return value
    if isinstance(value, str):
        tag = value.strip().lower()
        if tag in LEGACY_DOMAIN_TAGS:
            return LEGACY_DOMAIN_TAGS[tag]
        try:
            return Domain(tag)
        except ValueError:
            pass
    return Domain.CUSTOM


class Priority(str, enum.Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


PRIORITY_ORDER: dict[Priority, int] = {
    Priority.CRITICAL: 0,
    Priority.HIGH: 1,
    Priority.MEDIUM: 2,
    Priority.LOW: 3,
}


class CertificateStatus(str, enum.Enum):
    VALID = "valid"
    EXPIRING_SOON = "expiring_soon"
    EXPIRED = "expired"
    MISSING = "missing"


class ComplianceStatus(str, enum.Enum):
    READY = "ready"
    PARTIAL = "partial"
    NOT_READY = "not_ready"


class Impact(str, enum.Enum):
    """Severity tag carried by statutory calendar entries."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"


class ThresholdPhase(str, enum.Enum):
    APRIL_2026 = "april_2026"
    APRIL_2027 = "april_2027"
    APRIL_2028 = "april_2028"
    NOT_REQUIRED = "not_required"


class EpcRating(str, enum.Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"


# Ratings that meet the rental minimum
COMPLIANT_EPC_RATINGS: tuple[EpcRating, ...] = (EpcRating.A, EpcRating.B, EpcRating.C)
