"""Compliance models: input records and the deadline value they normalize to."""

from landlordshield.models.deadline import Deadline
from landlordshield.models.enums import (
    CertificateStatus,
    ComplianceStatus,
    Domain,
    EpcRating,
    Impact,
    Priority,
    ThresholdPhase,
)
from landlordshield.models.records import Certificate, Property, Task

__all__ = [
    "Certificate",
    "CertificateStatus",
    "ComplianceStatus",
    "Deadline",
    "Domain",
    "EpcRating",
    "Impact",
    "Priority",
    "Property",
    "Task",
    "ThresholdPhase",
]
