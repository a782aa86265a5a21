"""Input records read by the compliance layer: Property, Task, Certificate.

Records arrive from the data layer either as these models or as plain rows.
Both the camelCase API names and the snake_case storage column names are
accepted; serialization uses camelCase.
"""

from datetime import date, datetime

from pydantic import AliasChoices, BaseModel, Field, field_validator

from landlordshield.models.enums import (
    CertificateStatus,
    Domain,
    Priority,
    coerce_domain,
)
from landlordshield.models.helpers import parse_date, parse_datetime

# Human labels for certificate kinds; unknown kinds fall back to the raw tag
CERTIFICATE_LABELS: dict[str, str] = {
    "gas_safety": "Gas Safety Certificate",
    "eicr": "EICR (Electrical)",
    "epc": "EPC Certificate",
    "smoke_co": "Smoke & CO Alarms",
    "legionella": "Legionella Assessment",
    "buildings_insurance": "Buildings Insurance",
    "landlord_insurance": "Landlord Insurance",
    "hmo_licence": "HMO Licence",
    "right_to_rent": "Right to Rent Check",
}


def _choices(camel: str, *others: str) -> dict:
    return {
        "validation_alias": AliasChoices(camel, *others),
        "serialization_alias": camel,
    }


class Property(BaseModel):
    id: str
    address_line1: str = Field(**_choices("addressLine1", "address_line1"))
    address_line2: str | None = Field(default=None, **_choices("addressLine2", "address_line2"))
    city: str | None = None
    postcode: str | None = None

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def full_address(self) -> str:
        parts = [self.address_line1]
        if self.address_line2:
            parts.append(self.address_line2)
        parts.extend(p for p in (self.city, self.postcode) if p)
        return ", ".join(parts)

    @property
    def short_address(self) -> str:
        if self.postcode:
            return f"{self.address_line1}, {self.postcode}"
        return self.address_line1


class Task(BaseModel):
    """A checklist item; property_id None means account-wide."""

    id: str
    owner_id: str | None = Field(default=None, **_choices("ownerId", "owner_id", "user_id"))
    property_id: str | None = Field(default=None, **_choices("propertyId", "property_id"))
    domain: Domain = Field(default=Domain.CUSTOM, **_choices("domain", "pillar"))
    key: str = Field(default="", **_choices("key", "item_key"))
    title: str
    description: str | None = None
    is_completed: bool = Field(default=False, **_choices("isCompleted", "is_completed"))
    completed_at: datetime | None = Field(default=None, **_choices("completedAt", "completed_at"))
    due_date: date | None = Field(default=None, **_choices("dueDate", "due_date"))
    priority: Priority = Priority.MEDIUM

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("domain", mode="before")
    @classmethod
    def _coerce_domain(cls, v: object) -> Domain:
        return coerce_domain(v)

    @field_validator("due_date", mode="before")
    @classmethod
    def _lenient_due_date(cls, v: object) -> date | None:
        return parse_date(v)

    @field_validator("completed_at", mode="before")
    @classmethod
    def _lenient_completed_at(cls, v: object) -> datetime | None:
        return parse_datetime(v)

    @field_validator("priority", mode="before")
    @classmethod
    def _coerce_priority(cls, v: object) -> Priority:
        if v is None:
            return Priority.MEDIUM
        try:
            return Priority(v)
        except ValueError:
            return Priority.LOW


class Certificate(BaseModel):
    id: str
    property_id: str = Field(**_choices("propertyId", "property_id"))
    kind: str = Field(**_choices("kind", "cert_type"))
    status: CertificateStatus = CertificateStatus.VALID
    issued_date: date | None = Field(default=None, **_choices("issuedDate", "issued_date"))
    expiry_date: date | None = Field(default=None, **_choices("expiryDate", "expiry_date"))

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, v: object) -> CertificateStatus:
        # Status only drives criticality; a dated row still yields a deadline
        try:
            return CertificateStatus(v)
        except ValueError:
            return CertificateStatus.VALID

    @field_validator("issued_date", "expiry_date", mode="before")
    @classmethod
    def _lenient_dates(cls, v: object) -> date | None:
        return parse_date(v)

    @property
    def label(self) -> str:
        return CERTIFICATE_LABELS.get(self.kind, self.kind.replace("_", " "))
