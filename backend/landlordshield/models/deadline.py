"""Canonical deadline value produced by the compliance layer."""

import datetime as dt

from pydantic import BaseModel, Field

from landlordshield.models.enums import Domain


class Deadline(BaseModel):
    """One dated obligation in the deadline feed.

    Built fresh on every aggregation pass and never mutated. ``is_overdue``
    and ``is_critical`` are derived at construction from the record and the
    injected clock. ``source_ref`` is the originating task or certificate id;
    statutory calendar entries have none.
    """

    id: str
    title: str
    date: dt.date
    domain: Domain
    description: str | None = None
    is_overdue: bool = Field(default=False, alias="isOverdue")
    is_critical: bool = Field(default=False, alias="isCritical")
    property_id: str | None = Field(default=None, alias="propertyId")
    source_ref: str | None = Field(default=None, alias="sourceRef")

    model_config = {"frozen": True, "populate_by_name": True}

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "date": self.date.isoformat(),
            "domain": self.domain.value,
            "description": self.description,
            "isOverdue": self.is_overdue,
            "isCritical": self.is_critical,
            "propertyId": self.property_id,
            "sourceRef": self.source_ref,
        }
