"""Pydantic schemas for compliance results and API request bodies."""

from datetime import date
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, Field, PlainSerializer

from landlordshield.models.enums import ComplianceStatus, Domain, EpcRating, ThresholdPhase

# Money is computed in Decimal and sent to clients as a JSON number
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


# ---------------------------------------------------------------------------
# Scores
# ---------------------------------------------------------------------------

class DomainScore(BaseModel):
    domain: Domain
    score: int = Field(ge=0, le=100)
    status: ComplianceStatus
    completed_count: int = Field(alias="completedCount")
    total_count: int = Field(alias="totalCount")
    outstanding_count: int = Field(alias="outstandingCount")
    next_deadline: date | None = Field(default=None, alias="nextDeadline")
    days_until_deadline: int | None = Field(default=None, alias="daysUntilDeadline")

    model_config = {"frozen": True, "populate_by_name": True}


class ComplianceOverview(BaseModel):
    overall_score: int = Field(ge=0, le=100, alias="overallScore")
    per_domain: dict[Domain, DomainScore] = Field(alias="perDomain")

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def tax(self) -> DomainScore:
        return self.per_domain[Domain.TAX]

    @property
    def tenancy_rights(self) -> DomainScore:
        return self.per_domain[Domain.TENANCY_RIGHTS]

    @property
    def energy(self) -> DomainScore:
        return self.per_domain[Domain.ENERGY]


# ---------------------------------------------------------------------------
# Threshold calculator
# ---------------------------------------------------------------------------

class ThresholdInput(BaseModel):
    gross_income_a: Decimal = Field(default=Decimal("0"), ge=0, alias="grossIncomeA")
    gross_income_b: Decimal = Field(default=Decimal("0"), ge=0, alias="grossIncomeB")
    is_joint_ownership: bool = Field(default=False, alias="isJointOwnership")
    is_income_shielded: bool = Field(default=False, alias="isIncomeShielded")

    model_config = {"populate_by_name": True}


class ThresholdStatus(BaseModel):
    qualifying_income: Money = Field(alias="qualifyingIncome")
    phase: ThresholdPhase
    is_affected: bool = Field(alias="isAffected")
    message: str
    deadline: date | None = None

    model_config = {"frozen": True, "populate_by_name": True}


class PenaltyRequest(BaseModel):
    amount_owed: Decimal = Field(ge=0, alias="amountOwed")
    days_late: int = Field(ge=0, alias="daysLate")

    model_config = {"populate_by_name": True}


class PenaltyResult(BaseModel):
    penalty: Money
    breakdown: list[str]

    model_config = {"frozen": True}


# ---------------------------------------------------------------------------
# Energy upgrade estimates
# ---------------------------------------------------------------------------

class ImprovementRecommendation(BaseModel):
    type: str
    label: str
    description: str
    estimated_cost_mid: Money = Field(alias="estimatedCostMid")
    estimated_points_mid: Money = Field(alias="estimatedPointsMid")
    cost_per_point: Money = Field(alias="costPerPoint")
    cost_effectiveness: str = Field(alias="costEffectiveness")

    model_config = {"frozen": True, "populate_by_name": True}


class UpgradeCostEstimate(BaseModel):
    minimum: int
    maximum: int
    midpoint: int

    model_config = {"frozen": True}


class EpcEstimateRequest(BaseModel):
    current_score: int = Field(ge=0, le=100, alias="currentScore")
    budget: Decimal | None = Field(default=None, ge=0)

    model_config = {"populate_by_name": True}


class EpcEstimate(BaseModel):
    current_score: int = Field(alias="currentScore")
    rating: EpcRating
    is_compliant: bool = Field(alias="isCompliant")
    gap_to_c: int = Field(alias="gapToC")
    recommendations: list[ImprovementRecommendation]
    estimated_cost: UpgradeCostEstimate = Field(alias="estimatedCost")

    model_config = {"frozen": True, "populate_by_name": True}


# ---------------------------------------------------------------------------
# Reminders
# ---------------------------------------------------------------------------

class ReminderPreferences(BaseModel):
    email_reminders: bool = Field(default=True, alias="emailReminders")
    thirty_day_reminder: bool = Field(default=True, alias="thirtyDayReminder")
    seven_day_reminder: bool = Field(default=True, alias="sevenDayReminder")
    on_day_reminder: bool = Field(default=True, alias="onDayReminder")
    overdue_alert: bool = Field(default=True, alias="overdueAlert")

    model_config = {"populate_by_name": True}


# ---------------------------------------------------------------------------
# Request bodies
# ---------------------------------------------------------------------------
# Records stay as plain rows so one malformed row is skipped by the
# compliance layer instead of rejecting the whole request.

class ComplianceOverviewRequest(BaseModel):
    tasks: list[Any] = Field(default_factory=list)
    property_id: str | None = Field(default=None, alias="propertyId")

    model_config = {"populate_by_name": True}


class DeadlineFeedRequest(BaseModel):
    properties: list[Any] = Field(default_factory=list)
    certificates: list[Any] = Field(default_factory=list)
    tasks: list[Any] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class UpcomingDeadlinesRequest(DeadlineFeedRequest):
    limit: int | None = Field(default=None, ge=0, le=500)


class ReminderRequest(DeadlineFeedRequest):
    preferences: ReminderPreferences = Field(default_factory=ReminderPreferences)


class ReportRequest(DeadlineFeedRequest):
    property_id: str | None = Field(default=None, alias="propertyId")
