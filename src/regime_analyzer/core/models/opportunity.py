"""Tax opportunity models."""

from typing import Optional

from pydantic import BaseModel, Field

from regime_analyzer.core.models.enums import (
    ImplementationEffort,
    OpportunityCategory,
    RiskLevel,
    TaxRegime,
)

IMMEDIATE = "Immediate"


class Opportunity(BaseModel):
    """A tax optimization opportunity.

    Built by an analyzer with a neutral priority; the final priority is
    assigned once by the priority scorer.
    """

    category: OpportunityCategory = Field(..., description="Opportunity category")
    title: str = Field(..., description="Short title")
    description: str = Field(..., description="What the opportunity is about")
    estimated_savings: int = Field(..., ge=0, description="Annual savings (centavos)")
    implementation_cost: int = Field(default=0, ge=0, description="Cost (centavos)")
    roi: float = Field(..., description="Return on investment (%)")
    risk_level: RiskLevel = Field(..., description="Implementation risk")
    implementation_effort: ImplementationEffort = Field(..., description="Effort")
    applicable_regimes: list[TaxRegime] = Field(default_factory=list)
    requirements: list[str] = Field(default_factory=list)
    tax_break: str = Field(default="", description="Legal reference")
    timeline: str = Field(default=IMMEDIATE)
    priority: int = Field(default=5, ge=1, le=10, description="Priority 1-10")
    action_items: list[str] = Field(default_factory=list)
    success_metrics: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def is_immediate(self) -> bool:
        """Whether it can be implemented right away."""
        return self.timeline == IMMEDIATE

    @property
    def net_benefit(self) -> int:
        """Savings minus implementation cost (may be negative)."""
        return self.estimated_savings - self.implementation_cost


class OpportunityFilter(BaseModel):
    """Optional filters applied over a ranked opportunity list."""

    category: Optional[OpportunityCategory] = Field(default=None)
    risk_level: Optional[RiskLevel] = Field(default=None)
    min_roi: Optional[float] = Field(default=None, description="Minimum ROI (%)")


class OpportunitySummary(BaseModel):
    """Aggregate figures over a list of opportunities."""

    total_opportunities: int = Field(default=0, ge=0)
    potential_annual_savings: int = Field(default=0, ge=0, description="Centavos")
    high_priority_count: int = Field(default=0, ge=0, description="Priority >= 7")
    implementable_now: int = Field(default=0, ge=0, description="Timeline 'Immediate'")


class OpportunitiesResult(BaseModel):
    """Ranked opportunities plus their summary."""

    opportunities: list[Opportunity] = Field(default_factory=list)
    summary: OpportunitySummary = Field(default_factory=OpportunitySummary)
