"""Data contracts for the projection endpoints."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from wealthplanner.models import CashFlowEvent, PortfolioMetrics, ProjectionPoint


class ProjectionRequest(BaseModel):
    """Inputs required to project a client's wealth curve."""

    model_config = ConfigDict(extra="forbid")

    initialValue: float = Field(..., ge=0, description="Wealth at the start of the projection.")
    interestRate: float = Field(
        0.04,
        ge=0,
        le=1,
        description="Annual interest rate expressed as a decimal (e.g. 0.04 for 4%).",
    )
    projectionYears: int = Field(40, ge=1, le=50, description="Number of future years to project.")
    events: List[CashFlowEvent] = Field(
        default_factory=list,
        description="Cash-flow events already resolved for the client.",
    )


class ProjectionParametersEcho(BaseModel):
    """Parameters the projection was run with."""

    initialValue: float
    interestRate: float
    projectionYears: int
    eventsCount: int


class ProjectionResponse(BaseModel):
    """Yearly wealth curve plus its summary metrics."""

    projectionData: List[ProjectionPoint]
    parameters: ProjectionParametersEcho
    metrics: Optional[PortfolioMetrics] = None


class MetricsRequest(BaseModel):
    """A previously produced curve to summarize."""

    model_config = ConfigDict(extra="forbid")

    projectionData: List[ProjectionPoint]
    initialValue: float = Field(..., ge=0)


class MetricsResponse(BaseModel):
    metrics: Optional[PortfolioMetrics] = None
