"""Models for the manual calculation scenario and its derived quantities."""

from typing import Self

from pydantic import Field, model_validator

from calculator_smoke_test.models.base import Model


class CupMix(Model):
    """Share of cups handled by each washing method, in percent."""

    paper: float = Field(..., ge=0, le=100, description="Disposable paper cups (%)")
    handwash: float = Field(..., ge=0, le=100, description="Hand-washed cups (%)")
    dishwasher: float = Field(
        ..., ge=0, le=100, description="Dishwasher-cleaned cups (%)"
    )

    @property
    def total(self) -> float:
        """Sum of all percentages."""
        return self.paper + self.handwash + self.dishwasher

    @model_validator(mode="after")
    def _check_total(self) -> Self:
        if self.total != 100:
            raise ValueError(f"Cup mix must total 100%, got {self.total:g}%")
        return self


class UnitCosts(Model):
    """Fixed unit-cost constants (GBP, kWh) used by the calculator."""

    paper_cup_cost: float = Field(default=0.15, description="Cost per paper cup")
    electricity_rate: float = Field(default=0.22, description="Cost per kWh")
    handwash_detergent: float = Field(
        default=0.02, description="Detergent cost per hand-washed cup"
    )
    handwash_energy_kwh: float = Field(
        default=0.08, description="Hot water energy per hand-washed cup"
    )
    cycle_energy_kwh: float = Field(
        default=0.9, description="Energy per dishwasher cycle"
    )
    cycle_labour_minutes: float = Field(
        default=30, description="Staff time per dishwasher cycle"
    )
    labour_rate: float = Field(default=15, description="Staff cost per hour")
    cycle_detergent: float = Field(
        default=0.40, description="Detergent cost per dishwasher cycle"
    )
    dishwasher_capacity: int = Field(
        default=40, gt=0, description="Cups per dishwasher cycle"
    )


class Scenario(Model):
    """Team configuration to recompute the calculator's figures for."""

    team_size: int = Field(..., gt=0, description="Number of people")
    office_days: float = Field(..., ge=0, le=7, description="Office days per week")
    cups_per_day: float = Field(..., ge=0, description="Cups per person per day")
    weeks_per_year: int = Field(default=52, gt=0)
    working_days_per_week: int = Field(default=5, gt=0)
    mix: CupMix
    costs: UnitCosts = Field(default_factory=UnitCosts)


class CalculationResult(Model):
    """Quantities derived from a scenario."""

    daily_cups: float
    annual_cups: float
    paper_cups: float
    handwash_cups: float
    dishwasher_cups: float
    paper_cost: float
    handwash_cost: float
    dishwasher_cost: float

    @property
    def total_cost(self) -> float:
        """Total annual cost across all washing methods."""
        return self.paper_cost + self.handwash_cost + self.dishwasher_cost
