"""Manual recomputation of the calculator's formulas for a fixed scenario."""

from calculator_smoke_test.models.scenario import (
    CalculationResult,
    CupMix,
    Scenario,
)

DEFAULT_SCENARIO = Scenario(
    team_size=1000,
    office_days=3,
    cups_per_day=2,
    mix=CupMix(paper=20, handwash=30, dishwasher=50),
)


def calculate(scenario: Scenario) -> CalculationResult:
    """Compute usage and annual cost for a scenario.

    Category usage divides by 100 after multiplying so that whole-number
    percentages of a whole-number total stay exact and sum to annual usage.
    """
    weekly_cups = scenario.team_size * scenario.cups_per_day * scenario.office_days
    daily_cups = weekly_cups / scenario.working_days_per_week
    annual_cups = weekly_cups * scenario.weeks_per_year

    paper_cups = annual_cups * scenario.mix.paper / 100
    handwash_cups = annual_cups * scenario.mix.handwash / 100
    dishwasher_cups = annual_cups * scenario.mix.dishwasher / 100

    costs = scenario.costs
    handwash_unit = (
        costs.handwash_detergent + costs.handwash_energy_kwh * costs.electricity_rate
    )
    cycle_cost = (
        costs.cycle_energy_kwh * costs.electricity_rate
        + costs.cycle_labour_minutes / 60 * costs.labour_rate
        + costs.cycle_detergent
    )

    return CalculationResult(
        daily_cups=daily_cups,
        annual_cups=annual_cups,
        paper_cups=paper_cups,
        handwash_cups=handwash_cups,
        dishwasher_cups=dishwasher_cups,
        paper_cost=paper_cups * costs.paper_cup_cost,
        handwash_cost=handwash_cups * handwash_unit,
        dishwasher_cost=dishwasher_cups * cycle_cost / costs.dishwasher_capacity,
    )


def _format_count(value: float) -> str:
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def print_calculations(scenario: Scenario, result: CalculationResult) -> None:
    """Print a scenario and its derived figures."""
    mix = scenario.mix

    print()
    print("🧮 Manual Calculation Verification")
    print("=" * 35)
    print("Team Configuration:")
    print(f"  Team Size: {scenario.team_size:,} people")
    print(f"  Office Days: {scenario.office_days:g} days/week")
    print(f"  Cups per Person: {scenario.cups_per_day:g} cups/day")
    print(f"  Daily Usage: {_format_count(result.daily_cups)} cups/day")
    print(f"  Annual Usage: {_format_count(result.annual_cups)} cups/year")

    print()
    print(f"Current Mix ({mix.total:g}%):")
    for label, cups, percent in (
        ("Paper", result.paper_cups, mix.paper),
        ("Handwash", result.handwash_cups, mix.handwash),
        ("Dishwasher", result.dishwasher_cups, mix.dishwasher),
    ):
        print(f"  {label}: {_format_count(cups)} cups ({percent:g}%)")

    print()
    print("Cost Breakdown:")
    print(f"  Paper Cups: £{result.paper_cost:,.0f}")
    print(f"  Hand Washing: £{result.handwash_cost:,.0f}")
    print(f"  Dishwasher: £{result.dishwasher_cost:,.0f}")
    print(f"  Total Annual Cost: £{result.total_cost:,.0f}")

    print()
    print("✅ Manual calculations completed successfully")


def verify_calculations(scenario: Scenario = DEFAULT_SCENARIO) -> CalculationResult:
    """Recompute and print the figures for a scenario."""
    result = calculate(scenario)
    print_calculations(scenario, result)
    return result
