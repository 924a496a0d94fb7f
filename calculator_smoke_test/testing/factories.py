"""Test factories for generating test data."""

from polyfactory import Use
from polyfactory.factories import DataclassFactory
from polyfactory.factories.pydantic_factory import ModelFactory

from calculator_smoke_test.models.result import TestCase
from calculator_smoke_test.models.scenario import CupMix, Scenario, UnitCosts


class TestCaseFactory(DataclassFactory[TestCase]):
    """Factory for TestCase."""

    __model__ = TestCase

    status = "PASS"
    details = Use(tuple)


class CupMixFactory(ModelFactory[CupMix]):
    """Factory for a valid CupMix."""

    paper = 20
    handwash = 30
    dishwasher = 50


class ScenarioFactory(ModelFactory[Scenario]):
    """Factory for Scenario with whole-number inputs and a valid mix.

    Team sizes are whole hundreds so percentage splits stay exact.
    """

    team_size = Use(ModelFactory.__random__.randrange, 100, 50_000, 100)
    office_days = Use(ModelFactory.__random__.randint, 0, 7)
    cups_per_day = Use(ModelFactory.__random__.randint, 0, 10)
    weeks_per_year = 52
    working_days_per_week = 5
    mix = Use(CupMixFactory.build)
    costs = Use(UnitCosts)
