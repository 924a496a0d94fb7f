"""Sequential runner for page checks."""

import logging
from collections.abc import Callable, MutableSequence, Sequence
from dataclasses import dataclass
from typing import TypeAlias

from calculator_smoke_test.config import HarnessConfig
from calculator_smoke_test.models.result import TestCase

log = logging.getLogger(__name__)

CheckFn: TypeAlias = Callable[[HarnessConfig, MutableSequence[str]], None]


class CheckFailure(Exception):
    """Raised by a check when a required marker, attribute or file is missing."""


@dataclass(frozen=True, kw_only=True)
class Check:
    """A named group of assertions producing exactly one test case.

    The function appends detail lines as it goes and raises on the first
    violation.
    """

    name: str
    run: CheckFn


def run_check(check: Check, config: HarnessConfig) -> TestCase:
    """Run one check, turning any error into a FAIL test case."""
    details: list[str] = []
    try:
        check.run(config, details)
    except Exception as e:
        if not isinstance(e, CheckFailure | OSError):
            log.error("Check %s raised unexpectedly: %s", check.name, e, exc_info=e)
        details.append(f"❌ {e}")
        return TestCase(name=check.name, status="FAIL", details=tuple(details))

    return TestCase(name=check.name, status="PASS", details=tuple(details))


@dataclass(frozen=True, kw_only=True)
class CheckRunner:
    """Runs checks strictly in order without stopping on failures."""

    checks: Sequence[Check]

    def run_all(self, config: HarnessConfig) -> Sequence[TestCase]:
        """Run every check against the configured page.

        Returns:
            One test case per check, in check order

        """
        log.info("Running %d check(s) against %s", len(self.checks), config.page_path)
        results: list[TestCase] = []
        for check in self.checks:
            result = run_check(check, config)
            log.info("Check completed: name=%s status=%s", result.name, result.status)
            results.append(result)
        return results
