"""Human-readable report of check results."""

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from yarl import URL

from calculator_smoke_test.models.result import TestCase

STATUS_SYMBOLS = {
    "PASS": "✅",
    "FAIL": "❌",
}


@dataclass(frozen=True, kw_only=True)
class Summary:
    """Aggregate counts over a run."""

    total: int
    passed: int
    success_rate: float

    @property
    def failed(self) -> int:
        """Number of failed checks."""
        return self.total - self.passed

    @property
    def all_passed(self) -> bool:
        """Whether every check passed."""
        return self.total > 0 and self.passed == self.total


def summarize(results: Sequence[TestCase]) -> Summary:
    """Count results; the success rate is a percentage rounded half up to 0.1."""
    total = len(results)
    passed = sum(1 for result in results if result.passed)
    success_rate = 0.0
    if total:
        rate = Decimal(passed * 100) / Decimal(total)
        success_rate = float(rate.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
    return Summary(total=total, passed=passed, success_rate=success_rate)


def print_report(results: Sequence[TestCase], base_url: URL | None = None) -> None:
    """Print every test case followed by the summary."""
    print()
    print("📊 Test Results")
    print("=" * 16)

    for result in results:
        print()
        print(f"{STATUS_SYMBOLS[result.status]} {result.name} - {result.status}")
        for detail in result.details:
            print(f"   {detail}")

    summary = summarize(results)

    print()
    print("📈 Summary")
    print("=" * 11)
    print(f"Total Tests: {summary.total}")
    print(f"Passed: {summary.passed}")
    print(f"Failed: {summary.failed}")
    print(f"Success Rate: {summary.success_rate:.1f}%")

    print()
    if summary.all_passed:
        print("🎉 All tests passed! Calculator is ready for deployment.")
    else:
        print(
            "⚠️  Some tests failed. Please review and fix issues before deployment."
        )

    if base_url is not None:
        print()
        print(f"🌐 Calculator served at: {base_url}")
