"""Models for check results."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, kw_only=True)
class TestCase:
    """Recorded outcome of a single check.

    Detail lines are purely descriptive and only used by the report.
    """

    __test__ = False

    name: str
    status: Literal["PASS", "FAIL"]
    details: Sequence[str] = ()

    @property
    def passed(self) -> bool:
        """Whether the check passed."""
        return self.status == "PASS"
