"""Configuration for the calculator smoke test harness."""

from collections.abc import Sequence
from pathlib import Path
from typing import Self

from pydantic import Field, model_validator

from calculator_smoke_test.models.base import Model


class HarnessConfig(Model):
    """Configuration for a smoke test run.

    The defaults match a calculator checkout run from its own directory:
    the page is served on port 8000, falling back to 8001 when busy.
    """

    root: Path = Field(default=Path("."), description="Directory holding the page")
    page: str = Field(default="index.html", description="Page file under test")
    required_files: Sequence[str] = Field(
        default=("index.html", "README.md"),
        description="Files that must exist under root",
    )
    max_page_bytes: int = Field(
        default=100_000, gt=0, description="Size ceiling for the page file"
    )
    host: str = Field(default="127.0.0.1", description="Interface to bind")
    port: int = Field(default=8000, ge=1, le=65535, description="Preferred port")
    fallback_port: int = Field(
        default=8001, ge=1, le=65535, description="Port used if preferred is busy"
    )
    startup_timeout: float = Field(
        default=5.0, gt=0, description="Seconds to wait for the readiness signal"
    )
    settle_delay: float = Field(
        default=1.0, ge=0, description="Seconds to wait after the readiness signal"
    )
    probe_timeout: float = Field(
        default=5.0, gt=0, description="Seconds allowed for the page probe request"
    )

    @property
    def page_path(self) -> Path:
        """Path of the page under test."""
        return self.root / self.page

    @model_validator(mode="after")
    def _check_ports(self) -> Self:
        if self.port == self.fallback_port:
            raise ValueError("fallback_port must differ from port")
        return self
