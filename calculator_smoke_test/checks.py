"""Checks run against the calculator page."""

import logging
import re
from collections.abc import MutableSequence, Sequence

from calculator_smoke_test import expectations
from calculator_smoke_test.config import HarnessConfig
from calculator_smoke_test.runner import Check, CheckFailure

log = logging.getLogger(__name__)


def read_page(config: HarnessConfig) -> str:
    """Read the page under test."""
    try:
        return config.page_path.read_text(encoding="utf-8")
    except OSError as e:
        raise CheckFailure(f"Cannot read {config.page}: {e.strerror or e}") from e


def format_number(value: float) -> str:
    """Render a number the way the page's script prints it."""
    return f"{value:g}"


def find_tags(html: str, element_id: str) -> list[str]:
    """Return every opening tag carrying the given id attribute.

    Attributes that merely end in "id", such as data-id, do not match.
    """
    pattern = rf'<[^<>]*(?<![\w-])id="{re.escape(element_id)}"[^<>]*>'
    return [match.group(0) for match in re.finditer(pattern, html)]


def check_file_structure(config: HarnessConfig, details: MutableSequence[str]) -> None:
    """Required files exist and the page stays under the size ceiling."""
    for name in config.required_files:
        if not (config.root / name).is_file():
            raise CheckFailure(f"Missing required file: {name}")
        details.append(f"✅ {name} exists")

    size = config.page_path.stat().st_size
    size_kb = f"{size / 1024:.1f}"
    if size > config.max_page_bytes:
        raise CheckFailure(f"{config.page} too large: {size_kb}KB")
    details.append(f"✅ {config.page} size: {size_kb}KB")


def check_html_structure(config: HarnessConfig, details: MutableSequence[str]) -> None:
    """Required calculator elements and page-level markers are present."""
    html = read_page(config)

    for label, pattern in expectations.REQUIRED_ELEMENTS:
        if pattern not in html:
            raise CheckFailure(f"Missing element: {label}")
        details.append(f"✅ Element found: {label}")

    if expectations.EXPORT_LIBRARY_MARKER not in html:
        raise CheckFailure("Missing jsPDF dependency")
    details.append("✅ jsPDF dependency found")

    if expectations.VIEWPORT_MARKER not in html:
        raise CheckFailure("Missing responsive viewport meta tag")
    details.append("✅ Responsive viewport configured")


def check_javascript_functions(
    config: HarnessConfig, details: MutableSequence[str]
) -> None:
    """Script functions are declared or assigned, configuration objects exist."""
    html = read_page(config)

    for name in expectations.REQUIRED_FUNCTIONS:
        if f"function {name}" not in html and f"{name} =" not in html:
            raise CheckFailure(f"Missing function: {name}")
        details.append(f"✅ Function found: {name}")

    for name, message in expectations.CONFIG_OBJECTS:
        if name not in html:
            raise CheckFailure(f"Missing {name} configuration")
        details.append(f"✅ {message}")


def check_calculation_logic(
    config: HarnessConfig, details: MutableSequence[str]
) -> None:
    """Formula fragments are present; assumption constants are only noted."""
    html = read_page(config)

    for key, value in expectations.ASSUMPTIONS.items():
        literal = format_number(value)
        if literal in html:
            details.append(f"✅ Assumption verified: {key} = {literal}")
        else:
            log.warning("Could not verify assumption: %s = %s", key, literal)

    for fragment in expectations.FORMULA_FRAGMENTS:
        if fragment not in html:
            raise CheckFailure(f"Missing calculation element: {fragment}")

    details.append("✅ Core calculation formulas present")
    details.append("✅ Percentage conversion logic found")
    details.append("✅ Unit conversion logic found")


def check_input_validation(
    config: HarnessConfig, details: MutableSequence[str]
) -> None:
    """Inputs carry their constraints and the mix validation UI is wired."""
    html = read_page(config)

    for element_id, constraint in expectations.INPUT_CONSTRAINTS:
        if not any(constraint in tag for tag in find_tags(html, element_id)):
            raise CheckFailure(f"Missing constraint for {element_id}: {constraint}")
        details.append(f"✅ Input constraint: {element_id} has {constraint}")

    if expectations.MIX_VALIDATION_HANDLER not in html:
        raise CheckFailure("Missing mix validation logic")
    details.append("✅ Mix validation logic found")

    if expectations.INVALID_MIX_MARKER not in html:
        raise CheckFailure("Missing invalid mix overlay")
    details.append("✅ Invalid mix overlay configured")


def check_responsive_design(
    config: HarnessConfig, details: MutableSequence[str]
) -> None:
    """Media queries are present; mobile optimisations are noted if found."""
    html = read_page(config)

    for query in expectations.MEDIA_QUERIES:
        if query not in html:
            raise CheckFailure(f"Missing responsive design: {query}")
        details.append(f"✅ Responsive feature: {query}")

    for feature in expectations.MOBILE_FEATURES:
        if feature in html or re.sub(r"[:-]", "", feature) in html:
            details.append(f"✅ Mobile feature: {feature}")
        else:
            log.debug("Mobile feature not found: %s", feature)


DEFAULT_CHECKS: Sequence[Check] = (
    Check(name="File Structure", run=check_file_structure),
    Check(name="HTML Structure", run=check_html_structure),
    Check(name="JavaScript Functions", run=check_javascript_functions),
    Check(name="Calculation Logic", run=check_calculation_logic),
    Check(name="Input Validation", run=check_input_validation),
    Check(name="Responsive Design", run=check_responsive_design),
)
