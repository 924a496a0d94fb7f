"""Markers the calculator page is expected to contain."""

from collections.abc import Mapping, Sequence

REQUIRED_ELEMENTS: Sequence[tuple[str, str]] = (
    ("instarinse-calculator", 'class="instarinse-calculator"'),
    ("calculator-title", 'class="calculator-title"'),
    ("teamSize", 'id="teamSize"'),
    ("officeDays", 'id="officeDays"'),
    ("cupsPerDay", 'id="cupsPerDay"'),
    ("currentPaperSlider", 'id="currentPaperSlider"'),
    ("optimalInstarinseSlider", 'id="optimalInstarinseSlider"'),
    ("annualSavings", 'id="annualSavings"'),
    ("breakdownTableBody", 'id="breakdownTableBody"'),
)

EXPORT_LIBRARY_MARKER = "jspdf"
VIEWPORT_MARKER = "viewport"

REQUIRED_FUNCTIONS: Sequence[str] = (
    "updateDailyCupsEstimate",
    "updateAllocationVisualization",
    "validateMixAndUpdate",
    "calculatePotentialSavings",
    "updateBreakdownTable",
    "exportToPDF",
)

CONFIG_OBJECTS: Sequence[tuple[str, str]] = (
    ("GLOBAL_ASSUMPTIONS", "Global assumptions configured"),
    ("INSTARINSE_CONSTANTS", "instarinse® constants configured"),
)

# Numbers are matched the way the page's script writes them (1.0 -> "1").
ASSUMPTIONS: Mapping[str, float] = {
    "electricityRate": 0.22,
    "paperCupCost": 0.15,
    "handwashWater": 1.0,
    "instarinseWater": 0.05,
    "dishwasherCapacity": 40,
}

FORMULA_FRAGMENTS: Sequence[str] = (
    "state.teamSize *",
    "state.cupsPerDay",
    "state.officeDays",
    "/ 100",
    "annualCups",
)

INPUT_CONSTRAINTS: Sequence[tuple[str, str]] = (
    ("teamSize", 'max="50000"'),
    ("officeDays", 'max="7"'),
    ("cupsPerDay", 'step="0.5"'),
    ("currentPaperSlider", 'min="0"'),
    ("optimalInstarinseSlider", 'max="100"'),
)

MIX_VALIDATION_HANDLER = "validateMixAndUpdate"
INVALID_MIX_MARKER = "invalid-mix-overlay"

MEDIA_QUERIES: Sequence[str] = (
    "@media (max-width: 768px)",
    "@media (min-width: 1024px)",
    "grid-template-columns",
)

MOBILE_FEATURES: Sequence[str] = (
    "touch-friendly",
    "mobile-first",
    "min-height: 48px",
    "overflow: hidden",
)
