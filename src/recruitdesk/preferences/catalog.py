"""Catalogues of dashboard metrics, charts and heatmaps."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, TypeVar


@dataclass(frozen=True)
class MetricSpec:
    key: str
    title: str
    value: str
    category: str = "general"
    change: str = ""
    trend: str = ""  # up, down, neutral
    sparkline: tuple[float, ...] = ()
    description: str = ""
    is_important: bool = False


@dataclass(frozen=True)
class ChartSpec:
    key: str
    title: str
    chart_type: str  # line, bar, area
    category: str = "performance"
    description: str = ""
    is_important: bool = False


@dataclass(frozen=True)
class HeatmapSpec:
    key: str
    title: str
    category: str = "distribution"
    description: str = ""
    is_important: bool = False


METRIC_CATEGORIES: dict[str, str] = {
    "engagement": "Engagement",
    "conversion": "Conversion",
    "activity": "Activity",
    "general": "General",
}

ANALYTICS_CATEGORIES: dict[str, str] = {
    "performance": "Performance",
    "distribution": "Distribution",
    "conversion": "Conversion",
    "prediction": "Prediction",
}


def _index(*specs):
    return {s.key: s for s in specs}


METRICS: dict[str, MetricSpec] = _index(
    MetricSpec(
        "impression_rate", "Impression Rate", "84%", "engagement", "12.5%", "up",
        (12, 15, 18, 14, 20, 25, 22),
        "The percentage of users who viewed your program details", True,
    ),
    MetricSpec(
        "click_through_rate", "Click-Through Rate", "21.3%", "engagement", "3.2%", "up",
        (15, 12, 14, 18, 20, 22, 25),
    ),
    MetricSpec(
        "application_completion", "Application Completion", "62.7%", "conversion", "5.8%", "down",
        (65, 62, 58, 60, 55, 58, 54),
        "Percentage of started applications that are completed", True,
    ),
    MetricSpec(
        "average_session", "Avg. Session Duration", "4:32", "engagement", "0:48", "up",
        (3.5, 3.8, 4.1, 3.9, 4.2, 4.5, 4.8),
    ),
    MetricSpec(
        "new_signups", "New Signups", "287", "conversion", "16.4%", "up",
        (220, 245, 260, 248, 265, 280, 295), is_important=True,
    ),
    MetricSpec(
        "conversion_rate", "Conversion Rate", "8.3%", "conversion", "1.2%", "up",
        (6.5, 7.0, 7.2, 7.8, 8.0, 8.3, 8.5),
        "Percentage of visitors who submit an application",
    ),
    MetricSpec(
        "active_applicants", "Active Applicants", "1,248", "activity", "3.1%", "up",
        (1150, 1180, 1210, 1195, 1220, 1240, 1260),
    ),
    MetricSpec(
        "total_applicants", "Total Applicants", "3,824", "general",
        description="Total number of applicants across all programs",
    ),
    MetricSpec(
        "bounce_rate", "Bounce Rate", "38%", "engagement", "2.5%", "down",
        (44, 42, 40, 41, 39, 38, 36),
        "Percentage of visitors who leave without further interaction",
    ),
    MetricSpec(
        "high_intent", "High Intent Leads", "512", "conversion", "8.7%", "up",
        (425, 460, 475, 490, 505, 520, 540),
        "Leads identified as high intent by AI analysis", True,
    ),
    MetricSpec(
        "returning_users", "Returning Users", "45%", "engagement", "2.1%", "up",
        (40, 41, 42, 43, 44, 45, 46),
    ),
    MetricSpec(
        "acceptance_rate", "Acceptance Rate", "18.4%", "general", "0.7%", "neutral",
        (18.2, 18.3, 18.5, 18.1, 18.3, 18.4, 18.5),
        "Percentage of applicants accepted to programs",
    ),
)

CHARTS: dict[str, ChartSpec] = _index(
    ChartSpec("intent_activity", "Intent Activity", "area", "performance",
              "Measures user interest and engagement over time", True),
    ChartSpec("capability_strength", "Capability Strength", "bar", "distribution",
              "Distribution of candidate skills and capabilities"),
    ChartSpec("conversion_funnel", "Conversion Funnel", "bar", "conversion",
              "Tracks movement through recruitment stages", True),
    ChartSpec("response_rate", "Response Over Time", "line", "performance",
              "Shows candidate response rates to outreach efforts"),
    ChartSpec("enrollment_forecast", "Enrollment Forecast", "line", "prediction",
              "Predicted enrollment numbers for upcoming periods"),
)

HEATMAPS: dict[str, HeatmapSpec] = _index(
    HeatmapSpec("geographic_distribution", "Geographic Distribution", "distribution",
                "Shows candidate locations and intent levels across the United States", True),
    HeatmapSpec("intent_capability", "Intent × Capability Matrix", "distribution",
                "Shows the relationship between candidate intent level and their capabilities", True),
    HeatmapSpec("program_interest", "Program Interest Distribution", "distribution",
                "Shows candidate interest levels across different programs and departments"),
    HeatmapSpec("conversion_stage", "Conversion Stage Analysis", "conversion",
                "Shows candidate counts at different conversion stages by program", True),
    HeatmapSpec("demographic_distribution", "Demographic Distribution", "distribution",
                "Shows the distribution of candidates across different demographic factors"),
)

DEFAULT_METRICS: tuple[str, ...] = (
    "impression_rate",
    "application_completion",
    "high_intent",
    "new_signups",
    "conversion_rate",
    "active_applicants",
)

DEFAULT_CHARTS: tuple[str, ...] = (
    "intent_activity",
    "conversion_funnel",
    "capability_strength",
    "response_rate",
)

DEFAULT_HEATMAPS: tuple[str, ...] = (
    "geographic_distribution",
    "intent_capability",
    "conversion_stage",
)

SpecT = TypeVar("SpecT", MetricSpec, ChartSpec, HeatmapSpec)


def group_by_category(catalog: Mapping[str, SpecT]) -> dict[str, list[SpecT]]:
    """Group catalogue entries by category, keeping catalogue order."""
    groups: dict[str, list[SpecT]] = {}
    for spec in catalog.values():
        groups.setdefault(spec.category, []).append(spec)
    return groups


def keys_in_category(catalog: Mapping[str, SpecT], category: str) -> list[str]:
    return [key for key, spec in catalog.items() if spec.category == category]
