"""Classification thresholds and display limits used across the engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------
REDUNDANCY_THRESHOLD = 0.8  # coverage strictly above → redundant
VALUE_ADD_THRESHOLD = 0.2  # coverage strictly below → value add

# ---------------------------------------------------------------------------
# Redundancy severity
# ---------------------------------------------------------------------------
HIGH_SEVERITY_COVERAGE = 0.9
MEDIUM_SEVERITY_COVERAGE = 0.85

# ---------------------------------------------------------------------------
# Alert text
# ---------------------------------------------------------------------------
MAX_VALUE_ADD_ALERT_SKILLS = 10
MAX_NAMED_VALUE_ADD_SKILLS = 3

# Level recorded when a skill/language carries no proficiency/fluency.
UNKNOWN_LEVEL = "unknown"

# ---------------------------------------------------------------------------
# Skill map
# ---------------------------------------------------------------------------
RADAR_TEAM_SKILLS = 6
RADAR_CANDIDATE_SKILLS = 2
SKILL_EXTENSION_THRESHOLD = 0.2
FREQUENCY_CHART_MAX_SKILLS = 15


class AnalysisPolicy(BaseModel):
    """Thresholds and severity cut-offs for one analysis run."""

    model_config = ConfigDict(frozen=True)

    redundancy_threshold: float = Field(default=REDUNDANCY_THRESHOLD, ge=0.0, le=1.0)
    value_add_threshold: float = Field(default=VALUE_ADD_THRESHOLD, ge=0.0, le=1.0)
    high_severity_coverage: float = Field(default=HIGH_SEVERITY_COVERAGE, ge=0.0, le=1.0)
    medium_severity_coverage: float = Field(default=MEDIUM_SEVERITY_COVERAGE, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def check_ordering(self) -> AnalysisPolicy:
        """Keep the redundant and value-add bands disjoint and severities nested."""
        if self.value_add_threshold >= self.redundancy_threshold:
            raise ValueError("value_add_threshold must be below redundancy_threshold")
        if not (self.redundancy_threshold <= self.medium_severity_coverage <= self.high_severity_coverage):
            raise ValueError(
                "severity cut-offs must satisfy "
                "redundancy_threshold <= medium_severity_coverage <= high_severity_coverage"
            )
        return self


DEFAULT_POLICY = AnalysisPolicy()
