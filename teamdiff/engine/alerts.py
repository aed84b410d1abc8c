"""Hiring alerts: redundancy warnings and the value-add recommendation.

All functions are *pure*.
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import Field

from teamdiff.engine.delta import DeltaAnalysis, LanguageDelta, SkillDelta
from teamdiff.engine.result_model import ResultModel
from teamdiff.engine.rounding import round_count
from teamdiff.engine.thresholds import (
    DEFAULT_POLICY,
    MAX_NAMED_VALUE_ADD_SKILLS,
    MAX_VALUE_ADD_ALERT_SKILLS,
    AnalysisPolicy,
)
from teamdiff.profile_types import format_proficiency


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
Severity = Literal["high", "medium", "low"]


class RedundancyAlert(ResultModel):
    """Warning that the team already covers a candidate skill."""

    type: Literal["redundancy"] = "redundancy"
    severity: Severity
    message: str
    skills: list[SkillDelta]  # same folded name and proficiency
    count: int = Field(ge=0)


class ValueAddAlert(ResultModel):
    """Single combined recommendation for what the candidate adds."""

    type: Literal["value-add"] = "value-add"
    message: str
    skills: list[SkillDelta] = Field(default_factory=list)
    languages: list[LanguageDelta] = Field(default_factory=list)


class AlertBundle(ResultModel):
    redundancy_alerts: list[RedundancyAlert] = Field(default_factory=list)
    value_add_alert: ValueAddAlert | None = None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def generate_alerts(delta: DeltaAnalysis, policy: AnalysisPolicy = DEFAULT_POLICY) -> AlertBundle:
    """Build display-ready alerts from *delta*.

    Redundant skills become one alert per (skill, proficiency) pair; all
    value-add skills and languages collapse into at most one recommendation.
    """
    bundle = AlertBundle(
        redundancy_alerts=_redundancy_alerts(delta, policy),
        value_add_alert=_value_add_alert(delta),
    )
    logger.debug(
        "Generated %d redundancy alerts, value-add alert: %s",
        len(bundle.redundancy_alerts),
        bundle.value_add_alert is not None,
    )
    return bundle


def severity_for(coverage: float, policy: AnalysisPolicy = DEFAULT_POLICY) -> Severity:
    """Severity of a redundancy at *coverage* (0–1)."""
    if coverage >= policy.high_severity_coverage:
        return "high"
    if coverage >= policy.medium_severity_coverage:
        return "medium"
    return "low"


# ---------------------------------------------------------------------------
# Alert builders
# ---------------------------------------------------------------------------
def _redundancy_alerts(delta: DeltaAnalysis, policy: AnalysisPolicy) -> list[RedundancyAlert]:
    groups: dict[tuple[str, str], list[SkillDelta]] = {}
    for skill in delta.redundant_skills:
        key = (skill.skill_name.lower(), skill.candidate_proficiency)
        groups.setdefault(key, []).append(skill)

    total_members = delta.summary.total_team_members or 1
    alerts: list[RedundancyAlert] = []
    for skills in groups.values():
        skill = skills[0]
        level_pct = skill.team_proficiency_distribution.get(skill.candidate_proficiency, 0)
        exact_matches = round_count(level_pct / 100 * total_members)

        if exact_matches > 0:
            plural = "s" if exact_matches > 1 else ""
            message = (
                f"Warning: You already have {exact_matches} team member{plural} "
                f"with {skill.skill_name} at {format_proficiency(skill.candidate_proficiency)} "
                "proficiency level."
            )
        else:
            message = (
                f"Warning: {round_count(skill.team_coverage * 100)}% of your team "
                f"already has {skill.skill_name}."
            )

        alerts.append(RedundancyAlert(
            severity=severity_for(skill.team_coverage, policy),
            message=message,
            skills=skills,
            # falls back to overall coverage even though the message then shows a percentage
            count=exact_matches or round_count(skill.team_coverage * total_members),
        ))
    return alerts


def _value_add_alert(delta: DeltaAnalysis) -> ValueAddAlert | None:
    if not delta.value_add_skills and not delta.value_add_languages:
        return None

    top_skills = delta.value_add_skills[:MAX_VALUE_ADD_ALERT_SKILLS]
    skill_names = [s.skill_name for s in top_skills]
    language_names = [lang.language_name for lang in delta.value_add_languages]

    clauses: list[str] = []
    if skill_names:
        named = "', '".join(skill_names[:MAX_NAMED_VALUE_ADD_SKILLS])
        extra = len(skill_names) - MAX_NAMED_VALUE_ADD_SKILLS
        clauses.append(f"skills '{named}' and {extra} more" if extra > 0 else f"skills '{named}'")
    if language_names:
        clauses.append("languages '{}'".format("', '".join(language_names)))

    message = "Strong Hire: "
    if clauses:
        lacks = any(s.team_coverage == 0 for s in delta.value_add_skills)
        gap = "completely lacks" if lacks else "has limited coverage in"
        message += f"This candidate brings {' and '.join(clauses)}—skills your current team {gap}."

    return ValueAddAlert(
        message=message,
        skills=top_skills,
        languages=delta.value_add_languages,
    )
