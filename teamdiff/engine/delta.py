"""Candidate-vs-team delta: which candidate skills and languages are redundant or additive.

All functions are *pure*.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import Field

from teamdiff.engine.aggregation import SkillFrequency, TeamAggregate
from teamdiff.engine.result_model import ResultModel
from teamdiff.engine.rounding import percentage_of
from teamdiff.engine.thresholds import DEFAULT_POLICY, AnalysisPolicy
from teamdiff.profile_types import coerce_profile


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class SkillDelta(ResultModel):
    """One candidate skill measured against the team."""

    skill_name: str  # candidate's casing
    candidate_proficiency: str
    team_coverage: float = Field(ge=0.0, le=1.0)
    team_proficiency_distribution: dict[str, float]  # level → % of whole team
    is_redundant: bool
    is_value_add: bool


class LanguageDelta(ResultModel):
    """One candidate language measured against the team."""

    language_code: str
    language_name: str
    candidate_fluency: str
    team_coverage: float = Field(ge=0.0, le=1.0)
    is_value_add: bool


class DeltaSummary(ResultModel):
    total_redundant_skills: int = 0
    total_value_add_skills: int = 0
    total_value_add_languages: int = 0
    total_team_members: int = 0


class DeltaAnalysis(ResultModel):
    """Classified candidate attributes."""

    redundant_skills: list[SkillDelta]  # coverage desc
    value_add_skills: list[SkillDelta]  # coverage asc, rarest first
    value_add_languages: list[LanguageDelta]  # candidate order
    summary: DeltaSummary


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _skill_key(name: str) -> str:
    """Comparison key for skill names; never used for display."""
    return name.lower()


def _index_team_skills(team: TeamAggregate) -> dict[str, SkillFrequency]:
    # later entries win when two team skills fold to the same key
    return {_skill_key(s.skill_name): s for s in team.skills}


def _proficiency_distribution(skill: SkillFrequency | None, total_members: int) -> dict[str, float]:
    if skill is None:
        return {}
    return {
        level: percentage_of(count, total_members)
        for level, count in skill.proficiency_levels.items()
    }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def calculate_delta(
    candidate: Any,
    team: TeamAggregate,
    policy: AnalysisPolicy = DEFAULT_POLICY,
) -> DeltaAnalysis:
    """Classify each of *candidate*'s skills and languages against *team*.

    A skill is redundant when team coverage is strictly above
    ``policy.redundancy_threshold`` and value-add when strictly below
    ``policy.value_add_threshold``. Languages are only ever value-add.

    Args:
        candidate: Candidate profile (``Profile``, genome payload, or ``None``).
        team: Aggregate built by :func:`build_team_aggregate`.
        policy: Classification thresholds.

    Returns:
        DeltaAnalysis with redundant skills most-covered first and value-add
        skills least-covered first.
    """
    profile = coerce_profile(candidate)
    team_skills = _index_team_skills(team)

    redundant: list[SkillDelta] = []
    value_add: list[SkillDelta] = []
    for skill in profile.skills:
        team_skill = team_skills.get(_skill_key(skill.name))
        coverage = team_skill.percentage / 100 if team_skill else 0.0

        delta = SkillDelta(
            skill_name=skill.name,
            candidate_proficiency=skill.proficiency,
            team_coverage=coverage,
            team_proficiency_distribution=_proficiency_distribution(team_skill, team.total_members),
            is_redundant=coverage > policy.redundancy_threshold,
            is_value_add=coverage < policy.value_add_threshold,
        )
        if delta.is_redundant:
            redundant.append(delta)
        elif delta.is_value_add:
            value_add.append(delta)

    languages: list[LanguageDelta] = []
    for lang in profile.languages:
        team_lang = team.languages.get(lang.code)
        coverage = team_lang.percentage / 100 if team_lang else 0.0
        if coverage < policy.value_add_threshold:
            languages.append(LanguageDelta(
                language_code=lang.code,
                language_name=lang.language_name,
                candidate_fluency=lang.fluency,
                team_coverage=coverage,
                is_value_add=True,
            ))

    redundant.sort(key=lambda d: d.team_coverage, reverse=True)
    value_add.sort(key=lambda d: d.team_coverage)

    logger.debug(
        "Delta against %d members: %d redundant, %d value-add skills, %d value-add languages",
        team.total_members,
        len(redundant),
        len(value_add),
        len(languages),
    )
    return DeltaAnalysis(
        redundant_skills=redundant,
        value_add_skills=value_add,
        value_add_languages=languages,
        summary=DeltaSummary(
            total_redundant_skills=len(redundant),
            total_value_add_skills=len(value_add),
            total_value_add_languages=len(languages),
            total_team_members=team.total_members,
        ),
    )
