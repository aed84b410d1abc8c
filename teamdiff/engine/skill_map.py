"""Skill map data: radar points, candidate extensions and frequency rows.

Shapes the aggregate (and optionally a candidate) into plain values a chart
can draw directly. All functions are *pure*.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from teamdiff.engine.aggregation import SkillFrequency, TeamAggregate
from teamdiff.engine.result_model import ResultModel
from teamdiff.engine.thresholds import (
    FREQUENCY_CHART_MAX_SKILLS,
    RADAR_CANDIDATE_SKILLS,
    RADAR_TEAM_SKILLS,
    SKILL_EXTENSION_THRESHOLD,
    UNKNOWN_LEVEL,
)
from teamdiff.profile_types import SkillObservation, coerce_profile


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class RadarPoint(ResultModel):
    skill: str
    team_value: float = Field(ge=0.0, le=1.0)  # share of team with the skill
    candidate_value: float = Field(ge=0.0, le=1.0)  # proficiency mapped to 0–1


class SkillExtension(ResultModel):
    """A radar axis where the candidate reaches well past the team."""

    index: int = Field(ge=0)
    skill: str
    extension: float


class FrequencyRow(ResultModel):
    skill_name: str
    count: int
    percentage: float
    label: str


# ---------------------------------------------------------------------------
# Proficiency scale
# ---------------------------------------------------------------------------
PROFICIENCY_VALUES: dict[str, float] = {
    "master": 1.0,
    "expert": 0.8,
    "proficient": 0.5,
    "novice": 0.3,
    "no-experience-interested": 0.1,
}
_DEFAULT_PROFICIENCY_VALUE = 0.3


def proficiency_to_value(proficiency: str) -> float:
    """Map a proficiency level onto the 0–1 radar scale.

    Undeclared proficiency plots at 0; unrecognised levels sit at novice.
    """
    if not proficiency or proficiency == UNKNOWN_LEVEL:
        return 0.0
    return PROFICIENCY_VALUES.get(proficiency.lower(), _DEFAULT_PROFICIENCY_VALUE)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def build_radar_points(team: TeamAggregate, candidate: Any = None) -> list[RadarPoint]:
    """Radar axes: the team's top skills plus a couple the candidate brings.

    Args:
        team: Team aggregate.
        candidate: Optional candidate profile; without it every candidate
            value is 0.

    Returns:
        One point per axis, team skills first in aggregate order.
    """
    team_skills = team.skills[:RADAR_TEAM_SKILLS]
    candidate_skills = coerce_profile(candidate).skills if candidate is not None else []

    team_keys = {s.skill_name.lower() for s in team_skills}
    distinct = [s for s in candidate_skills if s.name.lower() not in team_keys][:RADAR_CANDIDATE_SKILLS]

    team_values: dict[str, float] = {}
    for skill in team_skills:
        team_values[skill.skill_name.lower()] = skill.percentage / 100
    for skill in distinct:
        team_values.setdefault(skill.name.lower(), 0.0)

    candidate_levels: dict[str, str] = {}
    for skill in candidate_skills:
        key = skill.name.lower()
        if key in team_values:
            candidate_levels[key] = skill.proficiency

    return [
        RadarPoint(
            skill=_display_name(key, team_skills, distinct),
            team_value=team_value,
            candidate_value=proficiency_to_value(candidate_levels[key]) if key in candidate_levels else 0.0,
        )
        for key, team_value in team_values.items()
    ]


def find_skill_extensions(points: list[RadarPoint]) -> list[SkillExtension]:
    """Axes where the candidate exceeds the team by more than the extension threshold."""
    extensions = [
        SkillExtension(index=i, skill=p.skill, extension=p.candidate_value - p.team_value)
        for i, p in enumerate(points)
    ]
    significant = [e for e in extensions if e.extension > SKILL_EXTENSION_THRESHOLD]
    return sorted(significant, key=lambda e: e.extension, reverse=True)


def describe_team_skill_map(team: TeamAggregate) -> str:
    """One-line summary of the team's strongest and weakest skill."""
    heavy = team.skills[0].skill_name if team.skills else "various skills"
    text = f"Your team is heavy on {heavy}"
    if len(team.skills) > 1:
        text += f" but lacks {team.skills[-1].skill_name}"
    return text


def skill_frequency_rows(
    team: TeamAggregate,
    max_display: int = FREQUENCY_CHART_MAX_SKILLS,
) -> list[FrequencyRow]:
    """The most frequent skills with a ``"40.0% (2/5)"`` style label."""
    return [
        FrequencyRow(
            skill_name=s.skill_name,
            count=s.count,
            percentage=s.percentage,
            label=f"{s.percentage:.1f}% ({s.count}/{team.total_members})",
        )
        for s in team.skills[:max_display]
    ]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _display_name(
    key: str,
    team_skills: list[SkillFrequency],
    distinct: list[SkillObservation],
) -> str:
    for skill in team_skills:
        if skill.skill_name.lower() == key:
            return skill.skill_name
    for obs in distinct:
        if obs.name.lower() == key:
            return obs.name
    return key
