"""Team aggregation: skill and language frequencies across many profiles.

All functions are *pure*.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
import logging
from typing import Any

from pydantic import Field

from teamdiff.engine.result_model import ResultModel
from teamdiff.engine.rounding import percentage_of
from teamdiff.profile_types import coerce_profile


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class SkillFrequency(ResultModel):
    """How many team members claim one skill, and at which proficiency."""

    skill_name: str
    count: int = Field(ge=0)
    percentage: float = Field(ge=0.0, le=100.0)
    proficiency_levels: dict[str, int]  # level → raw count


class LanguageFrequency(ResultModel):
    """How many team members speak one language, and at which fluency."""

    count: int = Field(ge=0)
    percentage: float = Field(ge=0.0, le=100.0)
    fluency_levels: dict[str, int]  # level → raw count


class TeamAggregate(ResultModel):
    """Frequency statistics for a whole team."""

    total_members: int = Field(ge=0)
    skills: list[SkillFrequency]  # count desc, ties in encounter order
    languages: dict[str, LanguageFrequency]  # language code → stats


# ---------------------------------------------------------------------------
# Internal tallies
# ---------------------------------------------------------------------------
@dataclass
class _Tally:
    count: int = 0
    levels: Counter[str] = field(default_factory=Counter)

    def add(self, level: str) -> None:
        self.count += 1
        self.levels[level] += 1


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def build_team_aggregate(profiles: Iterable[Any]) -> TeamAggregate:
    """Count skills and languages across *profiles*.

    Each item may be a :class:`~teamdiff.profile_types.Profile`, a genome
    payload mapping, or any object exposing ``skills``/``strengths`` and
    ``languages``. Items that cannot be read still count as members.

    Args:
        profiles: Team member profiles.

    Returns:
        TeamAggregate with skills sorted by count (descending, stable).
    """
    members = [coerce_profile(p) for p in profiles or ()]
    total = len(members)
    if total == 0:
        return TeamAggregate(total_members=0, skills=[], languages={})

    skill_tallies: dict[str, _Tally] = {}
    language_tallies: dict[str, _Tally] = {}

    for member in members:
        # a member counts once per skill/language; the first entry's level wins
        seen: set[str] = set()
        for skill in member.skills:
            if skill.name in seen:
                continue
            seen.add(skill.name)
            skill_tallies.setdefault(skill.name, _Tally()).add(skill.proficiency)
        seen = set()
        for lang in member.languages:
            if lang.code in seen:
                continue
            seen.add(lang.code)
            language_tallies.setdefault(lang.code, _Tally()).add(lang.fluency)

    skills = [
        SkillFrequency(
            skill_name=name,
            count=tally.count,
            percentage=percentage_of(tally.count, total),
            proficiency_levels=dict(tally.levels),
        )
        for name, tally in skill_tallies.items()
    ]
    skills.sort(key=lambda s: s.count, reverse=True)

    languages = {
        code: LanguageFrequency(
            count=tally.count,
            percentage=percentage_of(tally.count, total),
            fluency_levels=dict(tally.levels),
        )
        for code, tally in language_tallies.items()
    }

    logger.debug(
        "Aggregated %d profiles: %d distinct skills, %d languages",
        total,
        len(skills),
        len(languages),
    )
    return TeamAggregate(total_members=total, skills=skills, languages=languages)
