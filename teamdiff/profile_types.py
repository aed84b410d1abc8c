"""Profile input types for team skill analysis.

Profiles arrive as already-parsed genome payloads. Skills are read from
``strengths`` (or ``skills``) and languages from ``languages``; anything
missing or malformed degrades to empty instead of failing validation.
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from teamdiff.engine.thresholds import UNKNOWN_LEVEL


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Level enums
# ---------------------------------------------------------------------------
ProficiencyLevel = Literal["no-experience-interested", "novice", "proficient", "expert", "master"]
FluencyLevel = Literal["basic", "conversational", "fully-fluent", "native-or-bilingual"]


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------
def _level_or_unknown(value: Any) -> str:
    if isinstance(value, str) and value:
        return value
    return UNKNOWN_LEVEL


class SkillObservation(BaseModel):
    """A single skill a person claims."""

    model_config = ConfigDict(frozen=True, from_attributes=True, extra="ignore")

    name: str
    # ProficiencyLevel, "unknown", or any other upstream value passed through
    proficiency: str = UNKNOWN_LEVEL

    @field_validator("proficiency", mode="before")
    @classmethod
    def default_proficiency(cls, v: Any) -> str:
        return _level_or_unknown(v)


class LanguageObservation(BaseModel):
    """A single spoken language with fluency."""

    model_config = ConfigDict(frozen=True, from_attributes=True, extra="ignore")

    code: str
    display_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("language", "display_name", "displayName", "name"),
    )
    fluency: str = UNKNOWN_LEVEL

    @field_validator("fluency", mode="before")
    @classmethod
    def default_fluency(cls, v: Any) -> str:
        return _level_or_unknown(v)

    @field_validator("display_name", mode="before")
    @classmethod
    def drop_non_string_name(cls, v: Any) -> str | None:
        return v if isinstance(v, str) else None

    @property
    def language_name(self) -> str:
        """Display name, falling back to the language code."""
        return self.display_name if self.display_name is not None else self.code


def _keep_entries(value: Any, key: str) -> list[Any]:
    """Keep list entries that carry a string *key*; drop everything else."""
    if not isinstance(value, (list, tuple)):
        return []
    kept: list[Any] = []
    for entry in value:
        if isinstance(entry, Mapping):
            ok = isinstance(entry.get(key), str)
        else:
            ok = isinstance(getattr(entry, key, None), str)
        if ok:
            kept.append(entry)
        else:
            logger.debug("Dropping malformed entry without string %r: %r", key, entry)
    return kept


class Profile(BaseModel):
    """One person's skills and languages, in declaration order."""

    model_config = ConfigDict(frozen=True, from_attributes=True, extra="ignore")

    skills: list[SkillObservation] = Field(
        default_factory=list,
        validation_alias=AliasChoices("strengths", "skills"),
    )
    languages: list[LanguageObservation] = Field(default_factory=list)

    @field_validator("skills", mode="before")
    @classmethod
    def coerce_skills(cls, v: Any) -> list[Any]:
        return _keep_entries(v, "name")

    @field_validator("languages", mode="before")
    @classmethod
    def coerce_languages(cls, v: Any) -> list[Any]:
        return _keep_entries(v, "code")


def coerce_profile(raw: Any) -> Profile:
    """Turn a genome payload, profile-like object or ``None`` into a :class:`Profile`.

    Never raises: input that cannot be read at all becomes an empty profile.
    """
    if isinstance(raw, Profile):
        return raw
    if raw is None:
        return Profile()
    try:
        return Profile.model_validate(raw)
    except ValidationError as exc:
        logger.warning("Treating unreadable profile as empty: %s", exc)
        return Profile()


# ---------------------------------------------------------------------------
# Display labels
# ---------------------------------------------------------------------------
PROFICIENCY_LABELS: dict[str, str] = {
    "no-experience-interested": "No Experience (Interested)",
    "novice": "Novice",
    "proficient": "Proficient",
    "expert": "Expert",
    "master": "Master",
}

FLUENCY_LABELS: dict[str, str] = {
    "basic": "Basic",
    "conversational": "Conversational",
    "fully-fluent": "Fully Fluent",
    "native-or-bilingual": "Native/Bilingual",
}


def format_proficiency(proficiency: str) -> str:
    """Display label for a proficiency level; unknown values pass through."""
    return PROFICIENCY_LABELS.get(proficiency, proficiency)


def format_fluency(fluency: str) -> str:
    """Display label for a fluency level; unknown values pass through."""
    return FLUENCY_LABELS.get(fluency, fluency)
