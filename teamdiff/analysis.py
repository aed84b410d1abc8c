"""One-call team fit analysis: aggregate → delta → alerts, plus skill map data."""

from __future__ import annotations

from collections.abc import Iterable
import logging
from typing import Any

from teamdiff.engine.aggregation import TeamAggregate, build_team_aggregate
from teamdiff.engine.alerts import AlertBundle, generate_alerts
from teamdiff.engine.delta import DeltaAnalysis, calculate_delta
from teamdiff.engine.result_model import ResultModel
from teamdiff.engine.skill_map import (
    FrequencyRow,
    RadarPoint,
    SkillExtension,
    build_radar_points,
    describe_team_skill_map,
    find_skill_extensions,
    skill_frequency_rows,
)
from teamdiff.engine.thresholds import DEFAULT_POLICY, AnalysisPolicy
from teamdiff.profile_types import coerce_profile


logger = logging.getLogger(__name__)


class TeamFitReport(ResultModel):
    """Everything the presentation layer needs for one candidate and one team."""

    team_aggregate: TeamAggregate
    delta: DeltaAnalysis
    alerts: AlertBundle
    radar: list[RadarPoint]
    skill_extensions: list[SkillExtension]
    frequency_rows: list[FrequencyRow]
    team_summary: str


def analyze_team_fit(
    team_profiles: Iterable[Any],
    candidate: Any,
    policy: AnalysisPolicy | None = None,
) -> TeamFitReport:
    """Run the full pipeline for *candidate* against *team_profiles*.

    Without *policy* the default thresholds apply.
    """
    policy = policy or DEFAULT_POLICY
    candidate_profile = coerce_profile(candidate)
    team = build_team_aggregate(team_profiles)
    delta = calculate_delta(candidate_profile, team, policy)
    alerts = generate_alerts(delta, policy)
    radar = build_radar_points(team, candidate_profile)

    logger.info(
        "Team fit: %d members, %d redundancy alerts, value-add alert=%s",
        team.total_members,
        len(alerts.redundancy_alerts),
        alerts.value_add_alert is not None,
    )
    return TeamFitReport(
        team_aggregate=team,
        delta=delta,
        alerts=alerts,
        radar=radar,
        skill_extensions=find_skill_extensions(radar),
        frequency_rows=skill_frequency_rows(team),
        team_summary=describe_team_skill_map(team),
    )
