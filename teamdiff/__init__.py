"""Team skill analysis: compare a candidate's profile with a team's."""

from .analysis import TeamFitReport, analyze_team_fit
from .engine.aggregation import TeamAggregate, build_team_aggregate
from .engine.alerts import AlertBundle, generate_alerts
from .engine.delta import DeltaAnalysis, calculate_delta
from .profile_types import Profile, format_fluency, format_proficiency

__all__ = [
    "AlertBundle",
    "DeltaAnalysis",
    "Profile",
    "TeamAggregate",
    "TeamFitReport",
    "analyze_team_fit",
    "build_team_aggregate",
    "calculate_delta",
    "format_fluency",
    "format_proficiency",
    "generate_alerts",
]
