"""Integration tests for the one-call team fit pipeline."""

import json

from teamdiff import analyze_team_fit
from teamdiff.engine.thresholds import AnalysisPolicy


TEAM = [
    {
        "strengths": [{"name": "Go", "proficiency": "expert"}, {"name": "Docker", "proficiency": "proficient"}],
        "languages": [{"code": "en", "language": "English", "fluency": "fully-fluent"}],
    }
    for _ in range(9)
] + [{"strengths": [{"name": "Docker", "proficiency": "novice"}], "languages": []}]

CANDIDATE = {
    "strengths": [
        {"name": "Go", "proficiency": "expert"},
        {"name": "Rust", "proficiency": "master"},
    ],
    "languages": [
        {"code": "en", "language": "English", "fluency": "native-or-bilingual"},
        {"code": "ja", "language": "Japanese", "fluency": "conversational"},
    ],
}


class TestAnalyzeTeamFit:
    def test_full_report(self):
        report = analyze_team_fit(TEAM, CANDIDATE)

        assert report.team_aggregate.total_members == 10
        assert [s.skill_name for s in report.team_aggregate.skills] == ["Docker", "Go"]

        assert report.delta.summary.total_redundant_skills == 1
        assert report.delta.summary.total_value_add_skills == 1
        assert report.delta.summary.total_value_add_languages == 1

        alert = report.alerts.redundancy_alerts[0]
        assert alert.severity == "high"
        assert alert.message == "Warning: You already have 9 team members with Go at Expert proficiency level."
        assert report.alerts.value_add_alert.message == (
            "Strong Hire: This candidate brings skills 'Rust' and languages 'Japanese'"
            "—skills your current team completely lacks."
        )

        assert [p.skill for p in report.radar] == ["Docker", "Go", "Rust"]
        assert [e.skill for e in report.skill_extensions] == ["Rust"]
        assert report.team_summary == "Your team is heavy on Docker but lacks Go"
        assert [r.label for r in report.frequency_rows] == ["100.0% (10/10)", "90.0% (9/10)"]

    def test_policy_is_applied(self):
        policy = AnalysisPolicy(redundancy_threshold=0.95, medium_severity_coverage=0.97, high_severity_coverage=0.99)
        report = analyze_team_fit(TEAM, CANDIDATE, policy)
        assert report.alerts.redundancy_alerts == []

    def test_policy_none_uses_defaults(self):
        report = analyze_team_fit(
            [{"strengths": [{"name": "Go"}]}],
            {"strengths": [{"name": "Go"}]},
            policy=None,
        )
        assert report == analyze_team_fit(
            [{"strengths": [{"name": "Go"}]}],
            {"strengths": [{"name": "Go"}]},
        )
        assert [a.severity for a in report.alerts.redundancy_alerts] == ["high"]

    def test_empty_team(self):
        report = analyze_team_fit([], CANDIDATE)
        assert report.team_aggregate.total_members == 0
        assert report.alerts.redundancy_alerts == []
        assert report.alerts.value_add_alert.message.endswith("completely lacks.")
        assert report.team_summary == "Your team is heavy on various skills"
        assert report.frequency_rows == []

    def test_json_serialisable(self):
        payload = json.loads(analyze_team_fit(TEAM, CANDIDATE).model_dump_json(by_alias=True))
        assert set(payload) == {
            "teamAggregate",
            "delta",
            "alerts",
            "radar",
            "skillExtensions",
            "frequencyRows",
            "teamSummary",
        }
        assert payload["delta"]["summary"]["totalTeamMembers"] == 10
        assert payload["alerts"]["redundancyAlerts"][0]["count"] == 9
