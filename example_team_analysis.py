"""
Example: Simulating the impact of a hire

Runs the full analysis for a small in-memory team and one candidate, using
genome payloads in the shape the profile service returns them.

Optional thresholds can be set in the environment, e.g.:
   TEAMDIFF_REDUNDANCY_THRESHOLD=0.75
"""

import logging

from teamdiff.analysis import analyze_team_fit
from teamdiff.policy_config import load_policy_from_env


TEAM = [
    {
        "strengths": [
            {"name": "Python", "proficiency": "expert"},
            {"name": "Go", "proficiency": "proficient"},
        ],
        "languages": [{"code": "en", "language": "English", "fluency": "fully-fluent"}],
    },
    {
        "strengths": [
            {"name": "Python", "proficiency": "expert"},
            {"name": "Kubernetes", "proficiency": "novice"},
        ],
        "languages": [{"code": "en", "language": "English", "fluency": "native-or-bilingual"}],
    },
    {
        "strengths": [{"name": "Python", "proficiency": "master"}],
        "languages": [{"code": "en", "language": "English", "fluency": "conversational"}],
    },
]

CANDIDATE = {
    "strengths": [
        {"name": "python", "proficiency": "expert"},
        {"name": "Rust", "proficiency": "proficient"},
        {"name": "Terraform", "proficiency": "novice"},
    ],
    "languages": [
        {"code": "en", "language": "English", "fluency": "fully-fluent"},
        {"code": "es", "language": "Spanish", "fluency": "native-or-bilingual"},
    ],
}


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    report = analyze_team_fit(TEAM, CANDIDATE, load_policy_from_env())

    print(report.team_summary)
    for alert in report.alerts.redundancy_alerts:
        print(f"[{alert.severity}] {alert.message}")
    if report.alerts.value_add_alert is not None:
        print(report.alerts.value_add_alert.message)
    print("\n" + "="*50)
    print(report.model_dump_json(by_alias=True, indent=2))
