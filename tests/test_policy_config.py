"""Tests for teamdiff.policy_config and the AnalysisPolicy model."""

import pytest
from pydantic import ValidationError

from teamdiff.engine import thresholds
from teamdiff.engine.thresholds import DEFAULT_POLICY, AnalysisPolicy
from teamdiff.policy_config import ENV_VARS, load_policy_from_env


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for env_var in ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)


class TestConstants:
    def test_classification_thresholds(self):
        assert thresholds.REDUNDANCY_THRESHOLD == 0.8
        assert thresholds.VALUE_ADD_THRESHOLD == 0.2

    def test_severity_cut_offs(self):
        assert thresholds.HIGH_SEVERITY_COVERAGE == 0.9
        assert thresholds.MEDIUM_SEVERITY_COVERAGE == 0.85

    def test_default_policy_uses_constants(self):
        assert DEFAULT_POLICY.redundancy_threshold == thresholds.REDUNDANCY_THRESHOLD
        assert DEFAULT_POLICY.value_add_threshold == thresholds.VALUE_ADD_THRESHOLD
        assert DEFAULT_POLICY.high_severity_coverage == thresholds.HIGH_SEVERITY_COVERAGE
        assert DEFAULT_POLICY.medium_severity_coverage == thresholds.MEDIUM_SEVERITY_COVERAGE


class TestAnalysisPolicy:
    def test_bands_must_not_overlap(self):
        with pytest.raises(ValidationError, match="value_add_threshold"):
            AnalysisPolicy(value_add_threshold=0.8, redundancy_threshold=0.8)

    def test_severity_must_be_nested(self):
        with pytest.raises(ValidationError, match="severity"):
            AnalysisPolicy(medium_severity_coverage=0.95, high_severity_coverage=0.9)

    def test_out_of_range(self):
        with pytest.raises(ValidationError):
            AnalysisPolicy(redundancy_threshold=1.5)

    def test_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_POLICY.redundancy_threshold = 0.5


class TestLoadPolicyFromEnv:
    def test_defaults_when_unset(self):
        assert load_policy_from_env() is DEFAULT_POLICY

    def test_blank_values_ignored(self, monkeypatch):
        monkeypatch.setenv("TEAMDIFF_REDUNDANCY_THRESHOLD", "  ")
        assert load_policy_from_env() is DEFAULT_POLICY

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("TEAMDIFF_REDUNDANCY_THRESHOLD", "0.75")
        monkeypatch.setenv("TEAMDIFF_VALUE_ADD_THRESHOLD", "0.1")
        policy = load_policy_from_env()
        assert policy.redundancy_threshold == 0.75
        assert policy.value_add_threshold == 0.1
        assert policy.high_severity_coverage == 0.9

    def test_not_a_number(self, monkeypatch):
        monkeypatch.setenv("TEAMDIFF_VALUE_ADD_THRESHOLD", "low")
        with pytest.raises(ValueError, match="TEAMDIFF_VALUE_ADD_THRESHOLD"):
            load_policy_from_env()

    def test_invalid_combination(self, monkeypatch):
        monkeypatch.setenv("TEAMDIFF_VALUE_ADD_THRESHOLD", "0.9")
        with pytest.raises(ValueError, match="Invalid analysis policy"):
            load_policy_from_env()
