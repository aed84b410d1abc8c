"""Analysis policy configuration from the environment.

Any threshold left unset keeps its built-in default from
``teamdiff.engine.thresholds``.
"""

import logging
import os

from pydantic import ValidationError

from teamdiff.engine.thresholds import DEFAULT_POLICY, AnalysisPolicy

logger = logging.getLogger(__name__)


ENV_VARS: dict[str, str] = {
    "redundancy_threshold": "TEAMDIFF_REDUNDANCY_THRESHOLD",
    "value_add_threshold": "TEAMDIFF_VALUE_ADD_THRESHOLD",
    "high_severity_coverage": "TEAMDIFF_HIGH_SEVERITY_COVERAGE",
    "medium_severity_coverage": "TEAMDIFF_MEDIUM_SEVERITY_COVERAGE",
}


def load_policy_from_env() -> AnalysisPolicy:
    """Build an AnalysisPolicy from TEAMDIFF_* environment variables.

    Returns:
        DEFAULT_POLICY when nothing is overridden, otherwise a new policy.

    Raises:
        ValueError: If a variable is not a number or the combination is invalid.
    """
    overrides: dict[str, float] = {}
    for field_name, env_var in ENV_VARS.items():
        raw = os.getenv(env_var, "").strip()
        if not raw:
            continue
        try:
            overrides[field_name] = float(raw)
        except ValueError as e:
            logger.warning("Rejected %s=%r: not a number", env_var, raw)
            raise ValueError(f"{env_var} must be a number, got {raw!r}") from e

    if not overrides:
        return DEFAULT_POLICY

    try:
        policy = AnalysisPolicy(**{**DEFAULT_POLICY.model_dump(), **overrides})
    except ValidationError as e:
        logger.warning("Rejected analysis policy overrides %s", overrides)
        raise ValueError(f"Invalid analysis policy: {e}") from e

    logger.info(
        "Analysis policy: redundancy>%s value_add<%s high>=%s medium>=%s",
        policy.redundancy_threshold,
        policy.value_add_threshold,
        policy.high_severity_coverage,
        policy.medium_severity_coverage,
    )
    return policy
