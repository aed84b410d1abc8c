"""Team skill analysis engine.

Sub-modules:
- thresholds  – classification constants and AnalysisPolicy
- aggregation – team skill / language frequencies
- delta       – candidate vs team classification
- alerts      – redundancy warnings and value-add recommendation
- skill_map   – radar and frequency chart data
"""
