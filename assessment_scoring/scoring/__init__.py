"""
scoring/ — Assessment Scoring Engine

Modules:
    utils.py                  - Half-up rounding and input coercion
    scoring_engine.py         - Raw aggregation + normalization (ScoringEngine)
    recommendation_engine.py  - Advisory text from a score profile
    presets.py                - Built-in configs for the seeded assessment types
    interpretation.py         - Score bands and completion summary
"""
