"""Scoring-related constants shared by the desktop app and the API."""

# Artificial delay applied by the local scoring service, in seconds.
SIMULATED_SCORING_LATENCY_SECONDS: float = 0.3
