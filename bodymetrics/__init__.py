"""BodyMetrics Pro: local body-measurement tracking dashboard."""

__version__ = "0.1.0"
