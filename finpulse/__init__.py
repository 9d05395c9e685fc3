"""FinPulse - single-page financial metrics dashboard."""

__version__ = "0.1.0"
