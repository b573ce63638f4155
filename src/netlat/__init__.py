"""Latency analysis for copper/optical cable networks."""

__version__ = "0.3.0"
