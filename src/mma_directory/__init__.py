"""MMA events, fighters and rankings directory."""

__version__ = "0.1.0"
