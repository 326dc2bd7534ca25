"""Streamlit web UI."""

from .state import get_repository, get_settings, load_events, load_fighters, load_rankings

__all__ = [
    "get_settings",
    "get_repository",
    "load_events",
    "load_fighters",
    "load_rankings",
]
