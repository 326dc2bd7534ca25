"""State management and caching for the Streamlit app."""

import streamlit as st

from mma_directory.config import Settings, load_settings
from mma_directory.datasource import (
    DataRepository,
    DataSourceClient,
    Event,
    EventPage,
    Fighter,
    FighterPage,
    RankingEntry,
)
from mma_directory.stats import rankings_from_fighters


@st.cache_resource
def get_settings() -> Settings:
    """Build settings once per process; raises ConfigurationError if incomplete."""
    return load_settings()


@st.cache_resource
def get_repository() -> DataRepository:
    """Get or create the DataRepository instance."""
    settings = get_settings()
    return DataRepository(client=DataSourceClient(settings))


@st.cache_data(ttl=300)  # Cache for 5 minutes
def load_events() -> list[Event]:
    """All events, soonest first."""
    return get_repository().get_events()


@st.cache_data(ttl=300)
def load_fighters() -> list[Fighter]:
    """All fighters ordered by name."""
    return get_repository().get_fighters()


@st.cache_data(ttl=300)
def load_rankings() -> list[RankingEntry]:
    """Flat ranking rows, derived from the fighters when none are published."""
    entries = get_repository().get_rankings()
    if entries:
        return entries
    return rankings_from_fighters(load_fighters())


@st.cache_data(ttl=60)
def load_event_page(event_id: str) -> EventPage:
    return get_repository().load_event_page(event_id)


@st.cache_data(ttl=60)
def load_fighter_page(fighter_id: str) -> FighterPage:
    return get_repository().load_fighter_page(fighter_id)
