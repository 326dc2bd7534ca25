"""Streamlit web application for the MMA directory."""

import logging
import sys
from pathlib import Path

# Add src to path for imports when running directly
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

import streamlit as st

from mma_directory.config import ConfigurationError
from mma_directory.ui.pages import (
    render_event_details,
    render_events,
    render_fighter_profile,
    render_fighters,
    render_home,
    render_rankings,
)
from mma_directory.ui.state import get_settings

PAGES = {
    "home": "Home",
    "events": "Events",
    "fighters": "Fighters",
    "rankings": "Rankings",
}

logger = logging.getLogger(__name__)


def main():
    """Main Streamlit application."""
    st.set_page_config(
        page_title="MMA Directory",
        page_icon="🥊",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    try:
        settings = get_settings()
    except ConfigurationError as e:
        st.error(str(e))
        st.stop()

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    page = st.query_params.get("page", "home")

    # Sidebar
    with st.sidebar:
        st.header("🥊 MMA Directory")
        labels = list(PAGES.values())
        current = PAGES.get(page)
        choice = st.radio(
            "Navigate",
            options=labels,
            index=labels.index(current) if current else 0,
        )
        if current is not None and choice != current:
            st.query_params.clear()
            st.query_params["page"] = next(k for k, v in PAGES.items() if v == choice)
            st.rerun()
        if current is None and st.button("Back to home"):
            st.query_params.clear()
            st.rerun()

        st.divider()
        st.caption(f"Times shown in {settings.display_timezone}")

    logger.debug(f"Rendering page {page}")
    if page == "events":
        render_events()
    elif page == "event":
        render_event_details(st.query_params.get("eventId"))
    elif page == "fighters":
        render_fighters()
    elif page == "fighter":
        render_fighter_profile(st.query_params.get("fighterId"))
    elif page == "rankings":
        render_rankings()
    else:
        render_home()


if __name__ == "__main__":
    main()
