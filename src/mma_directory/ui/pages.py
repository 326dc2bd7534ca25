"""Page renderers for the directory."""

from datetime import datetime, timezone
from typing import Optional

import streamlit as st

from mma_directory.formatting import (
    format_event_date,
    format_event_start_et,
    format_long_date,
)
from mma_directory.stats import (
    POUND_FOR_POUND,
    SortMode,
    arrange_events,
    arrange_fighters,
    build_fight_card,
    build_profile,
    build_rankings_table,
    division_rankings,
    fight_history,
    filter_events,
    filter_fighters,
    filter_rankings,
    month_options,
    next_event,
    partition_events,
    time_until,
)
from mma_directory.stats.rankings import organizations, weight_classes
from mma_directory.ui.components import (
    PLACEHOLDER_IMG,
    render_accuracy_chart,
    render_countdown,
    render_event_card,
    render_event_row,
    render_fight_card,
    render_fighter_grid,
    render_history,
    render_method_chart,
    render_rankings_table,
)
from mma_directory.ui.state import (
    get_settings,
    load_event_page,
    load_events,
    load_fighter_page,
    load_fighters,
    load_rankings,
)

SORT_LABELS = {
    "Name": SortMode.NAME,
    "Weight Class": SortMode.WEIGHT_CLASS,
    "Record": SortMode.RECORD,
}


def _options(values) -> list[str]:
    return ["all"] + sorted({v for v in values if v})


def render_home():
    """Next event countdown, upcoming and past events."""
    tz = get_settings().display_timezone
    events = load_events()
    upcoming, past = partition_events(events, tz=tz)

    upcoming_event = next_event(events, tz=tz)
    if upcoming_event is not None:
        st.header(f"Next up: {upcoming_event.name}")
        st.caption(format_event_start_et(upcoming_event.start))
        render_countdown(time_until(upcoming_event.start))

    st.divider()
    tab1, tab2 = st.tabs([f"Upcoming ({len(upcoming)})", f"Past ({len(past)})"])

    with tab1:
        if not upcoming:
            st.info("No upcoming events.")
        for event in upcoming:
            card = build_fight_card(load_event_page(event.event_id).fights)
            render_event_card(event, card, tz)

    with tab2:
        if not past:
            st.info("No past events.")
        for event in past:
            render_event_card(event, tz=tz)


def render_events():
    """Events grouped by month with search and facets."""
    st.header("MMA Events")
    tz = get_settings().display_timezone
    events = load_events()

    search = st.text_input("Search events or locations", key="events-search")
    col1, col2 = st.columns(2)
    with col1:
        organization = st.selectbox("Organization", _options(e.promotion for e in events))
    with col2:
        month = st.selectbox("Month", ["all"] + month_options(events, tz))

    filtered = filter_events(events, search, organization, month, tz)
    listing = arrange_events(filtered, SortMode.MONTH, tz)
    if listing.is_empty:
        st.info("No events match your filters.")
        return

    for month_label, members in listing.groups.items():
        st.subheader(month_label)
        for event in members:
            render_event_row(event, tz)


def render_event_details(event_id: Optional[str]):
    """A single event with its fight card."""
    if not event_id:
        st.warning("No event selected.")
        return

    page = load_event_page(event_id)
    event = page.event
    if event is None:
        st.warning("Event not found.")
        return

    card = build_fight_card(page.fights)
    tz = get_settings().display_timezone

    st.image(event.img_url or PLACEHOLDER_IMG, use_container_width=True)
    st.title(event.name)

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Date", format_event_date(event.start, tz))
    with col2:
        st.metric("Venue", event.venue or "TBD")
    with col3:
        st.metric("Broadcast", event.broadcast or "TBD")

    if event.start:
        st.write(f"**Start time:** {format_event_start_et(event.start)}")
        if event.start > datetime.now(timezone.utc):
            render_countdown(time_until(event.start))
    if event.location:
        st.write(f"**Location:** {event.location}")

    st.divider()
    render_fight_card(card)


def render_fighters():
    """Fighter directory with search, facets and sorting."""
    st.header("MMA Fighters")
    fighters = load_fighters()

    search = st.text_input("Search fighters by name, nickname, or country", key="fighters-search")
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        weight_class = st.selectbox("Weight class", _options(f.weight_class for f in fighters))
    with col2:
        organization = st.selectbox("Organization", _options(f.organization for f in fighters))
    with col3:
        status = st.selectbox("Status", _options(f.status for f in fighters))
    with col4:
        sort_label = st.selectbox("Sort by", list(SORT_LABELS))

    filtered = filter_fighters(fighters, search, weight_class, organization, status)
    listing = arrange_fighters(filtered, SORT_LABELS[sort_label])
    st.caption(f"{len(listing.items)} fighters")

    if listing.is_empty:
        st.info("No fighters match your filters.")
        return

    if listing.is_grouped:
        for label, members in listing.groups.items():
            st.subheader(label)
            render_fighter_grid(members)
    else:
        render_fighter_grid(listing.items)


def render_fighter_profile(fighter_id: Optional[str]):
    """Fighter header, record breakdown, accuracy and fight history."""
    if not fighter_id:
        st.warning("No fighter selected.")
        return

    with st.spinner("Loading fighter..."):
        page = load_fighter_page(fighter_id)

    fighter = page.fighter
    if fighter is None:
        st.warning("Fighter not found.")
        return

    profile = build_profile(fighter, page.records)

    col1, col2 = st.columns([1, 2])
    with col1:
        st.image(fighter.profile_img_url or PLACEHOLDER_IMG, use_container_width=True)

    with col2:
        if fighter.country:
            st.caption(f"🏳️ {fighter.country}")
        st.title(f"🏆 {fighter.name}" if fighter.is_champion else fighter.name)
        if fighter.nickname:
            st.subheader(f'"{fighter.nickname}"')

        m1, m2, m3, m4 = st.columns(4)
        m1.metric("Record", fighter.record or "N/A")
        m2.metric("Total fights", profile.total_fights)
        m3.metric("Win %", f"{profile.win_percentage}%")
        m4.metric("Weight class", fighter.weight_class or "N/A")

    st.divider()
    st.subheader("Basic Information")
    b1, b2, b3, b4 = st.columns(4)
    b1.metric("Height", fighter.height or "N/A")
    b2.metric("Reach", fighter.reach or "N/A")
    b3.metric("Age", fighter.age if fighter.age is not None else "N/A")
    b4.metric("Streak", fighter.current_streak or "N/A")
    if fighter.date_of_birth:
        st.write(f"**Born:** {format_long_date(fighter.date_of_birth)}")
    if fighter.affiliation:
        st.write(f"**Team:** {fighter.affiliation}")

    st.divider()
    st.subheader("Fight Record")
    r1, r2, r3 = st.columns(3)
    r1.metric("Wins", profile.record.wins)
    r2.metric("Losses", profile.record.losses)
    r3.metric("Draws", profile.record.draws)

    c1, c2 = st.columns(2)
    with c1:
        render_method_chart(profile.win_methods, "Wins by method")
    with c2:
        render_method_chart(profile.loss_methods, "Losses by method")

    st.subheader("Accuracy")
    render_accuracy_chart(profile.striking_accuracy, profile.takedown_accuracy)

    st.divider()
    st.subheader("Fight History")
    render_history(fight_history(page.fights, fighter.fighter_id, page.opponents))


def render_rankings():
    """Division rankings and the pound-for-pound list."""
    st.header("MMA Rankings")
    table = build_rankings_table(load_rankings())
    if not table:
        st.info("No rankings available.")
        return

    col1, col2, col3 = st.columns(3)
    with col1:
        organization = st.selectbox("Organization", organizations(table))
    with col2:
        weight_class = st.selectbox("Weight class", [POUND_FOR_POUND] + weight_classes(table, organization))
    with col3:
        search = st.text_input("Search", key="rankings-search")

    is_p4p = weight_class == POUND_FOR_POUND
    if is_p4p:
        st.subheader(f"{POUND_FOR_POUND} Rankings")
        st.caption("Best fighters across all weight classes and organizations.")
    else:
        st.subheader(f"{organization} {weight_class} Rankings")

    entries = filter_rankings(division_rankings(table, organization, weight_class), search)
    if not entries:
        st.info("No fighters match your search.")
        return
    render_rankings_table(entries, show_weight_class=is_p4p)
