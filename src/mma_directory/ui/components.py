"""UI components for the Streamlit app."""

from typing import Optional

import plotly.graph_objects as go
import streamlit as st

from mma_directory.datasource.models import Event, Fight, FightResult, Fighter, Movement, RankingEntry
from mma_directory.formatting import format_event_date, format_event_listing, format_short_day
from mma_directory.stats import FightCard, HistoryItem, MethodTotals, TimeLeft

RESULT_LABELS = {
    FightResult.WIN: "WIN",
    FightResult.LOSS: "LOSE",
    FightResult.DRAW: "DRAW",
    FightResult.NO_CONTEST: "NO CONTEST",
}

RESULT_COLORS = {
    FightResult.WIN: "#22c55e",
    FightResult.LOSS: "#ef4444",
    FightResult.DRAW: "#eab308",
    FightResult.NO_CONTEST: "#6b7280",
}

MOVEMENT_ICONS = {
    Movement.UP: "▲",
    Movement.DOWN: "▼",
    Movement.NONE: "–",
}

PLACEHOLDER_IMG = "https://images.unsplash.com/photo-1622398925373-3f91b1e275f5?auto=format&fit=crop&w=300&q=80"


def navigate(page: str, **params: str):
    """Switch pages through the query string."""
    st.query_params.clear()
    st.query_params["page"] = page
    for key, value in params.items():
        st.query_params[key] = value
    st.rerun()


def _result_badge(result: Optional[FightResult]) -> str:
    if result is None:
        return ""
    color = RESULT_COLORS[result]
    return (
        f'<span style="background-color: {color}; color: white; padding: 2px 8px; '
        f'border-radius: 6px; font-size: 0.8rem">{RESULT_LABELS[result]}</span>'
    )


def render_countdown(time_left: TimeLeft):
    """Render the countdown to the next event."""
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Days", time_left.days)
    col2.metric("Hours", time_left.hours)
    col3.metric("Minutes", time_left.minutes)
    col4.metric("Seconds", time_left.seconds)


def render_event_card(event: Event, card: Optional[FightCard] = None, tz: Optional[str] = None):
    """
    Render an event summary card.

    Args:
        event: Event to show
        card: The event's fight card, if loaded
        tz: Display timezone
    """
    with st.container(border=True):
        col1, col2 = st.columns([1, 2])

        with col1:
            st.image(event.img_url or PLACEHOLDER_IMG, use_container_width=True)

        with col2:
            st.markdown(f"### {event.name}")
            st.write(f"📅 {format_event_date(event.start, tz)}")
            if event.venue or event.location:
                st.write(f"📍 {', '.join(p for p in (event.venue, event.location) if p)}")
            if event.broadcast:
                st.write(f"📺 {event.broadcast}")

            if card and card.main_event:
                main = card.main_event
                name1 = main.fighter1.name if main.fighter1 else main.fighter1_id
                name2 = main.fighter2.name if main.fighter2 else main.fighter2_id
                st.markdown(f"**Main event:** {name1} vs {name2}")

            if st.button("View event", key=f"event-{event.event_id}"):
                navigate("event", eventId=event.event_id)


def render_event_row(event: Event, tz: Optional[str] = None):
    """Render a compact event line for the events list."""
    col1, col2, col3 = st.columns([1, 4, 1])

    with col1:
        st.markdown(f"**{format_short_day(event.start, tz) if event.start else 'TBD'}**")

    with col2:
        st.markdown(f"**{event.name}**")
        details = [format_event_listing(event.start, tz)] if event.start else []
        details += [p for p in (event.venue, event.location) if p]
        st.caption(" | ".join(details))

    with col3:
        if st.button("Details", key=f"event-row-{event.event_id}"):
            navigate("event", eventId=event.event_id)


def _render_corner(fighter: Optional[Fighter], fighter_id: str, result: Optional[FightResult], key: str):
    if fighter is None:
        st.write(fighter_id)
        return
    st.image(fighter.small_img_url or PLACEHOLDER_IMG, width=80)
    if st.button(fighter.name or fighter_id, key=key):
        navigate("fighter", fighterId=fighter.fighter_id)
    st.caption(f"{fighter.record or 'N/A'} | {fighter.weight_class or 'N/A'}")
    if result:
        st.markdown(_result_badge(result), unsafe_allow_html=True)


def render_fight(fight: Fight, highlight: bool = False):
    """Render a bout with both corners."""
    with st.container(border=True):
        if highlight:
            st.markdown("#### 🏆 Main Event")
        col1, col2, col3 = st.columns([2, 1, 2])

        with col1:
            _render_corner(fight.fighter1, fight.fighter1_id, fight.result_fighter1, f"f1-{fight.fight_id}")

        with col2:
            st.markdown("<h3 style='text-align: center'>VS</h3>", unsafe_allow_html=True)
            if fight.finish_by:
                st.caption(f"{fight.finish_by} {fight.details or ''}".strip())

        with col3:
            _render_corner(fight.fighter2, fight.fighter2_id, fight.result_fighter2, f"f2-{fight.fight_id}")


def render_fight_card(card: FightCard):
    """Render the main event followed by the rest of the card."""
    if card.fight_count == 0:
        st.info("No fights announced for this event yet.")
        return

    if card.main_event:
        render_fight(card.main_event, highlight=True)

    if card.undercard:
        st.subheader(f"Fight Card ({len(card.undercard)})")
        for fight in card.undercard:
            render_fight(fight)


def render_fighter_tile(fighter: Fighter):
    """Render a fighter in the directory grid."""
    with st.container(border=True):
        st.image(fighter.small_img_url or fighter.profile_img_url or PLACEHOLDER_IMG, width=96)
        label = f"🏆 {fighter.name}" if fighter.is_champion else fighter.name
        if st.button(label or fighter.fighter_id, key=f"fighter-{fighter.fighter_id}"):
            navigate("fighter", fighterId=fighter.fighter_id)
        if fighter.nickname:
            st.caption(f'"{fighter.nickname}"')
        st.write(f"{fighter.record or 'N/A'} | {fighter.weight_class or 'N/A'}")


def render_fighter_grid(fighters: list[Fighter], columns: int = 4):
    """Render fighters in rows of tiles."""
    for start in range(0, len(fighters), columns):
        cols = st.columns(columns)
        for col, fighter in zip(cols, fighters[start : start + columns]):
            with col:
                render_fighter_tile(fighter)


def render_method_chart(totals: Optional[MethodTotals], title: str):
    """Render a donut chart of finish methods."""
    if totals is None or totals.total == 0:
        st.info(f"{title}: N/A")
        return

    counts = totals.as_dict()
    fig = go.Figure(
        go.Pie(
            labels=list(counts.keys()),
            values=list(counts.values()),
            text=[f"{totals.share(count)}%" for count in counts.values()],
            textinfo="text",
            hole=0.5,
            marker=dict(colors=["#ef4444", "#3b82f6", "#22c55e", "#6b7280"]),
            sort=False,
        )
    )
    fig.update_layout(
        title=title,
        showlegend=True,
        margin=dict(l=20, r=20, t=50, b=20),
        height=320,
    )
    st.plotly_chart(fig, use_container_width=True)


def render_accuracy_chart(striking: int, takedown: int):
    """Render striking and takedown accuracy as horizontal bars."""
    fig = go.Figure(
        go.Bar(
            x=[striking, takedown],
            y=["Striking", "Takedowns"],
            orientation="h",
            text=[f"{striking}%", f"{takedown}%"],
            textposition="auto",
            marker_color=["#ef4444", "#3b82f6"],
        )
    )
    fig.update_layout(
        xaxis=dict(range=[0, 100], title="Accuracy %"),
        margin=dict(l=80, r=20, t=20, b=40),
        height=220,
    )
    st.plotly_chart(fig, use_container_width=True)


def render_history(items: list[HistoryItem]):
    """Render a fighter's fight history."""
    if not items:
        st.info("No fights on record.")
        return

    for item in items:
        opponent_name = item.opponent.name if item.opponent else item.opponent_id
        col1, col2, col3 = st.columns([1, 3, 2])

        with col1:
            st.markdown(_result_badge(item.result) or "–", unsafe_allow_html=True)

        with col2:
            if st.button(f"vs {opponent_name}", key=f"history-{item.fight.fight_id}"):
                navigate("fighter", fighterId=item.opponent_id)
            method = " ".join(p for p in (item.fight.finish_by, item.fight.details) if p)
            if method:
                st.caption(method)

        with col3:
            st.write(format_event_date(item.fight_date) if item.fight_date else "Date unknown")


def render_rankings_table(entries: list[RankingEntry], show_weight_class: bool = False):
    """Render a ranking list as a table with movement indicators."""
    for position, entry in enumerate(entries):
        col1, col2, col3, col4 = st.columns([1, 4, 2, 2])

        with col1:
            if show_weight_class:
                label = str(position + 1)
            else:
                if entry.rank is None:
                    label = "NR"
                else:
                    label = "C" if entry.is_champion else str(entry.rank)
            st.markdown(f"**{label}** {MOVEMENT_ICONS[entry.movement]}")

        with col2:
            name = entry.fighter.name or entry.fighter.fighter_id
            if st.button(name, key=f"rank-{entry.organization}-{entry.weight_class}-{entry.fighter.fighter_id}"):
                navigate("fighter", fighterId=entry.fighter.fighter_id)
            if entry.fighter.nickname:
                st.caption(f'"{entry.fighter.nickname}"')

        with col3:
            st.write(entry.fighter.record or "N/A")

        with col4:
            if show_weight_class:
                st.write(f"{entry.weight_class} ({entry.organization})")
            else:
                st.write(f"{entry.ranking_points or 0} pts")
