"""
public_pages.py - Public Streamlit pages: team roster, matches, news, contacts.
"""

from typing import List, Optional

import pandas as pd
import streamlit as st

from .api_client import APIError, ClubAPIClient
from .ui_models import TeamView
from utils.constants import PLAYER_POSITIONS, POSITION_LABELS, STATUS_COLORS
from utils.visualizations import PlotlyVisualizations


def _pick_team(client: ClubAPIClient) -> Optional[TeamView]:
    teams: List[TeamView] = client.teams.list()
    if not teams:
        st.info("No teams have been published yet.")
        return None
    if len(teams) == 1:
        return teams[0]
    names = {team.id: team.name for team in teams}
    team_id = st.selectbox("Team", list(names), format_func=names.get, key="public_team")
    return next(team for team in teams if team.id == team_id)


def render_team_page(client: ClubAPIClient) -> None:
    try:
        team = _pick_team(client)
        if team is None:
            return
        players = client.players.list(team_id=team.id)
    except APIError as e:
        st.error(str(e))
        return

    col1, col2 = st.columns([1, 4])
    if team.logo:
        col1.image(team.logo, width=120)
    col2.title(team.name)
    col2.caption(" · ".join(part for part in [
        team.short_name,
        f"Founded {team.founded_year}" if team.founded_year else "",
        team.stadium,
        team.coach and f"Coach: {team.coach}",
    ] if part))
    if team.description:
        st.write(team.description)

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Season")
        st.plotly_chart(PlotlyVisualizations.season_results_donut(team.stats), use_container_width=True)
    with col2:
        st.subheader("Goals")
        st.plotly_chart(PlotlyVisualizations.goals_bar(team.stats), use_container_width=True)

    if team.achievements:
        st.subheader("Achievements")
        for achievement in team.achievements:
            st.markdown(f"- {achievement}")

    st.subheader("Squad")
    if not players:
        st.info("No players registered for this team.")
        return

    for position in PLAYER_POSITIONS:
        group = [p for p in players if p.position == position]
        if not group:
            continue
        st.markdown(f"**{POSITION_LABELS[position]}s**")
        df = pd.DataFrame([{
            '#': p.number or None,
            'Name': p.name,
            'Nationality': p.nationality,
            'Age': p.age or None,
            'Games': p.stats['games'],
            'Goals': p.stats['goals'],
            'Assists': p.stats['assists'],
        } for p in group])
        st.dataframe(df, hide_index=True, use_container_width=True)

    scorers = [{'Name': p.name, 'Position': p.position, 'Goals': p.stats['goals']} for p in players]
    if any(row['Goals'] for row in scorers):
        st.subheader("Top scorers")
        st.plotly_chart(PlotlyVisualizations.top_scorers_bar(scorers), use_container_width=True)


def render_matches_page(client: ClubAPIClient) -> None:
    st.title("Matches")
    try:
        matches = client.matches.list()
    except APIError as e:
        st.error(str(e))
        return

    if not matches:
        st.info("No matches scheduled.")
        return

    upcoming = [m for m in matches if m.status in ("scheduled", "live")]
    played = [m for m in matches if m.status in ("completed", "cancelled")]

    for heading, group in (("Upcoming", upcoming), ("Results", played)):
        st.subheader(heading)
        if not group:
            st.caption("Nothing here yet.")
            continue
        for match in sorted(group, key=lambda m: (m.date is None, m.date)):
            color = STATUS_COLORS.get(match.status, '#7F8C8D')
            when = match.date.strftime('%d.%m.%Y') if match.date else ''
            st.markdown(
                f"<span style='color:{color}'>●</span> {when} {match.start_time} · "
                f"**vs {match.opponent}** · {match.score_label} · {match.location} {match.competition}",
                unsafe_allow_html=True,
            )
            if match.highlights:
                with st.expander("Highlights"):
                    for line in match.highlights:
                        st.markdown(f"- {line}")


def render_news_page(client: ClubAPIClient) -> None:
    st.title("News")
    try:
        items = client.news.list()
    except APIError as e:
        st.error(str(e))
        return

    if not items:
        st.info("No news yet.")
        return

    categories = sorted({item.category for item in items})
    chosen = st.multiselect("Categories", categories, default=categories)
    for item in sorted(items, key=lambda n: n.date, reverse=True):
        if item.category not in chosen:
            continue
        with st.container(border=True):
            st.subheader(item.title)
            st.caption(" · ".join(part for part in [item.date[:10], item.author, item.category] if part))
            if item.image:
                st.image(item.image, use_container_width=True)
            st.write(item.content)
            if item.tags:
                st.caption(" ".join(f"#{tag}" for tag in item.tags))


def render_contacts_page(client: ClubAPIClient) -> None:
    st.title("Contacts")
    try:
        teams = client.teams.list()
        coaches = client.coaches.list()
    except APIError as e:
        st.error(str(e))
        return

    for team in teams:
        st.subheader(team.name)
        address = ", ".join(part for part in [team.stadium, team.address, team.city, team.country] if part)
        if address:
            st.markdown(f"**Address:** {address}")
        if team.website:
            st.markdown(f"**Website:** {team.website}")
        for platform, url in team.social_links.items():
            st.markdown(f"**{platform.title()}:** {url}")
        staff = [c for c in coaches if c.team_id == team.id]
        if staff:
            st.markdown("**Coaching staff:** " + ", ".join(c.name for c in staff))
