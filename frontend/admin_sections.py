"""
admin_sections.py - Streamlit admin panel, one section per entity.

Each section:
- loads the current list from the API on every render
- opens a dialog with an edit buffer (frontend.forms) for create or edit
- calls the client's create/update on save, closes the dialog and reruns
- asks for confirmation before delete, then reruns

Errors from the API are shown with st.error; nothing is updated optimistically.
"""

from datetime import date
from typing import Any, Callable, Dict, List, Optional

import streamlit as st

from .api_client import APIError, ClubAPIClient
from .forms import blank_buffer, buffer_from_view, buffer_to_payload, lines_to_list, list_to_lines, parse_tags
from utils.constants import (
    ENTITIES,
    ENTITY_LABELS,
    MATCH_STATUSES,
    MEDIA_TYPES,
    PLAYER_POSITIONS,
    POSITION_LABELS,
    SOCIAL_PLATFORMS,
)


# =============================================================================
# SESSION STATE
# =============================================================================

def _buffer_key(entity: str) -> str:
    return f"{entity}_buffer"


def _editing_key(entity: str) -> str:
    return f"{entity}_editing_id"


def _flash_key(entity: str) -> str:
    return f"{entity}_flash"


def open_editor(entity: str, view: Optional[Any] = None) -> None:
    """Load the edit buffer for a new record (view=None) or an existing one."""
    st.session_state[_buffer_key(entity)] = blank_buffer(entity) if view is None else buffer_from_view(entity, view)
    st.session_state[_editing_key(entity)] = None if view is None else view.id
    # Fresh widget keys so a reopened form never shows the previous record
    st.session_state["form_nonce"] = st.session_state.get("form_nonce", 0) + 1


def close_editor(entity: str) -> None:
    st.session_state.pop(_buffer_key(entity), None)
    st.session_state.pop(_editing_key(entity), None)


def _widget_key(entity: str, field: str) -> str:
    return f"{entity}_{st.session_state.get('form_nonce', 0)}_{field}"


# =============================================================================
# FIELD RENDERERS (bind widgets to the buffer)
# =============================================================================

def _team_options(teams: List[Any]) -> Dict[Optional[str], str]:
    options: Dict[Optional[str], str] = {None: "(no team)"}
    options.update({team.id: team.name for team in teams})
    return options


def _stat_inputs(entity: str, stats: Dict[str, int], columns: int = 4) -> None:
    cols = st.columns(columns)
    for index, key in enumerate(list(stats)):
        stats[key] = int(cols[index % columns].number_input(
            key, min_value=0, value=int(stats.get(key) or 0), step=1,
            key=_widget_key(entity, f"stat_{key}"),
        ))


def _team_fields(buffer: Dict[str, Any], teams: List[Any]) -> None:
    k = lambda field: _widget_key("teams", field)

    col1, col2 = st.columns([3, 1])
    buffer["name"] = col1.text_input("Name *", value=buffer["name"], key=k("name"))
    buffer["shortName"] = col2.text_input("Short name *", value=buffer["shortName"], key=k("shortName"))

    col1, col2, col3 = st.columns([2, 1, 1])
    buffer["logo"] = col1.text_input("Logo URL", value=buffer["logo"], key=k("logo"))
    buffer["primaryColor"] = col2.color_picker("Primary", value=buffer["primaryColor"], key=k("primaryColor"))
    buffer["secondaryColor"] = col3.color_picker("Secondary", value=buffer["secondaryColor"], key=k("secondaryColor"))
    buffer["backgroundImage"] = st.text_input("Background image URL", value=buffer["backgroundImage"], key=k("bg"))
    buffer["description"] = st.text_area("Description", value=buffer["description"], key=k("description"))

    col1, col2 = st.columns(2)
    buffer["coach"] = col1.text_input("Head coach", value=buffer["coach"], key=k("coach"))
    buffer["foundedYear"] = int(col2.number_input(
        "Founded (0 = unknown)", min_value=0, max_value=2100, value=int(buffer["foundedYear"] or 0), step=1,
        key=k("foundedYear"),
    ))

    col1, col2 = st.columns(2)
    buffer["stadium"] = col1.text_input("Stadium", value=buffer["stadium"], key=k("stadium"))
    buffer["address"] = col2.text_input("Address", value=buffer["address"], key=k("address"))
    col1, col2, col3 = st.columns(3)
    buffer["city"] = col1.text_input("City", value=buffer["city"], key=k("city"))
    buffer["country"] = col2.text_input("Country", value=buffer["country"], key=k("country"))
    buffer["website"] = col3.text_input("Website", value=buffer["website"], key=k("website"))

    buffer["achievements"] = lines_to_list(st.text_area(
        "Achievements (one per line)", value=list_to_lines(buffer["achievements"]), key=k("achievements"),
    ))

    st.markdown("**Social links**")
    links = {}
    cols = st.columns(len(SOCIAL_PLATFORMS))
    for col, platform in zip(cols, SOCIAL_PLATFORMS):
        url = col.text_input(platform.title(), value=buffer["socialLinks"].get(platform, ""), key=k(f"social_{platform}"))
        if url.strip():
            links[platform] = url.strip()
    buffer["socialLinks"] = links

    st.markdown("**Season statistics**")
    _stat_inputs("teams", buffer["stats"])


def _player_fields(buffer: Dict[str, Any], teams: List[Any]) -> None:
    k = lambda field: _widget_key("players", field)

    col1, col2 = st.columns([3, 1])
    buffer["name"] = col1.text_input("Name *", value=buffer["name"], key=k("name"))
    position = buffer["position"] if buffer["position"] in PLAYER_POSITIONS else PLAYER_POSITIONS[0]
    buffer["position"] = col2.selectbox(
        "Position *", PLAYER_POSITIONS, index=PLAYER_POSITIONS.index(position),
        format_func=lambda p: POSITION_LABELS[p], key=k("position"),
    )

    options = _team_options(teams)
    current = buffer["team_id"] if buffer["team_id"] in options else None
    buffer["team_id"] = st.selectbox(
        "Team", list(options), index=list(options).index(current), format_func=options.get, key=k("team"),
    )
    buffer["team_name"] = options[buffer["team_id"]] if buffer["team_id"] else ""

    col1, col2, col3, col4 = st.columns(4)
    buffer["number"] = int(col1.number_input("Number", min_value=0, max_value=99, value=int(buffer["number"] or 0), key=k("number")))
    buffer["age"] = int(col2.number_input("Age", min_value=0, max_value=100, value=int(buffer["age"] or 0), key=k("age")))
    buffer["height"] = int(col3.number_input("Height (cm)", min_value=0, value=int(buffer["height"] or 0), key=k("height")))
    buffer["weight"] = int(col4.number_input("Weight (kg)", min_value=0, value=int(buffer["weight"] or 0), key=k("weight")))

    col1, col2 = st.columns(2)
    buffer["nationality"] = col1.text_input("Nationality", value=buffer["nationality"], key=k("nationality"))
    buffer["photo"] = col2.text_input("Photo URL", value=buffer["photo"], key=k("photo"))

    st.markdown("**Season statistics**")
    _stat_inputs("players", buffer["stats"], columns=5)


def _coach_fields(buffer: Dict[str, Any], teams: List[Any]) -> None:
    k = lambda field: _widget_key("coaches", field)

    buffer["name"] = st.text_input("Name *", value=buffer["name"], key=k("name"))
    options = _team_options(teams)
    current = buffer["team_id"] if buffer["team_id"] in options else None
    buffer["team_id"] = st.selectbox(
        "Team", list(options), index=list(options).index(current), format_func=options.get, key=k("team"),
    )

    col1, col2, col3 = st.columns(3)
    buffer["nationality"] = col1.text_input("Nationality", value=buffer["nationality"], key=k("nationality"))
    buffer["age"] = int(col2.number_input("Age", min_value=0, max_value=100, value=int(buffer["age"] or 0), key=k("age")))
    buffer["experience"] = int(col3.number_input(
        "Experience (years)", min_value=0, value=int(buffer["experience"] or 0), key=k("experience"),
    ))
    buffer["photo"] = st.text_input("Photo URL", value=buffer["photo"], key=k("photo"))
    buffer["achievements"] = st.text_area("Achievements", value=buffer["achievements"], key=k("achievements"))


def _match_fields(buffer: Dict[str, Any], teams: List[Any]) -> None:
    k = lambda field: _widget_key("matches", field)

    col1, col2, col3 = st.columns(3)
    buffer["date"] = col1.date_input("Date *", value=buffer["date"] or date.today(), key=k("date"))
    buffer["startTime"] = col2.text_input("Kickoff (HH:MM)", value=buffer["startTime"], key=k("startTime"))
    buffer["status"] = col3.selectbox(
        "Status", MATCH_STATUSES, index=MATCH_STATUSES.index(buffer["status"]), key=k("status"),
    )

    buffer["opponent"] = st.text_input("Opponent *", value=buffer["opponent"], key=k("opponent"))
    col1, col2 = st.columns(2)
    buffer["location"] = col1.text_input("Venue", value=buffer["location"], key=k("location"))
    buffer["competition"] = col2.text_input("Competition", value=buffer["competition"], key=k("competition"))

    st.markdown("**Score** (shown once the match is completed)")
    col1, col2 = st.columns(2)
    buffer["homeScore"] = col1.number_input("Home", min_value=0, value=buffer["homeScore"], step=1, key=k("home"))
    buffer["awayScore"] = col2.number_input("Away", min_value=0, value=buffer["awayScore"], step=1, key=k("away"))

    st.markdown("**Match statistics**")
    _stat_inputs("matches", buffer["stats"])

    buffer["highlights"] = lines_to_list(st.text_area(
        "Highlights (one per line)", value=list_to_lines(buffer["highlights"]), key=k("highlights"),
    ))


def _news_fields(buffer: Dict[str, Any], teams: List[Any]) -> None:
    k = lambda field: _widget_key("news", field)

    buffer["title"] = st.text_input("Title *", value=buffer["title"], key=k("title"))
    buffer["content"] = st.text_area("Content *", value=buffer["content"], height=200, key=k("content"))
    col1, col2 = st.columns(2)
    buffer["author"] = col1.text_input("Author", value=buffer["author"], key=k("author"))
    buffer["category"] = col2.text_input("Category", value=buffer["category"], key=k("category"))
    buffer["image"] = st.text_input("Image URL", value=buffer["image"], key=k("image"))
    buffer["tags"] = parse_tags(st.text_input("Tags (comma separated)", value=", ".join(buffer["tags"]), key=k("tags")))


def _media_fields(buffer: Dict[str, Any], teams: List[Any]) -> None:
    k = lambda field: _widget_key("media", field)

    col1, col2 = st.columns([3, 1])
    buffer["title"] = col1.text_input("Title *", value=buffer["title"], key=k("title"))
    buffer["type"] = col2.selectbox("Type *", MEDIA_TYPES, index=MEDIA_TYPES.index(buffer["type"]), key=k("type"))
    buffer["file_url"] = st.text_input("File URL *", value=buffer["file_url"], key=k("file_url"))
    buffer["description"] = st.text_area("Description", value=buffer["description"], key=k("description"))


FIELD_RENDERERS: Dict[str, Callable[[Dict[str, Any], List[Any]], None]] = {
    "teams": _team_fields,
    "players": _player_fields,
    "coaches": _coach_fields,
    "matches": _match_fields,
    "news": _news_fields,
    "media": _media_fields,
}


# =============================================================================
# DIALOGS
# =============================================================================

@st.dialog("Edit record", width="large")
def editor_dialog(client: ClubAPIClient, entity: str, teams: List[Any]) -> None:
    buffer = st.session_state[_buffer_key(entity)]
    editing_id = st.session_state.get(_editing_key(entity))
    label = ENTITY_LABELS[entity]

    st.caption(f"Editing {label.lower()}" if editing_id else f"New {label.lower()}")
    FIELD_RENDERERS[entity](buffer, teams)

    col1, col2 = st.columns(2)
    if col1.button("Save", type="primary", use_container_width=True, key=_widget_key(entity, "save")):
        payload = buffer_to_payload(entity, buffer)
        resource = getattr(client, entity)
        try:
            if editing_id:
                resource.update(editing_id, payload)
            else:
                resource.create(payload)
        except APIError as e:
            st.error(str(e))
            return
        close_editor(entity)
        st.session_state[_flash_key(entity)] = f"{label} {'updated' if editing_id else 'created'}"
        st.rerun()
    if col2.button("Cancel", use_container_width=True, key=_widget_key(entity, "cancel")):
        close_editor(entity)
        st.rerun()


@st.dialog("Confirm delete")
def confirm_delete_dialog(client: ClubAPIClient, entity: str, entity_id: str, title: str) -> None:
    st.write(f"Delete **{title}**? This cannot be undone.")
    col1, col2 = st.columns(2)
    if col1.button("Delete", type="primary", use_container_width=True):
        try:
            getattr(client, entity).delete(entity_id)
        except APIError as e:
            st.error(str(e))
            return
        st.session_state[_flash_key(entity)] = f"Deleted {title}"
        st.rerun()
    if col2.button("Cancel", use_container_width=True):
        st.rerun()


# =============================================================================
# SECTIONS
# =============================================================================

def _summary(entity: str, view: Any) -> str:
    if entity == "teams":
        return f"**{view.name}** ({view.short_name}) · {view.stadium or 'no stadium'}"
    if entity == "players":
        number = f"#{view.number} " if view.number else ""
        return f"{number}**{view.name}** · {POSITION_LABELS.get(view.position, view.position)} · {view.team_name or 'unassigned'}"
    if entity == "coaches":
        return f"**{view.name}** · {view.experience} yrs experience"
    if entity == "matches":
        when = view.date.isoformat() if view.date else "?"
        return f"{when} {view.start_time} · **vs {view.opponent}** · {view.status} · {view.score_label}"
    if entity == "news":
        return f"**{view.title}** · {view.category} · {view.date[:10]}"
    return f"**{view.title}** · {view.type}"


def _title(entity: str, view: Any) -> str:
    return getattr(view, "name", None) or getattr(view, "title", None) or f"vs {getattr(view, 'opponent', '')}"


def render_admin_section(client: ClubAPIClient, entity: str) -> None:
    """List, create, edit and delete records of one entity."""
    label = ENTITY_LABELS[entity]
    flash = st.session_state.pop(_flash_key(entity), None)
    if flash:
        st.success(flash)

    try:
        teams = client.teams.list() if entity in ("teams", "players", "coaches") else []
        if entity == "teams":
            rows = teams
        elif entity == "players":
            options = _team_options(teams)
            team_filter = st.selectbox(
                "Filter by team", list(options), format_func=lambda t: "All teams" if t is None else options[t],
                key="players_filter",
            )
            rows = client.players.list(team_id=team_filter)
        else:
            rows = getattr(client, entity).list()
    except APIError as e:
        st.error(str(e))
        return

    col1, col2 = st.columns([4, 1])
    col1.caption(f"{len(rows)} record(s)")
    if col2.button(f"Add {label.lower()}", type="primary", use_container_width=True, key=f"{entity}_add"):
        open_editor(entity)
        editor_dialog(client, entity, teams)

    if not rows:
        st.info(f"No {label.lower()} records yet.")
        return

    for view in rows:
        col1, col2, col3 = st.columns([6, 1, 1])
        col1.markdown(_summary(entity, view))
        if col2.button("Edit", key=f"{entity}_edit_{view.id}", use_container_width=True):
            open_editor(entity, view)
            editor_dialog(client, entity, teams)
        if col3.button("Delete", key=f"{entity}_delete_{view.id}", use_container_width=True):
            confirm_delete_dialog(client, entity, view.id, _title(entity, view))


def render_admin_panel(client: ClubAPIClient) -> None:
    st.title("Admin panel")
    tabs = st.tabs([ENTITY_LABELS[entity] for entity in ENTITIES])
    for tab, entity in zip(tabs, ENTITIES):
        with tab:
            render_admin_section(client, entity)
