"""
app.py - Main Streamlit application entry point for the Football Club site.

Single-page app with sidebar navigation persisted via st.session_state.
Pages:
  - Team: Club profile, season charts and squad roster
  - Matches: Fixtures and results
  - News: Club news feed
  - Contacts: Addresses, links and coaching staff
  - Admin: Create / edit / delete every entity

All data comes from the FastAPI backend (frontend.api_client).
"""

import streamlit as st
from dotenv import load_dotenv
from streamlit_option_menu import option_menu

# Load environment variables from .env file
load_dotenv()

from frontend import ClubAPIClient, API_BASE_URL
from frontend.admin_sections import render_admin_panel
from frontend.public_pages import (
    render_contacts_page,
    render_matches_page,
    render_news_page,
    render_team_page,
)

# ============================================================================
# PAGE CONFIGURATION
# ============================================================================

st.set_page_config(
    page_title="Football Club",
    page_icon="⚽",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown("""
<style>
    [data-testid="stSidebar"] {
        background-color: #1a1a1a;
    }
</style>
""", unsafe_allow_html=True)

PAGES = {
    'Team': render_team_page,
    'Matches': render_matches_page,
    'News': render_news_page,
    'Contacts': render_contacts_page,
    'Admin': render_admin_panel,
}

if 'page' not in st.session_state:
    st.session_state.page = 'Team'


# ============================================================================
# API CLIENT (CACHED)
# ============================================================================

@st.cache_resource
def get_client() -> ClubAPIClient:
    """One HTTP client per server process."""
    return ClubAPIClient()


client = get_client()

# ============================================================================
# SIDEBAR - NAVIGATION
# ============================================================================

with st.sidebar:
    st.title("Football Club")

    menu_options = list(PAGES)
    try:
        current_page_index = menu_options.index(st.session_state.page)
    except ValueError:
        current_page_index = 0

    selected_page = option_menu(
        menu_title=None,
        options=menu_options,
        icons=['shield', 'calendar-event', 'newspaper', 'envelope', 'gear'],
        default_index=current_page_index,
        key='sidebar_nav'
    )

    if selected_page != st.session_state.page:
        st.session_state.page = selected_page
        st.rerun()

    st.divider()
    if client.is_available():
        st.caption(f"🟢 Backend: {API_BASE_URL}")
    else:
        st.caption(f"🔴 Backend unreachable: {API_BASE_URL}")

# ============================================================================
# PAGE DISPATCH
# ============================================================================

PAGES[st.session_state.page](client)
