import streamlit as st
from typing import Optional

from domain.constants import MSG_LOADING_USERS, MSG_NO_USERS
from domain.models import ListingState, ShellState, UsersFetched
from services.listing import fetch_users
from services.users_api import UsersApiClient
from ui.components.base import empty_state, error_banner
from ui.components.user_table import render_user_table

STATE_KEY = 'listing_state'


def get_state() -> ListingState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = ListingState()
    return st.session_state[STATE_KEY]


def unmount():
    """Forget the mounted flag so the next display fetches again."""
    state = st.session_state.get(STATE_KEY)
    if state is not None:
        state.mounted = False


def _on_refresh(state: ListingState):
    state.error = ''
    state.loading = True


def view(shell: ShellState, client: UsersApiClient) -> Optional[UsersFetched]:
    state = get_state()

    # First display: start from the shell's cached rows and fetch
    if not state.mounted:
        state.mounted = True
        state.users = list(shell.users)
        state.error = ''
        state.loading = True

    title, action = st.columns([4, 1])
    with title:
        st.subheader("User List")
    with action:
        st.button("Refreshing..." if state.loading else "Refresh",
                  key="users_refresh", disabled=state.loading,
                  on_click=lambda: _on_refresh(state),
                  help="Refresh user list", use_container_width=True)

    error_banner(state.error)

    if state.loading and not state.users:
        empty_state(MSG_LOADING_USERS)
    elif not state.users:
        empty_state(MSG_NO_USERS, bordered=True)
    else:
        render_user_table(state.users)

    if not state.loading:
        return None

    result = fetch_users(client)
    state.loading = False
    if result.ok:
        state.users = result.users
        return UsersFetched(users=result.users)

    # previous rows stay on screen
    state.error = result.error
    st.rerun()
