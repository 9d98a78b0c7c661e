import logging

import streamlit as st

from domain.constants import API_URL, LOG_LEVEL, REQUEST_TIMEOUT, TAB_FORM_LABEL, TAB_LIST_LABEL
from domain.models import ShellState, SubmissionSucceeded, UsersFetched, ViewSelection
from services.users_api import UsersApiClient
from ui.components import inject_base_css
from utils.dates import use_system_locale

# Import the view rendering functions
from views import user_form, user_list

logger = logging.getLogger(__name__)

SHELL_KEY = 'shell'
CLIENT_KEY = 'users_api_client'
TAB_WIDGET_KEY = 'view_tab'

# --- Tab Registry ---
# Maps each selection to its tab label and the view that renders it.
TAB_REGISTRY = {
    ViewSelection.FORM: {
        "label": TAB_FORM_LABEL,
        "render_func": user_form.view,
    },
    ViewSelection.LIST: {
        "label": TAB_LIST_LABEL,
        "render_func": user_list.view,
    },
}


def handle_event(shell: ShellState, event) -> ShellState:
    """Apply a view event to the shell state. Unknown events are ignored."""
    if isinstance(event, SubmissionSucceeded):
        shell.selection = ViewSelection.LIST
    elif isinstance(event, UsersFetched):
        shell.users = list(event.users)
    return shell


def selection_for_label(label: str) -> ViewSelection:
    for selection, entry in TAB_REGISTRY.items():
        if entry["label"] == label:
            return selection
    return ViewSelection.FORM


def get_client() -> UsersApiClient:
    # one client (and requests.Session) per browser session
    if CLIENT_KEY not in st.session_state:
        st.session_state[CLIENT_KEY] = UsersApiClient(base_url=API_URL, timeout=REQUEST_TIMEOUT)
    return st.session_state[CLIENT_KEY]


def get_shell() -> ShellState:
    if SHELL_KEY not in st.session_state:
        st.session_state[SHELL_KEY] = ShellState()
    return st.session_state[SHELL_KEY]


def _on_tab_change(shell: ShellState):
    shell.selection = selection_for_label(st.session_state[TAB_WIDGET_KEY])


def main():
    """
    Page shell.

    Owns the `ShellState` (visible view + cached users), renders the tab
    control and exactly one view, then applies whatever event that view emits.
    """
    st.set_page_config(page_title="User Registry", layout="centered")
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    use_system_locale()
    inject_base_css()

    shell = get_shell()
    client = get_client()

    st.title("User Registry")

    # Widget state follows the shell, not the other way round
    labels = [entry["label"] for entry in TAB_REGISTRY.values()]
    st.session_state[TAB_WIDGET_KEY] = TAB_REGISTRY[shell.selection]["label"]
    st.radio("View", labels, key=TAB_WIDGET_KEY, horizontal=True,
             label_visibility="collapsed", on_change=lambda: _on_tab_change(shell))
    st.divider()

    if shell.selection != ViewSelection.LIST:
        user_list.unmount()
    if shell.selection != ViewSelection.FORM:
        user_form.unmount()

    render = TAB_REGISTRY[shell.selection]["render_func"]
    event = render(shell, client)
    if event is not None:
        logger.info("Shell event %s", type(event).__name__)
        handle_event(shell, event)
        st.rerun()


if __name__ == "__main__":
    main()
