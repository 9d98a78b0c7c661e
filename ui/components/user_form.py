import datetime as dt
from typing import Callable

import streamlit as st

from domain.models import SubmissionState
from ui.components.base import error_banner, photo_preview

# date_input defaults to a ten-year window around today
MIN_BIRTH_DATE = dt.date(1900, 1, 1)


def field_keys(key_prefix: str, uploader_nonce: int) -> dict:
    return {
        'name': f"{key_prefix}_name",
        'surname': f"{key_prefix}_surname",
        'birth_date': f"{key_prefix}_birth_date",
        'photo': f"{key_prefix}_photo_{uploader_nonce}",
    }


def render(state: SubmissionState, key_prefix: str,
           on_field_change: Callable[[], None],
           on_photo_change: Callable[[], None],
           on_submit: Callable[[], None]):
    """
    Renders the user submission form bound to `state`.

    Args:
        state (SubmissionState): Draft, preview, error and in-flight flag.
        key_prefix (str): A unique prefix for Streamlit widget keys.
        on_field_change: Called after any text/date input changes.
        on_photo_change: Called after a file is selected.
        on_submit: Called when the submit button is clicked.
    """
    keys = field_keys(key_prefix, state.uploader_nonce)

    error_banner(state.error)

    col1, col2 = st.columns(2)
    with col1:
        st.text_input("First name *", key=keys['name'], on_change=on_field_change)
    with col2:
        st.text_input("Last name *", key=keys['surname'], on_change=on_field_change)

    with col1:
        st.date_input("Birth date *", value=None, min_value=MIN_BIRTH_DATE,
                      max_value=dt.date.today(), key=keys['birth_date'],
                      on_change=on_field_change)

    st.file_uploader("Profile photo *", key=keys['photo'], on_change=on_photo_change)
    if state.preview:
        photo_preview(state.preview)
    st.caption("Image size must not exceed 5MB")

    label = "Submitting..." if state.submitting else "Submit"
    _, right = st.columns([4, 1])
    with right:
        st.button(label, key=f"{key_prefix}_submit", type="primary",
                  disabled=state.submitting, on_click=on_submit,
                  use_container_width=True)
